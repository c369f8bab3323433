from __future__ import annotations

from typing import Dict, List, Optional

import pytest

from hanja_lookup.config import LookupConfig
from hanja_lookup.errors import FetchError

SEARCH_HTML = """
<html>
<head>
<script>var first = '<a href="/word/view.do?wordid=bogus">';</script>
</head>
<body>
<div class="search_box">
  <div class="tit_cleansch">
    <a href="/word/view.do?wordid=hhw000123" class="txt_cleansch"><span class="txt_emph1">水</span></a>
    <span class="sub_read">물 수</span>
  </div>
  <div class="tit_cleansch">
    <a href="/word/view.do?wordid=hhw000999" class="txt_cleansch"><span class="txt_emph1">氷</span></a>
  </div>
</div>
</body>
</html>
"""

ENTRY_HTML = """
<html><body>
<div class="cleanword_type">
  <span class="txt_cleanword">水</span>
  <span class="txt_read">
    물 수
  </span>
</div>
</body></html>
"""

SUPPLEMENT_HTML = """
<div class="box_example">
  <p class="wrap_ex"> 물이 <b>맑다</b> </p>
  <p class="txt_ex"> The water is clear. </p>
  <ul class="item_example">
    <li>
      <span class="desc_ruby">山<ruby>水</ruby><span class="txt_from">&nbsp;論語&nbsp;</span></span>
      <span class="desc_ex"> 산수 </span>
    </li>
    <li><span class="txt_num">2</span></li>
    <li><span class="desc_ruby"> 流水 </span></li>
  </ul>
</div>
<div class="box_refer">
  <div class="ex_refer">
    <span class="txt_refer on">A</span>
    <span class="txt_refer">X</span>
    <span class="txt_refer on">B</span>
  </div>
  <div class="ad_banner">ignored</div>
</div>
"""

CONFIG = LookupConfig(base_url="https://dict.test")


class FakeFetcher:
    """Return canned bodies keyed by URL and record every request."""

    def __init__(self, pages: Dict[str, str], failures: Optional[Dict[str, str]] = None):
        self.pages = pages
        self.failures = failures or {}
        self.calls: List[dict] = []

    async def get_text(self, url, params=None, headers=None):
        self.calls.append({"url": url, "params": dict(params or {}), "headers": dict(headers or {})})
        if url in self.failures:
            raise FetchError(url, self.failures[url])
        return self.pages[url]


@pytest.fixture()
def config():
    return CONFIG


@pytest.fixture()
def fake_fetcher():
    return FakeFetcher(
        {
            CONFIG.search_url(): SEARCH_HTML,
            CONFIG.entry_url("hhw000123"): ENTRY_HTML,
            CONFIG.supplement_url("hhw000123"): SUPPLEMENT_HTML,
        }
    )
