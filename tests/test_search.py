import asyncio

from conftest import SEARCH_HTML

from hanja_lookup.models import SearchMatch
from hanja_lookup.search import parse_search_results, resolve


def test_first_result_with_matching_headword():
    assert parse_search_results(SEARCH_HTML, "水") == SearchMatch(entry_id="hhw000123")


def test_script_blocks_are_not_candidates():
    match = parse_search_results(SEARCH_HTML, "水")
    assert match is not None
    assert match.entry_id != "bogus"


def test_headword_prefix_match_is_accepted():
    html = '<a href="/word/view.do?wordid=hhw777"><span class="txt_emph1">水道</span></a>'
    assert parse_search_results(html, "水") == SearchMatch(entry_id="hhw777")


def test_headword_not_starting_with_query_is_rejected():
    html = '<a href="/word/view.do?wordid=hhw777"><span class="txt_emph1">淸水</span></a>'
    assert parse_search_results(html, "水") is None


def test_only_first_candidate_is_considered():
    html = (
        '<a href="/word/view.do?wordid=hhw001"><span class="txt_emph1">氷</span></a>'
        '<a href="/word/view.do?wordid=hhw002"><span class="txt_emph1">水</span></a>'
    )
    assert parse_search_results(html, "水") is None


def test_headword_after_link_is_used():
    html = (
        '<div><a href="/word/view.do?wordid=hhw010">more</a>'
        '<strong class="txt_emph1">水</strong></div>'
    )
    assert parse_search_results(html, "水") == SearchMatch(entry_id="hhw010")


def test_missing_markers_mean_not_found():
    assert parse_search_results("<html><body><p>검색 결과가 없습니다</p></body></html>", "水") is None
    assert parse_search_results('<a href="/word/view.do?wordid=hhw1">水</a>', "水") is None


def test_resolve_sends_dictionary_and_query(fake_fetcher, config):
    match = asyncio.run(resolve(fake_fetcher, "水", config))
    assert match == SearchMatch(entry_id="hhw000123")
    assert fake_fetcher.calls == [
        {"url": "https://dict.test/search.do", "params": {"dic": "hanja", "q": "水"}, "headers": {}}
    ]
