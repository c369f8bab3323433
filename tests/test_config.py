import pytest

from hanja_lookup.config import DEFAULT_TIMEOUT, LookupConfig


def test_defaults_build_daum_urls():
    config = LookupConfig()
    assert config.timeout == DEFAULT_TIMEOUT
    assert config.search_url() == "https://dic.daum.net/search.do"
    assert config.entry_url("hhw1") == "https://dic.daum.net/word/view.do?wordid=hhw1"
    assert config.supplement_url("hhw1") == (
        "https://dic.daum.net/word/view_supword.do?suptype=KUMSUNG_HH&wordid=hhw1"
    )


def test_from_env_applies_overrides():
    config = LookupConfig.from_env(
        {
            "HANJA_LOOKUP_BASE_URL": "http://localhost:8080/",
            "HANJA_LOOKUP_TIMEOUT": "2.5",
            "HANJA_LOOKUP_REFERENCE_MARKER": ":rui:",
        }
    )
    assert config.timeout == 2.5
    assert config.reference_marker == ":rui:"
    assert config.search_url() == "http://localhost:8080/search.do"


def test_from_env_reads_process_environment(monkeypatch):
    monkeypatch.setenv("HANJA_LOOKUP_USER_AGENT", "tester/1.0")
    monkeypatch.delenv("HANJA_LOOKUP_TIMEOUT", raising=False)
    config = LookupConfig.from_env()
    assert config.user_agent == "tester/1.0"
    assert config.timeout == DEFAULT_TIMEOUT


@pytest.mark.parametrize("value", ["soon", "0", "-1"])
def test_invalid_timeout_is_rejected(value):
    with pytest.raises(ValueError):
        LookupConfig.from_env({"HANJA_LOOKUP_TIMEOUT": value})


def test_with_overrides_skips_unset_values():
    config = LookupConfig().with_overrides(timeout="3", base_url=None)
    assert config.timeout == 3.0
    assert config.base_url == "https://dic.daum.net"
