"""Runtime configuration for dictionary lookups."""
from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional

ENV_PREFIX = "HANJA_LOOKUP_"
DEFAULT_BASE_URL = "https://dic.daum.net"
DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; hanja-lookup)"


@dataclass(frozen=True)
class LookupConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT
    dictionary: str = "hanja"
    supplement_type: str = "KUMSUNG_HH"
    bullet: str = "> "
    reference_marker: str = "☞"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LookupConfig":
        """Build a config, applying ``HANJA_LOOKUP_*`` overrides."""

        env = os.environ if environ is None else environ
        overrides: Dict[str, object] = {}
        base_url = env.get(ENV_PREFIX + "BASE_URL")
        if base_url:
            overrides["base_url"] = base_url
        timeout = env.get(ENV_PREFIX + "TIMEOUT")
        if timeout:
            overrides["timeout"] = parse_timeout(timeout)
        user_agent = env.get(ENV_PREFIX + "USER_AGENT")
        if user_agent:
            overrides["user_agent"] = user_agent
        marker = env.get(ENV_PREFIX + "REFERENCE_MARKER")
        if marker:
            overrides["reference_marker"] = marker
        return cls(**overrides)

    def with_overrides(self, **changes: object) -> "LookupConfig":
        values = {key: value for key, value in changes.items() if value is not None}
        if "timeout" in values:
            values["timeout"] = parse_timeout(values["timeout"])
        return replace(self, **values)

    def search_url(self) -> str:
        return f"{self._root}/search.do"

    def entry_url(self, entry_id: str) -> str:
        return f"{self._root}/word/view.do?wordid={entry_id}"

    def supplement_url(self, entry_id: str) -> str:
        return (
            f"{self._root}/word/view_supword.do"
            f"?suptype={self.supplement_type}&wordid={entry_id}"
        )

    @property
    def _root(self) -> str:
        return self.base_url.rstrip("/")


def parse_timeout(value: object) -> float:
    try:
        timeout = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise ValueError(f"Invalid timeout: {value!r}") from None
    if timeout <= 0:
        raise ValueError(f"Timeout must be positive, got {timeout}")
    return timeout
