"""Asynchronous HTTP access to the dictionary site."""
from __future__ import annotations

import asyncio
import logging
from typing import Mapping, Optional

import aiohttp

from .config import LookupConfig
from .errors import FetchError

LOGGER = logging.getLogger(__name__)


class HttpFetcher:
    """Issue GET requests and return response bodies as text.

    Use as an async context manager so the underlying session is closed::

        async with HttpFetcher(config) as fetcher:
            html = await fetcher.get_text(url)
    """

    def __init__(self, config: Optional[LookupConfig] = None):
        self.config = config or LookupConfig()
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self) -> "HttpFetcher":
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        if self.session is not None:
            await self.session.close()
            self.session = None

    async def get_text(
        self,
        url: str,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> str:
        if self.session is None:
            raise RuntimeError("HttpFetcher must be entered before use")
        LOGGER.debug("GET %s params=%s", url, dict(params or {}))
        try:
            async with self.session.get(url, params=params, headers=headers) as response:
                response.raise_for_status()
                try:
                    return await response.text()
                except UnicodeDecodeError as exc:
                    raise FetchError(url, f"undecodable body ({exc.encoding})") from exc
        except aiohttp.ClientResponseError as exc:
            raise FetchError(url, f"HTTP {exc.status}") from exc
        except aiohttp.ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timed out after {self.config.timeout}s") from exc
