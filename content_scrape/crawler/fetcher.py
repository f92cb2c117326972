# content_scrape/crawler/fetcher.py
"""
Fetcher module: single-attempt HTTP GET with a timeout and fixed bot headers.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientResponse, ClientSession, ClientTimeout

from content_scrape.config import ExportConfig

__all__ = ("FetchError", "Fetcher")

_ACCEPT = "text/html,application/xhtml+xml"


class FetchError(Exception):
    """A page could not be fetched: network error, bad status or timeout."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class Fetcher:
    """Owns the aiohttp session; one request per call, no retries."""

    def __init__(self, config: ExportConfig, session: Optional[ClientSession] = None) -> None:
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def __aenter__(self) -> Fetcher:
        if self.session is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent, "Accept": _ACCEPT},
                raise_for_status=False,
            )
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._owns_session and self.session and not self.session.closed:
            await self.session.close()

    async def fetch(self, url: str) -> str:
        """
        Return the page body as text.

        Raises FetchError for any status outside [200, 400), network errors
        and timeouts.
        """
        return await self._get(url, binary=False)

    async def fetch_bytes(self, url: str) -> bytes:
        """Same as :meth:`fetch` but returns the undecoded body (used for sitemaps)."""
        return await self._get(url, binary=True)

    async def _get(self, url: str, *, binary: bool):
        if not self.session:
            raise RuntimeError("Session not initialized")
        try:
            async with self.session.get(url) as resp:
                self._check_status(url, resp)
                if binary:
                    return await resp.read()
                return await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise FetchError(url, f"timeout after {self.config.timeout_ms} ms") from exc
        except ClientError as exc:
            # InvalidURL stringifies to the bare URL, so keep the class name
            reason = f"{type(exc).__name__}: {exc}" if str(exc) else type(exc).__name__
            raise FetchError(url, reason) from exc

    @staticmethod
    def _check_status(url: str, resp: ClientResponse) -> None:
        if not 200 <= resp.status < 400:
            raise FetchError(url, f"HTTP {resp.status}")
