"""Async HTTP client utilities."""

import asyncio
import json
from typing import Any, AsyncIterator, Dict, Optional

import aiohttp

from ..errors import FetchError, ParseError

CHUNK_SIZE = 64 * 1024


class AsyncHTTPClient:
    """Reusable async HTTP client.

    Every failure is reported as a FetchError whose message starts with
    ``failed to fetch <what>`` or ``failed to read response body`` so callers
    can tell transport problems from bad payloads.
    """

    def __init__(self, headers: Optional[Dict[str, str]] = None):
        self.default_headers = headers or {}
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(headers=self.default_headers)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self.session:
            await self.session.close()
            self.session = None

    def _session(self) -> aiohttp.ClientSession:
        if not self.session:
            raise RuntimeError("AsyncHTTPClient must be used as an async context manager")
        return self.session

    async def get_text(self, url: str, what: str = "resource") -> str:
        """GET request returning the decoded body."""
        try:
            async with self._session().get(url) as resp:
                self._check_status(resp, what)
                try:
                    return await resp.text()
                except (aiohttp.ClientPayloadError, UnicodeDecodeError) as e:
                    raise FetchError(f"failed to read response body: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"failed to fetch {what}: {e}") from e

    async def get_json(self, url: str, what: str = "resource") -> Any:
        """GET request returning parsed JSON."""
        body = await self.get_text(url, what)
        try:
            return json.loads(body)
        except ValueError as e:
            raise ParseError(f"failed to parse JSON: {e}") from e

    async def download(self, url: str, what: str = "artifact") -> AsyncIterator[bytes]:
        """Stream a response body in chunks."""
        try:
            async with self._session().get(url) as resp:
                self._check_status(resp, what)
                try:
                    async for chunk in resp.content.iter_chunked(CHUNK_SIZE):
                        yield chunk
                except aiohttp.ClientPayloadError as e:
                    raise FetchError(f"failed to read response body: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"failed to fetch {what}: {e}") from e

    @staticmethod
    def _check_status(resp: aiohttp.ClientResponse, what: str):
        if resp.status != 200:
            raise FetchError(f"failed to fetch {what}: HTTP status {resp.status}", status=resp.status)
