"""Fragment sources: where the five JSON payloads come from.

A source only has to provide ``async fetch(fragment) -> Any`` returning the
decoded JSON payload, or raise :class:`FragmentUnavailable`.
"""

from __future__ import annotations
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

import httpx

from portfolio import config
from portfolio.errors import FragmentUnavailable

logger = logging.getLogger(__name__)


class FragmentSource(Protocol):
    async def fetch(self, fragment: str) -> Any: ...


class FileFragmentSource:
    """Reads fragments from JSON files in a local directory."""

    def __init__(self, directory: Path, files: Optional[Dict[str, str]] = None):
        self.directory = Path(directory)
        self.files = dict(files or config.FRAGMENT_FILES)

    def path_for(self, fragment: str) -> Path:
        return self.directory / self.files[fragment]

    async def fetch(self, fragment: str) -> Any:
        path = self.path_for(fragment)
        try:
            text = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except OSError as e:
            raise FragmentUnavailable(fragment, f"cannot read {path.name}: {e.strerror or e}") from e
        try:
            return json.loads(text)
        except ValueError as e:
            raise FragmentUnavailable(fragment, f"invalid JSON in {path.name}") from e


class HttpFragmentSource:
    """Fetches fragments as ``<base_url>/<file>`` via *httpx*.

    Pass ``client`` to share one ``httpx.AsyncClient``; otherwise each fetch
    opens its own with ``timeout``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = config.FETCH_TIMEOUT,
        files: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.files = dict(files or config.FRAGMENT_FILES)
        self._client = client

    def url_for(self, fragment: str) -> str:
        return f"{self.base_url}/{self.files[fragment]}"

    async def _get(self, url: str) -> httpx.Response:
        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url)

    async def fetch(self, fragment: str) -> Any:
        url = self.url_for(fragment)
        try:
            resp = await self._get(url)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FragmentUnavailable(fragment, f"HTTP {e.response.status_code} for {url}") from e
        except httpx.HTTPError as e:
            raise FragmentUnavailable(fragment, f"request to {url} failed: {e}") from e
        try:
            return resp.json()
        except ValueError as e:
            raise FragmentUnavailable(fragment, f"invalid JSON from {url}") from e


def build_source() -> FragmentSource:
    if config.DATA_URL:
        logger.info("Fetching content over HTTP from %s", config.DATA_URL)
        return HttpFragmentSource(config.DATA_URL)
    logger.info("Reading content from %s", config.DATA_DIR)
    return FileFragmentSource(config.DATA_DIR)
