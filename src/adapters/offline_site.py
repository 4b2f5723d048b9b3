"""Offline site served to the examples that download web pages.

Idea:
- Examples that "download" (Proxy, Command) go through a real `httpx.Client`,
  but by default the transport answers from a bundled JSON of pages instead
  of the network. Runs stay deterministic and work without connectivity.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import httpx
from pydantic import BaseModel, Field

from core.resources_loader import require_dataset

logger = logging.getLogger(__name__)

OFFLINE_SITE_FILE = "offline_site.json"


class OfflinePage(BaseModel):
    url: str = Field(..., min_length=1)
    status: int = Field(default=200, ge=100, le=599)
    content_type: str = Field(default="text/html; charset=utf-8")
    body: str = ""


class OfflineSiteFile(BaseModel):
    pages: list[OfflinePage] = Field(default_factory=list)


def load_offline_site(path: Path | None = None) -> OfflineSiteFile:
    path = path or require_dataset(OFFLINE_SITE_FILE)
    raw = path.read_text(encoding="utf-8")
    return OfflineSiteFile.model_validate(json.loads(raw))


class OfflineSite:
    """`httpx.MockTransport` handler answering from a set of pages."""

    def __init__(self, site: OfflineSiteFile | None = None) -> None:
        site = site or load_offline_site()
        self._pages = {self._key(page.url): page for page in site.pages}

    @staticmethod
    def _key(url: str | httpx.URL) -> str:
        return str(httpx.URL(str(url)))

    def __contains__(self, url: str) -> bool:
        return self._key(url) in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def handle(self, request: httpx.Request) -> httpx.Response:
        page = self._pages.get(self._key(request.url))
        if page is None:
            logger.debug("Offline site 404: %s", request.url)
            return httpx.Response(404, text="Not Found", request=request)
        logger.debug("Offline site %s: %s", page.status, request.url)
        return httpx.Response(
            page.status,
            headers={"Content-Type": page.content_type},
            text=page.body,
            request=request,
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)
