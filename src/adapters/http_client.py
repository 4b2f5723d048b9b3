"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every example that downloads.
- Swaps the network for the offline site when `offline_http` is on, and lets
  tests inject their own transport.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from adapters.offline_site import OfflineSite
from core.config import AppSettings, get_settings

logger = logging.getLogger(__name__)


def build_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    extra_headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create an `httpx.Client` with safe defaults.

    Transport precedence: explicit `transport`, then the offline site when
    `settings.offline_http` is set, then the real network.
    """

    settings = settings or get_settings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    if extra_headers:
        headers.update(extra_headers)

    if transport is None and settings.offline_http:
        transport = OfflineSite().transport()
        logger.debug("HTTP client serving the offline site")

    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str | None:
    tag = soup.find("meta", attrs=attrs)
    if tag is None or not tag.get("content"):
        return None
    return str(tag["content"]).strip()


def extract_html_metadata(*, html: str, base_url: str | None = None) -> dict[str, Any]:
    """Pull the page title and a couple of meta tags out of a downloaded page.

    Keys are only present when the page has them: `title`,
    `meta_description` and `og_image` (absolute when `base_url` is given).
    """

    if not html:
        return {}

    soup = BeautifulSoup(html, "html.parser")
    found: dict[str, Any] = {
        "title": soup.title.get_text(strip=True) if soup.title else None,
        "meta_description": _meta_content(soup, name="description"),
        "og_image": _meta_content(soup, property="og:image"),
    }
    if found["og_image"] and base_url:
        found["og_image"] = urljoin(base_url, found["og_image"])
    return {key: value for key, value in found.items() if value}
