"""Proxy, real world: a caching proxy in front of a page downloader.

`CachingDownloader` keeps the `Downloader` interface, so client code does not
know whether a page comes from the network or from memory. Downloads go
through the shared httpx client, which serves the offline site unless
`PATTERN_CATALOG_OFFLINE_HTTP` is turned off.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from adapters.http_client import build_client, extract_html_metadata

logger = logging.getLogger(__name__)


class Downloader(ABC):
    @abstractmethod
    def download(self, url: str) -> str:
        ...


class SimpleDownloader(Downloader):
    def __init__(self, client: httpx.Client | None = None) -> None:
        self.client = client or build_client()

    def download(self, url: str) -> str:
        print("Downloading a file from the Internet.")
        response = self.client.get(url)
        response.raise_for_status()
        print(f"Downloaded bytes: {len(response.content)}")
        return response.text


class CachingDownloader(Downloader):
    def __init__(self, downloader: Downloader) -> None:
        self.downloader = downloader
        self.cache: dict[str, str] = {}

    def download(self, url: str) -> str:
        if url not in self.cache:
            print("CacheProxy MISS. ", end="")
            self.cache[url] = self.downloader.download(url)
        else:
            print("CacheProxy HIT. Retrieving result from cache.")
            logger.debug("cache hit for %s", url)
        return self.cache[url]


def client_code(subject: Downloader, url: str = "http://example.com/") -> str:
    result = subject.download(url)
    metadata = extract_html_metadata(html=result, base_url=url)
    if metadata.get("title"):
        print(f"Page title: {metadata['title']}")
    return result


def main() -> None:
    with build_client() as client:
        print("Executing client code with real subject:")
        client_code(SimpleDownloader(client))
        print()

        print("Executing the same client code with a proxy:")
        proxy = CachingDownloader(SimpleDownloader(client))
        client_code(proxy)
        client_code(proxy)


if __name__ == "__main__":
    main()
