"""Command, real world: a web scraper driven by a persistent command queue.

Each scraping step is a command stored in SQLite. Running a command may
enqueue more commands (genre pages, next pages, movie pages), and the queue
works until nothing is pending. Because the queue lives on disk, an
interrupted run picks up where it stopped.

Pages are fetched with the shared httpx client, which serves the bundled
offline site by default.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar
from urllib.parse import urljoin

import httpx
from bs4 import BeautifulSoup

from adapters.http_client import build_client
from core.config import get_settings
from core.resources_loader import data_dir

logger = logging.getLogger(__name__)

GENRES_URL = "https://movies.example/genres/"

STATUS_PENDING = 0
STATUS_DONE = 1


class Command(ABC):
    id: int | None = None
    status: int = STATUS_PENDING

    @abstractmethod
    def execute(self, queue: "Queue") -> None:
        ...

    @abstractmethod
    def to_json(self) -> dict[str, Any]:
        ...


class WebScrapingCommand(Command):
    kind: ClassVar[str]
    registry: ClassVar[dict[str, type["WebScrapingCommand"]]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "kind" in cls.__dict__:
            WebScrapingCommand.registry[cls.kind] = cls

    def __init__(self, url: str) -> None:
        self.url = url

    def get_url(self) -> str:
        return self.url

    def execute(self, queue: "Queue") -> None:
        html = self.download(queue.client)
        self.parse(html, queue)
        self.complete(queue)

    def download(self, client: httpx.Client) -> str:
        response = client.get(self.get_url())
        response.raise_for_status()
        print(f"WebScrapingCommand: Downloaded {self.get_url()}")
        return response.text

    @abstractmethod
    def parse(self, html: str, queue: "Queue") -> None:
        ...

    def complete(self, queue: "Queue") -> None:
        self.status = STATUS_DONE
        queue.complete_command(self)

    def to_json(self) -> dict[str, Any]:
        return {"kind": self.kind, "url": self.url, "page": None}

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "WebScrapingCommand":
        command_cls = cls.registry[data["kind"]]
        return command_cls._from_json(data)

    @classmethod
    def _from_json(cls, data: dict[str, Any]) -> "WebScrapingCommand":
        return cls(data["url"])


class GenresScrapingCommand(WebScrapingCommand):
    kind = "genres"

    def __init__(self, url: str = GENRES_URL) -> None:
        super().__init__(url)

    def parse(self, html: str, queue: "Queue") -> None:
        soup = BeautifulSoup(html, "html.parser")
        genres = [
            urljoin(self.url, a["href"])
            for a in soup.find_all("a", href=True)
            if "/search/title?genres=" in a["href"]
        ]
        print(f"GenresScrapingCommand: Discovered {len(genres)} genres.")
        for genre in genres:
            queue.add(GenrePageScrapingCommand(genre))


class GenrePageScrapingCommand(WebScrapingCommand):
    kind = "genre_page"

    def __init__(self, url: str, page: int = 1) -> None:
        super().__init__(url)
        self.page = page

    def get_url(self) -> str:
        return str(httpx.URL(self.url).copy_merge_params({"page": self.page}))

    def parse(self, html: str, queue: "Queue") -> None:
        soup = BeautifulSoup(html, "html.parser")
        movies = [
            urljoin(self.get_url(), a["href"])
            for a in soup.find_all("a", href=True)
            if a["href"].startswith("/title/")
        ]
        print(f"GenrePageScrapingCommand: Discovered {len(movies)} movies.")
        for movie in movies:
            queue.add(MovieScrapingCommand(movie))

        next_link = soup.find("a", string=lambda text: bool(text) and text.strip().startswith("Next"))
        if next_link is not None:
            queue.add(GenrePageScrapingCommand(self.url, self.page + 1))

    def to_json(self) -> dict[str, Any]:
        return {"kind": self.kind, "url": self.url, "page": self.page}

    @classmethod
    def _from_json(cls, data: dict[str, Any]) -> "WebScrapingCommand":
        return cls(data["url"], int(data.get("page") or 1))


class MovieScrapingCommand(WebScrapingCommand):
    kind = "movie"

    def parse(self, html: str, queue: "Queue") -> None:
        soup = BeautifulSoup(html, "html.parser")
        heading = soup.find("h1", attrs={"itemprop": "name"})
        title = heading.get_text(strip=True) if heading else "<unknown>"
        print(f"MovieScrapingCommand: Parsed movie {title}.")


class Queue:
    """SQLite-backed queue of scraping commands."""

    _instance: ClassVar["Queue | None"] = None
    _instance_key: ClassVar[tuple[Any, ...] | None] = None

    def __init__(self, path: Path, *, client: httpx.Client | None = None) -> None:
        self.path = path
        self.client = client or build_client()
        self.db = sqlite3.connect(str(path))
        self.db.execute(
            'CREATE TABLE IF NOT EXISTS "commands" ('
            '"id" INTEGER PRIMARY KEY AUTOINCREMENT NOT NULL, '
            '"command" TEXT, '
            '"status" INTEGER)'
        )
        self.db.commit()

    def is_empty(self) -> bool:
        (count,) = self.db.execute(
            'SELECT COUNT("id") FROM "commands" WHERE status = ?', (STATUS_PENDING,)
        ).fetchone()
        return count == 0

    def add(self, command: Command) -> None:
        cursor = self.db.execute(
            "INSERT INTO commands (command, status) VALUES (?, ?)",
            (json.dumps(command.to_json()), command.status),
        )
        self.db.commit()
        command.id = cursor.lastrowid
        logger.debug("queued command %s: %s", command.id, command.to_json())

    def get_command(self) -> WebScrapingCommand | None:
        row = self.db.execute(
            'SELECT id, command FROM "commands" WHERE "status" = ? ORDER BY id LIMIT 1',
            (STATUS_PENDING,),
        ).fetchone()
        if row is None:
            return None
        command = WebScrapingCommand.from_json(json.loads(row[1]))
        command.id = row[0]
        return command

    def complete_command(self, command: Command) -> None:
        self.db.execute(
            "UPDATE commands SET status = ? WHERE id = ?",
            (command.status, command.id),
        )
        self.db.commit()
        logger.debug("completed command %s", command.id)

    def work(self) -> None:
        while not self.is_empty():
            command = self.get_command()
            if command is None:
                break
            command.execute(self)

    def close(self) -> None:
        self.db.close()
        self.client.close()

    @classmethod
    def get(cls) -> "Queue":
        """Process-wide queue stored in `<data_dir>/commands.sqlite`.

        Rebuilt when the data directory or any setting its HTTP client is
        built from changes.
        """

        settings = get_settings()
        path = data_dir(settings) / "commands.sqlite"
        key = (path, settings.offline_http, settings.http_timeout_seconds, settings.user_agent)
        if cls._instance is None or cls._instance_key != key:
            if cls._instance is not None:
                cls._instance.close()
            cls._instance = cls(path, client=build_client(settings))
            cls._instance_key = key
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        if cls._instance is not None:
            cls._instance.close()
        cls._instance = None
        cls._instance_key = None


def main() -> None:
    queue = Queue.get()
    if queue.is_empty():
        queue.add(GenresScrapingCommand())
    queue.work()


if __name__ == "__main__":
    main()
