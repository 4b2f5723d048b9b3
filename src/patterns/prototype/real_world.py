"""Prototype, real world: cloning a blog page into a draft.

A cloned page gets a "Copy of" title, no comments and a fresh date, and is
registered with the same author.
"""

from __future__ import annotations

import copy
from datetime import datetime


class Author:
    def __init__(self, name: str) -> None:
        self.name = name
        self.pages: list[Page] = []

    def add_to_page(self, page: "Page") -> None:
        self.pages.append(page)

    def __repr__(self) -> str:
        return f"Author(name={self.name!r}, pages={len(self.pages)})"


class Page:
    def __init__(self, title: str, body: str, author: Author) -> None:
        self.title = title
        self.body = body
        self.author = author
        self.comments: list[str] = []
        self.date = datetime.now()
        self.author.add_to_page(self)

    def add_comment(self, comment: str) -> None:
        self.comments.append(comment)

    def __copy__(self) -> "Page":
        clone = self.__class__.__new__(self.__class__)
        clone.title = f"Copy of {self.title}"
        clone.body = self.body
        clone.author = self.author
        clone.comments = []
        clone.date = datetime.now()
        clone.author.add_to_page(clone)
        return clone

    def dump(self) -> str:
        return (
            f"Page(\n"
            f"    title={self.title!r},\n"
            f"    body={self.body!r},\n"
            f"    author={self.author!r},\n"
            f"    comments={self.comments!r},\n"
            f"    date=<{self.date:%Y-%m-%d}>\n"
            f")"
        )


def main() -> None:
    author = Author("John Smith")
    page = Page("Tip of the day", "Keep calm and carry on.", author)
    page.add_comment("Nice tip, thanks!")

    draft = copy.copy(page)
    print("Dump of the clone. Note that the author is now referencing two objects.\n")
    print(draft.dump())
    print(f"\nPages by {author.name}: {[p.title for p in author.pages]}")


if __name__ == "__main__":
    main()
