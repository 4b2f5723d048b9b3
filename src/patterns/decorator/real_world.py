"""Decorator, real world: stacking filters over user-submitted text.

The same comment can be shown as plain text, as filtered HTML, or rendered
from Markdown, depending on how the decorators are stacked.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup


class InputFormat(ABC):
    @abstractmethod
    def format_text(self, text: str) -> str:
        ...


class TextInput(InputFormat):
    def format_text(self, text: str) -> str:
        return text


class TextFormat(InputFormat):
    def __init__(self, input_format: InputFormat) -> None:
        self.input_format = input_format

    def format_text(self, text: str) -> str:
        return self.input_format.format_text(text)


class PlainTextFilter(TextFormat):
    def format_text(self, text: str) -> str:
        text = self.input_format.format_text(text)
        return BeautifulSoup(text, "html.parser").get_text()


class DangerousHTMLTagsFilter(TextFormat):
    """Drops `<script>` elements and `on*` event-handler attributes, leaving other markup as is."""

    def format_text(self, text: str) -> str:
        soup = BeautifulSoup(self.input_format.format_text(text), "html.parser")
        for script in soup.find_all("script"):
            script.decompose()
        for tag in soup.find_all(True):
            for attr in [name for name in tag.attrs if name.lower().startswith("on")]:
                del tag[attr]
        return str(soup)


_HEADER_RE = re.compile(r"^(#{1,6}) (.+)$", re.DOTALL)
_BOLD_RE = re.compile(r"(\*\*|__)(.+?)\1")
_EM_RE = re.compile(r"(\*|_)(.+?)\1")


class MarkdownFormat(TextFormat):
    def format_text(self, text: str) -> str:
        text = self.input_format.format_text(text)

        blocks = []
        for chunk in re.split(r"\n\s*\n", text):
            chunk = chunk.strip()
            if not chunk:
                continue
            header = _HEADER_RE.match(chunk)
            if header:
                level = len(header.group(1))
                blocks.append(f"<h{level}>{header.group(2)}</h{level}>")
            else:
                blocks.append(f"<p>{chunk}</p>")
        text = "\n\n".join(blocks)

        text = _BOLD_RE.sub(r"<strong>\2</strong>", text)
        return _EM_RE.sub(r"<em>\2</em>", text)


def display_comment_as_website(format: InputFormat, text: str) -> None:
    print(format.format_text(text))


def main() -> None:
    dangerous_comment = (
        "Hello! Nice blog post!\n"
        "Please visit my <a href='http://www.iwillhackyou.com'>homepage</a>.\n"
        "<script src=\"http://www.iwillhackyou.com/script.js\">\n"
        "  performXSSAttack();\n"
        "</script>"
    )

    naive_input = TextInput()
    print("Website renders comments without filtering (unsafe):")
    display_comment_as_website(naive_input, dangerous_comment)
    print()

    filtered_input = PlainTextFilter(naive_input)
    print("Website renders comments after stripping all tags (safe):")
    display_comment_as_website(filtered_input, dangerous_comment)
    print()

    dangerous_forum_post = (
        "# Welcome\n\n"
        "This is my first post on this **gorgeous** forum.\n\n"
        "<script src=\"http://www.iwillhackyou.com/script.js\">\n"
        "  performXSSAttack();\n"
        "</script>\n\n"
        "<b onclick='steal()'>Click me</b>"
    )

    text_input = TextInput()
    markdown = MarkdownFormat(text_input)
    print("Website renders a forum post without filtering and formatting (unsafe, ugly):")
    display_comment_as_website(text_input, dangerous_forum_post)
    print()

    filtered = DangerousHTMLTagsFilter(markdown)
    print("Website renders a forum post after translating markdown markup and filtering dangerous HTML (safe, pretty):")
    display_comment_as_website(filtered, dangerous_forum_post)


if __name__ == "__main__":
    main()
