"""Abstract Factory, real world: page templates for two template engines.

Each factory produces a title template and a page template that embeds the
title template of the *same* engine, so a page never mixes syntaxes. The
Jinja family renders through jinja2, the dollar family through
`string.Template`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from string import Template

from jinja2 import Environment, StrictUndefined


class TitleTemplate(ABC):
    @abstractmethod
    def get_template_string(self) -> str:
        ...


class PageTemplate(ABC):
    def __init__(self, title_template: TitleTemplate) -> None:
        self.title_template = title_template

    @abstractmethod
    def get_template_string(self) -> str:
        ...

    @abstractmethod
    def render(self, *, title: str, content: str) -> str:
        ...


class JinjaTitleTemplate(TitleTemplate):
    def get_template_string(self) -> str:
        return "<h1>{{ title }}</h1>"


class JinjaPageTemplate(PageTemplate):
    _environment = Environment(autoescape=True, undefined=StrictUndefined)

    def get_template_string(self) -> str:
        rendered_title = self.title_template.get_template_string()
        return (
            '<div class="page">\n'
            f"    {rendered_title}\n"
            '    <article class="content">{{ content }}</article>\n'
            "</div>"
        )

    def render(self, *, title: str, content: str) -> str:
        template = self._environment.from_string(self.get_template_string())
        return template.render(title=title, content=content)


class DollarTitleTemplate(TitleTemplate):
    def get_template_string(self) -> str:
        return "<h1>$title</h1>"


class DollarPageTemplate(PageTemplate):
    def get_template_string(self) -> str:
        rendered_title = self.title_template.get_template_string()
        return (
            '<div class="page">\n'
            f"    {rendered_title}\n"
            '    <article class="content">$content</article>\n'
            "</div>"
        )

    def render(self, *, title: str, content: str) -> str:
        return Template(self.get_template_string()).substitute(title=title, content=content)


class TemplateFactory(ABC):
    @abstractmethod
    def create_title_template(self) -> TitleTemplate:
        ...

    @abstractmethod
    def create_page_template(self) -> PageTemplate:
        ...


class JinjaTemplateFactory(TemplateFactory):
    def create_title_template(self) -> TitleTemplate:
        return JinjaTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        return JinjaPageTemplate(self.create_title_template())


class DollarTemplateFactory(TemplateFactory):
    def create_title_template(self) -> TitleTemplate:
        return DollarTitleTemplate()

    def create_page_template(self) -> PageTemplate:
        return DollarPageTemplate(self.create_title_template())


def template_renderer(factory: TemplateFactory) -> None:
    page_template = factory.create_page_template()
    print(page_template.get_template_string())
    print("Rendered:")
    print(page_template.render(title="Hello", content="Abstract factories keep families consistent."))


def main() -> None:
    print("Testing rendering with the Jinja factory:")
    template_renderer(JinjaTemplateFactory())

    print()
    print("Testing rendering with the string.Template factory:")
    template_renderer(DollarTemplateFactory())


if __name__ == "__main__":
    main()
