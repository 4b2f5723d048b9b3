"""Bridge, real world: web pages rendered as HTML or JSON.

Pages describe *what* to show; renderers decide *how*. Either side can grow
without touching the other, and a page can switch renderers at runtime.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from html import escape


class Renderer(ABC):
    @abstractmethod
    def render_title(self, title: str) -> str:
        ...

    @abstractmethod
    def render_text_block(self, text: str) -> str:
        ...

    @abstractmethod
    def render_image(self, url: str) -> str:
        ...

    @abstractmethod
    def render_link(self, url: str, title: str) -> str:
        ...

    @abstractmethod
    def render_header(self) -> str:
        ...

    @abstractmethod
    def render_footer(self) -> str:
        ...

    @abstractmethod
    def render_parts(self, parts: list[str]) -> str:
        ...


class HTMLRenderer(Renderer):
    def render_title(self, title: str) -> str:
        return f"<h1>{escape(title)}</h1>"

    def render_text_block(self, text: str) -> str:
        return f"<div class='text'>{escape(text)}</div>"

    def render_image(self, url: str) -> str:
        return f"<img src='{escape(url)}'>"

    def render_link(self, url: str, title: str) -> str:
        return f"<a href='{escape(url)}'>{escape(title)}</a>"

    def render_header(self) -> str:
        return "<html><body>"

    def render_footer(self) -> str:
        return "</body></html>"

    def render_parts(self, parts: list[str]) -> str:
        return "\n".join(parts)


class JsonRenderer(Renderer):
    def render_title(self, title: str) -> str:
        return json.dumps({"title": title})

    def render_text_block(self, text: str) -> str:
        return json.dumps({"text": text})

    def render_image(self, url: str) -> str:
        return json.dumps({"img": url})

    def render_link(self, url: str, title: str) -> str:
        return json.dumps({"link": {"href": url, "title": title}})

    def render_header(self) -> str:
        return ""

    def render_footer(self) -> str:
        return ""

    def render_parts(self, parts: list[str]) -> str:
        return "[\n" + ",\n".join(part for part in parts if part) + "\n]"


class Page(ABC):
    def __init__(self, renderer: Renderer) -> None:
        self.renderer = renderer

    def change_renderer(self, renderer: Renderer) -> None:
        self.renderer = renderer

    @abstractmethod
    def view(self) -> str:
        ...


class SimplePage(Page):
    def __init__(self, renderer: Renderer, title: str, content: str) -> None:
        super().__init__(renderer)
        self.title = title
        self.content = content

    def view(self) -> str:
        return self.renderer.render_parts(
            [
                self.renderer.render_header(),
                self.renderer.render_title(self.title),
                self.renderer.render_text_block(self.content),
                self.renderer.render_footer(),
            ]
        )


@dataclass
class Product:
    id: str
    title: str
    description: str
    image: str
    price: float


def format_price(price: float) -> str:
    return f"${price:,.2f}"


class ProductPage(Page):
    def __init__(self, renderer: Renderer, product: Product) -> None:
        super().__init__(renderer)
        self.product = product

    def view(self) -> str:
        product = self.product
        return self.renderer.render_parts(
            [
                self.renderer.render_header(),
                self.renderer.render_title(product.title),
                self.renderer.render_text_block(product.description),
                self.renderer.render_image(product.image),
                self.renderer.render_link(f"/cart/add/{product.id}", f"Add to cart for {format_price(product.price)}"),
                self.renderer.render_footer(),
            ]
        )


def client_code(page: Page) -> None:
    print(page.view())


def main() -> None:
    html = HTMLRenderer()
    as_json = JsonRenderer()

    page = SimplePage(html, "Home", "Welcome to our website!")
    print("HTML view of a simple content page:")
    client_code(page)
    print()

    page.change_renderer(as_json)
    print("JSON view of a simple content page, rendered with the same client code:")
    client_code(page)
    print()

    product = Product("123", "Star Wars, episode1", "A long time ago in a galaxy far, far away...", "/images/star-wars.jpeg", 39.95)
    page = ProductPage(html, product)
    print("HTML view of a product page, same client code:")
    client_code(page)
    print()

    page.change_renderer(as_json)
    print("JSON view of a product page, with the same client code:")
    client_code(page)


if __name__ == "__main__":
    main()
