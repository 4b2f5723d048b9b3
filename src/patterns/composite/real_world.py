"""Composite, real world: HTML form elements.

A `Form` is a `Fieldset` is a `FormElement`. Data flows in and out of the tree
as nested dicts keyed by element name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from html import escape
from typing import Any


class FormElement(ABC):
    def __init__(self, name: str, title: str) -> None:
        self.name = name
        self.title = title
        self.data: Any = None

    def set_data(self, data: Any) -> None:
        self.data = data

    def get_data(self) -> Any:
        return self.data

    @abstractmethod
    def render(self) -> str:
        ...


class Input(FormElement):
    def __init__(self, name: str, title: str, type: str) -> None:
        super().__init__(name, title)
        self.type = type

    def render(self) -> str:
        value = "" if self.data is None else escape(str(self.data), quote=True)
        return (
            f"<label for=\"{self.name}\">{escape(self.title)}</label>\n"
            f"<input name=\"{self.name}\" type=\"{self.type}\" value=\"{value}\">\n"
        )


class FieldComposite(FormElement):
    def __init__(self, name: str, title: str) -> None:
        super().__init__(name, title)
        self.fields: list[FormElement] = []

    def add(self, field: FormElement) -> None:
        self.fields.append(field)

    def remove(self, component: FormElement) -> None:
        self.fields = [field for field in self.fields if field is not component]

    def set_data(self, data: Any) -> None:
        if not isinstance(data, Mapping):
            return
        for field in self.fields:
            if field.name in data:
                field.set_data(data[field.name])

    def get_data(self) -> dict[str, Any]:
        return {field.name: field.get_data() for field in self.fields}

    def render(self) -> str:
        return "".join(field.render() for field in self.fields)


class Fieldset(FieldComposite):
    def render(self) -> str:
        return f"<fieldset><legend>{escape(self.title)}</legend>\n{super().render()}</fieldset>\n"


class Form(FieldComposite):
    def __init__(self, name: str, title: str, url: str) -> None:
        super().__init__(name, title)
        self.url = url

    def render(self) -> str:
        return (
            f"<form action=\"{self.url}\">\n<h3>{escape(self.title)}</h3>\n"
            f"{super().render()}</form>\n"
        )


def get_product_form() -> Form:
    form = Form("product", "Add product", "/product/add")
    form.add(Input("name", "Name", "text"))
    form.add(Input("description", "Description", "text"))

    picture = Fieldset("photo", "Product photo")
    picture.add(Input("caption", "Caption", "text"))
    picture.add(Input("image", "Image", "file"))
    form.add(picture)
    return form


def load_product_data(form: FormElement) -> None:
    form.set_data(
        {
            "name": "Apple MacBook",
            "description": "A decent laptop.",
            "photo": {"caption": "Front photo.", "image": "photo1.png"},
        }
    )


def render_product(form: FormElement) -> str:
    return form.render()


def main() -> None:
    form = get_product_form()
    load_product_data(form)
    print(render_product(form))
    print(f"Collected data: {form.get_data()}")


if __name__ == "__main__":
    main()
