"""Flyweight, real world: a cat database where breeds share one variation object.

Names, ages and owners are unique per cat; breed, picture, color and the rest
repeat, so they live in `CatVariation` flyweights keyed by a hash of their
fields. The records come from the bundled `cats.csv` dataset.
"""

from __future__ import annotations

import csv
import hashlib
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from core.resources_loader import require_dataset

logger = logging.getLogger(__name__)

_CAT_FIELDS = ("name", "age", "owner")


class CatDatasetError(ValueError):
    """The cat CSV lacks columns the database needs."""


@dataclass(frozen=True)
class CatVariation:
    breed: str
    image: str
    color: str
    texture: str
    fur: str
    size: str

    def render_profile(self, name: str, age: str, owner: str) -> None:
        print(f"= {name} =")
        print(f"Age: {age}")
        print(f"Owner: {owner}")
        print(f"Breed: {self.breed}")
        print(f"Image: {self.image}")
        print(f"Color: {self.color}")
        print(f"Texture: {self.texture}")


_VARIATION_FIELDS = tuple(f.name for f in fields(CatVariation))
_ALL_FIELDS = (*_CAT_FIELDS, *_VARIATION_FIELDS)


class Cat:
    def __init__(self, name: str, age: str, owner: str, variation: CatVariation) -> None:
        self.name = name
        self.age = age
        self.owner = owner
        self.variation = variation

    def matches(self, query: dict[str, Any]) -> bool:
        for key, value in query.items():
            if key in _CAT_FIELDS:
                if getattr(self, key) != value:
                    return False
            elif key in _VARIATION_FIELDS:
                if getattr(self.variation, key) != value:
                    return False
            else:
                return False
        return True

    def render(self) -> None:
        self.variation.render_profile(self.name, self.age, self.owner)


class CatDataBase:
    def __init__(self) -> None:
        self.cats: list[Cat] = []
        self.variations: dict[str, CatVariation] = {}

    def add_cat(
        self,
        name: str,
        age: str,
        owner: str,
        breed: str,
        image: str,
        color: str,
        texture: str,
        fur: str,
        size: str,
    ) -> Cat:
        variation = self.get_variation(breed, image, color, texture, fur, size)
        cat = Cat(name, age, owner, variation)
        self.cats.append(cat)
        print(f"CatDataBase: Added a cat ({name}, {breed}).")
        return cat

    def get_variation(self, breed: str, image: str, color: str, texture: str, fur: str, size: str) -> CatVariation:
        key = self.get_key([breed, image, color, texture, fur, size])
        if key not in self.variations:
            self.variations[key] = CatVariation(breed, image, color, texture, fur, size)
        return self.variations[key]

    @staticmethod
    def get_key(data: list[str]) -> str:
        return hashlib.md5("_".join(data).encode("utf-8")).hexdigest()

    def find_cat(self, query: dict[str, Any]) -> Cat | None:
        for cat in self.cats:
            if cat.matches(query):
                return cat
        print("CatDataBase: Sorry, your query does not yield any results.")
        return None

    def load_csv(self, path: Path) -> None:
        with path.open(newline="", encoding="utf-8") as fh:
            reader = csv.reader(fh)
            header = next(reader, None)
            if header is None:
                return
            columns = {name.strip().lower(): index for index, name in enumerate(header)}
            missing = [key for key in _ALL_FIELDS if key not in columns]
            if missing:
                raise CatDatasetError(f"{path.name} is missing column(s): {', '.join(missing)}")

            indexes = [columns[key] for key in _ALL_FIELDS]
            width = max(indexes) + 1
            for line_number, row in enumerate(reader, start=2):
                if len(row) < width:
                    if row:
                        logger.debug("skipping short row %d in %s", line_number, path)
                    continue
                self.add_cat(*(row[index] for index in indexes))


def main() -> None:
    db = CatDataBase()

    print('Client: Let\'s see what we have in "cats.csv".')
    db.load_csv(require_dataset("cats.csv"))
    print(f"Client: {len(db.cats)} cats share {len(db.variations)} variations.")

    print('\nClient: Let\'s look for a cat named "Siri".')
    cat = db.find_cat({"name": "Siri"})
    if cat:
        cat.render()

    print('\nClient: Let\'s look for a cat named "Bob".')
    cat = db.find_cat({"name": "Bob"})
    if cat:
        cat.render()


if __name__ == "__main__":
    main()
