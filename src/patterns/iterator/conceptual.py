"""Iterator, conceptual: traverse a collection without exposing its internals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class AlphabeticalOrderIterator(Iterator[Any]):
    """Walks the collection front to back, or back to front when `reverse`."""

    _position: int

    def __init__(self, collection: "WordsCollection", reverse: bool = False) -> None:
        self._collection = collection
        self._reverse = reverse
        self._position = -1 if reverse else 0

    def __next__(self) -> Any:
        try:
            value = self._collection[self._position]
            self._position += -1 if self._reverse else 1
        except IndexError:
            raise StopIteration()
        return value


class WordsCollection(Iterable[Any]):
    def __init__(self, collection: list[Any] | None = None) -> None:
        self._collection = collection if collection is not None else []

    def __getitem__(self, index: int) -> Any:
        return self._collection[index]

    def __len__(self) -> int:
        return len(self._collection)

    def __iter__(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self)

    def get_reverse_iterator(self) -> AlphabeticalOrderIterator:
        return AlphabeticalOrderIterator(self, True)

    def add_item(self, item: Any) -> None:
        self._collection.append(item)


def main() -> None:
    collection = WordsCollection()
    collection.add_item("First")
    collection.add_item("Second")
    collection.add_item("Third")

    print("Straight traversal:")
    print("\n".join(collection))
    print()

    print("Reverse traversal:")
    print("\n".join(collection.get_reverse_iterator()), end="")
    print()


if __name__ == "__main__":
    main()
