"""Builder, conceptual: a director drives a builder through construction steps."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product1:
    """Builders may produce unrelated products; this is the one ConcreteBuilder1 makes."""

    def __init__(self) -> None:
        self.parts: list[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> None:
        print(f"Product parts: {', '.join(self.parts)}", end="")


class Builder(ABC):
    @property
    @abstractmethod
    def product(self) -> Product1:
        ...

    @abstractmethod
    def produce_part_a(self) -> None:
        ...

    @abstractmethod
    def produce_part_b(self) -> None:
        ...

    @abstractmethod
    def produce_part_c(self) -> None:
        ...


class ConcreteBuilder1(Builder):
    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._product = Product1()

    @property
    def product(self) -> Product1:
        # Handing out the result starts a fresh product.
        product = self._product
        self.reset()
        return product

    def produce_part_a(self) -> None:
        self._product.add("PartA1")

    def produce_part_b(self) -> None:
        self._product.add("PartB1")

    def produce_part_c(self) -> None:
        self._product.add("PartC1")


class Director:
    """Optional: knows the order of steps for popular configurations."""

    def __init__(self) -> None:
        self._builder: Builder | None = None

    @property
    def builder(self) -> Builder:
        if self._builder is None:
            raise RuntimeError("Director has no builder")
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        self.builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        self.builder.produce_part_a()
        self.builder.produce_part_b()
        self.builder.produce_part_c()


def main() -> None:
    director = Director()
    builder = ConcreteBuilder1()
    director.builder = builder

    print("Standard basic product: ")
    director.build_minimal_viable_product()
    builder.product.list_parts()

    print("\n")

    print("Standard full featured product: ")
    director.build_full_featured_product()
    builder.product.list_parts()

    print("\n")

    print("Custom product: ")
    builder.produce_part_a()
    builder.produce_part_b()
    builder.product.list_parts()
    print()


if __name__ == "__main__":
    main()
