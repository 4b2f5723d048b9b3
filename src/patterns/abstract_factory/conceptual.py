"""Abstract Factory, conceptual: two factories, two compatible product families.

Client code works with factories and products only through their abstract
types, so any factory can be passed in without breaking it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class AbstractProductA(ABC):
    @abstractmethod
    def useful_function_a(self) -> str:
        ...


class ConcreteProductA1(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A1."


class ConcreteProductA2(AbstractProductA):
    def useful_function_a(self) -> str:
        return "The result of the product A2."


class AbstractProductB(ABC):
    """Products B can work on their own and collaborate with A of the same family."""

    @abstractmethod
    def useful_function_b(self) -> str:
        ...

    @abstractmethod
    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        ...


class ConcreteProductB1(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B1."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B1 collaborating with the ({result})"


class ConcreteProductB2(AbstractProductB):
    def useful_function_b(self) -> str:
        return "The result of the product B2."

    def another_useful_function_b(self, collaborator: AbstractProductA) -> str:
        result = collaborator.useful_function_a()
        return f"The result of the B2 collaborating with the ({result})"


class AbstractFactory(ABC):
    @abstractmethod
    def create_product_a(self) -> AbstractProductA:
        ...

    @abstractmethod
    def create_product_b(self) -> AbstractProductB:
        ...


class ConcreteFactory1(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA1()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB1()


class ConcreteFactory2(AbstractFactory):
    def create_product_a(self) -> AbstractProductA:
        return ConcreteProductA2()

    def create_product_b(self) -> AbstractProductB:
        return ConcreteProductB2()


def client_code(factory: AbstractFactory) -> None:
    product_a = factory.create_product_a()
    product_b = factory.create_product_b()

    print(product_b.useful_function_b())
    print(product_b.another_useful_function_b(product_a))


def main() -> None:
    print("Client: Testing client code with the first factory type:")
    client_code(ConcreteFactory1())

    print()

    print("Client: Testing the same client code with the second factory type:")
    client_code(ConcreteFactory2())


if __name__ == "__main__":
    main()
