"""Bridge, conceptual: an abstraction delegates to a swappable implementation."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implementation(ABC):
    @abstractmethod
    def operation_implementation(self) -> str:
        ...


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A."


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B."


class Abstraction:
    def __init__(self, implementation: Implementation) -> None:
        self.implementation = implementation

    def operation(self) -> str:
        return f"Abstraction: Base operation with:\n{self.implementation.operation_implementation()}"


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return f"ExtendedAbstraction: Extended operation with:\n{self.implementation.operation_implementation()}"


def client_code(abstraction: Abstraction) -> None:
    print(abstraction.operation(), end="")


def main() -> None:
    client_code(Abstraction(ConcreteImplementationA()))
    print("\n")
    client_code(ExtendedAbstraction(ConcreteImplementationB()))
    print()


if __name__ == "__main__":
    main()
