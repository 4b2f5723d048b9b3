"""Mediator, conceptual: components talk to a mediator instead of each other."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Mediator(ABC):
    @abstractmethod
    def notify(self, sender: object, event: str) -> None:
        ...


class ConcreteMediator(Mediator):
    def __init__(self, component1: "Component1", component2: "Component2") -> None:
        self._component1 = component1
        self._component1.mediator = self
        self._component2 = component2
        self._component2.mediator = self

    def notify(self, sender: object, event: str) -> None:
        if event == "A":
            print("Mediator reacts on A and triggers following operations:")
            self._component2.do_c()
        elif event == "D":
            print("Mediator reacts on D and triggers following operations:")
            self._component1.do_b()
            self._component2.do_c()


class BaseComponent:
    def __init__(self, mediator: Mediator | None = None) -> None:
        self._mediator = mediator

    @property
    def mediator(self) -> Mediator | None:
        return self._mediator

    @mediator.setter
    def mediator(self, mediator: Mediator) -> None:
        self._mediator = mediator

    def _notify(self, event: str) -> None:
        if self._mediator is not None:
            self._mediator.notify(self, event)


class Component1(BaseComponent):
    def do_a(self) -> None:
        print("Component 1 does A.")
        self._notify("A")

    def do_b(self) -> None:
        print("Component 1 does B.")
        self._notify("B")


class Component2(BaseComponent):
    def do_c(self) -> None:
        print("Component 2 does C.")
        self._notify("C")

    def do_d(self) -> None:
        print("Component 2 does D.")
        self._notify("D")


def main() -> None:
    c1 = Component1()
    c2 = Component2()
    ConcreteMediator(c1, c2)

    print("Client triggers operation A.")
    c1.do_a()

    print("\n", end="")

    print("Client triggers operation D.")
    c2.do_d()


if __name__ == "__main__":
    main()
