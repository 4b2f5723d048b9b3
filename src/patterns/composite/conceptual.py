"""Composite, conceptual: leaves and branches behind one component interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    def __init__(self) -> None:
        self._parent: Component | None = None

    @property
    def parent(self) -> "Component | None":
        return self._parent

    @parent.setter
    def parent(self, parent: "Component | None") -> None:
        self._parent = parent

    def add(self, component: "Component") -> None:
        pass

    def remove(self, component: "Component") -> None:
        pass

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def operation(self) -> str:
        ...


class Leaf(Component):
    def operation(self) -> str:
        return "Leaf"


class Composite(Component):
    def __init__(self) -> None:
        super().__init__()
        self._children: list[Component] = []

    def add(self, component: Component) -> None:
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        self._children.remove(component)
        component.parent = None

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        return f"Branch({'+'.join(child.operation() for child in self._children)})"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}", end="")


def client_code2(component1: Component, component2: Component) -> None:
    """Works with any component without checking concrete classes."""

    if component1.is_composite():
        component1.add(component2)
    print(f"RESULT: {component1.operation()}", end="")


def build_tree() -> Composite:
    tree = Composite()

    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())

    branch2 = Composite()
    branch2.add(Leaf())

    tree.add(branch1)
    tree.add(branch2)
    return tree


def main() -> None:
    print("Client: I've got a simple component:")
    client_code(Leaf())
    print("\n")

    tree = build_tree()
    print("Client: Now I've got a composite tree:")
    client_code(tree)
    print("\n")

    print("Client: I don't need to check the components classes even when managing the tree:")
    client_code2(tree, Leaf())
    print()


if __name__ == "__main__":
    main()
