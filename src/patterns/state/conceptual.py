"""State, conceptual: an object changes behavior when its internal state changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Context:
    _state: "State | None" = None

    def __init__(self, state: "State") -> None:
        self.transition_to(state)

    @property
    def state(self) -> "State":
        assert self._state is not None
        return self._state

    def transition_to(self, state: "State") -> None:
        print(f"Context: Transition to {type(state).__name__}")
        self._state = state
        self._state.context = self

    def request1(self) -> None:
        self.state.handle1()

    def request2(self) -> None:
        self.state.handle2()


class State(ABC):
    context: Context

    @abstractmethod
    def handle1(self) -> None:
        ...

    @abstractmethod
    def handle2(self) -> None:
        ...


class ConcreteStateA(State):
    def handle1(self) -> None:
        print("ConcreteStateA handles request1.")
        print("ConcreteStateA wants to change the state of the context.")
        self.context.transition_to(ConcreteStateB())

    def handle2(self) -> None:
        print("ConcreteStateA handles request2.")


class ConcreteStateB(State):
    def handle1(self) -> None:
        print("ConcreteStateB handles request1.")

    def handle2(self) -> None:
        print("ConcreteStateB handles request2.")
        print("ConcreteStateB wants to change the state of the context.")
        self.context.transition_to(ConcreteStateA())


def main() -> None:
    context = Context(ConcreteStateA())
    context.request1()
    context.request2()


if __name__ == "__main__":
    main()
