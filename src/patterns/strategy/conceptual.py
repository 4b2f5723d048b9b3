"""Strategy, conceptual: swap algorithms behind a common interface at runtime."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class Strategy(ABC):
    @abstractmethod
    def do_algorithm(self, data: Sequence[str]) -> list[str]:
        ...


class ConcreteStrategyA(Strategy):
    def do_algorithm(self, data: Sequence[str]) -> list[str]:
        return sorted(data)


class ConcreteStrategyB(Strategy):
    def do_algorithm(self, data: Sequence[str]) -> list[str]:
        return sorted(data, reverse=True)


class Context:
    def __init__(self, strategy: Strategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def do_some_business_logic(self) -> str:
        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = self._strategy.do_algorithm(["a", "b", "c", "d", "e"])
        return ",".join(result)


def main() -> None:
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    print(context.do_some_business_logic())
    print()

    print("Client: Strategy is set to reverse sorting.")
    context.strategy = ConcreteStrategyB()
    print(context.do_some_business_logic())


if __name__ == "__main__":
    main()
