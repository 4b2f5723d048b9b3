"""Flyweight, conceptual: share the repeating part of many objects' state."""

from __future__ import annotations

from typing import Sequence


class Flyweight:
    def __init__(self, shared_state: Sequence[str]) -> None:
        self._shared_state = list(shared_state)

    def operation(self, unique_state: Sequence[str]) -> None:
        print(
            f"Flyweight: Displaying shared ({self._shared_state}) and unique ({list(unique_state)}) state.",
            end="",
        )


class FlyweightFactory:
    def __init__(self, initial_flyweights: Sequence[Sequence[str]] = ()) -> None:
        self._flyweights: dict[str, Flyweight] = {}
        for state in initial_flyweights:
            self._flyweights[self.get_key(state)] = Flyweight(state)

    @staticmethod
    def get_key(state: Sequence[str]) -> str:
        return "_".join(sorted(state))

    def get_flyweight(self, shared_state: Sequence[str]) -> Flyweight:
        key = self.get_key(shared_state)
        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating new one.")
            self._flyweights[key] = Flyweight(shared_state)
        else:
            print("FlyweightFactory: Reusing existing flyweight.")
        return self._flyweights[key]

    def __len__(self) -> int:
        return len(self._flyweights)

    def list_flyweights(self) -> None:
        print(f"FlyweightFactory: I have {len(self)} flyweights:")
        print("\n".join(self._flyweights))


def add_car_to_police_database(
    factory: FlyweightFactory, plates: str, owner: str, brand: str, model: str, color: str
) -> None:
    print("\n\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight([brand, model, color])
    flyweight.operation([plates, owner])


def main() -> None:
    factory = FlyweightFactory(
        [
            ["Chevrolet", "Camaro2018", "pink"],
            ["Mercedes Benz", "C300", "black"],
            ["Mercedes Benz", "C500", "red"],
            ["BMW", "M5", "red"],
            ["BMW", "X6", "white"],
        ]
    )
    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red")

    print("\n")
    factory.list_flyweights()


if __name__ == "__main__":
    main()
