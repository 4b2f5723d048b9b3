"""Observer, conceptual: subscribers are notified when the subject's state changes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from random import randrange


class Subject(ABC):
    @abstractmethod
    def attach(self, observer: "Observer") -> None:
        ...

    @abstractmethod
    def detach(self, observer: "Observer") -> None:
        ...

    @abstractmethod
    def notify(self) -> None:
        ...


class ConcreteSubject(Subject):
    _state: int = 0

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    @property
    def state(self) -> int:
        return self._state

    def attach(self, observer: "Observer") -> None:
        print("Subject: Attached an observer.")
        self._observers.append(observer)

    def detach(self, observer: "Observer") -> None:
        self._observers.remove(observer)

    def notify(self) -> None:
        print("Subject: Notifying observers...")
        for observer in self._observers:
            observer.update(self)

    def some_business_logic(self, state: int | None = None) -> None:
        print("\nSubject: I'm doing something important.")
        self._state = randrange(0, 10) if state is None else state
        print(f"Subject: My state has just changed to: {self._state}")
        self.notify()


class Observer(ABC):
    @abstractmethod
    def update(self, subject: ConcreteSubject) -> None:
        ...


class ConcreteObserverA(Observer):
    def __init__(self) -> None:
        self.reactions = 0

    def update(self, subject: ConcreteSubject) -> None:
        if subject.state < 3:
            self.reactions += 1
            print("ConcreteObserverA: Reacted to the event")


class ConcreteObserverB(Observer):
    def __init__(self) -> None:
        self.reactions = 0

    def update(self, subject: ConcreteSubject) -> None:
        if subject.state == 0 or subject.state >= 2:
            self.reactions += 1
            print("ConcreteObserverB: Reacted to the event")


def main() -> None:
    subject = ConcreteSubject()

    observer_a = ConcreteObserverA()
    subject.attach(observer_a)

    observer_b = ConcreteObserverB()
    subject.attach(observer_b)

    subject.some_business_logic()
    subject.some_business_logic()

    subject.detach(observer_a)

    subject.some_business_logic()


if __name__ == "__main__":
    main()
