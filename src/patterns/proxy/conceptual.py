"""Proxy, conceptual: a stand-in that checks access and logs around the real subject."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Subject(ABC):
    @abstractmethod
    def request(self) -> None:
        ...


class RealSubject(Subject):
    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    def __init__(self, real_subject: RealSubject, *, allowed: bool = True) -> None:
        self._real_subject = real_subject
        self._allowed = allowed

    def request(self) -> None:
        if self.check_access():
            self._real_subject.request()
            self.log_access()

    def check_access(self) -> bool:
        print("Proxy: Checking access prior to firing a real request.")
        return self._allowed

    def log_access(self) -> None:
        print("Proxy: Logging the time of request.", end="")


def client_code(subject: Subject) -> None:
    subject.request()


def main() -> None:
    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    client_code(real_subject)

    print()
    print("Client: Executing the same client code with a proxy:")
    client_code(Proxy(real_subject))
    print()


if __name__ == "__main__":
    main()
