"""Singleton, conceptual: a metaclass that hands out one instance per class."""

from __future__ import annotations

from threading import Lock
from typing import Any


class SingletonMeta(type):
    _instances: dict[type, Any] = {}
    _lock = Lock()

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        with cls._lock:
            if cls not in cls._instances:
                cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class Singleton(metaclass=SingletonMeta):
    def some_business_logic(self) -> str:
        return "Executing business logic on the single instance."


def main() -> None:
    s1 = Singleton()
    s2 = Singleton()

    if id(s1) == id(s2):
        print("Singleton works, both variables contain the same instance.")
    else:
        print("Singleton failed, variables contain different instances.")
    print(s1.some_business_logic())


if __name__ == "__main__":
    main()
