"""Singleton, real world: a process-wide logger and configuration store.

Each subclass gets its own instance through `get_instance()`. Calling the
class directly or copying an instance raises `SingletonError`.
"""

from __future__ import annotations

import sys
from datetime import datetime
from threading import Lock
from typing import Any, ClassVar, TextIO, TypeVar


T = TypeVar("T", bound="Singleton")


class SingletonError(Exception):
    pass


class Singleton:
    _instances: ClassVar[dict[type, "Singleton"]] = {}
    _lock: ClassVar[Lock] = Lock()
    _constructing: ClassVar[bool] = False

    def __new__(cls, *args: Any, **kwargs: Any) -> "Singleton":
        if not Singleton._constructing:
            raise SingletonError(f"Use {cls.__name__}.get_instance() instead of {cls.__name__}()")
        return super().__new__(cls)

    @classmethod
    def get_instance(cls: type[T]) -> T:
        with Singleton._lock:
            if cls not in Singleton._instances:
                Singleton._constructing = True
                try:
                    Singleton._instances[cls] = cls()
                finally:
                    Singleton._constructing = False
        return Singleton._instances[cls]  # type: ignore[return-value]

    @classmethod
    def reset_instances(cls) -> None:
        with Singleton._lock:
            Singleton._instances.clear()

    def __copy__(self) -> "Singleton":
        raise SingletonError("Cannot clone a singleton.")

    def __deepcopy__(self, memo: dict[int, object]) -> "Singleton":
        raise SingletonError("Cannot clone a singleton.")

    def __reduce__(self) -> Any:
        raise SingletonError("Cannot serialize a singleton.")


class Logger(Singleton):
    def __init__(self) -> None:
        self.stream: TextIO | None = None

    def write_log(self, message: str) -> None:
        stream = self.stream or sys.stdout
        stream.write(f"{datetime.now():%Y-%m-%d}: {message}\n")

    @classmethod
    def log(cls, message: str) -> None:
        cls.get_instance().write_log(message)


class Config(Singleton):
    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def get_value(self, key: str) -> Any:
        return self._values.get(key)

    def set_value(self, key: str, value: Any) -> None:
        self._values[key] = value


def main() -> None:
    Logger.log("Started!")

    l1 = Logger.get_instance()
    l2 = Logger.get_instance()
    if l1 is l2:
        Logger.log("Logger has a single instance.")
    else:
        Logger.log("Loggers are different.")

    config1 = Config.get_instance()
    login = "test_login"
    password = "test_password"
    config1.set_value("login", login)
    config1.set_value("password", password)

    config2 = Config.get_instance()
    if login == config2.get_value("login") and password == config2.get_value("password"):
        Logger.log("Config singleton also works fine.")

    try:
        Config()
    except SingletonError as exc:
        Logger.log(f"SingletonError: {exc}")

    Logger.log("Finished!")


if __name__ == "__main__":
    main()
