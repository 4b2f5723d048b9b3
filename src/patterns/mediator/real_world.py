"""Mediator, real world: an event dispatcher between a repository and its users.

Components never reference each other. `User.delete()` broadcasts an event,
and the repository, the logger and the onboarding notifier react through the
dispatcher. Observers attached to `"*"` receive every event.
"""

from __future__ import annotations

import json
import secrets
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from core.resources_loader import data_dir


class Observer(Protocol):
    def update(self, event: str, emitter: object, data: Any = None) -> None:
        ...


class EventDispatcher:
    def __init__(self) -> None:
        self.observers: dict[str, list[Observer]] = {"*": []}

    def _event_observers(self, event: str = "*") -> list[Observer]:
        group = self.observers.setdefault(event, [])
        if event == "*":
            return list(group)
        return [*group, *self.observers["*"]]

    def attach(self, observer: Observer, event: str = "*") -> None:
        self.observers.setdefault(event, []).append(observer)

    def detach(self, observer: Observer, event: str = "*") -> None:
        self.observers[event] = [o for o in self.observers.get(event, []) if o is not observer]

    def trigger(self, event: str, emitter: object, data: Any = None) -> None:
        print(f"EventDispatcher: Broadcasting the '{event}' event.")
        for observer in self._event_observers(event):
            observer.update(event, emitter, data)


_dispatcher: EventDispatcher | None = None


def events() -> EventDispatcher:
    """Process-wide dispatcher."""

    global _dispatcher
    if _dispatcher is None:
        _dispatcher = EventDispatcher()
    return _dispatcher


def reset_events() -> EventDispatcher:
    global _dispatcher
    _dispatcher = EventDispatcher()
    return _dispatcher


class User:
    def __init__(self) -> None:
        self.attributes: dict[str, Any] = {}

    def update(self, data: dict[str, Any]) -> None:
        self.attributes.update(data)

    def delete(self) -> None:
        print("User: I can now delete myself without worrying about the repository.")
        events().trigger("users:deleted", self, self)


class UserRepository:
    def __init__(self) -> None:
        self.users: dict[str, User] = {}
        events().attach(self, "users:deleted")

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        if event == "users:deleted":
            if emitter is self:
                return
            self.delete_user(data, silent=True)

    def initialize(self, filename: str) -> None:
        print("UserRepository: Loading user records from a file.")
        events().trigger("users:init", self, filename)

    def create_user(self, data: dict[str, Any], silent: bool = False) -> User:
        print("UserRepository: Creating a user.")
        user = User()
        user.update(data)
        user.update({"id": secrets.token_hex(16)})
        self.users[user.attributes["id"]] = user
        if not silent:
            events().trigger("users:created", self, user)
        return user

    def update_user(self, user: User, data: dict[str, Any], silent: bool = False) -> User | None:
        print("UserRepository: Updating a user.")
        stored = self.users.get(user.attributes.get("id", ""))
        if stored is None:
            return None
        stored.update(data)
        if not silent:
            events().trigger("users:updated", self, stored)
        return stored

    def delete_user(self, user: User, silent: bool = False) -> None:
        print("UserRepository: Deleting a user.")
        user_id = user.attributes.get("id")
        if user_id not in self.users:
            return
        del self.users[user_id]
        if not silent:
            events().trigger("users:deleted", self, user)


def _jsonable(data: Any) -> Any:
    if isinstance(data, User):
        return data.attributes
    return data


class Logger:
    def __init__(self, filename: str | Path) -> None:
        self.filename = Path(filename)
        self.filename.unlink(missing_ok=True)

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        entry = f"{datetime.now():%Y-%m-%d %H:%M:%S}: '{event}' with data '{json.dumps(_jsonable(data))}'\n"
        with self.filename.open("a", encoding="utf-8") as fh:
            fh.write(entry)
        print(f"Logger: I've written '{event}' entry to the log.")


class OnboardingNotification:
    def __init__(self, admin_email: str) -> None:
        self.admin_email = admin_email

    def update(self, event: str, emitter: object, data: Any = None) -> None:
        # A real notifier would email self.admin_email here.
        print("OnboardingNotification: The notification has been emailed!")


def main() -> None:
    dispatcher = reset_events()

    repository = UserRepository()
    dispatcher.attach(repository, "facebook:update")

    logger = Logger(data_dir() / "log.txt")
    dispatcher.attach(logger, "*")

    onboarding = OnboardingNotification("1@example.com")
    dispatcher.attach(onboarding, "users:created")

    repository.initialize("users.csv")

    user = repository.create_user({"name": "John Smith", "email": "john99@example.com"})
    user.delete()


if __name__ == "__main__":
    main()
