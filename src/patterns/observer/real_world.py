"""Observer, real world: a user repository that notifies interested parties.

Observers subscribe to a specific event or to `"*"` for all of them. The
logger writes every event to `<data_dir>/log.txt`; the onboarding notifier
only cares about new users.
"""

from __future__ import annotations

import json
import secrets
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from core.resources_loader import data_dir


class Observer(Protocol):
    def update(self, repository: "UserRepository", event: str, data: Any = None) -> None:
        ...


class User:
    def __init__(self) -> None:
        self.attributes: dict[str, Any] = {}

    def update(self, data: dict[str, Any]) -> None:
        self.attributes.update(data)


class UserRepository:
    def __init__(self) -> None:
        self.users: dict[str, User] = {}
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

    def notify(self, event: str = "*", data: Any = None) -> None:
        print(f"UserRepository: Broadcasting the '{event}' event.")
        for observer in self._event_observers(event):
            observer.update(self, event, data)

    def initialize(self, filename: str) -> None:
        print("UserRepository: Loading user records from a file.")
        self.notify("users:init", filename)

    def create_user(self, data: dict[str, Any]) -> User:
        print("UserRepository: Creating a user.")
        user = User()
        user.update(data)
        user.update({"id": secrets.token_hex(16)})
        self.users[user.attributes["id"]] = user
        self.notify("users:created", user)
        return user

    def update_user(self, user: User, data: dict[str, Any]) -> User | None:
        print("UserRepository: Updating a user.")
        stored = self.users.get(user.attributes.get("id", ""))
        if stored is None:
            return None
        stored.update(data)
        self.notify("users:updated", stored)
        return stored

    def delete_user(self, user: User) -> None:
        print("UserRepository: Deleting a user.")
        user_id = user.attributes.get("id")
        if user_id not in self.users:
            return
        del self.users[user_id]
        self.notify("users:deleted", user)


class Logger:
    def __init__(self, filename: str | Path) -> None:
        self.filename = Path(filename)
        self.filename.unlink(missing_ok=True)

    def update(self, repository: UserRepository, event: str, data: Any = None) -> None:
        payload = data.attributes if isinstance(data, User) else data
        entry = f"{datetime.now():%Y-%m-%d %H:%M:%S}: '{event}' with data '{json.dumps(payload)}'\n"
        with self.filename.open("a", encoding="utf-8") as fh:
            fh.write(entry)
        print(f"Logger: I've written '{event}' entry to the log.")


class OnboardingNotification:
    def __init__(self, admin_email: str) -> None:
        self.admin_email = admin_email

    def update(self, repository: UserRepository, event: str, data: Any = None) -> None:
        print("OnboardingNotification: The notification has been emailed!")


def main() -> None:
    repository = UserRepository()
    repository.attach(Logger(data_dir() / "log.txt"), "*")
    repository.attach(OnboardingNotification("1@example.com"), "users:created")

    repository.initialize("users.csv")

    user = repository.create_user({"name": "John Smith", "email": "john99@example.com"})
    repository.update_user(user, {"name": "John S. Smith"})
    repository.delete_user(user)


if __name__ == "__main__":
    main()
