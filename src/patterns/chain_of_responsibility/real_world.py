"""Chain of Responsibility, real world: authentication middleware.

Requests pass through throttling, credential and role checks. Each
middleware either stops the chain or hands the request to the next one.
"""

from __future__ import annotations

import time
from typing import Callable, Iterable

from core.config import get_settings


class RequestLimitExceeded(Exception):
    pass


class Middleware:
    def __init__(self) -> None:
        self._next: Middleware | None = None

    def link_with(self, next: "Middleware") -> "Middleware":
        self._next = next
        return next

    def check(self, email: str, password: str) -> bool:
        if self._next is None:
            return True
        return self._next.check(email, password)


class ThrottlingMiddleware(Middleware):
    """Allow at most `request_per_minute` checks in each 60 second window."""

    def __init__(self, request_per_minute: int, *, clock: Callable[[], float] = time.monotonic) -> None:
        super().__init__()
        self.request_per_minute = request_per_minute
        self._clock = clock
        self._window_start = clock()
        self._requests = 0

    def check(self, email: str, password: str) -> bool:
        now = self._clock()
        if now > self._window_start + 60:
            self._requests = 0
            self._window_start = now

        self._requests += 1
        if self._requests > self.request_per_minute:
            print("ThrottlingMiddleware: Request limit exceeded!")
            raise RequestLimitExceeded(f"More than {self.request_per_minute} requests per minute")
        return super().check(email, password)


class UserExistsMiddleware(Middleware):
    def __init__(self, server: "Server") -> None:
        super().__init__()
        self.server = server

    def check(self, email: str, password: str) -> bool:
        if not self.server.has_email(email):
            print("UserExistsMiddleware: This email is not registered!")
            return False
        if not self.server.is_valid_password(email, password):
            print("UserExistsMiddleware: Wrong password!")
            return False
        return super().check(email, password)


class RoleCheckMiddleware(Middleware):
    def check(self, email: str, password: str) -> bool:
        if email == "admin@example.com":
            print("RoleCheckMiddleware: Hello, admin!")
            return True
        print("RoleCheckMiddleware: Hello, user!")
        return super().check(email, password)


class Server:
    def __init__(self) -> None:
        self.users: dict[str, str] = {}
        self.middleware: Middleware | None = None

    def set_middleware(self, middleware: Middleware) -> None:
        self.middleware = middleware

    def log_in(self, email: str, password: str) -> bool:
        if self.middleware is None or self.middleware.check(email, password):
            print("Server: Authorization has been successful!")
            return True
        return False

    def register(self, email: str, password: str) -> None:
        self.users[email] = password

    def has_email(self, email: str) -> bool:
        return email in self.users

    def is_valid_password(self, email: str, password: str) -> bool:
        return self.users.get(email) == password


def build_server(request_per_minute: int | None = None) -> Server:
    if request_per_minute is None:
        request_per_minute = get_settings().throttle_requests_per_minute

    server = Server()
    server.register("admin@example.com", "admin_pass")
    server.register("user@example.com", "user_pass")

    middleware = ThrottlingMiddleware(request_per_minute)
    middleware.link_with(UserExistsMiddleware(server)).link_with(RoleCheckMiddleware())
    server.set_middleware(middleware)
    return server


def play(server: Server, attempts: Iterable[tuple[str, str]]) -> bool:
    """Try credentials in order until one logs in."""

    for email, password in attempts:
        print(f"\nLogging in as {email}")
        if server.log_in(email, password):
            return True
    return False


_SCRIPTED_ATTEMPTS = [
    ("user@example.com", "wrong_pass"),
    ("admin@example.com", "admin_pass"),
]


def main() -> None:
    server = build_server()
    play(server, _SCRIPTED_ATTEMPTS)

    print("\nOne more attempt in the same minute:")
    try:
        server.log_in("user@example.com", "user_pass")
    except RequestLimitExceeded as exc:
        print(f"RequestLimitExceeded: {exc}")


def _prompt_attempts() -> Iterable[tuple[str, str]]:
    while True:
        email = input("\nEnter your email:\n")
        password = input("Enter your password:\n")
        yield email, password


if __name__ == "__main__":
    try:
        play(build_server(), _prompt_attempts())
    except RequestLimitExceeded:
        raise SystemExit(1)
