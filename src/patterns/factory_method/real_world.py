"""Factory Method, real world: posting to social networks through connectors.

`SocialNetworkPoster.post` holds the business logic; subclasses only decide
which connector to create.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class SocialNetworkConnector(Protocol):
    def log_in(self) -> None:
        ...

    def log_out(self) -> None:
        ...

    def create_post(self, content: str) -> None:
        ...


class FacebookConnector:
    def __init__(self, login: str, password: str) -> None:
        self.login = login
        self.password = password

    def log_in(self) -> None:
        print(f"Send HTTP API request to log in user {self.login} with password {self.password}")

    def log_out(self) -> None:
        print(f"Send HTTP API request to log out user {self.login}")

    def create_post(self, content: str) -> None:
        print("Send HTTP API requests to create a post in Facebook timeline.")


class LinkedInConnector:
    def __init__(self, email: str, password: str) -> None:
        self.email = email
        self.password = password

    def log_in(self) -> None:
        print(f"Send HTTP API request to log in user {self.email} with password {self.password}")

    def log_out(self) -> None:
        print(f"Send HTTP API request to log out user {self.email}")

    def create_post(self, content: str) -> None:
        print("Send HTTP API requests to create a post in LinkedIn timeline.")


class SocialNetworkPoster(ABC):
    @abstractmethod
    def get_social_network(self) -> SocialNetworkConnector:
        """The factory method."""

    def post(self, content: str) -> None:
        network = self.get_social_network()
        network.log_in()
        network.create_post(content)
        network.log_out()


class FacebookPoster(SocialNetworkPoster):
    def __init__(self, login: str, password: str) -> None:
        self.login = login
        self.password = password

    def get_social_network(self) -> SocialNetworkConnector:
        return FacebookConnector(self.login, self.password)


class LinkedInPoster(SocialNetworkPoster):
    def __init__(self, email: str, password: str) -> None:
        self.email = email
        self.password = password

    def get_social_network(self) -> SocialNetworkConnector:
        return LinkedInConnector(self.email, self.password)


def client_code(creator: SocialNetworkPoster) -> None:
    creator.post("Hello world!")
    creator.post("I had a large hamburger this morning!")


def main() -> None:
    print("Testing ConcreteCreator1:")
    client_code(FacebookPoster("john_smith", "******"))
    print()

    print("Testing ConcreteCreator2:")
    client_code(LinkedInPoster("john_smith@example.com", "******"))


if __name__ == "__main__":
    main()
