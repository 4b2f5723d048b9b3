"""Template Method, real world: posting a message to a social network.

`SocialNetwork.post` fixes the order: log in, send, log out. Networks only
fill in those steps. Log-in waits `PATTERN_CATALOG_NETWORK_LATENCY_SECONDS`
to mimic a slow remote API.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod

from core.config import get_settings

_LATENCY_STEPS = 5


def simulate_network_latency(seconds: float | None = None) -> None:
    if seconds is None:
        seconds = get_settings().network_latency_seconds
    for _ in range(_LATENCY_STEPS):
        print(".", end="", flush=True)
        if seconds > 0:
            time.sleep(seconds / _LATENCY_STEPS)


class SocialNetwork(ABC):
    name = ""

    def __init__(self, username: str, password: str) -> None:
        self.username = username
        self.password = password

    def post(self, message: str) -> bool:
        if self.log_in(self.username, self.password):
            result = self.send_data(message)
            self.log_out()
            return result
        return False

    def log_in(self, username: str, password: str) -> bool:
        print("\nChecking user's credentials...")
        print(f"Name: {username}")
        print(f"Password: {'*' * len(password)}")
        simulate_network_latency()
        print(f"\n\n{self.name}: '{username}' has logged in successfully.")
        return True

    @abstractmethod
    def send_data(self, message: str) -> bool:
        ...

    def log_out(self) -> None:
        print(f"{self.name}: '{self.username}' has been logged out.")


class Facebook(SocialNetwork):
    name = "Facebook"

    def send_data(self, message: str) -> bool:
        print(f"Facebook: '{self.username}' has posted '{message}'.")
        return True


class Twitter(SocialNetwork):
    name = "Twitter"

    def send_data(self, message: str) -> bool:
        print(f"Twitter: '{self.username}' has posted '{message}'.")
        return True


NETWORKS: dict[str, type[SocialNetwork]] = {"1": Facebook, "2": Twitter}


def main() -> None:
    for network in (Facebook("john_smith", "secret"), Twitter("john_smith", "secret")):
        network.post("Hello from the template method!")


def _interactive() -> None:
    username = input("Username: \n")
    password = input("Password: \n")
    message = input("Message: \n")
    choice = input("\nChoose the social network to post the message:\n1 - Facebook\n2 - Twitter\n")
    network_cls = NETWORKS.get(choice.strip())
    if network_cls is None:
        raise SystemExit("Sorry, I'm not sure what you mean by that.")
    network_cls(username, password).post(message)


if __name__ == "__main__":
    _interactive()
