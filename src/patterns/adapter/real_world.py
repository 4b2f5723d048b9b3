"""Adapter, real world: sending notifications through the Slack API.

The application speaks `Notification`. Slack's client has its own log-in and
message calls, so `SlackNotification` adapts it and flattens the HTML body
to plain text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bs4 import BeautifulSoup


class Notification(ABC):
    @abstractmethod
    def send(self, title: str, message: str) -> None:
        ...


class EmailNotification(Notification):
    def __init__(self, admin_email: str) -> None:
        self.admin_email = admin_email

    def send(self, title: str, message: str) -> None:
        # A real implementation would hand this to an SMTP client.
        print(f"Sent email with title '{title}' to '{self.admin_email}' that says '{message}'.")


class SlackApi:
    """Third-party client with an interface the application does not use."""

    def __init__(self, login: str, api_key: str) -> None:
        self.login = login
        self.api_key = api_key
        self.logged_in = False

    def log_in(self) -> None:
        print(f"Logged in to a slack account '{self.login}'.")
        self.logged_in = True

    def send_message(self, chat_id: str, message: str) -> None:
        if not self.logged_in:
            self.log_in()
        print(f"Posted following message into the '{chat_id}' chat: '{message}'.")


def strip_tags(html: str) -> str:
    return BeautifulSoup(html, "html.parser").get_text()


class SlackNotification(Notification):
    def __init__(self, slack: SlackApi, chat_id: str) -> None:
        self.slack = slack
        self.chat_id = chat_id

    def send(self, title: str, message: str) -> None:
        slack_message = f"#{title}# {strip_tags(message)}"
        self.slack.log_in()
        self.slack.send_message(self.chat_id, slack_message)


def client_code(notification: Notification) -> None:
    notification.send(
        "Website is down!",
        "<strong style='color:red;font-size: 50px;'>Alert!</strong> "
        "Our website is not responding. Call admins and bring it up!",
    )


def main() -> None:
    print("Client code is designed correctly and works with email notifications:")
    client_code(EmailNotification("developers@example.com"))
    print()

    print("The same client code can work with other classes via adapter:")
    client_code(SlackNotification(SlackApi("example.com", "XXXXXXXX"), "Example.com Developers"))


if __name__ == "__main__":
    main()
