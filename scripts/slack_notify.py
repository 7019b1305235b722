#!/usr/bin/env python3
"""Post a MESSAGE to a Slack channel via incoming webhook.

Reads MESSAGE, SLACK_WEBHOOK_URL and SLACK_CHANNEL from the environment
(or a .env file in the working directory) and sends a single POST.
"""

import functools
import os

import requests
from dotenv import load_dotenv

print = functools.partial(print, flush=True)

REQUIRED_VARS = ("MESSAGE", "SLACK_WEBHOOK_URL", "SLACK_CHANNEL")
MESSAGE_LABEL = "MESSAGE: "


class NotifyError(Exception):
    pass


class ConfigurationError(NotifyError):
    def __init__(self, variable: str):
        super().__init__(f"{variable} environment variable is not set")
        self.variable = variable


class SendError(NotifyError):
    pass


class TransportError(SendError):
    pass


class ResponseError(SendError):
    def __init__(self, status_code: int, reason: str | None):
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(f"non-200 response: {status}")
        self.status_code = status_code
        self.reason = reason


class NotificationRequest:
    def __init__(self, text: str, channel: str):
        if not text:
            raise ConfigurationError("MESSAGE")
        if not channel:
            raise ConfigurationError("SLACK_CHANNEL")
        self.text = text
        self.channel = channel

    def payload(self) -> dict[str, str]:
        return {"text": MESSAGE_LABEL + self.text, "channel": self.channel}


class Config:
    def __init__(self, message: str, webhook_url: str, channel: str):
        self.message = message
        self.webhook_url = webhook_url
        self.channel = channel


def load_config(environ=None) -> Config:
    """Read the required variables, failing on the first one missing or empty."""
    if environ is None:
        environ = os.environ
    values = {}
    for name in REQUIRED_VARS:
        value = environ.get(name, "")
        if not value:
            raise ConfigurationError(name)
        values[name] = value
    return Config(values["MESSAGE"], values["SLACK_WEBHOOK_URL"], values["SLACK_CHANNEL"])


def build_payload(channel: str, message: str) -> dict[str, str]:
    return NotificationRequest(message, channel).payload()


def send(webhook_url: str, channel: str, message: str):
    """POST one notification. Raises TransportError or ResponseError; never retries."""
    payload = build_payload(channel, message)
    try:
        resp = requests.post(
            webhook_url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
    except requests.RequestException as e:
        raise TransportError(str(e)) from e

    with resp:
        if resp.status_code != 200:
            raise ResponseError(resp.status_code, resp.reason)


def main():
    # Always returns normally: a failed notification must not fail the calling job.
    load_dotenv()
    try:
        config = load_config()
    except ConfigurationError as e:
        print(e)
        return

    try:
        send(config.webhook_url, config.channel, config.message)
    except SendError as e:
        print(f"Error sending message to Slack: {e}")


if __name__ == "__main__":
    main()
