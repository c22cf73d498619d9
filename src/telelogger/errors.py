"""Exceptions raised by the Telegram dispatch path.

Every failure is raised to the caller; nothing is retried or logged here.
"""
from __future__ import annotations


class TeleloggerError(Exception):
    """Base class for all telelogger failures."""


class SerializationError(TeleloggerError):
    """The outbound message could not be encoded as JSON."""


class TransportError(TeleloggerError):
    """The request was not sent or no response came back."""


class RemoteRejectionError(TeleloggerError):
    """Telegram answered with a status other than 200."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"telegram API returned non-200 status code: {status_code}")


__all__ = [
    "TeleloggerError",
    "SerializationError",
    "TransportError",
    "RemoteRejectionError",
]
