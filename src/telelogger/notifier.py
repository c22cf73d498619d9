"""Telegram notifier that sends formatted log messages through the Bot API."""
from __future__ import annotations

import json
import logging
import threading
from typing import Any, List, Optional, Union

import requests

from telelogger.config import TeleloggerConfig
from telelogger.errors import RemoteRejectionError, SerializationError, TransportError
from telelogger.models import ErrorLike, OutboundMessage, ParseMode, coerce_parse_mode, describe_error

logger = logging.getLogger(__name__)


class Telelogger:
    """Sends info, error, success and warning messages to one Telegram chat.

    Every public method performs exactly one ``sendMessage`` request on the
    calling thread and returns None, or raises a ``TeleloggerError``.

    Usage:
        logger = Telelogger(TeleloggerConfig(bot_token="...", chat_id=123456789))
        logger.log_info("Application started successfully")
        logger.log_error(exc)
    """

    def __init__(self, config: TeleloggerConfig, session: Optional[requests.Session] = None):
        """Initialize Telelogger.

        Args:
            config: Resolved configuration (formatters already filled in)
            session: Optional session shared by all threads; by default each
                calling thread gets its own ``requests.Session``
        """
        self.config = config
        self.base_url = config.base_url
        self._session = session
        self._local = threading.local()
        self._owned: List[requests.Session] = []
        self._owned_lock = threading.Lock()

    @classmethod
    def from_env(cls) -> "Telelogger":
        return cls(TeleloggerConfig.from_env())

    @property
    def chat_id(self) -> int:
        return self.config.chat_id

    @property
    def parse_mode(self) -> Optional[ParseMode]:
        return self.config.parse_mode

    def _transport(self) -> requests.Session:
        if self._session is not None:
            return self._session
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._owned_lock:
                self._owned.append(session)
        return session

    def close(self) -> None:
        """Close every session this notifier created, in any thread.

        A session passed to the constructor belongs to the caller and is left
        open. Threads that send again afterwards get a fresh session.
        """
        with self._owned_lock:
            owned, self._owned = self._owned, []
        for session in owned:
            session.close()
        self._local = threading.local()

    def log(self, msg: str) -> None:
        """Send a message as-is with the default parse mode."""
        self._send_message(msg, self.parse_mode)

    def log_with_parse_mode(self, msg: str, parse_mode: Union[ParseMode, str, None]) -> None:
        """Send a message as-is, overriding the parse mode for this call."""
        self._send_message(msg, coerce_parse_mode(parse_mode))

    def log_error(self, err: Union[ErrorLike, Any]) -> None:
        """Send an error message.

        Args:
            err: An exception (its message is sent) or a string
        """
        self._send_message(self.config.error_formatter(describe_error(err)), self.parse_mode)

    def log_info(self, msg: str) -> None:
        self._send_message(self.config.info_formatter(msg), self.parse_mode)

    def log_success(self, msg: str) -> None:
        self._send_message(self.config.success_formatter(msg), self.parse_mode)

    def log_warn(self, msg: str) -> None:
        self._send_message(self.config.warn_formatter(msg), self.parse_mode)

    def _send_message(self, text: str, parse_mode: Optional[ParseMode]) -> None:
        message = OutboundMessage(chat_id=self.chat_id, text=text, parse_mode=parse_mode)
        try:
            body = json.dumps(
                message.to_payload(), ensure_ascii=False, separators=(",", ":")
            ).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to marshal message: {e}") from e

        try:
            resp = self._transport().post(
                f"{self.base_url}/sendMessage",
                data=body,
                headers={"Content-Type": "application/json"},
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"failed to send message: {e}") from e

        try:
            if resp.status_code != 200:
                raise RemoteRejectionError(resp.status_code)
        finally:
            resp.close()
        logger.debug(f"Telegram message sent: {len(text)} chars")


__all__ = ["Telelogger"]
