from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator


class ParseMode(str, Enum):
    """How Telegram interprets markup in the message text."""

    HTML = "HTML"
    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"


# Accepted by Telelogger.log_error: a plain message or an exception.
ErrorLike = Union[str, BaseException]


def describe_error(err: Union[ErrorLike, Any]) -> str:
    """Resolve an error argument to the text that gets sent."""
    if isinstance(err, BaseException):
        return str(err)
    if isinstance(err, str):
        return err
    return f"{err}"


def coerce_parse_mode(value: Union[ParseMode, str, None]) -> Optional[ParseMode]:
    """Normalise a parse mode value; empty strings mean "unset"."""
    if value is None or value == "":
        return None
    if isinstance(value, ParseMode):
        return value
    return ParseMode(value)


class OutboundMessage(BaseModel):
    """A single sendMessage request body."""

    model_config = ConfigDict(frozen=True)

    chat_id: int
    text: str
    parse_mode: Optional[ParseMode] = None

    @field_validator("parse_mode", mode="before")
    @classmethod
    def _empty_is_unset(cls, v: object) -> object:
        if v == "":
            return None
        return v

    def to_payload(self) -> Dict[str, Any]:
        # parse_mode must be absent, not null, when unset
        return self.model_dump(mode="json", exclude_none=True)


__all__ = ["ParseMode", "ErrorLike", "describe_error", "coerce_parse_mode", "OutboundMessage"]
