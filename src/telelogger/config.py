from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from telelogger.formatters import DEFAULT_FORMATTERS, Formatter
from telelogger.models import ParseMode

TELEGRAM_API_BASE = "https://api.telegram.org"


class TeleloggerConfig(BaseModel):
    """Connection and formatting settings for a Telelogger.

    Formatter slots left out (or passed as None) get the built-in defaults
    when the config is built. Instances are frozen.
    """

    model_config = ConfigDict(frozen=True)

    bot_token: str
    chat_id: int
    parse_mode: Optional[ParseMode] = None
    info_formatter: Formatter
    error_formatter: Formatter
    success_formatter: Formatter
    warn_formatter: Formatter
    # seconds; None means requests waits indefinitely
    timeout: Optional[float] = None
    api_base: str = TELEGRAM_API_BASE

    @model_validator(mode="before")
    @classmethod
    def _fill_default_formatters(cls, data: object) -> object:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        for name, default in DEFAULT_FORMATTERS.items():
            if data.get(name) is None:
                data[name] = default
        return data

    @field_validator("parse_mode", mode="before")
    @classmethod
    def _empty_parse_mode(cls, v: object) -> object:
        if v == "":
            return None
        return v

    @field_validator("timeout")
    @classmethod
    def _positive_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @property
    def base_url(self) -> str:
        return f"{self.api_base.rstrip('/')}/bot{self.bot_token}"

    @classmethod
    def from_env(cls) -> "TeleloggerConfig":
        """Build a config from TELEGRAM_* environment variables.

        Raises:
            ValueError: If TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID is missing
        """
        bot_token = os.getenv("TELEGRAM_BOT_TOKEN", "")
        chat_id = os.getenv("TELEGRAM_CHAT_ID", "")
        if not bot_token:
            raise ValueError("TELEGRAM_BOT_TOKEN is required but not set in environment")
        if not chat_id:
            raise ValueError("TELEGRAM_CHAT_ID is required but not set in environment")
        timeout = os.getenv("TELEGRAM_TIMEOUT")
        return cls(
            bot_token=bot_token,
            chat_id=chat_id,
            parse_mode=os.getenv("TELEGRAM_PARSE_MODE") or None,
            timeout=float(timeout) if timeout else None,
        )


def load_config(path: str | Path) -> TeleloggerConfig:
    """Load a config from YAML, filling empty credentials from the environment.

    The file may put the settings under a ``telegram:`` key or at top level.
    A ``.env`` next to the file is loaded first.
    """
    path = Path(path)
    env_path = path.parent / ".env"
    load_dotenv(env_path, override=True)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise RuntimeError(f"Invalid config: expected a mapping in {path}")
    section = dict(data.get("telegram", data) or {})
    # If YAML has empty/placeholder values, fill from env
    if not section.get("bot_token"):
        section["bot_token"] = os.getenv("TELEGRAM_BOT_TOKEN", "")
    if section.get("chat_id") in (None, ""):
        section["chat_id"] = os.getenv("TELEGRAM_CHAT_ID", "")
    if not section.get("parse_mode"):
        section["parse_mode"] = os.getenv("TELEGRAM_PARSE_MODE") or None
    if section.get("timeout") is None and os.getenv("TELEGRAM_TIMEOUT"):
        section["timeout"] = os.getenv("TELEGRAM_TIMEOUT")
    try:
        return TeleloggerConfig(**section)
    except ValidationError as e:
        raise RuntimeError(f"Invalid config: {e}") from e
