"""Send formatted log messages to a Telegram chat through the Bot API.

Provides:
  - Telelogger: info/error/success/warn senders funnelled through one
    synchronous sendMessage call
  - TeleloggerConfig: frozen settings with built-in default formatters
  - ParseMode: HTML, Markdown or MarkdownV2 markup
"""

from telelogger.config import TeleloggerConfig, load_config
from telelogger.errors import (
    RemoteRejectionError,
    SerializationError,
    TeleloggerError,
    TransportError,
)
from telelogger.formatters import (
    base_error_format,
    base_info_format,
    base_success_format,
    base_warn_format,
)
from telelogger.models import ParseMode
from telelogger.notifier import Telelogger

__version__ = "0.1.0"

__all__ = [
    "Telelogger",
    "TeleloggerConfig",
    "load_config",
    "ParseMode",
    "TeleloggerError",
    "SerializationError",
    "TransportError",
    "RemoteRejectionError",
    "base_info_format",
    "base_error_format",
    "base_success_format",
    "base_warn_format",
    "__version__",
]
