"""Default per-category message formatters."""
from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Mapping

Formatter = Callable[[str], str]


def base_info_format(msg: str) -> str:
    return f"ℹ️ Info:\n{msg}"


def base_error_format(msg: str) -> str:
    return f"❌ Error:\n{msg}"


def base_success_format(msg: str) -> str:
    return f"✅ Success:\n{msg}"


def base_warn_format(msg: str) -> str:
    return f"🚨 Warning:\n{msg}"


# config field name -> built-in formatter
DEFAULT_FORMATTERS: Mapping[str, Formatter] = MappingProxyType(
    {
        "info_formatter": base_info_format,
        "error_formatter": base_error_format,
        "success_formatter": base_success_format,
        "warn_formatter": base_warn_format,
    }
)
