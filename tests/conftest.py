import sys
from pathlib import Path
from unittest import mock

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from telelogger.config import TeleloggerConfig
from telelogger.notifier import Telelogger

# captured before any test patches requests.Session
SESSION_SPEC = requests.Session


def make_session(status_code: int = 200) -> mock.Mock:
    """A stand-in requests.Session whose post() answers with status_code."""
    session = mock.Mock(spec=SESSION_SPEC)
    session.post.return_value = mock.Mock(status_code=status_code)
    return session


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("TELEGRAM_BOT_TOKEN", "TELEGRAM_CHAT_ID", "TELEGRAM_PARSE_MODE", "TELEGRAM_TIMEOUT"):
        # setenv first so values loaded from .env files during the test are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def session() -> mock.Mock:
    return make_session()


@pytest.fixture
def config() -> TeleloggerConfig:
    return TeleloggerConfig(bot_token="T", chat_id=42)


@pytest.fixture
def telelogger(config, session) -> Telelogger:
    return Telelogger(config, session=session)
