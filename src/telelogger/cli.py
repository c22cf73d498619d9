import argparse
import logging
import sys

from dotenv import load_dotenv

from telelogger.config import TeleloggerConfig, load_config
from telelogger.errors import TeleloggerError
from telelogger.models import ParseMode
from telelogger.notifier import Telelogger

logger = logging.getLogger(__name__)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Send a message to Telegram through a bot")
    parser.add_argument("command", choices=["info", "error", "success", "warn", "log"], help="message category; log sends the text unformatted")
    parser.add_argument("message", help="Message text")
    parser.add_argument("--config", default=None, help="Path to YAML config file (defaults to TELEGRAM_* environment variables)")
    parser.add_argument("--parse-mode", choices=[m.value for m in ParseMode], default=None, help="Override the configured parse mode")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )

    try:
        if args.config:
            config = load_config(args.config)
        else:
            load_dotenv()
            config = TeleloggerConfig.from_env()
    except (RuntimeError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(2)

    overrides = {}
    if args.parse_mode:
        overrides["parse_mode"] = ParseMode(args.parse_mode)
    if args.timeout is not None:
        overrides["timeout"] = args.timeout
    if overrides:
        config = config.model_copy(update=overrides)

    telelogger = Telelogger(config)
    senders = {
        "info": telelogger.log_info,
        "error": telelogger.log_error,
        "success": telelogger.log_success,
        "warn": telelogger.log_warn,
        "log": telelogger.log,
    }
    try:
        senders[args.command](args.message)
    except TeleloggerError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        telelogger.close()
    logger.info(f"Sent {args.command} message to chat {config.chat_id}")
    sys.exit(0)


if __name__ == "__main__":
    main()
