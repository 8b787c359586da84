# forumwatch/main.py
# Entry point: validate credentials → build the monitor → poll until signalled.

from __future__ import annotations
import argparse
import signal
import threading
from typing import Dict, List, Optional

from . import config
from .errors import ConfigError
from .monitor import Monitor
from .net import PageFetcher
from .notifiers.telegram import TelegramNotifier
from .utils.log import get_logger, set_level
from .watchers.base import WatchTarget

logger = get_logger("forumwatch")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="forumwatch",
        description="Watch a forum listing page and relay new threads to Telegram.",
    )
    p.add_argument("--token", default=config.TELEGRAM_BOT_TOKEN,
                   help="Telegram Bot API token (env TELEGRAM_BOT_TOKEN)")
    p.add_argument("--chat-id", "--chatid", dest="chat_id", default=config.TELEGRAM_CHAT_ID,
                   help="Telegram chat id (env TELEGRAM_CHAT_ID)")
    p.add_argument("--once", action="store_true", help="run a single poll cycle and exit")
    p.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    return p.parse_args(argv)


def build_monitor(token: str, chat_id: str) -> Monitor:
    """Raises ConfigError before anything touches the network."""
    target = WatchTarget(
        listing_url=config.LISTING_URL,
        interval=config.POLL_SECONDS,
        recipient=(chat_id or "").strip(),
    )
    notifier = TelegramNotifier(token)
    return Monitor(target, notifier, fetcher=PageFetcher())


def _install_signal_handlers(stop: threading.Event) -> Dict[int, object]:
    def _handle(signum, _frame):
        logger.info("Received signal %s; stopping after the current cycle.", signum)
        stop.set()

    previous = {}
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            previous[sig] = signal.signal(sig, _handle)
        except (ValueError, OSError):
            # not on the main thread, or unsupported on this platform
            logger.debug("Could not install handler for %s", sig)
    return previous


def _restore_signal_handlers(previous: Dict[int, object]) -> None:
    for sig, handler in previous.items():
        if handler is not None:
            signal.signal(sig, handler)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    if args.log_level:
        set_level(args.log_level)

    try:
        monitor = build_monitor(args.token, args.chat_id)
    except ConfigError as e:
        logger.error("Refusing to start: %s. Provide --token and --chat-id.", e)
        return 2

    stop = threading.Event()
    previous = _install_signal_handlers(stop)
    try:
        monitor.run(stop, max_cycles=1 if args.once else None)
    finally:
        _restore_signal_handlers(previous)
        monitor.fetcher.close()
        monitor.notifier.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
