# forumwatch/notifiers/telegram.py
# Telegram Bot API sink: one synchronous sendMessage call per notification.
import requests

from ..config import DRY_RUN, TELEGRAM_API_BASE, TELEGRAM_TIMEOUT
from ..errors import ConfigError, NotifyError
from ..utils.log import get_logger

logger = get_logger("telegram")

SEND_URL = "{base}/bot{token}/sendMessage"


def _describe(r: requests.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        return r.reason or "Telegram request failed"
    if isinstance(data, dict) and data.get("description"):
        return str(data["description"])
    return r.reason or "Telegram request failed"


class TelegramNotifier:
    def __init__(self, token: str, api_base: str = TELEGRAM_API_BASE,
                 timeout: int = TELEGRAM_TIMEOUT, dry_run: bool = DRY_RUN,
                 session: requests.Session = None):
        if not token or not token.strip():
            raise ConfigError("Telegram bot token is required")
        self._token = token.strip()
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.dry_run = dry_run
        self.session = session or requests.Session()

    @property
    def send_url(self) -> str:
        return SEND_URL.format(base=self.api_base, token=self._token)

    def notify(self, recipient: str, text: str) -> None:
        """
        Send text to the chat identified by recipient.
        Raises NotifyError on transport failure or any non-200 response.
        """
        if self.dry_run:
            logger.info("[DRY RUN] Would send to %s:\n%s", recipient, text)
            return
        data = {"chat_id": recipient, "text": text}
        try:
            r = self.session.post(self.send_url, data=data, timeout=self.timeout)
        except requests.RequestException as e:
            # the token is part of the URL; keep it out of the message
            raise NotifyError(f"Telegram request failed: {e.__class__.__name__}") from e
        if r.status_code != 200:
            raise NotifyError(_describe(r), status_code=r.status_code)

    def close(self) -> None:
        self.session.close()
