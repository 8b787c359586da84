import os

# --------------------------------------------------------------------
# Utility
# --------------------------------------------------------------------
def _bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

# --------------------------------------------------------------------
# Core Runtime Flags
# --------------------------------------------------------------------
DRY_RUN = _bool("DRY_RUN", "false")
POLL_SECONDS = float(os.getenv("POLL_SECONDS", "30"))

# --------------------------------------------------------------------
# Source
# --------------------------------------------------------------------
LISTING_URL = os.getenv(
    "FORUMWATCH_LISTING_URL",
    "https://fishc.com.cn/forum.php?mod=guide&view=newthread&mobile=2",
)

# --------------------------------------------------------------------
# Fetch & Parsing
# --------------------------------------------------------------------
BROWSER_UA = os.getenv(
    "FORUMWATCH_USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36",
)
HTTP_CONNECT_TIMEOUT = float(os.getenv("HTTP_CONNECT_TIMEOUT", "10"))
HTTP_READ_TIMEOUT = float(os.getenv("HTTP_READ_TIMEOUT", "30"))
HTTP_TIMEOUT = (HTTP_CONNECT_TIMEOUT, HTTP_READ_TIMEOUT)  # (connect, read) seconds

NO_CONTENT_PLACEHOLDER = "未找到内容"

# --------------------------------------------------------------------
# Telegram
# --------------------------------------------------------------------
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")
TELEGRAM_CHAT_ID = os.getenv("TELEGRAM_CHAT_ID", "")
TELEGRAM_API_BASE = os.getenv("TELEGRAM_API_BASE", "https://api.telegram.org").rstrip("/")
TELEGRAM_TIMEOUT = int(os.getenv("TELEGRAM_TIMEOUT", "20"))
TELEGRAM_MAX_MESSAGE = 4096
