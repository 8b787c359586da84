# forumwatch/net.py
# Page fetcher: one GET per call, bounded timeout, no retries. The monitor
# treats the next poll cycle as the retry.
import logging
from typing import Optional, Tuple

import requests

from .config import BROWSER_UA, HTTP_TIMEOUT
from .errors import FetchError

logger = logging.getLogger(__name__)


def make_session() -> requests.Session:
    s = requests.Session()
    s.headers.update({
        "User-Agent": BROWSER_UA,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "zh-CN,zh;q=0.9,en;q=0.8",
        "Connection": "keep-alive",
    })
    return s


def fetch(url: str, session: Optional[requests.Session] = None,
          timeout: Tuple[float, float] = HTTP_TIMEOUT) -> bytes:
    """
    GET url and return the raw body bytes.
    Raises FetchError on transport failure or a non-2xx status.
    """
    if session is None:
        with make_session() as s:
            return fetch(url, session=s, timeout=timeout)
    try:
        r = session.get(url, timeout=timeout, allow_redirects=True)
    except requests.RequestException as e:
        raise FetchError(url, str(e) or e.__class__.__name__) from e
    # any non-2xx is a failure, unfollowed 3xx included
    if not 200 <= r.status_code < 300:
        raise FetchError(url, r.reason or "HTTP error", status_code=r.status_code)
    logger.debug("Fetched %s (%d bytes)", url, len(r.content))
    return r.content


class PageFetcher:
    """Callable fetcher that reuses one session across poll cycles."""

    def __init__(self, session: Optional[requests.Session] = None,
                 timeout: Tuple[float, float] = HTTP_TIMEOUT):
        self.session = session or make_session()
        self.timeout = timeout

    def __call__(self, url: str) -> bytes:
        return fetch(url, session=self.session, timeout=self.timeout)

    def close(self) -> None:
        self.session.close()
