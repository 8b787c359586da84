# forumwatch/utils/state.py
# In-memory record of the last notified listing item. Lives as long as the
# Monitor that owns it; nothing is written to disk.

from __future__ import annotations
import logging
from typing import Optional

LOG = logging.getLogger("forumwatch")


class MonitorState:
    """Last notified URL, or None before the first notification.

    None never equals a real URL, so the first candidate seen is always new.
    """

    def __init__(self, last_notified_url: Optional[str] = None):
        self._last: Optional[str] = last_notified_url or None

    @property
    def last_notified_url(self) -> Optional[str]:
        return self._last

    def is_new(self, url: str) -> bool:
        return bool(url) and url != self._last

    def mark_notified(self, url: str) -> None:
        if not url:
            raise ValueError("cannot mark an empty url as notified")
        if url != self._last:
            LOG.debug("Last notified URL %s -> %s", self._last, url)
        self._last = url

    def __repr__(self) -> str:
        return f"MonitorState(last_notified_url={self._last!r})"
