# forumwatch/errors.py
# Exceptions raised at the collaborator boundaries and caught by the monitor.

from __future__ import annotations
from typing import Optional


class ForumWatchError(Exception):
    """Base class for forumwatch errors."""


class ConfigError(ForumWatchError):
    """Required startup configuration is missing or invalid."""


class FetchError(ForumWatchError):
    def __init__(self, url: str, detail: str, status_code: Optional[int] = None):
        self.url = url
        self.detail = detail
        self.status_code = status_code
        msg = f"{url}: {detail}"
        if status_code is not None:
            msg = f"{msg} (HTTP {status_code})"
        super().__init__(msg)


class ParseError(ForumWatchError):
    """Markup could not be parsed into a document at all."""


class NotifyError(ForumWatchError):
    def __init__(self, detail: str, status_code: Optional[int] = None):
        self.detail = detail
        self.status_code = status_code
        msg = detail if status_code is None else f"{detail} (HTTP {status_code})"
        super().__init__(msg)
