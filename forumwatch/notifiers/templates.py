"""
Message rendering for forumwatch notifications.


Public API:
- render_message(post: PostDetail, url: str, limit: int = TELEGRAM_MAX_MESSAGE) -> str


The message is three labeled lines: title, link, and post content. Lengths
are counted in UTF-16 units. An oversized title is shortened first so that
the content line keeps at least MIN_BODY_UNITS of body (or the placeholder);
the link is only cut when it alone would not fit.
"""
from __future__ import annotations

from ..config import NO_CONTENT_PLACEHOLDER, TELEGRAM_MAX_MESSAGE
from ..utils.text import truncate, utf16_len
from ..watchers.base import PostDetail

TITLE_LABEL = "标题"
LINK_LABEL = "链接"
CONTENT_LABEL = "帖子内容"

TEMPLATE = TITLE_LABEL + ": {title}\n" + LINK_LABEL + ": {url}\n" + CONTENT_LABEL + ": {body}"

MIN_BODY_UNITS = 200


def render_message(post: PostDetail, url: str, limit: int = TELEGRAM_MAX_MESSAGE) -> str:
    """Render the notification text for one new thread."""
    title = (post.title or "").strip()
    body = (post.body or "").strip() or NO_CONTENT_PLACEHOLDER

    labels = utf16_len(TEMPLATE.format(title="", url="", body=""))
    url = truncate(url, limit - labels - utf16_len(NO_CONTENT_PLACEHOLDER))
    floor = min(utf16_len(body), MIN_BODY_UNITS)
    title = truncate(title, limit - labels - utf16_len(url) - floor)

    head = TEMPLATE.format(title=title, url=url, body="")
    body = truncate(body, limit - utf16_len(head)) or NO_CONTENT_PLACEHOLDER
    return head + body
