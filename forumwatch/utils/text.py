import re

RE_WHITESPACE = re.compile(r"\s+")


def squash_spaces(s: str) -> str:
    """Collapse every run of whitespace (newlines and tabs included) to one space."""
    return RE_WHITESPACE.sub(" ", s or "").strip()


def utf16_len(s: str) -> int:
    """Length in UTF-16 code units, the unit Telegram counts message limits in."""
    return len((s or "").encode("utf-16-le")) // 2


def _cut(s: str, units: int) -> str:
    used = 0
    for i, ch in enumerate(s):
        used += 2 if ord(ch) > 0xFFFF else 1
        if used > units:
            return s[:i]
    return s


def truncate(s: str, limit: int, ellipsis: str = "…") -> str:
    """Shorten s to at most limit UTF-16 units, never splitting a character."""
    if limit <= 0:
        return ""
    if utf16_len(s) <= limit:
        return s
    room = limit - utf16_len(ellipsis)
    if room <= 0:
        return _cut(s, limit)
    return _cut(s, room).rstrip() + ellipsis
