# forumwatch/parsers/extract.py
# Selector-based extraction for the forum listing page and thread pages.
#
# Public API:
#   extract_newest_link(markup, base_url) -> CandidateItem | None
#   extract_post(markup) -> PostDetail
#   locate_first(doc, selector) -> Tag | None
#
# A selector that matches nothing is never an error; only markup that cannot
# be parsed at all raises ParseError.
#
# Dependencies: beautifulsoup4, lxml

from __future__ import annotations
import logging
from typing import Optional, Union
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from ..config import NO_CONTENT_PLACEHOLDER
from ..errors import ParseError
from ..utils.text import squash_spaces
from ..watchers.base import CandidateItem, PostDetail

LOG = logging.getLogger("forumwatch")

Markup = Union[str, bytes]

# ------------------------------ Selectors ------------------------------
LISTING_ITEM_SELECTOR = "a.th_item"
TITLE_SELECTOR = "#myshares a"
MESSAGE_SELECTOR = ".message"


def parse_document(markup: Markup) -> BeautifulSoup:
    if markup is None:
        raise ParseError("no markup to parse")
    try:
        return BeautifulSoup(markup, "lxml")
    except Exception as e:
        raise ParseError(f"unparseable markup: {e}") from e


def locate_first(doc: BeautifulSoup, selector: str) -> Optional[Tag]:
    """First element matching the CSS selector in document order, or None."""
    return doc.select_one(selector)


def extract_newest_link(markup: Markup, base_url: str) -> Optional[CandidateItem]:
    doc = parse_document(markup)
    first = locate_first(doc, LISTING_ITEM_SELECTOR)
    if first is None:
        return None
    href = (first.get("href") or "").strip()
    if not href:
        LOG.debug("First %s on %s has no href", LISTING_ITEM_SELECTOR, base_url)
        return None
    # urljoin leaves absolute hrefs untouched
    return CandidateItem(url=urljoin(base_url, href), label=squash_spaces(first.get_text()))


def extract_post(markup: Markup) -> PostDetail:
    doc = parse_document(markup)

    title_el = locate_first(doc, TITLE_SELECTOR)
    title = title_el.get_text().strip() if title_el is not None else ""

    body_el = locate_first(doc, MESSAGE_SELECTOR)
    body = squash_spaces(body_el.get_text()) if body_el is not None else ""

    return PostDetail(title=title, body=body or NO_CONTENT_PLACEHOLDER)
