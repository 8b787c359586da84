# forumwatch/monitor.py
# Poll the listing page → pick the newest thread → enrich it → notify once.
#
# One sequential loop. MonitorState is the only thing that survives a cycle
# and only this loop touches it. Delivery is at-most-once: the candidate is
# marked seen before the notifier result is known, so a failed send is
# logged and never retried.

from __future__ import annotations
import enum
import threading
import time
from typing import Callable, Optional

from .config import NO_CONTENT_PLACEHOLDER
from .errors import FetchError, NotifyError, ParseError
from .net import PageFetcher
from .notifiers.templates import render_message
from .parsers.extract import extract_newest_link, extract_post
from .utils.log import get_logger
from .utils.state import MonitorState
from .watchers.base import CandidateItem, ListingSnapshot, PostDetail, WatchTarget

logger = get_logger("forumwatch")

Fetcher = Callable[[str], bytes]
LinkExtractor = Callable[[bytes, str], Optional[CandidateItem]]
PostExtractor = Callable[[bytes], PostDetail]


class CycleOutcome(enum.Enum):
    FETCH_FAILED = "fetch_failed"
    PARSE_FAILED = "parse_failed"
    NO_CANDIDATE = "no_candidate"
    NO_CHANGE = "no_change"
    NOTIFIED = "notified"
    NOTIFY_FAILED = "notify_failed"


class Monitor:
    def __init__(
        self,
        target: WatchTarget,
        notifier,
        state: Optional[MonitorState] = None,
        fetcher: Optional[Fetcher] = None,
        link_extractor: LinkExtractor = extract_newest_link,
        post_extractor: PostExtractor = extract_post,
        clock: Callable[[], float] = time.time,
    ):
        self.target = target
        self.notifier = notifier
        self.state = state if state is not None else MonitorState()
        self.fetcher = fetcher or PageFetcher()
        self.link_extractor = link_extractor
        self.post_extractor = post_extractor
        self.clock = clock

    # ----------------------------- cycle -----------------------------

    def run_cycle(self) -> CycleOutcome:
        url = self.target.listing_url
        try:
            snapshot = ListingSnapshot(url=url, body=self.fetcher(url), fetched_at=self.clock())
        except FetchError as e:
            logger.error("Listing fetch failed for %s: %s", url, e)
            return CycleOutcome.FETCH_FAILED

        try:
            candidate = self.link_extractor(snapshot.body, snapshot.url)
        except ParseError as e:
            logger.error("Listing parse failed for %s: %s", url, e)
            return CycleOutcome.PARSE_FAILED

        if candidate is None or not candidate.url:
            logger.debug("No listing item found on %s", url)
            return CycleOutcome.NO_CANDIDATE

        if not self.state.is_new(candidate.url):
            logger.debug("Already notified: %s", candidate.url)
            return CycleOutcome.NO_CHANGE

        return self._notify_new_item(candidate)

    def _enrich(self, candidate: CandidateItem) -> PostDetail:
        try:
            markup = self.fetcher(candidate.url)
        except FetchError as e:
            logger.warning("Post fetch failed for %s: %s", candidate.url, e)
            return PostDetail(title="", body=NO_CONTENT_PLACEHOLDER)
        try:
            return self.post_extractor(markup)
        except ParseError as e:
            logger.warning("Post parse failed for %s: %s", candidate.url, e)
            return PostDetail(title="", body=NO_CONTENT_PLACEHOLDER)

    def _notify_new_item(self, candidate: CandidateItem) -> CycleOutcome:
        logger.info("New thread: %s (%s)", candidate.url, candidate.label or "no label")
        post = self._enrich(candidate)
        message = render_message(post, candidate.url)

        self.state.mark_notified(candidate.url)
        try:
            self.notifier.notify(self.target.recipient, message)
        except NotifyError as e:
            logger.error("Notification failed for %s: %s", candidate.url, e)
            return CycleOutcome.NOTIFY_FAILED

        logger.info("Notification sent for %s:\n%s", candidate.url, message)
        return CycleOutcome.NOTIFIED

    # ------------------------------ loop ------------------------------

    def run(self, stop: Optional[threading.Event] = None, max_cycles: Optional[int] = None) -> int:
        """Run cycles until stop is set (or max_cycles ran). Returns cycles run."""
        stop = stop or threading.Event()
        cycles = 0
        logger.info("Watching %s every %ss", self.target.listing_url, self.target.interval)
        while not stop.is_set():
            try:
                outcome = self.run_cycle()
                logger.debug("Cycle %d: %s", cycles + 1, outcome.value)
            except Exception:
                logger.exception("Cycle %d raised; continuing", cycles + 1)
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            stop.wait(self.target.interval)
        logger.info("Monitor stopped after %d cycle(s)", cycles)
        return cycles
