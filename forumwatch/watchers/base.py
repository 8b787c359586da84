from dataclasses import dataclass

from ..errors import ConfigError


@dataclass(frozen=True)
class WatchTarget:
    listing_url: str
    interval: float
    recipient: str

    def __post_init__(self):
        if not self.listing_url:
            raise ConfigError("listing_url is required")
        if not self.recipient or not str(self.recipient).strip():
            raise ConfigError("recipient (chat id) is required")
        if self.interval < 0:
            raise ConfigError(f"interval must be >= 0, got {self.interval}")


@dataclass(frozen=True)
class ListingSnapshot:
    url: str
    body: bytes
    fetched_at: float


@dataclass(frozen=True)
class CandidateItem:
    url: str
    label: str = ""


@dataclass(frozen=True)
class PostDetail:
    title: str
    body: str
