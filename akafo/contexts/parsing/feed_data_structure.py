"""
Generic feed records for the Parsing context.

The intermediate form between raw feed text and Menu: feed_parser.parse_feed()
fills these from feedparser's result, day_entry_extractor consumes them.
Fields the feed does not provide are None.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class FeedEntry:
    """One syndication item, i.e. one day's menu."""

    id: str
    title: Optional[str] = None
    updated: Optional[datetime] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class ParsedFeed:
    """Feed-level metadata plus entries in document order."""

    id: str
    title: Optional[str] = None
    updated: Optional[datetime] = None
    entries: tuple[FeedEntry, ...] = ()
