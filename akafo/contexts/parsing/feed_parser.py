"""
Feed parsing entry points for the Parsing context.

parse_feed() reads raw Atom/RSS text into generic feed records;
parse_menu() folds day_entry_extractor over every entry to build a Menu.

The text is always handed to feedparser as an in-memory stream, so nothing
here ever touches the network or the filesystem.
"""

import io
from datetime import datetime
from typing import Optional, Union

import feedparser

from akafo.contexts.parsing.day_entry_extractor import extract_menu_day
from akafo.contexts.parsing.exceptions import FeedParseError, UnexpectedFeedFormat
from akafo.contexts.parsing.feed_data_structure import FeedEntry, ParsedFeed
from akafo.contexts.parsing.logger import _log_debug
from akafo.contexts.parsing.menu_data_structure import Menu
from akafo.contexts.parsing.tag_patterns import FeedPatterns
from akafo.utils.timestamp import from_struct_time


def _is_rss(version: str) -> bool:
    return version.startswith(FeedPatterns.RSS_VERSION_PREFIX)


def _entry_content(entry, is_rss: bool) -> Optional[str]:
    """HTML body of an entry: Atom content, or the description of an RSS item."""
    contents = entry.get("content")
    if contents:
        return contents[0].get("value")
    if is_rss:
        return entry.get("summary")
    return None


def _updated(record, is_rss: bool) -> Optional[datetime]:
    """
    Last-modified timestamp of a feed or entry.

    RSS items usually only carry pubDate, so RSS falls back to the published
    date. dict.get bypasses feedparser's deprecated updated -> published alias.
    """
    parsed = dict.get(record, "updated_parsed")
    if parsed is None and is_rss:
        parsed = dict.get(record, "published_parsed")
    return from_struct_time(parsed)


def parse_feed(text: Union[str, bytes]) -> ParsedFeed:
    """
    Parse raw feed text into a ParsedFeed.

    Args:
        text: Atom/RSS document (str, or UTF-8 bytes)

    Returns:
        ParsedFeed with entries in document order

    Raises:
        FeedParseError: If the text is not a recognisable syndication document
    """
    data = text.encode("utf-8") if isinstance(text, str) else text
    result = feedparser.parse(io.BytesIO(data))

    if not result.get("version"):
        error = result.get("bozo_exception")
        raise FeedParseError(
            "Input is not an Atom/RSS feed",
            snippet=data.decode("utf-8", errors="replace"),
            original_error=error,
        )

    is_rss = _is_rss(result.version)
    entries = tuple(
        FeedEntry(
            id=entry.get("id", ""),
            title=entry.get("title"),
            updated=_updated(entry, is_rss),
            content=_entry_content(entry, is_rss),
        )
        for entry in result.entries
    )
    _log_debug(f"Read {result.version} feed with {len(entries)} entries")

    return ParsedFeed(
        id=result.feed.get("id", ""),
        title=result.feed.get("title"),
        updated=_updated(result.feed, is_rss),
        entries=entries,
    )


def build_menu(feed: ParsedFeed) -> Menu:
    """
    Build a Menu from parsed feed records.

    Raises:
        UnexpectedFeedFormat: If the feed has no title or updated timestamp
        MenuParsingError: The first failure from any entry (no partial Menu)
    """
    if feed.title is None:
        raise UnexpectedFeedFormat("Feed has no title")
    if feed.updated is None:
        raise UnexpectedFeedFormat("Feed has no updated timestamp")

    day_menus = tuple(extract_menu_day(entry) for entry in feed.entries)

    return Menu(title=feed.title, id=feed.id, updated=feed.updated, day_menus=day_menus)


def parse_menu(text: Union[str, bytes]) -> Menu:
    """
    Parse a cafeteria feed into a Menu.

    Args:
        text: Raw Atom/RSS document

    Returns:
        Menu with one MenuDay per entry, in feed order

    Raises:
        MenuParsingError: Subclass describing the first failure encountered

    Example:
        >>> menu = parse_menu(Path("feed.xml").read_text())
        >>> menu.day_menus[0].meal_groups[0].title
        'Tagesgericht'
    """
    menu = build_menu(parse_feed(text))
    _log_debug(f"Parsed menu '{menu.title}' covering {len(menu.day_menus)} days")
    return menu
