"""Turns one feed entry into a MenuDay."""

from datetime import date, datetime

from akafo.contexts.parsing.exceptions import (
    CouldNotExtractDateFromId,
    CouldNotParseMenuDate,
    UnexpectedFeedFormat,
)
from akafo.contexts.parsing.feed_data_structure import FeedEntry
from akafo.contexts.parsing.html_menu_extractor import extract_meal_groups
from akafo.contexts.parsing.menu_data_structure import MenuDay
from akafo.contexts.parsing.tag_patterns import FeedPatterns


def date_from_entry_id(entry_id: str) -> date:
    """
    Derive the menu date from the last path segment of an entry id.

    The segment is a two-digit-year date ("23-01-15") and is read as
    "2023-01-15". Only years 2000-2099 can be expressed this way.

    Args:
        entry_id: e.g. "https://www.akafoe.de/.../mensa/23-01-15"

    Returns:
        Calendar date of the entry

    Raises:
        CouldNotExtractDateFromId: If the id has no final segment
        CouldNotParseMenuDate: If the segment is not a valid date
    """
    segment = entry_id.split(FeedPatterns.ID_SEPARATOR)[-1]
    if not segment:
        raise CouldNotExtractDateFromId("Entry id has no date segment", snippet=entry_id)

    # TODO: two-digit years stop working in 2100; revisit if the feed ever switches to YYYY
    date_text = f"{FeedPatterns.CENTURY_PREFIX}{segment}"
    try:
        return datetime.strptime(date_text, FeedPatterns.DATE_FORMAT).date()
    except ValueError as e:
        raise CouldNotParseMenuDate(
            f"Entry id segment '{segment}' is not a YY-MM-DD date",
            snippet=entry_id,
            original_error=e,
        ) from e


def extract_menu_day(entry: FeedEntry) -> MenuDay:
    """
    Build a MenuDay from a feed entry.

    Args:
        entry: Feed entry with id, title, updated timestamp and HTML content

    Returns:
        MenuDay with its meal groups

    Raises:
        UnexpectedFeedFormat: If title, updated timestamp or content is missing
        MenuParsingError: Any date, HTML or price failure from the entry
    """
    menu_date = date_from_entry_id(entry.id)

    if entry.title is None:
        raise UnexpectedFeedFormat("Entry has no title", snippet=entry.id)
    if entry.updated is None:
        raise UnexpectedFeedFormat("Entry has no updated timestamp", snippet=entry.id)
    if entry.content is None:
        raise UnexpectedFeedFormat("Entry has no content", snippet=entry.id)

    return MenuDay(
        id=entry.id,
        date=menu_date,
        updated=entry.updated,
        title=entry.title,
        meal_groups=extract_meal_groups(entry.content),
    )
