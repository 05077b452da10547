"""
Parsing Context

Responsibilities:
- Parses the raw Atom/RSS menu feed into generic feed records
- Derives each day's date from its entry id
- Parses embedded HTML into meal groups and meals
- Extracts dietary/additive tags and dual prices from meal text

Owns: Menu data model, feed/HTML/tag/price parsing
Never: Fetches feeds, formats output, or persists anything
"""

from akafo.contexts.parsing.exceptions import (
    CouldNotExtractDateFromId,
    CouldNotParseHtml,
    CouldNotParseMenuDate,
    CouldNotParsePrice,
    FeedParseError,
    MenuParsingError,
    UnexpectedFeedFormat,
    UnexpectedHtmlFormat,
)
from akafo.contexts.parsing.feed_parser import parse_feed, parse_menu
from akafo.contexts.parsing.menu_data_structure import (
    Meal,
    MealAdditive,
    MealGroup,
    MealInformation,
    Menu,
    MenuDay,
)

__all__ = [
    # Entry points
    "parse_feed",
    "parse_menu",
    # Data structure classes
    "Menu",
    "MenuDay",
    "MealGroup",
    "Meal",
    "MealInformation",
    "MealAdditive",
    # Errors
    "MenuParsingError",
    "FeedParseError",
    "UnexpectedFeedFormat",
    "CouldNotExtractDateFromId",
    "CouldNotParseMenuDate",
    "CouldNotParseHtml",
    "UnexpectedHtmlFormat",
    "CouldNotParsePrice",
]
