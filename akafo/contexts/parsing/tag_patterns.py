"""
Regex patterns and string constants for menu parsing.

Pattern classes follow the same convention throughout the package:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions live in the modules that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# TAG PATTERNS
# =============================================================================


@dataclass(frozen=True)
class TagPatterns:
    """
    Regex patterns for tag groups embedded in meal names.

    Examples:
    - Information codes: "Schnitzel (S,R)" -> "(S,R)"
    - Additive codes: "Cola (12,9)" -> "(12,9)"
    """

    # One to two uppercase letters, comma separated
    INFORMATION_GROUP: re.Pattern = re.compile(r"\([A-Z]{1,2}(?:,[A-Z]{1,2})*\)")

    # One to two digits, comma separated
    ADDITIVE_GROUP: re.Pattern = re.compile(r"\([0-9]{1,2}(?:,[0-9]{1,2})*\)")

    GROUP_DELIMITERS: str = "()"
    CODE_SEPARATOR: str = ","


# =============================================================================
# PRICE PATTERNS
# =============================================================================


@dataclass(frozen=True)
class PricePatterns:
    """
    Tokens of the dual-price string, e.g. "1,20 EUR - 2,00 EUR".
    """

    CURRENCY: str = "EUR"
    DECIMAL_COMMA: str = ","
    PRICE_SEPARATOR: str = "-"

    # One cleaned segment: digits with an optional decimal point, nothing else
    PRICE_VALUE: re.Pattern = re.compile(r"\d+(?:\.\d*)?|\.\d+")


# =============================================================================
# FEED PATTERNS
# =============================================================================


@dataclass(frozen=True)
class FeedPatterns:
    """
    Conventions of the feed entry ids and embedded HTML.

    Entry ids end in a two-digit-year date, e.g. ".../mensa/23-01-15".
    """

    ID_SEPARATOR: str = "/"
    CENTURY_PREFIX: str = "20"
    DATE_FORMAT: str = "%Y-%m-%d"

    HEADING_TAG: str = "p"
    LIST_TAG: str = "ul"
    ITEM_TAG: str = "li"

    # feedparser version strings: "rss20", "rss091u", ... vs "atom10"
    RSS_VERSION_PREFIX: str = "rss"
