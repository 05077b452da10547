"""Exceptions raised while turning a menu feed into a Menu."""

from typing import Optional

SNIPPET_LIMIT = 200


class MenuParsingError(Exception):
    """
    Base exception for every failure of the feed-to-menu pipeline.

    Attributes:
        message: Error description
        snippet: The input fragment that failed to parse
        original_error: The underlying library error, if any
    """

    def __init__(
        self,
        message: str,
        snippet: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.snippet = snippet
        self.original_error = original_error

        parts = [message]

        if snippet:
            # Truncate snippet if too long
            shown = snippet[:SNIPPET_LIMIT] + "..." if len(snippet) > SNIPPET_LIMIT else snippet
            parts.append(f"\nInput:\n{shown}")

        if original_error:
            parts.append(f"\nOriginal error: {original_error}")

        super().__init__("\n".join(parts))


class FeedParseError(MenuParsingError):
    """Input is not a recognisable Atom/RSS document."""


class UnexpectedFeedFormat(MenuParsingError):
    """A required feed or entry field (title, updated, content) is missing."""


class CouldNotExtractDateFromId(MenuParsingError):
    """Entry id has no '/'-delimited segment to read a date from."""


class CouldNotParseMenuDate(MenuParsingError):
    """The date segment of an entry id is not a valid YY-MM-DD date."""


class CouldNotParseHtml(MenuParsingError):
    """Entry content could not be parsed as HTML."""


class UnexpectedHtmlFormat(MenuParsingError):
    """
    Entry HTML does not have the heading/list shape.

    Raised when a heading has no nested text, a list item lacks its name or
    price child, or a list holds something other than list items.
    """


class CouldNotParsePrice(MenuParsingError):
    """Price string is not of the form '<student> EUR - <general> EUR'."""
