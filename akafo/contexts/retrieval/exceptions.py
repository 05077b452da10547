"""Exceptions for the retrieval context."""

from typing import Optional


class FeedRetrievalError(Exception):
    """
    Exception raised when the feed cannot be downloaded.

    Attributes:
        message: Error description
        url: Feed URL that was requested
        original_error: The underlying requests error
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.url = url
        self.original_error = original_error

        parts = [message]

        if url:
            parts.append(f"URL: {url}")

        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
