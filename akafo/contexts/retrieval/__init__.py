"""
Retrieval Context

Responsibilities:
- Downloads the raw menu feed over HTTP
- Hands the text to the Parsing context

Owns: Network access, timeouts
Never: Interprets feed content
"""

from akafo.contexts.retrieval.exceptions import FeedRetrievalError
from akafo.contexts.retrieval.fetcher import fetch_feed, parse_from_uri

__all__ = ["fetch_feed", "parse_from_uri", "FeedRetrievalError"]
