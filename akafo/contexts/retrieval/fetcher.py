"""
Feed download for the Retrieval context.

Fetches the raw feed text; parse_from_uri() chains the download with
parsing.parse_menu() for callers that just want a Menu from a URL.
"""

import os
from typing import Optional

import requests
from dotenv import load_dotenv

from akafo.contexts.parsing import Menu, parse_menu
from akafo.contexts.retrieval.exceptions import FeedRetrievalError
from akafo.contexts.retrieval.logger import _log_debug, _log_error, _log_info

load_dotenv()
MENU_FEED_TIMEOUT = float(os.getenv("MENU_FEED_TIMEOUT", "30"))

FEED_ENCODING = "utf-8"


def fetch_feed(
    url: str,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """
    Download the feed document.

    Args:
        url: Feed URL
        timeout: Seconds to wait (defaults to MENU_FEED_TIMEOUT env variable)
        session: Optional requests session to reuse connections

    Returns:
        Response body as text (UTF-8 unless the server declares otherwise)

    Raises:
        FeedRetrievalError: On connection errors, timeouts or non-2xx status
    """
    if timeout is None:
        timeout = MENU_FEED_TIMEOUT

    http = session or requests
    _log_info(f"Fetching feed from {url}")

    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        _log_error(f"Feed download failed: {e}")
        raise FeedRetrievalError("Could not download feed", url=url, original_error=e) from e

    # text/xml without charset would otherwise be decoded as ISO-8859-1
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = FEED_ENCODING

    _log_debug(f"Received {len(response.content)} bytes (HTTP {response.status_code})")
    return response.text


def parse_from_uri(
    url: str,
    timeout: Optional[float] = None,
    session: Optional[requests.Session] = None,
) -> Menu:
    """
    Download and parse a menu feed.

    Raises:
        FeedRetrievalError: If the download fails
        MenuParsingError: If the downloaded document cannot be parsed
    """
    return parse_menu(fetch_feed(url, timeout=timeout, session=session))
