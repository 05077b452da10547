"""
Shared fixtures for akafo tests.
"""

from html import escape
from pathlib import Path

import pytest
from loguru import logger

FIXTURES_PATH = Path(__file__).parent / "fixtures"

ENTRY_ID_PREFIX = (
    "https://www.akafoe.de/gastronomie/speiseplaene-der-mensen/ruhr-universitaet-bochum"
)


def make_entry(
    date_segment: str = "23-01-15",
    html: str = "<div></div>",
    title: str = "Speiseplan",
    updated: str = "2023-01-15T06:00:00Z",
    entry_id: str = None,
) -> str:
    """Atom <entry> whose content is the given HTML fragment."""
    entry_id = entry_id if entry_id is not None else f"{ENTRY_ID_PREFIX}/{date_segment}"
    parts = [f"<id>{entry_id}</id>"]
    if title is not None:
        parts.append(f"<title>{title}</title>")
    if updated is not None:
        parts.append(f"<updated>{updated}</updated>")
    if html is not None:
        parts.append(f'<content type="html">{escape(html)}</content>')
    return "<entry>" + "".join(parts) + "</entry>"


def make_feed(
    entries=(),
    title: str = "Mensa der Ruhr-Universität Bochum",
    updated: str = "2023-01-15T06:00:00Z",
) -> str:
    """Atom document wrapping the given <entry> strings."""
    parts = ['<?xml version="1.0" encoding="utf-8"?>', '<feed xmlns="http://www.w3.org/2005/Atom">']
    if title is not None:
        parts.append(f"<title>{title}</title>")
    parts.append(f"<id>{ENTRY_ID_PREFIX}</id>")
    if updated is not None:
        parts.append(f"<updated>{updated}</updated>")
    parts.extend(entries)
    parts.append("</feed>")
    return "\n".join(parts)


@pytest.fixture
def menu_feed_text():
    """The two-day fixture feed as text."""
    return (FIXTURES_PATH / "menu_feed.xml").read_text(encoding="utf-8")


@pytest.fixture
def schnitzel_feed_text():
    """One day, one heading, one meal."""
    html = (
        "<div><p><strong>Tagesgericht</strong></p>"
        "<ul><li>Schnitzel (S) (1,3)<br/>3,50 EUR - 5,00 EUR</li></ul></div>"
    )
    return make_feed([make_entry("23-01-15", html)])


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks a test may have added (e.g. via setup_session_logger)."""
    yield
    logger.remove()


@pytest.fixture
def build_feed():
    """Factory for synthetic Atom feeds: build_feed(entries, title=..., updated=...)."""
    return make_feed


@pytest.fixture
def build_entry():
    """Factory for synthetic Atom entries: build_entry(date_segment, html, ...)."""
    return make_entry
