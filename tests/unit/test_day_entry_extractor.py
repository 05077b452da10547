"""Unit tests for date derivation and MenuDay construction."""

from datetime import date, datetime, timezone

import pytest

from akafo.contexts.parsing.day_entry_extractor import date_from_entry_id, extract_menu_day
from akafo.contexts.parsing.exceptions import (
    CouldNotExtractDateFromId,
    CouldNotParseMenuDate,
    UnexpectedFeedFormat,
)
from akafo.contexts.parsing.feed_data_structure import FeedEntry

UPDATED = datetime(2023, 1, 15, 5, 0, tzinfo=timezone.utc)
HTML = (
    "<div><p><strong>Tagesgericht</strong></p>"
    "<ul><li>Schnitzel (S) (1,3)<br/>3,50 EUR - 5,00 EUR</li></ul></div>"
)


@pytest.mark.unit
class TestDateFromEntryId:
    """Tests for date_from_entry_id function."""

    def test_last_segment_is_date(self):
        assert date_from_entry_id("https://example.org/mensa/23-01-15") == date(2023, 1, 15)

    def test_id_without_separator(self):
        assert date_from_entry_id("23-12-24") == date(2023, 12, 24)

    def test_trailing_separator_fails(self):
        with pytest.raises(CouldNotExtractDateFromId):
            date_from_entry_id("https://example.org/mensa/")

    def test_empty_id_fails(self):
        with pytest.raises(CouldNotExtractDateFromId):
            date_from_entry_id("")

    def test_non_date_segment_fails(self):
        with pytest.raises(CouldNotParseMenuDate):
            date_from_entry_id("https://example.org/mensa/today")

    def test_invalid_calendar_date_fails(self):
        with pytest.raises(CouldNotParseMenuDate) as exc_info:
            date_from_entry_id("https://example.org/mensa/23-02-30")

        assert isinstance(exc_info.value.original_error, ValueError)

    def test_four_digit_year_is_not_supported(self):
        """'20' is always prefixed, so a full year becomes six digits."""
        with pytest.raises(CouldNotParseMenuDate):
            date_from_entry_id("https://example.org/mensa/2023-01-15")


@pytest.mark.unit
class TestExtractMenuDay:
    """Tests for extract_menu_day function."""

    def test_builds_menu_day(self):
        entry = FeedEntry(
            id="https://example.org/mensa/23-01-15",
            title="Speiseplan",
            updated=UPDATED,
            content=HTML,
        )

        menu_day = extract_menu_day(entry)

        assert menu_day.id == entry.id
        assert menu_day.date == date(2023, 1, 15)
        assert menu_day.title == "Speiseplan"
        assert menu_day.updated == UPDATED
        assert [group.title for group in menu_day.meal_groups] == ["Tagesgericht"]

    @pytest.mark.parametrize("missing", ["title", "updated", "content"])
    def test_missing_field_fails(self, missing):
        fields = {
            "id": "https://example.org/mensa/23-01-15",
            "title": "Speiseplan",
            "updated": UPDATED,
            "content": HTML,
        }
        fields[missing] = None

        with pytest.raises(UnexpectedFeedFormat):
            extract_menu_day(FeedEntry(**fields))
