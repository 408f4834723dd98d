"""
Tests for site-config template filters.
"""
import re
from datetime import date, datetime, timedelta, timezone as dt_timezone

import pytest
from django.utils import timezone, translation
from django.utils.dates import MONTHS_ALT

from site_config.filters import (
    html_date_string,
    make_date_filters,
    post_tags,
    readable_date,
    reversed_tags,
)


def parse_readable_date(value, locale):
    """Parse "DD Month YYYY" back into a date."""
    day, month, year = value.split(" ")
    with translation.override(translation.to_language(locale)):
        months = {str(name): number for number, name in MONTHS_ALT.items()}
    return date(int(year), months[month], int(day))


class TestReadableDate:
    """Tests for the readableDate filter."""

    def test_ukrainian_default(self):
        """Test the default locale uses genitive Ukrainian month names."""
        assert readable_date(date(2024, 3, 5)) == "05 березня 2024"

    def test_explicit_locale(self):
        """Test formatting with another locale."""
        assert readable_date(date(2024, 3, 5), "en-US") == "05 March 2024"

    def test_unknown_locale_falls_back(self):
        """Test an unknown locale degrades to the default month names."""
        assert readable_date(date(2024, 12, 31), "xx-XX") == "31 December 2024"

    def test_does_not_change_active_language(self):
        """Test the locale only applies while formatting."""
        with translation.override("en"):
            readable_date(date(2024, 3, 5))
            assert translation.get_language() == "en"

    @pytest.mark.parametrize(
        "value",
        [date(2024, 1, 1), date(2024, 2, 29), date(1999, 11, 30), date(2031, 12, 9)],
    )
    def test_round_trip(self, value):
        """Test the output refers to the same calendar date."""
        assert parse_readable_date(readable_date(value), "uk-UA") == value

    def test_datetime(self):
        """Test datetimes are formatted by their calendar date."""
        assert readable_date(datetime(2024, 1, 15, 18, 45)) == "15 січня 2024"

    def test_empty_value(self):
        """Test empty values render as an empty string."""
        assert readable_date(None) == ""
        assert readable_date("") == ""

    def test_make_date_filters_binds_locale(self):
        """Test the filter factory closes over the locale."""
        date_filters = make_date_filters("en-US")
        assert set(date_filters) == {"readableDate", "htmlDateString"}
        assert date_filters["readableDate"](date(2024, 3, 5)) == "05 March 2024"


class TestHtmlDateString:
    """Tests for the htmlDateString filter."""

    def test_format(self):
        """Test the YYYY-MM-DD format."""
        assert html_date_string(date(2024, 3, 5)) == "2024-03-05"

    @pytest.mark.parametrize(
        "value",
        [date(2024, 1, 1), date(2024, 2, 29), date(1999, 11, 30), datetime(2031, 12, 9, 8, 0)],
    )
    def test_shape(self, value):
        """Test the output is always a 10 character date string."""
        result = html_date_string(value)
        assert len(result) == 10
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}", result)

    def test_locale_independent(self):
        """Test the active language does not change the output."""
        with translation.override("uk"):
            assert html_date_string(date(2024, 3, 5)) == "2024-03-05"

    def test_aware_datetime_uses_current_timezone(self):
        """Test aware datetimes are converted to local time first."""
        value = datetime(2024, 3, 4, 23, 30, tzinfo=dt_timezone.utc)
        with timezone.override(dt_timezone(timedelta(hours=2))):
            assert html_date_string(value) == "2024-03-05"
            assert readable_date(value) == "05 березня 2024"

    def test_empty_value(self):
        """Test empty values render as an empty string."""
        assert html_date_string(None) == ""


class TestReversedTags:
    """Tests for the reversed filter."""

    def test_reverse(self):
        assert reversed_tags(["a", "b", "c"]) == ["c", "b", "a"]

    def test_empty_and_single(self):
        assert reversed_tags([]) == []
        assert reversed_tags(["x"]) == ["x"]

    def test_input_not_mutated(self):
        """Test a new list is returned and the input is left alone."""
        tags = ["a", "b", "c"]
        result = reversed_tags(tags)
        assert tags == ["a", "b", "c"]
        assert result is not tags

    def test_none(self):
        assert reversed_tags(None) == []


class TestPostTags:
    """Tests for the postTags filter."""

    def test_removes_post(self):
        assert post_tags(["post", "go", "rust"]) == ["go", "rust"]

    def test_none(self):
        """Test a missing tag list is treated as empty."""
        assert post_tags(None) == []

    def test_no_excluded_tag(self):
        assert post_tags(["go"]) == ["go"]

    def test_keeps_order_and_removes_every_occurrence(self):
        assert post_tags(["rust", "post", "go", "post"]) == ["rust", "go"]

    def test_input_not_mutated(self):
        tags = ["post", "go"]
        post_tags(tags)
        assert tags == ["post", "go"]

    def test_tuple_input(self):
        assert post_tags(("go", "post")) == ["go"]
