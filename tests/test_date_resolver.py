#!/usr/bin/env python3
"""
Tests for relative date resolution.
"""

from datetime import datetime

import pytest

from conftest import TZ
from typesense_query.dates import HumanDateResolver, format_datetime_condition, to_iso
from typesense_query.dates.time_utils import start_of_month, start_of_week, start_of_year
from typesense_query.models import HumanDate


def at(*args):
    return datetime(*args, tzinfo=TZ)


def iso_pair(bounds):
    start, end = bounds
    return to_iso(start), to_iso(end)


class TestCalendarHelpers:
    """Test the week/month/year boundary helpers."""

    def test_start_of_week_defaults_to_monday(self):
        """Friday goes back to Monday midnight."""
        assert start_of_week(at(2024, 3, 15, 10, 30)) == at(2024, 3, 11)

    def test_start_of_week_on_first_weekday(self):
        """A Monday is its own week start."""
        assert start_of_week(at(2024, 3, 11, 23, 59)) == at(2024, 3, 11)

    def test_start_of_week_sunday_with_monday_start(self):
        assert start_of_week(at(2024, 3, 17, 8)) == at(2024, 3, 11)

    def test_start_of_week_custom_first_weekday(self):
        """Sunday-based weeks (weekday index 6)."""
        assert start_of_week(at(2024, 3, 15), first_weekday=6) == at(2024, 3, 10)
        assert start_of_week(at(2024, 3, 10), first_weekday=6) == at(2024, 3, 10)

    def test_start_of_week_crosses_month(self):
        assert start_of_week(at(2024, 3, 1, 12)) == at(2024, 2, 26)

    def test_start_of_month_offsets(self):
        """Month offsets clamp nothing since the day is pinned to 1."""
        assert start_of_month(at(2024, 3, 31, 18)) == at(2024, 3, 1)
        assert start_of_month(at(2024, 3, 31, 18), -1) == at(2024, 2, 1)
        assert start_of_month(at(2024, 1, 31), 1) == at(2024, 2, 1)

    def test_start_of_month_crosses_year(self):
        assert start_of_month(at(2024, 1, 20), -1) == at(2023, 12, 1)
        assert start_of_month(at(2024, 12, 5), 1) == at(2025, 1, 1)

    def test_start_of_year_offsets(self):
        assert start_of_year(at(2024, 6, 1, 9)) == at(2024, 1, 1)
        assert start_of_year(at(2024, 6, 1), -1) == at(2023, 1, 1)
        assert start_of_year(at(2024, 6, 1), 1) == at(2025, 1, 1)


class TestHumanDateResolver:
    """Test interval resolution for every token."""

    def test_yesterday_keeps_time_of_day(self, resolver, now):
        assert iso_pair(resolver.interval("yesterday", now)) == (
            "2024-03-14T10:00:00+02:00", "2024-03-15T10:00:00+02:00"
        )

    def test_tomorrow_starts_now(self, resolver, now):
        assert iso_pair(resolver.interval("tomorrow", now)) == (
            "2024-03-15T10:00:00+02:00", "2024-03-16T10:00:00+02:00"
        )

    def test_today(self, resolver, now):
        assert iso_pair(resolver.interval("today", now)) == (
            "2024-03-15T00:00:00+02:00", "2024-03-15T23:59:59+02:00"
        )

    def test_this_week(self, resolver, now):
        assert iso_pair(resolver.interval("this_week", now)) == (
            "2024-03-11T00:00:00+02:00", "2024-03-17T23:59:59+02:00"
        )

    def test_last_week(self, resolver, now):
        """Last week is the week before this one, not the current week."""
        assert iso_pair(resolver.interval("last_week", now)) == (
            "2024-03-04T00:00:00+02:00", "2024-03-10T23:59:59+02:00"
        )

    def test_next_week(self, resolver, now):
        assert iso_pair(resolver.interval("next_week", now)) == (
            "2024-03-18T00:00:00+02:00", "2024-03-24T23:59:59+02:00"
        )

    def test_sunday_first_week(self, now):
        resolver = HumanDateResolver(first_weekday=6)
        assert iso_pair(resolver.interval("this_week", now)) == (
            "2024-03-10T00:00:00+02:00", "2024-03-16T23:59:59+02:00"
        )

    def test_this_month(self, resolver, now):
        assert iso_pair(resolver.interval("this_month", now)) == (
            "2024-03-01T00:00:00+02:00", "2024-03-31T23:59:59+02:00"
        )

    def test_last_month_in_leap_year(self, resolver, now):
        assert iso_pair(resolver.interval("last_month", now)) == (
            "2024-02-01T00:00:00+02:00", "2024-02-29T23:59:59+02:00"
        )

    def test_next_month(self, resolver, now):
        assert iso_pair(resolver.interval("next_month", now)) == (
            "2024-04-01T00:00:00+02:00", "2024-04-30T23:59:59+02:00"
        )

    def test_last_month_from_january(self, resolver):
        assert iso_pair(resolver.interval("last_month", at(2024, 1, 20, 8))) == (
            "2023-12-01T00:00:00+02:00", "2023-12-31T23:59:59+02:00"
        )

    def test_next_month_from_december(self, resolver):
        assert iso_pair(resolver.interval("next_month", at(2024, 12, 5))) == (
            "2025-01-01T00:00:00+02:00", "2025-01-31T23:59:59+02:00"
        )

    def test_this_year(self, resolver):
        assert iso_pair(resolver.interval("this_year", at(2024, 6, 1))) == (
            "2024-01-01T00:00:00+02:00", "2024-12-31T23:59:59+02:00"
        )

    def test_last_year(self, resolver):
        assert iso_pair(resolver.interval("last_year", at(2024, 6, 1))) == (
            "2023-01-01T00:00:00+02:00", "2023-12-31T23:59:59+02:00"
        )

    def test_next_year(self, resolver):
        assert iso_pair(resolver.interval("next_year", at(2024, 6, 1))) == (
            "2025-01-01T00:00:00+02:00", "2025-12-31T23:59:59+02:00"
        )

    def test_every_token_resolves(self, resolver, now):
        """Every HumanDate yields an ordered interval."""
        for token in HumanDate:
            start, end = resolver.interval(token.value, now)
            assert start < end

    def test_unknown_token(self, resolver, now):
        assert resolver.interval("someday", now) is None

    def test_invalid_first_weekday(self):
        with pytest.raises(ValueError):
            HumanDateResolver(first_weekday=7)


class TestResolveCondition:
    """Test rendering of resolved intervals."""

    def test_today_condition(self, resolver, now):
        assert resolver.resolve("date", "today", now) == (
            "date:>=:2024-03-15T00:00:00+02:00 AND date:<=:2024-03-15T23:59:59+02:00"
        )

    def test_fractional_seconds_dropped(self, resolver):
        now = datetime(2024, 3, 15, 10, 0, 0, 987654, tzinfo=TZ)
        assert resolver.resolve("created_at", "tomorrow", now) == (
            "created_at:>=:2024-03-15T10:00:00+02:00 AND created_at:<=:2024-03-16T10:00:00+02:00"
        )

    def test_naive_now_uses_local_offset(self, resolver):
        """Naive instants are host local time and get the local offset."""
        result = resolver.resolve("date", "today", datetime(2024, 3, 15, 10, 0))
        start = datetime(2024, 3, 15).astimezone().isoformat(timespec="seconds")
        end = datetime(2024, 3, 15, 23, 59, 59).astimezone().isoformat(timespec="seconds")
        assert result == f"date:>=:{start} AND date:<=:{end}"

    def test_unknown_token_returns_empty_and_logs(self, resolver, now, caplog):
        with caplog.at_level("WARNING", logger="typesense-query"):
            assert resolver.resolve("date", "fortnight", now) == ""
        assert "Unsupported human_date value: fortnight" in caplog.text

    def test_format_datetime_condition(self):
        assert format_datetime_condition("ts", at(2024, 1, 1), at(2024, 1, 2)) == (
            "ts:>=:2024-01-01T00:00:00+02:00 AND ts:<=:2024-01-02T00:00:00+02:00"
        )
