#!/usr/bin/env python3
"""
Resolves relative date tokens ("yesterday", "this_month", ...) into absolute
[start, end] intervals and renders them as Typesense range conditions.
"""

from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

from dateutil.relativedelta import relativedelta

from ..log_manager import get_logger
from ..models import HumanDate
from .time_utils import (
    end_of_span, start_of_day, start_of_month, start_of_week, start_of_year, to_iso
)

Interval = Tuple[datetime, datetime]

ONE_DAY = relativedelta(days=1)
ONE_WEEK = relativedelta(days=7)
ONE_MONTH = relativedelta(months=1)
ONE_YEAR = relativedelta(years=1)


def format_datetime_condition(field: str, start: datetime, end: datetime) -> str:
    """Render an inclusive range as two comparisons joined with AND."""
    return f"{field}:>=:{to_iso(start)} AND {field}:<=:{to_iso(end)}"


class HumanDateResolver:
    """
    Maps HumanDate tokens to intervals anchored at a given instant.

    Week tokens start on `first_weekday` (Python numbering, Monday == 0).
    """

    def __init__(self, first_weekday: int = 0):
        if not 0 <= first_weekday <= 6:
            raise ValueError(f"first_weekday must be between 0 and 6, got {first_weekday}")
        self.first_weekday = first_weekday
        self.logger = get_logger("HumanDateResolver")
        self._intervals: Dict[HumanDate, Callable[[datetime], Interval]] = {
            HumanDate.YESTERDAY: self._yesterday,
            HumanDate.TOMORROW: self._tomorrow,
            HumanDate.TODAY: self._today,
            HumanDate.THIS_WEEK: lambda now: self._week(now, 0),
            HumanDate.LAST_WEEK: lambda now: self._week(now, -1),
            HumanDate.NEXT_WEEK: lambda now: self._week(now, 1),
            HumanDate.THIS_MONTH: lambda now: self._month(now, 0),
            HumanDate.LAST_MONTH: lambda now: self._month(now, -1),
            HumanDate.NEXT_MONTH: lambda now: self._month(now, 1),
            HumanDate.THIS_YEAR: lambda now: self._year(now, 0),
            HumanDate.LAST_YEAR: lambda now: self._year(now, -1),
            HumanDate.NEXT_YEAR: lambda now: self._year(now, 1),
        }

    def interval(self, token: str, now: datetime) -> Optional[Interval]:
        """
        Resolve a token to its (start, end) pair.

        Args:
            token: HumanDate value
            now: Anchor instant

        Returns:
            (start, end) or None if the token is unknown
        """
        human_date = HumanDate.from_string(token)
        if human_date is None:
            return None
        return self._intervals[human_date](now)

    def resolve(self, field: str, token: str, now: datetime) -> str:
        """
        Resolve a token into a range condition on field.

        Returns:
            "<field>:>=:<start> AND <field>:<=:<end>", or "" for an unknown token
        """
        bounds = self.interval(token, now)
        if bounds is None:
            self.logger.warning(f"Unsupported human_date value: {token}")
            return ""
        return format_datetime_condition(field, *bounds)

    # ------------------------------------------------------------------

    def _yesterday(self, now: datetime) -> Interval:
        start = now - ONE_DAY
        return start, start + ONE_DAY

    def _tomorrow(self, now: datetime) -> Interval:
        tomorrow = now + ONE_DAY
        return tomorrow - ONE_DAY, tomorrow

    def _today(self, now: datetime) -> Interval:
        start = start_of_day(now)
        return start, end_of_span(start, ONE_DAY)

    def _week(self, now: datetime, offset: int) -> Interval:
        start = start_of_week(now + relativedelta(weeks=offset), self.first_weekday)
        return start, end_of_span(start, ONE_WEEK)

    def _month(self, now: datetime, offset: int) -> Interval:
        start = start_of_month(now, offset)
        return start, end_of_span(start, ONE_MONTH)

    def _year(self, now: datetime, offset: int) -> Interval:
        start = start_of_year(now, offset)
        return start, end_of_span(start, ONE_YEAR)
