#!/usr/bin/env python3
"""
Date and datetime field conditions.
"""

import math
from datetime import datetime
from typing import Callable, Optional

from .base import ConditionHandler
from ..dates.resolver import HumanDateResolver, format_datetime_condition
from ..dates.time_utils import from_timestamp, localize, now_local
from ..exceptions import InvalidRangeError, InvalidValueError, UnrecognizedDateTokenError
from ..models import FieldType, FilterOperator, FilterRequest

Clock = Callable[[], datetime]


class DateConditionHandler(ConditionHandler):
    """
    Renders date conditions.

    nodata/hasdata render as <field>:<operator>. Any other operator is a
    request for a range: human_date is resolved against the clock, or, when
    human_date is empty, custom_date_range [start, end] (Unix timestamps) is
    used as is.
    """

    FIELD_TYPE = FieldType.DATE
    SUPPORTED_OPERATORS = frozenset({FilterOperator.NO_DATA, FilterOperator.HAS_DATA})

    def __init__(self, resolver: Optional[HumanDateResolver] = None, clock: Optional[Clock] = None):
        self.resolver = resolver or HumanDateResolver()
        self.clock = clock or now_local

    def supports_operator(self, operator: str) -> bool:
        # Unknown operators fall through to range resolution
        return True

    def convert(self, request: FilterRequest) -> str:
        operator = FilterOperator.from_string(request.operator)
        if operator in self.SUPPORTED_OPERATORS:
            return self._render(request, operator)

        if request.human_date:
            condition = self.resolver.resolve(request.field, request.human_date, self.clock())
            if condition:
                return condition
        elif request.custom_date_range:
            return self._render_custom_range(request)

        raise UnrecognizedDateTokenError(request.human_date, request.operator)

    def _render(self, request: FilterRequest, operator: FilterOperator) -> str:
        return f"{request.field}:{operator.value}"

    def _render_custom_range(self, request: FilterRequest) -> str:
        if len(request.custom_date_range) != 2:
            raise InvalidRangeError(request.field, request.custom_date_range)
        start, end = (self._instant(request.field, ts) for ts in request.custom_date_range)
        return format_datetime_condition(request.field, start, end)

    @staticmethod
    def _instant(field: str, ts: float) -> datetime:
        if math.isnan(ts) or math.isinf(ts):
            raise InvalidValueError(field, ts)
        try:
            return localize(from_timestamp(ts))
        except (OverflowError, OSError, ValueError) as e:
            raise InvalidValueError(field, ts) from e
