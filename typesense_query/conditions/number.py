#!/usr/bin/env python3
"""
Number field conditions.
"""

from .base import ConditionHandler, format_number
from ..exceptions import InvalidRangeError
from ..models import FieldType, FilterOperator, FilterRequest


class NumberConditionHandler(ConditionHandler):
    """
    Renders number conditions.

    between:         <field>:between:[<low>,<high>]
    hasdata/nodata:  <field><operator><number_value>  (no separators)
    """

    FIELD_TYPE = FieldType.NUMBER
    SUPPORTED_OPERATORS = frozenset({
        FilterOperator.BETWEEN, FilterOperator.HAS_DATA, FilterOperator.NO_DATA,
    })

    def _render(self, request: FilterRequest, operator: FilterOperator) -> str:
        field = request.field

        if operator == FilterOperator.BETWEEN:
            if len(request.number_range) != 2:
                raise InvalidRangeError(field, request.number_range)
            low, high = request.number_range
            return f"{field}:{operator.value}:[{format_number(field, low)},{format_number(field, high)}]"

        return f"{field}{operator.value}{format_number(field, request.number_value)}"
