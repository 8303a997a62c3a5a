#!/usr/bin/env python3
"""
Text field conditions.
"""

from .base import ConditionHandler
from ..models import FieldType, FilterOperator, FilterRequest


class TextConditionHandler(ConditionHandler):
    """
    Renders <field>:<operator>:<text_value>.

    Every operator renders the scalar text_value, including "in";
    text_array is not serialized.
    """

    FIELD_TYPE = FieldType.TEXT
    SUPPORTED_OPERATORS = frozenset({
        FilterOperator.IS, FilterOperator.IS_NOT,
        FilterOperator.IN, FilterOperator.CONTAINS, FilterOperator.LIKE,
        FilterOperator.NO_DATA, FilterOperator.HAS_DATA,
    })

    def _render(self, request: FilterRequest, operator: FilterOperator) -> str:
        return f"{request.field}:{operator.value}:{request.text_value}"
