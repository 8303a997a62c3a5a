#!/usr/bin/env python3
"""
Base condition handler.
Each field category implements this to render a FilterRequest as a
Typesense filter_by condition.
"""

import math
from abc import ABC, abstractmethod
from typing import FrozenSet

from ..exceptions import InvalidValueError, UnsupportedOperatorError
from ..models import FieldType, FilterOperator, FilterRequest


class ConditionHandler(ABC):
    """
    Renders filters of one field category.

    Subclasses declare FIELD_TYPE and SUPPORTED_OPERATORS and implement
    _render(). convert() checks the operator first, so _render() only sees
    operators the handler declared.
    """

    FIELD_TYPE: FieldType
    SUPPORTED_OPERATORS: FrozenSet[FilterOperator] = frozenset()

    def supports_operator(self, operator: str) -> bool:
        """Check if this handler accepts an operator token."""
        return FilterOperator.from_string(operator) in self.SUPPORTED_OPERATORS

    def convert(self, request: FilterRequest) -> str:
        """
        Render a filter as a condition string.

        Raises:
            UnsupportedOperatorError: If the operator is not accepted
            InvalidFilterError: If the filter's values are malformed
        """
        operator = FilterOperator.from_string(request.operator)
        if operator not in self.SUPPORTED_OPERATORS:
            raise UnsupportedOperatorError(request.operator, self.FIELD_TYPE.value)
        return self._render(request, operator)

    @abstractmethod
    def _render(self, request: FilterRequest, operator: FilterOperator) -> str:
        pass


def format_number(field: str, value: float) -> str:
    """
    Format a number with exactly two fraction digits.

    Raises:
        InvalidValueError: If value is NaN or infinite
    """
    if math.isnan(value) or math.isinf(value):
        raise InvalidValueError(field, value)
    return f"{value:.2f}"
