"""
Exception classes for the Typesense query builder.
"""

from typing import Any


class QueryBuilderError(Exception):
    """Base exception for all query builder errors."""
    pass


class FilterError(QueryBuilderError):
    """Base exception for filter-related errors."""
    pass


class InvalidFilterError(FilterError):
    """Raised when a filter is malformed or invalid."""
    pass


class InvalidRangeError(InvalidFilterError):
    """Raised when a range does not hold exactly two bounds."""
    def __init__(self, field: str, values: Any):
        super().__init__(f"Range for {field} requires exactly 2 values, got {list(values)!r}")
        self.field = field
        self.values = values


class InvalidValueError(InvalidFilterError):
    """Raised when a numeric value is NaN or infinite."""
    def __init__(self, field: str, value: Any):
        super().__init__(f"Invalid numeric value for {field}: {value!r}")
        self.field = field
        self.value = value


class UnsupportedFieldError(FilterError):
    """Raised when a filter names an unknown field category."""
    def __init__(self, field_type: str):
        super().__init__(f"Unsupported field type: {field_type}")
        self.field_type = field_type


class UnsupportedOperatorError(FilterError):
    """Raised when an operator is not valid for a field category."""
    def __init__(self, operator: str, field_type: str):
        super().__init__(f"Unsupported operator for {field_type} field: {operator}")
        self.operator = operator
        self.field_type = field_type


class UnrecognizedDateTokenError(FilterError):
    """Raised when a date filter carries an unknown human_date token."""
    def __init__(self, date_token: str, operator: str = ""):
        super().__init__(f"Unsupported human_date value: {date_token}")
        self.date_token = date_token
        self.operator = operator
