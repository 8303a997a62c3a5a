"""
Typesense Query Builder
Translates structured filter requests into a Typesense filter_by expression.
"""

from .builder import TypesenseQueryBuilder, generate_typesense_query
from .config import Config, QueryConfig
from .models import (
    Diagnostic, DiagnosticKind, FieldType, FilterOperator, FilterRequest, HumanDate, QueryResult
)
from .exceptions import (
    QueryBuilderError,
    FilterError,
    InvalidFilterError,
    InvalidRangeError,
    InvalidValueError,
    UnsupportedFieldError,
    UnsupportedOperatorError,
    UnrecognizedDateTokenError,
)
from .log_manager import configure_logging

__version__ = "1.0.0"

__all__ = [
    "TypesenseQueryBuilder",
    "generate_typesense_query",
    "Config",
    "QueryConfig",
    "Diagnostic",
    "DiagnosticKind",
    "FieldType",
    "FilterOperator",
    "FilterRequest",
    "HumanDate",
    "QueryResult",
    "QueryBuilderError",
    "FilterError",
    "InvalidFilterError",
    "InvalidRangeError",
    "InvalidValueError",
    "UnsupportedFieldError",
    "UnsupportedOperatorError",
    "UnrecognizedDateTokenError",
    "configure_logging",
]
