#!/usr/bin/env python3
"""
Typesense filter_by generation.

Routes each FilterRequest to the handler for its field category and joins the
resulting conditions with AND.

Example usage:
    from typesense_query import generate_typesense_query

    generate_typesense_query([
        {"field": "text", "operator": "is", "text_value": "foo"},
        {"field": "number", "operator": "between", "number_range": [1, 5]},
    ])
    # 'text:is:foo AND number:between:[1.00,5.00]'
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .conditions import (
    ConditionHandler, DateConditionHandler, NumberConditionHandler, TextConditionHandler
)
from .conditions.date import Clock
from .config import QueryConfig
from .dates.resolver import HumanDateResolver
from .exceptions import (
    FilterError, InvalidRangeError, InvalidValueError, UnrecognizedDateTokenError,
    UnsupportedFieldError, UnsupportedOperatorError
)
from .log_manager import enable_debug, get_logger
from .models import Diagnostic, DiagnosticKind, FieldType, FilterRequest, QueryResult

CONDITION_SEPARATOR = " AND "

FilterInput = Union[FilterRequest, Mapping[str, Any]]


class TypesenseQueryBuilder:
    """
    Translates filter requests into a Typesense filter_by expression.

    In lenient mode (default) an invalid filter contributes nothing and is
    reported as a Diagnostic and a warning. In strict mode the first invalid
    filter raises its FilterError.
    """

    def __init__(self,
                 config: Optional[QueryConfig] = None,
                 clock: Optional[Clock] = None,
                 strict: Optional[bool] = None):
        """
        Initialize the builder.

        Args:
            config: Builder settings (default: QueryConfig())
            clock: Callable returning the current datetime, used for
                relative dates (default: host local time)
            strict: Overrides config.strict when given
        """
        self.config = config or QueryConfig()
        self.strict = self.config.strict if strict is None else strict
        self.logger = get_logger("TypesenseQueryBuilder")
        if self.config.debug:
            # Process-wide: applies to every typesense-query logger
            enable_debug()

        date_handler = DateConditionHandler(
            resolver=HumanDateResolver(first_weekday=self.config.first_weekday),
            clock=clock,
        )
        self.handlers: Dict[FieldType, ConditionHandler] = {
            FieldType.TEXT: TextConditionHandler(),
            FieldType.NUMBER: NumberConditionHandler(),
            FieldType.DATE: date_handler,
            FieldType.DATETIME: date_handler,
        }

    def build(self, filters: Iterable[FilterInput]) -> QueryResult:
        """
        Translate filters into a query with per-filter diagnostics.

        Args:
            filters: FilterRequest objects or payload dictionaries

        Returns:
            QueryResult; query is "" when no filter produced a condition

        Raises:
            FilterError: Only in strict mode, including payload
                dictionaries that cannot be read
        """
        conditions: List[str] = []
        diagnostics: List[Diagnostic] = []

        for index, item in enumerate(filters):
            request = item if isinstance(item, FilterRequest) else None
            try:
                if request is None:
                    request = FilterRequest.from_dict(item)
                condition = self.generate_condition(request)
            except FilterError as e:
                if self.strict:
                    raise
                diagnostics.append(self._report(index, request, e))
                continue
            if condition:
                conditions.append(condition)

        query = CONDITION_SEPARATOR.join(conditions)
        self.logger.debug(f"Generated Typesense query: {query}")
        return QueryResult(query=query, conditions=conditions, diagnostics=diagnostics)

    def generate(self, filters: Iterable[FilterInput]) -> str:
        """Translate filters into a filter_by string."""
        return self.build(filters).query

    def generate_condition(self, request: FilterRequest) -> str:
        """
        Render a single filter.

        Raises:
            UnsupportedFieldError: If the field category is unknown
            FilterError: If the handler rejects the filter
        """
        field_type = FieldType.from_string(request.category)
        if field_type is None:
            raise UnsupportedFieldError(request.category)
        return self.handlers[field_type].convert(request)

    def _report(self, index: int, request: Optional[FilterRequest], error: FilterError) -> Diagnostic:
        """
        Log a dropped filter and describe it.

        request is None when the payload itself could not be decoded.
        """
        if isinstance(error, UnrecognizedDateTokenError):
            # Logged by operator, the diagnostic keeps the token
            self.logger.warning(f"Unsupported operator for date field: {request.operator}")
            return Diagnostic(index, DiagnosticKind.UNRECOGNIZED_DATE, str(error), request.human_date)

        self.logger.warning(str(error))
        if isinstance(error, UnsupportedFieldError):
            return Diagnostic(index, DiagnosticKind.UNSUPPORTED_FIELD, str(error), error.field_type)
        if isinstance(error, UnsupportedOperatorError):
            return Diagnostic(index, DiagnosticKind.UNSUPPORTED_OPERATOR, str(error), error.operator)
        if isinstance(error, InvalidRangeError):
            return Diagnostic(index, DiagnosticKind.INVALID_RANGE, str(error), error.values)
        if isinstance(error, InvalidValueError):
            return Diagnostic(index, DiagnosticKind.INVALID_VALUE, str(error), error.value)
        return Diagnostic(index, DiagnosticKind.INVALID_VALUE, str(error))


def generate_typesense_query(filters: Iterable[FilterInput],
                             clock: Optional[Clock] = None,
                             strict: bool = False,
                             config: Optional[QueryConfig] = None) -> str:
    """
    Generate a Typesense filter_by string from filter requests.

    Args:
        filters: FilterRequest objects or payload dictionaries
        clock: Callable returning the current datetime
        strict: Raise on the first invalid filter instead of dropping it
        config: Builder settings

    Returns:
        Conditions joined with " AND ", or "" if there are none
    """
    builder = TypesenseQueryBuilder(config=config, clock=clock, strict=strict or None)
    return builder.generate(filters)
