"""
Data models for the Typesense query builder.
"""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .exceptions import InvalidFilterError


class _LookupMixin:
    """Lookup helpers shared by the string-valued enums."""

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid member value."""
        return cls.from_string(value) is not None

    @classmethod
    def from_string(cls, value: Optional[str]):
        """Convert string to member, or None if unknown."""
        for member in cls:
            if member.value == value:
                return member
        return None


class FieldType(_LookupMixin, str, Enum):
    """Field categories the builder knows how to render."""
    TEXT = "text"
    NUMBER = "number"
    DATE = "date"
    DATETIME = "datetime"


class FilterOperator(_LookupMixin, str, Enum):
    """Operator tokens accepted in filter requests."""
    IS = "is"
    IS_NOT = "isnot"
    IN = "in"
    CONTAINS = "contains"
    LIKE = "like"
    NO_DATA = "nodata"
    HAS_DATA = "hasdata"
    BETWEEN = "between"


class HumanDate(_LookupMixin, str, Enum):
    """Relative date tokens understood by the date resolver."""
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    TODAY = "today"
    THIS_WEEK = "this_week"
    LAST_WEEK = "last_week"
    NEXT_WEEK = "next_week"
    THIS_MONTH = "this_month"
    LAST_MONTH = "last_month"
    NEXT_MONTH = "next_month"
    THIS_YEAR = "this_year"
    LAST_YEAR = "last_year"
    NEXT_YEAR = "next_year"


class DiagnosticKind(str, Enum):
    """Why a filter contributed nothing to the query."""
    UNSUPPORTED_FIELD = "unsupported_field"
    UNSUPPORTED_OPERATOR = "unsupported_operator"
    UNRECOGNIZED_DATE = "unrecognized_date"
    INVALID_RANGE = "invalid_range"
    INVALID_VALUE = "invalid_value"


def _to_float(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise InvalidFilterError(f"{key} must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidFilterError(f"{key} must be numeric, got {value!r}") from e


def _to_float_tuple(key: str, values: Any) -> Tuple[float, ...]:
    if values is None:
        return ()
    if not isinstance(values, (list, tuple)):
        raise InvalidFilterError(f"{key} must be a list, got {type(values).__name__}")
    return tuple(_to_float(key, v) for v in values)


@dataclass(frozen=True)
class FilterRequest:
    """
    A single user-declared filter.

    Attributes:
        field: Field name; also selects the field category unless
            field_type is given
        operator: Operator token (see FilterOperator)
        text_value: Literal for text operators
        text_array: Literals for array operators (accepted, not rendered)
        number_value: Literal for number presence operators
        number_range: (low, high) for the between operator
        custom_date_range: (start, end) Unix timestamps for date fields
        human_date: Relative date token (see HumanDate)
        field_type: Explicit field category, separate from the field name
    """
    field: str
    operator: str = ""
    text_value: str = ""
    text_array: Tuple[str, ...] = ()
    number_value: float = 0.0
    number_range: Tuple[float, ...] = ()
    custom_date_range: Tuple[float, ...] = ()
    human_date: str = ""
    field_type: Optional[str] = None

    @property
    def category(self) -> str:
        """The value used to pick a condition handler."""
        return self.field_type if self.field_type else self.field

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "FilterRequest":
        """
        Build a request from a decoded JSON payload.

        Unknown keys are ignored.

        Raises:
            InvalidFilterError: If field is missing or a numeric entry is not a number
        """
        if not isinstance(payload, Mapping):
            raise InvalidFilterError(f"Expected a mapping, got {type(payload).__name__}")

        field = payload.get("field")
        if not field or not isinstance(field, str):
            raise InvalidFilterError("Filter payload requires a 'field' string")

        text_array = payload.get("text_array") or ()
        if not isinstance(text_array, (list, tuple)):
            raise InvalidFilterError("text_array must be a list")

        number_value = payload.get("number_value")

        return cls(
            field=field,
            operator=str(payload.get("operator") or ""),
            text_value=str(payload.get("text_value") or ""),
            text_array=tuple(str(v) for v in text_array),
            number_value=_to_float("number_value", number_value) if number_value is not None else 0.0,
            number_range=_to_float_tuple("number_range", payload.get("number_range")),
            custom_date_range=_to_float_tuple("custom_date_range", payload.get("custom_date_range")),
            human_date=str(payload.get("human_date") or ""),
            field_type=payload.get("field_type") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Export as payload dictionary."""
        data = {
            "field": self.field,
            "operator": self.operator,
            "text_value": self.text_value,
            "text_array": list(self.text_array),
            "number_value": self.number_value,
            "number_range": list(self.number_range),
            "custom_date_range": list(self.custom_date_range),
            "human_date": self.human_date,
        }
        if self.field_type:
            data["field_type"] = self.field_type
        return data


@dataclass
class Diagnostic:
    """An advisory note about a filter that was dropped."""
    index: int
    kind: DiagnosticKind
    message: str
    value: Any = None

    def __repr__(self):
        return f"Diagnostic[{self.index}] {self.kind.value}: {self.message}"


@dataclass
class QueryResult:
    """
    Outcome of translating a list of filters.

    Attributes:
        query: The joined filter_by expression
        conditions: Non-empty per-filter conditions, in input order
        diagnostics: One entry per dropped filter
    """
    query: str
    conditions: List[str] = dataclass_field(default_factory=list)
    diagnostics: List[Diagnostic] = dataclass_field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
