"""
Per-category condition handlers.

Example usage:
    from typesense_query.conditions import NumberConditionHandler
    from typesense_query.models import FilterRequest

    handler = NumberConditionHandler()
    handler.convert(FilterRequest("price", "between", number_range=(1, 5)))
    # 'price:between:[1.00,5.00]'
"""

from .base import ConditionHandler, format_number
from .date import DateConditionHandler
from .number import NumberConditionHandler
from .text import TextConditionHandler

__all__ = [
    'ConditionHandler',
    'DateConditionHandler',
    'NumberConditionHandler',
    'TextConditionHandler',
    'format_number',
]
