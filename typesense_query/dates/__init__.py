"""
Relative date resolution for date and datetime filters.
"""

from .resolver import HumanDateResolver, format_datetime_condition
from .time_utils import from_timestamp, localize, now_local, to_iso

__all__ = [
    'HumanDateResolver',
    'format_datetime_condition',
    'from_timestamp',
    'localize',
    'now_local',
    'to_iso',
]
