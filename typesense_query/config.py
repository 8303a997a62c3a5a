"""
Configuration helpers for the Typesense query builder.
Supports environment variables (and .env files) for deployment configuration.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv

TRUTHY = ('1', 'true', 'yes')


@dataclass(frozen=True)
class QueryConfig:
    """
    Builder settings.

    Attributes:
        strict: Raise typed errors instead of dropping invalid filters
        first_weekday: Day weeks start on, Python numbering (Monday == 0)
        debug: Debug logging for the whole typesense-query logger tree
            (process-wide, not per builder)
    """
    strict: bool = False
    first_weekday: int = 0
    debug: bool = False

    def __post_init__(self):
        if not isinstance(self.first_weekday, int) or not 0 <= self.first_weekday <= 6:
            raise ValueError(f"first_weekday must be between 0 and 6, got {self.first_weekday!r}")


class Config:
    """
    Configuration helper that reads from environment variables.

    Environment variables:
        TYPESENSE_QUERY_STRICT: Raise on invalid filters (1/true/yes)
        TYPESENSE_QUERY_FIRST_WEEKDAY: First day of week, 0-6 (default: 0, Monday)
        TYPESENSE_QUERY_DEBUG: Debug logging (1/true/yes)
    """

    @staticmethod
    def from_env(env_file: Optional[Union[str, Path]] = None) -> QueryConfig:
        """
        Create configuration from environment variables.

        Args:
            env_file: .env file to load first (default: ./.env if present).
                Variables already set in the environment win.

        Returns:
            QueryConfig

        Raises:
            ValueError: If a variable holds an invalid value

        Example:
            from typesense_query import TypesenseQueryBuilder
            from typesense_query.config import Config

            builder = TypesenseQueryBuilder(config=Config.from_env())
        """
        if env_file is not None:
            load_dotenv(env_file)
        elif (Path.cwd() / '.env').exists():
            load_dotenv(Path.cwd() / '.env')

        weekday_raw = os.getenv("TYPESENSE_QUERY_FIRST_WEEKDAY", "0").strip()
        try:
            first_weekday = int(weekday_raw)
        except ValueError as e:
            raise ValueError(
                f"TYPESENSE_QUERY_FIRST_WEEKDAY must be an integer 0-6, got {weekday_raw!r}"
            ) from e
        if not 0 <= first_weekday <= 6:
            raise ValueError(
                f"TYPESENSE_QUERY_FIRST_WEEKDAY must be an integer 0-6, got {weekday_raw!r}"
            )

        return QueryConfig(
            strict=os.getenv("TYPESENSE_QUERY_STRICT", "").lower() in TRUTHY,
            first_weekday=first_weekday,
            debug=os.getenv("TYPESENSE_QUERY_DEBUG", "").lower() in TRUTHY,
        )

    @staticmethod
    def strict(first_weekday: int = 0) -> QueryConfig:
        """Configuration for fail-fast validation."""
        return QueryConfig(strict=True, first_weekday=first_weekday)

    @staticmethod
    def lenient(first_weekday: int = 0) -> QueryConfig:
        """Configuration that drops invalid filters (the default)."""
        return QueryConfig(strict=False, first_weekday=first_weekday)
