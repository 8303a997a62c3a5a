"""
Shared pytest fixtures for typesense-query tests.
"""

import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from typesense_query import QueryConfig, TypesenseQueryBuilder
from typesense_query.dates import HumanDateResolver

# Fixed offset so expected strings do not depend on the host zone
TZ = timezone(timedelta(hours=2))

ENV_VARS = (
    "TYPESENSE_QUERY_STRICT",
    "TYPESENSE_QUERY_FIRST_WEEKDAY",
    "TYPESENSE_QUERY_DEBUG",
)


def fixed_clock(now: datetime):
    """Clock that always returns now."""
    return lambda: now


@pytest.fixture
def now():
    """Friday 2024-03-15 10:00 at +02:00."""
    return datetime(2024, 3, 15, 10, 0, 0, tzinfo=TZ)


@pytest.fixture
def builder(now):
    """Lenient builder with a fixed clock."""
    return TypesenseQueryBuilder(clock=fixed_clock(now))


@pytest.fixture
def strict_builder(now):
    """Strict builder with a fixed clock."""
    return TypesenseQueryBuilder(config=QueryConfig(strict=True), clock=fixed_clock(now))


@pytest.fixture
def resolver():
    return HumanDateResolver()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no TYPESENSE_QUERY_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # setenv first so teardown also removes values loaded from .env files
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield tmp_path
