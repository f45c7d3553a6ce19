"""Pytest configuration and fixtures for ChronoBox tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so chronobox can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from chronobox import DateValue, Timezone  # noqa: E402


@pytest.fixture
def utc() -> Timezone:
    """The UTC zone."""
    return Timezone.utc()


@pytest.fixture
def ist() -> Timezone:
    """A half-hour offset zone, UTC+05:30."""
    return Timezone.from_hours(5, 30)


@pytest.fixture
def base_value() -> DateValue:
    """A Sunday afternoon with a non-zero millisecond field."""
    return DateValue("2024-02-25T15:45:30.123Z")
