"""Shared test fixtures."""

import pytest

from timeduration import Duration, TimeDuration


@pytest.fixture
def empty_duration():
    return TimeDuration()


@pytest.fixture
def mixed_duration():
    """1 day, 2 hours, 3 minutes and 4.5 seconds."""
    return TimeDuration("1d 2h 3m 4.5s")


@pytest.fixture
def work_day_duration():
    return Duration.parse("1d 2h", hours_per_day=8)
