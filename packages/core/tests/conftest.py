"""Shared fixtures for event-envelope core tests."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone

import pytest

from event_envelope_core.correlation import set_causation_id, set_correlation_id
from event_envelope_core.primitives.clock import FrozenClock


@pytest.fixture(autouse=True)
def _clear_correlation_context() -> Iterator[None]:
    """Correlation ids live in context vars and would leak between tests."""
    set_correlation_id(None)
    set_causation_id(None)
    yield
    set_correlation_id(None)
    set_causation_id(None)


@pytest.fixture
def recorded_at() -> datetime:
    return datetime(2024, 3, 5, 14, 30, 15, 123456, tzinfo=timezone.utc)


@pytest.fixture
def clock(recorded_at: datetime) -> FrozenClock:
    return FrozenClock(recorded_at)
