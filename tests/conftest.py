"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

import pytest
from hypothesis import strategies as st

from domain_result.events import ResultEvent, ResultEventType
from domain_result.results import Result, result_for

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for error messages
messages = st.text(min_size=1, max_size=200)

# Strategy for optional actual values
actual_values = st.one_of(
    st.none(),
    st.integers(),
    st.text(max_size=50),
    st.booleans(),
)

# Strategy for lists of check outcomes (True = passes)
check_outcomes = st.lists(st.booleans(), max_size=10)


# -----------------------------------------------------------------------------
# Test Domain Classes
# -----------------------------------------------------------------------------


class DomainEntity:
    """Plain domain object built on success."""


class FailedSpecification:
    """Specification that is never satisfied."""

    def is_satisfied(self) -> bool:
        return False


class SuccessSpecification:
    """Specification that is always satisfied."""

    def is_satisfied(self) -> bool:
        return True


class CountingCheck:
    """Callable check that records how many times it was evaluated."""

    def __init__(self, outcome: bool) -> None:
        self.outcome = outcome
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self.outcome


class RecordingObserver:
    """Observer that records all events for testing."""

    def __init__(self) -> None:
        self.events: list[ResultEvent] = []

    def on_event(self, event: ResultEvent) -> None:
        self.events.append(event)

    @property
    def event_types(self) -> list[ResultEventType]:
        return [e.event_type for e in self.events]


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def empty_result() -> Result[DomainEntity]:
    """Create a fresh Result for DomainEntity."""
    return result_for(DomainEntity)


@pytest.fixture
def recording_observer() -> RecordingObserver:
    """Create a RecordingObserver instance."""
    return RecordingObserver()
