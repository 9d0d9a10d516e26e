"""Observer pattern implementation for result events.

Provides event types, observer protocol, and mixin for adding observer
support to Result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable

__all__ = [
    "ResultEventType",
    "ResultEvent",
    "ResultObserver",
    "ObservableMixin",
]


class ResultEventType(Enum):
    """Types of result events that can be observed."""

    ERROR_ADDED = auto()
    """Emitted when a failed check appends an error entry."""

    SHORT_CIRCUITED = auto()
    """Emitted when a failed ensure stops further checks."""

    CHECK_SKIPPED = auto()
    """Emitted when ensure or validate_all is skipped after a short circuit."""

    RESULTS_COMBINED = auto()
    """Emitted when errors from other results are merged in."""

    VALUE_MATERIALIZED = auto()
    """Emitted when on_success stores a value."""

    SUCCESS_SKIPPED = auto()
    """Emitted when on_success is skipped because errors are present."""


@dataclass
class ResultEvent:
    """A result event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The Result that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = ResultEvent(
            event_type=ResultEventType.ERROR_ADDED,
            source=result,
            data={"step": "ensure", "message": "Name is required", "actual_value": None},
        )
    """

    event_type: ResultEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class ResultObserver(Protocol):
    """Protocol for result event observers.

    Example:
        class PrintingObserver:
            def on_event(self, event: ResultEvent) -> None:
                print(f"{event.event_type.name}: {event.data}")
    """

    def on_event(self, event: ResultEvent) -> None:
        """Handle a result event.

        Args:
            event: The result event to handle.
        """
        ...


class ObservableMixin:
    """Mixin class to add observer support to any class.

    Classes using the mixin call ``_init_observers`` from their ``__init__``.
    Observers are notified synchronously, in the order they were added.
    """

    _observers: list[ResultObserver]

    def _init_observers(self, observers: Iterable[ResultObserver] | None = None) -> None:
        """Start with the given observers, ignoring duplicates."""
        self._observers = []
        for observer in observers or ():
            self.add_observer(observer)

    def add_observer(self, observer: ResultObserver) -> None:
        """Add an observer to receive result events.

        Args:
            observer: An object implementing the ResultObserver protocol.
        """
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: ResultObserver) -> None:
        """Remove an observer from receiving result events.

        Args:
            observer: The observer to remove.
        """
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: ResultEvent) -> None:
        """Notify all observers of a result event.

        Observers may add or remove observers while handling the event;
        the event still reaches everyone registered when it was sent.

        Args:
            event: The result event to broadcast to observers.
        """
        for observer in list(self._observers):
            observer.on_event(event)

    @property
    def observers(self) -> list[ResultObserver]:
        """Get a copy of the current observers list."""
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Remove all observers."""
        self._observers.clear()
