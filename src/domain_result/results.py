"""Result container for building domain objects.

A Result collects validation failures as data while a domain object is being
built, and only produces the object when no failure was recorded.

Example:
    result = (
        result_for(Customer)
        .ensure(lambda: payload is not None, "Payload is required")
        .validate_all(
            validate(lambda: bool(payload.name), "Name is required"),
            validate(lambda: payload.age >= 18, "Must be an adult", payload.age),
        )
        .combine(email_result, address_result)
        .on_success(lambda: Customer(payload.name, payload.age))
    )

    if result.has_errors:
        return result.report().to_dict()
    return result.get()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from domain_result.errors import ErrorEntry, NoSuccessValueError
from domain_result.events import ObservableMixin, ResultEvent, ResultEventType
from domain_result.protocols import evaluate_check
from domain_result.report import ErrorReport

if TYPE_CHECKING:
    from domain_result.events import ResultObserver
    from domain_result.protocols import Check

__all__ = [
    "LabeledCheck",
    "Result",
    "result_as",
    "result_for",
    "validate",
]

T = TypeVar("T")

_MISSING: Any = object()


@dataclass(frozen=True)
class LabeledCheck:
    """A check paired with the error entry reported when it fails.

    Attributes:
        check: Zero-argument callable or Specification.
        error: Entry appended to the Result when the check fails.
    """

    check: Check
    error: ErrorEntry

    @classmethod
    def of(cls, check: Check, message: str, actual_value: Any = None) -> LabeledCheck:
        return cls(check=check, error=ErrorEntry(message=message, actual_value=actual_value))

    def is_satisfied(self) -> bool:
        return evaluate_check(self.check)


def validate(check: Check, message: str, actual_value: Any = None) -> LabeledCheck:
    """Build a LabeledCheck for ``Result.validate_all``."""
    return LabeledCheck.of(check, message, actual_value)


class Result(ObservableMixin, Generic[T]):
    """Outcome of validating and constructing a value of type T.

    A Result is a mutable accumulator owned by one caller. Every chain step
    mutates it in place and returns the same instance.

    ``ensure`` checks are prerequisites: the first failure is recorded and
    every later ``ensure`` and ``validate_all`` is skipped without evaluating
    its checks. ``validate_all`` records every failing check of its batch.
    ``combine`` always merges already computed errors from other results.
    ``on_success`` builds the value only if no error was recorded.

    Use ``Result.for_type`` / ``result_for`` before the object exists and
    ``Result.of`` / ``result_as`` to wrap an existing object.
    """

    def __init__(
        self,
        target: type[T] | None = None,
        value: T = _MISSING,
        *,
        observers: Iterable[ResultObserver] | None = None,
    ) -> None:
        self._target = target
        self._value = value
        self._errors: list[ErrorEntry] = []
        self._short_circuited = False
        self._init_observers(observers)

    @classmethod
    def for_type(
        cls,
        target: type[T],
        *,
        observers: Iterable[ResultObserver] | None = None,
    ) -> Result[T]:
        """Create an empty Result for a type that has not been built yet."""
        return cls(target, observers=observers)

    @classmethod
    def of(
        cls,
        value: T,
        *,
        observers: Iterable[ResultObserver] | None = None,
    ) -> Result[T]:
        """Create a Result that already holds ``value``."""
        return cls(type(value), value, observers=observers)

    @property
    def target(self) -> type[T] | None:
        """Type marker given at creation, if any."""
        return self._target

    @property
    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return len(self._errors) > 0

    @property
    def error_count(self) -> int:
        """Get the number of recorded errors."""
        return len(self._errors)

    @property
    def errors(self) -> list[ErrorEntry]:
        """Get a copy of the recorded errors, in order."""
        return self._errors.copy()

    @property
    def short_circuited(self) -> bool:
        """True once an ensure check has failed."""
        return self._short_circuited

    @property
    def has_value(self) -> bool:
        """Check if a success value is held."""
        return self._value is not _MISSING

    def get(self) -> T:
        """Return the success value.

        Raises:
            NoSuccessValueError: If no value was wrapped or materialized.
        """
        if self._value is _MISSING:
            raise NoSuccessValueError()
        return self._value

    def ensure(self, check: Check, message: str, actual_value: Any = None) -> Result[T]:
        """Require a prerequisite check before processing further checks.

        Args:
            check: Zero-argument callable or Specification.
            message: Error message recorded if the check fails.
            actual_value: The value being checked (optional).

        Returns:
            Self, for method chaining.

        Note:
            Once an ensure check has failed, later calls return immediately
            without evaluating their check.
        """
        if self._short_circuited:
            self._emit(ResultEventType.CHECK_SKIPPED, step="ensure", skipped=1)
            return self

        if not evaluate_check(check):
            # Set before any observer runs.
            self._short_circuited = True
            self._add_error(ErrorEntry(message=message, actual_value=actual_value), "ensure")
            self._emit(ResultEventType.SHORT_CIRCUITED, message=message)

        return self

    def validate_all(self, *checks: LabeledCheck) -> Result[T]:
        """Evaluate every labeled check and record each failure.

        Args:
            *checks: Labeled checks built with ``validate``.

        Returns:
            Self, for method chaining.

        Note:
            Skipped entirely, without evaluating any check, if an earlier
            ensure check failed.
        """
        if self._short_circuited:
            self._emit(ResultEventType.CHECK_SKIPPED, step="validate_all", skipped=len(checks))
            return self

        for labeled in checks:
            if not labeled.is_satisfied():
                self._add_error(labeled.error, "validate_all")

        return self

    def combine(self, *results: Result[Any]) -> Result[T]:
        """Merge errors from other results into this one.

        Typically used to aggregate the validation of a composite entity from
        results already computed for its parts. Applies regardless of the
        short-circuit state and never evaluates any check.

        Args:
            *results: Results whose errors are appended in argument order.

        Returns:
            Self, for method chaining.
        """
        merged = 0
        for other in results:
            if other.has_errors:
                entries = other.errors
                self._errors.extend(entries)
                merged += len(entries)

        self._emit(ResultEventType.RESULTS_COMBINED, result_count=len(results), error_count=merged)
        return self

    def on_success(self, supplier: Callable[[], T]) -> Result[T]:
        """Build and store the success value if no error was recorded.

        Args:
            supplier: Zero-argument callable that constructs the value.

        Returns:
            Self, for method chaining.
        """
        if self.has_errors:
            self._emit(ResultEventType.SUCCESS_SKIPPED, error_count=len(self._errors))
            return self

        self._value = supplier()
        self._emit(ResultEventType.VALUE_MATERIALIZED, value=self._value)
        return self

    def report(self) -> ErrorReport:
        """Snapshot the current errors as an ErrorReport."""
        return ErrorReport(
            target=self._target_name(),
            has_errors=self.has_errors,
            short_circuited=self._short_circuited,
            errors=self.errors,
        )

    def _target_name(self) -> str | None:
        if self._target is None:
            return None
        return getattr(self._target, "__name__", repr(self._target))

    def _add_error(self, entry: ErrorEntry, step: str) -> None:
        self._errors.append(entry)
        self._emit(
            ResultEventType.ERROR_ADDED,
            step=step,
            message=entry.message,
            actual_value=entry.actual_value,
        )

    def _emit(self, event_type: ResultEventType, **data: Any) -> None:
        if self._observers:
            self.notify(ResultEvent(event_type=event_type, source=self, data=data))

    def __repr__(self) -> str:
        target = self._target_name()
        value = self._value if self._value is not _MISSING else None
        errors = ", ".join(entry.render() for entry in self._errors)
        return (
            f"Result(target={target!r}, value={value!r}, errors=[{errors}], "
            f"short_circuited={self._short_circuited})"
        )


def result_for(
    target: type[T],
    *,
    observers: Iterable[ResultObserver] | None = None,
) -> Result[T]:
    """Create an empty Result for ``target``. See ``Result.for_type``."""
    return Result.for_type(target, observers=observers)


def result_as(
    value: T,
    *,
    observers: Iterable[ResultObserver] | None = None,
) -> Result[T]:
    """Create a Result holding ``value``. See ``Result.of``."""
    return Result.of(value, observers=observers)
