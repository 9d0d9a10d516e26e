"""Check protocols for type checking.

A check is anything that answers "is this satisfied?" without arguments:
either a plain callable or an object implementing ``Specification``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, Union, runtime_checkable

__all__ = ["Check", "Specification", "evaluate_check"]


@runtime_checkable
class Specification(Protocol):
    """Protocol for domain specifications.

    Implement this for reusable rules that carry their own state.

    Example:
        class NotBlank:
            def __init__(self, text: str | None) -> None:
                self._text = text

            def is_satisfied(self) -> bool:
                return bool(self._text and self._text.strip())
    """

    def is_satisfied(self) -> bool:
        """Return True when the rule holds."""
        ...


Check = Union[Callable[[], bool], Specification]


def evaluate_check(check: Check) -> bool:
    """Evaluate a check and return its outcome as a bool.

    Args:
        check: A zero-argument callable or a Specification.

    Returns:
        True if the check is satisfied.
    """
    if isinstance(check, Specification):
        return bool(check.is_satisfied())
    return bool(check())
