"""Error types for results.

Two separate channels live here: ``ErrorEntry`` is a domain validation
failure carried as data, and ``NoSuccessValueError`` is raised on misuse.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer

__all__ = ["ErrorEntry", "NoSuccessValueError"]


class ErrorEntry(BaseModel):
    """A single failed check.

    Attributes:
        message: Human-readable description of the failure.
        actual_value: The value that was checked, for diagnostics (optional).

    Example:
        entry = ErrorEntry(message="Age must be positive", actual_value=-3)
        str(entry)  # '{"message":"Age must be positive","actual_value":"-3"}'
    """

    model_config = ConfigDict(frozen=True)

    message: str
    actual_value: Any = None

    @field_serializer("actual_value", when_used="json")
    def _serialize_actual_value(self, value: Any) -> str | None:
        return None if value is None else str(value)

    def render(self) -> str:
        """Render the entry as a compact JSON object for logs and API responses."""
        return self.model_dump_json()

    def __str__(self) -> str:
        return self.render()


class NoSuccessValueError(LookupError):
    """Raised when a value is requested from a Result that holds none."""

    MESSAGE = "Result has no success value."

    def __init__(self, message: str = MESSAGE) -> None:
        super().__init__(message)
