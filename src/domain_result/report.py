"""Structured snapshots of results.

Provides a Pydantic model that captures the outcome of a Result for logs,
audit trails and API responses.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from domain_result.errors import ErrorEntry

__all__ = ["ErrorReport"]


class ErrorReport(BaseModel):
    """Point-in-time view of a Result's errors.

    Attributes:
        target: Name of the type the Result was created for, if known.
        has_errors: Whether any error was recorded.
        short_circuited: Whether a failed ensure stopped further checks.
        errors: Recorded error entries, in order.
    """

    model_config = ConfigDict(frozen=True)

    target: str | None = None
    has_errors: bool = False
    short_circuited: bool = False
    errors: list[ErrorEntry] = Field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        """Error messages in recorded order."""
        return [entry.message for entry in self.errors]

    def to_dict(self) -> dict[str, Any]:
        """Export the report as JSON-compatible primitives."""
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        """Export the report as JSON text."""
        return self.model_dump_json()
