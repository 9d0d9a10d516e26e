"""Composable validation results for building domain objects."""

from domain_result.errors import ErrorEntry, NoSuccessValueError
from domain_result.events import (
    ObservableMixin,
    ResultEvent,
    ResultEventType,
    ResultObserver,
)
from domain_result.parallel import combine_concurrently, validate_concurrently
from domain_result.protocols import Check, Specification, evaluate_check
from domain_result.report import ErrorReport
from domain_result.results import (
    LabeledCheck,
    Result,
    result_as,
    result_for,
    validate,
)
from domain_result.rich_observers import (
    RichEventLogObserver,
    build_errors_table,
    print_errors,
)

__all__ = [
    # Result container
    "Result",
    "result_as",
    "result_for",
    # Checks
    "Check",
    "LabeledCheck",
    "Specification",
    "evaluate_check",
    "validate",
    # Errors and reports
    "ErrorEntry",
    "ErrorReport",
    "NoSuccessValueError",
    # Observer pattern
    "ObservableMixin",
    "ResultEvent",
    "ResultEventType",
    "ResultObserver",
    # Concurrent sub-validation
    "combine_concurrently",
    "validate_concurrently",
    # Rich output
    "RichEventLogObserver",
    "build_errors_table",
    "print_errors",
]

__version__ = "0.1.0"
