"""Concurrent validation of independent sub-objects.

Each factory builds and returns its own Result on a worker thread, so no
Result is shared between threads. Merging happens afterwards on the calling
thread, which owns the target Result.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable

    from domain_result.results import Result

__all__ = ["combine_concurrently", "validate_concurrently"]

T = TypeVar("T")


def validate_concurrently(
    *factories: Callable[[], Result[Any]],
    workers: int | None = None,
) -> list[Result[Any]]:
    """Run Result factories on a thread pool.

    Args:
        *factories: Zero-argument callables, each returning a fresh Result.
        workers: Maximum worker threads. Defaults to the executor default.

    Returns:
        The Results, in the same order as ``factories``.

    Raises:
        Exception: Whatever a factory raised; remaining work is still awaited.

    Example:
        email, address = validate_concurrently(
            lambda: Email.create(payload.email),
            lambda: Address.create(payload.address),
        )
    """
    if not factories:
        return []

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(factory) for factory in factories]
        return [future.result() for future in futures]


def combine_concurrently(
    result: Result[T],
    *factories: Callable[[], Result[Any]],
    workers: int | None = None,
) -> Result[T]:
    """Validate sub-objects concurrently, then combine them into ``result``.

    Args:
        result: The Result that receives the merged errors.
        *factories: Zero-argument callables, each returning a fresh Result.
        workers: Maximum worker threads.

    Returns:
        ``result``, for method chaining.
    """
    return result.combine(*validate_concurrently(*factories, workers=workers))
