"""Fixed-delay retry loop used by the package installer."""

import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RetryResult(Generic[T]):
    """
    Outcome of a retried operation.

    Attributes:
        ok: Whether any attempt succeeded
        attempts: Number of times the operation was called
        value: Return value of the last attempt
    """

    ok: bool
    attempts: int
    value: Optional[T] = None


def retry(
    operation: Callable[[], T],
    max_attempts: int,
    delay: float,
    *,
    sleep: Callable[[float], Any] = time.sleep,
    on_failure: Optional[Callable[[int, int], None]] = None,
) -> RetryResult[T]:
    """
    Call an operation until it returns a truthy value or attempts run out.

    The delay is a plain fixed sleep between attempts, never applied after the
    final attempt.

    Args:
        operation: Zero-argument callable; a truthy result means success
        max_attempts: Maximum number of calls, must be at least 1
        delay: Seconds to wait between a failed attempt and the next one
        sleep: Sleep function, replaceable in tests
        on_failure: Called with (attempt, max_attempts) after each failed attempt

    Returns:
        RetryResult describing the outcome

    Raises:
        ValueError: If max_attempts is less than 1
    """
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")

    attempt = 0
    value: Optional[T] = None

    while attempt < max_attempts:
        value = operation()
        attempt += 1
        if value:
            return RetryResult(ok=True, attempts=attempt, value=value)

        if on_failure is not None:
            on_failure(attempt, max_attempts)

        if attempt < max_attempts:
            sleep(delay)

    return RetryResult(ok=False, attempts=attempt, value=value)
