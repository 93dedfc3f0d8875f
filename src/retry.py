"""Generic retry-with-backoff wrapper for coroutine factories.

Attempt ``k`` failing sleeps ``2**k * k`` seconds before attempt ``k + 1``;
with ``max_attempts=5`` the waits are 2s, 8s, 24s, 64s and 160s.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional, TypeVar

from .errors import ApiError, AuthenticationError, ExhaustedRetriesError

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 5


def backoff_delay(attempt: int) -> float:
    """Seconds to wait after attempt number `attempt` (1-based) fails."""
    return float((2 ** attempt) * attempt)


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    base_delay: Callable[[int], float] = field(default=backoff_delay)

    def __post_init__(self) -> None:
        if self.max_attempts < 0:
            raise ValueError(f"max_attempts must be >= 0, got {self.max_attempts}")

    def total_worst_case_sleep(self) -> float:
        """Sum of every sleep taken before the retrier gives up."""
        return sum(self.base_delay(k) for k in range(1, self.max_attempts + 1))


async def sleep_for(seconds: float) -> None:
    await asyncio.sleep(seconds)


async def retry(
    operation: Callable[[], Awaitable[T]],
    max_attempts: Optional[int] = None,
    *,
    label: Optional[str] = None,
    policy: Optional[RetryPolicy] = None,
) -> T:
    """Await `operation()` until it succeeds or the retry budget runs out.

    `max_attempts` counts retries after the first call, so an operation that
    fails exactly `max_attempts` times still returns the value of the next
    attempt. Authentication failures and terminal API answers (404, 422, ...)
    propagate immediately. Pass either `max_attempts` or `policy`, not both.
    Once the budget is spent an ``ExhaustedRetriesError`` is raised; one coming
    from a nested scope is re-raised as-is.
    """
    if policy is not None and max_attempts is not None:
        raise TypeError("pass either max_attempts or policy, not both")
    if policy is None:
        policy = RetryPolicy(
            max_attempts=DEFAULT_MAX_ATTEMPTS if max_attempts is None else max_attempts
        )
    name = label or getattr(operation, "__name__", "operation")
    attempt = 1
    while True:
        try:
            return await operation()
        except (AuthenticationError, ApiError):
            raise
        except Exception as exc:
            if attempt > policy.max_attempts:
                print(f"[gave up] {name} after {attempt} attempt(s): {exc}")
                if isinstance(exc, ExhaustedRetriesError):
                    raise
                raise ExhaustedRetriesError(name, attempt, exc) from exc
            delay = policy.base_delay(attempt)
            print(f"[retry {attempt}/{policy.max_attempts}] {name}: {exc} -> sleep {delay:.0f}s")
            await sleep_for(delay)
            attempt += 1


__all__ = ["DEFAULT_MAX_ATTEMPTS", "RetryPolicy", "backoff_delay", "retry", "sleep_for"]
