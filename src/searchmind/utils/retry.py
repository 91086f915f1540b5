"""tenacity-based retries for calls to remote collaborators.

Both plain and coroutine functions can be decorated; tenacity sleeps with
asyncio between attempts of a coroutine, so retries never block the loop.
Only transient failures are retried and the last one is re-raised as is.
"""

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from searchmind.exceptions import EmbeddingRateLimitError, EmbeddingTimeoutError
from searchmind.utils.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (
    EmbeddingRateLimitError,
    EmbeddingTimeoutError,
    ConnectionError,
)


def with_retry(
    max_attempts: int = 3,
    min_wait: float = 1.0,
    max_wait: float = 10.0,
    retry_on: tuple[type[BaseException], ...] = TRANSIENT_ERRORS,
) -> Callable[[F], F]:
    """Build a retry decorator with exponential backoff.

    Args:
        max_attempts: Attempts in total, the first call included.
        min_wait: Lower bound of the backoff, in seconds.
        max_wait: Upper bound of the backoff, in seconds.
        retry_on: Exception types considered transient.

    Usage:
        @with_retry(max_attempts=5, min_wait=0.5, retry_on=(httpx.TransportError,))
        async def fetch(url: str) -> httpx.Response:
            ...
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(retry_on),
        before_sleep=before_sleep_log(logger, logging.DEBUG),
        reraise=True,
    )


# 3 attempts, waiting 1s then 2s; used for embedding requests
embedding_retry = with_retry()
