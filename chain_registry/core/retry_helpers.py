"""Retry helpers for registry requests.

The registry client itself never retries. These strategies are for callers
that want to ride out rate limiting and transient transport failures, such as
the path cache during a bulk build.
"""

import logging
from typing import Callable, Union

import httpx
from tenacity import retry_if_exception, wait_exponential

from chain_registry.core.exceptions import RegistryHTTPError, RegistryTransportError


def should_retry_on_rate_limit(exception: BaseException) -> bool:
    """Check if exception is a 429 from the registry host.

    Args:
        exception: Exception to check

    Returns:
        True if this is a rate limit that should be retried
    """
    return isinstance(exception, RegistryHTTPError) and exception.status_code == 429


def should_retry_on_timeout(exception: BaseException) -> bool:
    """Check if exception is a timeout or connection error that should be retried.

    Args:
        exception: Exception to check

    Returns:
        True if the transport failed with a timeout or transient connection exception
    """
    if not isinstance(exception, RegistryTransportError):
        return False
    return isinstance(
        exception.__cause__,
        (
            httpx.ConnectTimeout,
            httpx.ReadTimeout,
            httpx.WriteTimeout,
            httpx.PoolTimeout,
            httpx.ConnectError,
        ),
    )


def should_retry_on_rate_limit_or_timeout(exception: BaseException) -> bool:
    """Combined retry condition for rate limits and timeouts.

    Example:
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(3),
            retry=retry_if_rate_limit_or_timeout,
            wait=wait_rate_limit_with_backoff,
            reraise=True,
        ):
            with attempt:
                ...
    """
    return should_retry_on_rate_limit(exception) or should_retry_on_timeout(exception)


def wait_rate_limit_with_backoff(retry_state) -> float:
    """Wait strategy that respects Retry-After for 429s, exponential backoff otherwise.

    For 429 errors the Retry-After value is used when present, clamped to
    [1, 120] seconds. Everything else backs off exponentially: 2s, 4s, 8s, max 10s.

    Args:
        retry_state: tenacity retry state

    Returns:
        Number of seconds to wait before retry
    """
    exception = retry_state.outcome.exception()

    if should_retry_on_rate_limit(exception):
        if exception.retry_after is not None:
            return min(max(exception.retry_after, 1.0), 120.0)
        return wait_exponential(multiplier=1, min=2, max=30)(retry_state)

    return wait_exponential(multiplier=1, min=2, max=10)(retry_state)


retry_if_rate_limit = retry_if_exception(should_retry_on_rate_limit)
retry_if_timeout = retry_if_exception(should_retry_on_timeout)
retry_if_rate_limit_or_timeout = retry_if_exception(should_retry_on_rate_limit_or_timeout)


def log_retry_attempt(
    logger: Union[logging.Logger, logging.LoggerAdapter],
    service_name: str = "registry",
    max_attempts: int = 1,
) -> Callable[..., None]:
    """Create a before_sleep callback that logs retry attempts.

    Args:
        logger: Logger instance to use
        service_name: Name of the service being called (for log messages)
        max_attempts: Maximum number of attempts, shown in the message

    Returns:
        Callable that can be used as before_sleep in a tenacity retrier
    """

    def before_sleep(retry_state) -> None:
        exception = retry_state.outcome.exception()
        attempt = retry_state.attempt_number
        wait_time = retry_state.next_action.sleep if retry_state.next_action else 0

        if isinstance(exception, RegistryHTTPError):
            error_desc = f"HTTP {exception.status_code}"
        elif isinstance(exception, RegistryTransportError):
            error_desc = f"transport error ({type(exception.__cause__).__name__})"
        else:
            error_desc = f"{type(exception).__name__}: {exception}"

        logger.warning(
            f"{service_name} request failed ({error_desc}), "
            f"retrying in {wait_time:.1f}s (attempt {attempt}/{max_attempts})"
        )

    return before_sleep
