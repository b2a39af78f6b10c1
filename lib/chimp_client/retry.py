from __future__ import annotations

import logging
import random
import threading
import time
from collections.abc import Callable
from typing import TypeVar

from .errors import ApiError, CancelledError, DecodeError, NetworkError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 5
MIN_BACKOFF_MINUTES = 1
MAX_BACKOFF_MINUTES = 9
RETRYABLE_STATUS = frozenset({429})


def random_backoff(
        min_minutes: int = MIN_BACKOFF_MINUTES,
        max_minutes: int = MAX_BACKOFF_MINUTES,
        rng: random.Random | None = None,
) -> Callable[[int], float]:
    """Backoff drawing a whole number of minutes in [min_minutes, max_minutes]."""
    source = rng or random.Random()

    def _delay(attempt: int) -> float:
        return float(source.randint(min_minutes, max_minutes) * 60)

    return _delay


def is_retryable(exc: Exception) -> bool:
    if isinstance(exc, NetworkError):
        return True
    if isinstance(exc, DecodeError):
        # Garbage on a failed status is usually a proxy page; on 2xx it won't change.
        return exc.status_code is not None and not 200 <= exc.status_code < 300
    if isinstance(exc, ApiError):
        return exc.status in RETRYABLE_STATUS or exc.status >= 500
    return False


def retry_everything(exc: Exception) -> bool:
    return True


def retry_call(
        func: Callable[[], T],
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        backoff: Callable[[int], float] | None = None,
        retry_on: Callable[[Exception], bool] | None = None,
        cancel: threading.Event | None = None,
) -> T:
    """Call ``func`` until it succeeds or the attempt budget runs out.

    The error of the last attempt is raised unchanged. Setting ``cancel``
    aborts a pending wait with CancelledError.
    """
    delay_for = backoff or random_backoff()
    should_retry = retry_on or is_retryable
    attempts = max(1, int(max_attempts))
    last_exc: Exception | None = None

    for attempt in range(1, attempts + 1):
        if cancel is not None and cancel.is_set():
            raise CancelledError("request cancelled") from last_exc
        try:
            return func()
        except CancelledError:
            raise
        except Exception as e:
            last_exc = e
            if attempt == attempts or not should_retry(e):
                raise

        delay = delay_for(attempt)
        logger.warning("attempt %d/%d failed (%s), retrying in %.0fs", attempt, attempts, last_exc, delay)
        if cancel is not None:
            if cancel.wait(delay):
                raise CancelledError("request cancelled") from last_exc
        elif delay > 0:
            time.sleep(delay)

    raise AssertionError("unreachable")
