from __future__ import annotations

import random
import threading

import pytest

from chimp_client.errors import (
    ApiError,
    AuthError,
    CancelledError,
    DecodeError,
    NetworkError,
    SerializationError,
)
from chimp_client.retry import is_retryable, random_backoff, retry_call, retry_everything


def _no_wait(attempt: int) -> float:
    return 0.0


def test_returns_after_transient_failures() -> None:
    calls = []
    delays = []

    def func():
        calls.append(1)
        if len(calls) < 3:
            raise NetworkError("reset")
        return "ok"

    def backoff(attempt: int) -> float:
        delays.append(attempt)
        return 0.0

    assert retry_call(func, backoff=backoff) == "ok"
    assert len(calls) == 3
    assert delays == [1, 2]


def test_exhausted_attempts_raise_last_error() -> None:
    raised: list[NetworkError] = []

    def func():
        err = NetworkError(f"attempt {len(raised) + 1}")
        raised.append(err)
        raise err

    with pytest.raises(NetworkError) as exc_info:
        retry_call(func, backoff=_no_wait)

    assert len(raised) == 5
    assert exc_info.value is raised[-1]


def test_client_errors_are_not_retried_by_default() -> None:
    calls = []

    def func():
        calls.append(1)
        raise ApiError(400, "t", "Invalid Resource", "bad email")

    with pytest.raises(ApiError):
        retry_call(func, backoff=_no_wait)
    assert len(calls) == 1


def test_retry_everything_retries_client_errors() -> None:
    calls = []

    def func():
        calls.append(1)
        raise ApiError(400, "t", "Invalid Resource", "bad email")

    with pytest.raises(ApiError):
        retry_call(func, backoff=_no_wait, retry_on=retry_everything, max_attempts=3)
    assert len(calls) == 3


@pytest.mark.parametrize(
    ("exc", "expected"),
    [
        (NetworkError("down"), True),
        (ApiError(500, title="Internal"), True),
        (ApiError(503, title="Unavailable"), True),
        (ApiError(429, title="Too Many Requests"), True),
        (ApiError(404, title="Not Found"), False),
        (AuthError(401, title="API Key Invalid"), False),
        (DecodeError("html", status_code=502), True),
        (DecodeError("bad json", status_code=200), False),
        (SerializationError("set"), False),
        (ValueError("other"), False),
    ],
)
def test_is_retryable(exc: Exception, expected: bool) -> None:
    assert is_retryable(exc) is expected


def test_cancel_before_first_attempt() -> None:
    cancel = threading.Event()
    cancel.set()
    calls = []

    with pytest.raises(CancelledError):
        retry_call(lambda: calls.append(1), cancel=cancel, backoff=_no_wait)
    assert calls == []


def test_cancel_interrupts_backoff_wait() -> None:
    cancel = threading.Event()
    calls = []

    def func():
        calls.append(1)
        cancel.set()
        raise NetworkError("down")

    # an hour-long backoff must not be waited out once cancelled
    with pytest.raises(CancelledError) as exc_info:
        retry_call(func, cancel=cancel, backoff=lambda attempt: 3600.0)

    assert len(calls) == 1
    assert isinstance(exc_info.value.__cause__, NetworkError)


def test_uncancelled_event_still_retries() -> None:
    cancel = threading.Event()
    calls = []

    def func():
        calls.append(1)
        if len(calls) == 1:
            raise NetworkError("down")
        return 42

    assert retry_call(func, cancel=cancel, backoff=_no_wait) == 42


def test_random_backoff_draws_whole_minutes_in_window() -> None:
    backoff = random_backoff(rng=random.Random(7))
    delays = {backoff(attempt) for attempt in range(200)}

    assert delays <= {m * 60.0 for m in range(1, 10)}
    assert min(delays) == 60.0
    assert max(delays) == 540.0
