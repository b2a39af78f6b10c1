from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

import httpx

from .endpoint import resolve_endpoint
from .retry import DEFAULT_MAX_ATTEMPTS

DEFAULT_USER = "chimp"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str = field(repr=False)
    timeout_s: float | None = None
    transport: httpx.BaseTransport | None = None
    user: str = DEFAULT_USER
    debug: bool = False
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff: Callable[[int], float] | None = None
    retry_on: Callable[[Exception], bool] | None = None
    endpoint: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "endpoint", resolve_endpoint(self.api_key))
