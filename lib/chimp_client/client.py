from __future__ import annotations

import threading
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from .config_types import ClientConfig
from .params import QueryParams
from .retry import retry_call
from .transport import Transport

T = TypeVar("T")


class ChimpClient:
    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self._t = Transport(cfg)

    @classmethod
    def from_api_key(cls, api_key: str, **kwargs: Any) -> "ChimpClient":
        return cls(ClientConfig(api_key, **kwargs))

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def endpoint(self) -> str:
        return self._cfg.endpoint

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "ChimpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(
            self,
            method: str,
            path: str,
            params: QueryParams | Mapping[str, str] | None = None,
            body: Any = None,
            response: type[T] | Callable[[Any], T] | None = None,
            *,
            cancel: threading.Event | None = None,
    ) -> T | None:
        """Call the API, retrying failed attempts.

        ``response`` decides how a JSON body is returned: a dataclass type is
        filled from the object's keys, any other callable gets the decoded
        value. With ``response=None`` the body is ignored and None returned.
        """
        return retry_call(
            lambda: self._t.execute(method, path, params, body, response),
            max_attempts=self._cfg.max_attempts,
            backoff=self._cfg.backoff,
            retry_on=self._cfg.retry_on,
            cancel=cancel,
        )

    def request_ok(self, method: str, path: str, *, cancel: threading.Event | None = None) -> bool:
        """Make a request ignoring the body; True when the API answered 2xx."""
        self.request(method, path, cancel=cancel)
        return True

    def ping(self) -> bool:
        return self.request_ok("GET", "/ping")
