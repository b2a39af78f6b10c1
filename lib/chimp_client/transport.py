from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from typing import Any

import httpx

from . import __version__
from .config_types import ClientConfig
from .decoding import decode_into
from .errors import DecodeError, NetworkError, SerializationError
from .errors_utils import parse_api_error
from .params import QueryParams, encode_query_params

logger = logging.getLogger(__name__)


def _dump_message(start_line: str, headers: httpx.Headers, body: bytes) -> str:
    lines = [start_line]
    lines.extend(f"{k}: {v}" for k, v in headers.multi_items())
    lines.append("")
    lines.append(body.decode("utf-8", errors="replace"))
    return "\n".join(lines)


class Transport:
    """Sends one request to the API and decodes its outcome."""

    def __init__(self, cfg: ClientConfig):
        self._cfg = cfg
        self._client = httpx.Client(
            auth=(cfg.user, cfg.api_key),
            timeout=cfg.timeout_s,
            transport=cfg.transport,
            headers={
                "Content-Type": "application/json",
                "User-Agent": f"chimp-client/{__version__}",
            },
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def execute(
            self,
            method: str,
            path: str,
            params: QueryParams | Mapping[str, str] | None = None,
            body: Any = None,
            response: Callable[[Any], Any] | None = None,
    ) -> Any:
        url = f"{self._cfg.endpoint}{path}"
        if self._cfg.debug:
            logger.debug("Requesting %s: %s", method, url)

        content = None
        if body is not None:
            try:
                content = json.dumps(body).encode("utf-8")
            except (TypeError, ValueError) as e:
                raise SerializationError(f"cannot encode request body: {e}") from e

        query = encode_query_params(params)
        if query and self._cfg.debug:
            logger.debug("Adding query params: %r", query)

        try:
            req = self._client.build_request(method, url, params=query or None, content=content)
            if self._cfg.debug:
                # Basic auth is attached by httpx at send time, so the key never shows here.
                logger.debug("%s", _dump_message(f"{req.method} {req.url} HTTP/1.1", req.headers, content or b""))
            r = self._client.send(req)
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        try:
            data = r.content
            if self._cfg.debug:
                logger.debug("%s", _dump_message(f"{r.http_version} {r.status_code} {r.reason_phrase}", r.headers, data))
        finally:
            r.close()

        if 200 <= r.status_code < 300:
            if response is None or not data:
                return None
            try:
                return decode_into(response, json.loads(data))
            except Exception as e:
                raise DecodeError(f"cannot decode response: {e}", status_code=r.status_code, body=data) from e

        raise parse_api_error(data, r.status_code)
