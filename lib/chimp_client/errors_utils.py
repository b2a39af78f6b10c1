from __future__ import annotations

import json
import logging
from typing import Any

from .errors import ApiError, AuthError, DecodeError, FieldError

logger = logging.getLogger(__name__)


def _field_errors(raw: Any) -> list[FieldError]:
    if not isinstance(raw, list):
        return []
    out: list[FieldError] = []
    for item in raw:
        if isinstance(item, dict):
            out.append(FieldError(field=str(item.get("field") or ""), message=str(item.get("message") or "")))
    return out


def parse_api_error(data: bytes, status_code: int | None = None) -> ApiError | DecodeError:
    """Turn a non-2xx response body into the error to raise.

    Returns a DecodeError instead of an ApiError when the body is not a JSON
    error object.
    """
    logger.warning("API error body: %s", data.decode("utf-8", errors="replace"))
    try:
        payload = json.loads(data)
    except ValueError as e:
        return DecodeError(f"invalid error payload: {e}", status_code=status_code, body=data)
    if not isinstance(payload, dict):
        return DecodeError(
            f"invalid error payload: expected object, got {type(payload).__name__}",
            status_code=status_code,
            body=data,
        )

    try:
        status = int(payload.get("status") or status_code or 0)
    except (TypeError, ValueError):
        status = status_code or 0
    cls = AuthError if status in (401, 403) else ApiError
    return cls(
        status,
        str(payload.get("type") or ""),
        str(payload.get("title") or ""),
        str(payload.get("detail") or ""),
        instance=str(payload.get("instance") or ""),
        errors=_field_errors(payload.get("errors")),
    )
