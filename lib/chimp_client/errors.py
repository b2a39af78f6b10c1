from __future__ import annotations

from dataclasses import dataclass


class ChimpClientError(Exception):
    """Base client error."""


class NetworkError(ChimpClientError):
    """Transport/network layer error."""


class SerializationError(ChimpClientError):
    """Request body could not be encoded as JSON."""


class CancelledError(ChimpClientError):
    """Request was cancelled while waiting to retry."""


class DecodeError(ChimpClientError):
    def __init__(self, message: str, *, status_code: int | None = None, body: bytes = b""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ApiError(ChimpClientError):
    def __init__(
            self,
            status: int,
            type: str = "",
            title: str = "",
            detail: str = "",
            *,
            instance: str = "",
            errors: list[FieldError] | None = None,
    ):
        super().__init__(f"Error {status} {title} ({detail})")
        self.status = status
        self.type = type
        self.title = title
        self.detail = detail
        self.instance = instance
        self.errors = list(errors or [])

    @property
    def status_code(self) -> int:
        return self.status


class AuthError(ApiError):
    """Auth-related API error."""
