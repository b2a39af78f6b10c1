__version__ = "0.1.0"

from .client import ChimpClient
from .config_types import ClientConfig
from .errors import (
    ApiError,
    AuthError,
    CancelledError,
    ChimpClientError,
    DecodeError,
    FieldError,
    NetworkError,
    SerializationError,
)
from .params import BasicQueryParams, ExtendedQueryParams, QueryParams
from .retry import is_retryable, random_backoff, retry_everything

__all__ = [
    "ChimpClient",
    "ClientConfig",
    "ApiError",
    "AuthError",
    "CancelledError",
    "ChimpClientError",
    "DecodeError",
    "FieldError",
    "NetworkError",
    "SerializationError",
    "BasicQueryParams",
    "ExtendedQueryParams",
    "QueryParams",
    "is_retryable",
    "random_backoff",
    "retry_everything",
]
