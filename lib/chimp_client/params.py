from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class QueryParams(Protocol):
    """Anything that can describe itself as URL query parameters.

    Keys missing from the mapping, or mapped to an empty string, are not sent.
    """

    def params(self) -> Mapping[str, str]:
        ...


def encode_query_params(params: QueryParams | Mapping[str, str] | None) -> dict[str, str]:
    if params is None:
        return {}
    raw = params.params() if isinstance(params, QueryParams) else params
    return {str(k): str(v) for k, v in raw.items() if v != ""}


def _join(values: Sequence[str]) -> str:
    return ",".join(v for v in values if v)


@dataclass(frozen=True)
class BasicQueryParams:
    status: str = ""
    sort_field: str = ""
    sort_dir: str = ""
    fields: Sequence[str] = ()
    exclude_fields: Sequence[str] = ()

    def params(self) -> dict[str, str]:
        return {
            "status": self.status,
            "sort_field": self.sort_field,
            "sort_dir": self.sort_dir,
            "fields": _join(self.fields),
            "exclude_fields": _join(self.exclude_fields),
        }


@dataclass(frozen=True)
class ExtendedQueryParams(BasicQueryParams):
    count: int = 0
    offset: int = 0

    def params(self) -> dict[str, str]:
        out = super().params()
        out["count"] = str(self.count) if self.count else ""
        out["offset"] = str(self.offset) if self.offset else ""
        return out
