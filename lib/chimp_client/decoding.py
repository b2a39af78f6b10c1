from __future__ import annotations

import dataclasses
from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(cls)


def _rename_keys(cls: type, data: Any) -> Any:
    if not isinstance(data, dict):
        raise TypeError(f"expected JSON object for {cls.__name__}, got {type(data).__name__}")
    out: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if not f.init:
            continue
        key = f.metadata.get("json", f.name)
        if key in data:
            out[f.name] = data[key]
    return out


def decode_into(target: type[T] | Callable[[Any], T], data: Any) -> T:
    """Build the caller's value from decoded JSON.

    Types (dataclasses, pydantic models, ``dict``...) are validated with
    pydantic, so a value of the wrong type fails instead of passing through.
    Dataclass fields may read another JSON key via ``metadata={"json": ...}``;
    unknown keys are ignored. Any other callable is called with the data.
    """
    if isinstance(target, type):
        if dataclasses.is_dataclass(target):
            data = _rename_keys(target, data)
        return _adapter(target).validate_python(data)
    return target(data)
