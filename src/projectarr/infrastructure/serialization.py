"""JSON rendering of view models for the presentation layer.

- dataclass records become dicts with camelCase keys;
- ``Loadable`` becomes ``{"type": "Loading"}``, ``{"type": "Ready",
  "content": ...}`` or ``{"type": "Err", "content": ...}``;
- tuples become lists, datetimes ISO-8601 strings (UTC as ``Z``).
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any

from projectarr.application.flatten import camel_fields
from projectarr.domain.entities.errors import UnserializableValueError
from projectarr.domain.entities.loadable import Err, Loadable, Ready, expect_loadable


def _datetime_to_iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def _loadable_to_jsonable(value: Loadable[Any, Any]) -> dict[str, Any]:
    state = expect_loadable(value)
    if isinstance(state, Ready):
        return {"type": "Ready", "content": to_jsonable(state.content)}
    if isinstance(state, Err):
        return {"type": "Err", "content": to_jsonable(state.error)}
    return {"type": "Loading"}


def to_jsonable(value: Any) -> Any:
    """Recursively convert a view model into JSON-compatible primitives.

    Raises:
        UnserializableValueError: for values with no JSON rendering
            (a caller bug, never recovered here).
    """
    if isinstance(value, Enum):
        return to_jsonable(value.value)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, Loadable):
        return _loadable_to_jsonable(value)
    if isinstance(value, datetime):
        return _datetime_to_iso(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {key: to_jsonable(item) for key, item in camel_fields(value).items()}
    if isinstance(value, Mapping):
        out: dict[str, Any] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnserializableValueError(key)
            out[key] = to_jsonable(item)
        return out
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    raise UnserializableValueError(value)


def dumps(value: Any, *, indent: int | None = None) -> str:
    """Serialize a view model to a JSON string."""
    return json.dumps(to_jsonable(value), indent=indent, ensure_ascii=False)
