from __future__ import annotations

from typing import Any


class ProjectionError(Exception):
    """Base error for projection bugs (caller contract violations)."""


class UnknownLoadableError(ProjectionError):
    """A resolution state outside Loading/Ready/Err reached the projection."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown resolution state: {value!r}")
        self.value = value


class UnserializableValueError(ProjectionError, TypeError):
    """The serializer met a value it has no JSON rendering for."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Cannot serialize value of type {type(value).__name__}")
        self.value = value
