"""Resolution state of an asynchronous fetch owned by the core.

Exactly one of ``Loading``, ``Ready`` or ``Err``. Projection code must
handle all three explicitly; ``expect_loadable`` turns anything else into
a fatal ``UnknownLoadableError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from projectarr.domain.entities.errors import UnknownLoadableError

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")


class Loadable(Generic[T, E]):
    """Common base of the three resolution states."""

    __slots__ = ()

    @property
    def is_loading(self) -> bool:
        return isinstance(self, Loading)

    @property
    def is_ready(self) -> bool:
        return isinstance(self, Ready)

    @property
    def is_err(self) -> bool:
        return isinstance(self, Err)

    def map_ready(self, fn: Callable[[T], U]) -> Loadable[U, E]:
        """Transform ``Ready`` content; ``Loading`` and ``Err`` pass through.

        The ``Err`` payload is kept by reference, never copied.
        """
        state = expect_loadable(self)
        if isinstance(state, Ready):
            return Ready(fn(state.content))
        return state  # type: ignore[return-value]


@dataclass(frozen=True)
class Loading(Loadable[Any, Any]):
    pass


@dataclass(frozen=True)
class Ready(Loadable[T, Any]):
    content: T


@dataclass(frozen=True)
class Err(Loadable[Any, E]):
    error: E


def expect_loadable(value: Any) -> Loadable[Any, Any]:
    """Return ``value`` if it is one of the three known states, else raise."""
    if isinstance(value, (Loading, Ready, Err)):
        return value
    raise UnknownLoadableError(value)
