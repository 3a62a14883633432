"""Representative selection across redundant sources of one entity."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeVar

from projectarr.domain.entities.addon import ResourceLoadable
from projectarr.domain.entities.loadable import expect_loadable

T = TypeVar("T")


def select_representative(
    sources: Sequence[ResourceLoadable[T]],
) -> ResourceLoadable[T] | None:
    """Pick the source whose state drives the top-level UI.

    Priority, first match wins:

    1. the first ``Ready`` source;
    2. if every source is ``Err``, the first source, so the UI can still
       show an error with its addon context;
    3. otherwise the first ``Loading`` source.

    Ties are broken by list order only. An empty list yields None.
    """
    states = [expect_loadable(source.content) for source in sources]

    for source, state in zip(sources, states):
        if state.is_ready:
            return source

    if all(state.is_err for state in states):
        return sources[0] if sources else None

    for source, state in zip(sources, states):
        if state.is_loading:
            return source
    return None
