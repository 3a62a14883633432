"""Derived per-entity fields: library membership, pagination, schedule flags."""

from __future__ import annotations

import re
from datetime import datetime

from projectarr.domain.entities.addon import ResourceRequest
from projectarr.domain.entities.constants import CATALOG_PAGE_SIZE, SKIP_EXTRA_NAME
from projectarr.domain.entities.library import LibraryBucket
from projectarr.domain.entities.resource import MetaItemPreview

_U32_MAX = 2**32 - 1
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def in_library(item_id: str, library: LibraryBucket) -> bool:
    """True iff the library holds ``item_id`` and it is not tombstoned."""
    library_item = library.items.get(item_id)
    return library_item is not None and not library_item.removed


def is_scheduled(meta_item: MetaItemPreview) -> bool:
    return meta_item.behavior_hints.has_scheduled_videos


def is_upcoming(meta_item: MetaItemPreview, now: datetime) -> bool:
    """Scheduled and not yet released.

    A missing release date counts as possibly upcoming.
    """
    if not meta_item.behavior_hints.has_scheduled_videos:
        return False
    return meta_item.released is None or meta_item.released > now


def is_watched(meta_item: MetaItemPreview) -> bool:
    # Stub: watched state is not derived from the library yet.
    return False


def watch_progress(meta_item: MetaItemPreview) -> int | None:
    # Stub: progress is not derived from the library yet.
    return None


def parse_skip(value: str | None) -> int | None:
    """Parse a ``skip`` extra value as an unsigned 32-bit integer."""
    if value is None or not _UNSIGNED_RE.fullmatch(value):
        return None
    skip = int(value)
    if skip > _U32_MAX:
        return None
    return skip


def page_number(
    request: ResourceRequest | None,
    page_size: int = CATALOG_PAGE_SIZE,
) -> int:
    """1-based page of ``request``; 1 when ``skip`` is missing or invalid."""
    if request is None:
        return 1
    skip = parse_skip(request.path.get_extra_first_value(SKIP_EXTRA_NAME))
    if skip is None:
        return 1
    return 1 + skip // page_size
