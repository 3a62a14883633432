"""Library records. The bucket is the read-only library index."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class LibraryItemState:
    last_watched: datetime | None = None
    time_watched: int = 0
    time_offset: int = 0
    overall_time_watched: int = 0
    times_watched: int = 0
    flagged_watched: int = 0
    duration: int = 0
    video_id: str | None = None
    watched: str | None = None  # encoded watched bitfield, opaque here
    no_notif: bool = False


@dataclass(frozen=True)
class LibraryItemBehaviorHints:
    default_video_id: str | None = None
    featured_video_id: str | None = None
    has_scheduled_videos: bool = False


@dataclass(frozen=True)
class LibraryItem:
    id: str
    type: str
    name: str
    poster: str | None = None
    poster_shape: str = "poster"
    removed: bool = False  # tombstone: not a library member
    temp: bool = False
    ctime: datetime | None = None
    mtime: datetime | None = None
    state: LibraryItemState = field(default_factory=LibraryItemState)
    behavior_hints: LibraryItemBehaviorHints = field(
        default_factory=LibraryItemBehaviorHints
    )


@dataclass(frozen=True)
class LibraryBucket:
    """Library index: item id -> library item (tombstones included)."""

    uid: str | None = None
    items: Mapping[str, LibraryItem] = field(default_factory=dict)
