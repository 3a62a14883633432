"""Addon resource records: meta items, videos, streams and links.

Pure value objects without I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Link:
    """A cross-reference declared by a meta item (genre, cast, meta, ...)."""

    name: str
    category: str
    url: str


@dataclass(frozen=True)
class SubtitleTrack:
    id: str
    lang: str
    url: str


@dataclass(frozen=True)
class StreamBehaviorHints:
    not_web_ready: bool = False
    binge_group: str | None = None
    country_whitelist: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Stream:
    """A playable source.

    Exactly one of ``url``, ``yt_id``, ``info_hash``, ``external_url`` is
    expected to be set by the addon; the projection does not check it.
    """

    url: str | None = None
    yt_id: str | None = None
    info_hash: str | None = None
    file_idx: int | None = None
    external_url: str | None = None
    name: str | None = None
    description: str | None = None
    thumbnail: str | None = None
    subtitles: tuple[SubtitleTrack, ...] = ()
    behavior_hints: StreamBehaviorHints = field(default_factory=StreamBehaviorHints)


@dataclass(frozen=True)
class SeriesInfo:
    season: int
    episode: int


@dataclass(frozen=True)
class Video:
    id: str
    title: str
    released: datetime | None = None
    overview: str | None = None
    thumbnail: str | None = None
    streams: tuple[Stream, ...] = ()
    series_info: SeriesInfo | None = None
    trailer_streams: tuple[Stream, ...] = ()


@dataclass(frozen=True)
class MetaItemBehaviorHints:
    default_video_id: str | None = None
    featured_video_id: str | None = None
    has_scheduled_videos: bool = False


@dataclass(frozen=True)
class MetaItemPreview:
    """Catalog entry (``metas`` element of a catalog response)."""

    id: str
    type: str
    name: str
    poster: str | None = None
    background: str | None = None
    logo: str | None = None
    description: str | None = None
    release_info: str | None = None
    runtime: str | None = None
    released: datetime | None = None
    poster_shape: str = "poster"
    links: tuple[Link, ...] = ()
    trailer_streams: tuple[Stream, ...] = ()
    behavior_hints: MetaItemBehaviorHints = field(
        default_factory=MetaItemBehaviorHints
    )


@dataclass(frozen=True)
class MetaItem(MetaItemPreview):
    """Full meta item (``meta`` resource): a preview plus its videos."""

    videos: tuple[Video, ...] = ()
