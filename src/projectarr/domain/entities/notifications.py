from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class NotificationItem:
    """A new video of a library meta item the user should hear about."""

    meta_id: str
    video_id: str
    video_released: datetime


@dataclass(frozen=True)
class NotificationsBucket:
    """Notifications grouped by meta id, then by video id."""

    created: datetime
    uid: str | None = None
    items: Mapping[str, Mapping[str, NotificationItem]] = field(default_factory=dict)
    last_updated: datetime | None = None
