"""Lookup context threaded through every projection call."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from projectarr.domain.entities.constants import CATALOG_PAGE_SIZE
from projectarr.domain.entities.library import LibraryBucket
from projectarr.domain.entities.profile import Profile
from projectarr.domain.ports.clock import ClockPort
from projectarr.domain.ports.deep_links import DeepLinksPort


@dataclass(frozen=True)
class ProjectionContext:
    """Read-only snapshot of everything a projection may consult.

    Built once per render and discarded with the view it produced.
    """

    profile: Profile
    library: LibraryBucket
    links: DeepLinksPort
    clock: ClockPort
    page_size: int = CATALOG_PAGE_SIZE

    def now(self) -> datetime:
        return self.clock.now()
