"""Port for navigation-link (deep link) generation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from projectarr.domain.entities.addon import ResourcePath, ResourceRequest
from projectarr.domain.entities.library import LibraryItem
from projectarr.domain.entities.models import InstalledAddonsRequest, LibraryRequest
from projectarr.domain.entities.resource import MetaItemPreview, Stream, Video

DeepLinks = Mapping[str, Any]


@runtime_checkable
class DeepLinksPort(Protocol):
    """Builds opaque, JSON-ready navigation bundles for the presentation layer.

    The projection only decides when to call which method and with what
    input; the returned bundles are embedded as-is under ``deepLinks``.
    """

    def addons(self, request: ResourceRequest | InstalledAddonsRequest) -> DeepLinks:
        """Links for a remote-addons or installed-addons facet."""
        ...

    def discover(self, request: ResourceRequest) -> DeepLinks:
        """Links for a catalog page (board row, discover facet, pagination)."""
        ...

    def library(self, root: str, request: LibraryRequest | None = None) -> DeepLinks:
        """Links for a library facet scoped to ``root``."""
        ...

    def library_item(self, item: LibraryItem) -> DeepLinks:
        ...

    def meta_item(self, meta_item: MetaItemPreview) -> DeepLinks:
        ...

    def meta_item_for_path(self, path: ResourcePath) -> DeepLinks:
        """Links for a meta item known only by its resource path."""
        ...

    def stream(
        self,
        stream: Stream,
        stream_request: ResourceRequest | None = None,
        meta_request: ResourceRequest | None = None,
    ) -> DeepLinks:
        """Links for a stream, optionally in the context of its meta page."""
        ...

    def video(self, video: Video, request: ResourceRequest) -> DeepLinks:
        """Links for a video of the meta item fetched by ``request``."""
        ...
