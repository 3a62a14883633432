"""Shared test fixtures for projectarr test suite."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import pytest

from projectarr.application.context import ProjectionContext
from projectarr.domain.entities.addon import (
    Descriptor,
    DescriptorPreview,
    ExtraValue,
    Manifest,
    ManifestPreview,
    ResourceError,
    ResourceLoadable,
    ResourcePath,
    ResourceRequest,
)
from projectarr.domain.entities.library import LibraryBucket, LibraryItem
from projectarr.domain.entities.loadable import Err, Loadable, Loading, Ready
from projectarr.domain.entities.models import InstalledAddonsRequest, LibraryRequest
from projectarr.domain.entities.profile import Profile
from projectarr.domain.entities.resource import MetaItemPreview, Stream, Video

NOW = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

CINEMETA_URL = "https://v3-cinemeta.strem.io/manifest.json"
OPENSUBS_URL = "https://opensubtitles.strem.io/manifest.json"
TORRENTIO_URL = "https://torrentio.strem.fun/manifest.json"
UNKNOWN_URL = "https://unknown.example.com/manifest.json"


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def descriptor(transport_url: str, name: str, logo: str | None = None) -> Descriptor:
    return Descriptor(
        manifest=Manifest(
            id=f"org.{name.lower()}",
            version="1.0.0",
            name=name,
            logo=logo,
        ),
        transport_url=transport_url,
    )


def descriptor_preview(transport_url: str, name: str) -> DescriptorPreview:
    return DescriptorPreview(
        manifest=ManifestPreview(id=f"org.{name.lower()}", version="1.0.0", name=name),
        transport_url=transport_url,
    )


def request(
    base: str = CINEMETA_URL,
    *,
    resource: str = "catalog",
    type: str = "movie",
    id: str = "top",
    extra: tuple[tuple[str, str], ...] = (),
) -> ResourceRequest:
    return ResourceRequest(
        base=base,
        path=ResourcePath(
            resource=resource,
            type=type,
            id=id,
            extra=tuple(ExtraValue(name=n, value=v) for n, v in extra),
        ),
    )


def loadable(
    content: Loadable[Any, ResourceError], base: str = CINEMETA_URL, **kwargs: Any
) -> ResourceLoadable[Any]:
    return ResourceLoadable(request=request(base, **kwargs), content=content)


def ready(value: Any, base: str = CINEMETA_URL, **kwargs: Any) -> ResourceLoadable[Any]:
    return loadable(Ready(value), base, **kwargs)


def loading(base: str = CINEMETA_URL, **kwargs: Any) -> ResourceLoadable[Any]:
    return loadable(Loading(), base, **kwargs)


def err(
    error: ResourceError | None = None, base: str = CINEMETA_URL, **kwargs: Any
) -> ResourceLoadable[Any]:
    return loadable(Err(error or ResourceError(kind="EmptyContent")), base, **kwargs)


def meta_preview(id: str = "tt0137523", name: str = "Fight Club") -> MetaItemPreview:
    return MetaItemPreview(id=id, type="movie", name=name)


def library_item(id: str, *, removed: bool = False) -> LibraryItem:
    return LibraryItem(id=id, type="movie", name=id, removed=removed)


# ---------------------------------------------------------------------------
# Fake ports
# ---------------------------------------------------------------------------


@dataclass
class FakeDeepLinks:
    """Records every call and returns a small, deterministic bundle."""

    calls: list[tuple[Any, ...]] = field(default_factory=list)

    def addons(self, request: ResourceRequest | InstalledAddonsRequest) -> dict[str, Any]:
        self.calls.append(("addons", request))
        if isinstance(request, InstalledAddonsRequest):
            return {"addons": f"#/addons/installed/{request.type or ''}"}
        return {"addons": f"#/addons/{request.path.type}/{request.path.id}"}

    def discover(self, request: ResourceRequest) -> dict[str, Any]:
        self.calls.append(("discover", request))
        return {"discover": f"#/discover/{request.path.type}/{request.path.id}"}

    def library(self, root: str, request: LibraryRequest | None = None) -> dict[str, Any]:
        self.calls.append(("library", root, request))
        suffix = f"/{request.type or ''}?sort={request.sort}" if request else ""
        return {"library": f"#/{root}{suffix}"}

    def library_item(self, item: LibraryItem) -> dict[str, Any]:
        self.calls.append(("library_item", item))
        return {"metaDetails": f"#/detail/{item.type}/{item.id}"}

    def meta_item(self, meta_item: MetaItemPreview) -> dict[str, Any]:
        self.calls.append(("meta_item", meta_item))
        return {"metaDetails": f"#/detail/{meta_item.type}/{meta_item.id}"}

    def meta_item_for_path(self, path: ResourcePath) -> dict[str, Any]:
        self.calls.append(("meta_item_for_path", path))
        return {"metaDetails": f"#/detail/{path.type}/{path.id}"}

    def stream(
        self,
        stream: Stream,
        stream_request: ResourceRequest | None = None,
        meta_request: ResourceRequest | None = None,
    ) -> dict[str, Any]:
        self.calls.append(("stream", stream, stream_request, meta_request))
        return {"player": f"#/player/{stream.url or stream.info_hash or stream.yt_id}"}

    def video(self, video: Video, request: ResourceRequest) -> dict[str, Any]:
        self.calls.append(("video", video, request))
        return {"metaDetails": f"#/detail/{request.path.type}/{video.id}"}

    def calls_named(self, name: str) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if call[0] == name]


@dataclass(frozen=True)
class FixedClock:
    at: datetime = NOW

    def now(self) -> datetime:
        return self.at


# ---------------------------------------------------------------------------
# Context fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def profile() -> Profile:
    """Profile with Cinemeta and Torrentio installed."""
    return Profile(
        addons=(
            descriptor(CINEMETA_URL, "Cinemeta", logo="https://cinemeta/logo.png"),
            descriptor(TORRENTIO_URL, "Torrentio"),
        )
    )


@pytest.fixture()
def library() -> LibraryBucket:
    return LibraryBucket(
        uid="user-1",
        items={
            "tt0137523": library_item("tt0137523"),
            "tt0110912": library_item("tt0110912", removed=True),
        },
    )


@pytest.fixture()
def links() -> FakeDeepLinks:
    return FakeDeepLinks()


@pytest.fixture()
def ctx(profile: Profile, library: LibraryBucket, links: FakeDeepLinks) -> ProjectionContext:
    return ProjectionContext(
        profile=profile,
        library=library,
        links=links,
        clock=FixedClock(),
    )
