"""Composition root: config + ports -> ready-to-call surface serializers."""

from __future__ import annotations

from typing import Any

import structlog

from projectarr.application.context import ProjectionContext
from projectarr.domain.entities.addon import DescriptorPreview
from projectarr.domain.entities.library import LibraryBucket
from projectarr.domain.entities.models import (
    CatalogsWithExtra,
    CatalogWithFilters,
    ContinueWatchingPreview,
    InstalledAddonsWithFilters,
    LibraryWithFilters,
    MetaDetails,
)
from projectarr.domain.entities.notifications import NotificationsBucket
from projectarr.domain.entities.profile import Profile
from projectarr.domain.entities.resource import MetaItemPreview
from projectarr.domain.entities.streaming_server import StreamingServer
from projectarr.domain.ports.clock import ClockPort
from projectarr.domain.ports.deep_links import DeepLinksPort
from projectarr.infrastructure.clock import SystemClock
from projectarr.infrastructure.config import AppConfig
from projectarr.infrastructure.serialization import dumps
from projectarr.interfaces import serializers

log = structlog.get_logger(__name__)

Json = dict[str, Any]


class Projector:
    """Serializes every surface with one configuration and set of ports.

    Holds no per-render state: profile and library snapshots are passed
    to each call and dropped once the view is returned.
    """

    def __init__(
        self,
        config: AppConfig,
        links: DeepLinksPort,
        clock: ClockPort | None = None,
    ) -> None:
        self._config = config
        self._links = links
        self._clock = clock or SystemClock()

    def context(self, profile: Profile, library: LibraryBucket) -> ProjectionContext:
        return ProjectionContext(
            profile=profile,
            library=library,
            links=self._links,
            clock=self._clock,
        )

    def to_json(self, view: Json) -> str:
        return dumps(view, indent=self._config.projection.json_indent)

    def catalogs_with_extra(
        self, state: CatalogsWithExtra, *, profile: Profile, library: LibraryBucket
    ) -> Json:
        log.debug("surface_projected", surface="catalogs_with_extra")
        return serializers.serialize_catalogs_with_extra(
            state, self.context(profile, library)
        )

    def discover(
        self,
        state: CatalogWithFilters[MetaItemPreview],
        *,
        profile: Profile,
        library: LibraryBucket,
    ) -> Json:
        log.debug("surface_projected", surface="discover")
        return serializers.serialize_discover(state, self.context(profile, library))

    def remote_addons(
        self,
        state: CatalogWithFilters[DescriptorPreview],
        *,
        profile: Profile,
        library: LibraryBucket,
    ) -> Json:
        log.debug("surface_projected", surface="remote_addons")
        return serializers.serialize_remote_addons(
            state, self.context(profile, library)
        )

    def installed_addons(
        self,
        state: InstalledAddonsWithFilters,
        *,
        profile: Profile,
        library: LibraryBucket,
    ) -> Json:
        log.debug("surface_projected", surface="installed_addons")
        return serializers.serialize_installed_addons(
            state, self.context(profile, library)
        )

    def library(
        self,
        state: LibraryWithFilters,
        *,
        profile: Profile,
        library: LibraryBucket,
        root: str | None = None,
    ) -> Json:
        """Project the library; ``root`` defaults to ``projection.library_root``."""
        root = root or self._config.projection.library_root
        log.debug("surface_projected", surface="library", root=root)
        return serializers.serialize_library(
            state, root, self.context(profile, library)
        )

    def continue_watching_preview(
        self,
        state: ContinueWatchingPreview,
        *,
        profile: Profile,
        library: LibraryBucket,
    ) -> Json:
        log.debug("surface_projected", surface="continue_watching_preview")
        return serializers.serialize_continue_watching_preview(
            state, self.context(profile, library)
        )

    def meta_details(
        self, state: MetaDetails, *, profile: Profile, library: LibraryBucket
    ) -> Json:
        log.debug("surface_projected", surface="meta_details")
        return serializers.serialize_meta_details(
            state, self.context(profile, library)
        )

    def streaming_server(
        self, state: StreamingServer, *, profile: Profile, library: LibraryBucket
    ) -> Json:
        log.debug("surface_projected", surface="streaming_server")
        return serializers.serialize_streaming_server(
            state, self.context(profile, library)
        )

    def session(
        self,
        notifications: NotificationsBucket,
        *,
        profile: Profile,
        library: LibraryBucket,
    ) -> Json:
        log.debug("surface_projected", surface="session")
        return serializers.serialize_session(
            notifications, self.context(profile, library)
        )
