"""Assemble a surface and render it JSON-ready in one call."""

from __future__ import annotations

from typing import Any

from projectarr.application.context import ProjectionContext
from projectarr.application.use_cases import (
    project_catalogs_with_extra,
    project_continue_watching_preview,
    project_discover,
    project_installed_addons,
    project_library,
    project_meta_details,
    project_remote_addons,
    project_session,
    project_streaming_server,
)
from projectarr.domain.entities.addon import DescriptorPreview
from projectarr.domain.entities.models import (
    CatalogsWithExtra,
    CatalogWithFilters,
    ContinueWatchingPreview,
    InstalledAddonsWithFilters,
    LibraryWithFilters,
    MetaDetails,
)
from projectarr.domain.entities.notifications import NotificationsBucket
from projectarr.domain.entities.resource import MetaItemPreview
from projectarr.domain.entities.streaming_server import StreamingServer
from projectarr.infrastructure.serialization import to_jsonable

Json = dict[str, Any]


def serialize_catalogs_with_extra(
    catalogs_with_extra: CatalogsWithExtra, ctx: ProjectionContext
) -> Json:
    return to_jsonable(project_catalogs_with_extra(catalogs_with_extra, ctx))


def serialize_discover(
    discover: CatalogWithFilters[MetaItemPreview], ctx: ProjectionContext
) -> Json:
    return to_jsonable(project_discover(discover, ctx))


def serialize_remote_addons(
    remote_addons: CatalogWithFilters[DescriptorPreview], ctx: ProjectionContext
) -> Json:
    return to_jsonable(project_remote_addons(remote_addons, ctx))


def serialize_installed_addons(
    installed_addons: InstalledAddonsWithFilters, ctx: ProjectionContext
) -> Json:
    return to_jsonable(project_installed_addons(installed_addons, ctx))


def serialize_library(
    library: LibraryWithFilters, root: str, ctx: ProjectionContext
) -> Json:
    return to_jsonable(project_library(library, root, ctx))


def serialize_continue_watching_preview(
    continue_watching_preview: ContinueWatchingPreview, ctx: ProjectionContext
) -> Json:
    return to_jsonable(
        project_continue_watching_preview(continue_watching_preview, ctx)
    )


def serialize_meta_details(meta_details: MetaDetails, ctx: ProjectionContext) -> Json:
    return to_jsonable(project_meta_details(meta_details, ctx))


def serialize_streaming_server(
    streaming_server: StreamingServer, ctx: ProjectionContext
) -> Json:
    return to_jsonable(project_streaming_server(streaming_server, ctx))


def serialize_session(
    notifications: NotificationsBucket, ctx: ProjectionContext
) -> Json:
    return to_jsonable(project_session(notifications, ctx))
