"""Meta details projection: one title, its videos, streams and extensions.

Meta sources are redundant: a single representative drives the page.
Stream sources are complementary: every one of them is projected.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from projectarr.application.context import ProjectionContext
from projectarr.application.cross_references import collect_meta_extensions
from projectarr.application.enrichment import (
    in_library,
    is_scheduled,
    is_upcoming,
    is_watched,
    watch_progress,
)
from projectarr.application.flatten import flatten
from projectarr.application.selection import select_representative
from projectarr.application.views import (
    View,
    addon_name_for,
    project_content,
    stream_view,
    trailer_stream_views,
)
from projectarr.domain.entities.addon import ResourceLoadable, ResourceRequest
from projectarr.domain.entities.models import MetaDetails
from projectarr.domain.entities.resource import MetaItem, Stream, Video

log = structlog.get_logger(__name__)


def _video_view(
    video: Video,
    meta_item: MetaItem,
    request: ResourceRequest,
    ctx: ProjectionContext,
) -> View:
    # Schedule flags come from the meta item, not from the video itself.
    return flatten(
        video,
        trailerStreams=trailer_stream_views(video.trailer_streams, ctx.links),
        upcoming=is_upcoming(meta_item, ctx.now()),
        watched=is_watched(meta_item),
        progress=watch_progress(meta_item),
        scheduled=is_scheduled(meta_item),
        deepLinks=ctx.links.video(video, request),
    )


def _meta_catalog_view(
    catalog: ResourceLoadable[MetaItem], ctx: ProjectionContext
) -> View:
    def _meta_item(meta_item: MetaItem) -> View:
        return flatten(
            meta_item,
            trailerStreams=trailer_stream_views(meta_item.trailer_streams, ctx.links),
            videos=[
                _video_view(video, meta_item, catalog.request, ctx)
                for video in meta_item.videos
            ],
            inLibrary=in_library(meta_item.id, ctx.library),
            deepLinks=ctx.links.meta_item(meta_item),
        )

    return {
        "content": project_content(catalog.content, _meta_item),
        "addonName": addon_name_for(catalog.request, ctx),
    }


def _streams_catalog_view(
    catalog: ResourceLoadable[tuple[Stream, ...]],
    meta_request: ResourceRequest | None,
    ctx: ProjectionContext,
) -> View:
    def _streams(streams: Sequence[Stream]) -> list[View]:
        if meta_request is None:
            return [stream_view(stream, ctx.links) for stream in streams]
        return [
            stream_view(stream, ctx.links, catalog.request, meta_request)
            for stream in streams
        ]

    return {
        "content": project_content(catalog.content, _streams),
        "addonName": addon_name_for(catalog.request, ctx),
    }


def project_meta_details(state: MetaDetails, ctx: ProjectionContext) -> View:
    """Project the meta details surface.

    ``metaExtensions`` are gathered from every meta source, not only from
    the selected one.
    """
    meta_catalog = select_representative(state.meta_catalogs)
    if meta_catalog is not None:
        log.debug(
            "meta_catalog_selected",
            transport_url=meta_catalog.request.base,
            state=type(meta_catalog.content).__name__,
            candidates=len(state.meta_catalogs),
        )
    meta_request = meta_catalog.request if meta_catalog is not None else None

    return {
        "selected": state.selected,
        "metaCatalog": (
            _meta_catalog_view(meta_catalog, ctx) if meta_catalog is not None else None
        ),
        "streamsCatalogs": [
            _streams_catalog_view(catalog, meta_request, ctx)
            for catalog in state.streams_catalogs
        ],
        "metaExtensions": collect_meta_extensions(state.meta_catalogs, ctx.profile),
    }
