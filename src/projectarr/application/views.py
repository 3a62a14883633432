"""View builders shared by several surfaces."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from projectarr.application.context import ProjectionContext
from projectarr.application.enrichment import in_library
from projectarr.application.flatten import flatten
from projectarr.application.lookup import resolve_addon_name
from projectarr.domain.entities.addon import ResourceError, ResourceRequest
from projectarr.domain.entities.loadable import Loadable, expect_loadable
from projectarr.domain.entities.resource import MetaItemPreview, Stream
from projectarr.domain.ports.deep_links import DeepLinksPort

T = TypeVar("T")
U = TypeVar("U")

View = dict[str, Any]


def project_content(
    content: Loadable[T, ResourceError],
    project: Callable[[T], U],
) -> Loadable[U, ResourceError]:
    """Map ready content through ``project``.

    ``Loading`` stays ``Loading``; ``Err`` keeps the very same error object.
    """
    return expect_loadable(content).map_ready(project)


def stream_view(
    stream: Stream,
    links: DeepLinksPort,
    stream_request: ResourceRequest | None = None,
    meta_request: ResourceRequest | None = None,
) -> View:
    return flatten(
        stream, deepLinks=links.stream(stream, stream_request, meta_request)
    )


def trailer_stream_views(streams: Iterable[Stream], links: DeepLinksPort) -> list[View]:
    return [stream_view(stream, links) for stream in streams]


def meta_preview_view(
    meta_item: MetaItemPreview,
    ctx: ProjectionContext,
    *,
    with_library: bool,
) -> View:
    """A catalog entry with its trailers and links.

    Discover shows library membership on its entries; the board does not.
    """
    computed: View = {
        "trailerStreams": trailer_stream_views(meta_item.trailer_streams, ctx.links)
    }
    if with_library:
        computed["inLibrary"] = in_library(meta_item.id, ctx.library)
    computed["deepLinks"] = ctx.links.meta_item(meta_item)
    return flatten(meta_item, **computed)


def addon_name_for(request: ResourceRequest, ctx: ProjectionContext) -> str | None:
    return resolve_addon_name(request.base, ctx.profile)
