"""Meta-extension links collected across every meta source."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Sequence
from typing import Any, TypeVar

import structlog

from projectarr.application.lookup import find_addon
from projectarr.domain.entities.addon import ResourceLoadable, ResourceRequest
from projectarr.domain.entities.constants import META_RESOURCE_NAME
from projectarr.domain.entities.loadable import Ready, expect_loadable
from projectarr.domain.entities.profile import Profile
from projectarr.domain.entities.resource import Link, MetaItem

log = structlog.get_logger(__name__)

T = TypeVar("T")


def unique_by(items: Iterable[T], key: Callable[[T], Hashable]) -> Iterator[T]:
    """Yield items whose key was not seen before, keeping first occurrences."""
    seen: set[Hashable] = set()
    for item in items:
        item_key = key(item)
        if item_key in seen:
            continue
        seen.add(item_key)
        yield item


def _meta_links(
    meta_catalogs: Sequence[ResourceLoadable[MetaItem]],
) -> Iterator[tuple[ResourceRequest, Link]]:
    for catalog in meta_catalogs:
        state = expect_loadable(catalog.content)
        if not isinstance(state, Ready):
            continue
        for link in state.content.links:
            if link.category == META_RESOURCE_NAME:
                yield catalog.request, link


def collect_meta_extensions(
    meta_catalogs: Sequence[ResourceLoadable[MetaItem]],
    profile: Profile,
) -> list[dict[str, Any]]:
    """Unique ``meta`` links of all ready sources, with their owning addon.

    Duplicates are dropped by URL before the addon lookup; links whose
    source addon is not installed are dropped afterwards.
    """
    extensions: list[dict[str, Any]] = []
    pairs = unique_by(_meta_links(meta_catalogs), key=lambda pair: pair[1].url)
    for request, link in pairs:
        addon = find_addon(request.base, profile)
        if addon is None:
            log.debug(
                "meta_extension_addon_unresolved",
                url=link.url,
                transport_url=request.base,
            )
            continue
        extensions.append(
            {
                "url": link.url,
                "name": link.name,
                "addon": {
                    "manifest": {
                        "name": addon.manifest.name,
                        "logo": addon.manifest.logo,
                    },
                    "transportUrl": addon.transport_url,
                },
            }
        )
    return extensions
