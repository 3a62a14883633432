"""Library surfaces: the filtered library and the continue-watching row."""

from __future__ import annotations

from projectarr.application.context import ProjectionContext
from projectarr.application.flatten import flatten
from projectarr.application.views import View
from projectarr.domain.entities.constants import CONTINUE_WATCHING_ROOT
from projectarr.domain.entities.library import LibraryItem
from projectarr.domain.entities.models import (
    ContinueWatchingPreview,
    LibraryWithFilters,
)


def _library_item_view(library_item: LibraryItem, ctx: ProjectionContext) -> View:
    return flatten(library_item, deepLinks=ctx.links.library_item(library_item))


def project_library(
    state: LibraryWithFilters, root: str, ctx: ProjectionContext
) -> View:
    """Project the library; facet links are scoped to the ``root`` route."""
    links = ctx.links
    return {
        "selected": state.selected,
        "selectable": {
            "types": [
                {
                    "type": selectable_type.type,
                    "selected": selectable_type.selected,
                    "deepLinks": links.library(root, selectable_type.request),
                }
                for selectable_type in state.selectable.types
            ],
            "sorts": [
                {
                    "sort": selectable_sort.sort,
                    "selected": selectable_sort.selected,
                    "deepLinks": links.library(root, selectable_sort.request),
                }
                for selectable_sort in state.selectable.sorts
            ],
        },
        "catalog": [_library_item_view(item, ctx) for item in state.catalog],
    }


def project_continue_watching_preview(
    state: ContinueWatchingPreview, ctx: ProjectionContext
) -> View:
    return {
        "libraryItems": [
            _library_item_view(item, ctx) for item in state.library_items
        ],
        "deepLinks": ctx.links.library(CONTINUE_WATCHING_ROOT),
    }
