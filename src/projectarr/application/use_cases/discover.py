"""Discover projection: one catalog page with type/catalog/extra facets."""

from __future__ import annotations

from collections.abc import Sequence

from projectarr.application.context import ProjectionContext
from projectarr.application.enrichment import page_number
from projectarr.application.views import (
    View,
    addon_name_for,
    meta_preview_view,
    project_content,
)
from projectarr.domain.entities.models import (
    CatalogWithFilters,
    CatalogWithFiltersSelectable,
    SelectablePage,
)
from projectarr.domain.entities.resource import MetaItemPreview
from projectarr.domain.ports.deep_links import DeepLinksPort


def _page_view(page: SelectablePage | None, links: DeepLinksPort) -> View | None:
    if page is None:
        return None
    return {"deepLinks": links.discover(page.request)}


def _selectable_view(
    selectable: CatalogWithFiltersSelectable, links: DeepLinksPort
) -> View:
    return {
        "types": [
            {
                "type": selectable_type.type,
                "selected": selectable_type.selected,
                "request": selectable_type.request,
                "deepLinks": links.discover(selectable_type.request),
            }
            for selectable_type in selectable.types
        ],
        "catalogs": [
            {
                "catalog": selectable_catalog.catalog,
                "addonName": selectable_catalog.addon_name,
                "selected": selectable_catalog.selected,
                "request": selectable_catalog.request,
                "deepLinks": links.discover(selectable_catalog.request),
            }
            for selectable_catalog in selectable.catalogs
        ],
        "extra": [
            {
                "name": selectable_extra.name,
                "isRequired": selectable_extra.is_required,
                "options": [
                    {
                        "value": option.value,
                        "selected": option.selected,
                        "deepLinks": links.discover(option.request),
                    }
                    for option in selectable_extra.options
                ],
            }
            for selectable_extra in selectable.extra
        ],
        "prevPage": _page_view(selectable.prev_page, links),
        "nextPage": _page_view(selectable.next_page, links),
    }


def project_discover(
    state: CatalogWithFilters[MetaItemPreview], ctx: ProjectionContext
) -> View:
    """Project the discover surface.

    ``page`` is derived from the selected request's ``skip`` extra and is 1
    when nothing is selected. ``defaultRequest`` is the first type's request.
    """

    def _items(meta_items: Sequence[MetaItemPreview]) -> list[View]:
        return [
            meta_preview_view(meta_item, ctx, with_library=True)
            for meta_item in meta_items
        ]

    catalog: View | None = None
    if state.catalog is not None:
        catalog = {
            "content": project_content(state.catalog.content, _items),
            "addonName": addon_name_for(state.catalog.request, ctx),
        }

    types = state.selectable.types
    return {
        "selected": state.selected,
        "selectable": _selectable_view(state.selectable, ctx.links),
        "catalog": catalog,
        "defaultRequest": types[0].request if types else None,
        "page": page_number(
            state.selected.request if state.selected is not None else None,
            ctx.page_size,
        ),
    }
