"""Board projection: one row per catalog of every installed addon."""

from __future__ import annotations

from collections.abc import Sequence

from projectarr.application.context import ProjectionContext
from projectarr.application.views import (
    View,
    addon_name_for,
    meta_preview_view,
    project_content,
)
from projectarr.domain.entities.models import CatalogsWithExtra
from projectarr.domain.entities.resource import MetaItemPreview


def project_catalogs_with_extra(
    state: CatalogsWithExtra, ctx: ProjectionContext
) -> View:
    def _items(meta_items: Sequence[MetaItemPreview]) -> list[View]:
        return [
            meta_preview_view(meta_item, ctx, with_library=False)
            for meta_item in meta_items
        ]

    return {
        "selected": state.selected,
        "catalogs": [
            {
                "request": catalog.request,
                "content": project_content(catalog.content, _items),
                "addonName": addon_name_for(catalog.request, ctx),
                "deepLinks": ctx.links.discover(catalog.request),
            }
            for catalog in state.catalogs
        ],
    }
