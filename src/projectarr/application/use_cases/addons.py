"""Addon surfaces: remote addon catalogs and the installed addons list."""

from __future__ import annotations

from collections.abc import Sequence

from projectarr.application.context import ProjectionContext
from projectarr.application.flatten import flatten
from projectarr.application.lookup import is_installed
from projectarr.application.views import View, project_content
from projectarr.domain.entities.addon import DescriptorPreview
from projectarr.domain.entities.constants import INSTALLED_CATALOG_NAME
from projectarr.domain.entities.models import (
    CatalogWithFilters,
    InstalledAddonsRequest,
    InstalledAddonsWithFilters,
)


def project_remote_addons(
    state: CatalogWithFilters[DescriptorPreview], ctx: ProjectionContext
) -> View:
    """Project an addon catalog page.

    ``installed`` compares transport URLs against the profile, so two
    listings of the same URL are both marked installed.
    """

    def _addons(addons: Sequence[DescriptorPreview]) -> list[View]:
        return [
            flatten(addon, installed=is_installed(addon.transport_url, ctx.profile))
            for addon in addons
        ]

    links = ctx.links
    return {
        "selected": state.selected,
        "selectable": {
            "catalogs": [
                {
                    "catalog": selectable_catalog.catalog,
                    "addonName": selectable_catalog.addon_name,
                    "selected": selectable_catalog.selected,
                    "request": selectable_catalog.request,
                    "deepLinks": links.addons(selectable_catalog.request),
                }
                for selectable_catalog in state.selectable.catalogs
            ],
            "types": [
                {
                    "type": selectable_type.type,
                    "selected": selectable_type.selected,
                    "request": selectable_type.request,
                    "deepLinks": links.addons(selectable_type.request),
                }
                for selectable_type in state.selectable.types
            ],
        },
        "catalog": (
            {"content": project_content(state.catalog.content, _addons)}
            if state.catalog is not None
            else None
        ),
    }


def project_installed_addons(
    state: InstalledAddonsWithFilters, ctx: ProjectionContext
) -> View:
    """Project the installed addons list.

    Every entry is installed by construction. The catalog facet is a single
    synthetic "Installed" entry, whatever the type facets are.
    """
    links = ctx.links
    return {
        "selected": state.selected,
        "selectable": {
            "types": [
                {
                    "type": selectable_type.type,
                    "selected": selectable_type.selected,
                    "deepLinks": links.addons(selectable_type.request),
                }
                for selectable_type in state.selectable.types
            ],
            "catalogs": [
                {
                    "catalog": INSTALLED_CATALOG_NAME,
                    "selected": state.selected is not None,
                    "deepLinks": links.addons(InstalledAddonsRequest(type=None)),
                }
            ],
        },
        "catalog": [flatten(addon, installed=True) for addon in state.catalog],
    }
