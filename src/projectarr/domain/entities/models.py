"""Per-surface state slices, as resolved by the core for one render.

Each slice mirrors one UI surface: board catalogs, discover, remote
and installed addons, library, continue watching and meta details.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

from projectarr.domain.entities.addon import (
    DescriptorPreview,
    ExtraValue,
    ResourceLoadable,
    ResourcePath,
    ResourceRequest,
)
from projectarr.domain.entities.library import LibraryItem
from projectarr.domain.entities.resource import MetaItem, MetaItemPreview, Stream

T = TypeVar("T")

LibrarySort = Literal["lastwatched", "name", "timeswatched"]


# ---------------------------------------------------------------------------
# Board
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CatalogsWithExtraSelected:
    type: str | None = None
    extra: tuple[ExtraValue, ...] = ()


@dataclass(frozen=True)
class CatalogsWithExtra:
    selected: CatalogsWithExtraSelected | None = None
    catalogs: tuple[ResourceLoadable[tuple[MetaItemPreview, ...]], ...] = ()


# ---------------------------------------------------------------------------
# Catalog with filters (discover, remote addons)
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CatalogWithFiltersSelected:
    request: ResourceRequest


@dataclass(frozen=True)
class SelectableType:
    type: str
    selected: bool
    request: ResourceRequest


@dataclass(frozen=True)
class SelectableCatalog:
    catalog: str
    addon_name: str
    selected: bool
    request: ResourceRequest


@dataclass(frozen=True)
class SelectableExtraOption:
    value: str | None
    selected: bool
    request: ResourceRequest


@dataclass(frozen=True)
class SelectableExtra:
    name: str
    is_required: bool
    options: tuple[SelectableExtraOption, ...] = ()


@dataclass(frozen=True)
class SelectablePage:
    request: ResourceRequest


@dataclass(frozen=True)
class CatalogWithFiltersSelectable:
    types: tuple[SelectableType, ...] = ()
    catalogs: tuple[SelectableCatalog, ...] = ()
    extra: tuple[SelectableExtra, ...] = ()
    prev_page: SelectablePage | None = None
    next_page: SelectablePage | None = None


@dataclass(frozen=True)
class CatalogWithFilters(Generic[T]):
    """One catalog page plus the facets to navigate to other pages."""

    selected: CatalogWithFiltersSelected | None = None
    selectable: CatalogWithFiltersSelectable = field(
        default_factory=CatalogWithFiltersSelectable
    )
    catalog: ResourceLoadable[tuple[T, ...]] | None = None


# ---------------------------------------------------------------------------
# Library
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LibraryRequest:
    type: str | None = None
    sort: LibrarySort = "lastwatched"


@dataclass(frozen=True)
class LibrarySelected:
    request: LibraryRequest


@dataclass(frozen=True)
class LibrarySelectableType:
    type: str | None
    selected: bool
    request: LibraryRequest


@dataclass(frozen=True)
class LibrarySelectableSort:
    sort: LibrarySort
    selected: bool
    request: LibraryRequest


@dataclass(frozen=True)
class LibrarySelectable:
    types: tuple[LibrarySelectableType, ...] = ()
    sorts: tuple[LibrarySelectableSort, ...] = ()


@dataclass(frozen=True)
class LibraryWithFilters:
    selected: LibrarySelected | None = None
    selectable: LibrarySelectable = field(default_factory=LibrarySelectable)
    catalog: tuple[LibraryItem, ...] = ()


@dataclass(frozen=True)
class ContinueWatchingPreview:
    library_items: tuple[LibraryItem, ...] = ()


# ---------------------------------------------------------------------------
# Installed addons
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InstalledAddonsRequest:
    type: str | None = None


@dataclass(frozen=True)
class InstalledAddonsSelected:
    request: InstalledAddonsRequest


@dataclass(frozen=True)
class InstalledAddonsSelectableType:
    type: str | None
    selected: bool
    request: InstalledAddonsRequest


@dataclass(frozen=True)
class InstalledAddonsSelectable:
    types: tuple[InstalledAddonsSelectableType, ...] = ()


@dataclass(frozen=True)
class InstalledAddonsWithFilters:
    selected: InstalledAddonsSelected | None = None
    selectable: InstalledAddonsSelectable = field(
        default_factory=InstalledAddonsSelectable
    )
    catalog: tuple[DescriptorPreview, ...] = ()


# ---------------------------------------------------------------------------
# Meta details
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MetaDetailsSelected:
    meta_path: ResourcePath
    stream_path: ResourcePath | None = None


@dataclass(frozen=True)
class MetaDetails:
    """All meta and stream sources queried for one title.

    Meta sources are redundant (one is shown), stream sources are
    complementary (all are shown).
    """

    selected: MetaDetailsSelected | None = None
    meta_catalogs: tuple[ResourceLoadable[MetaItem], ...] = ()
    streams_catalogs: tuple[ResourceLoadable[tuple[Stream, ...]], ...] = ()
