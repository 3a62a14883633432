"""Addon descriptors and resource requests.

Pure value objects without I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from projectarr.domain.entities.loadable import Loadable

T = TypeVar("T")


@dataclass(frozen=True)
class ExtraValue:
    """One ``name=value`` extra argument of a resource path."""

    name: str  # "skip", "genre", "search", ...
    value: str


@dataclass(frozen=True)
class ResourcePath:
    """Resource path relative to an addon transport URL.

    Serialized by addons as ``/{resource}/{type}/{id}/{extra}.json``.
    """

    resource: str  # "catalog", "meta", "stream", ...
    type: str  # "movie", "series", ...
    id: str
    extra: tuple[ExtraValue, ...] = ()

    def get_extra_first_value(self, name: str) -> str | None:
        """Return the first extra value named ``name``, or None."""
        for extra_value in self.extra:
            if extra_value.name == name:
                return extra_value.value
        return None


@dataclass(frozen=True)
class ResourceRequest:
    """A single fetch: addon base (transport URL) plus resource path."""

    base: str
    path: ResourcePath


@dataclass(frozen=True)
class ResourceError:
    """Opaque upstream failure. Never inspected by the projection."""

    kind: str  # "EmptyContent", "UnexpectedResponse", "Env", ...
    message: str = ""


@dataclass(frozen=True)
class ResourceLoadable(Generic[T]):
    """A request paired with its current resolution state."""

    request: ResourceRequest
    content: Loadable[T, ResourceError]


@dataclass(frozen=True)
class ManifestExtra:
    name: str
    is_required: bool = False
    options: tuple[str, ...] = ()
    options_limit: int = 1


@dataclass(frozen=True)
class ManifestCatalog:
    id: str
    type: str
    name: str | None = None
    extra: tuple[ManifestExtra, ...] = ()


@dataclass(frozen=True)
class Manifest:
    """Addon manifest (subset carried through to the presentation layer)."""

    id: str
    version: str
    name: str
    description: str | None = None
    logo: str | None = None
    background: str | None = None
    types: tuple[str, ...] = ()
    resources: tuple[str, ...] = ()
    id_prefixes: tuple[str, ...] | None = None
    catalogs: tuple[ManifestCatalog, ...] = ()
    addon_catalogs: tuple[ManifestCatalog, ...] = ()


@dataclass(frozen=True)
class DescriptorFlags:
    official: bool = False
    protected: bool = False


@dataclass(frozen=True)
class Descriptor:
    """An installed addon as stored in the profile."""

    manifest: Manifest
    transport_url: str
    flags: DescriptorFlags = field(default_factory=DescriptorFlags)


@dataclass(frozen=True)
class ManifestPreview:
    id: str
    version: str
    name: str
    description: str | None = None
    logo: str | None = None
    background: str | None = None
    types: tuple[str, ...] = ()


@dataclass(frozen=True)
class DescriptorPreview:
    """An addon listing, as returned by addon catalogs."""

    manifest: ManifestPreview
    transport_url: str
