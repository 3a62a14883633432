from .addon import (
    Descriptor,
    DescriptorPreview,
    ExtraValue,
    Manifest,
    ManifestPreview,
    ResourceError,
    ResourceLoadable,
    ResourcePath,
    ResourceRequest,
)
from .errors import ProjectionError, UnknownLoadableError, UnserializableValueError
from .library import LibraryBucket, LibraryItem
from .loadable import Err, Loadable, Loading, Ready, expect_loadable
from .notifications import NotificationItem, NotificationsBucket
from .profile import Profile
from .resource import Link, MetaItem, MetaItemPreview, Stream, Video

__all__ = [
    "Descriptor",
    "DescriptorPreview",
    "Err",
    "ExtraValue",
    "LibraryBucket",
    "LibraryItem",
    "Link",
    "Loadable",
    "Loading",
    "Manifest",
    "ManifestPreview",
    "MetaItem",
    "MetaItemPreview",
    "NotificationItem",
    "NotificationsBucket",
    "Profile",
    "ProjectionError",
    "Ready",
    "ResourceError",
    "ResourceLoadable",
    "ResourcePath",
    "ResourceRequest",
    "Stream",
    "UnknownLoadableError",
    "UnserializableValueError",
    "Video",
    "expect_loadable",
]
