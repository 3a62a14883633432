from .addons import project_installed_addons, project_remote_addons
from .catalogs_with_extra import project_catalogs_with_extra
from .discover import project_discover
from .library import project_continue_watching_preview, project_library
from .meta_details import project_meta_details
from .session import project_session
from .streaming_server import project_streaming_server

__all__ = [
    "project_catalogs_with_extra",
    "project_continue_watching_preview",
    "project_discover",
    "project_installed_addons",
    "project_library",
    "project_meta_details",
    "project_remote_addons",
    "project_session",
    "project_streaming_server",
]
