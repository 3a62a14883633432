"""Protocol constants shared with the core."""

from __future__ import annotations

CATALOG_PAGE_SIZE = 100
SKIP_EXTRA_NAME = "skip"
META_RESOURCE_NAME = "meta"
CONTINUE_WATCHING_ROOT = "continuewatching"
INSTALLED_CATALOG_NAME = "Installed"
