"""Addon directory lookup keyed by transport URL.

Linear scans with early exit: profiles hold tens of addons at most.
"""

from __future__ import annotations

from projectarr.domain.entities.addon import Descriptor
from projectarr.domain.entities.profile import Profile


def find_addon(transport_url: str, profile: Profile) -> Descriptor | None:
    """Return the installed addon served from ``transport_url``, or None."""
    for addon in profile.addons:
        if addon.transport_url == transport_url:
            return addon
    return None


def resolve_addon_name(transport_url: str, profile: Profile) -> str | None:
    """Display name of the installed addon at ``transport_url``, or None."""
    addon = find_addon(transport_url, profile)
    return addon.manifest.name if addon is not None else None


def is_installed(transport_url: str, profile: Profile) -> bool:
    """Whether any installed addon is served from ``transport_url``."""
    return any(addon.transport_url == transport_url for addon in profile.addons)
