"""Tests for the addon directory lookup."""

from __future__ import annotations

from conftest import CINEMETA_URL, TORRENTIO_URL, UNKNOWN_URL, descriptor

from projectarr.application.lookup import find_addon, is_installed, resolve_addon_name
from projectarr.domain.entities.profile import Profile


class TestResolveAddonName:
    def test_known_transport_url(self, profile: Profile) -> None:
        assert resolve_addon_name(CINEMETA_URL, profile) == "Cinemeta"
        assert resolve_addon_name(TORRENTIO_URL, profile) == "Torrentio"

    def test_unknown_transport_url_is_none(self, profile: Profile) -> None:
        assert resolve_addon_name(UNKNOWN_URL, profile) is None

    def test_empty_profile(self) -> None:
        assert resolve_addon_name(CINEMETA_URL, Profile()) is None

    def test_first_match_wins(self) -> None:
        profile = Profile(
            addons=(
                descriptor(CINEMETA_URL, "First"),
                descriptor(CINEMETA_URL, "Second"),
            )
        )
        assert resolve_addon_name(CINEMETA_URL, profile) == "First"

    def test_exact_match_only(self, profile: Profile) -> None:
        assert resolve_addon_name(CINEMETA_URL + "/", profile) is None


class TestFindAddon:
    def test_returns_descriptor(self, profile: Profile) -> None:
        addon = find_addon(CINEMETA_URL, profile)
        assert addon is not None
        assert addon.manifest.logo == "https://cinemeta/logo.png"

    def test_missing(self, profile: Profile) -> None:
        assert find_addon(UNKNOWN_URL, profile) is None


class TestIsInstalled:
    def test_installed(self, profile: Profile) -> None:
        assert is_installed(TORRENTIO_URL, profile) is True

    def test_not_installed(self, profile: Profile) -> None:
        assert is_installed(UNKNOWN_URL, profile) is False
