"""Tests for meta-extension collection and unique_by()."""

from __future__ import annotations

from conftest import CINEMETA_URL, TORRENTIO_URL, UNKNOWN_URL, err, loading, ready

from projectarr.application.cross_references import collect_meta_extensions, unique_by
from projectarr.domain.entities.profile import Profile
from projectarr.domain.entities.resource import Link, MetaItem


def _meta(*links: Link) -> MetaItem:
    return MetaItem(id="tt1", type="movie", name="Movie", links=links)


def _ext(name: str, url: str) -> Link:
    return Link(name=name, category="meta", url=url)


A = _ext("Trakt", "https://trakt.example/a")
B = _ext("Ratings", "https://ratings.example/b")
C = _ext("Reviews", "https://reviews.example/c")


class TestUniqueBy:
    def test_keeps_first_occurrence_in_order(self) -> None:
        assert list(unique_by(["a1", "b1", "a2", "c1"], key=lambda s: s[0])) == [
            "a1",
            "b1",
            "c1",
        ]

    def test_empty(self) -> None:
        assert list(unique_by([], key=lambda s: s)) == []


class TestCollectMetaExtensions:
    def test_dedups_across_sources_preserving_order(self, profile: Profile) -> None:
        sources = [
            ready(_meta(A, B), CINEMETA_URL, resource="meta"),
            ready(_meta(A, C), TORRENTIO_URL, resource="meta"),
        ]
        result = collect_meta_extensions(sources, profile)
        assert [e["url"] for e in result] == [A.url, B.url, C.url]

    def test_first_occurrence_keeps_its_addon(self, profile: Profile) -> None:
        sources = [
            ready(_meta(A), TORRENTIO_URL, resource="meta"),
            ready(_meta(A), CINEMETA_URL, resource="meta"),
        ]
        (only,) = collect_meta_extensions(sources, profile)
        assert only["addon"]["transportUrl"] == TORRENTIO_URL
        assert only["addon"]["manifest"] == {"name": "Torrentio", "logo": None}

    def test_non_meta_links_are_ignored(self, profile: Profile) -> None:
        genre = Link(name="Drama", category="Genres", url="stremio:///discover/drama")
        sources = [ready(_meta(genre, A), CINEMETA_URL, resource="meta")]
        result = collect_meta_extensions(sources, profile)
        assert [e["name"] for e in result] == ["Trakt"]

    def test_only_ready_sources_contribute(self, profile: Profile) -> None:
        sources = [
            loading(CINEMETA_URL, resource="meta"),
            err(base=TORRENTIO_URL, resource="meta"),
            ready(_meta(B), CINEMETA_URL, resource="meta"),
        ]
        result = collect_meta_extensions(sources, profile)
        assert [e["url"] for e in result] == [B.url]

    def test_unresolved_addon_is_dropped(self, profile: Profile) -> None:
        sources = [
            ready(_meta(A), UNKNOWN_URL, resource="meta"),
            ready(_meta(B), CINEMETA_URL, resource="meta"),
        ]
        result = collect_meta_extensions(sources, profile)
        assert [e["url"] for e in result] == [B.url]

    def test_dedup_happens_before_addon_lookup(self, profile: Profile) -> None:
        # The first A comes from an unknown addon: it wins the dedup and is
        # then dropped, so the later A from Cinemeta does not reappear.
        sources = [
            ready(_meta(A), UNKNOWN_URL, resource="meta"),
            ready(_meta(A), CINEMETA_URL, resource="meta"),
        ]
        assert collect_meta_extensions(sources, profile) == []

    def test_entry_shape(self, profile: Profile) -> None:
        sources = [ready(_meta(A), CINEMETA_URL, resource="meta")]
        assert collect_meta_extensions(sources, profile) == [
            {
                "url": A.url,
                "name": "Trakt",
                "addon": {
                    "manifest": {
                        "name": "Cinemeta",
                        "logo": "https://cinemeta/logo.png",
                    },
                    "transportUrl": CINEMETA_URL,
                },
            }
        ]

    def test_no_sources(self, profile: Profile) -> None:
        assert collect_meta_extensions([], profile) == []
