"""Tests for the library and continue-watching projections."""

from __future__ import annotations

from conftest import FakeDeepLinks, library_item

from projectarr.application.context import ProjectionContext
from projectarr.application.use_cases import (
    project_continue_watching_preview,
    project_library,
)
from projectarr.domain.entities.models import (
    ContinueWatchingPreview,
    LibraryRequest,
    LibrarySelectable,
    LibrarySelectableSort,
    LibrarySelectableType,
    LibrarySelected,
    LibraryWithFilters,
)


def _library_state() -> LibraryWithFilters:
    all_types = LibraryRequest(type=None, sort="lastwatched")
    movies = LibraryRequest(type="movie", sort="lastwatched")
    by_name = LibraryRequest(type=None, sort="name")
    return LibraryWithFilters(
        selected=LibrarySelected(request=all_types),
        selectable=LibrarySelectable(
            types=(
                LibrarySelectableType(type=None, selected=True, request=all_types),
                LibrarySelectableType(type="movie", selected=False, request=movies),
            ),
            sorts=(
                LibrarySelectableSort(
                    sort="lastwatched", selected=True, request=all_types
                ),
                LibrarySelectableSort(sort="name", selected=False, request=by_name),
            ),
        ),
        catalog=(library_item("tt0137523"), library_item("tt0068646")),
    )


class TestLibrary:
    def test_facets_are_scoped_to_root(
        self, ctx: ProjectionContext, links: FakeDeepLinks
    ) -> None:
        view = project_library(_library_state(), "library", ctx)
        types = view["selectable"]["types"]
        sorts = view["selectable"]["sorts"]

        assert [t["type"] for t in types] == [None, "movie"]
        assert types[1]["selected"] is False
        assert types[1]["deepLinks"] == {"library": "#/library/movie?sort=lastwatched"}
        assert [s["sort"] for s in sorts] == ["lastwatched", "name"]
        assert sorts[1]["deepLinks"] == {"library": "#/library/?sort=name"}
        assert {call[1] for call in links.calls_named("library")} == {"library"}

    def test_other_root(self, ctx: ProjectionContext) -> None:
        view = project_library(_library_state(), "continuewatching", ctx)
        (first, _) = view["selectable"]["types"]
        assert first["deepLinks"]["library"].startswith("#/continuewatching")

    def test_items_get_links(self, ctx: ProjectionContext) -> None:
        view = project_library(_library_state(), "library", ctx)
        first, second = view["catalog"]
        assert first["id"] == "tt0137523"
        assert first["deepLinks"] == {"metaDetails": "#/detail/movie/tt0137523"}
        assert second["id"] == "tt0068646"
        assert first["removed"] is False
        assert first["posterShape"] == "poster"

    def test_selected_passes_through(self, ctx: ProjectionContext) -> None:
        state = _library_state()
        assert project_library(state, "library", ctx)["selected"] is state.selected

    def test_empty_state(self, ctx: ProjectionContext) -> None:
        view = project_library(LibraryWithFilters(), "library", ctx)
        assert view == {
            "selected": None,
            "selectable": {"types": [], "sorts": []},
            "catalog": [],
        }


class TestContinueWatchingPreview:
    def test_items_and_row_link(
        self, ctx: ProjectionContext, links: FakeDeepLinks
    ) -> None:
        state = ContinueWatchingPreview(
            library_items=(library_item("tt0137523"), library_item("tt0110912"))
        )
        view = project_continue_watching_preview(state, ctx)

        assert [item["id"] for item in view["libraryItems"]] == [
            "tt0137523",
            "tt0110912",
        ]
        assert view["libraryItems"][1]["deepLinks"] == {
            "metaDetails": "#/detail/movie/tt0110912"
        }
        assert view["deepLinks"] == {"library": "#/continuewatching"}
        assert links.calls_named("library") == [("library", "continuewatching", None)]

    def test_empty(self, ctx: ProjectionContext) -> None:
        view = project_continue_watching_preview(ContinueWatchingPreview(), ctx)
        assert view["libraryItems"] == []
