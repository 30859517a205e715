"""Tests for the search results parser."""

from typing import Any

import pytest
from conftest import list_item, shelf, text_run, thumbnails
from ytmweb.parsers.search import parse_search_item, parse_search_results

SEP = {"text": " • "}


def song_item(n: int) -> dict[str, Any]:
    return list_item(
        f"Song {n}",
        video_id=f"vid{n}",
        byline=[
            text_run("Artist", browse_id="UCartist"),
            SEP,
            text_run("Album", browse_id="MPREb_album"),
            SEP,
            text_run("3:30"),
        ],
        thumbs=thumbnails(f"small{n}", f"large{n}"),
    )


def tabbed_response(sections: list[dict[str, Any]]) -> dict[str, Any]:
    return {
        "contents": {
            "tabbedSearchResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {"sectionListRenderer": {"contents": sections}}
                        }
                    }
                ]
            }
        }
    }


def plain_response(sections: list[dict[str, Any]]) -> dict[str, Any]:
    return {"contents": {"sectionListRenderer": {"contents": sections}}}


class TestParseSearchResults:
    """Tests for parse_search_results()."""

    def test_parses_song_result(self) -> None:
        response = tabbed_response([shelf([song_item(1)])])
        [result] = parse_search_results(response, limit=10)
        assert result.title == "Song 1"
        assert result.video_id == "vid1"
        assert result.browse_id is None
        assert result.artist == "Artist"
        assert result.artist_id == "UCartist"
        assert result.album == "Album"
        assert result.album_id == "MPREb_album"
        assert result.duration == "3:30"
        assert result.thumbnail == "large1"

    def test_limit_returns_first_items_in_order(self) -> None:
        response = tabbed_response([shelf([song_item(n) for n in range(50)])])
        results = parse_search_results(response, limit=5)
        assert [r.video_id for r in results] == [f"vid{n}" for n in range(5)]

    def test_collects_across_shelves(self) -> None:
        response = plain_response(
            [
                shelf([song_item(1), song_item(2)]),
                {"itemSectionRenderer": {}},
                shelf([song_item(3)]),
            ]
        )
        results = parse_search_results(response, limit=10)
        assert [r.video_id for r in results] == ["vid1", "vid2", "vid3"]

    def test_limit_stops_across_shelves(self) -> None:
        response = plain_response([shelf([song_item(1)]), shelf([song_item(2)])])
        assert len(parse_search_results(response, limit=1)) == 1

    @pytest.mark.parametrize("limit", [0, -1])
    def test_non_positive_limit(self, limit: int) -> None:
        response = tabbed_response([shelf([song_item(1)])])
        assert parse_search_results(response, limit=limit) == []

    @pytest.mark.parametrize(
        "response",
        [{}, {"contents": {}}, tabbed_response([]), plain_response([shelf([])])],
        ids=["empty", "no_sections", "no_shelves", "empty_shelf"],
    )
    def test_missing_structure_returns_empty(self, response: dict) -> None:
        assert parse_search_results(response, limit=10) == []

    def test_skips_foreign_renderers(self) -> None:
        response = tabbed_response(
            [shelf([{"messageRenderer": {}}, song_item(1)])]
        )
        assert [r.video_id for r in parse_search_results(response, 10)] == ["vid1"]

    def test_parsing_is_idempotent(self) -> None:
        response = tabbed_response([shelf([song_item(n) for n in range(3)])])
        assert parse_search_results(response, 10) == parse_search_results(
            response, 10
        )


class TestParseSearchItem:
    """Tests for parse_search_item()."""

    def test_album_result_links_from_renderer(self) -> None:
        item = list_item(
            "Discovery",
            browse_id="MPREb_disc",
            byline=[
                text_run("Album"),
                SEP,
                text_run("Daft Punk"),
                SEP,
                text_run("2001"),
            ],
        )
        result = parse_search_item(item["musicResponsiveListItemRenderer"])
        assert result is not None
        assert result.title == "Discovery"
        assert result.browse_id == "MPREb_disc"
        assert result.video_id is None
        assert result.duration is None

    def test_unlinked_album_by_position(self) -> None:
        item = list_item(
            "Track",
            video_id="v1",
            byline=[text_run("Some Artist"), SEP, text_run("Some Album")],
        )
        result = parse_search_item(item["musicResponsiveListItemRenderer"])
        assert result is not None
        assert result.artist == "Some Artist"
        assert result.album == "Some Album"

    def test_without_flex_columns(self) -> None:
        assert parse_search_item({"thumbnail": {}}) is None

    def test_without_byline(self) -> None:
        item = list_item("Only Title", video_id="v1")
        result = parse_search_item(item["musicResponsiveListItemRenderer"])
        assert result is not None
        assert result.title == "Only Title"
        assert result.artist is None
        assert result.thumbnail is None
