"""Tests for the album page parser."""

from typing import Any

import pytest
from conftest import list_item, shelf, single_column, text_run, thumbnails
from ytmweb.parsers.album import parse_album, parse_album_tracks

SEP = {"text": " • "}


def track_item(
    title: str, video_id: str | None, index_label: str | None = None
) -> dict[str, Any]:
    extra: dict[str, Any] = {}
    if index_label is not None:
        extra["index"] = {"runs": [{"text": index_label}]}
    return list_item(
        title,
        video_id=video_id,
        byline=[text_run("Daft Punk", browse_id="UCdaft")],
        duration="3:45",
        playlist_item_data={"videoId": video_id} if video_id else None,
        extra=extra,
    )


def two_column_response(
    header: dict[str, Any], tracks: list[dict[str, Any]]
) -> dict[str, Any]:
    return {
        "contents": {
            "twoColumnBrowseResultsRenderer": {
                "tabs": [
                    {
                        "tabRenderer": {
                            "content": {
                                "sectionListRenderer": {
                                    "contents": [
                                        {"musicResponsiveHeaderRenderer": header}
                                    ]
                                }
                            }
                        }
                    }
                ],
                "secondaryContents": {
                    "sectionListRenderer": {"contents": [shelf(tracks)]}
                },
            }
        }
    }


RESPONSIVE_HEADER: dict[str, Any] = {
    "title": {"runs": [{"text": "Discovery"}]},
    "straplineTextOne": {"runs": [text_run("Daft Punk", browse_id="UCdaft")]},
    "subtitle": {"runs": [{"text": "Album"}, SEP, {"text": "2001"}]},
    "secondSubtitle": {
        "runs": [{"text": "14 songs"}, SEP, {"text": "1 hour, 1 minute"}]
    },
    "description": {"runs": [{"text": "Second studio album."}]},
    "thumbnail": {
        "musicThumbnailRenderer": {
            "thumbnail": {"thumbnails": thumbnails("small", "large")}
        }
    },
    "menu": {
        "menuRenderer": {
            "items": [
                {"menuServiceItemRenderer": {}},
                {
                    "menuNavigationItemRenderer": {
                        "navigationEndpoint": {
                            "watchPlaylistEndpoint": {"playlistId": "OLAK5uy_disc"}
                        }
                    }
                },
            ]
        }
    },
}


class TestParseAlbum:
    """Tests for parse_album()."""

    def test_parses_responsive_header(self) -> None:
        response = two_column_response(RESPONSIVE_HEADER, [])
        album = parse_album(response, "MPREb_disc")
        assert album.browse_id == "MPREb_disc"
        assert album.title == "Discovery"
        assert album.artist == "Daft Punk"
        assert album.artist_id == "UCdaft"
        assert album.type == "Album"
        assert album.year == "2001"
        assert album.track_count == 14
        assert album.duration == "1 hour, 1 minute"
        assert album.thumbnail == "large"
        assert album.description == "Second studio album."
        assert album.audio_playlist_id == "OLAK5uy_disc"
        assert album.tracks == []

    def test_legacy_detail_header(self) -> None:
        response = single_column([shelf([track_item("One", "v1")])])
        response["header"] = {
            "musicDetailHeaderRenderer": {
                "title": {"runs": [{"text": "Homework"}]},
                "subtitle": {
                    "runs": [
                        {"text": "Album"},
                        SEP,
                        text_run("Daft Punk", browse_id="UCdaft"),
                        SEP,
                        {"text": "1997"},
                    ]
                },
            }
        }
        album = parse_album(response, "MPREb_home")
        assert album.title == "Homework"
        assert album.artist == "Daft Punk"
        assert album.artist_id == "UCdaft"
        assert album.year == "1997"
        assert album.type == "Album"
        assert [t.title for t in album.tracks] == ["One"]

    def test_missing_header_gives_empty_fields(self) -> None:
        album = parse_album({}, "MPREb_x")
        assert album.browse_id == "MPREb_x"
        assert album.title is None
        assert album.artist is None
        assert album.track_count is None
        assert album.tracks == []

    def test_limit_does_not_affect_header(self) -> None:
        tracks = [track_item(f"T{n}", f"v{n}") for n in range(10)]
        response = two_column_response(RESPONSIVE_HEADER, tracks)
        album = parse_album(response, "MPREb_disc", limit=2)
        assert album.title == "Discovery"
        assert album.track_count == 14
        assert len(album.tracks) == 2


class TestParseAlbumTracks:
    """Tests for parse_album_tracks()."""

    def test_numbers_tracks_by_position(self) -> None:
        tracks = [
            track_item("A", "va", index_label="7"),
            track_item("B", "vb", index_label="2"),
            track_item("C", "vc", index_label="99"),
        ]
        response = two_column_response(RESPONSIVE_HEADER, tracks)
        parsed = parse_album_tracks(response)
        assert [t.track_number for t in parsed] == [1, 2, 3]
        assert [t.title for t in parsed] == ["A", "B", "C"]

    def test_track_fields(self) -> None:
        response = two_column_response(RESPONSIVE_HEADER, [track_item("A", "va")])
        [track] = parse_album_tracks(response)
        assert track.video_id == "va"
        assert track.artist == "Daft Punk"
        assert track.artist_id == "UCdaft"
        assert track.duration == "3:45"
        assert track.is_available is True

    def test_unavailable_track(self) -> None:
        response = two_column_response(RESPONSIVE_HEADER, [track_item("Gone", None)])
        [track] = parse_album_tracks(response)
        assert track.is_available is False
        assert track.video_id is None

    def test_foreign_rows_do_not_consume_numbers(self) -> None:
        tracks = [
            track_item("A", "va"),
            {"continuationItemRenderer": {}},
            track_item("B", "vb"),
        ]
        response = two_column_response(RESPONSIVE_HEADER, tracks)
        assert [t.track_number for t in parse_album_tracks(response)] == [1, 2]

    @pytest.mark.parametrize("limit", [0, 1, 3])
    def test_limit(self, limit: int) -> None:
        tracks = [track_item(f"T{n}", f"v{n}") for n in range(3)]
        response = two_column_response(RESPONSIVE_HEADER, tracks)
        assert len(parse_album_tracks(response, limit)) == limit

    def test_parsing_is_idempotent(self) -> None:
        tracks = [track_item(f"T{n}", f"v{n}") for n in range(3)]
        response = two_column_response(RESPONSIVE_HEADER, tracks)
        assert parse_album(response, "MPREb_disc") == parse_album(
            response, "MPREb_disc"
        )
