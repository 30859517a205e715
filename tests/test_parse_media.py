"""Tests for the song, lyrics and watch playlist parsers."""

from typing import Any

import pytest
from conftest import text_run, thumbnails
from ytmweb.parsers.lyrics import parse_lyrics
from ytmweb.parsers.song import parse_song
from ytmweb.parsers.watch import parse_watch_playlist


def player_response(status: str | None = "OK") -> dict[str, Any]:
    response: dict[str, Any] = {
        "videoDetails": {
            "videoId": "vid1",
            "title": "One More Time",
            "author": "Daft Punk",
            "channelId": "UCdaft",
            "lengthSeconds": "320",
            "viewCount": "1000",
            "thumbnail": {"thumbnails": thumbnails("small", "big")},
        },
        "microformat": {
            "microformatDataRenderer": {
                "category": "Music",
                "publishDate": "2000-11-13",
                "uploadDate": "2000-11-13",
            }
        },
    }
    if status is not None:
        response["playabilityStatus"] = {"status": status}
    return response


class TestParseSong:
    """Tests for parse_song()."""

    def test_parses_details(self) -> None:
        song = parse_song(player_response())
        assert song.video_id == "vid1"
        assert song.title == "One More Time"
        assert song.artist == "Daft Punk"
        assert song.channel_id == "UCdaft"
        assert song.length_seconds == "320"
        assert song.view_count == "1000"
        assert song.thumbnail == "big"
        assert song.category == "Music"
        assert song.publish_date == "2000-11-13"

    @pytest.mark.parametrize(
        ("status", "playable"),
        [
            ("OK", True),
            ("UNPLAYABLE", False),
            ("LOGIN_REQUIRED", False),
            ("ok", False),
            (None, False),
        ],
    )
    def test_playable_only_for_ok_status(
        self, status: str | None, playable: bool
    ) -> None:
        song = parse_song(player_response(status))
        assert song.is_playable is playable
        assert song.playability_status == status

    def test_numeric_fields_become_strings(self) -> None:
        response = player_response()
        response["videoDetails"]["lengthSeconds"] = 320
        assert parse_song(response).length_seconds == "320"

    def test_empty_response(self) -> None:
        song = parse_song({})
        assert song.video_id is None
        assert song.is_playable is False


class TestParseLyrics:
    """Tests for parse_lyrics()."""

    def test_parses_lyrics_and_source(self) -> None:
        response = {
            "contents": {
                "sectionListRenderer": {
                    "contents": [
                        {
                            "musicDescriptionShelfRenderer": {
                                "description": {
                                    "runs": [
                                        {"text": "Line one\n"},
                                        {"text": "Line two"},
                                    ]
                                },
                                "footer": {"runs": [{"text": "Source: LyricFind"}]},
                            }
                        }
                    ]
                }
            }
        }
        lyrics = parse_lyrics(response, "MPLYt_1")
        assert lyrics.browse_id == "MPLYt_1"
        assert lyrics.lyrics == "Line one\nLine two"
        assert lyrics.source == "Source: LyricFind"

    def test_page_without_lyrics(self) -> None:
        response = {
            "contents": {
                "sectionListRenderer": {"contents": [{"messageRenderer": {}}]}
            }
        }
        lyrics = parse_lyrics(response, "MPLYt_1")
        assert lyrics.browse_id == "MPLYt_1"
        assert lyrics.lyrics is None
        assert lyrics.source is None


def queue_item(n: int) -> dict[str, Any]:
    return {
        "playlistPanelVideoRenderer": {
            "videoId": f"v{n}",
            "title": {"runs": [{"text": f"Track {n}"}]},
            "longBylineText": {
                "runs": [text_run("Artist", browse_id="UCartist"), {"text": " • "}]
            },
            "lengthText": {"runs": [{"text": "3:00"}]},
            "thumbnail": {"thumbnails": thumbnails("t")},
        }
    }


def watch_response(
    items: list[dict[str, Any]], lyrics_id: str | None = "MPLYt_1"
) -> dict[str, Any]:
    tabs: list[dict[str, Any]] = [
        {
            "tabRenderer": {
                "content": {
                    "musicQueueRenderer": {
                        "content": {
                            "playlistPanelRenderer": {
                                "playlistId": "RDAMVMv0",
                                "contents": items,
                            }
                        }
                    }
                }
            }
        }
    ]
    if lyrics_id is not None:
        tabs.append(
            {"tabRenderer": {"endpoint": {"browseEndpoint": {"browseId": lyrics_id}}}}
        )
    return {
        "contents": {
            "singleColumnMusicWatchNextResultsRenderer": {
                "tabbedRenderer": {"watchNextTabbedResultsRenderer": {"tabs": tabs}}
            }
        }
    }


class TestParseWatchPlaylist:
    """Tests for parse_watch_playlist()."""

    def test_parses_queue(self) -> None:
        watch = parse_watch_playlist(watch_response([queue_item(0)]), limit=25)
        assert watch.playlist_id == "RDAMVMv0"
        assert watch.lyrics_id == "MPLYt_1"
        [track] = watch.tracks
        assert track.video_id == "v0"
        assert track.title == "Track 0"
        assert track.artist == "Artist"
        assert track.artist_id == "UCartist"
        assert track.duration == "3:00"
        assert track.thumbnail == "t"

    def test_limit(self) -> None:
        items = [queue_item(n) for n in range(50)]
        watch = parse_watch_playlist(watch_response(items), limit=5)
        assert [t.video_id for t in watch.tracks] == [f"v{n}" for n in range(5)]

    def test_without_lyrics_tab(self) -> None:
        watch = parse_watch_playlist(watch_response([], lyrics_id=None), limit=25)
        assert watch.lyrics_id is None
        assert watch.tracks == []

    def test_skips_automix_rows(self) -> None:
        items = [queue_item(0), {"automixPreviewVideoRenderer": {}}, queue_item(1)]
        watch = parse_watch_playlist(watch_response(items), limit=25)
        assert [t.video_id for t in watch.tracks] == ["v0", "v1"]

    def test_empty_response(self) -> None:
        watch = parse_watch_playlist({}, limit=25)
        assert watch.playlist_id is None
        assert watch.tracks == []
        assert watch.lyrics_id is None
