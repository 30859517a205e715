"""Player response parser."""

from typing import Any

from ytmweb.lib.fields import get_thumbnail, to_str
from ytmweb.lib.nav import nav
from ytmweb.models.domain import Song
from ytmweb.parsers.paths import PLAYABLE_STATUS


def parse_song(response: Any) -> Song:
    """Parse a ``player`` response into a :class:`Song`.

    ``is_playable`` is true only when the playability status is exactly
    ``"OK"``; any other status (``"UNPLAYABLE"``, ``"LOGIN_REQUIRED"``,
    ...) or a missing one makes it false.
    """
    details = nav(response, "videoDetails")
    status = to_str(nav(response, "playabilityStatus", "status"))
    microformat = nav(response, "microformat", "microformatDataRenderer")

    return Song(
        video_id=to_str(nav(details, "videoId")),
        title=to_str(nav(details, "title")),
        artist=to_str(nav(details, "author")),
        channel_id=to_str(nav(details, "channelId")),
        length_seconds=to_str(nav(details, "lengthSeconds")),
        view_count=to_str(nav(details, "viewCount")),
        thumbnail=get_thumbnail(details),
        playability_status=status,
        is_playable=status == PLAYABLE_STATUS,
        category=to_str(nav(microformat, "category")),
        publish_date=to_str(nav(microformat, "publishDate")),
        upload_date=to_str(nav(microformat, "uploadDate")),
    )
