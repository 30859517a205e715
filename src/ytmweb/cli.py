#!/usr/bin/env python3
"""Command-line interface for ytmweb.

This CLI is primarily for debugging and development.
For production use, import ytmweb as a library.
"""

import json
import logging
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from pathlib import Path

import click
from pydantic import BaseModel
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ytmweb.auth.store import inspect_credentials, load_credentials
from ytmweb.client import YTMusicClient
from ytmweb.config import ClientConfig
from ytmweb.exceptions import YTMusicError
from ytmweb.models.auth import DeviceCode, OAuthCredentials
from ytmweb.models.enums import CredentialState, Privacy, SearchFilter
from ytmweb.settings import DEFAULT_OAUTH_FILE, Settings

logger = logging.getLogger("ytmweb")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Clears existing handlers first, so it can be called again to switch
    consoles.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn library errors into click errors."""
    try:
        yield
    except (YTMusicError, ValueError) as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e
    except click.ClickException:
        raise
    except Exception as e:
        logger.exception("Unexpected error")
        raise click.ClickException(f"Unexpected error: {e}") from e


def dump_json(data: BaseModel | Sequence[BaseModel]) -> None:
    """Write records to stdout as JSON, with camelCase keys."""
    payload: object
    if isinstance(data, BaseModel):
        payload = data.model_dump(by_alias=True, mode="json")
    else:
        payload = [item.model_dump(by_alias=True, mode="json") for item in data]
    json.dump(payload, sys.stdout, indent=2, ensure_ascii=False, default=str)
    sys.stdout.write("\n")


def print_record(console: Console, record: BaseModel, title: str) -> None:
    """Print the scalar fields of one record as a two-column card."""
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"[bold yellow]{title}[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan", width=20)
    table.add_column("Value", overflow="fold")

    for name, value in record.model_dump().items():
        if value is None or isinstance(value, list | dict):
            continue
        table.add_row(name, str(value))

    console.print(table)


def print_records(
    console: Console,
    records: Sequence[BaseModel],
    columns: Sequence[str],
    title: str = "",
) -> None:
    """Print records as a table with the given fields as columns."""
    if not records:
        console.print("[yellow]No results[/yellow]")
        return

    table = Table(title=title or None, title_justify="left")
    table.add_column("#", style="dim", justify="right")
    for column in columns:
        table.add_column(column, overflow="fold")

    for i, record in enumerate(records, 1):
        values = [getattr(record, column, None) for column in columns]
        table.add_row(str(i), *("" if v is None else str(v) for v in values))

    console.print(table)


def print_device_code(code: DeviceCode) -> None:
    """Show the user where to approve the device."""
    console = Console(stderr=True)
    console.print(
        f"Go to [bold cyan]{code.verification_url}[/bold cyan] "
        f"and enter the code [bold yellow]{code.user_code}[/bold yellow]"
    )
    console.print("[dim]Waiting for approval...[/dim]")


def open_client(ctx: click.Context) -> YTMusicClient:
    """Create a client from the global options."""
    settings: Settings = ctx.obj["settings"]
    config = ClientConfig(language=settings.language, location=settings.location)
    path = settings.resolve_oauth_file()
    if path is None:
        logger.debug("No credential file, using an anonymous client")
        return YTMusicClient(config=config)
    return YTMusicClient.from_file(path, config=config)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "--oauth-file",
    type=click.Path(path_type=Path),
    help="OAuth credential file (default: $YTMWEB_OAUTH_FILE).",
)
@click.option("--language", help="Interface language, e.g. en or de.")
@click.option("--location", help="Content region, e.g. US or DE.")
@click.pass_context
def main(
    ctx: click.Context,
    verbose: bool,
    oauth_file: Path | None,
    language: str | None,
    location: str | None,
) -> None:
    """Query YouTube Music from the command line."""
    setup_logging(verbose=verbose)
    overrides = {
        key: value
        for key, value in (
            ("oauth_file", oauth_file),
            ("language", language),
            ("location", location),
        )
        if value is not None
    }
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["settings"] = Settings(**overrides)


@main.command(name="search")
@click.argument("query")
@click.option(
    "--filter",
    "filter_",
    type=click.Choice([f.value for f in SearchFilter]),
    help="Restrict results to one category.",
)
@click.option("--limit", default=20, show_default=True, help="Maximum results.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def search_cmd(
    ctx: click.Context, query: str, filter_: str | None, limit: int, as_json: bool
) -> None:
    """Search the catalogue.

    \b
    Examples:
      ytmweb search "daft punk"
      ytmweb search "discovery" --filter albums --limit 5
    """
    with cli_errors(), open_client(ctx) as client:
        results = client.search(query, filter=filter_, limit=limit)
        if as_json:
            dump_json(results)
            return
        print_records(
            Console(),
            results,
            ["title", "artist", "album", "duration", "video_id", "browse_id"],
            title=f"Results for {query!r}",
        )


@main.command(name="song")
@click.argument("video_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def song_cmd(ctx: click.Context, video_id: str, as_json: bool) -> None:
    """Show details of a song by video id."""
    with cli_errors(), open_client(ctx) as client:
        song = client.get_song(video_id)
        if as_json:
            dump_json(song)
            return
        print_record(Console(), song, song.title or video_id)


@main.command(name="album")
@click.argument("browse_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def album_cmd(ctx: click.Context, browse_id: str, as_json: bool) -> None:
    """Show an album and its tracks by browse id (MPREb...)."""
    with cli_errors(), open_client(ctx) as client:
        album = client.get_album(browse_id)
        if as_json:
            dump_json(album)
            return
        console = Console()
        print_record(console, album, album.title or browse_id)
        print_records(
            console,
            album.tracks,
            ["track_number", "title", "artist", "duration", "is_available"],
        )


@main.command(name="artist")
@click.argument("channel_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def artist_cmd(ctx: click.Context, channel_id: str, as_json: bool) -> None:
    """Show an artist page by channel id (UC...)."""
    with cli_errors(), open_client(ctx) as client:
        artist = client.get_artist(channel_id)
        if as_json:
            dump_json(artist)
            return
        console = Console()
        print_record(console, artist, artist.name or channel_id)
        for section, items in artist.sections.items():
            print_records(
                console,
                items,
                ["title", "subtitle", "browse_id", "video_id"],
                title=section,
            )


@main.command(name="lyrics")
@click.argument("video_id")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def lyrics_cmd(ctx: click.Context, video_id: str, as_json: bool) -> None:
    """Show the lyrics of a song by video id."""
    with cli_errors(), open_client(ctx) as client:
        watch = client.get_watch_playlist(video_id, limit=1)
        lyrics = client.lyrics_from(watch)
        if as_json:
            dump_json(lyrics)
            return
        console = Console()
        if lyrics.lyrics is None:
            console.print("[yellow]No lyrics available[/yellow]")
            return
        console.print(lyrics.lyrics)
        if lyrics.source:
            console.print(f"\n[dim]{lyrics.source}[/dim]")


@main.command(name="watch")
@click.argument("video_id")
@click.option("--limit", default=25, show_default=True, help="Maximum tracks.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def watch_cmd(ctx: click.Context, video_id: str, limit: int, as_json: bool) -> None:
    """Show the play queue started from a video."""
    with cli_errors(), open_client(ctx) as client:
        watch = client.get_watch_playlist(video_id, limit=limit)
        if as_json:
            dump_json(watch)
            return
        print_records(
            Console(),
            watch.tracks,
            ["title", "artist", "duration", "video_id"],
            title=f"Queue {watch.playlist_id or ''}",
        )


@main.command(name="playlist")
@click.argument("playlist_id")
@click.option("--limit", default=100, show_default=True, help="Maximum tracks.")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def playlist_cmd(
    ctx: click.Context, playlist_id: str, limit: int, as_json: bool
) -> None:
    """Show a playlist and its tracks."""
    with cli_errors(), open_client(ctx) as client:
        details = client.get_playlist(playlist_id, limit=limit)
        if as_json:
            dump_json(details)
            return
        console = Console()
        print_record(console, details, details.title or playlist_id)
        print_records(
            console,
            details.tracks,
            ["title", "artist", "album", "duration", "video_id", "set_video_id"],
        )


@main.group(name="auth")
def auth_group() -> None:
    """Manage OAuth credentials."""


@auth_group.command(name="setup")
@click.option(
    "--client-secrets",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Client secrets JSON ({"installed": {...}}) from the Cloud console.',
)
@click.option("--client-id", help="OAuth client id.")
@click.option("--client-secret", help="OAuth client secret.")
@click.pass_context
def auth_setup_cmd(
    ctx: click.Context,
    client_secrets: Path | None,
    client_id: str | None,
    client_secret: str | None,
) -> None:
    """Run the device flow and save the token.

    The credential file is written to --oauth-file, $YTMWEB_OAUTH_FILE or
    the default location.
    """
    settings: Settings = ctx.obj["settings"]
    target = settings.oauth_file or DEFAULT_OAUTH_FILE
    console = Console()

    with cli_errors():
        if client_secrets is not None:
            credentials, _ = load_credentials(client_secrets)
        elif client_id and client_secret:
            credentials = OAuthCredentials(
                client_id=client_id, client_secret=client_secret
            )
        elif target.is_file():
            credentials, _ = load_credentials(target)
        else:
            raise click.UsageError(
                "Pass --client-secrets, or --client-id and --client-secret."
            )

        config = ClientConfig(language=settings.language, location=settings.location)
        with YTMusicClient(config=config, credentials=credentials) as client:
            token = client.authenticate(on_code=print_device_code, save_to=target)

    console.print(f"[green]Authorized.[/green] Credentials saved to {target}")
    logger.debug("Token expires at %s", token.expires_at)


@auth_group.command(name="status")
@click.pass_context
def auth_status_cmd(ctx: click.Context) -> None:
    """Show whether a usable token is stored."""
    settings: Settings = ctx.obj["settings"]
    path = settings.resolve_oauth_file()
    console = Console()

    with cli_errors():
        state = inspect_credentials(path)

    messages = {
        CredentialState.NO_FILE: "[yellow]No credential file found[/yellow]",
        CredentialState.CREDENTIALS_ONLY: (
            "[yellow]Client credentials only, run 'ytmweb auth setup'[/yellow]"
        ),
        CredentialState.VALID_TOKEN: "[green]Token is valid[/green]",
        CredentialState.EXPIRED_TOKEN: (
            "[yellow]Token expired, it is refreshed on next use[/yellow]"
        ),
    }
    if path is not None:
        console.print(f"File: {path}")
    console.print(messages[state])


@auth_group.command(name="refresh")
@click.pass_context
def auth_refresh_cmd(ctx: click.Context) -> None:
    """Refresh the stored token now and save it."""
    settings: Settings = ctx.obj["settings"]
    path = settings.resolve_oauth_file()
    if path is None:
        raise click.ClickException("No credential file found")

    with cli_errors(), open_client(ctx) as client:
        token = client.refresh_token()
        client.save(path)

    expires = f"{token.expires_at:%Y-%m-%d %H:%M} UTC"
    Console().print(f"[green]Token refreshed[/green], expires at {expires}")


@main.group(name="library")
def library_group() -> None:
    """Show items from your library (requires auth)."""


def _library_command(
    name: str, method: str, columns: list[str], help_text: str
) -> None:
    @library_group.command(name=name, help=help_text)
    @click.option("--limit", default=25, show_default=True, help="Maximum items.")
    @click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
    @click.pass_context
    def command(ctx: click.Context, limit: int, as_json: bool) -> None:
        with cli_errors(), open_client(ctx) as client:
            items = getattr(client, method)(limit=limit)
            if as_json:
                dump_json(items)
                return
            print_records(Console(), items, columns, title=name.capitalize())


_library_command(
    "playlists",
    "get_library_playlists",
    ["title", "track_count", "author", "playlist_id"],
    "List your playlists.",
)
_library_command(
    "songs",
    "get_library_songs",
    ["title", "artist", "duration", "video_id"],
    "List your liked songs.",
)
_library_command(
    "albums",
    "get_library_albums",
    ["title", "artist", "browse_id"],
    "List saved albums.",
)
_library_command(
    "artists",
    "get_library_artists",
    ["title", "artist", "browse_id"],
    "List artists in your library.",
)
_library_command(
    "history",
    "get_history",
    ["title", "artist", "album", "duration", "video_id"],
    "List recently played tracks.",
)


@main.command(name="playlist-create")
@click.argument("title")
@click.option("--description", default="", help="Playlist description.")
@click.option(
    "--privacy",
    type=click.Choice([p.value for p in Privacy]),
    default=Privacy.PRIVATE.value,
    show_default=True,
)
@click.pass_context
def playlist_create_cmd(
    ctx: click.Context, title: str, description: str, privacy: str
) -> None:
    """Create a playlist and print its id."""
    with cli_errors(), open_client(ctx) as client:
        playlist_id = client.create_playlist(title, description, privacy)
    click.echo(playlist_id)


@main.command(name="playlist-add")
@click.argument("playlist_id")
@click.argument("video_ids", nargs=-1, required=True)
@click.pass_context
def playlist_add_cmd(
    ctx: click.Context, playlist_id: str, video_ids: tuple[str, ...]
) -> None:
    """Add videos to a playlist."""
    with cli_errors(), open_client(ctx) as client:
        result = client.add_playlist_items(playlist_id, video_ids)
    _print_edit_status(result.status, result.succeeded)


@main.command(name="playlist-remove")
@click.argument("playlist_id")
@click.argument("video_ids", nargs=-1, required=True)
@click.pass_context
def playlist_remove_cmd(
    ctx: click.Context, playlist_id: str, video_ids: tuple[str, ...]
) -> None:
    """Remove videos from a playlist.

    Every entry of the given videos is removed.
    """
    with cli_errors(), open_client(ctx) as client:
        details = client.get_playlist(playlist_id, limit=5000)
        wanted = set(video_ids)
        items = [item for item in details.tracks if item.video_id in wanted]
        if not items:
            raise click.ClickException("None of the videos are in the playlist")
        result = client.remove_playlist_items(playlist_id, items)
    _print_edit_status(result.status, result.succeeded)


@main.command(name="playlist-delete")
@click.argument("playlist_id")
@click.confirmation_option(prompt="Delete this playlist?")
@click.pass_context
def playlist_delete_cmd(ctx: click.Context, playlist_id: str) -> None:
    """Delete a playlist."""
    with cli_errors(), open_client(ctx) as client:
        client.delete_playlist(playlist_id)
    Console().print(f"[green]Deleted[/green] {playlist_id}")


def _print_edit_status(status: str, succeeded: bool) -> None:
    style = "green" if succeeded else "red"
    Console().print(f"[{style}]{status}[/{style}]")


if __name__ == "__main__":
    main()
