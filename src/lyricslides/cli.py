import logging
import sys
from pathlib import Path

import click

from .config import Config
from .exceptions import LyricSlidesError, SongNotFoundError
from .models import LANGUAGES, SlideFormat, Song
from .openlyrics import default_filename, generate_openlyrics_xml
from .projection import format_for_projection
from .registry import get_store
from .sections import parse_sections
from .store import SongStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"

# Shown to people; the projection/XML placeholder is models.UNKNOWN_ARTIST
UNKNOWN_ARTIST_DISPLAY = "Unknown artist"


def _fail(exc: Exception | str) -> None:
    click.echo(f"Error: {exc}", err=True)
    sys.exit(1)


def _store(ctx: click.Context) -> SongStore:
    """Create the store on first use and close it when the command ends."""
    if "store" not in ctx.obj:
        store = get_store(ctx.obj["config"])
        ctx.call_on_close(store.close)
        ctx.obj["store"] = store
    return ctx.obj["store"]


def _load_song(ctx: click.Context, song_id: str) -> Song:
    song = _store(ctx).get_by_id(song_id)
    if song is None:
        raise SongNotFoundError(song_id)
    return song


def _artist_label(song: Song) -> str:
    return song.artist if song.has_artist else UNKNOWN_ARTIST_DISPLAY


def _write_or_echo(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text)
        return
    dest = Path(output_path)
    try:
        dest.write_text(text, encoding="utf-8")
    except OSError as exc:
        _fail(f"Could not write {dest}: {exc.strerror or exc}")
    click.echo(f"Written to {dest}")


@click.group()
@click.option("--config", "config_path", default=None, metavar="PATH",
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="TOML config file (default: $LYRICSLIDES_CONFIG).")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """Look up worship songs and format them for projection software.

    \b
    Without a configured Supabase backend the bundled sample
    catalogue is used.
    """
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING,
                        format=LOG_FORMAT)
    ctx.ensure_object(dict)
    try:
        ctx.obj["config"] = Config.load(config_path)
    except (LyricSlidesError, FileNotFoundError) as exc:
        _fail(exc)


@main.command()
@click.argument("query")
@click.pass_context
def search(ctx: click.Context, query: str) -> None:
    """Search titles, artists and lyrics (ɛ/ɔ/ŋ match e/o/n)."""
    try:
        songs = _store(ctx).search(query)
    except LyricSlidesError as exc:
        _fail(exc)

    if not songs:
        click.echo("No songs found.")
        return
    for song in songs:
        click.echo(f"{song.id}  {song.title} - {_artist_label(song)}")


@main.command()
@click.argument("song_id")
@click.pass_context
def show(ctx: click.Context, song_id: str) -> None:
    """Print a song's details and lyrics."""
    try:
        song = _load_song(ctx, song_id)
    except LyricSlidesError as exc:
        _fail(exc)

    click.echo(song.title)
    click.echo(_artist_label(song))
    click.echo(f"Language: {song.language}")
    click.echo("")
    click.echo(song.lyrics)


@main.command()
@click.argument("song_id")
@click.option("--plain-headers", is_flag=True, default=False,
              help='Also treat lines like "Chorus:" as section markers.')
@click.pass_context
def sections(ctx: click.Context, song_id: str, plain_headers: bool) -> None:
    """List the labelled sections of a song."""
    try:
        song = _load_song(ctx, song_id)
    except LyricSlidesError as exc:
        _fail(exc)

    found = parse_sections(song.lyrics, plain_headers=plain_headers)
    if not found:
        click.echo("No lyrics.")
        return
    blocks = [f"[{section.type}]\n{section.content}" for section in found]
    click.echo("\n\n".join(blocks))


@main.command()
@click.argument("song_id")
@click.option("-f", "--format", "fmt", default=SlideFormat.FULL_VERSE.value, show_default=True,
              type=click.Choice([f.value for f in SlideFormat]),
              help="Lines per slide.")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Write to a file instead of stdout.")
@click.pass_context
def projection(ctx: click.Context, song_id: str, fmt: str, output_path: str | None) -> None:
    """Format a song as slides for FreeShow / EasyWorship paste import."""
    try:
        song = _load_song(ctx, song_id)
    except LyricSlidesError as exc:
        _fail(exc)

    text = format_for_projection(song, fmt)
    logger.debug("Song %s formatted as %s", song_id, fmt)
    _write_or_echo(text, output_path)


@main.command()
@click.argument("song_id")
@click.option("-o", "--output", "output_path", default=None, metavar="PATH",
              help="Output file path (default: <Title>.xml)")
@click.option("--stdout", is_flag=True, default=False,
              help="Print to stdout instead of writing a file.")
@click.pass_context
def export(ctx: click.Context, song_id: str, output_path: str | None, stdout: bool) -> None:
    """Export a song as OpenLyrics XML."""
    try:
        song = _load_song(ctx, song_id)
    except LyricSlidesError as exc:
        _fail(exc)

    xml = generate_openlyrics_xml(song)
    if stdout:
        click.echo(xml)
        return
    _write_or_echo(xml, output_path or default_filename(song))


@main.command()
@click.option("--title", required=True, help="Song title.")
@click.option("--artist", default=None, help="Artist or composer.")
@click.option("--language", default="Twi", show_default=True,
              type=click.Choice(LANGUAGES, case_sensitive=False))
@click.option("--lyrics-file", required=True, type=click.File("r", encoding="utf-8"),
              help="File holding the lyrics, or - for stdin.")
@click.pass_context
def add(ctx: click.Context, title: str, artist: str | None, language: str, lyrics_file) -> None:
    """Submit a song for review."""
    result = _store(ctx).insert(title, artist, language, lyrics_file.read())
    if not result.success:
        click.echo(f"Error: {result.error or 'Failed to submit song.'}", err=True)
        sys.exit(1)
    click.echo("Submitted for review.")
