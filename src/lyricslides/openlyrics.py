"""OpenLyrics 0.8 XML serializer.

Produces a minimal document that OpenLP, FreeShow and similar tools import::

    <song xmlns="http://openlyrics.info/namespace/2009/song" version="0.8">
      <properties>
        <titles><title>...</title></titles>
        <authors><author>...</author></authors>
      </properties>
      <lyrics>
        <verse name="v1">
          <lines>line one<br/>line two</lines>
        </verse>
      </lyrics>
    </song>

The whole lyrics body goes into a single ``v1`` verse.  Section markers are
left in the text as written.

See http://openlyrics.org/
"""

import re

from .models import Song

OPENLYRICS_NAMESPACE = "http://openlyrics.info/namespace/2009/song"
OPENLYRICS_VERSION = "0.8"

# Separators, Windows-reserved characters and control characters
_UNSAFE_FILENAME_RE = re.compile(r'[\\/:*?"<>|\x00-\x1f]')

# "&" must come first or the entities inserted by later rules get re-escaped.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape the five XML special characters in *text*."""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


class OpenLyricsSerializer:
    """Render a :class:`~lyricslides.models.Song` to OpenLyrics XML."""

    def render(self, song: Song) -> str:
        lyrics = song.lyrics.replace("\r\n", "\n").replace("\r", "\n")
        lines = escape_xml(lyrics).replace("\n", "<br/>")

        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<song xmlns="{OPENLYRICS_NAMESPACE}" version="{OPENLYRICS_VERSION}">',
            "  <properties>",
            f"    <titles><title>{escape_xml(song.title)}</title></titles>",
            f"    <authors><author>{escape_xml(song.display_artist)}</author></authors>",
            "  </properties>",
            "  <lyrics>",
            '    <verse name="v1">',
            f"      <lines>{lines}</lines>",
            "    </verse>",
            "  </lyrics>",
            "</song>",
        ]
        return "\n".join(parts)


def generate_openlyrics_xml(song: Song) -> str:
    return OpenLyricsSerializer().render(song)


def default_filename(song: Song) -> str:
    """Download name for *song*: title with whitespace runs as ``_``.

    Path separators and other characters not allowed in file names are
    dropped.  Falls back to ``song.xml`` if nothing is left.
    """
    name = re.sub(r"\s+", "_", song.title.strip())
    name = _UNSAFE_FILENAME_RE.sub("", name)
    name = re.sub(r"_{2,}", "_", name).strip("._")
    return f"{name or 'song'}.xml"
