"""Section marker detection.

Splits raw lyrics on bracketed markers such as ``[Verse 2]`` or ``[Chorus]``
and tags the text between them.  Recognised labels (case-insensitive):

    Verse, Verse N, Chorus, Bridge, Pre-Chorus, Intro, Outro, Tag

Markers may appear anywhere in the text, not only on their own line.  With
``plain_headers=True`` a line holding nothing but a label and a colon
(``Verse 1:``, ``Chorus:``) is also treated as a marker.

The result is informational only.  Slide segmentation splits on blank lines
and never consults it.
"""

import re

from .models import Section
from .normalize import normalize

DEFAULT_LABEL = "Verse"

_LABEL_PAT = r"verse(?:[ \t]*\d+)?|chorus|bridge|pre-?[ \t]?chorus|intro|outro|tag"

BRACKET_MARKER_RE = re.compile(rf"\[[ \t]*({_LABEL_PAT})[ \t]*\]", re.IGNORECASE)

PLAIN_HEADER_RE = re.compile(
    rf"^[ \t]*({_LABEL_PAT})[ \t]*:[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)

_CANONICAL = {
    "chorus": "Chorus",
    "bridge": "Bridge",
    "intro": "Intro",
    "outro": "Outro",
    "tag": "Tag",
}

_VERSE_RE = re.compile(r"^verse ?(\d*)$")
_PRE_CHORUS_RE = re.compile(r"^pre-? ?chorus$")


def canonical_label(raw: str) -> str:
    """Return the display form of a marker label.

    ``"verse2"`` -> ``"Verse 2"``, ``"PRE CHORUS"`` -> ``"Pre-Chorus"``.
    Labels outside the vocabulary are returned stripped but otherwise as-is.
    """
    key = re.sub(r"\s+", " ", normalize(raw)).strip()
    m = _VERSE_RE.match(key)
    if m:
        return f"Verse {m.group(1)}" if m.group(1) else "Verse"
    if _PRE_CHORUS_RE.match(key):
        return "Pre-Chorus"
    return _CANONICAL.get(key, raw.strip())


def parse_sections(lyrics: str, plain_headers: bool = False) -> list[Section]:
    """Split *lyrics* into labelled sections.

    Text before the first marker is labelled ``Verse``.  Segments that are
    empty after trimming are dropped.  Lyrics without any marker come back as
    a single ``Verse`` section; blank lyrics give an empty list.
    """
    text = lyrics.replace("\r\n", "\n").replace("\r", "\n")

    markers = list(BRACKET_MARKER_RE.finditer(text))
    if plain_headers:
        markers.extend(PLAIN_HEADER_RE.finditer(text))
        markers.sort(key=lambda m: m.start())

    if not markers:
        body = text.strip()
        return [Section(type=DEFAULT_LABEL, content=body)] if body else []

    sections: list[Section] = []
    label = DEFAULT_LABEL
    pos = 0
    for m in markers:
        _append_section(sections, label, text[pos:m.start()])
        label = canonical_label(m.group(1))
        pos = m.end()
    _append_section(sections, label, text[pos:])
    return sections


def _append_section(sections: list[Section], label: str, chunk: str) -> None:
    content = chunk.strip()
    if content:
        sections.append(Section(type=label, content=content))
