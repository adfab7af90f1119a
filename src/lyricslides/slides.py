"""Slide segmentation.

Lyrics are first cut into paragraphs on blank lines (two or more line breaks,
whitespace-only lines counting as blank).  Each paragraph is then cut into
slides according to a :class:`~lyricslides.models.SlideFormat`:

* ``full-verse`` -- the whole paragraph is one slide.
* ``2-lines`` / ``4-lines`` -- consecutive non-blank lines grouped in twos or
  fours.  The last slide of a paragraph may be shorter.

Slides never span paragraphs and are never empty.
"""

import re

from .models import SlideFormat

_PARAGRAPH_BREAK_RE = re.compile(r"\n(?:[ \t]*\n)+")


def split_paragraphs(lyrics: str) -> list[str]:
    """Return the non-empty, trimmed paragraphs of *lyrics*."""
    text = lyrics.replace("\r\n", "\n").replace("\r", "\n")
    paragraphs = (p.strip() for p in _PARAGRAPH_BREAK_RE.split(text))
    return [p for p in paragraphs if p]


def split_into_slides(lyrics: str, fmt: SlideFormat | str) -> list[str]:
    """Split *lyrics* into slide texts, lines joined with ``\\n``.

    *fmt* may be a :class:`SlideFormat` or its string value (``"2-lines"``).
    """
    size = SlideFormat(fmt).lines_per_slide
    slides: list[str] = []

    for paragraph in split_paragraphs(lyrics):
        if size is None:
            slides.append(paragraph)
            continue
        lines = [line.strip() for line in paragraph.split("\n") if line.strip()]
        for i in range(0, len(lines), size):
            slides.append("\n".join(lines[i:i + size]))

    return slides
