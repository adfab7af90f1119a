"""Plain-text formatter for projection software paste/import.

Output layout::

    Title: <title>
    Author: <artist or "Unknown">
    <blank>
    <slide 1>
    <blank>
    <blank>
    <slide 2>
    ...

FreeShow and EasyWorship treat two consecutive blank lines as a slide
boundary, so slides are joined with ``\\n\\n\\n``.

Usage::

    from lyricslides.projection import ProjectionFormatter
    text = ProjectionFormatter().render(song, SlideFormat.FOUR_LINES)
"""

from .models import SlideFormat, Song
from .slides import split_into_slides

SLIDE_SEPARATOR = "\n\n\n"


class ProjectionFormatter:
    """Render a :class:`~lyricslides.models.Song` as projection text."""

    def render(self, song: Song, fmt: SlideFormat | str = SlideFormat.FULL_VERSE) -> str:
        """Return header plus segmented slides for *song*.

        No trailing newline is added.  Empty lyrics produce the header only.
        """
        header = f"Title: {song.title}\nAuthor: {song.display_artist}\n\n"
        slides = split_into_slides(song.lyrics, fmt)
        return header + SLIDE_SEPARATOR.join(slides)


def format_for_projection(song: Song, fmt: SlideFormat | str = SlideFormat.FULL_VERSE) -> str:
    return ProjectionFormatter().render(song, fmt)
