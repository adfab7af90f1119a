"""Worship lyrics lookup and formatting for projection software."""

from .models import Section, SlideFormat, Song
from .normalize import normalize
from .openlyrics import generate_openlyrics_xml
from .projection import format_for_projection
from .sections import parse_sections
from .slides import split_into_slides

__all__ = [
    "Section",
    "SlideFormat",
    "Song",
    "format_for_projection",
    "generate_openlyrics_xml",
    "normalize",
    "parse_sections",
    "split_into_slides",
]
