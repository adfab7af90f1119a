from dataclasses import dataclass
from enum import Enum

UNKNOWN_ARTIST = "Unknown"

# Languages offered when submitting a song. Stored values are not validated
# against this list.
LANGUAGES = ("Twi", "English", "Ga", "Ewe", "Fante", "Dagbani")


class SlideFormat(str, Enum):
    """How lyrics are split into projection slides."""

    TWO_LINES = "2-lines"
    FOUR_LINES = "4-lines"
    FULL_VERSE = "full-verse"

    @property
    def lines_per_slide(self) -> int | None:
        """Maximum lines on one slide, or None for one paragraph per slide."""
        return {"2-lines": 2, "4-lines": 4}.get(self.value)


@dataclass
class Song:
    """A catalogue entry. Only ``lyrics`` is ever transformed."""

    title: str
    artist: str | None = None
    lyrics: str = ""
    language: str = ""
    id: str | int | None = None
    is_verified: bool = False
    created_at: str | None = None

    @property
    def has_artist(self) -> bool:
        """False when the artist is missing or blank."""
        return bool(self.artist and self.artist.strip())

    @property
    def display_artist(self) -> str:
        """Artist name, or the placeholder when none was recorded."""
        return self.artist if self.has_artist else UNKNOWN_ARTIST


@dataclass
class Section:
    """A lyrics fragment tagged with its structural role."""

    type: str  # e.g. "Verse", "Verse 2", "Chorus"
    content: str


@dataclass
class InsertResult:
    """Outcome of submitting a song to a store."""

    success: bool
    error: str | None = None
