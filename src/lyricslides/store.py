"""Song storage backends.

The formatting core only ever receives a :class:`~lyricslides.models.Song`
or ``None``.  Everything that can fail (network, validation) lives here.

Two backends are provided:

* :class:`InMemorySongStore` -- a list of songs, used for the bundled sample
  catalogue and in tests.
* :class:`SupabaseSongStore` -- a ``songs`` table behind Supabase's PostgREST
  API, queried with ``httpx``.

Both search against a precomputed ``search_index`` (title, artist and lyrics
passed through :func:`~lyricslides.normalize.normalize`), so typing ``e``
finds a stored ``ɛ``.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

import httpx

from .config import Config
from .exceptions import StoreError
from .models import InsertResult, Song
from .normalize import normalize

logger = logging.getLogger(__name__)

# Postgres error for an id the column type cannot parse
INVALID_TEXT_REPRESENTATION = "22P02"


def build_search_index(title: str, artist: str | None, lyrics: str) -> str:
    """Return the normalised text that searches are matched against."""
    return normalize("\n".join((title, artist or "", lyrics)))


class SongStore(ABC):
    """Abstract base class for song storage backends."""

    @abstractmethod
    def get_by_id(self, song_id: str | int) -> Song | None:
        """Return the song with *song_id*, or None if there is none."""

    @abstractmethod
    def search(self, query: str) -> list[Song]:
        """Return songs whose title, artist or lyrics contain *query*.

        Matching is case-insensitive and Twi-normalised.  A blank query
        returns every song.
        """

    @abstractmethod
    def insert(
        self, title: str, artist: str | None, language: str, lyrics: str
    ) -> InsertResult:
        """Submit a new, unverified song.  Failures are returned, not raised."""

    def close(self) -> None:
        """Release any resources held by the store."""

    @staticmethod
    def validate_submission(title: str, language: str, lyrics: str) -> str | None:
        """Return the reason a submission is rejected, or None if it is valid."""
        if not title.strip():
            return "Title is required"
        if not language.strip():
            return "Language is required"
        if not lyrics.strip():
            return "Lyrics are required"
        return None


class InMemorySongStore(SongStore):
    """Songs held in a list, in insertion order."""

    def __init__(self, songs: Iterable[Song] = ()):
        self._songs: list[Song] = []
        self._index: list[str] = []
        for song in songs:
            self._add(song)

    def _add(self, song: Song) -> None:
        self._songs.append(song)
        self._index.append(build_search_index(song.title, song.artist, song.lyrics))

    def get_by_id(self, song_id: str | int) -> Song | None:
        # CLI ids arrive as strings; compare on string form
        wanted = str(song_id)
        for song in self._songs:
            if str(song.id) == wanted:
                return song
        return None

    def search(self, query: str) -> list[Song]:
        needle = normalize(query.strip())
        return [song for song, text in zip(self._songs, self._index) if needle in text]

    def insert(
        self, title: str, artist: str | None, language: str, lyrics: str
    ) -> InsertResult:
        reason = self.validate_submission(title, language, lyrics)
        if reason:
            return InsertResult(success=False, error=reason)

        ids = [song.id for song in self._songs if isinstance(song.id, int)]
        song = Song(
            id=max(ids, default=0) + 1,
            title=title.strip(),
            artist=(artist or "").strip() or None,
            language=language.strip(),
            lyrics=lyrics,
            is_verified=False,
        )
        self._add(song)
        logger.info("Inserted song %s (%r)", song.id, song.title)
        return InsertResult(success=True)


class SupabaseSongStore(SongStore):
    """Songs in a Supabase (PostgREST) table.

    *transport* is handed to :class:`httpx.Client`; tests pass an
    :class:`httpx.MockTransport`.
    """

    def __init__(self, config: Config, transport: httpx.BaseTransport | None = None):
        if not config.has_backend:
            raise ValueError("SupabaseSongStore needs supabase_url and supabase_key")
        self.table = config.table
        self.client = httpx.Client(
            base_url=f"{config.supabase_url.rstrip('/')}/rest/v1",
            headers={
                "apikey": config.supabase_key,
                "Authorization": f"Bearer {config.supabase_key}",
            },
            timeout=config.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self.client.close()

    def get_by_id(self, song_id: str | int) -> Song | None:
        try:
            rows = self._select({"select": "*", "id": f"eq.{song_id}"})
        except StoreError as exc:
            # An id the column type cannot hold ("abc" for a bigint) matches nothing
            if exc.code == INVALID_TEXT_REPRESENTATION:
                logger.debug("Song id %r rejected by store: %s", song_id, exc.reason)
                return None
            raise
        return _row_to_song(rows[0]) if rows else None

    def search(self, query: str) -> list[Song]:
        params = {"select": "*", "order": "title.asc"}
        needle = _escape_like(normalize(query.strip()))
        if needle:
            params["search_index"] = f"ilike.*{needle}*"
        return [_row_to_song(row) for row in self._select(params)]

    def insert(
        self, title: str, artist: str | None, language: str, lyrics: str
    ) -> InsertResult:
        reason = self.validate_submission(title, language, lyrics)
        if reason:
            return InsertResult(success=False, error=reason)

        payload = {
            "title": title.strip(),
            "artist": (artist or "").strip() or None,
            "language": language.strip(),
            "lyrics": lyrics,
            "is_verified": False,
            "search_index": build_search_index(title.strip(), artist, lyrics),
        }
        try:
            resp = self.client.post(
                f"/{self.table}", json=payload, headers={"Prefer": "return=minimal"}
            )
        except httpx.RequestError as exc:
            logger.warning("Insert failed: %s", exc)
            return InsertResult(success=False, error=f"Could not reach song store: {exc}")
        if not resp.is_success:
            message = _error_message(resp)
            logger.warning("Insert rejected (HTTP %s): %s", resp.status_code, message)
            return InsertResult(success=False, error=message)
        logger.info("Submitted song %r", payload["title"])
        return InsertResult(success=True)

    def _select(self, params: dict) -> list[dict]:
        logger.debug("GET /%s %s", self.table, params)
        try:
            resp = self.client.get(f"/{self.table}", params=params)
        except httpx.RequestError as exc:
            raise StoreError(str(exc)) from exc
        if not resp.is_success:
            raise StoreError(_error_message(resp), resp.status_code, _error_code(resp))
        try:
            rows = resp.json()
        except ValueError as exc:
            raise StoreError("Malformed response from song store", resp.status_code) from exc
        if not isinstance(rows, list):
            raise StoreError("Malformed response from song store", resp.status_code)
        return rows


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _row_to_song(row: dict) -> Song:
    return Song(
        id=row.get("id"),
        title=row.get("title") or "",
        artist=row.get("artist"),
        lyrics=row.get("lyrics") or "",
        language=row.get("language") or "",
        is_verified=bool(row.get("is_verified")),
        created_at=row.get("created_at"),
    )


def _error_message(resp: httpx.Response) -> str:
    """Pull PostgREST's ``message`` out of an error response if present."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(body, dict) and body.get("message"):
        return body["message"]
    return resp.text or resp.reason_phrase


def _error_code(resp: httpx.Response) -> str | None:
    try:
        body = resp.json()
    except ValueError:
        return None
    return body.get("code") if isinstance(body, dict) else None


def _escape_like(needle: str) -> str:
    """Make *needle* match literally inside a PostgREST ``ilike`` pattern.

    ``*`` becomes ``%`` in PostgREST and cannot be escaped, so it is dropped.
    ``\\``, ``%`` and ``_`` are backslash-escaped for Postgres LIKE.
    """
    needle = needle.replace("*", "")
    for char in ("\\", "%", "_"):
        needle = needle.replace(char, "\\" + char)
    return needle
