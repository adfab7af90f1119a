class LyricSlidesError(Exception):
    """Base exception for lyricslides."""


class ConfigError(LyricSlidesError):
    """Raised when a config file cannot be parsed."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")


class StoreError(LyricSlidesError):
    """Raised when the song store cannot be read."""

    def __init__(self, reason: str, status_code: int | None = None, code: str | None = None):
        self.reason = reason
        self.status_code = status_code
        self.code = code  # PostgREST / Postgres error code, e.g. "22P02"
        msg = f"Song store error: {reason}"
        if status_code:
            msg += f" (HTTP {status_code})"
        super().__init__(msg)


class SongNotFoundError(LyricSlidesError):
    """Raised when a song id has no matching record."""

    def __init__(self, song_id: str | int):
        self.song_id = song_id
        super().__init__(f"Song not found: {song_id}")
