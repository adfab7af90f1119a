"""Configuration for the song store.

Values come from an optional TOML file, then environment variables::

    [supabase]
    url = "https://xyz.supabase.co"
    key = "<anon key>"
    table = "songs"
    timeout = 15

Environment overrides: ``SUPABASE_URL``, ``SUPABASE_ANON_KEY``.  The file
path defaults to ``$LYRICSLIDES_CONFIG`` when set.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigError


@dataclass
class Config:
    """Settings passed explicitly to :func:`lyricslides.registry.get_store`."""

    supabase_url: str | None = None
    supabase_key: str | None = None
    table: str = "songs"
    timeout: float = 15.0

    @property
    def has_backend(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Build a config from *path* (if any) and the environment.

        Raises:
            FileNotFoundError: If *path* is given explicitly and does not exist.
            ConfigError: If the file is not valid TOML or a value has the wrong type.
        """
        config = cls()

        explicit = path is not None
        if path is None and os.environ.get("LYRICSLIDES_CONFIG"):
            path = Path(os.environ["LYRICSLIDES_CONFIG"])

        if path is not None:
            if not path.exists():
                if explicit:
                    raise FileNotFoundError(f"Config file not found: {path}")
            else:
                try:
                    with open(path, "rb") as f:
                        data = tomllib.load(f)
                except tomllib.TOMLDecodeError as exc:
                    raise ConfigError(path, str(exc)) from exc
                section = data.get("supabase", {})
                if not isinstance(section, dict):
                    raise ConfigError(path, "[supabase] must be a table")
                config.supabase_url = section.get("url", config.supabase_url)
                config.supabase_key = section.get("key", config.supabase_key)
                config.table = section.get("table", config.table)
                timeout = section.get("timeout", config.timeout)
                try:
                    config.timeout = float(timeout)
                except (TypeError, ValueError) as exc:
                    raise ConfigError(path, f"timeout must be a number, not {timeout!r}") from exc

        config.supabase_url = os.environ.get("SUPABASE_URL") or config.supabase_url
        config.supabase_key = os.environ.get("SUPABASE_ANON_KEY") or config.supabase_key
        return config
