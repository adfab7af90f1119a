import logging

from .catalog import SAMPLE_SONGS
from .config import Config
from .store import InMemorySongStore, SongStore, SupabaseSongStore

logger = logging.getLogger(__name__)


def get_store(config: Config) -> SongStore:
    """Return the store *config* points at.

    Falls back to the bundled sample catalogue when no Supabase URL and key
    are configured.
    """
    if config.has_backend:
        logger.debug("Using Supabase store at %s", config.supabase_url)
        return SupabaseSongStore(config)
    logger.debug("No backend configured; using sample catalogue")
    return InMemorySongStore(SAMPLE_SONGS)
