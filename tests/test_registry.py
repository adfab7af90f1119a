from lyricslides.config import Config
from lyricslides.registry import get_store
from lyricslides.store import InMemorySongStore, SupabaseSongStore


def test_sample_catalogue_without_backend():
    store = get_store(Config())
    assert isinstance(store, InMemorySongStore)
    assert len(store.search("")) == 3


def test_supabase_when_configured():
    store = get_store(Config(supabase_url="https://x.supabase.co", supabase_key="k"))
    try:
        assert isinstance(store, SupabaseSongStore)
        assert str(store.client.base_url) == "https://x.supabase.co/rest/v1/"
    finally:
        store.close()
