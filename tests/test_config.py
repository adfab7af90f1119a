import pytest

from lyricslides.config import Config
from lyricslides.exceptions import ConfigError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_ANON_KEY", "LYRICSLIDES_CONFIG"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = Config.load()
    assert config.supabase_url is None
    assert config.supabase_key is None
    assert config.table == "songs"
    assert config.timeout == 15.0
    assert not config.has_backend


def test_load_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        '[supabase]\nurl = "https://x.supabase.co"\nkey = "k"\ntable = "hymns"\ntimeout = 5\n'
    )
    config = Config.load(path)
    assert config.supabase_url == "https://x.supabase.co"
    assert config.supabase_key == "k"
    assert config.table == "hymns"
    assert config.timeout == 5.0
    assert config.has_backend


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.toml"
    path.write_text('[supabase]\nurl = "https://file.supabase.co"\nkey = "file-key"\n')
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    config = Config.load(path)
    assert config.supabase_url == "https://env.supabase.co"
    assert config.supabase_key == "file-key"


def test_env_only(monkeypatch):
    monkeypatch.setenv("SUPABASE_URL", "https://env.supabase.co")
    monkeypatch.setenv("SUPABASE_ANON_KEY", "env-key")
    assert Config.load().has_backend


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "c.toml"
    path.write_text('[supabase]\ntable = "songs_v2"\n')
    monkeypatch.setenv("LYRICSLIDES_CONFIG", str(path))
    assert Config.load().table == "songs_v2"


def test_missing_env_config_path_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("LYRICSLIDES_CONFIG", str(tmp_path / "absent.toml"))
    assert Config.load().table == "songs"


def test_missing_explicit_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "absent.toml")


def test_url_without_key_has_no_backend():
    assert not Config(supabase_url="https://x.supabase.co").has_backend


def test_malformed_toml_raises_config_error(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("[supabase\nurl = ")
    with pytest.raises(ConfigError) as exc_info:
        Config.load(path)
    assert exc_info.value.path == path


def test_non_numeric_timeout_raises_config_error(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('[supabase]\ntimeout = "soon"\n')
    with pytest.raises(ConfigError, match="timeout must be a number"):
        Config.load(path)


def test_supabase_must_be_table(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('supabase = "https://x.supabase.co"\n')
    with pytest.raises(ConfigError):
        Config.load(path)
