import json
import os

import pytest

from brandpalette.config.constants import (
    EMBEDDINGS_CACHE_ENV_VAR,
    PREFERRED_ENV_VAR,
    PRIMARY_ENV_VAR,
)
from brandpalette.exceptions import EmbeddingCacheError
from brandpalette.storage import embedding_cache, env_storage, key_manager


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Isolate key lookup from the real environment, keyring and config dir."""
    for var in (PREFERRED_ENV_VAR, PRIMARY_ENV_VAR, EMBEDDINGS_CACHE_ENV_VAR):
        # setenv first so the variable is removed again on teardown
        monkeypatch.setenv(var, "placeholder")
        monkeypatch.delenv(var)
    monkeypatch.setattr(env_storage, "get_user_config_dir", lambda: tmp_path)
    monkeypatch.setattr(embedding_cache, "get_user_config_dir", lambda: tmp_path)
    monkeypatch.setattr(key_manager, "load_from_keyring", lambda: None)
    monkeypatch.setattr(key_manager, "save_to_keyring", lambda api_key: False)
    return tmp_path


def test_no_key_anywhere(clean_env) -> None:
    assert key_manager.load_api_key() is None
    assert key_manager.get_api_key_source() == (None, "No API Key Found")


def test_env_var_priority(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(PRIMARY_ENV_VAR, "generic-key")
    assert key_manager.load_api_key() == "generic-key"

    monkeypatch.setenv(PREFERRED_ENV_VAR, "project-key")
    assert key_manager.load_api_key() == "project-key"


def test_keyring_beats_env_file(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    (clean_env / ".env").write_text(f"{PREFERRED_ENV_VAR}=file-key\n", encoding="utf-8")
    assert key_manager.get_api_key_source()[0] == "file-key"

    monkeypatch.setattr(key_manager, "load_from_keyring", lambda: "keyring-key")
    assert key_manager.get_api_key_source() == ("keyring-key", "OS Keyring")


def test_env_file_accepts_generic_name(clean_env) -> None:
    (clean_env / ".env").write_text(f"{PRIMARY_ENV_VAR}='quoted-key'\n", encoding="utf-8")
    assert env_storage.load_from_env_file(clean_env / ".env") == "quoted-key"


def test_save_api_key_writes_env_file(clean_env) -> None:
    assert key_manager.save_api_key('  "new-key-0123456789"  ')

    env_file = clean_env / ".env"
    assert env_storage.load_from_env_file(env_file) == "new-key-0123456789"
    assert os.environ[PREFERRED_ENV_VAR] == "new-key-0123456789"
    if os.name == "posix":
        assert env_file.stat().st_mode & 0o777 == 0o600


def test_save_api_key_rejects_blank(clean_env) -> None:
    assert key_manager.save_api_key("   ") is False
    assert not (clean_env / ".env").exists()


def test_missing_env_file(tmp_path) -> None:
    assert env_storage.load_from_env_file(tmp_path / "absent.env") is None


def test_cache_path_override(clean_env, monkeypatch: pytest.MonkeyPatch) -> None:
    assert embedding_cache.default_cache_path() == clean_env / "trait_embeddings.json"

    monkeypatch.setenv(EMBEDDINGS_CACHE_ENV_VAR, str(clean_env / "custom.json"))
    assert embedding_cache.default_cache_path() == clean_env / "custom.json"


def test_cache_save_and_load(clean_env) -> None:
    path = embedding_cache.save_embeddings_cache({"Calm": [1, 0.5]}, clean_env / "sub" / "cache.json")

    assert path.exists()
    assert embedding_cache.load_embeddings_cache(path) == {"calm": [1.0, 0.5]}


def test_cache_defaults_to_config_dir(clean_env) -> None:
    embedding_cache.save_embeddings_cache({"warm": [0.1]})
    assert (clean_env / "trait_embeddings.json").exists()
    assert embedding_cache.load_embeddings_cache() == {"warm": [0.1]}


def test_missing_cache_is_lenient_unless_strict(clean_env) -> None:
    missing = clean_env / "nope.json"
    assert embedding_cache.load_embeddings_cache(missing) == {}
    with pytest.raises(EmbeddingCacheError):
        embedding_cache.load_embeddings_cache(missing, strict=True)


@pytest.mark.parametrize(
    "content",
    ["not json", json.dumps([1, 2]), json.dumps({"calm": "blue"}), json.dumps({"calm": [1, "x"]})],
)
def test_malformed_cache(clean_env, content: str) -> None:
    path = clean_env / "bad.json"
    path.write_text(content, encoding="utf-8")

    assert embedding_cache.load_embeddings_cache(path) == {}
    with pytest.raises(EmbeddingCacheError):
        embedding_cache.load_embeddings_cache(path, strict=True)


def test_undecodable_cache(clean_env) -> None:
    path = clean_env / "binary.json"
    path.write_bytes(b'{"bold": [0.1, \xff\xfe]}')

    assert embedding_cache.load_embeddings_cache(path) == {}
    with pytest.raises(EmbeddingCacheError):
        embedding_cache.load_embeddings_cache(path, strict=True)


def test_cache_path_is_a_directory(clean_env) -> None:
    assert embedding_cache.load_embeddings_cache(clean_env) == {}
    with pytest.raises(EmbeddingCacheError):
        embedding_cache.load_embeddings_cache(clean_env, strict=True)
