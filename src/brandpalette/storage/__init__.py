"""API key and embeddings cache storage."""

from brandpalette.storage.key_manager import (
    load_api_key,
    save_api_key,
    get_api_key_source,
)
from brandpalette.storage.env_storage import (
    get_user_config_dir,
    get_env_file_path,
)
from brandpalette.storage.embedding_cache import (
    default_cache_path,
    load_embeddings_cache,
    save_embeddings_cache,
)

__all__ = [
    "load_api_key",
    "save_api_key",
    "get_api_key_source",
    "get_user_config_dir",
    "get_env_file_path",
    "default_cache_path",
    "load_embeddings_cache",
    "save_embeddings_cache",
]
