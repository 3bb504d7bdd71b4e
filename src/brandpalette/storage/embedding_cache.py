"""Load and save the known-trait embeddings cache (a JSON object of vectors)."""

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from brandpalette.config.constants import EMBEDDINGS_CACHE_ENV_VAR, EMBEDDINGS_CACHE_FILENAME
from brandpalette.exceptions.errors import EmbeddingCacheError
from brandpalette.storage.env_storage import get_user_config_dir

logger = logging.getLogger(__name__)


def default_cache_path() -> Path:
    """Cache location: the env override if set, else the user config dir."""
    override = os.environ.get(EMBEDDINGS_CACHE_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return get_user_config_dir() / EMBEDDINGS_CACHE_FILENAME


def _validate(data, path: Path) -> Dict[str, List[float]]:
    if not isinstance(data, dict):
        raise EmbeddingCacheError(str(path), "top level must be an object")
    cache = {}
    for trait, vector in data.items():
        if not isinstance(vector, list) or not all(isinstance(v, (int, float)) for v in vector):
            raise EmbeddingCacheError(str(path), f"entry {trait!r} is not a list of numbers")
        cache[str(trait).lower()] = [float(v) for v in vector]
    return cache


def load_embeddings_cache(
    path: Optional[Path] = None, strict: bool = False
) -> Dict[str, List[float]]:
    """Read the cache file.

    Args:
        path: File to read; defaults to ``default_cache_path()``.
        strict: Raise instead of returning an empty cache on problems.

    Returns:
        Mapping of known trait to embedding vector.

    Raises:
        EmbeddingCacheError: Only when ``strict`` and the file is missing or invalid.
    """
    path = Path(path) if path else default_cache_path()
    if not path.exists():
        if strict:
            raise EmbeddingCacheError(str(path), "file not found")
        logger.warning("Trait embeddings cache not found at %s", path)
        return {}

    try:
        # ValueError covers both bad JSON and bad UTF-8
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        if strict:
            raise EmbeddingCacheError(str(path), str(e)) from e
        logger.warning("Ignoring unreadable embeddings cache %s: %s", path, e)
        return {}

    try:
        return _validate(data, path)
    except EmbeddingCacheError as e:
        if strict:
            raise
        logger.warning("Ignoring invalid embeddings cache %s: %s", path, e)
        return {}


def save_embeddings_cache(
    cache: Mapping[str, Sequence[float]], path: Optional[Path] = None
) -> Path:
    """Write the cache as JSON, creating parent directories.

    Returns:
        The path written to.
    """
    path = Path(path) if path else default_cache_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump({trait: list(vector) for trait, vector in cache.items()}, f)
    logger.info("Wrote %d trait embeddings to %s", len(cache), path)
    return path
