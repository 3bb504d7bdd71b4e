"""High-level API key management for the embedding provider."""

import logging
import os
from typing import Optional, Tuple

from brandpalette.config.constants import PREFERRED_ENV_VAR, PRIMARY_ENV_VAR
from brandpalette.storage.keyring_storage import load_from_keyring, save_to_keyring
from brandpalette.storage.env_storage import (
    get_env_file_path,
    load_from_env_file,
    store_in_env_file,
)

logger = logging.getLogger(__name__)


def get_api_key_source() -> Tuple[Optional[str], str]:
    """Determine which storage location supplies the API key.

    Returns:
        Tuple of (api_key, source_description).
    """
    for var in (PREFERRED_ENV_VAR, PRIMARY_ENV_VAR):
        if os.environ.get(var):
            return os.environ[var], f"Environment Variable ({var})"

    keyring_key = load_from_keyring()
    if keyring_key:
        return keyring_key, "OS Keyring"

    env_file_key = load_from_env_file(get_env_file_path())
    if env_file_key:
        return env_file_key, f"User Config: {get_env_file_path()}"

    return None, "No API Key Found"


def load_api_key() -> Optional[str]:
    """Load the Gemini API key.

    Priority:
        1. BRANDPALETTE_GEMINI_API_KEY environment variable
        2. GEMINI_API_KEY environment variable
        3. OS keyring
        4. User config .env

    Returns:
        The API key if found, None otherwise.
    """
    api_key, source = get_api_key_source()
    if api_key:
        logger.debug("Using API key from %s", source)
    return api_key


def save_api_key(api_key: str) -> bool:
    """Save the API key to the keyring and the per-user .env file.

    Also sets os.environ for the current process.

    Returns:
        True if saved successfully, False otherwise.
    """
    try:
        api_key = api_key.strip().strip("'\"").strip()
        if not api_key:
            return False

        if save_to_keyring(api_key):
            logger.info("API key saved to keyring successfully")
        else:
            logger.warning("Keyring unavailable, using file storage instead")

        store_in_env_file(api_key)
        os.environ[PREFERRED_ENV_VAR] = api_key
        return True

    except Exception as e:
        logger.error("Failed to save API key: %s", e)
        return False
