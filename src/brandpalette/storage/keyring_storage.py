"""OS keyring access for the embedding API key."""

import logging
from typing import Optional

from brandpalette.config.constants import KEYRING_SERVICE_NAME, KEYRING_ACCOUNT_NAME

logger = logging.getLogger(__name__)

# Flips to False the first time the backend fails this session
_keyring_available = True


def is_keyring_available() -> bool:
    """Check if keyring is available for use."""
    return _keyring_available


def _backend():
    """Return the keyring module, or None once it has proven unusable."""
    global _keyring_available
    if not _keyring_available:
        return None
    try:
        import keyring
    except ImportError:
        _keyring_available = False
        return None
    return keyring


def load_from_keyring() -> Optional[str]:
    """Load the API key from the OS keyring if available."""
    global _keyring_available
    keyring = _backend()
    if keyring is None:
        return None

    try:
        return keyring.get_password(KEYRING_SERVICE_NAME, KEYRING_ACCOUNT_NAME)
    except Exception as e:
        logger.warning("Keyring lookup failed: %s", e)
        _keyring_available = False
        return None


def save_to_keyring(api_key: str) -> bool:
    """Persist the API key to the OS keyring.

    Returns:
        True if saved successfully, False otherwise.
    """
    global _keyring_available
    keyring = _backend()
    if keyring is None:
        return False

    try:
        keyring.set_password(KEYRING_SERVICE_NAME, KEYRING_ACCOUNT_NAME, api_key)
        return True
    except Exception as e:
        logger.warning("Keyring save failed: %s", e)
        _keyring_available = False
        return False
