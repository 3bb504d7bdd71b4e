"""Gemini embedding client used to resolve free-form brand traits."""

import logging
import time
from typing import List

from brandpalette.config.settings import EMBEDDING_CONFIG, EmbeddingConfig
from brandpalette.exceptions.errors import EmbeddingAPIError, RetryExhaustedError
from brandpalette.core.retry import is_retryable_error, wrap_api_key_error, is_api_key_error
from brandpalette.utils.masking import mask_key

logger = logging.getLogger(__name__)


class GeminiEmbeddingClient:
    """Client for turning short texts into embedding vectors with Gemini."""

    def __init__(self, api_key: str, config: EmbeddingConfig = EMBEDDING_CONFIG):
        """Initialize the client with the given API key.

        Args:
            api_key: The Gemini API key.
            config: Model and retry settings.
        """
        # Import genai here for lazy loading
        import google.generativeai as genai
        self.genai = genai
        self.api_key_masked = mask_key(api_key)

        self.genai.configure(api_key=api_key)

        self.model_name = config.model_name
        self.task_type = config.task_type

        # Retry configuration
        self.base_delay = config.base_delay
        self.max_backoff = config.max_backoff
        self.max_retries = config.max_retries
        self.timeout_seconds = config.timeout_seconds

    def __call__(self, text: str) -> List[float]:
        return self.embed(text)

    def embed(self, text: str) -> List[float]:
        """Embed one text, retrying transient failures with backoff.

        Args:
            text: The text to embed.

        Returns:
            The embedding vector.

        Raises:
            EmbeddingAPIError: If there's a permanent API error.
            RetryExhaustedError: If all retries are exhausted.
        """
        for attempt in range(self.max_retries):
            try:
                logger.debug("Embedding attempt %d/%d", attempt + 1, self.max_retries)
                return self._call_api(text)
            except EmbeddingAPIError:
                # Don't retry permanent failures
                raise
            except Exception as e:
                if not self._handle_retry(e, attempt):
                    raise

        raise RetryExhaustedError(attempts=self.max_retries)

    def _call_api(self, text: str) -> List[float]:
        """Make the API call and extract the vector.

        Raises:
            ValueError: If the response carries no embedding.
        """
        response = self.genai.embed_content(
            model=self.model_name,
            content=text,
            task_type=self.task_type,
            request_options={"timeout": self.timeout_seconds},
        )

        embedding = response.get("embedding") if isinstance(response, dict) else None
        if not embedding:
            logger.debug("Received empty embedding for %r", text)
            raise ValueError("Received empty embedding from API")

        return [float(v) for v in embedding]

    def _handle_retry(self, error: Exception, attempt: int) -> bool:
        """Handle retry logic for errors.

        Args:
            error: The exception that occurred.
            attempt: Current attempt number (0-indexed).

        Returns:
            True if we should continue retrying, False otherwise.

        Raises:
            EmbeddingAPIError: If this is an API key error.
            RetryExhaustedError: If max retries reached.
        """
        logger.debug(
            "Exception on attempt %d: %s (%s)",
            attempt + 1, error, type(error).__name__
        )

        if is_api_key_error(error):
            raise wrap_api_key_error(error, self.api_key_masked) from error

        if not is_retryable_error(error):
            logger.debug("Non-retryable error detected: %s", type(error).__name__)
            return False

        if attempt >= self.max_retries - 1:
            logger.debug("Max retries reached. Raising exception.")
            raise RetryExhaustedError(
                attempts=self.max_retries,
                last_error=error
            ) from error

        delay = min(self.base_delay * (2 ** attempt), self.max_backoff)
        logger.debug("Retrying in %.1f seconds...", delay)
        time.sleep(delay)

        return True
