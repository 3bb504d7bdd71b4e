"""Runtime settings for the embedding provider and palette generation."""

from dataclasses import dataclass

from brandpalette.config.constants import EMBEDDING_MODEL, EMBEDDING_TASK_TYPE


@dataclass(frozen=True)
class EmbeddingConfig:
    """Settings for the Gemini embedding provider used by trait mapping."""

    model_name: str = EMBEDDING_MODEL
    task_type: str = EMBEDDING_TASK_TYPE
    max_retries: int = 3
    base_delay: float = 1.0
    max_backoff: float = 8.0
    timeout_seconds: float = 10.0


@dataclass(frozen=True)
class GenerationConfig:
    """Default options for a generation run."""

    palette_count: int = 10
    include_dark_mode: bool = True


EMBEDDING_CONFIG = EmbeddingConfig()
GENERATION_CONFIG = GenerationConfig()
