"""Resolve free-form traits to the closest known trait via embeddings.

The mapper never talks to the network on its own: it is handed an ``embed``
callable and a precomputed ``known trait -> vector`` cache. Any failure of
the embedding provider is logged and treated as "no match".
"""

import logging
import math
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence

from brandpalette.config.constants import SIMILARITY_THRESHOLD
from brandpalette.core import emotion_map
from brandpalette.storage.embedding_cache import load_embeddings_cache
from brandpalette.storage.key_manager import load_api_key

logger = logging.getLogger(__name__)

EmbedFn = Callable[[str], Optional[Sequence[float]]]


def cosine_similarity(vec_a: Optional[Sequence[float]], vec_b: Optional[Sequence[float]]) -> float:
    """Cosine similarity; 0.0 for missing, mismatched or zero vectors."""
    if not vec_a or not vec_b or len(vec_a) != len(vec_b):
        return 0.0

    dot = sum(a * b for a, b in zip(vec_a, vec_b))
    magnitude_a = math.sqrt(sum(a * a for a in vec_a))
    magnitude_b = math.sqrt(sum(b * b for b in vec_b))
    if magnitude_a == 0 or magnitude_b == 0:
        return 0.0
    return dot / (magnitude_a * magnitude_b)


class TraitMapper:
    """Maps arbitrary trait words onto the known trait vocabulary."""

    def __init__(
        self,
        embed: Optional[EmbedFn] = None,
        embeddings_cache: Optional[Mapping[str, Sequence[float]]] = None,
        threshold: float = SIMILARITY_THRESHOLD,
    ):
        """
        Args:
            embed: Returns a vector for a text, or None. Omit to disable fuzzy matching.
            embeddings_cache: Precomputed vectors for the known traits.
            threshold: Minimum cosine similarity for a match.
        """
        self.known_traits = emotion_map.known_traits()
        self.embed = embed
        self.embeddings_cache = {k.lower(): list(v) for k, v in (embeddings_cache or {}).items()}
        self.threshold = threshold
        self._session_cache: Dict[str, Optional[List[float]]] = {}

    @classmethod
    def from_environment(cls, cache_path: Optional[Path] = None) -> "TraitMapper":
        """Wire a mapper to the Gemini provider and the on-disk cache.

        A missing API key, missing cache or client setup failure yields a
        mapper that returns no match for unknown traits.
        """
        cache = load_embeddings_cache(cache_path)

        api_key = load_api_key()
        if not api_key:
            logger.warning("No Gemini API key set, arbitrary trait mapping disabled")
            return cls(embed=None, embeddings_cache=cache)

        try:
            from brandpalette.core.embedding_client import GeminiEmbeddingClient
            client = GeminiEmbeddingClient(api_key)
        except Exception as e:
            logger.warning("Could not initialize embedding client: %s", e)
            return cls(embed=None, embeddings_cache=cache)

        return cls(embed=client.embed, embeddings_cache=cache)

    @property
    def enabled(self) -> bool:
        return self.embed is not None and bool(self.embeddings_cache)

    def map_trait(self, trait: str) -> Optional[str]:
        """Map an arbitrary trait to a known trait.

        Args:
            trait: Arbitrary trait name.

        Returns:
            Known trait name, or None if nothing is similar enough.
        """
        normalized = str(trait or "").strip().lower()
        if not normalized:
            return None

        if normalized in self.known_traits:
            return normalized

        if not self.enabled:
            return None

        trait_embedding = self._get_embedding(normalized)
        if not trait_embedding:
            return None

        best_match, similarity = max(
            (
                (known, cosine_similarity(trait_embedding, self.embeddings_cache.get(known)))
                for known in self.known_traits
            ),
            key=lambda pair: pair[1],
        )

        if similarity >= self.threshold:
            logger.info(
                "Mapped trait '%s' -> '%s' (similarity: %.3f)", trait, best_match, similarity
            )
            return best_match

        logger.info(
            "No match for trait '%s' (best: '%s' at %.3f)", trait, best_match, similarity
        )
        return None

    def map_traits(self, traits: Iterable[str]) -> List[str]:
        """Map several traits; unmatched ones are dropped."""
        mapped = (self.map_trait(t) for t in traits)
        return [m for m in mapped if m]

    def _get_embedding(self, text: str) -> Optional[List[float]]:
        if text in self._session_cache:
            return self._session_cache[text]

        try:
            vector = self.embed(text)
        except Exception as e:
            logger.error("Embedding provider error for '%s': %s", text, e)
            return None

        try:
            embedding = [float(v) for v in vector] if vector else None
        except (TypeError, ValueError) as e:
            logger.error("Malformed embedding for '%s': %s", text, e)
            return None

        self._session_cache[text] = embedding
        return embedding


def build_trait_embeddings(
    embed: EmbedFn, traits: Optional[Iterable[str]] = None
) -> Dict[str, List[float]]:
    """Embed every known trait (or ``traits``) to produce a mapper cache.

    Provider errors propagate: a partial cache is not written silently.
    """
    cache = {}
    for trait in traits if traits is not None else emotion_map.known_traits():
        vector = embed(trait)
        if not vector:
            logger.warning("Provider returned no embedding for '%s', skipping", trait)
            continue
        cache[trait] = [float(v) for v in vector]
    return cache
