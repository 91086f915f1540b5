"""Mock embedder for testing."""

import asyncio
import hashlib
from typing import Any

from searchmind.embeddings.base import Embedder, EmbedderType
from searchmind.embeddings.registry import EmbedderRegistry


class MockEmbedder(Embedder):
    """Mock embedder for testing.

    Generates deterministic vectors from a hash of the input text, making
    tests predictable. Fixed vectors can be configured for specific texts.
    """

    def __init__(
        self,
        model: str = "mock-embedding",
        vectors: dict[str, list[float]] | None = None,
        dimensions: int = 128,
        latency_ms: int = 0,
    ) -> None:
        """Initialize mock embedder.

        Args:
            model: Model name to report.
            vectors: Dict mapping exact texts to the vectors to return.
            dimensions: Dimension of hash-derived vectors.
            latency_ms: Simulated latency in milliseconds.
        """
        super().__init__(EmbedderType.MOCK, model)
        self._vectors = vectors or {}
        self._dimensions = dimensions
        self._latency_ms = latency_ms
        self._call_history: list[dict[str, Any]] = []

    @property
    def call_history(self) -> list[dict[str, Any]]:
        """Get history of all calls made to this embedder."""
        return self._call_history

    @property
    def call_count(self) -> int:
        """Get the number of calls made to this embedder."""
        return len(self._call_history)

    def clear_history(self) -> None:
        """Clear call history."""
        self._call_history.clear()

    def _hash_vector(self, text: str) -> list[float]:
        hash_bytes = hashlib.sha256(text.encode()).digest()
        extended = hash_bytes * (self._dimensions // 32 + 1)
        return [(b - 128) / 128.0 for b in extended[: self._dimensions]]

    async def _embed_impl(self, text: str, api_key: str) -> list[float] | None:
        """Return a configured or hash-derived vector."""
        self._call_history.append({"text": text, "api_key": api_key})

        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000)

        if text in self._vectors:
            return list(self._vectors[text])
        return self._hash_vector(text)


@EmbedderRegistry.register(EmbedderType.MOCK)
def create_mock_embedder(
    model: str = "mock-embedding",
    vectors: dict[str, list[float]] | None = None,
    dimensions: int = 128,
    latency_ms: int = 0,
    **kwargs: Any,
) -> MockEmbedder:
    """Factory function to create a mock embedder.

    Args:
        model: Model name to report.
        vectors: Dict mapping texts to fixed vectors.
        dimensions: Dimension of hash-derived vectors.
        latency_ms: Simulated latency in milliseconds.
        **kwargs: Additional arguments (ignored).

    Returns:
        MockEmbedder instance.
    """
    return MockEmbedder(
        model=model,
        vectors=vectors,
        dimensions=dimensions,
        latency_ms=latency_ms,
    )
