"""Base embedder class and types for the embedding collaborator."""

from abc import ABC, abstractmethod
from enum import Enum

from searchmind.exceptions import FailedEmbeddingExtractionError


class EmbedderType(str, Enum):
    """Supported embedding backends."""

    OPENAI = "openai"
    MOCK = "mock"


class Embedder(ABC):
    """Abstract base class for embedding backends.

    An embedder turns one text into one vector. The credential is passed
    on every call, so a single instance can serve searches made with
    different keys.
    """

    def __init__(self, embedder_type: EmbedderType, model_name: str) -> None:
        """Initialize the embedder.

        Args:
            embedder_type: Type of backend.
            model_name: Name of the embedding model.
        """
        self._embedder_type = embedder_type
        self._model_name = model_name

    @property
    def embedder_type(self) -> EmbedderType:
        """Get the embedder type."""
        return self._embedder_type

    @property
    def model_name(self) -> str:
        """Get the model name."""
        return self._model_name

    async def embed(self, text: str, api_key: str) -> list[float]:
        """Embed a single text.

        Args:
            text: Text to embed.
            api_key: Credential for the embedding service.

        Returns:
            The embedding vector.

        Raises:
            FailedEmbeddingExtractionError: If no vector came back.
            EmbeddingError: If the request fails.
        """
        vector = await self._embed_impl(text, api_key)
        if not vector:
            raise FailedEmbeddingExtractionError()
        return [float(v) for v in vector]

    @abstractmethod
    async def _embed_impl(self, text: str, api_key: str) -> list[float] | None:
        """Backend-specific embedding call."""
        ...

    async def aclose(self) -> None:
        """Release any held clients."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(embedder={self.embedder_type.value}, model={self.model_name})"
