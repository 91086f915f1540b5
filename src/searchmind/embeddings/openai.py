"""OpenAI embedder implementation using LangChain."""

from typing import Any

from searchmind.embeddings.base import Embedder, EmbedderType
from searchmind.embeddings.registry import EmbedderRegistry
from searchmind.exceptions import (
    EmbeddingAuthError,
    EmbeddingError,
    EmbeddingRateLimitError,
    EmbeddingTimeoutError,
)
from searchmind.utils.retry import embedding_retry

DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"


class OpenAIEmbedder(Embedder):
    """Embedder backed by the OpenAI embeddings endpoint.

    Requests go to ``{base_url}/embeddings`` with a bearer token and a
    ``{model, input: [text]}`` body. One LangChain client is kept per
    credential.

    Requires langchain-openai package:
        pip install langchain-openai
    """

    def __init__(
        self,
        model: str = DEFAULT_EMBEDDING_MODEL,
        base_url: str | None = None,
        timeout: float = 60.0,
        **kwargs: Any,
    ) -> None:
        """Initialize OpenAI embedder.

        Args:
            model: Embedding model name.
            base_url: Alternative API root (None for api.openai.com).
            timeout: Request timeout in seconds.
            **kwargs: Additional arguments passed to OpenAIEmbeddings.
        """
        super().__init__(EmbedderType.OPENAI, model)
        self._base_url = base_url
        self._timeout = timeout
        self._extra_kwargs = kwargs
        self._clients: dict[str, Any] = {}

    def _get_client(self, api_key: str) -> Any:
        """Lazily initialize and return the client for a credential."""
        client = self._clients.get(api_key)
        if client is None:
            try:
                from langchain_openai import OpenAIEmbeddings
            except ImportError as e:
                raise EmbeddingError(
                    "langchain-openai not installed. "
                    "Install with: pip install langchain-openai"
                ) from e

            client = OpenAIEmbeddings(
                model=self.model_name,
                api_key=api_key,
                base_url=self._base_url,
                timeout=self._timeout,
                max_retries=0,  # retries are handled by embedding_retry
                **self._extra_kwargs,
            )
            self._clients[api_key] = client
        return client

    def _handle_error(self, e: Exception) -> None:
        """Convert exceptions to embedding errors."""
        error_str = str(e).lower()

        if "authentication" in error_str or "invalid api key" in error_str:
            raise EmbeddingAuthError(
                "OpenAI authentication failed. Check your API key."
            ) from e

        if "rate limit" in error_str or "429" in error_str:
            raise EmbeddingRateLimitError(
                "OpenAI rate limit exceeded. Try again later."
            ) from e

        if "timeout" in error_str or "timed out" in error_str:
            raise EmbeddingTimeoutError(
                f"OpenAI request timed out after {self._timeout}s"
            ) from e

        raise EmbeddingError(f"OpenAI error: {e}") from e

    @embedding_retry
    async def _embed_impl(self, text: str, api_key: str) -> list[float] | None:
        """Generate an embedding using OpenAI."""
        client = self._get_client(api_key)
        try:
            return await client.aembed_query(text)
        except Exception as e:
            self._handle_error(e)
            raise


@EmbedderRegistry.register(EmbedderType.OPENAI)
def create_openai_embedder(
    model: str = DEFAULT_EMBEDDING_MODEL,
    base_url: str | None = None,
    timeout: float = 60.0,
    **kwargs: Any,
) -> OpenAIEmbedder:
    """Factory function to create an OpenAI embedder.

    Args:
        model: Embedding model name.
        base_url: Alternative API root.
        timeout: Request timeout in seconds.
        **kwargs: Additional arguments.

    Returns:
        OpenAIEmbedder instance.
    """
    return OpenAIEmbedder(model=model, base_url=base_url, timeout=timeout, **kwargs)
