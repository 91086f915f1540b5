"""Embedder registry for creating and caching embedder instances."""

from collections.abc import Callable
from typing import Any

from searchmind.embeddings.base import Embedder, EmbedderType
from searchmind.exceptions import EmbeddingError

# Type for embedder factory functions
EmbedderFactory = Callable[..., Embedder]


class EmbedderRegistry:
    """Factory for creating and caching embedder instances.

    Usage:
        @EmbedderRegistry.register(EmbedderType.MOCK)
        def create_mock(**kwargs) -> MockEmbedder:
            return MockEmbedder(**kwargs)

        embedder = EmbedderRegistry.get(EmbedderType.MOCK)
    """

    _factories: dict[EmbedderType, EmbedderFactory] = {}
    _instances: dict[str, Embedder] = {}

    @classmethod
    def register(
        cls, embedder_type: EmbedderType
    ) -> Callable[[EmbedderFactory], EmbedderFactory]:
        """Decorator to register an embedder factory.

        Args:
            embedder_type: The type of embedder this factory creates.

        Returns:
            Decorator function.
        """

        def decorator(factory: EmbedderFactory) -> EmbedderFactory:
            cls._factories[embedder_type] = factory
            return factory

        return decorator

    @classmethod
    def get(
        cls,
        embedder_type: EmbedderType | str,
        *,
        use_cache: bool = True,
        **kwargs: Any,
    ) -> Embedder:
        """Get or create an embedder instance.

        Args:
            embedder_type: Type of embedder to get.
            use_cache: Whether to cache/reuse instances.
            **kwargs: Additional arguments for the factory.

        Returns:
            Embedder instance.

        Raises:
            EmbeddingError: If the type is unknown or creation fails.
        """
        try:
            embedder_type = EmbedderType(embedder_type)
        except ValueError as e:
            raise EmbeddingError(f"Unknown embedder '{embedder_type}'") from e

        factory = cls._factories.get(embedder_type)
        if factory is None:
            available = [t.value for t in cls._factories]
            raise EmbeddingError(
                f"Embedder '{embedder_type.value}' is not registered. "
                f"Available embedders: {available}"
            )

        cache_key = cls._build_cache_key(embedder_type, **kwargs)
        if use_cache and cache_key in cls._instances:
            return cls._instances[cache_key]

        try:
            instance = factory(**kwargs)
        except Exception as e:
            raise EmbeddingError(
                f"Failed to create embedder '{embedder_type.value}': {e}"
            ) from e

        if use_cache:
            cls._instances[cache_key] = instance

        return instance

    @classmethod
    def _build_cache_key(cls, embedder_type: EmbedderType, **kwargs: Any) -> str:
        """Build a cache key for embedder instances."""
        kwargs_str = ",".join(f"{k}={v}" for k, v in sorted(kwargs.items()))
        return f"{embedder_type.value}:{kwargs_str}"

    @classmethod
    def list_available(cls) -> list[EmbedderType]:
        """List all registered embedder types."""
        return list(cls._factories.keys())

    @classmethod
    def is_registered(cls, embedder_type: EmbedderType) -> bool:
        """Check if an embedder type is registered."""
        return embedder_type in cls._factories

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached embedder instances."""
        cls._instances.clear()
