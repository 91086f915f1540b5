"""Embedding collaborator used by semantic search.

Usage:
    from searchmind.embeddings import EmbedderRegistry, EmbedderType

    embedder = EmbedderRegistry.get(EmbedderType.OPENAI)
    vector = await embedder.embed("find the config loader", api_key)
"""

# Import embedders to register them
from searchmind.embeddings.base import Embedder, EmbedderType
from searchmind.embeddings.mock import MockEmbedder
from searchmind.embeddings.openai import OpenAIEmbedder
from searchmind.embeddings.registry import EmbedderRegistry

__all__ = [
    "Embedder",
    "EmbedderType",
    "EmbedderRegistry",
    "MockEmbedder",
    "OpenAIEmbedder",
]
