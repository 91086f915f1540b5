"""Embedding-based semantic matching."""

import math
from collections.abc import Sequence

from searchmind.embeddings.base import Embedder
from searchmind.exceptions import EmbeddingError, MissingKeyError
from searchmind.models import SearchableItem, SearchOptions, SearchResult
from searchmind.providers.base import ItemProvider
from searchmind.strategies.base import SearchStrategy, rank

# Results must score strictly above this to be kept.
SEMANTIC_THRESHOLD = 0.4


def cosine_similarity(vec1: Sequence[float], vec2: Sequence[float]) -> float:
    """Calculate cosine similarity between two vectors.

    Args:
        vec1: First vector.
        vec2: Second vector.

    Returns:
        Cosine similarity, or 0.0 if either vector has zero magnitude or
        the dimensions differ.
    """
    if not vec1 or not vec2 or len(vec1) != len(vec2):
        return 0.0

    dot_product = sum(a * b for a, b in zip(vec1, vec2, strict=True))
    norm1 = math.sqrt(sum(a * a for a in vec1))
    norm2 = math.sqrt(sum(b * b for b in vec2))

    if norm1 == 0 or norm2 == 0:
        return 0.0

    return dot_product / (norm1 * norm2)


class SemanticMatchStrategy(SearchStrategy):
    """Ranks items by cosine similarity of their embeddings to the term's.

    One embedding call is made for the term and one per item, in order,
    so a cancelled search stops issuing further calls.
    """

    name = "semantic"

    def __init__(self, provider: ItemProvider, embedder: Embedder | None) -> None:
        super().__init__(provider)
        self.embedder = embedder

    def _require(self, options: SearchOptions) -> tuple[Embedder, str]:
        if not options.api_key:
            raise MissingKeyError()
        if self.embedder is None:
            raise EmbeddingError("No embedder configured for semantic search")
        return self.embedder, options.api_key

    async def search(self, term: str, options: SearchOptions) -> list[SearchResult]:
        # fail before the provider is touched
        self._require(options)
        return await super().search(term, options)

    async def score(
        self,
        term: str,
        items: list[SearchableItem],
        options: SearchOptions,
    ) -> list[SearchResult]:
        embedder, api_key = self._require(options)
        term_vector = await embedder.embed(options.normalize(term), api_key)

        results = []
        for item in items:
            item_vector = await embedder.embed(
                options.normalize(item.data), api_key
            )
            similarity = cosine_similarity(term_vector, item_vector)
            if similarity <= SEMANTIC_THRESHOLD:
                continue

            results.append(
                SearchResult(
                    match_type=self.provider.search_type,
                    path=item.path,
                    relevance_score=similarity,
                    matched_terms=(term,),
                )
            )

        return rank(results, options.max_results)
