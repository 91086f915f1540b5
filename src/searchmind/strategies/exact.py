"""Exact and substring matching."""

from searchmind.models import SearchableItem, SearchOptions, SearchResult
from searchmind.strategies.base import SearchStrategy, rank

EXACT_SCORE = 1.0
SUBSTRING_SCORE = 0.7


class ExactMatchStrategy(SearchStrategy):
    """Scores 1.0 for an identical payload, 0.7 for a containing one."""

    name = "exact"

    async def score(
        self,
        term: str,
        items: list[SearchableItem],
        options: SearchOptions,
    ) -> list[SearchResult]:
        needle = options.normalize(term)
        results = []

        for item in items:
            payload = options.normalize(item.data)
            if needle not in payload:
                continue

            results.append(
                SearchResult(
                    match_type=self.provider.search_type,
                    path=item.path,
                    relevance_score=EXACT_SCORE if payload == needle else SUBSTRING_SCORE,
                    matched_terms=(term,),
                )
            )

        return rank(results, options.max_results)
