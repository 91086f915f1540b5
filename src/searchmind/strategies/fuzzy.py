"""Edit-distance matching.

Relevance is the Levenshtein distance normalized by the longer of the
two strings and inverted, so identical strings score 1.0.
"""

from searchmind.models import SearchableItem, SearchOptions, SearchResult
from searchmind.strategies.base import SearchStrategy, rank

# Results must score strictly above this to be kept.
FUZZY_THRESHOLD = 0.3


def levenshtein_distance(source: str, target: str) -> int:
    """Calculate the Levenshtein distance between two strings.

    Insertions, deletions and substitutions each cost 1. Only the
    previous row of the dynamic-programming table is kept.
    """
    if not source:
        return len(target)
    if not target:
        return len(source)

    previous_row = list(range(len(target) + 1))
    for i, source_char in enumerate(source, start=1):
        current_row = [i]
        for j, target_char in enumerate(target, start=1):
            if source_char == target_char:
                current_row.append(previous_row[j - 1])
            else:
                current_row.append(
                    min(
                        previous_row[j] + 1,  # deletion
                        current_row[j - 1] + 1,  # insertion
                        previous_row[j - 1] + 1,  # substitution
                    )
                )
        previous_row = current_row

    return previous_row[-1]


def fuzzy_relevance(term: str, payload: str) -> float:
    """Relevance of ``payload`` for ``term`` in [0, 1]."""
    max_length = max(len(term), len(payload))
    if max_length == 0:
        return 1.0
    return 1.0 - levenshtein_distance(term, payload) / max_length


class FuzzyMatchStrategy(SearchStrategy):
    """Keeps items whose edit-distance relevance exceeds 0.3."""

    name = "fuzzy"

    async def score(
        self,
        term: str,
        items: list[SearchableItem],
        options: SearchOptions,
    ) -> list[SearchResult]:
        needle = options.normalize(term)
        results = []

        for item in items:
            relevance = fuzzy_relevance(needle, options.normalize(item.data))
            if relevance <= FUZZY_THRESHOLD:
                continue

            results.append(
                SearchResult(
                    match_type=self.provider.search_type,
                    path=item.path,
                    relevance_score=relevance,
                    matched_terms=(term,),
                )
            )

        return rank(results, options.max_results)
