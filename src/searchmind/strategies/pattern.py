"""Occurrence counting with context snippets."""

import re

from searchmind.models import SearchableItem, SearchOptions, SearchResult
from searchmind.strategies.base import SearchStrategy, rank

CONTEXT_CHARS = 50
ELLIPSIS = "..."


def count_occurrences(text: str, term: str) -> int:
    """Number of non-overlapping occurrences of ``term`` in ``text``."""
    return text.count(term)


def pattern_relevance(match_count: int) -> float:
    """Relevance for a payload containing ``match_count`` occurrences."""
    return min(match_count * 0.1 + 0.5, 1.0)


def extract_context(
    text: str,
    term: str,
    context_chars: int = CONTEXT_CHARS,
    case_sensitive: bool = False,
) -> str | None:
    """Extract the text around the first match of ``term``.

    Args:
        text: Full payload.
        term: Term to locate.
        context_chars: Characters kept on each side of the match.
        case_sensitive: Only an exact-case occurrence counts as a match.

    Returns:
        The snippet, with an ellipsis on each side that was cut, or None
        if the term does not occur.
    """
    flags = 0 if case_sensitive else re.IGNORECASE
    match = re.search(re.escape(term), text, flags=flags)
    if match is None:
        return None

    start = max(0, match.start() - context_chars)
    end = min(len(text), match.end() + context_chars)

    context = text[start:end]
    if start > 0:
        context = ELLIPSIS + context
    if end < len(text):
        context = context + ELLIPSIS
    return context


class PatternMatchStrategy(SearchStrategy):
    """Scores by occurrence count and attaches a context snippet.

    Members that cannot be decoded as text are skipped rather than
    failing the search.
    """

    name = "pattern"
    skips_undecodable = True

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
            match_count = count_occurrences(payload, needle)
            if match_count == 0:
                continue

            results.append(
                SearchResult(
                    match_type=self.provider.search_type,
                    path=item.path,
                    relevance_score=pattern_relevance(match_count),
                    matched_terms=(term,),
                    context=extract_context(
                        item.data, term, case_sensitive=options.case_sensitive
                    ),
                )
            )

        return rank(results, options.max_results)
