"""Matching strategies.

Exactly four implementations of ``SearchStrategy`` exist; the selector
picks one per search.
"""

from searchmind.strategies.base import SearchStrategy, rank
from searchmind.strategies.exact import ExactMatchStrategy
from searchmind.strategies.fuzzy import (
    FuzzyMatchStrategy,
    fuzzy_relevance,
    levenshtein_distance,
)
from searchmind.strategies.pattern import PatternMatchStrategy, extract_context
from searchmind.strategies.semantic import SemanticMatchStrategy, cosine_similarity

__all__ = [
    "SearchStrategy",
    "rank",
    "ExactMatchStrategy",
    "FuzzyMatchStrategy",
    "PatternMatchStrategy",
    "SemanticMatchStrategy",
    "levenshtein_distance",
    "fuzzy_relevance",
    "extract_context",
    "cosine_similarity",
]
