"""Unit tests for matching strategies."""

from pathlib import Path

import pytest

from searchmind.embeddings import MockEmbedder
from searchmind.exceptions import EmbeddingError, MissingKeyError
from searchmind.models import SearchableItem, SearchOptions, SearchResult, SearchType
from searchmind.providers import FileContentsProvider, FileNameProvider
from searchmind.strategies import (
    ExactMatchStrategy,
    FuzzyMatchStrategy,
    PatternMatchStrategy,
    SemanticMatchStrategy,
    cosine_similarity,
    extract_context,
    fuzzy_relevance,
    levenshtein_distance,
    rank,
)


def make_items(*payloads: str) -> list[SearchableItem]:
    return [
        SearchableItem(id=str(i), data=data, path=f"/items/{i}", metadata={})
        for i, data in enumerate(payloads)
    ]


class TestRank:
    """Tests for result ranking."""

    def test_sorted_and_truncated(self) -> None:
        """Test descending order and max_results."""
        results = [
            SearchResult(SearchType.FILE, str(score), score, ("t",))
            for score in (0.5, 0.9, 0.7)
        ]
        ranked = rank(results, 2)
        assert [r.relevance_score for r in ranked] == [0.9, 0.7]

    def test_ties_keep_encounter_order(self) -> None:
        """Test the sort is stable."""
        results = [
            SearchResult(SearchType.FILE, path, 0.7, ("t",)) for path in ("a", "b", "c")
        ]
        assert [r.path for r in rank(results, 10)] == ["a", "b", "c"]


class TestExactMatchStrategy:
    """Tests for ExactMatchStrategy."""

    @pytest.mark.asyncio
    async def test_substring_in_file_name(self, sample_files: Path) -> None:
        """Test a contained term scores 0.7."""
        strategy = ExactMatchStrategy(FileNameProvider())
        results = await strategy.search(
            "apple",
            SearchOptions(search_paths=[str(sample_files)], fuzzy_matching=False),
        )

        assert len(results) == 1
        assert results[0].path.endswith("apple.txt")
        assert results[0].relevance_score == 0.7
        assert results[0].match_type == SearchType.FILE
        assert results[0].matched_terms == ("apple",)

    @pytest.mark.asyncio
    async def test_identical_scores_one(self) -> None:
        """Test an identical payload scores 1.0 and ranks first."""
        strategy = ExactMatchStrategy(FileNameProvider())
        results = await strategy.score(
            "Apple", make_items("pineapple", "apple"), SearchOptions()
        )

        assert [r.relevance_score for r in results] == [1.0, 0.7]
        assert results[0].path == "/items/1"

    @pytest.mark.asyncio
    async def test_case_sensitive(self) -> None:
        """Test case-sensitive comparison skips other cases."""
        strategy = ExactMatchStrategy(FileNameProvider())
        results = await strategy.score(
            "Apple", make_items("apple"), SearchOptions(case_sensitive=True)
        )
        assert results == []

    @pytest.mark.asyncio
    async def test_truncates_to_max_results(self) -> None:
        """Test results are cut to max_results."""
        strategy = ExactMatchStrategy(FileNameProvider())
        results = await strategy.score(
            "a", make_items("a1", "a2", "a3"), SearchOptions(max_results=2)
        )
        assert len(results) == 2


class TestFuzzyMatchStrategy:
    """Tests for FuzzyMatchStrategy and edit distance."""

    @pytest.mark.parametrize(
        ("source", "target", "expected"),
        [
            ("", "", 0),
            ("", "abc", 3),
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("apple", "apple", 0),
        ],
    )
    def test_levenshtein_distance(self, source: str, target: str, expected: int) -> None:
        """Test known edit distances."""
        assert levenshtein_distance(source, target) == expected

    @pytest.mark.parametrize(("a", "b"), [("appel", "apple"), ("abc", ""), ("ab", "ba")])
    def test_levenshtein_symmetric(self, a: str, b: str) -> None:
        """Test distance is symmetric."""
        assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    def test_relevance_of_empty_strings(self) -> None:
        """Test two empty strings are a perfect match."""
        assert fuzzy_relevance("", "") == 1.0

    @pytest.mark.asyncio
    async def test_typo_matches(self) -> None:
        """Test a transposed term still matches with partial relevance."""
        strategy = FuzzyMatchStrategy(FileNameProvider())
        results = await strategy.score(
            "appel", make_items("apple", "zzzzzzzz"), SearchOptions()
        )

        assert len(results) == 1
        assert 0.3 < results[0].relevance_score < 1.0
        assert results[0].relevance_score == pytest.approx(0.6)

    @pytest.mark.asyncio
    async def test_low_relevance_dropped(self) -> None:
        """Test payloads at or below the threshold are dropped."""
        # distance 8 over length 10 leaves 0.2
        strategy = FuzzyMatchStrategy(FileNameProvider())
        results = await strategy.score(
            "abcdefghij", make_items("abxxxxxxxx"), SearchOptions()
        )
        assert results == []


class TestPatternMatchStrategy:
    """Tests for PatternMatchStrategy."""

    @pytest.mark.asyncio
    async def test_counts_occurrences(self, sample_files: Path) -> None:
        """Test relevance grows with occurrences and context is attached."""
        strategy = PatternMatchStrategy(FileContentsProvider())
        results = await strategy.search(
            "APPLE",
            SearchOptions(search_paths=[str(sample_files)], pattern_match=True),
        )

        assert len(results) == 1
        assert results[0].match_type == SearchType.FILE_CONTENTS
        assert results[0].relevance_score == pytest.approx(0.7)
        assert results[0].context == "I like apple pie and apple juice."

    @pytest.mark.asyncio
    async def test_relevance_capped(self) -> None:
        """Test relevance never exceeds 1.0."""
        strategy = PatternMatchStrategy(FileContentsProvider())
        results = await strategy.score("a", make_items("a" * 20), SearchOptions())
        assert results[0].relevance_score == 1.0

    @pytest.mark.asyncio
    async def test_skips_undecodable_files(self, temp_dir: Path) -> None:
        """Test binary members do not fail a pattern search."""
        (temp_dir / "blob.bin").write_bytes(b"\xff\xfe\x00\x80")
        (temp_dir / "text.txt").write_text("needle in a haystack")

        strategy = PatternMatchStrategy(FileContentsProvider())
        results = await strategy.search(
            "needle", SearchOptions(search_paths=[str(temp_dir)])
        )

        assert len(results) == 1
        assert results[0].path.endswith("text.txt")

    def test_context_with_ellipses(self) -> None:
        """Test both sides are cut and marked."""
        text = "x" * 100 + "Apple" + "y" * 100
        context = extract_context(text, "apple")

        assert context == "..." + "x" * 50 + "Apple" + "y" * 50 + "..."
        assert len(context) <= 2 * 50 + len("apple") + 6

    def test_context_missing_term(self) -> None:
        """Test None when the term does not occur."""
        assert extract_context("nothing here", "apple") is None

    def test_context_case_sensitive(self) -> None:
        """Test a case-sensitive lookup centres on the exact-case occurrence."""
        text = "apple " + "x" * 120 + " Apple"

        assert extract_context(text, "Apple").startswith("apple")
        assert extract_context(text, "Apple", case_sensitive=True) == "..." + "x" * 49 + " Apple"
        assert extract_context("apple only", "Apple", case_sensitive=True) is None

    @pytest.mark.asyncio
    async def test_case_sensitive_context_contains_term(self) -> None:
        """Test the snippet of a case-sensitive search holds the counted match."""
        strategy = PatternMatchStrategy(FileContentsProvider())
        results = await strategy.score(
            "Apple",
            make_items("apple " + "x" * 120 + " Apple"),
            SearchOptions(case_sensitive=True),
        )

        assert len(results) == 1
        assert results[0].relevance_score == pytest.approx(0.6)
        assert "Apple" in results[0].context


class TestSemanticMatchStrategy:
    """Tests for SemanticMatchStrategy."""

    def test_cosine_similarity(self) -> None:
        """Test cosine similarity edge cases."""
        assert cosine_similarity([1.0, 0.0], [1.0, 0.0]) == pytest.approx(1.0)
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == 0.0
        assert cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0]) == 0.0
        assert cosine_similarity([0.0, 0.0], [1.0, 1.0]) == 0.0
        assert cosine_similarity([], []) == 0.0

    @pytest.mark.asyncio
    async def test_ranks_by_similarity(self) -> None:
        """Test similar items are kept and dissimilar ones dropped."""
        embedder = MockEmbedder(
            vectors={
                "kitten": [1.0, 0.0],
                "cat": [0.9, 0.1],
                "car": [0.0, 1.0],
            }
        )
        strategy = SemanticMatchStrategy(FileNameProvider(), embedder)
        results = await strategy.score(
            "Kitten",
            make_items("Cat", "Car"),
            SearchOptions(semantic=True, api_key="key"),
        )

        assert [r.path for r in results] == ["/items/0"]
        assert results[0].relevance_score > 0.9
        assert embedder.call_count == 3
        assert embedder.call_history[0] == {"text": "kitten", "api_key": "key"}

    @pytest.mark.asyncio
    async def test_missing_key_before_any_call(self) -> None:
        """Test a missing credential fails before provider or embedder calls."""
        embedder = MockEmbedder()
        strategy = SemanticMatchStrategy(FileContentsProvider(), embedder)

        with pytest.raises(MissingKeyError):
            await strategy.search("kitten", SearchOptions(semantic=True))

        assert embedder.call_count == 0

    @pytest.mark.asyncio
    async def test_missing_embedder(self, sample_files: Path) -> None:
        """Test an unconfigured embedder raises EmbeddingError."""
        strategy = SemanticMatchStrategy(FileNameProvider(), None)
        with pytest.raises(EmbeddingError):
            await strategy.search(
                "kitten",
                SearchOptions(search_paths=[str(sample_files)], api_key="key"),
            )
