"""Search engine.

Runs a single search: selects the strategy, optionally races it against
a timer, and normalizes unexpected collaborator failures.
"""

import asyncio
import logging
import time
from collections.abc import Coroutine
from typing import Any, TypeVar

from searchmind.embeddings.base import Embedder
from searchmind.exceptions import InternalError, SearchMindError, SearchTimeoutError
from searchmind.models import SearchOptions, SearchResult, SearchType
from searchmind.selector import AlgorithmSelector
from searchmind.stores.base import RecordStore
from searchmind.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)

T = TypeVar("T")


async def race_with_timeout(work: Coroutine[Any, Any, T], timeout: float) -> T:
    """Run ``work`` against a timer; the first to finish wins.

    The loser is always cancelled and awaited, so neither the timer nor
    the work outlives the call. If the work wins, its result (or
    exception) is returned as is.

    Args:
        work: Coroutine to run.
        timeout: Seconds before giving up.

    Returns:
        The result of ``work``.

    Raises:
        SearchTimeoutError: If the timer finished first.
    """
    work_task = asyncio.ensure_future(work)
    timer_task = asyncio.ensure_future(asyncio.sleep(timeout))

    try:
        done, _ = await asyncio.wait(
            {work_task, timer_task},
            return_when=asyncio.FIRST_COMPLETED,
        )
    finally:
        losers = [task for task in (work_task, timer_task) if not task.done()]
        for task in losers:
            task.cancel()
        if losers:
            await asyncio.gather(*losers, return_exceptions=True)

    if work_task in done:
        return work_task.result()

    raise SearchTimeoutError(f"Search operation timed out after {timeout}s")


class SearchEngine:
    """Orchestrates one search call.

    The engine holds no per-search state and is safe to share between
    concurrent searches.
    """

    def __init__(
        self,
        embedder: Embedder | None = None,
        record_store: RecordStore | None = None,
        selector: AlgorithmSelector | None = None,
    ) -> None:
        """Initialize the search engine.

        Args:
            embedder: Embedding backend for semantic searches.
            record_store: Store backing database searches.
            selector: Pre-built selector; overrides the two above.
        """
        self.selector = selector or AlgorithmSelector(embedder, record_store)

    async def search(
        self,
        term: str,
        search_type: SearchType = SearchType.FILE,
        options: SearchOptions | None = None,
    ) -> list[SearchResult]:
        """Search for ``term`` in the given source kind.

        Args:
            term: Non-empty search term (validated by the caller).
            search_type: Source kind to search.
            options: Search options; defaults when None.

        Returns:
            Results sorted by descending relevance.

        Raises:
            SearchTimeoutError: If ``options.timeout`` elapsed first.
            SearchMindError: Any provider or strategy failure.
            InternalError: For unexpected collaborator failures.
        """
        options = options or SearchOptions()
        strategy = self.selector.select(search_type, options)
        logger.debug("Selected %r for %r", strategy, term)

        started = time.perf_counter()
        try:
            if options.timeout is None:
                results = await strategy.search(term, options)
            else:
                results = await race_with_timeout(
                    strategy.search(term, options), options.timeout
                )
        except SearchTimeoutError:
            logger.debug("Search for %r timed out after %ss", term, options.timeout)
            raise
        except SearchMindError:
            raise
        except Exception as e:
            raise InternalError(f"Unexpected failure searching '{term}': {e}") from e

        log_with_context(
            logger,
            logging.DEBUG,
            "Search finished",
            term=term,
            source=SearchType(search_type).value,
            strategy=strategy.name,
            results=len(results),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return results
