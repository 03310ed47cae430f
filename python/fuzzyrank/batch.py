"""Batch operations API for fuzzyrank.

This module provides list-based helpers on top of :func:`fuzzyrank.fuzzy_match`:
scoring a whole list (optionally on a thread pool), picking the top matches,
and sorting results the way interactive pickers usually display them.

Example usage:
    >>> import fuzzyrank.batch as batch

    # Score a query against all candidates, input order preserved
    >>> batch.score(["Card", "Cartoon", "zzz"], "crd")
    [MatchResult(score=198, result='Card')]

    # Find the top N matches, best first
    >>> matches = batch.best_matches(["abc", "xabc", "ac"], "abc", limit=2)
    >>> [(m.result, m.score) for m in matches]
    [('abc', 300), ('xabc', 293)]
"""

from __future__ import annotations

import concurrent.futures
import logging
from typing import Iterable

from fuzzyrank._utils import as_candidates, check_positive_int
from fuzzyrank.exceptions import ValidationError
from fuzzyrank.scoring import FuzzyMatcher, MatchResult

logger = logging.getLogger(__name__)

__all__ = [
    "score",
    "best_matches",
    "sort_results",
]


def _sort_key(result: MatchResult) -> tuple[int, str]:
    return (-result.score, result.result)


def sort_results(results: Iterable[MatchResult]) -> list[MatchResult]:
    """Sort results by score descending, ties broken by result ascending.

    Example:
        >>> sort_results([MatchResult(5, "b"), MatchResult(9, "c"), MatchResult(5, "a")])
        [MatchResult(score=9, result='c'), MatchResult(score=5, result='a'), MatchResult(score=5, result='b')]
    """
    return sorted(results, key=_sort_key)


def score(
    candidates: Iterable[str],
    query: str,
    workers: int | None = None,
) -> list[MatchResult]:
    """Score a query against all candidates.

    Produces exactly the records :func:`fuzzyrank.fuzzy_match` would, in
    the same order. Candidates rejected by the quick filter are absent.

    Args:
        candidates: Strings to score (a bare string is a single candidate).
        query: The query string. Whitespace is removed before matching.
        workers: Number of threads to score on. None (default) scores
            sequentially in the calling thread. Output order does not depend
            on the number of workers.

    Returns:
        List of MatchResult objects in input order.

    Raises:
        ValidationError: If query or a candidate is not a string, or if
            workers is not a positive integer.

    Example:
        >>> results = score(["Card", "zzz", "cord"], "crd", workers=4)
        >>> [r.result for r in results]
        ['Card', 'cord']
    """
    workers = check_positive_int(workers, "workers")
    matcher = FuzzyMatcher(query)
    items = list(as_candidates(candidates))

    if workers is None or workers == 1 or len(items) < 2:
        matched = [matcher.match(item) for item in items]
    else:
        # Executor.map yields in submission order.
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
            matched = list(executor.map(matcher.match, items))

    results = [m for m in matched if m is not None]
    logger.debug(
        "Scored %d candidates for %r on %s worker(s), %d admitted",
        len(items),
        matcher.query,
        workers or 1,
        len(results),
    )
    return results


def best_matches(
    candidates: Iterable[str],
    query: str,
    limit: int | None = 5,
    min_score: int | None = None,
    workers: int | None = None,
) -> list[MatchResult]:
    """Find the top N matches for a query.

    Scores all candidates, drops those below ``min_score``, sorts by score
    descending (ties broken alphabetically by result) and returns at most
    ``limit`` results.

    Args:
        candidates: Strings to search.
        query: The query string.
        limit: Maximum number of results to return (default: 5). None
            returns every match.
        min_score: Minimum score to include. None (default) keeps every
            candidate that passed the quick filter.
        workers: Number of threads to score on (see :func:`score`).

    Returns:
        List of MatchResult objects sorted best first.

    Example:
        >>> matches = best_matches(["Cord", "Card", "crowd"], "crd", limit=2)
        >>> [m.result for m in matches]
        ['Card', 'Cord']
    """
    limit = check_positive_int(limit, "limit")
    if min_score is not None and (isinstance(min_score, bool) or not isinstance(min_score, int)):
        raise ValidationError(f"min_score must be an integer, got {type(min_score).__name__}")

    results = score(candidates, query, workers=workers)
    if min_score is not None:
        results = [r for r in results if r.score >= min_score]
    ranked = sort_results(results)
    return ranked if limit is None else ranked[:limit]
