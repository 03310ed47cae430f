"""Score candidates against a query.

This is the public entry point of fuzzyrank. Each candidate is trimmed,
passed through the quick filter and, if admitted, scored from four
measures:

    score = 100
    score -= levenshtein(candidate, query)
    score *= len(longest_common_substring(candidate, query))
    score -= span.length
    score -= span.index
    score += len(common_prefix(candidate, query))

The order of operations matters. Subtracting the edit distance before the
multiplication means a large distance can flip the sign of the score, and a
candidate sharing no contiguous run with the query scores 0 before the span
penalties. Candidates rejected by the quick filter produce no record at all.

Results come back in input order; sorting is left to the caller (see
``fuzzyrank.batch.best_matches`` for a ready-made ordering).

Example usage:
    >>> import fuzzyrank as fk
    >>> fk.fuzzy_match("crd", ["Card", "Cartoon", "zzz"])
    [MatchResult(score=198, result='Card')]
"""

import logging
import warnings
from typing import Iterable, Iterator, List, NamedTuple, Optional, Union

from fuzzyrank._utils import as_candidates, require_str, strip_whitespace
from fuzzyrank.exceptions import ComputationWarning
from fuzzyrank.metrics import common_prefix, levenshtein, longest_common_substring
from fuzzyrank.patterns import QuickFilter, Span, find_span

logger = logging.getLogger(__name__)

BASE_SCORE = 100

# Failures that skip a single candidate instead of aborting the call.
_RECOVERABLE = (ArithmeticError, MemoryError, RecursionError)


class MatchResult(NamedTuple):
    """A scored candidate: higher ``score`` means more relevant."""

    score: int
    result: str


class ScoreBreakdown(NamedTuple):
    """The measures behind one candidate's score."""

    result: str
    levenshtein: int
    common_substring: str
    span_length: int
    span_index: int
    common_prefix: str
    score: int


def combine(distance: int, substring_length: int, span: Span, prefix_length: int) -> int:
    """Combine the four measures into a single score."""
    score = BASE_SCORE
    score -= distance
    score *= substring_length
    score -= span.length
    score -= span.index
    if prefix_length:
        score += prefix_length
    return score


class FuzzyMatcher:
    """A query prepared for scoring many candidates.

    Stores the whitespace-stripped query and its folded quick filter so
    they are built once per query rather than once per candidate. Instances are immutable and may be shared between threads.

    Example:
        >>> matcher = FuzzyMatcher("c rd")
        >>> matcher.query
        'crd'
        >>> matcher.match("  Card ")
        MatchResult(score=198, result='Card')
        >>> matcher.match("zzz") is None
        True
    """

    def __init__(self, query: str):
        self._query = strip_whitespace(require_str(query, "query"))
        self._filter = QuickFilter(self._query)

    @property
    def query(self) -> str:
        """The query with all whitespace removed."""
        return self._query

    def admits(self, candidate: str) -> bool:
        """Return True if the trimmed candidate passes the quick filter."""
        return self._filter(require_str(candidate, "candidate").strip())

    def explain(self, candidate: str) -> Optional[ScoreBreakdown]:
        """Return every measure used to score the candidate.

        Returns None when the candidate is rejected by the quick filter.
        """
        text = require_str(candidate, "candidate").strip()
        if not self._filter(text):
            return None

        query = self._query
        distance = levenshtein(text, query)
        substring = longest_common_substring(text, query)
        span = find_span(query, text)
        prefix = common_prefix(text, query)
        return ScoreBreakdown(
            result=text,
            levenshtein=distance,
            common_substring=substring,
            span_length=span.length,
            span_index=span.index,
            common_prefix=prefix,
            score=combine(distance, len(substring), span, len(prefix)),
        )

    def score(self, candidate: str) -> Optional[int]:
        """Score a single candidate, or None if the quick filter rejects it."""
        breakdown = self.explain(candidate)
        return None if breakdown is None else breakdown.score

    def match(self, candidate: str) -> Optional[MatchResult]:
        """Score a single candidate and wrap it in a MatchResult.

        Returns None if the candidate is rejected, or if scoring it failed
        with a numeric or resource error. In the latter case a
        ComputationWarning is emitted.

        Raises:
            ValidationError: If candidate is None or not a string.
        """
        try:
            breakdown = self.explain(candidate)
        except _RECOVERABLE as exc:
            logger.warning("Skipping candidate %r: %s", candidate, exc)
            warnings.warn(
                f"candidate {candidate!r} could not be scored and was skipped: {exc}",
                ComputationWarning,
                stacklevel=2,
            )
            return None
        if breakdown is None:
            return None
        return MatchResult(breakdown.score, breakdown.result)

    def iter_matches(self, candidates: Union[str, Iterable[str]]) -> Iterator[MatchResult]:
        """Lazily yield a MatchResult for each admitted candidate, in input order."""
        for candidate in as_candidates(candidates):
            result = self.match(candidate)
            if result is not None:
                yield result

    def __repr__(self) -> str:
        return f"FuzzyMatcher({self._query!r})"


def iter_fuzzy_match(query: str, candidates: Union[str, Iterable[str]]) -> Iterator[MatchResult]:
    """Incremental form of :func:`fuzzy_match`.

    Candidates are consumed one at a time, so ``candidates`` may be any
    iterable including a generator. A bare string is treated as a single
    candidate.

    Raises:
        ValidationError: If query is not a string (raised immediately) or a
            candidate is not a string (raised when it is reached).
    """
    matcher = FuzzyMatcher(query)
    return matcher.iter_matches(as_candidates(candidates))


def fuzzy_match(query: str, candidates: Union[str, Iterable[str]]) -> List[MatchResult]:
    """Score every candidate against a query.

    Args:
        query: Search string. All whitespace is removed before matching.
            May be empty, in which case every non-empty candidate matches.
        candidates: Strings to score. Each is trimmed before scoring and the
            trimmed form is returned in ``result``. A bare string is treated
            as a single candidate.

    Returns:
        One MatchResult per candidate that passed the quick filter, in
        input order. Candidates that fail the filter are absent, not scored
        as zero.

    Raises:
        ValidationError: If query, candidates or any candidate is None or
            not a string.

    Example:
        >>> fuzzy_match("", [" foo ", ""])
        [MatchResult(score=0, result='foo')]
    """
    results = []
    seen = 0
    matcher = FuzzyMatcher(query)
    for candidate in as_candidates(candidates):
        seen += 1
        result = matcher.match(candidate)
        if result is not None:
            results.append(result)
    logger.debug("Query %r admitted %d of %d candidates", matcher.query, len(results), seen)
    return results


def score(query: str, candidate: str) -> Optional[int]:
    """Score one candidate against a query, or None if it is filtered out.

    Example:
        >>> score("abc", "abc")
        300
    """
    return FuzzyMatcher(query).score(candidate)


def explain(query: str, candidate: str) -> Optional[ScoreBreakdown]:
    """Return the measures behind a candidate's score, or None if it is filtered out."""
    return FuzzyMatcher(query).explain(candidate)


__all__ = [
    "BASE_SCORE",
    "MatchResult",
    "ScoreBreakdown",
    "FuzzyMatcher",
    "combine",
    "fuzzy_match",
    "iter_fuzzy_match",
    "score",
    "explain",
]
