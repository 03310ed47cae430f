"""
fuzzyrank - Fuzzy ranking of candidate strings against a query

Scores candidates the way interactive pickers filter file names, command
names or list items as a user types: candidates that do not contain the
query characters in order are dropped, the rest get an integer score
(higher is better) built from edit distance, longest common substring,
match position and common prefix.

Example usage:
    >>> import fuzzyrank as fk

    # Score candidates, input order preserved
    >>> fk.fuzzy_match("crd", ["Card", "Cartoon", "zzz"])
    [MatchResult(score=198, result='Card')]

    # Best matches first
    >>> [m.result for m in fk.best_matches(["Cord", "Card", "crowd"], "crd")]
    ['Card', 'Cord', 'crowd']

    # Reuse a prepared query for one-at-a-time scoring
    >>> matcher = fk.FuzzyMatcher("crd")
    >>> matcher.score("Card")
    198
"""

from importlib.metadata import version as _get_version

# Register the .fuzzy expression namespace
import fuzzyrank.expr  # noqa: F401
from fuzzyrank import polars
from fuzzyrank.batch import best_matches, sort_results
from fuzzyrank.exceptions import ComputationWarning, FuzzyRankError, ValidationError
from fuzzyrank.metrics import (
    common_prefix,
    levenshtein,
    levenshtein_similarity,
    longest_common_substring,
    longest_common_substring_length,
)
from fuzzyrank.patterns import QuickFilter, Span, is_subsequence, match_span
from fuzzyrank.polars_ext import fuzzy_filter, match_series, rank_series
from fuzzyrank.scoring import (
    FuzzyMatcher,
    MatchResult,
    ScoreBreakdown,
    explain,
    fuzzy_match,
    iter_fuzzy_match,
    score,
)

__version__ = _get_version("fuzzyrank")
__all__ = [
    # Version
    "__version__",
    # Exceptions and warnings
    "FuzzyRankError",
    "ValidationError",
    "ComputationWarning",
    # Result types
    "MatchResult",
    "ScoreBreakdown",
    "Span",
    # Scoring
    "FuzzyMatcher",
    "fuzzy_match",
    "iter_fuzzy_match",
    "score",
    "explain",
    # Measures
    "levenshtein",
    "levenshtein_similarity",
    "longest_common_substring",
    "longest_common_substring_length",
    "common_prefix",
    "match_span",
    # Quick filter
    "QuickFilter",
    "is_subsequence",
    # Batch helpers
    "best_matches",
    "sort_results",
    # Polars integration
    "match_series",
    "rank_series",
    "fuzzy_filter",
    "polars",
]


# Convenience aliases
edit_distance = levenshtein
