"""Ordered-subsequence matching: the quick filter and the positional span.

Both encode "the query characters appear in the candidate in order, with
anything in between". The quick filter answers yes/no case-insensitively;
the span matcher locates the leftmost lazy match case-sensitively. Both run
the same single forward scan, so neither is worse than
O(len(query) + len(candidate)).
"""

from typing import NamedTuple, Sequence

from fuzzyrank._utils import check_metric_args, fold


class Span(NamedTuple):
    """Leftmost lazy match of the query inside a candidate."""

    length: int
    index: int


NO_SPAN = Span(0, 0)


def _scan_end(needle: Sequence[str], haystack: Sequence[str], start: int = 0) -> int:
    """Return the index just past the earliest in-order match, or -1.

    Each needle character is taken at its earliest position after the
    previous one. An empty needle matches at ``start``.
    """
    if not needle:
        return start
    pos = 0
    for i in range(start, len(haystack)):
        if haystack[i] == needle[pos]:
            pos += 1
            if pos == len(needle):
                return i + 1
    return -1


def is_subsequence(query: str, candidate: str, ignore_case: bool = True) -> bool:
    """Check whether the query characters occur in the candidate in order.

    Equivalent to the wildcard pattern ``*q1*q2*...*qk*``. Runs in
    O(len(query) + len(candidate)).

    Example:
        >>> is_subsequence("crd", "Card")
        True
        >>> is_subsequence("crd", "Cartoon")
        False
    """
    check_metric_args(query, candidate)
    return _scan_end(fold(query, ignore_case), fold(candidate, ignore_case)) >= 0


class QuickFilter:
    """Cheap admission test applied before any candidate is scored.

    Admits a candidate iff it is non-empty and contains the query as an
    ordered, case-insensitive subsequence. An empty query admits every
    non-empty candidate.

    Example:
        >>> admit = QuickFilter("crd")
        >>> admit("Card"), admit("zzz")
        (True, False)
    """

    __slots__ = ("_needle",)

    def __init__(self, query: str):
        self._needle = tuple(fold(query))

    def __call__(self, candidate: str) -> bool:
        if not candidate:
            return False
        return _scan_end(self._needle, fold(candidate)) >= 0

    def __repr__(self) -> str:
        return f"QuickFilter({''.join(self._needle)!r})"


def find_span(query: str, candidate: str) -> Span:
    """Locate the leftmost lazy match without validating arguments.

    A match exists iff the query is a case-sensitive subsequence of the
    candidate. When it does, the first occurrence of the query's first
    character is the leftmost start, since any later start only sees a
    suffix of what the first one sees.
    """
    if not query:
        return NO_SPAN
    start = candidate.find(query[0])
    if start < 0:
        return NO_SPAN
    end = _scan_end(query, candidate, start)
    if end < 0:
        return NO_SPAN
    return Span(end - start, start)


def match_span(query: str, candidate: str) -> Span:
    """Find the leftmost lazy match of the query's characters in the candidate.

    Same result as searching ``q1.*?q2.*?...qk`` with any character
    (newlines included) allowed in the gaps, and with regex metacharacters
    taken literally. The search is case-sensitive. An empty query, or a
    candidate that does not contain the query characters in order with
    matching case, reports ``Span(0, 0)``.

    Example:
        >>> match_span("ac", "xabc")
        Span(length=3, index=1)
        >>> match_span("crd", "Card")
        Span(length=0, index=0)
    """
    check_metric_args(query, candidate)
    return find_span(query, candidate)


__all__ = [
    "Span",
    "NO_SPAN",
    "is_subsequence",
    "QuickFilter",
    "find_span",
    "match_span",
]
