"""String similarity measures used by the scorer.

All functions are stateless. ``levenshtein`` and ``longest_common_substring``
compare case-insensitively by default; ``common_prefix`` is always
case-sensitive.

Example usage:
    >>> from fuzzyrank import metrics
    >>> metrics.levenshtein("kitten", "sitting")
    3
    >>> metrics.longest_common_substring("abcdef", "zbcdf")
    'bcd'
    >>> metrics.common_prefix("abc", "abd")
    'ab'
"""

from typing import Optional

from fuzzyrank._utils import check_metric_args, fold
from fuzzyrank.exceptions import ValidationError


def levenshtein(s1: str, s2: str, ignore_case: bool = True) -> int:
    """Compute the Levenshtein edit distance between two strings.

    Counts the minimum number of single-character insertions, deletions
    and substitutions needed to turn ``s1`` into ``s2``.

    Args:
        s1: First string.
        s2: Second string.
        ignore_case: Compare characters case-insensitively (default: True).

    Returns:
        The edit distance. ``levenshtein("", s) == len(s)``.

    Raises:
        TypeError: If either argument is not a string.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("Card", "crd")
        1
    """
    check_metric_args(s1, s2)
    a = fold(s1, ignore_case)
    b = fold(s2, ignore_case)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current[j] = min(
                previous[j] + 1,  # deletion
                current[j - 1] + 1,  # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous = current
    return previous[-1]


def levenshtein_similarity(s1: str, s2: str, ignore_case: bool = True) -> float:
    """Normalized Levenshtein similarity in the range 0.0 to 1.0.

    Computed as ``1 - distance / max(len(s1), len(s2))``. Two empty strings
    are identical and score 1.0.

    Example:
        >>> levenshtein_similarity("hello", "hallo")
        0.8
    """
    check_metric_args(s1, s2)
    longest = max(len(s1), len(s2))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(s1, s2, ignore_case=ignore_case) / longest


def longest_common_substring(s1: str, s2: str, ignore_case: bool = True) -> str:
    """Find the longest contiguous run of characters shared by two strings.

    Uses the classic dynamic programming table where each cell holds the
    length of the common suffix ending at ``s1[i]`` and ``s2[j]``. A new
    best is only recorded when a cell strictly exceeds the current maximum,
    so among several runs of equal length the first one reached while
    scanning ``s1`` left to right wins.

    Args:
        s1: String the result is taken from (the candidate when scoring).
        s2: String to compare against (the query when scoring).
        ignore_case: Compare characters case-insensitively (default: True).

    Returns:
        The run as it appears in ``s1``, or ``""`` if the strings share no
        character.

    Example:
        >>> longest_common_substring("abcdef", "zbcdf")
        'bcd'
        >>> longest_common_substring("Card", "crd")
        'rd'
    """
    check_metric_args(s1, s2)
    a = fold(s1, ignore_case)
    b = fold(s2, ignore_case)

    best_length = 0
    best_start = 0
    previous = [0] * (len(b) + 1)
    for i, ca in enumerate(a):
        current = [0] * (len(b) + 1)
        for j, cb in enumerate(b):
            if ca != cb:
                continue
            run = previous[j] + 1
            current[j + 1] = run
            if run > best_length:
                # Strictly longer only: of equal runs, the first in row-major order wins.
                best_length = run
                best_start = i - run + 1
        previous = current
    return s1[best_start:best_start + best_length]


def longest_common_substring_length(s1: str, s2: str, ignore_case: bool = True) -> int:
    """Length of :func:`longest_common_substring`."""
    return len(longest_common_substring(s1, s2, ignore_case=ignore_case))


def common_prefix(s1: str, s2: str, max_length: Optional[int] = None) -> str:
    """Return the shared leading characters of two strings.

    The comparison is case-sensitive and stops at the first mismatch or
    after ``max_length`` characters.

    Args:
        s1: First string.
        s2: Second string.
        max_length: Upper bound on the prefix length. Defaults to the length
            of the shorter string, and is clamped to it when larger.

    Raises:
        TypeError: If either string argument is not a string.
        ValidationError: If max_length is negative.

    Example:
        >>> common_prefix("abc", "abd")
        'ab'
        >>> common_prefix("xyz", "abc")
        ''
    """
    check_metric_args(s1, s2)
    bound = min(len(s1), len(s2))
    if max_length is not None:
        if max_length < 0:
            raise ValidationError(f"max_length must be >= 0, got {max_length}")
        bound = min(bound, max_length)

    length = 0
    while length < bound and s1[length] == s2[length]:
        length += 1
    return s1[:length]


__all__ = [
    "levenshtein",
    "levenshtein_similarity",
    "longest_common_substring",
    "longest_common_substring_length",
    "common_prefix",
]
