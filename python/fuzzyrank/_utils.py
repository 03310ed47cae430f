"""Internal utilities for fuzzyrank."""

from collections import abc
from typing import Any, Iterable, List, Optional

from fuzzyrank.exceptions import ValidationError


def require_str(value: Any, name: str) -> str:
    """Return value unchanged if it is a string, otherwise raise ValidationError.

    Args:
        value: The value to check.
        name: Argument name used in the error message.

    Raises:
        ValidationError: If value is None or not a string.

    Example:
        >>> require_str("crd", "query")
        'crd'
    """
    if value is None:
        raise ValidationError(f"{name} must be a string, got None")
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be a string, got {type(value).__name__}")
    return value


def as_candidates(candidates: Any) -> Iterable[str]:
    """Normalize the candidates argument of the matching functions.

    A bare string is a single candidate rather than a sequence of
    characters. Individual items are validated later, as they are scored.

    Raises:
        ValidationError: If candidates is None or not iterable.
    """
    if candidates is None:
        raise ValidationError("candidates must be a string or an iterable of strings, got None")
    if isinstance(candidates, str):
        return (candidates,)
    if not isinstance(candidates, abc.Iterable):
        raise ValidationError(
            "candidates must be a string or an iterable of strings, "
            f"got {type(candidates).__name__}"
        )
    return candidates


def check_metric_args(s1: Any, s2: Any) -> None:
    """Raise TypeError unless both metric arguments are strings."""
    for arg in (s1, s2):
        if not isinstance(arg, str):
            raise TypeError(f"expected str, got {type(arg).__name__}")


def strip_whitespace(query: str) -> str:
    """Remove every whitespace character from a query.

    Example:
        >>> strip_whitespace(" c r\\td ")
        'crd'
    """
    return "".join(query.split())


def fold(text: str, ignore_case: bool = True) -> List[str]:
    """Split text into per-character comparison keys.

    Each character is lowercased on its own so that positions in the
    returned list line up with positions in ``text`` even for characters
    whose lowercase form is longer than one code point.
    """
    if ignore_case:
        return [c.lower() for c in text]
    return list(text)


def check_positive_int(value: Optional[int], name: str) -> Optional[int]:
    """Validate an optional positive integer keyword argument."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise ValidationError(f"{name} must be >= 1, got {value}")
    return value


__all__ = [
    "as_candidates",
    "require_str",
    "check_metric_args",
    "strip_whitespace",
    "fold",
    "check_positive_int",
]
