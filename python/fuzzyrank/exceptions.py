"""Exceptions and warnings raised by fuzzyrank."""


class FuzzyRankError(Exception):
    """Base exception for all fuzzyrank errors."""


class ValidationError(FuzzyRankError):
    """Raised when input validation fails (None or non-string input, out of range values)."""


class ComputationWarning(RuntimeWarning):
    """Emitted when a single candidate could not be scored and was skipped.

    The remaining candidates are still scored; records that were already
    produced are unaffected.
    """


__all__ = ["FuzzyRankError", "ValidationError", "ComputationWarning"]
