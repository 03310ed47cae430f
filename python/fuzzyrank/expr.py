"""Polars expression namespace for fuzzy ranking.

This module registers a `.fuzzy` namespace on Polars expressions so a query
can be scored against a column inside any expression context.

Example:
    >>> import polars as pl
    >>> import fuzzyrank  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["Card", "Cartoon", "zzz"]})
    >>> df.with_columns(score=pl.col("name").fuzzy.score("crd"))
"""

import polars as pl

from fuzzyrank.scoring import FuzzyMatcher


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy ranking namespace for Polars expressions.

    Access via `.fuzzy` on any string expression.

    Values are not coerced: a non-string value raises ValidationError when
    the expression is evaluated.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def score(self, query: str) -> pl.Expr:
        """
        Score each value of this column against a query.

        Args:
            query: Query string (whitespace is removed before matching)

        Returns:
            Int64 expression; null where the value is null or rejected by
            the quick filter

        Example:
            >>> df.with_columns(score=pl.col("name").fuzzy.score("crd"))
        """
        matcher = FuzzyMatcher(query)

        def _score(value):
            m = matcher.match(value)
            return None if m is None else m.score

        return self._expr.map_elements(_score, return_dtype=pl.Int64)

    def is_match(self, query: str) -> pl.Expr:
        """
        Check whether each value of this column passes the quick filter.

        Args:
            query: Query string

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_match("crd"))
        """
        matcher = FuzzyMatcher(query)
        return self._expr.map_elements(
            matcher.admits,
            return_dtype=pl.Boolean,
        )
