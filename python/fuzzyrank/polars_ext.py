"""Polars Series and DataFrame operations for fuzzyrank.

This module applies the fuzzyrank scorer to Polars data. It is meant for the
common "filter a column as the user types" case: score one query against
every value of a Series or DataFrame column and get the admitted rows back.

Functions in This Module
------------------------
- ``match_series()``: Score a query against a Series, input order preserved
- ``rank_series()``: Same as ``match_series()`` but sorted best first
- ``fuzzy_filter()``: Keep the DataFrame rows whose column matches a query

Example Usage
-------------
>>> import polars as pl
>>> import fuzzyrank as fk
>>>
>>> commands = pl.Series(["Get-ChildItem", "Get-Content", "Set-Content"])
>>> fk.rank_series("gci", commands)
>>>
>>> df = pl.DataFrame({"path": ["src/main.py", "src/util.py", "README.md"]})
>>> fk.fuzzy_filter(df, "path", "smain")

See Also
--------
- ``fuzzyrank.expr``: Polars expression namespace (``pl.col(...).fuzzy``)
- ``fuzzyrank.batch``: The same operations on plain Python lists
"""

from typing import List, Optional

import polars as pl

from fuzzyrank._utils import check_positive_int
from fuzzyrank.exceptions import ValidationError
from fuzzyrank.scoring import FuzzyMatcher, MatchResult

RESULT_SCHEMA = {"score": pl.Int64, "result": pl.Utf8}

# An all-null Series has dtype Null; it holds no values to reject.
STRING_DTYPES = (pl.Utf8, pl.Null)


def _require_string_dtype(series: "pl.Series", name: str) -> None:
    """Raise ValidationError unless the Series holds strings."""
    if series.dtype not in STRING_DTYPES:
        raise ValidationError(f"{name} must have a string dtype, got {series.dtype}")


def _match_values(matcher: FuzzyMatcher, values: list) -> List[Optional[MatchResult]]:
    """Match each value, keeping positions. Nulls never match."""
    return [None if value is None else matcher.match(value) for value in values]


def match_series(query: str, series: "pl.Series") -> "pl.DataFrame":
    """
    Score a query against every value of a Series.

    Null values and values rejected by the quick filter are left out.
    Rows are in the order of the input Series.

    Args:
        query: Query string (whitespace is removed before matching)
        series: Series of candidate strings

    Returns:
        DataFrame with columns: score (Int64), result (Utf8)

    Raises:
        ValidationError: If the Series does not hold strings

    Example:
        >>> match_series("crd", pl.Series(["Card", None, "zzz"]))
        shape: (1, 2)
        ┌───────┬────────┐
        │ score ┆ result │
        │ ---   ┆ ---    │
        │ i64   ┆ str    │
        ╞═══════╪════════╡
        │ 198   ┆ Card   │
        └───────┴────────┘

    See Also:
        rank_series: Sorted variant
        fuzzyrank.fuzzy_match: List-based equivalent
    """
    _require_string_dtype(series, "series")
    matcher = FuzzyMatcher(query)
    matches = [m for m in _match_values(matcher, series.to_list()) if m is not None]
    return pl.DataFrame(
        {
            "score": [m.score for m in matches],
            "result": [m.result for m in matches],
        },
        schema=RESULT_SCHEMA,
    )


def rank_series(
    query: str,
    series: "pl.Series",
    limit: Optional[int] = None,
) -> "pl.DataFrame":
    """
    Score a query against a Series and sort the matches best first.

    Ties on score are broken by result, ascending.

    Args:
        query: Query string
        series: Series of candidate strings
        limit: Maximum number of rows to return (default: all)

    Returns:
        DataFrame with columns: score (Int64), result (Utf8)
    """
    limit = check_positive_int(limit, "limit")
    ranked = match_series(query, series).sort(["score", "result"], descending=[True, False])
    return ranked if limit is None else ranked.head(limit)


def fuzzy_filter(
    df: "pl.DataFrame",
    column: str,
    query: str,
    score_column: str = "score",
) -> "pl.DataFrame":
    """
    Keep the rows of a DataFrame whose column matches a query.

    Adds a score column and sorts the surviving rows best first. Rows with
    equal scores keep their original relative order.

    Args:
        df: Input DataFrame
        column: Name of the string column to match against
        query: Query string
        score_column: Name of the added score column (default: "score")

    Returns:
        DataFrame with all input columns plus the score column

    Raises:
        ValidationError: If column is missing or not a string column, or
            score_column already exists

    Example:
        >>> df = pl.DataFrame({"name": ["Card", "zzz", "cord"], "id": [1, 2, 3]})
        >>> fuzzy_filter(df, "name", "crd")["id"].to_list()
        [1, 3]
    """
    if column not in df.columns:
        raise ValidationError(f"Column '{column}' not found. Available: {df.columns}")
    if score_column in df.columns:
        raise ValidationError(f"Column '{score_column}' already exists")

    values = df.get_column(column)
    _require_string_dtype(values, f"Column '{column}'")

    matcher = FuzzyMatcher(query)
    scores = [
        None if m is None else m.score
        for m in _match_values(matcher, values.to_list())
    ]
    return (
        df.with_columns(pl.Series(score_column, scores, dtype=pl.Int64))
        .filter(pl.col(score_column).is_not_null())
        .sort(score_column, descending=True, maintain_order=True)
    )


__all__ = ["match_series", "rank_series", "fuzzy_filter"]
