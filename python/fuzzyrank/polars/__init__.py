"""
Polars integration for fuzzyrank.

Levels:
    1. **Expression Namespace** (`.fuzzy`) - Per-row scores
       Example: `df.with_columns(score=pl.col("name").fuzzy.score("crd"))`

    2. **Series / DataFrame Functions** - Scored and filtered frames
       Example: `fuzzy_filter(df, "name", "crd")`

Examples:
    >>> import polars as pl
    >>> import fuzzyrank.polars as fkp  # or: from fuzzyrank import polars as fkp

    >>> df = pl.DataFrame({"name": ["Card", "Cartoon", "zzz"]})
    >>> df.with_columns(score=pl.col("name").fuzzy.score("crd"))
    >>> fkp.rank_series("crd", df["name"])
"""

# Expression namespace is registered on import
import fuzzyrank.expr as _expr  # noqa: F401
from fuzzyrank.polars_ext import (
    fuzzy_filter,
    match_series,
    rank_series,
)

__all__ = [
    "match_series",
    "rank_series",
    "fuzzy_filter",
]
