"""Polars Series and DataFrame helpers for asearch.

Functions in This Module
------------------------
- ``match_series()``: Rows of a Series that match a pattern, with distances
- ``filter_dataframe()``: Rows of a DataFrame whose column matches a pattern

For per-row operations inside larger expressions use the ``.asearch``
expression namespace from ``asearch.expr`` instead.

Example Usage
-------------
>>> import polars as pl
>>> import asearch as asr
>>>
>>> words = pl.Series(["abcde", "abXde", "abXXde", None])
>>> asr.match_series(words, "abcde", ambiguity=1)
"""

from typing import Union

import polars as pl

from asearch.enums import MatchMode
from asearch.matcher import Asearch


def match_series(
    series: "pl.Series",
    pattern: str,
    ambiguity: int = 0,
    mode: Union[str, int, MatchMode] = MatchMode.EXACT,
) -> "pl.DataFrame":
    """
    Find the values of a Series that match a pattern.

    Args:
        series: Series of strings
        pattern: Pattern of at most 31 characters
        ambiguity: Maximum number of edits
        mode: Match mode (MatchMode, int or name)

    Returns:
        DataFrame with columns: idx, value, distance (smallest edit count),
        one row per matching value, in Series order

    Example:
        >>> result = match_series(pl.Series(["abcde", "abde", "xyz"]), "abcde", 1)
        >>> result["distance"].to_list()
        [0, 1]

    See Also:
        filter_dataframe: Keep matching rows of a DataFrame
    """
    matcher = Asearch(pattern, mode)
    rows = []
    for idx, value in enumerate(series.to_list()):
        if value is None:
            continue
        dist = matcher.distance(str(value), ambiguity)
        if dist is not None:
            rows.append({"idx": idx, "value": str(value), "distance": dist})

    return pl.DataFrame(
        rows,
        schema={"idx": pl.Int64, "value": pl.Utf8, "distance": pl.Int64},
    )


def filter_dataframe(
    df: "pl.DataFrame",
    column: str,
    pattern: str,
    ambiguity: int = 0,
    mode: Union[str, int, MatchMode] = MatchMode.EXACT,
) -> "pl.DataFrame":
    """
    Keep the rows of df whose ``column`` matches the pattern.

    Args:
        df: Polars DataFrame
        column: Name of a string column
        pattern: Pattern of at most 31 characters
        ambiguity: Maximum number of edits
        mode: Match mode (MatchMode, int or name)

    Returns:
        Filtered DataFrame with the original columns

    Example:
        >>> df = pl.DataFrame({"title": ["Pulp Fiction", "Heat"]})
        >>> filter_dataframe(df, "title", "ficton", 1, mode="include")["title"].to_list()
        ['Pulp Fiction']
    """
    if column not in df.columns:
        raise ValueError(f"Column '{column}' not found in DataFrame")
    matcher = Asearch(pattern, mode)
    mask = [
        value is not None and matcher.match(str(value), ambiguity)
        for value in df[column].to_list()
    ]
    return df.filter(pl.Series(mask, dtype=pl.Boolean))


__all__ = ["match_series", "filter_dataframe"]
