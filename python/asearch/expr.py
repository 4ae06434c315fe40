"""Polars expression namespace for approximate pattern matching.

This module registers an `.asearch` namespace on Polars expressions so a
pattern can be matched against every row of a string column inside normal
Polars expression contexts. The pattern is compiled once per expression.

Null cells never match.

Example:
    >>> import polars as pl
    >>> import asearch  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"word": ["abcde", "abXde", "zzz"]})
    >>> df.with_columns(hit=pl.col("word").asearch.is_match("abcde", ambiguity=1))
"""

from typing import Union

import polars as pl

from asearch.enums import MatchMode
from asearch.matcher import Asearch


@pl.api.register_expr_namespace("asearch")
class AsearchExprNamespace:
    """
    Approximate matching namespace for Polars expressions.

    Access via `.asearch` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def is_match(
        self,
        pattern: str,
        ambiguity: int = 0,
        mode: Union[str, int, MatchMode] = MatchMode.EXACT,
    ) -> pl.Expr:
        """
        Check each row against a pattern.

        Args:
            pattern: Pattern of at most 31 characters
            ambiguity: Allowed number of edits
            mode: Match mode ("exact", "include" or "wildcard_space")

        Returns:
            Boolean expression; null cells become False

        Example:
            >>> df.filter(pl.col("title").asearch.is_match("ficton", 1, mode="include"))
        """
        matcher = Asearch(pattern, mode)
        # fail fast instead of inside the first row
        matcher.match("", ambiguity)
        return self._expr.map_elements(
            lambda s: matcher.match(str(s), ambiguity),
            return_dtype=pl.Boolean,
        ).fill_null(False)

    def distance(
        self,
        pattern: str,
        max_ambiguity: int = 3,
        mode: Union[str, int, MatchMode] = MatchMode.EXACT,
    ) -> pl.Expr:
        """
        Smallest number of edits with which each row matches.

        Returns:
            Int64 expression; null where nothing up to max_ambiguity matches
            and for null cells
        """
        matcher = Asearch(pattern, mode)
        matcher.distance("", max_ambiguity)
        return self._expr.map_elements(
            lambda s: matcher.distance(str(s), max_ambiguity),
            return_dtype=pl.Int64,
        )


__all__ = ["AsearchExprNamespace"]
