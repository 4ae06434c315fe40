"""Tests for Polars integration."""

import polars as pl
import pytest

import asearch  # noqa: F401  (registers the .asearch namespace)
from asearch import InvalidAmbiguity, PatternTooLong
from asearch.polars_ext import filter_dataframe, match_series


class TestExprNamespace:
    """Tests for the .asearch expression namespace."""

    def test_is_match(self):
        df = pl.DataFrame({"word": ["abcde", "abXde", "zzz"]})
        result = df.with_columns(hit=pl.col("word").asearch.is_match("abcde", ambiguity=1))
        assert result["hit"].to_list() == [True, True, False]

    def test_is_match_null_is_false(self):
        df = pl.DataFrame({"word": ["abcde", None, "abde"]})
        result = df.select(pl.col("word").asearch.is_match("abcde", 1))
        assert result["word"].to_list() == [True, False, True]

    def test_is_match_include_mode(self):
        df = pl.DataFrame({"title": ["Pulp Fiction", "The Godfather", "Heat"]})
        result = df.filter(pl.col("title").asearch.is_match("ficton", 1, mode="include"))
        assert result["title"].to_list() == ["Pulp Fiction"]

    def test_distance(self):
        df = pl.DataFrame({"word": ["abcde", "abde", "xyz"]})
        result = df.select(pl.col("word").asearch.distance("abcde", max_ambiguity=2))
        assert result["word"].to_list() == [0, 1, None]

    def test_invalid_pattern_fails_eagerly(self):
        with pytest.raises(PatternTooLong):
            pl.col("word").asearch.is_match("x" * 32)

    def test_invalid_ambiguity_fails_eagerly(self):
        with pytest.raises(InvalidAmbiguity):
            pl.col("word").asearch.is_match("abc", -1)


class TestMatchSeries:
    """Tests for match_series function."""

    def test_basic(self):
        series = pl.Series(["abcde", "abde", "abXXde", None, "xyz"])
        result = match_series(series, "abcde", ambiguity=1)
        assert result.columns == ["idx", "value", "distance"]
        assert result["idx"].to_list() == [0, 1]
        assert result["value"].to_list() == ["abcde", "abde"]
        assert result["distance"].to_list() == [0, 1]

    def test_empty_series(self):
        result = match_series(pl.Series([], dtype=pl.Utf8), "abc")
        assert len(result) == 0
        assert result.columns == ["idx", "value", "distance"]

    def test_no_matches(self):
        result = match_series(pl.Series(["xyz", "uvw"]), "abc")
        assert len(result) == 0

    def test_wildcard_mode(self):
        series = pl.Series(["abXXXde", "abde", "abd"])
        result = match_series(series, "ab de", mode="wildcard_space")
        assert result["value"].to_list() == ["abXXXde", "abde"]


class TestFilterDataFrame:
    """Tests for filter_dataframe function."""

    def test_keeps_other_columns(self):
        df = pl.DataFrame({"id": [1, 2, 3], "name": ["John", "Jhon", "Jane"]})
        result = filter_dataframe(df, "name", "john", ambiguity=2)
        assert result.columns == ["id", "name"]
        assert result["id"].to_list() == [1, 2]

    def test_nulls_dropped(self):
        df = pl.DataFrame({"name": ["John", None]})
        result = filter_dataframe(df, "name", "john")
        assert result["name"].to_list() == ["John"]

    def test_missing_column(self):
        df = pl.DataFrame({"name": ["John"]})
        with pytest.raises(ValueError, match="not found"):
            filter_dataframe(df, "nope", "john")
