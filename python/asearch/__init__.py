"""
asearch - Approximate pattern matching with a bit-parallel automaton

Compile a short pattern (up to 31 characters) once, then test any number of
query strings against it with a bounded number of typos (insertions,
deletions or substitutions). Designed for typo-tolerant search and
highlighting over short strings.

Example usage:
    >>> import asearch as asr

    # Whole-string matching, case-insensitive for ASCII letters
    >>> a = asr.Asearch("abcde")
    >>> a.match("aBCDe")
    True
    >>> a.match("abXXde", 2)
    True

    # Substring matching
    >>> asr.Asearch("猫である", asr.MatchMode.INCLUDE).match("吾輩は猫である。")
    True

    # Spaces as wildcards
    >>> asr.Asearch("ab de", "wildcard_space").match("abXXXXXXXde")
    True

    # Polars expression namespace
    >>> import polars as pl
    >>> df = pl.DataFrame({"word": ["abcde", "abde", "xyz"]})
    >>> df.filter(pl.col("word").asearch.is_match("abcde", ambiguity=1))
"""

from importlib.metadata import version as _get_version

# Register the .asearch expression namespace
import asearch.expr  # noqa: F401
from asearch.compiler import MAXLENGTH, CompiledPattern, compile_pattern
from asearch.engine import match_distance
from asearch.enums import MatchMode
from asearch.exceptions import (
    AsearchError,
    InvalidAmbiguity,
    PatternTooLong,
    ValidationError,
)
from asearch.matcher import Asearch, is_match
from asearch.polars_ext import filter_dataframe, match_series
from asearch.trace import (
    LoggingTracer,
    NullTracer,
    RecordingTracer,
    Tracer,
    format_states,
    tracer_from_env,
)

__version__ = _get_version("asearch")
__all__ = [
    # Version
    "__version__",
    # Exceptions
    "AsearchError",
    "ValidationError",
    "PatternTooLong",
    "InvalidAmbiguity",
    # Enums and constants
    "MatchMode",
    "MAXLENGTH",
    # Matcher
    "Asearch",
    "is_match",
    "CompiledPattern",
    "compile_pattern",
    "match_distance",
    # Tracing
    "Tracer",
    "NullTracer",
    "RecordingTracer",
    "LoggingTracer",
    "format_states",
    "tracer_from_env",
    # Polars integration
    "match_series",
    "filter_dataframe",
]
