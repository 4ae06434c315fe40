"""Diagnostic tracing for the match automaton.

The engine never reads global state to decide whether to trace. A tracer is
attached explicitly, either to an :class:`~asearch.Asearch` instance or to a
single ``match`` call, and is invoked once right after the state vector is
initialised (``char is None``) and once after every query character.

Example:
    >>> import logging
    >>> from asearch import Asearch, LoggingTracer
    >>> logging.basicConfig(level=logging.DEBUG)
    >>> Asearch("abcde", tracer=LoggingTracer()).match("abXde", 1)
    True
"""

import logging
import os
import unicodedata
from typing import List, Mapping, Optional, Protocol, Sequence, Tuple

from asearch.compiler import GUARD_BIT, WILDCARD, CompiledPattern
from asearch.enums import MatchMode

logger = logging.getLogger(__name__)

VERBOSE_ENV = "ASEARCH_VERBOSE"
_TRUTHY = ("1", "true", "yes")


class Tracer(Protocol):
    """Callable receiving the automaton state after each step.

    Any tracer other than ``None`` is called, whatever its truth value.
    """

    def __call__(
        self, compiled: CompiledPattern, char: Optional[str], states: Sequence[int]
    ) -> None: ...


class NullTracer:
    """Tracer that does nothing. Used when no tracer is attached."""

    def __call__(self, compiled, char, states):
        return None


class RecordingTracer:
    """Tracer that keeps a ``(char, states)`` snapshot of every step."""

    def __init__(self):
        self.steps: List[Tuple[Optional[str], Tuple[int, ...]]] = []

    def __call__(self, compiled, char, states):
        self.steps.append((char, tuple(states)))

    def clear(self) -> None:
        self.steps.clear()


class LoggingTracer:
    """
    Tracer that renders the state vector as a grid and logs it.

    One line per edit level, highest level first; one column per automaton
    node, labelled with the pattern character that node consumes next
    (``$`` for the accept node).

    Args:
        log: Logger to write to (defaults to the ``asearch.trace`` logger)
        level: Logging level of the emitted records
    """

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self.log = log if log is not None else logger
        self.level = level

    def __call__(self, compiled, char, states):
        if not self.log.isEnabledFor(self.level):
            return
        header = "<init>" if char is None else repr(char)
        self.log.log(self.level, "%s\n%s", header, format_states(compiled, states))


def _node_labels(compiled: CompiledPattern) -> List[str]:
    if compiled.mode is MatchMode.WILDCARD_SPACE:
        labels = [c for c in compiled.pattern if c != WILDCARD]
    else:
        labels = list(compiled.pattern)
    return labels + ["$"]


def _cell(label: str) -> str:
    # wide characters already take two columns
    if len(label) == 1 and unicodedata.east_asian_width(label) in ("W", "F"):
        return label
    return label.ljust(2)


def format_states(compiled: CompiledPattern, states: Sequence[int]) -> str:
    """
    Render a state vector as a text grid.

    Args:
        compiled: The pattern the states belong to
        states: State vector, index 0 being the zero-edit row

    Returns:
        Multi-line string, one row per edit level (highest first)

    Example:
        >>> from asearch.compiler import compile_pattern
        >>> print(format_states(compile_pattern("ab"), [1 << 31, 1 << 30]))
        ambi  a  b  $
           1  0  1  0
           0  1  0  0
    """
    labels = _node_labels(compiled)
    lines = ["ambi  " + " ".join(_cell(label) for label in labels).rstrip()]
    for level in range(len(states) - 1, -1, -1):
        state = states[level]
        bits = ["1" if state & (GUARD_BIT >> node) else "0" for node in range(len(labels))]
        lines.append(f"{level:>4}  " + "  ".join(bits))
    return "\n".join(lines)


def tracer_from_env(environ: Optional[Mapping[str, str]] = None) -> Tracer:
    """Return a LoggingTracer if ASEARCH_VERBOSE is enabled, else a NullTracer.

    This is the only place the environment is consulted; the result has to be
    passed to :class:`~asearch.Asearch` or ``match`` explicitly.

    Args:
        environ: Mapping to read instead of ``os.environ``
    """
    env = os.environ if environ is None else environ
    if env.get(VERBOSE_ENV, "").lower() in _TRUTHY:
        return LoggingTracer()
    return NullTracer()


__all__ = [
    "Tracer",
    "NullTracer",
    "RecordingTracer",
    "LoggingTracer",
    "format_states",
    "tracer_from_env",
    "VERBOSE_ENV",
]
