"""Bit-parallel simulation of the approximate-match automaton.

Row ``d`` of the state vector holds every automaton state reachable from the
current query prefix with at most ``d`` edits. For each query character the
rows are updated with the Wu-Manber recurrence::

    R[d]' = (R[d] & loop) | ((R[d] & mask) >> 1) | (R[d-1] >> 1) | R[d-1]
    R[0]' = ((R[0] & mask) >> 1) | (R[0] & loop)
    R[d]' |= R[d-1]' >> 1

which in order covers: self loops, exact character match, substitution,
insertion of a query character, and (last line) deletion of a pattern
character. A query matches with ``d`` edits when row ``d`` contains the
accept state once the query is exhausted.

All functions here are pure; state vectors never outlive a call.
"""

from typing import List, Optional, Sequence

from asearch._utils import require_str, validate_ambiguity
from asearch.compiler import CompiledPattern
from asearch.trace import Tracer


def initial_states(compiled: CompiledPattern, ambiguity: int) -> List[int]:
    """State vector before any query character is read.

    Row ``d`` gains the initial state shifted ``d`` nodes in (``d`` pattern
    characters deleted) on top of everything row ``d - 1`` holds, so each
    row is a superset of the rows below it.
    """
    states = [compiled.init_state]
    for d in range(1, ambiguity + 1):
        states.append(states[d - 1] | (compiled.init_state >> d))
    return states


def step(compiled: CompiledPattern, states: Sequence[int], char: str) -> List[int]:
    """Advance a state vector by one query character, returning a new vector."""
    mask = compiled.mask_for(char)
    loop = compiled.loop_mask
    prev = list(states)
    out = list(states)

    for d in range(len(prev) - 1, 0, -1):
        out[d] = (
            (prev[d] & loop)
            | ((prev[d] & mask) >> 1)
            | (prev[d - 1] >> 1)
            | prev[d - 1]
        )
    out[0] = ((prev[0] & mask) >> 1) | (prev[0] & loop)

    # epsilon moves see this character's lower rows
    for d in range(1, len(out)):
        out[d] |= out[d - 1] >> 1
    return out


def row_limit(compiled: CompiledPattern, query: str, ambiguity: int) -> int:
    """Highest edit level worth simulating for this query.

    Deleting every pattern character and inserting every query character
    always reaches the accept state, so from ``len(pattern) + len(query)``
    edits upwards every row accepts. Rows are supersets of the rows below
    them, so capping the budget there leaves every answer unchanged.
    """
    return min(ambiguity, compiled.length + len(query))


def run(
    compiled: CompiledPattern,
    query: str,
    ambiguity: int,
    tracer: Optional[Tracer] = None,
) -> List[int]:
    """
    Feed a whole query through the automaton.

    Args:
        compiled: Compiled pattern
        query: Query string, consumed one scalar value at a time
        ambiguity: Maximum number of edits tracked
        tracer: Optional callable notified after initialisation and after
            every character

    Returns:
        Final state vector with ``row_limit(compiled, query, ambiguity) + 1``
        rows
    """
    require_str(query, "query")
    validate_ambiguity(ambiguity)

    states = initial_states(compiled, row_limit(compiled, query, ambiguity))
    if tracer is not None:
        tracer(compiled, None, tuple(states))
    for char in query:
        states = step(compiled, states, char)
        if tracer is not None:
            tracer(compiled, char, tuple(states))
    return states


def match(
    compiled: CompiledPattern,
    query: str,
    ambiguity: int = 0,
    tracer: Optional[Tracer] = None,
) -> bool:
    """Return True if query matches the pattern within ``ambiguity`` edits.

    Raises:
        InvalidAmbiguity: If ambiguity is negative or not an int
        TypeError: If query is not a string
    """
    states = run(compiled, query, ambiguity, tracer)
    return bool(states[-1] & compiled.accept_mask)


def match_distance(
    compiled: CompiledPattern,
    query: str,
    max_ambiguity: int,
    tracer: Optional[Tracer] = None,
) -> Optional[int]:
    """
    Smallest number of edits with which query matches, bounded by max_ambiguity.

    Row ``d`` does not depend on how many rows sit above it, so one run
    answers every budget up to ``max_ambiguity``.

    Returns:
        The smallest accepting edit level, or None if none up to
        max_ambiguity accepts

    Example:
        >>> from asearch.compiler import compile_pattern
        >>> match_distance(compile_pattern("abcde"), "abXXde", 3)
        2
        >>> match_distance(compile_pattern("abcde"), "xyz", 1) is None
        True
    """
    states = run(compiled, query, max_ambiguity, tracer)
    for d, state in enumerate(states):
        if state & compiled.accept_mask:
            return d
    return None


__all__ = ["initial_states", "step", "row_limit", "run", "match", "match_distance"]
