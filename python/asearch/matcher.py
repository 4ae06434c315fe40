"""The Asearch matcher: compile a pattern once, match it many times."""

from typing import Iterable, List, Optional, Union

from asearch import engine
from asearch.compiler import MAXLENGTH, CompiledPattern, compile_pattern
from asearch.enums import MatchMode
from asearch.trace import NullTracer, Tracer


class Asearch:
    """
    Approximate matcher for a single pattern.

    The pattern is compiled into bitmask tables at construction; afterwards
    the instance is read-only. Matching keeps all of its state local to the
    call, so one instance can be shared freely between threads.

    Args:
        pattern: Pattern of at most MAXLENGTH (31) Unicode scalar values
        mode: MatchMode, its int value or its name (default: EXACT)
        tracer: Optional tracer notified at every automaton step

    Raises:
        PatternTooLong: If the pattern has more than 31 scalar values

    Example:
        >>> from asearch import Asearch, MatchMode
        >>> a = Asearch("abcde")
        >>> a.match("aBCDe")
        True
        >>> a.match("abXcde"), a.match("abXcde", 1)
        (False, True)
        >>> Asearch("ab de", MatchMode.WILDCARD_SPACE).match("abccde")
        True
    """

    MAXLENGTH = MAXLENGTH

    __slots__ = ("_compiled", "_tracer")

    def __init__(
        self,
        pattern: str,
        mode: Union[str, int, MatchMode] = MatchMode.EXACT,
        tracer: Optional[Tracer] = None,
    ):
        self._compiled = compile_pattern(pattern, mode)
        self._tracer = tracer if tracer is not None else NullTracer()

    @property
    def pattern(self) -> str:
        return self._compiled.pattern

    @property
    def match_mode(self) -> MatchMode:
        return self._compiled.mode

    @property
    def compiled(self) -> CompiledPattern:
        return self._compiled

    @property
    def tracer(self) -> Tracer:
        return self._tracer

    def match(self, query: str, ambiguity: int = 0, tracer: Optional[Tracer] = None) -> bool:
        """
        Check whether query matches the pattern within ``ambiguity`` edits.

        Args:
            query: String to test
            ambiguity: Allowed Levenshtein edits (insertions, deletions,
                substitutions), default 0
            tracer: Overrides the tracer attached at construction for this call

        Returns:
            True if the query is accepted

        Raises:
            InvalidAmbiguity: If ambiguity is negative or not an int
        """
        return engine.match(self._compiled, query, ambiguity, self._pick(tracer))

    __call__ = match

    def distance(
        self, query: str, max_ambiguity: int = 3, tracer: Optional[Tracer] = None
    ) -> Optional[int]:
        """
        Smallest ambiguity at which query matches, or None above max_ambiguity.

        Example:
            >>> Asearch("abcde").distance("abde")
            1
        """
        return engine.match_distance(self._compiled, query, max_ambiguity, self._pick(tracer))

    def filter(self, items: Iterable[str], ambiguity: int = 0) -> List[str]:
        """
        Keep the items that match, in their original order.

        Example:
            >>> Asearch("apple").filter(["appel", "apple", "banana"], 2)
            ['appel', 'apple']
        """
        return [item for item in items if self.match(item, ambiguity)]

    def _pick(self, tracer: Optional[Tracer]) -> Tracer:
        return tracer if tracer is not None else self._tracer

    def __repr__(self) -> str:
        return f"Asearch({self.pattern!r}, MatchMode.{self.match_mode.name})"

    def __eq__(self, other):
        if not isinstance(other, Asearch):
            return NotImplemented
        return (self.pattern, self.match_mode) == (other.pattern, other.match_mode)

    def __hash__(self):
        return hash((self.pattern, self.match_mode))


def is_match(
    pattern: str,
    query: str,
    ambiguity: int = 0,
    mode: Union[str, int, MatchMode] = MatchMode.EXACT,
) -> bool:
    """One-shot match without keeping the compiled pattern around.

    Example:
        >>> is_match("猫である", "吾輩は狸である", 1, mode="include")
        True
    """
    return engine.match(compile_pattern(pattern, mode), query, ambiguity)


__all__ = ["Asearch", "is_match"]
