"""Pattern compilation into bit-parallel automaton tables.

A pattern of length ``n`` becomes an NFA with ``n + 1`` states laid out on
the bits of a 32-bit word: state ``i`` (``i`` pattern characters consumed)
lives on bit ``31 - i``. Bit 31 is the initial state and also the guard bit,
which is why a pattern can hold at most 31 characters. Python ints are
unbounded, so every word produced here is kept inside ``WORD_MASK``.

Example:
    >>> from asearch.compiler import compile_pattern
    >>> compiled = compile_pattern("hello")
    >>> bin(compiled.character_masks["l"])
    '0b110000000000000000000000000000'
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union

from asearch._utils import normalize_mode, require_str
from asearch.enums import MatchMode
from asearch.exceptions import PatternTooLong

MAXLENGTH = 31
"""Longest pattern, in Unicode scalar values, that fits beside the guard bit"""

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
GUARD_BIT = 1 << MAXLENGTH
WILDCARD = " "


@dataclass(frozen=True)
class CompiledPattern:
    """Immutable automaton tables for one pattern and match mode.

    Attributes:
        pattern: The source pattern.
        mode: The match mode the tables were built for.
        character_masks: Character -> bitmask of the pattern positions it
            occupies. Original, lowercase and uppercase forms share a value.
        init_state: The initial state (bit 31 only).
        accept_mask: The state reached after consuming the whole pattern.
        loop_mask: States that keep themselves active without an edit.

    Instances hold no mutable state and can be shared across threads.
    """

    pattern: str
    mode: MatchMode
    character_masks: Mapping[str, int] = field(compare=False)
    init_state: int
    accept_mask: int
    loop_mask: int

    def mask_for(self, char: str) -> int:
        """Positions of char in the pattern; 0 if it never occurs."""
        return self.character_masks.get(char, 0)

    @property
    def length(self) -> int:
        return len(self.pattern)


def compile_pattern(
    pattern: str,
    mode: Union[str, int, MatchMode] = MatchMode.EXACT,
) -> CompiledPattern:
    """
    Build the automaton tables for a pattern.

    Args:
        pattern: Pattern string, at most MAXLENGTH scalar values
        mode: MatchMode (or its int value or name)

    Returns:
        CompiledPattern ready to be passed to the match engine

    Raises:
        PatternTooLong: If the pattern has more than MAXLENGTH scalar values
        TypeError: If pattern is not a string

    Example:
        >>> compiled = compile_pattern("ab de", MatchMode.WILDCARD_SPACE)
        >>> hex(compiled.loop_mask), hex(compiled.accept_mask)
        ('0x20000000', '0x8000000')
    """
    require_str(pattern, "pattern")
    mode = normalize_mode(mode)
    if len(pattern) > MAXLENGTH:
        raise PatternTooLong(pattern, MAXLENGTH)

    init_state = GUARD_BIT
    accept_mask = GUARD_BIT >> len(pattern)
    loop_mask = 0
    if mode is MatchMode.INCLUDE:
        # leading and trailing query characters are free
        loop_mask = init_state | accept_mask

    masks = {}
    pos = 0
    for char in pattern:
        if mode is MatchMode.WILDCARD_SPACE and char == WILDCARD:
            # no node for the wildcard: the current node loops instead and
            # the accept state moves one node back
            loop_mask |= GUARD_BIT >> pos
            accept_mask = (accept_mask << 1) & WORD_MASK
            continue

        bit = GUARD_BIT >> pos
        for key in (char, char.lower(), char.upper()):
            masks[key] = masks.get(key, 0) | bit
        pos += 1

    return CompiledPattern(
        pattern=pattern,
        mode=mode,
        character_masks=MappingProxyType(masks),
        init_state=init_state,
        accept_mask=accept_mask,
        loop_mask=loop_mask,
    )


__all__ = [
    "CompiledPattern",
    "compile_pattern",
    "MAXLENGTH",
    "WORD_BITS",
    "WORD_MASK",
    "GUARD_BIT",
    "WILDCARD",
]
