"""Enums for asearch API."""

from enum import IntEnum


class MatchMode(IntEnum):
    """How a compiled pattern is compared against a query.

    Integer values are part of the public interface, so plain ``0``, ``1``
    and ``2`` are accepted wherever a mode is expected.

    Example:
        >>> from asearch import Asearch, MatchMode
        >>> Asearch("猫である", MatchMode.INCLUDE).match("吾輩は猫である。")
        True
    """

    EXACT = 0
    """The whole query must equal the pattern up to the allowed edits"""

    INCLUDE = 1
    """The pattern may occur anywhere inside the query"""

    WILDCARD_SPACE = 2
    """A space in the pattern matches zero or more arbitrary characters"""


__all__ = ["MatchMode"]
