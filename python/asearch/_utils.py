"""Internal utilities for asearch."""

from typing import Union

from asearch.enums import MatchMode
from asearch.exceptions import InvalidAmbiguity, ValidationError

# Accepted spellings for match modes (lowercase)
MODE_ALIASES = {
    "exact": MatchMode.EXACT,
    "include": MatchMode.INCLUDE,
    "wildcard_space": MatchMode.WILDCARD_SPACE,
    "wildcard": MatchMode.WILDCARD_SPACE,
}


def normalize_mode(mode: Union[str, int, MatchMode]) -> MatchMode:
    """Convert an int or string to MatchMode, or validate an existing one.

    Args:
        mode: A MatchMode, its integer value, or its name.

    Returns:
        The corresponding MatchMode member.

    Raises:
        ValidationError: If the value or name is not a known mode.
        TypeError: If mode is not a str, int or MatchMode.

    Example:
        >>> normalize_mode("include")
        <MatchMode.INCLUDE: 1>
        >>> normalize_mode(2)
        <MatchMode.WILDCARD_SPACE: 2>
    """
    if isinstance(mode, MatchMode):
        return mode

    if isinstance(mode, bool):
        raise TypeError("mode must be str, int or MatchMode, got bool")

    if isinstance(mode, int):
        try:
            return MatchMode(mode)
        except ValueError:
            raise ValidationError(
                f"Unknown match mode: {mode}. "
                f"Valid values: {[m.value for m in MatchMode]}"
            ) from None

    if isinstance(mode, str):
        key = mode.lower().replace("-", "_")
        if key in MODE_ALIASES:
            return MODE_ALIASES[key]
        raise ValidationError(
            f"Unknown match mode: '{mode}'. Valid options: {sorted(MODE_ALIASES)}"
        )

    raise TypeError(f"mode must be str, int or MatchMode, got {type(mode).__name__}")


def validate_ambiguity(ambiguity: int) -> int:
    """Return ambiguity unchanged if it is a usable edit budget.

    Raises:
        InvalidAmbiguity: If ambiguity is negative or not an int.
    """
    # bool is an int subclass; True as a budget is almost certainly a bug
    if isinstance(ambiguity, bool) or not isinstance(ambiguity, int):
        raise InvalidAmbiguity(ambiguity)
    if ambiguity < 0:
        raise InvalidAmbiguity(ambiguity)
    return ambiguity


def require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be str, got {type(value).__name__}")
    return value


__all__ = ["normalize_mode", "validate_ambiguity", "require_str", "MODE_ALIASES"]
