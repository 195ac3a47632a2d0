"""
The closed catalog of fractal patterns, keyed by PatternKind.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from fractal_types import InvalidKind, PatternDefinition, PatternKind

__all__ = ["PATTERNS", "available_kinds", "lookup"]


PATTERNS: Mapping[PatternKind, PatternDefinition] = MappingProxyType({
    # Every tile except the centre
    PatternKind.CARPET: PatternDefinition(
        "carpet",
        3,
        ((0, 0), (0, 1), (0, 2), (1, 0), (1, 2), (2, 0), (2, 1), (2, 2)),
    ),
    # Every tile except bottom-right
    PatternKind.TRIANGLE: PatternDefinition(
        "triangle",
        2,
        ((0, 0), (0, 1), (1, 0)),
    ),
    # Corners and centre
    PatternKind.VICSEK: PatternDefinition(
        "vicsek",
        3,
        ((0, 0), (0, 2), (1, 1), (2, 0), (2, 2)),
    ),
})


def available_kinds() -> list[int]:
    """Request-file identifiers of every known pattern, ascending."""
    return sorted(kind.value for kind in PATTERNS)


def lookup(kind: PatternKind | int) -> PatternDefinition:
    """
    Return the definition for a pattern kind.

    Args:
        kind: A PatternKind, or its integer identifier

    Raises:
        InvalidKind: If kind does not name a known pattern
    """
    if not isinstance(kind, PatternKind):
        # bool is an int subclass but never a valid identifier
        if isinstance(kind, bool) or not isinstance(kind, int):
            raise InvalidKind(
                f"Pattern kind must be an integer, got {type(kind).__name__}: {kind!r}"
            )
        try:
            kind = PatternKind(kind)
        except ValueError:
            raise InvalidKind(
                f"Unknown pattern kind: {kind}\n"
                f"  Valid kinds: {', '.join(str(k) for k in available_kinds())}"
            ) from None
    return PATTERNS[kind]
