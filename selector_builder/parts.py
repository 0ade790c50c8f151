"""
Selector part kinds and combinator tokens.

Each part of a compound selector has a fixed rank that determines where it
may appear:

    element#id.class[attr]:pseudo-class::pseudo-element
"""

from enum import Enum


class PartKind(str, Enum):
    """Kind of a compound-selector part, ordered by rank."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the canonical part order (1-6)."""
        return _RANKS[self]

    @property
    def unique(self) -> bool:
        """Whether this kind may occur at most once in a selector."""
        return self in _UNIQUE_KINDS

    def render(self, value: str) -> str:
        """Render a value as the CSS fragment for this kind.

        Args:
            value: Part body without any prefix (e.g. ``main`` for ``#main``).

        Returns:
            CSS fragment to append to the selector text.
        """
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_RANKS = {
    PartKind.ELEMENT: 1,
    PartKind.ID: 2,
    PartKind.CLASS: 3,
    PartKind.ATTRIBUTE: 4,
    PartKind.PSEUDO_CLASS: 5,
    PartKind.PSEUDO_ELEMENT: 6,
}

_AFFIXES = {
    PartKind.ELEMENT: ("", ""),
    PartKind.ID: ("#", ""),
    PartKind.CLASS: (".", ""),
    PartKind.ATTRIBUTE: ("[", "]"),
    PartKind.PSEUDO_CLASS: (":", ""),
    PartKind.PSEUDO_ELEMENT: ("::", ""),
}

_UNIQUE_KINDS = frozenset({PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT})

PART_ORDER: tuple[PartKind, ...] = tuple(sorted(PartKind, key=lambda kind: kind.rank))


class Combinator(str, Enum):
    """CSS combinator tokens joining two compound selectors."""

    DESCENDANT = " "
    CHILD = ">"
    NEXT_SIBLING = "+"
    SUBSEQUENT_SIBLING = "~"


__all__ = [
    "Combinator",
    "PART_ORDER",
    "PartKind",
]
