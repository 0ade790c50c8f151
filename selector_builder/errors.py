"""
Exceptions raised by the selector builder.

All builder misuse is reported synchronously at the offending call; nothing
is appended to the selector before the check that raises.
"""

from typing import Sequence

from .parts import PART_ORDER, PartKind

ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    + ", ".join(kind.value for kind in PART_ORDER)
)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)


class SelectorError(Exception):
    """Base class for selector construction errors."""

    pass


class OrderViolation(SelectorError):
    """A part was applied after a part of higher rank.

    Attributes:
        kind: The rejected part kind.
        expected_rank: Lowest rank the builder would still accept.
        actual_rank: Rank of the rejected part.
    """

    def __init__(self, kind: PartKind, expected_rank: int, actual_rank: int) -> None:
        super().__init__(ORDER_MESSAGE)
        self.kind = kind
        self.expected_rank = expected_rank
        self.actual_rank = actual_rank


class DuplicatePart(SelectorError):
    """An element, id or pseudo-element was applied a second time."""

    def __init__(self, kind: PartKind) -> None:
        super().__init__(DUPLICATE_MESSAGE)
        self.kind = kind


class InvalidCombinator(SelectorError):
    """A combinator token outside the allowed set was used in strict mode."""

    def __init__(self, combinator: str, allowed: Sequence[str]) -> None:
        allowed_repr = ", ".join(repr(token) for token in allowed)
        super().__init__(
            f"Invalid combinator {combinator!r}, expected one of: {allowed_repr}"
        )
        self.combinator = combinator
        self.allowed = tuple(allowed)


__all__ = [
    "DUPLICATE_MESSAGE",
    "DuplicatePart",
    "InvalidCombinator",
    "ORDER_MESSAGE",
    "OrderViolation",
    "SelectorError",
]
