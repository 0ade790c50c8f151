"""
CSS selector builder.

A ``SelectorBuilder`` accumulates a compound selector one part at a time and
rejects parts that break the canonical CSS order or repeat a part that may
occur only once:

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              may occur several times

Builders are combined into complex selectors with ``combine_selectors``.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, Union

from .config.loader import get_combinator_options
from .config.options import BuilderOptions
from .errors import DuplicatePart, InvalidCombinator, OrderViolation
from .parts import Combinator, PartKind

logger = logging.getLogger(__name__)


class Stringifiable(Protocol):
    """Anything that renders itself as selector text."""

    def stringify(self) -> str: ...


class SelectorBuilder:
    """Fluent builder for a CSS selector.

    Each part method validates before it appends, so a call that raises
    leaves the builder exactly as it was.

    Example:
        >>> SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'
    """

    def __init__(self, text: str = "", last_rank: int = 0) -> None:
        """Initialize SelectorBuilder.

        Args:
            text: Initial selector text, taken as is.
            last_rank: Rank of the last part already present in ``text``.
        """
        self._text = text
        self._last_rank = last_rank
        self._applied: set[PartKind] = set()
        self._parts: list[tuple[PartKind, str]] = []

    @property
    def text(self) -> str:
        """Selector text accumulated so far."""
        return self._text

    @property
    def last_rank(self) -> int:
        """Rank of the most recently appended part (0 when empty)."""
        return self._last_rank

    @property
    def parts(self) -> tuple[tuple[PartKind, str], ...]:
        """Parts applied through the part methods, in call order."""
        return tuple(self._parts)

    def has(self, kind: PartKind) -> bool:
        """Check whether a unique part kind has already been applied."""
        return kind in self._applied

    def _check_order(self, kind: PartKind) -> None:
        if kind.rank < self._last_rank:
            logger.debug(
                f"Rejected {kind.value} (rank {kind.rank}) after rank {self._last_rank}"
            )
            raise OrderViolation(kind, self._last_rank, kind.rank)

    def _check_unique(self, kind: PartKind) -> None:
        if kind.unique and kind in self._applied:
            logger.debug(f"Rejected duplicate {kind.value} in {self._text!r}")
            raise DuplicatePart(kind)

    def _append(self, kind: PartKind, value: str) -> SelectorBuilder:
        self._check_order(kind)
        self._check_unique(kind)

        self._text += kind.render(value)
        self._last_rank = kind.rank
        if kind.unique:
            self._applied.add(kind)
        self._parts.append((kind, value))
        return self

    def element(self, name: str) -> SelectorBuilder:
        """Append a type selector, e.g. ``div``."""
        return self._append(PartKind.ELEMENT, name)

    def id(self, name: str) -> SelectorBuilder:
        """Append an id selector, e.g. ``#main``."""
        return self._append(PartKind.ID, name)

    def class_(self, name: str) -> SelectorBuilder:
        """Append a class selector, e.g. ``.container``."""
        return self._append(PartKind.CLASS, name)

    def attr(self, spec: str) -> SelectorBuilder:
        """Append an attribute selector.

        Args:
            spec: Attribute selector body without brackets, e.g. ``href$=".png"``.
        """
        return self._append(PartKind.ATTRIBUTE, spec)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        """Append a pseudo-class without its colon, e.g. ``nth-of-type(even)``."""
        return self._append(PartKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        """Append a pseudo-element without its colons, e.g. ``before``."""
        return self._append(PartKind.PSEUDO_ELEMENT, name)

    def stringify(self) -> str:
        """Return the selector text."""
        return self._text

    def copy(self) -> SelectorBuilder:
        """Return an independent builder in the same state."""
        clone = SelectorBuilder(self._text, self._last_rank)
        clone._applied = set(self._applied)
        clone._parts = list(self._parts)
        return clone

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"SelectorBuilder(text={self._text!r}, last_rank={self._last_rank})"


def combine_selectors(
    left: Stringifiable,
    combinator: Union[str, Combinator],
    right: Stringifiable,
    options: Optional[BuilderOptions] = None,
) -> SelectorBuilder:
    """Join two selectors with a combinator into a new builder.

    The result occupies the element rank, so further parts can follow but
    none of lower rank; no unique part is marked as applied. Neither input
    is modified.

    Args:
        left: Selector on the left of the combinator.
        combinator: Combinator token, e.g. ``"+"`` or ``Combinator.CHILD``.
        right: Selector on the right of the combinator.
        options: Validation options; defaults to the process-wide options,
            or the combinator settings from the environment when unset.

    Returns:
        New builder holding ``"<left> <combinator> <right>"``.

    Raises:
        InvalidCombinator: If strict combinators are enabled and the token
            is not allowed.
    """
    token = combinator.value if isinstance(combinator, Combinator) else combinator

    if options is None:
        options = get_combinator_options()
    if not options.is_allowed(token):
        raise InvalidCombinator(token, options.allowed_combinators)

    text = f"{left.stringify()} {token} {right.stringify()}"
    logger.debug(f"Combined selector: {text!r}")
    return SelectorBuilder(text, PartKind.ELEMENT.rank)


__all__ = [
    "SelectorBuilder",
    "Stringifiable",
    "combine_selectors",
]
