"""
Entry points for building selectors from scratch.

Each function returns a new ``SelectorBuilder`` seeded with one part.
"""

from typing import Union

from .builder import SelectorBuilder, Stringifiable, combine_selectors
from .parts import Combinator


def element(value: str) -> SelectorBuilder:
    """Start a selector with a type selector.

    Args:
        value: Element name, e.g. ``div``.

    Returns:
        New builder holding ``value``.
    """
    return SelectorBuilder().element(value)


def id(value: str) -> SelectorBuilder:
    """Start a selector with an id selector.

    Args:
        value: Id without the ``#``.

    Returns:
        New builder holding ``#value``.
    """
    return SelectorBuilder().id(value)


def class_(value: str) -> SelectorBuilder:
    """Start a selector with a class selector.

    Args:
        value: Class name without the dot.

    Returns:
        New builder holding ``.value``.
    """
    return SelectorBuilder().class_(value)


def attr(value: str) -> SelectorBuilder:
    """Start a selector with an attribute selector.

    Args:
        value: Attribute selector body without brackets, e.g. ``type="text"``.

    Returns:
        New builder holding ``[value]``.
    """
    return SelectorBuilder().attr(value)


def pseudo_class(value: str) -> SelectorBuilder:
    """Start a selector with a pseudo-class.

    Args:
        value: Pseudo-class without the colon, e.g. ``hover``.

    Returns:
        New builder holding ``:value``.
    """
    return SelectorBuilder().pseudo_class(value)


def pseudo_element(value: str) -> SelectorBuilder:
    """Start a selector with a pseudo-element.

    Args:
        value: Pseudo-element without the colons, e.g. ``before``.

    Returns:
        New builder holding ``::value``.
    """
    return SelectorBuilder().pseudo_element(value)


def combine(
    selector1: Stringifiable,
    combinator: Union[str, Combinator],
    selector2: Stringifiable,
) -> SelectorBuilder:
    """Join two selectors, e.g. ``combine(element("ul"), ">", element("li"))``.

    Args:
        selector1: Selector on the left of the combinator.
        combinator: Combinator token.
        selector2: Selector on the right of the combinator.

    Returns:
        New builder holding ``"<selector1> <combinator> <selector2>"``.
    """
    return combine_selectors(selector1, combinator, selector2)


__all__ = [
    "attr",
    "class_",
    "combine",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
]
