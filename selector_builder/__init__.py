"""
selector-builder: fluent construction of CSS selectors.

Builds compound selectors part by part, enforcing the CSS part order

    element#id.class[attr]:pseudo-class::pseudo-element

and combines them into complex selectors with combinators.

Basic usage:
    import selector_builder as sb

    sb.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    sb.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

Combining:
    sb.combine(
        sb.element("div").id("main"),
        "+",
        sb.combine(
            sb.element("table").id("data"),
            "~",
            sb.element("tr").pseudo_class("nth-of-type(even)"),
        ),
    ).stringify()
    # 'div#main + table#data ~ tr:nth-of-type(even)'

Misuse raises immediately:
    sb.element("div").id("main").class_("x").id("other")  # OrderViolation
    sb.id("a").id("b")                                     # DuplicatePart
"""

__version__ = "0.1.0"
__license__ = "MIT"

from selector_builder.builder import (
    SelectorBuilder,
    Stringifiable,
    combine_selectors,
)

from selector_builder.errors import (
    DuplicatePart,
    InvalidCombinator,
    OrderViolation,
    SelectorError,
)

from selector_builder.facade import (
    attr,
    class_,
    combine,
    element,
    id,
    pseudo_class,
    pseudo_element,
)

from selector_builder.parts import (
    PART_ORDER,
    Combinator,
    PartKind,
)

from selector_builder.models import Rectangle

from selector_builder.serialization import (
    SerializationError,
    deserialize,
    serialize,
)

from selector_builder.config import (
    BuilderOptions,
    ConfigurationError,
    configure_logging,
    load_config,
)

__all__ = [
    # Version
    "__version__",
    # Builder
    "SelectorBuilder",
    "Stringifiable",
    "combine_selectors",
    # Facade
    "attr",
    "class_",
    "combine",
    "element",
    "id",
    "pseudo_class",
    "pseudo_element",
    # Parts
    "PART_ORDER",
    "Combinator",
    "PartKind",
    # Errors
    "DuplicatePart",
    "InvalidCombinator",
    "OrderViolation",
    "SelectorError",
    # Collaborators
    "Rectangle",
    "SerializationError",
    "deserialize",
    "serialize",
    # Configuration
    "BuilderOptions",
    "ConfigurationError",
    "configure_logging",
    "load_config",
]
