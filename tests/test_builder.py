"""Tests for the SelectorBuilder state machine."""

import itertools

import pytest

from selector_builder import (
    PART_ORDER,
    DuplicatePart,
    OrderViolation,
    PartKind,
    SelectorBuilder,
    SelectorError,
)
from selector_builder.errors import DUPLICATE_MESSAGE, ORDER_MESSAGE

METHODS = {
    PartKind.ELEMENT: ("element", "div", "div"),
    PartKind.ID: ("id", "main", "#main"),
    PartKind.CLASS: ("class_", "box", ".box"),
    PartKind.ATTRIBUTE: ("attr", "type=text", "[type=text]"),
    PartKind.PSEUDO_CLASS: ("pseudo_class", "hover", ":hover"),
    PartKind.PSEUDO_ELEMENT: ("pseudo_element", "before", "::before"),
}


def apply(builder, kind):
    method, value, _ = METHODS[kind]
    return getattr(builder, method)(value)


class TestPartKind:
    """Tests for PartKind ranks and rendering."""

    def test_ranks_follow_css_order(self):
        """Test ranks run 1 through 6 in canonical order."""
        assert [kind.rank for kind in PART_ORDER] == [1, 2, 3, 4, 5, 6]
        assert PART_ORDER[0] is PartKind.ELEMENT
        assert PART_ORDER[-1] is PartKind.PSEUDO_ELEMENT

    def test_unique_kinds(self):
        """Test only element, id and pseudo-element are unique."""
        unique = {kind for kind in PartKind if kind.unique}
        assert unique == {PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT}

    @pytest.mark.parametrize("kind", list(PartKind))
    def test_render(self, kind):
        """Test each kind renders its literal fragment."""
        _, value, expected = METHODS[kind]
        assert kind.render(value) == expected


class TestSelectorBuilder:
    """Tests for appending parts."""

    def test_empty_builder(self):
        """Test a new builder is empty at rank 0."""
        builder = SelectorBuilder()
        assert builder.stringify() == ""
        assert builder.last_rank == 0

    def test_id_and_classes(self):
        """Test id followed by repeated classes."""
        result = SelectorBuilder().id("main").class_("container").class_("editable")
        assert result.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        """Test element, attribute and pseudo-class."""
        result = SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")
        assert result.stringify() == 'a[href$=".png"]:focus'

    def test_full_compound(self):
        """Test every part kind in order."""
        builder = SelectorBuilder()
        for kind in PART_ORDER:
            apply(builder, kind)
        assert builder.stringify() == "div#main.box[type=text]:hover::before"
        assert builder.last_rank == 6

    def test_chaining_returns_same_instance(self):
        """Test part methods return the builder itself."""
        builder = SelectorBuilder()
        assert builder.element("p") is builder
        assert builder.class_("intro") is builder

    def test_repeated_non_unique_parts(self):
        """Test classes, attributes and pseudo-classes may repeat."""
        result = (
            SelectorBuilder()
            .class_("a")
            .class_("b")
            .attr("x")
            .attr("y")
            .pseudo_class("first-child")
            .pseudo_class("hover")
        )
        assert result.stringify() == ".a.b[x][y]:first-child:hover"

    @pytest.mark.parametrize("kinds", list(itertools.combinations(PART_ORDER, 3)))
    def test_non_decreasing_sequences_succeed(self, kinds):
        """Test any ascending subset of parts concatenates in call order."""
        builder = SelectorBuilder()
        for kind in kinds:
            apply(builder, kind)
        assert builder.stringify() == "".join(METHODS[kind][2] for kind in kinds)
        assert builder.last_rank == kinds[-1].rank

    def test_stringify_is_idempotent(self):
        """Test stringify can be called repeatedly without side effects."""
        builder = SelectorBuilder().element("div").class_("x")
        first = builder.stringify()
        assert builder.stringify() == first
        assert str(builder) == first

    def test_parts_history(self):
        """Test parts records applied parts in order."""
        builder = SelectorBuilder().element("a").class_("b")
        assert builder.parts == ((PartKind.ELEMENT, "a"), (PartKind.CLASS, "b"))

    def test_copy_is_independent(self):
        """Test copy shares no state with the original."""
        original = SelectorBuilder().element("div")
        clone = original.copy()
        with pytest.raises(DuplicatePart):
            clone.element("span")
        clone.class_("x")
        assert original.stringify() == "div"
        assert original.last_rank == 1
        assert clone.stringify() == "div.x"

    def test_repr(self):
        """Test repr shows text and rank."""
        builder = SelectorBuilder().id("main")
        assert repr(builder) == "SelectorBuilder(text='#main', last_rank=2)"


class TestOrderViolation:
    """Tests for order checking."""

    def test_id_after_class(self):
        """Test id after classes is rejected."""
        builder = SelectorBuilder().element("div").id("main").class_("container").class_("draggable")
        with pytest.raises(OrderViolation):
            builder.id("x")

    @pytest.mark.parametrize(
        "first,second",
        [(a, b) for a, b in itertools.permutations(PART_ORDER, 2) if b.rank < a.rank],
    )
    def test_lower_rank_rejected_and_text_unchanged(self, first, second):
        """Test a lower-ranked part fails and leaves the builder intact."""
        builder = apply(SelectorBuilder(), first)
        before = builder.stringify()

        with pytest.raises(OrderViolation) as exc_info:
            apply(builder, second)

        assert builder.stringify() == before
        assert builder.last_rank == first.rank
        assert exc_info.value.kind is second
        assert exc_info.value.expected_rank == first.rank
        assert exc_info.value.actual_rank == second.rank

    def test_message(self):
        """Test the fixed message lists the canonical order."""
        with pytest.raises(OrderViolation, match="element, id, class, attribute, pseudo-class, pseudo-element"):
            SelectorBuilder().class_("a").element("div")
        assert ORDER_MESSAGE.startswith("Selector parts should be arranged")

    def test_is_selector_error(self):
        """Test OrderViolation can be caught as SelectorError."""
        with pytest.raises(SelectorError):
            SelectorBuilder().pseudo_element("after").pseudo_class("hover")


class TestDuplicatePart:
    """Tests for uniqueness checking."""

    @pytest.mark.parametrize("kind", [PartKind.ELEMENT, PartKind.ID, PartKind.PSEUDO_ELEMENT])
    def test_second_unique_part_rejected(self, kind):
        """Test element, id and pseudo-element may appear only once."""
        builder = apply(SelectorBuilder(), kind)
        before = builder.stringify()

        with pytest.raises(DuplicatePart, match="should not occur more then one time") as exc_info:
            apply(builder, kind)

        assert exc_info.value.kind is kind
        assert builder.stringify() == before

    def test_id_twice(self):
        """Test id('a').id('b') fails on the second call."""
        builder = SelectorBuilder().id("a")
        with pytest.raises(DuplicatePart):
            builder.id("b")
        assert builder.stringify() == "#a"

    def test_marker_text_inside_values_is_ignored(self):
        """Test uniqueness is tracked per part, not by scanning the text."""
        result = SelectorBuilder().attr('href^="#"').pseudo_element("after")
        assert result.stringify() == '[href^="#"]::after'

    def test_double_colon_in_pseudo_class_is_not_a_pseudo_element(self):
        """Test ':' inside a pseudo-class argument does not block pseudo_element."""
        result = SelectorBuilder().pseudo_class("not(::x)").pseudo_element("before")
        assert result.stringify() == ":not(::x)::before"

    def test_message_constant(self):
        """Test the fixed duplicate message."""
        assert str(DuplicatePart(PartKind.ID)) == DUPLICATE_MESSAGE
