"""Tests for SelectorFragment chaining and rendering."""

import dataclasses

import pytest

from selector_builder.errors import CardinalityViolation, OrderViolation
from selector_builder.model.fragment import SelectorFragment
from selector_builder.model.kind import PartKind


@pytest.fixture
def root() -> SelectorFragment:
    return SelectorFragment()


# ---------------------------------------------------------------------------
# Root fragment
# ---------------------------------------------------------------------------


class TestRoot:
    def test_renders_empty(self, root):
        assert root.render() == ""
        assert root.kind is None

    def test_first_part_has_empty_prefix(self, root):
        frag = root.id("main")
        assert frag.prefix == ""
        assert frag.render() == "#main"


# ---------------------------------------------------------------------------
# Chaining
# ---------------------------------------------------------------------------


class TestChaining:
    def test_element_id_class(self, root):
        frag = root.element("div").id("main").class_("container")
        assert frag.render() == "div#main.container"

    def test_repeated_class(self, root):
        frag = root.id("main").class_("container").class_("editable")
        assert frag.render() == "#main.container.editable"

    def test_attr_and_pseudo_class(self, root):
        frag = root.element("a").attr('href$=".png"').pseudo_class("focus")
        assert frag.render() == 'a[href$=".png"]:focus'

    def test_full_chain(self, root):
        frag = (
            root.element("p")
            .id("intro")
            .class_("lead")
            .attr("lang")
            .pseudo_class("hover")
            .pseudo_class("first-child")
            .pseudo_element("before")
        )
        assert frag.render() == "p#intro.lead[lang]:hover:first-child::before"

    def test_repeated_attr(self, root):
        frag = root.element("input").attr("type=text").attr("required")
        assert frag.render() == "input[type=text][required]"

    def test_add_generic(self, root):
        frag = root.add(PartKind.ELEMENT, "li").add(PartKind.CLASS, "item")
        assert frag.render() == "li.item"

    def test_prefix_is_previous_rendering(self, root):
        base = root.element("div").id("main")
        frag = base.class_("x")
        assert frag.prefix == base.render()
        assert frag.kind is PartKind.CLASS
        assert frag.value == "x"

    def test_each_step_prefix_matches_chain_so_far(self, root):
        steps = [root]
        for method, value in [("element", "a"), ("id", "b"), ("class_", "c"), ("attr", "d")]:
            steps.append(getattr(steps[-1], method)(value))
        for previous, current in zip(steps, steps[1:]):
            assert current.prefix == previous.render()
        assert steps[-1].render() == "a#b.c[d]"

    def test_direct_construction_still_gates_later_parts(self):
        frag = SelectorFragment(kind=PartKind.CLASS, value="x")
        with pytest.raises(OrderViolation):
            frag.id("y")


# ---------------------------------------------------------------------------
# Immutability
# ---------------------------------------------------------------------------


class TestImmutability:
    def test_frozen(self, root):
        frag = root.element("div")
        with pytest.raises(dataclasses.FrozenInstanceError):
            frag.value = "span"  # type: ignore[misc]

    def test_extending_leaves_receiver_unchanged(self, root):
        base = root.element("div")
        base.class_("a")
        assert base.render() == "div"

    def test_branches_from_shared_prefix_are_independent(self, root):
        base = root.element("ul").class_("menu")
        first = base.class_("open")
        second = base.pseudo_class("hover")
        assert first.render() == "ul.menu.open"
        assert second.render() == "ul.menu:hover"
        assert base.render() == "ul.menu"

    def test_render_idempotent(self, root):
        frag = root.element("div").id("main")
        assert frag.render() == frag.render()
        assert str(frag) == frag.render()
        assert frag.stringify() == frag.render()

    def test_equality_by_value(self, root):
        assert root.element("div").id("x") == SelectorFragment().element("div").id("x")


# ---------------------------------------------------------------------------
# Violations
# ---------------------------------------------------------------------------


class TestViolations:
    def test_element_twice(self, root):
        with pytest.raises(CardinalityViolation):
            root.element("div").element("span")

    def test_id_twice(self, root):
        with pytest.raises(CardinalityViolation):
            root.id("a").id("b")

    def test_pseudo_element_twice(self, root):
        with pytest.raises(CardinalityViolation):
            root.pseudo_element("before").pseudo_element("after")

    def test_element_after_id(self, root):
        with pytest.raises(OrderViolation):
            root.id("main").element("div")

    def test_id_after_class(self, root):
        with pytest.raises(OrderViolation):
            root.element("div").class_("x").id("main")

    def test_class_after_attr(self, root):
        with pytest.raises(OrderViolation):
            root.attr("href").class_("x")

    def test_pseudo_class_after_pseudo_element(self, root):
        with pytest.raises(OrderViolation):
            root.pseudo_element("after").pseudo_class("hover")

    def test_repeated_element_after_higher_kind_is_order_violation(self, root):
        with pytest.raises(OrderViolation):
            root.element("div").class_("x").element("span")

    def test_error_raised_at_call_not_render(self, root):
        frag = root.class_("x")
        with pytest.raises(OrderViolation):
            frag.id("y")
        assert frag.render() == ".x"
