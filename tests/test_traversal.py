"""
Unit tests for the search engine and the named query methods.
"""

import pytest

from htmlnode import (
    AttributeContains, AttributeEquals, Cardinality, HasAttribute, HasTagName,
    Scope, TagTextContains, TagTextEquals, parse, parse_fragment,
)
from htmlnode.dom import NodeType
from htmlnode.traversal import iter_search, search

from tests.fixtures.html_samples import ARTICLE_MARKUP


class CountingPredicate:
    """Predicate wrapper that records how many nodes it was offered"""

    def __init__(self, predicate):
        self.predicate = predicate
        self.calls = 0

    def __call__(self, node):
        self.calls += 1
        return self.predicate(node)


class TestScenario:
    """Queries over a div with two classed spans"""

    def test_children_with_attribute(self, scenario_div):
        spans = scenario_div.children_with_attribute("class")
        assert [span.tag_name for span in spans] == ["span", "span"]
        assert [span.class_value for span in spans] == ["x", "y"]

    def test_child_with_class(self, scenario_div):
        y_span = scenario_div.child_with_class("y")
        assert y_span == scenario_div.child_at(1)

    def test_descendant_of_tag_with_text(self, scenario_div):
        x_span = scenario_div.descendant_of_tag("span", value_contains="i")
        assert x_span.class_value == "x"
        assert x_span.text_content == "Hi"

    def test_tag_text_query_on_whitespace_led_text(self):
        root = parse("<ul><li>\n  Lamp</li><li> Desk </li></ul>")
        lamp = root.descendant_of_tag("li", value_contains="Lamp")
        assert lamp is not None
        assert lamp.string_value == "Lamp"
        assert root.descendant_of_tag("li", value_matches=" Desk ").string_value == "Desk"

    def test_not_found(self, scenario_div):
        assert scenario_div.child_with_class("z") is None
        assert scenario_div.children_with_class("z") == []
        assert scenario_div.descendant_of_tag("span", value_matches="hi") is None


class TestScopes:
    """Test which nodes each scope considers"""

    def setup_method(self):
        self.document = parse(ARTICLE_MARKUP)
        self.main = self.document.descendant_with_attribute("id", value_matches="main")

    def test_child_scope_does_not_descend(self):
        assert self.main.children_of_tag("li") == []
        assert [node.tag_name for node in self.main.children] == ["h1", "ul", "p", "a", "img"]

    def test_descendant_scope_is_pre_order(self):
        tags = [node.tag_name for node in self.main.iter_search(Scope.DESCENDANT)]
        assert tags == ["h1", "ul", "li", "b", "li", "li", "p", "span", "a", "img"]

    def test_matching_ancestor_does_not_prune(self):
        divs = parse_fragment("<div><div><div></div></div></div>").descendants_of_tag("div")
        assert len(divs) == 3
        assert divs[0] < divs[1] < divs[2]

    def test_sibling_scope_is_forward_only(self):
        lis = self.document.descendants_of_tag("li")
        assert lis[1].siblings_of_tag("li") == [lis[2]]
        assert lis[0].sibling_of_tag("li") == lis[1]
        assert lis[2].sibling_of_tag("li") is None

    def test_sibling_scope_never_descends(self):
        h1 = self.main.child_of_tag("h1")
        assert h1.sibling_of_tag("li") is None
        assert h1.sibling_of_tag("ul") is not None
        assert [node.tag_name for node in h1.iter_search(Scope.SIBLING)] == ["ul", "p", "a", "img"]

    def test_only_elements_are_offered(self):
        counter = CountingPredicate(lambda node: True)
        matches = self.main.search(Scope.CHILD, counter, Cardinality.ALL)
        assert counter.calls == len(matches) == 5

    def test_search_from_none(self):
        assert list(iter_search(None, Scope.DESCENDANT)) == []
        assert search(None, Scope.CHILD, None, Cardinality.FIRST) is None
        assert search(None, Scope.CHILD, None, Cardinality.ALL) == []


class TestCardinality:
    """Test first and all results"""

    def setup_method(self):
        self.document = parse(ARTICLE_MARKUP)

    def test_first_short_circuits(self):
        every_element = list(iter_search(self.document.node, Scope.DESCENDANT))
        full_scan = CountingPredicate(lambda node: False)
        assert self.document.search(Scope.DESCENDANT, full_scan, Cardinality.FIRST) is None
        assert full_scan.calls == len(every_element)

        target = self.document.descendant_of_tag("span")
        first = CountingPredicate(HasTagName("span"))
        found = self.document.search(Scope.DESCENDANT, first, Cardinality.FIRST)
        assert found == target
        position = [node is target.node for node in every_element].index(True)
        assert first.calls == position + 1
        assert first.calls < full_scan.calls

    def test_iter_search_is_lazy(self):
        counter = CountingPredicate(HasTagName("li"))
        matches = self.document.iter_search(Scope.DESCENDANT, counter)
        assert counter.calls == 0
        next(matches)
        calls_for_first = counter.calls
        next(matches)
        assert counter.calls > calls_for_first

    @pytest.mark.parametrize("name, value", [
        ("class", "item"),
        ("class", "content"),
        ("class", "missing"),
        ("data-price", "12"),
        ("href", "/next"),
    ])
    def test_first_matches_head_of_all(self, name, value):
        first = self.document.descendant_with_attribute(name, value_matches=value)
        every = self.document.descendants_with_attribute(name, value_matches=value)
        if every:
            assert first == every[0]
        else:
            assert first is None

    def test_descendants_equal_union_of_children(self):
        for tag in ["li", "div", "p", "span", "b"]:
            expected = []
            for node in [self.document] + list(self.document.iter_search(Scope.DESCENDANT)):
                for child in node.children_of_tag(tag):
                    if child not in expected:
                        expected.append(child)
            assert sorted(expected) == self.document.descendants_of_tag(tag)

    def test_all_is_never_none(self):
        assert self.document.descendants_of_tag("table") == []
        assert self.document.search(Scope.DESCENDANT, HasTagName("table")) == []

    def test_unknown_cardinality(self):
        with pytest.raises(ValueError):
            self.document.search(Scope.CHILD, None, "some")


class TestNamedQueries:
    """Test the attribute, class and tag query families"""

    def setup_method(self):
        self.document = parse(ARTICLE_MARKUP)
        self.ul = self.document.descendant_of_tag("ul")

    def test_with_attribute(self):
        assert len(self.ul.children_with_attribute("data-price")) == 2
        assert self.ul.child_with_attribute("data-price", value_matches="12").text_content == "Chair"
        assert self.ul.child_with_attribute("data-price", value_contains=",").text_content == "Lamp new"
        assert self.document.descendant_with_attribute("alt") is not None

    def test_with_class_compares_whole_value(self):
        assert len(self.ul.children_with_class("item")) == 2
        assert self.ul.child_with_class("sale") is None
        assert self.ul.child_with_class("item sale").text_content == "Chair"
        assert len(self.document.descendants_with_class("content")) == 2

    def test_attribute_contains_is_case_sensitive(self):
        assert self.ul.children_with_attribute("class", value_contains="sale") != []
        assert self.ul.children_with_attribute("class", value_contains="SALE") == []

    def test_siblings_with_class(self):
        first = self.ul.child_at(0)
        assert [node.text_content for node in first.siblings_with_class("item")] == ["Desk"]
        assert first.sibling_with_class("item sale").text_content == "Chair"
        assert first.sibling_with_attribute("data-price").text_content == "Chair"
        assert len(first.siblings_with_attribute("class")) == 2

    def test_of_tag_with_text(self):
        assert self.ul.child_of_tag("li", value_matches="Chair").class_value == "item sale"
        assert self.ul.child_of_tag("li", value_matches="Lamp") is None
        assert self.ul.child_of_tag("li", value_contains="Lamp") is not None
        assert len(self.ul.children_of_tag("li", value_contains="a")) == 2
        assert self.document.descendants_of_tag("b", value_matches="new")[0].tag_name == "b"

    def test_of_tag_requires_text_child(self):
        fragment = parse_fragment("<p><b>only element</b></p>")
        assert fragment.child_of_tag("p", value_contains="only") is None
        assert fragment.descendant_of_tag("b", value_contains="only") is not None

    def test_both_value_keywords_rejected(self):
        with pytest.raises(ValueError):
            self.ul.child_with_attribute("class", value_matches="item", value_contains="it")
        with pytest.raises(ValueError):
            self.ul.descendants_of_tag("li", value_matches="Desk", value_contains="D")


class TestPredicates:
    """Test the predicate classes on tree nodes"""

    def setup_method(self):
        fragment = parse_fragment('<a href="/x" data-a="one">link <b>bold</b></a>')
        self.anchor = fragment.child_of_tag("a").node
        self.text = self.anchor.first_child

    def test_has_tag_name(self):
        assert HasTagName("a").matches(self.anchor)
        assert not HasTagName("A").matches(self.anchor)
        assert not HasTagName("#text").matches(self.text)

    def test_has_attribute(self):
        assert HasAttribute("href").matches(self.anchor)
        assert not HasAttribute("src").matches(self.anchor)
        assert not HasAttribute("href").matches(self.text)

    def test_attribute_values(self):
        assert AttributeEquals("data-a", "one").matches(self.anchor)
        assert not AttributeEquals("data-a", "on").matches(self.anchor)
        assert AttributeContains("data-a", "on").matches(self.anchor)
        assert not AttributeContains("data-b", "").matches(self.anchor)

    def test_tag_text(self):
        assert TagTextEquals("a", "link ").matches(self.anchor)
        assert not TagTextEquals("a", "link").matches(self.anchor)
        assert TagTextContains("a", "lin").matches(self.anchor)
        assert not TagTextContains("a", "bold").matches(self.anchor)

    def test_equality_and_repr(self):
        assert AttributeEquals("class", "x") == AttributeEquals("class", "x")
        assert AttributeEquals("class", "x") != AttributeContains("class", "x")
        assert len({HasTagName("p"), HasTagName("p")}) == 1
        assert repr(TagTextContains("li", "a")) == "TagTextContains('li', 'a')"

    def test_first_attribute_occurrence_governs(self):
        fragment = parse_fragment('<p class="first" class="second">x</p>')
        p = fragment.child_of_tag("p")
        assert p.class_value == "first"
        assert AttributeEquals("class", "first").matches(p.node)
        assert p.node.node_type == NodeType.ELEMENT_NODE
