"""
Match rules applied by the traversal engine.

Every predicate takes a tree node and answers whether it matches. Comparison
is literal: no case folding and no whitespace normalization.
"""

from htmlnode.dom import Node, NodeType

CLASS_ATTRIBUTE = "class"


class Predicate:
    """Base class for match rules."""

    def matches(self, node: Node) -> bool:
        raise NotImplementedError

    def __call__(self, node: Node) -> bool:
        return self.matches(node)

    def _fields(self):
        return tuple(self.__dict__.values())

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._fields())

    def __repr__(self) -> str:
        args = ", ".join(repr(value) for value in self._fields())
        return f"{type(self).__name__}({args})"


def _element_tag(node: Node) -> str:
    if node.node_type != NodeType.ELEMENT_NODE:
        return ""
    return node.tag_name


def _first_attribute_value(node: Node, name: str):
    """Value of the first attribute called ``name`` in source order, or None."""
    if node.node_type != NodeType.ELEMENT_NODE:
        return None
    for attr in node.iter_attributes():
        if attr.name == name:
            return attr.value
    return None


class HasTagName(Predicate):
    """The node is an element with the given tag name."""

    def __init__(self, name: str):
        self.name = name

    def matches(self, node: Node) -> bool:
        return _element_tag(node) == self.name


class HasAttribute(Predicate):
    """The node carries an attribute with the given name."""

    def __init__(self, name: str):
        self.name = name

    def matches(self, node: Node) -> bool:
        return _first_attribute_value(node, self.name) is not None


class AttributeEquals(Predicate):
    """The named attribute's value equals ``value`` exactly."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

    def matches(self, node: Node) -> bool:
        return _first_attribute_value(node, self.name) == self.value


class AttributeContains(Predicate):
    """The named attribute's value contains ``value`` as a substring."""

    def __init__(self, name: str, value: str):
        self.name = name
        self.value = value

    def matches(self, node: Node) -> bool:
        actual = _first_attribute_value(node, self.name)
        return actual is not None and self.value in actual


class TagTextEquals(Predicate):
    """The node has the given tag and its first text child equals ``text``."""

    def __init__(self, tag: str, text: str):
        self.tag = tag
        self.text = text

    def matches(self, node: Node) -> bool:
        if _element_tag(node) != self.tag:
            return False
        text_child = node.first_text_child
        return text_child is not None and text_child.node_value == self.text


class TagTextContains(Predicate):
    """The node has the given tag and its first text child contains ``text``."""

    def __init__(self, tag: str, text: str):
        self.tag = tag
        self.text = text

    def matches(self, node: Node) -> bool:
        if _element_tag(node) != self.tag:
            return False
        text_child = node.first_text_child
        return text_child is not None and self.text in text_child.node_value


def class_equals(value: str) -> AttributeEquals:
    """Class queries compare the whole class attribute, not single class names."""
    return AttributeEquals(CLASS_ATTRIBUTE, value)


def attribute_predicate(name: str, value_matches=None, value_contains=None) -> Predicate:
    """
    Build the predicate behind the ``*_with_attribute`` queries.

    Raises:
        ValueError: If both ``value_matches`` and ``value_contains`` are given
    """
    if value_matches is not None and value_contains is not None:
        raise ValueError("Pass either value_matches or value_contains, not both")
    if value_matches is not None:
        return AttributeEquals(name, value_matches)
    if value_contains is not None:
        return AttributeContains(name, value_contains)
    return HasAttribute(name)


def tag_predicate(tag: str, value_matches=None, value_contains=None) -> Predicate:
    """
    Build the predicate behind the ``*_of_tag`` queries.

    Raises:
        ValueError: If both ``value_matches`` and ``value_contains`` are given
    """
    if value_matches is not None and value_contains is not None:
        raise ValueError("Pass either value_matches or value_contains, not both")
    if value_matches is not None:
        return TagTextEquals(tag, value_matches)
    if value_contains is not None:
        return TagTextContains(tag, value_contains)
    return HasTagName(tag)
