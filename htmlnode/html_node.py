"""
HTMLNode: a lightweight handle on one node of a parsed HTML tree.

A handle is either valid (it wraps a tree node) or null (``HTMLNode()``).
Every accessor on a null handle returns an empty value (``""``, ``[]``, ``0``
or ``None``) instead of raising. Handles never copy or modify the tree.
"""

import logging
from datetime import datetime, tzinfo
from typing import Dict, Iterator, List, Optional, Union

from htmlnode import conversions
from htmlnode.dom import Node, NodeType, TEXT_BEARING_TYPES, compare_document_order, render_subtree
from htmlnode.element_type import DOCUMENT_TYPES, ElementType, element_type_label
from htmlnode.predicates import attribute_predicate, class_equals, tag_predicate
from htmlnode.traversal import Cardinality, NodePredicate, Scope, iter_search, search
from htmlnode.utils.config import get_config
from htmlnode.utils.logging import log_exception

logger = logging.getLogger(__name__)

CLASS_KEY = "class"
HREF_KEY = "href"
SRC_KEY = "src"
ID_KEY = "id"

# Node kinds without a tag name of their own
_UNNAMED_TYPES = frozenset({
    NodeType.DOCUMENT_NODE,
    NodeType.HTML_DOCUMENT_NODE,
    NodeType.DOCB_DOCUMENT_NODE,
    NodeType.DOCUMENT_FRAGMENT_NODE,
})


def _wrap(node: Optional[Node]) -> Optional['HTMLNode']:
    return HTMLNode(node) if node is not None else None


def _collect_text_of_children(first: Optional[Node], result: List[str], recursive: bool) -> None:
    """
    Append the content of ``first`` and its following siblings to ``result``.

    Empty content is kept as ``""``. Other content is trimmed and dropped when
    nothing is left. With ``recursive`` each node's children are visited right
    after the node itself.
    """
    stack = [first] if first is not None else []
    while stack:
        node = stack.pop()
        if node.next_sibling is not None:
            stack.append(node.next_sibling)

        content = node.text_content
        if not content:
            result.append(content)
        else:
            trimmed = conversions.trim(content)
            if trimmed:
                result.append(trimmed)

        if recursive and node.first_child is not None:
            stack.append(node.first_child)


class HTMLNode:
    """
    Handle on a node of a parsed HTML document.

    Navigation properties return new handles (or None when there is nothing
    there). Content accessors read the underlying node. Named query methods
    such as ``descendants_of_tag`` run the shared search in ``htmlnode.traversal``.

    Handles compare by document position: two handles on the same node are
    equal, and ``<`` orders handles of the same tree in document order. A null
    handle is never equal to anything.
    """

    def __init__(self, node: Optional[Node] = None):
        """
        Wrap a tree node.

        Args:
            node: The node to wrap; None creates a null handle
        """
        self._node = node

    @property
    def node(self) -> Optional[Node]:
        """The wrapped tree node, or None for a null handle."""
        return self._node

    @property
    def is_null(self) -> bool:
        return self._node is None

    def __bool__(self) -> bool:
        # Defined explicitly so that truthiness does not fall back to __len__
        return self._node is not None

    # Navigation

    @property
    def parent(self) -> Optional['HTMLNode']:
        if self._node is None:
            return None
        if self._node.node_type == NodeType.ATTRIBUTE_NODE:
            return _wrap(self._node.owner_element)
        return _wrap(self._node.parent_node)

    @property
    def next_sibling(self) -> Optional['HTMLNode']:
        """The next node in the parent's child list, of any kind."""
        return _wrap(self._node.next_sibling) if self._node is not None else None

    @property
    def previous_sibling(self) -> Optional['HTMLNode']:
        """The previous node in the parent's child list, of any kind."""
        return _wrap(self._node.previous_sibling) if self._node is not None else None

    @property
    def first_child(self) -> Optional['HTMLNode']:
        return _wrap(self._node.first_child) if self._node is not None else None

    @property
    def last_child(self) -> Optional['HTMLNode']:
        return _wrap(self._node.last_child) if self._node is not None else None

    @property
    def children(self) -> List['HTMLNode']:
        """The direct element children; text, comments and other kinds are skipped."""
        if self._node is None:
            return []
        return [HTMLNode(child) for child in self._node.children]

    def child_at(self, index: int) -> Optional['HTMLNode']:
        """
        Get a direct element child by position.

        Args:
            index: 0-based index counting element children only

        Returns:
            The child handle, or None when ``index`` is out of range
        """
        if self._node is None or index < 0:
            return None
        for position, child in enumerate(iter_search(self._node, Scope.CHILD)):
            if position == index:
                return HTMLNode(child)
        return None

    @property
    def child_count(self) -> int:
        """Number of direct element children."""
        if self._node is None:
            return 0
        return self._node.child_element_count

    @property
    def document(self) -> Optional['HTMLNode']:
        """The document at the root of this node's tree, if the tree has one."""
        if self._node is None:
            return None

        root = self._node
        if root.node_type == NodeType.ATTRIBUTE_NODE and root.owner_element is not None:
            root = root.owner_element
        for ancestor in root.iter_ancestors():
            root = ancestor

        if root.node_type in DOCUMENT_TYPES:
            return HTMLNode(root)
        return None

    # Identity

    @property
    def tag_name(self) -> str:
        """
        The element's tag name.

        Other node kinds give their node name (``#text``, ``#comment``, the
        attribute name); documents, fragments and null handles give ``""``.
        """
        if self._node is None or self._node.node_type in _UNNAMED_TYPES:
            return ""
        return self._node.node_name or ""

    @property
    def node_type(self) -> Optional[ElementType]:
        if self._node is None:
            return None
        return ElementType.from_raw(self._node.node_type)

    @property
    def element_type(self) -> str:
        """Human-readable kind of the node, e.g. ``"Element"`` or ``"CData Section"``."""
        if self._node is None:
            return ""
        return element_type_label(self._node.node_type)

    def _is_type(self, *types: ElementType) -> Optional[bool]:
        if self._node is None:
            return None
        return self._node.node_type in types

    @property
    def is_attribute_node(self) -> Optional[bool]:
        return self._is_type(ElementType.ATTRIBUTE)

    @property
    def is_document_node(self) -> Optional[bool]:
        return self._is_type(*DOCUMENT_TYPES)

    @property
    def is_element_node(self) -> Optional[bool]:
        return self._is_type(ElementType.ELEMENT)

    @property
    def is_text_node(self) -> Optional[bool]:
        return self._is_type(ElementType.TEXT)

    # Attributes

    def attribute_for_name(self, name: str) -> str:
        """
        Get an attribute value.

        Args:
            name: The attribute name, compared case-sensitively

        Returns:
            The value, or ``""`` when the node has no such attribute
        """
        if self._node is None or self._node.node_type != NodeType.ELEMENT_NODE:
            return ""
        for attr in self._node.iter_attributes():
            if attr.name == name:
                return attr.value
        return ""

    @property
    def attributes(self) -> Optional[Dict[str, str]]:
        """
        A fresh name to value mapping of the node's attributes.

        Returns None for a null handle and an empty dict for nodes without
        attributes.
        """
        if self._node is None:
            return None
        if self._node.node_type != NodeType.ELEMENT_NODE:
            return {}
        return {attr.name: attr.value for attr in self._node.iter_attributes()}

    @property
    def class_value(self) -> str:
        return self.attribute_for_name(CLASS_KEY)

    @property
    def href_value(self) -> str:
        return self.attribute_for_name(HREF_KEY)

    @property
    def src_value(self) -> str:
        return self.attribute_for_name(SRC_KEY)

    @property
    def id_value(self) -> str:
        return self.attribute_for_name(ID_KEY)

    # Text content of the node and its descendants

    @property
    def raw_text_content(self) -> str:
        """All text of this node and its descendants, unmodified."""
        if self._node is None:
            return ""
        return self._node.text_content

    @property
    def text_content(self) -> str:
        return conversions.trim(self.raw_text_content)

    @property
    def text_content_collapsing_whitespace(self) -> str:
        """``text_content`` with each run of whitespace replaced by a single space."""
        return conversions.collapse_whitespace(self.raw_text_content)

    @property
    def text_content_of_children(self) -> List[str]:
        """Trimmed text of each direct child, whitespace-only children skipped."""
        result: List[str] = []
        if self._node is not None:
            _collect_text_of_children(self._node.first_child, result, recursive=False)
        return result

    @property
    def text_content_of_descendants(self) -> List[str]:
        """Like ``text_content_of_children`` over the whole subtree, in pre-order."""
        result: List[str] = []
        if self._node is not None:
            _collect_text_of_children(self._node.first_child, result, recursive=True)
        return result

    # String value of the node itself

    @property
    def raw_string_value(self) -> str:
        """
        The node's own string, unmodified.

        For elements this is the content of the first text or CDATA child only,
        not of the whole subtree. Text nodes and attributes give their own value.
        """
        node = self._node
        if node is None:
            return ""
        if node.node_type in TEXT_BEARING_TYPES:
            return node.node_value or ""
        if node.node_type == NodeType.ATTRIBUTE_NODE:
            return node.value
        text_child = node.first_text_child
        if text_child is None:
            return ""
        return text_child.node_value or ""

    @property
    def string_value(self) -> str:
        return conversions.trim(self.raw_string_value)

    @property
    def string_value_collapsing_whitespace(self) -> str:
        return conversions.collapse_whitespace(self.raw_string_value)

    # Markup

    @property
    def markup_content(self) -> str:
        """
        The node and its subtree serialized as HTML, untrimmed.

        Returns ``""`` for a null handle or when serialization fails.
        """
        if self._node is None:
            return ""
        options = get_config().get("serializer", {})
        try:
            return render_subtree(self._node, options)
        except Exception as e:
            log_exception(logger, e, f"Could not serialize {self._node!r}", level=logging.DEBUG)
            return ""

    @property
    def markup(self) -> str:
        """The node and its subtree serialized as HTML, trimmed."""
        return conversions.trim(self.markup_content)

    # Conversions

    @property
    def integer_value(self) -> int:
        """``string_value`` as an integer, 0 when it is not one."""
        return conversions.integer_value(self.string_value)

    @property
    def double_value(self) -> float:
        """``string_value`` as a float, 0.0 when it is not a number."""
        return conversions.double_value(self.string_value)

    def double_value_for_locale(self, identifier: Optional[str] = None,
                                considering_plus_sign: bool = False) -> float:
        """
        Parse ``string_value`` as a number written for a locale.

        Args:
            identifier: Locale identifier such as ``en_US`` or ``de-CH``
            considering_plus_sign: Accept a leading ``+``

        Returns:
            The number, or 0.0 when the string or the locale is unusable
        """
        return conversions.double_value_for_locale(
            self.string_value, identifier, considering_plus_sign)

    def content_double_value_for_locale(self, identifier: Optional[str] = None,
                                        considering_plus_sign: bool = False) -> float:
        """Same as ``double_value_for_locale`` over ``text_content``."""
        return conversions.double_value_for_locale(
            self.text_content, identifier, considering_plus_sign)

    def date_value_for_format(self, pattern: str,
                              time_zone: Union[str, tzinfo, None] = None) -> Optional[datetime]:
        """
        Parse ``string_value`` with an LDML date pattern.

        Args:
            pattern: Pattern such as ``"yyyy-MM-dd 'at' HH:mm"``
            time_zone: IANA name or ``tzinfo``; the system zone when omitted

        Returns:
            An aware datetime, or None when the string does not match
        """
        return conversions.date_value_for_format(self.string_value, pattern, time_zone)

    def content_date_value_for_format(self, pattern: str,
                                      time_zone: Union[str, tzinfo, None] = None) -> Optional[datetime]:
        """Same as ``date_value_for_format`` over ``text_content``."""
        return conversions.date_value_for_format(self.text_content, pattern, time_zone)

    # Generic search

    def search(self, scope: Scope, predicate: Optional[NodePredicate] = None,
               cardinality: Cardinality = Cardinality.ALL) -> Union['HTMLNode', List['HTMLNode'], None]:
        """
        Search relative to this node.

        Args:
            scope: ``Scope.CHILD``, ``Scope.DESCENDANT`` or ``Scope.SIBLING``
            predicate: Callable taking a tree node; None matches every element
            cardinality: ``Cardinality.FIRST`` or ``Cardinality.ALL``

        Returns:
            A handle or None for ``FIRST``, a list for ``ALL``
        """
        return search(self._node, scope, predicate, cardinality)

    def iter_search(self, scope: Scope, predicate: Optional[NodePredicate] = None) -> Iterator['HTMLNode']:
        """Lazily yield handles on the matches of a search relative to this node."""
        for node in iter_search(self._node, scope, predicate):
            yield HTMLNode(node)

    # Queries by attribute

    def child_with_attribute(self, name: str, value_matches: Optional[str] = None,
                             value_contains: Optional[str] = None) -> Optional['HTMLNode']:
        """
        First direct child element carrying the attribute ``name``.

        Args:
            name: Attribute name
            value_matches: The attribute value must equal this
            value_contains: The attribute value must contain this

        Returns:
            The matching child, or None

        Raises:
            ValueError: If both ``value_matches`` and ``value_contains`` are given
        """
        predicate = attribute_predicate(name, value_matches, value_contains)
        return self.search(Scope.CHILD, predicate, Cardinality.FIRST)

    def children_with_attribute(self, name: str, value_matches: Optional[str] = None,
                                value_contains: Optional[str] = None) -> List['HTMLNode']:
        predicate = attribute_predicate(name, value_matches, value_contains)
        return self.search(Scope.CHILD, predicate, Cardinality.ALL)

    def descendant_with_attribute(self, name: str, value_matches: Optional[str] = None,
                                  value_contains: Optional[str] = None) -> Optional['HTMLNode']:
        predicate = attribute_predicate(name, value_matches, value_contains)
        return self.search(Scope.DESCENDANT, predicate, Cardinality.FIRST)

    def descendants_with_attribute(self, name: str, value_matches: Optional[str] = None,
                                   value_contains: Optional[str] = None) -> List['HTMLNode']:
        predicate = attribute_predicate(name, value_matches, value_contains)
        return self.search(Scope.DESCENDANT, predicate, Cardinality.ALL)

    def sibling_with_attribute(self, name: str, value_matches: Optional[str] = None,
                               value_contains: Optional[str] = None) -> Optional['HTMLNode']:
        """First following sibling element carrying the attribute ``name``."""
        predicate = attribute_predicate(name, value_matches, value_contains)
        return self.search(Scope.SIBLING, predicate, Cardinality.FIRST)

    def siblings_with_attribute(self, name: str, value_matches: Optional[str] = None,
                                value_contains: Optional[str] = None) -> List['HTMLNode']:
        predicate = attribute_predicate(name, value_matches, value_contains)
        return self.search(Scope.SIBLING, predicate, Cardinality.ALL)

    # Queries by class

    def child_with_class(self, value: str) -> Optional['HTMLNode']:
        """First direct child whose whole class attribute equals ``value``."""
        return self.search(Scope.CHILD, class_equals(value), Cardinality.FIRST)

    def children_with_class(self, value: str) -> List['HTMLNode']:
        return self.search(Scope.CHILD, class_equals(value), Cardinality.ALL)

    def descendant_with_class(self, value: str) -> Optional['HTMLNode']:
        return self.search(Scope.DESCENDANT, class_equals(value), Cardinality.FIRST)

    def descendants_with_class(self, value: str) -> List['HTMLNode']:
        return self.search(Scope.DESCENDANT, class_equals(value), Cardinality.ALL)

    def sibling_with_class(self, value: str) -> Optional['HTMLNode']:
        return self.search(Scope.SIBLING, class_equals(value), Cardinality.FIRST)

    def siblings_with_class(self, value: str) -> List['HTMLNode']:
        return self.search(Scope.SIBLING, class_equals(value), Cardinality.ALL)

    # Queries by tag

    def child_of_tag(self, tag: str, value_matches: Optional[str] = None,
                     value_contains: Optional[str] = None) -> Optional['HTMLNode']:
        """
        First direct child element with tag ``tag``.

        With ``value_matches`` or ``value_contains`` the element's first text
        child must also equal or contain that value.

        Raises:
            ValueError: If both ``value_matches`` and ``value_contains`` are given
        """
        predicate = tag_predicate(tag, value_matches, value_contains)
        return self.search(Scope.CHILD, predicate, Cardinality.FIRST)

    def children_of_tag(self, tag: str, value_matches: Optional[str] = None,
                        value_contains: Optional[str] = None) -> List['HTMLNode']:
        predicate = tag_predicate(tag, value_matches, value_contains)
        return self.search(Scope.CHILD, predicate, Cardinality.ALL)

    def descendant_of_tag(self, tag: str, value_matches: Optional[str] = None,
                          value_contains: Optional[str] = None) -> Optional['HTMLNode']:
        predicate = tag_predicate(tag, value_matches, value_contains)
        return self.search(Scope.DESCENDANT, predicate, Cardinality.FIRST)

    def descendants_of_tag(self, tag: str, value_matches: Optional[str] = None,
                           value_contains: Optional[str] = None) -> List['HTMLNode']:
        predicate = tag_predicate(tag, value_matches, value_contains)
        return self.search(Scope.DESCENDANT, predicate, Cardinality.ALL)

    def sibling_of_tag(self, tag: str, value_matches: Optional[str] = None,
                       value_contains: Optional[str] = None) -> Optional['HTMLNode']:
        predicate = tag_predicate(tag, value_matches, value_contains)
        return self.search(Scope.SIBLING, predicate, Cardinality.FIRST)

    def siblings_of_tag(self, tag: str, value_matches: Optional[str] = None,
                        value_contains: Optional[str] = None) -> List['HTMLNode']:
        predicate = tag_predicate(tag, value_matches, value_contains)
        return self.search(Scope.SIBLING, predicate, Cardinality.ALL)

    # Sequence protocol

    def __iter__(self) -> Iterator['HTMLNode']:
        """Yield the direct element children, starting over on every call."""
        return self.iter_search(Scope.CHILD)

    def __len__(self) -> int:
        return self.child_count

    # Equality and ordering

    def __eq__(self, other) -> bool:
        if not isinstance(other, HTMLNode):
            return NotImplemented
        if self._node is None or other._node is None:
            return False
        return compare_document_order(self._node, other._node) == 0

    def __hash__(self) -> int:
        return hash(id(self._node)) if self._node is not None else 0

    def __lt__(self, other) -> bool:
        if not isinstance(other, HTMLNode):
            return NotImplemented
        if self._node is None or other._node is None:
            return False
        return compare_document_order(self._node, other._node) == -1

    # Representation

    def __str__(self) -> str:
        if self._node is None:
            return ""
        attributes = self.attributes if self._node.node_type == NodeType.ELEMENT_NODE else None
        return (f"type: {self.element_type} - tag name: {self.tag_name} - "
                f"number of children: {self.child_count}\n"
                f"attributes: {attributes}\n"
                f"HTML: {self.markup}")

    def __repr__(self) -> str:
        if self._node is None:
            return "HTMLNode(None)"
        return f"HTMLNode({self._node!r})"
