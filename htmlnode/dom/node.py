"""
Node implementation for the parsed tree.
This module implements the base Node of the tree that HTMLNode handles point into.
"""

from enum import IntEnum
from typing import List, Optional, Iterator


class NodeType(IntEnum):
    """Raw node type codes (DOM level 1 codes plus DTD, XInclude and DOCB kinds)."""
    ELEMENT_NODE = 1
    ATTRIBUTE_NODE = 2
    TEXT_NODE = 3
    CDATA_SECTION_NODE = 4
    ENTITY_REFERENCE_NODE = 5  # Legacy
    ENTITY_NODE = 6  # Legacy
    PROCESSING_INSTRUCTION_NODE = 7
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10
    DOCUMENT_FRAGMENT_NODE = 11
    NOTATION_NODE = 12  # Legacy
    HTML_DOCUMENT_NODE = 13
    DTD_NODE = 14
    ELEMENT_DECL = 15
    ATTRIBUTE_DECL = 16
    ENTITY_DECL = 17
    NAMESPACE_DECL = 18
    XINCLUDE_START = 19
    XINCLUDE_END = 20
    DOCB_DOCUMENT_NODE = 21


# Node kinds whose value is character data
TEXT_BEARING_TYPES = frozenset({
    NodeType.TEXT_NODE,
    NodeType.CDATA_SECTION_NODE,
})


class Node:
    """
    Base Node implementation for the parsed tree.

    Nodes are linked to their parent and siblings the way a DOM is. The tree is
    built once by the parser through ``append_child`` and treated as read-only
    afterwards.
    """

    def __init__(self, node_type: int, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The raw type code of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.first_child: Optional['Node'] = None
        self.last_child: Optional['Node'] = None
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        # Node properties
        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    @property
    def child_element_count(self) -> int:
        """Get the number of child elements."""
        return sum(1 for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE)

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Only the tree builder calls this; the query layer never mutates the tree.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        if child.parent_node is not None:
            raise ValueError("Node already has a parent")

        child.parent_node = self

        if self.child_nodes:
            last_child = self.child_nodes[-1]
            last_child.next_sibling = child
            child.previous_sibling = last_child

        self.child_nodes.append(child)

        if self.first_child is None:
            self.first_child = child
        self.last_child = child

        return child

    @property
    def first_text_child(self) -> Optional['Node']:
        """The first Text or CDATA child of this node, or None."""
        for child in self.child_nodes:
            if child.node_type in TEXT_BEARING_TYPES:
                return child
        return None

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def iter_ancestors(self) -> Iterator['Node']:
        """Yield the parent chain of this node, nearest first."""
        current = self.parent_node
        while current is not None:
            yield current
            current = current.parent_node

    @property
    def text_content(self) -> str:
        """
        Get the text content of this node and all its descendants.

        Character data nodes return their own value. Every other node returns the
        concatenated value of its descendant text and CDATA nodes, in document order.
        Comments and processing instructions do not contribute.
        """
        if self.node_type in TEXT_BEARING_TYPES or self.node_type == NodeType.COMMENT_NODE:
            return self.node_value or ""

        parts = []
        stack = list(reversed(self.child_nodes))
        while stack:
            node = stack.pop()
            if node.node_type in TEXT_BEARING_TYPES:
                parts.append(node.node_value or "")
            elif node.child_nodes:
                stack.extend(reversed(node.child_nodes))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.node_name}>"
