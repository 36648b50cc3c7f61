"""
Element implementation for the parsed tree.
"""

from typing import Dict, Iterator, Optional

from .node import Node, NodeType
from .attr import Attr


class Element(Node):
    """
    Element node implementation.

    Attributes are kept in source order; ``attributes`` maps each name to its
    ``Attr`` node.
    """

    def __init__(self,
                 tag_name: str,
                 namespace: Optional[str] = None,
                 owner_document: Optional['Document'] = None):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            namespace: Optional namespace URI
            owner_document: The document that owns this element
        """
        super().__init__(NodeType.ELEMENT_NODE, owner_document)

        self.tag_name = tag_name
        self.namespace_uri = namespace
        self.node_name = tag_name

        self.attributes: Dict[str, Attr] = {}

    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get the value of an attribute.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if the attribute doesn't exist
        """
        attr = self.attributes.get(name)
        return attr.value if attr is not None else None

    def iter_attributes(self) -> Iterator[Attr]:
        """Yield the attribute nodes in source order."""
        return iter(self.attributes.values())

    def set_attribute(self, name: str, value: str) -> None:
        """
        Add an attribute while the tree is being built.

        The first occurrence of a name wins; later duplicates are ignored, as an
        HTML parser does.

        Args:
            name: The attribute name
            value: The attribute value
        """
        if name in self.attributes:
            return
        self.attributes[name] = Attr(name, value, self)
