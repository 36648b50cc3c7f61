"""
Attr implementation for the parsed tree.
"""

from typing import Optional

from .node import Node, NodeType


class Attr(Node):
    """
    Attribute node implementation.

    This class represents one attribute of an Element node. Attributes are not
    part of the child list; they are reachable through ``Element.attributes``.
    """

    def __init__(self, name: str, value: str, owner_element: Optional['Element'] = None):
        """
        Initialize a new attribute.

        Args:
            name: The attribute name
            value: The attribute value
            owner_element: The element that owns this attribute
        """
        super().__init__(NodeType.ATTRIBUTE_NODE,
                         owner_element.owner_document if owner_element is not None else None)
        self.name = name
        self.value = value if value is not None else ""
        self.owner_element = owner_element
        self.node_name = name
        self.node_value = self.value

        # Namespace support
        self.namespace_uri: Optional[str] = None
        self.prefix: Optional[str] = None
        self.local_name = name

        # Handle namespaced attributes
        if ':' in name:
            self.prefix, self.local_name = name.split(':', 1)

            # Set namespace URI based on prefix
            if self.prefix == 'xml':
                self.namespace_uri = 'http://www.w3.org/XML/1998/namespace'
            elif self.prefix == 'xlink':
                self.namespace_uri = 'http://www.w3.org/1999/xlink'
            elif self.prefix == 'xmlns':
                self.namespace_uri = 'http://www.w3.org/2000/xmlns/'
        elif name == 'xmlns':
            self.namespace_uri = 'http://www.w3.org/2000/xmlns/'

    @property
    def text_content(self) -> str:
        """An attribute's text is its value."""
        return self.value

    def __repr__(self) -> str:
        return f"<Attr {self.name}={self.value!r}>"
