"""
Character data nodes for the parsed tree.
"""

from typing import Optional

from .node import Node, NodeType


class CharacterData(Node):
    """Common base for nodes that only carry a string."""

    def __init__(self, node_type: int, node_name: str, data: str,
                 owner_document: Optional['Document'] = None):
        super().__init__(node_type, owner_document)

        # Ensure data is not None
        if data is None:
            data = ""

        self.node_name = node_name
        self.node_value = data


class Text(CharacterData):
    """
    Text node implementation.

    This class represents a run of character data in the tree.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        super().__init__(NodeType.TEXT_NODE, "#text", data, owner_document)


class Comment(CharacterData):
    """
    Comment node implementation.

    This class represents a comment node in the tree.
    """

    def __init__(self, data: str, owner_document: Optional['Document'] = None):
        super().__init__(NodeType.COMMENT_NODE, "#comment", data, owner_document)
