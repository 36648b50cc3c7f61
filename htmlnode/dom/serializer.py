"""
Markup serialization for the parsed tree.

The tree is walked with an html5lib ``NonRecursiveTreeWalker`` and the token
stream is rendered by html5lib's ``HTMLSerializer``.
"""

import logging
from typing import Any, Dict, Optional

from html5lib.serializer import HTMLSerializer
from html5lib.treewalkers import base

from .node import Node, NodeType

logger = logging.getLogger(__name__)

DEFAULT_SERIALIZER_OPTIONS = {
    "quote_attr_values": "always",
    "omit_optional_tags": False,
    "minimize_boolean_attributes": False,
}


class TreeWalker(base.NonRecursiveTreeWalker):
    """html5lib tree walker over ``htmlnode.dom`` nodes."""

    def getNodeDetails(self, node):
        if node.node_type == NodeType.DOCUMENT_TYPE_NODE:
            return base.DOCTYPE, node.name, node.public_id or None, node.system_id or None

        elif node.node_type in (NodeType.TEXT_NODE, NodeType.CDATA_SECTION_NODE):
            return base.TEXT, node.node_value

        elif node.node_type == NodeType.ELEMENT_NODE:
            attrs = {}
            for attr in node.iter_attributes():
                if attr.namespace_uri:
                    attrs[(attr.namespace_uri, attr.local_name)] = attr.value
                else:
                    attrs[(None, attr.name)] = attr.value
            return (base.ELEMENT, node.namespace_uri, node.tag_name,
                    attrs, node.has_child_nodes())

        elif node.node_type == NodeType.COMMENT_NODE:
            return base.COMMENT, node.node_value

        elif node.node_type in (NodeType.DOCUMENT_NODE, NodeType.HTML_DOCUMENT_NODE,
                                NodeType.DOCUMENT_FRAGMENT_NODE):
            return (base.DOCUMENT,)

        else:
            return base.UNKNOWN, node.node_type

    def getFirstChild(self, node):
        return node.first_child

    def getNextSibling(self, node):
        return node.next_sibling

    def getParentNode(self, node):
        return node.parent_node


def render_subtree(node: Node, options: Optional[Dict[str, Any]] = None) -> str:
    """
    Serialize a node and its subtree back to HTML markup.

    Attribute nodes render as their value.

    Args:
        node: The node to serialize
        options: Keyword options for ``HTMLSerializer``; defaults to
            ``DEFAULT_SERIALIZER_OPTIONS``

    Returns:
        The markup text
    """
    if node.node_type == NodeType.ATTRIBUTE_NODE:
        return node.value

    serializer_options = dict(DEFAULT_SERIALIZER_OPTIONS)
    if options:
        serializer_options.update(options)

    serializer = HTMLSerializer(**serializer_options)
    return serializer.render(TreeWalker(node))
