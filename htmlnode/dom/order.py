"""
Document order comparison for nodes of the parsed tree.
"""

from typing import List, Optional

from .node import Node, NodeType


def _path_from_root(node: Node) -> List[Node]:
    """Return the ancestor chain of ``node``, root first, ending with the node itself."""
    path = [node]
    path.extend(node.iter_ancestors())
    path.reverse()
    return path


def _owner_of_attribute(node: Node) -> Node:
    # Attributes sit outside the child lists; order them right after their element.
    if node.node_type == NodeType.ATTRIBUTE_NODE and getattr(node, 'owner_element', None) is not None:
        return node.owner_element
    return node


def compare_document_order(first: Node, second: Node) -> Optional[int]:
    """
    Compare two nodes by their position in document order.

    Args:
        first: The first node
        second: The second node

    Returns:
        -1 if ``first`` precedes ``second``, 0 if they are the same position,
        1 if ``first`` follows ``second``, or None when the nodes do not share a
        root and have no defined order.
    """
    if first is second:
        return 0

    first_anchor = _owner_of_attribute(first)
    second_anchor = _owner_of_attribute(second)
    if first_anchor is second_anchor:
        # An element precedes its own attributes; two attributes keep source order
        if first_anchor is first:
            return -1
        if second_anchor is second:
            return 1
        names = list(first_anchor.attributes)
        return -1 if names.index(first.name) < names.index(second.name) else 1

    first_path = _path_from_root(first_anchor)
    second_path = _path_from_root(second_anchor)
    if first_path[0] is not second_path[0]:
        return None

    depth = 0
    limit = min(len(first_path), len(second_path))
    while depth < limit and first_path[depth] is second_path[depth]:
        depth += 1

    if depth == len(first_path):
        # first is an ancestor of second
        return -1
    if depth == len(second_path):
        return 1

    siblings = first_path[depth - 1].child_nodes
    first_index = siblings.index(first_path[depth])
    second_index = siblings.index(second_path[depth])
    return -1 if first_index < second_index else 1
