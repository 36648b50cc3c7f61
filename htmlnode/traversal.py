"""
Generalized tree search.

Every named query on ``HTMLNode`` is ``search`` with its scope, predicate and
cardinality fixed at the call site. Descendant scans walk the tree in
depth-first pre-order with an explicit stack, so deeply nested documents do
not hit the interpreter's recursion limit.
"""

from enum import Enum
from typing import Callable, Iterator, List, Optional, Union

from htmlnode.dom import Node, NodeType

NodePredicate = Callable[[Node], bool]


class Scope(Enum):
    """Which nodes a search considers, relative to its start node."""
    CHILD = "child"
    DESCENDANT = "descendant"
    SIBLING = "sibling"


class Cardinality(Enum):
    """How many matches a search returns."""
    FIRST = "first"
    ALL = "all"


def _iter_children(start: Node) -> Iterator[Node]:
    child = start.first_child
    while child is not None:
        yield child
        child = child.next_sibling


def _iter_following_siblings(start: Node) -> Iterator[Node]:
    sibling = start.next_sibling
    while sibling is not None:
        yield sibling
        sibling = sibling.next_sibling


def _iter_descendants(start: Node) -> Iterator[Node]:
    # A node is yielded before its children are pushed
    stack = list(reversed(start.child_nodes))
    while stack:
        node = stack.pop()
        yield node
        if node.child_nodes:
            stack.extend(reversed(node.child_nodes))


_FRONTIERS = {
    Scope.CHILD: _iter_children,
    Scope.DESCENDANT: _iter_descendants,
    Scope.SIBLING: _iter_following_siblings,
}


def iter_search(start: Optional[Node], scope: Scope,
                predicate: Optional[NodePredicate] = None) -> Iterator[Node]:
    """
    Lazily yield the elements in ``scope`` of ``start`` that satisfy ``predicate``.

    Args:
        start: The node the search is relative to; None yields nothing
        scope: Which nodes to consider
        predicate: Callable taking a tree node; None matches every element

    Yields:
        Matching element nodes in document order
    """
    if start is None:
        return

    try:
        frontier = _FRONTIERS[scope]
    except KeyError:
        raise ValueError(f"Unknown search scope: {scope!r}") from None

    for node in frontier(start):
        if node.node_type != NodeType.ELEMENT_NODE:
            continue
        if predicate is None or predicate(node):
            yield node


def search(start: Optional[Node], scope: Scope, predicate: Optional[NodePredicate] = None,
           cardinality: Cardinality = Cardinality.ALL) -> Union['HTMLNode', List['HTMLNode'], None]:
    """
    Run a search and wrap the matches in handles.

    Args:
        start: The node the search is relative to
        scope: Which nodes to consider
        predicate: Callable taking a tree node; None matches every element
        cardinality: ``FIRST`` for the first match, ``ALL`` for every match

    Returns:
        The first matching handle or None for ``FIRST``; a list, possibly
        empty, for ``ALL``
    """
    # Imported here to avoid a cycle with html_node
    from htmlnode.html_node import HTMLNode

    matches = iter_search(start, scope, predicate)

    if cardinality == Cardinality.FIRST:
        node = next(matches, None)
        return HTMLNode(node) if node is not None else None

    if cardinality == Cardinality.ALL:
        return [HTMLNode(node) for node in matches]

    raise ValueError(f"Unknown search cardinality: {cardinality!r}")
