"""
Parsed tree for the htmlnode query layer.
This package provides the node classes an HTML parse produces and the
document-order and serialization primitives the query layer relies on.
"""

from .node import Node, NodeType, TEXT_BEARING_TYPES
from .attr import Attr
from .element import Element
from .text import CharacterData, Text, Comment
from .document import Document, DocumentFragment, DocumentType
from .order import compare_document_order
from .serializer import TreeWalker, render_subtree

__all__ = [
    'Node', 'NodeType', 'TEXT_BEARING_TYPES', 'Attr', 'Element',
    'CharacterData', 'Text', 'Comment', 'Document',
    'DocumentFragment', 'DocumentType', 'compare_document_order', 'TreeWalker',
    'render_subtree',
]
