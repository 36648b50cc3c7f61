"""
Element-type classification of tree nodes and their human-readable labels.
"""

from enum import IntEnum
from typing import Optional


class ElementType(IntEnum):
    """The kinds of node a handle can point at, keyed by raw type code."""
    ELEMENT = 1
    ATTRIBUTE = 2
    TEXT = 3
    CDATA_SECTION = 4
    ENTITY_REF = 5
    ENTITY = 6
    PROCESSING_INSTRUCTION = 7
    COMMENT = 8
    DOCUMENT = 9
    DOCUMENT_TYPE = 10
    DOCUMENT_FRAGMENT = 11
    NOTATION = 12
    HTML_DOCUMENT = 13
    DTD = 14
    ELEMENT_DECL = 15
    ATTRIBUTE_DECL = 16
    ENTITY_DECL = 17
    NAMESPACE_DECL = 18
    XINCLUDE_START = 19
    XINCLUDE_END = 20
    DOCB_DOCUMENT = 21

    @classmethod
    def from_raw(cls, raw_type: Optional[int]) -> Optional['ElementType']:
        """Map a raw node type code to its member, or None for unknown codes."""
        try:
            return cls(raw_type)
        except (ValueError, TypeError):
            return None

    @property
    def label(self) -> str:
        return ELEMENT_TYPE_LABELS[self]


ELEMENT_TYPE_LABELS = {
    ElementType.ELEMENT: "Element",
    ElementType.ATTRIBUTE: "Attribute",
    ElementType.TEXT: "Text",
    ElementType.CDATA_SECTION: "CData Section",
    ElementType.ENTITY_REF: "Entity Ref",
    ElementType.ENTITY: "Entity",
    ElementType.PROCESSING_INSTRUCTION: "Pi",
    ElementType.COMMENT: "Comment",
    ElementType.DOCUMENT: "Document",
    ElementType.DOCUMENT_TYPE: "Document Type",
    ElementType.DOCUMENT_FRAGMENT: "Document Frag",
    ElementType.NOTATION: "Notation",
    ElementType.HTML_DOCUMENT: "HTML Document",
    ElementType.DTD: "DTD",
    ElementType.ELEMENT_DECL: "Element Declaration",
    ElementType.ATTRIBUTE_DECL: "Attribute Declaration",
    ElementType.ENTITY_DECL: "Entity Declaration",
    ElementType.NAMESPACE_DECL: "Namespace Declaration",
    ElementType.XINCLUDE_START: "Xinclude Start",
    ElementType.XINCLUDE_END: "Xinclude End",
    ElementType.DOCB_DOCUMENT: "DOCB Document",
}

DOCUMENT_TYPES = frozenset({
    ElementType.DOCUMENT,
    ElementType.HTML_DOCUMENT,
    ElementType.DOCB_DOCUMENT,
})


def element_type_label(raw_type: Optional[int]) -> str:
    """
    Get the label for a raw node type code.

    Args:
        raw_type: The raw code stored on a tree node

    Returns:
        The label, or an empty string for codes outside the enumeration
    """
    element_type = ElementType.from_raw(raw_type)
    if element_type is None:
        return ""
    return element_type.label
