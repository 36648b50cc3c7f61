"""
Document implementation for the parsed tree.
This module implements the document root, the doctype and document fragments.
"""

import logging
from typing import List, Optional

from .node import Node, NodeType
from .element import Element
from .text import Text, Comment

logger = logging.getLogger(__name__)


class DocumentType(Node):
    """The <!DOCTYPE> node of a document."""

    def __init__(self, name: str, public_id: str = "", system_id: str = "",
                 owner_document: Optional['Document'] = None):
        super().__init__(NodeType.DOCUMENT_TYPE_NODE, owner_document)
        self.name = name or ""
        self.public_id = public_id or ""
        self.system_id = system_id or ""
        self.node_name = self.name


class Document(Node):
    """
    Document node implementation.

    An HTML parse produces a document of type ``HTML_DOCUMENT_NODE``; a plain
    ``Document()`` is a generic ``DOCUMENT_NODE``.
    """

    def __init__(self, node_type: int = NodeType.DOCUMENT_NODE):
        """Initialize a new, empty Document object."""
        super().__init__(node_type)
        self.node_name = "#document"
        self.document_element: Optional[Element] = None
        self.head: Optional[Element] = None
        self.body: Optional[Element] = None
        self.url: Optional[str] = None
        self.character_set: str = "UTF-8"

        # Error handling
        self._errors: List[str] = []

    def create_element(self, tag_name: str, namespace: Optional[str] = None) -> Element:
        """
        Create a new element with the specified tag name.

        Args:
            tag_name: The tag name of the element
            namespace: Optional namespace URI

        Returns:
            The new element
        """
        return Element(tag_name, namespace, self)

    def create_text_node(self, data: str) -> Text:
        """Create a new text node owned by this document."""
        return Text(data, self)

    def create_comment(self, data: str) -> Comment:
        """Create a new comment node owned by this document."""
        return Comment(data, self)

    def create_doctype(self, name: str, public_id: str = "", system_id: str = "") -> DocumentType:
        """Create a new doctype node owned by this document."""
        return DocumentType(name, public_id, system_id, self)

    def create_document_fragment(self) -> 'DocumentFragment':
        """Create an empty fragment owned by this document."""
        return DocumentFragment(self)

    def update_references(self) -> None:
        """Update references to the root, head and body elements."""
        self.document_element = None
        self.head = None
        self.body = None

        for child in self.child_nodes:
            if child.node_type == NodeType.ELEMENT_NODE:
                self.document_element = child
                break

        if self.document_element is None:
            logger.debug("Document has no root element")
            return

        for child in self.document_element.children:
            if child.tag_name == 'head' and self.head is None:
                self.head = child
            elif child.tag_name == 'body' and self.body is None:
                self.body = child

        logger.debug(f"Updated references - head: {self.head is not None}, body: {self.body is not None}")

    def handle_error(self, error_message: str) -> None:
        """
        Record an error that occurred while this document was produced.

        Args:
            error_message: The error message
        """
        logger.debug(error_message)
        self._errors.append(error_message)

    def get_errors(self) -> List[str]:
        """
        Get the list of errors that occurred during document processing.

        Returns:
            List of error messages
        """
        return list(self._errors)


class DocumentFragment(Node):
    """A parentless container for the result of a fragment parse."""

    def __init__(self, owner_document: Optional[Document] = None):
        super().__init__(NodeType.DOCUMENT_FRAGMENT_NODE, owner_document)
        self.node_name = "#document-fragment"
