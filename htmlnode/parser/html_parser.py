"""
HTML parser implementation.
This module turns markup into the ``htmlnode.dom`` tree using html5lib, with
BeautifulSoup's ``UnicodeDammit`` handling byte input.
"""

import logging
import re
from typing import Optional, Union

import html5lib
from bs4 import UnicodeDammit

from htmlnode.dom import (
    Document, DocumentFragment, Element, Node, NodeType,
)
from htmlnode.utils.config import Config, get_config

logger = logging.getLogger(__name__)

# C0 control characters other than tab, newline, form feed and carriage return
_CONTROL_CHARACTERS = re.compile('[\x00-\x08\x0b\x0e-\x1f]')


class HTMLParser:
    """HTML parser producing ``htmlnode.dom`` trees through html5lib."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the HTML parser.

        Args:
            config: Configuration to read ``parser.*`` options from; the
                process-wide configuration when omitted
        """
        self.config = config if config is not None else get_config()
        self.keep_whitespace_text = bool(self.config.get("parser.keep_whitespace_text", True))
        self.clean_control_characters = bool(self.config.get("parser.clean_control_characters", True))
        logger.debug("HTML parser initialized")

    def parse(self, html_content: Union[str, bytes], base_url: Optional[str] = None) -> Document:
        """
        Parse a complete HTML document.

        Args:
            html_content: HTML content to parse, as text or bytes
            base_url: Optional URL recorded on the document

        Returns:
            Document: The parsed document (type ``HTML_DOCUMENT_NODE``)
        """
        document = Document(NodeType.HTML_DOCUMENT_NODE)
        document.url = base_url

        text = self._prepare(html_content, document)
        logger.debug(f"Parsing HTML content (first 100 chars): {text[:100]}...")

        parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        parsed = parser.parse(text)
        parsed.normalize()
        for error in parser.errors:
            document.handle_error(f"Parse error at {error[0]}: {error[1]}")

        for child in parsed.childNodes:
            self._convert_parsed_nodes(child, document, document)

        document.update_references()
        return document

    def parse_fragment(self, html_content: Union[str, bytes], container: str = "div") -> DocumentFragment:
        """
        Parse an HTML fragment as if it were the content of ``container``.

        Args:
            html_content: HTML content to parse, as text or bytes
            container: Name of the context element

        Returns:
            DocumentFragment: A fragment holding the parsed nodes
        """
        document = Document(NodeType.HTML_DOCUMENT_NODE)
        fragment = document.create_document_fragment()

        text = self._prepare(html_content, document)

        parser = html5lib.HTMLParser(tree=html5lib.treebuilders.getTreeBuilder("dom"))
        parsed = parser.parseFragment(text, container=container)
        parsed.normalize()
        for error in parser.errors:
            document.handle_error(f"Parse error at {error[0]}: {error[1]}")

        for child in parsed.childNodes:
            self._convert_parsed_nodes(child, fragment, document)

        return fragment

    def _prepare(self, html_content: Union[str, bytes, None], document: Document) -> str:
        """Decode and clean the input so html5lib always receives text."""
        if html_content is None:
            logger.warning("Cannot parse None HTML content")
            document.handle_error("Cannot parse None HTML content")
            return ""

        if isinstance(html_content, (bytes, bytearray)):
            html_content = self._decode(bytes(html_content), document)

        if self.clean_control_characters:
            html_content = self._clean_html_content(html_content)

        return html_content

    def _decode(self, data: bytes, document: Document) -> str:
        """
        Decode bytes, detecting the encoding with ``UnicodeDammit``.

        Args:
            data: Raw markup bytes
            document: Document that records the detected character set

        Returns:
            str: Decoded markup
        """
        dammit = UnicodeDammit(data, is_html=True)
        if dammit.unicode_markup is None:
            document.handle_error("Could not detect the encoding, decoding as UTF-8")
            return data.decode('utf-8', errors='replace')

        if dammit.original_encoding:
            document.character_set = dammit.original_encoding.upper()
        logger.debug(f"Detected encoding {dammit.original_encoding}")
        return dammit.unicode_markup

    def _clean_html_content(self, html_content: str) -> str:
        """
        Clean HTML content to prevent parsing issues.

        Args:
            html_content: HTML content to clean

        Returns:
            str: Cleaned HTML content
        """
        # Unicode BOM appears as \ufeff at the start of content when incorrectly decoded
        if html_content.startswith('\ufeff'):
            logger.debug("Removing BOM marker from the beginning of HTML content")
            html_content = html_content[1:]

        return _CONTROL_CHARACTERS.sub('', html_content)

    def _convert_parsed_nodes(self, node, parent: Node, document: Document) -> None:
        """
        Recursively convert html5lib DOM nodes to our tree.

        Args:
            node: The parsed node from html5lib
            parent: The parent node in our tree
            document: The owner document of the new nodes
        """
        node_type = node.nodeType

        if node_type == node.TEXT_NODE:
            text_content = node.nodeValue or ""
            if text_content.strip() or (text_content and self.keep_whitespace_text):
                parent.append_child(document.create_text_node(text_content))

        elif node_type == node.COMMENT_NODE:
            parent.append_child(document.create_comment(node.nodeValue or ""))

        elif node_type == node.DOCUMENT_TYPE_NODE:
            parent.append_child(document.create_doctype(
                node.name, getattr(node, 'publicId', ""), getattr(node, 'systemId', "")))

        elif node_type == node.ELEMENT_NODE:
            element = self._convert_element(node, document)
            parent.append_child(element)

            for child in node.childNodes:
                self._convert_parsed_nodes(child, element, document)

        else:
            logger.debug(f"Skipping unsupported parsed node type {node_type}")

    def _convert_element(self, element, document: Document) -> Element:
        """
        Convert an html5lib element to our Element implementation.

        Args:
            element: The element from html5lib to convert
            document: The owner document

        Returns:
            Our Element implementation
        """
        tag_name = element.localName or element.tagName
        new_element = document.create_element(tag_name, element.namespaceURI)

        for name, value in element.attributes.items():
            if name is not None and value is not None:
                new_element.set_attribute(name, value)

        return new_element
