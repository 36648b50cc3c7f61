"""
htmlnode - navigation and queries over parsed HTML documents.

Parse markup and walk it through ``HTMLNode`` handles::

    import htmlnode

    root = htmlnode.parse('<div id="a"><span class="x">Hi</span></div>')
    span = root.descendant_of_tag("span", value_contains="i")
    print(span.class_value)
"""

from typing import Optional, Union

from htmlnode.element_type import ElementType, element_type_label
from htmlnode.html_node import HTMLNode
from htmlnode.parser import HTMLParser
from htmlnode.predicates import (
    AttributeContains, AttributeEquals, HasAttribute, HasTagName, Predicate,
    TagTextContains, TagTextEquals,
)
from htmlnode.traversal import Cardinality, Scope
from htmlnode.utils import Config, get_config, set_config, setup_logging

__version__ = "0.1.0"


def parse(markup: Union[str, bytes], base_url: Optional[str] = None,
          config: Optional[Config] = None) -> HTMLNode:
    """
    Parse an HTML document.

    Args:
        markup: The document, as text or bytes
        base_url: Optional URL recorded on the document
        config: Parser configuration; the process-wide one when omitted

    Returns:
        HTMLNode: Handle on the document node
    """
    return HTMLNode(HTMLParser(config).parse(markup, base_url))


def parse_fragment(markup: Union[str, bytes], container: str = "div",
                   config: Optional[Config] = None) -> HTMLNode:
    """
    Parse an HTML fragment as the content of ``container``.

    Returns:
        HTMLNode: Handle on the document fragment holding the parsed nodes
    """
    return HTMLNode(HTMLParser(config).parse_fragment(markup, container))


__all__ = [
    'HTMLNode',
    'ElementType',
    'element_type_label',
    'Scope',
    'Cardinality',
    'Predicate',
    'HasTagName',
    'HasAttribute',
    'AttributeEquals',
    'AttributeContains',
    'TagTextEquals',
    'TagTextContains',
    'HTMLParser',
    'Config',
    'get_config',
    'set_config',
    'setup_logging',
    'parse',
    'parse_fragment',
]
