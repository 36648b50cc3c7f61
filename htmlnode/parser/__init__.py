"""
Parsing front end: markup in, ``htmlnode.dom`` tree out.
"""

from .html_parser import HTMLParser

__all__ = ['HTMLParser']
