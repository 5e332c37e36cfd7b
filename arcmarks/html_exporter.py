#!/usr/bin/env python3
"""Render bookmark trees as Netscape Bookmark HTML."""

import logging
from typing import List

from .models import Bookmark, BookmarkNode

HEADER = [
    '<!DOCTYPE NETSCAPE-Bookmark-file-1>',
    '<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">',
    '<TITLE>Bookmarks</TITLE>',
    '<H1>Bookmarks</H1>',
    '<DL><p>',
]
FOOTER = '</DL><p>'


class HTMLExporter:
    """Exports bookmarks to HTML format.

    Titles and URLs are written verbatim unless ``escape`` is set, so the
    output stays identical to earlier exports.
    """

    def __init__(self, nodes: List[BookmarkNode], escape: bool = False):
        self.nodes = nodes
        self.escape = escape

    def export(self) -> str:
        """Export bookmarks to HTML string."""
        logging.info("Converting bookmarks to HTML...")

        html_parts = list(HEADER)
        for node in self.nodes:
            html_parts.extend(self._node_to_html(node, level=1))
        html_parts.append(FOOTER)

        logging.info("> HTML converted.")
        return '\n'.join(html_parts)

    def _node_to_html(self, node: BookmarkNode, level: int) -> List[str]:
        """Convert a bookmark or folder to HTML lines."""
        indent = '\t' * level

        if isinstance(node, Bookmark):
            return [f'{indent}<DT><A HREF="{self._url(node.url)}">{self._text(node.title)}</A>']

        lines = [
            f'{indent}<DT><H3>{self._text(node.title)}</H3>',
            f'{indent}<DL><p>',
        ]
        for child in node.children:
            lines.extend(self._node_to_html(child, level + 1))
        lines.append(f'{indent}</DL><p>')
        return lines

    def _text(self, text: str) -> str:
        if not self.escape:
            return text
        return escape_html(text)

    def _url(self, url: str) -> str:
        if not self.escape:
            return url
        url = "" if url is None else str(url)
        return url.replace("&", "&amp;").replace('"', "&quot;")


def escape_html(text: str) -> str:
    """Escape HTML special characters."""
    text = "" if text is None else str(text)
    return (text.replace("&", "&amp;")
               .replace("<", "&lt;")
               .replace(">", "&gt;")
               .replace('"', "&quot;"))
