"""Node and mark vocabulary of Contentful rich text documents.

Documents arrive already decoded from JSON: every node is a plain mapping
with string keys. This module names the node and mark types the renderer
knows about; it does not wrap or validate nodes.

Node shape:
    {
        "nodeType": "paragraph",
        "data": {},
        "content": [
            {"nodeType": "text", "value": "Hi", "marks": [{"type": "bold"}], "data": {}},
        ],
    }

Thread Safety:
All definitions are immutable (enums, mapping proxies).
"""

from collections.abc import Mapping, Sequence
from enum import StrEnum
from types import MappingProxyType
from typing import Any

Node = Mapping[str, Any]
"""A single rich text node (decoded JSON object)."""

Mark = Mapping[str, Any]
"""An inline style annotation on a text node."""

Content = Node | Sequence[Node]
"""Anything the dispatcher can walk: one node or an ordered run of nodes."""


class NodeType(StrEnum):
    """Node types with a built-in renderer.

    Members compare equal to their wire value, so ``NodeType.PARAGRAPH ==
    "paragraph"`` holds and either form may be used as a registry key.
    """

    # Structure
    DOCUMENT = "document"
    PARAGRAPH = "paragraph"
    HEADING_1 = "heading-1"
    HEADING_2 = "heading-2"
    HEADING_3 = "heading-3"
    HEADING_4 = "heading-4"
    HEADING_5 = "heading-5"
    HEADING_6 = "heading-6"
    BLOCKQUOTE = "blockquote"
    HR = "hr"

    # Lists
    UNORDERED_LIST = "unordered-list"
    ORDERED_LIST = "ordered-list"
    LIST_ITEM = "list-item"

    # Tables
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    TABLE_HEADER_CELL = "table-header-cell"

    # Inline
    TEXT = "text"
    HYPERLINK = "hyperlink"

    # Need knowledge of the content model
    ENTRY_HYPERLINK = "entry-hyperlink"
    ASSET_HYPERLINK = "asset-hyperlink"
    EMBEDDED_ENTRY_INLINE = "embedded-entry-inline"
    EMBEDDED_ENTRY_BLOCK = "embedded-entry-block"
    EMBEDDED_ASSET_BLOCK = "embedded-asset-block"


class MarkType(StrEnum):
    """Mark types with a built-in renderer."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    CODE = "code"


HEADING_LEVELS: Mapping[str, int] = MappingProxyType(
    {
        NodeType.HEADING_1: 1,
        NodeType.HEADING_2: 2,
        NodeType.HEADING_3: 3,
        NodeType.HEADING_4: 4,
        NodeType.HEADING_5: 5,
        NodeType.HEADING_6: 6,
    }
)


__all__ = [
    "Content",
    "HEADING_LEVELS",
    "Mark",
    "MarkType",
    "Node",
    "NodeType",
]
