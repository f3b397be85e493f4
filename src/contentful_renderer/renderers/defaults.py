"""Built-in node renderers.

Structural nodes wrap their rendered children in a semantic element.
Nodes that point at entries or assets need knowledge of the content model
to render usefully, so their defaults are placeholders that emit a
diagnostic:

- ``embedded-entry-inline``, ``embedded-entry-block`` and
  ``embedded-asset-block`` render nothing
- ``entry-hyperlink`` and ``asset-hyperlink`` render only their text

Override these through ``RenderConfig.renderers``.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from markupsafe import Markup

from contentful_renderer import diagnostics
from contentful_renderer.nodes import Node, NodeType
from contentful_renderer.renderers.dispatch import render_content
from contentful_renderer.renderers.headings import render_heading
from contentful_renderer.renderers.marks import render_text
from contentful_renderer.safe import content_tag, void_tag

if TYPE_CHECKING:
    from contentful_renderer.config import RenderConfig
    from contentful_renderer.renderers.protocol import NodeRenderer


def _wrap_in(tag: str) -> NodeRenderer:
    """Build a renderer wrapping a node's children in ``<tag>``."""

    def render_node(node: Node, config: RenderConfig) -> Markup:
        return content_tag(tag, render_content(node, config))

    render_node.__name__ = f"render_{tag}"
    return render_node


def render_hr(node: Node, config: RenderConfig) -> Markup:
    return void_tag("hr")


def render_hyperlink(node: Node, config: RenderConfig) -> Markup:
    uri = (node.get("data") or {}).get("uri")
    return content_tag("a", render_content(node, config), href=uri)


def _null_renderer(node: Node, config: RenderConfig) -> Markup:
    diagnostics.emit(diagnostics.null_renderer(node["nodeType"]), config)
    return Markup("")


def _content_only_renderer(node: Node, config: RenderConfig) -> Markup:
    diagnostics.emit(diagnostics.content_only_renderer(node["nodeType"]), config)
    return render_content(node, config)


DEFAULT_RENDERERS: Mapping[str, NodeRenderer] = MappingProxyType(
    {
        NodeType.DOCUMENT: render_content,
        NodeType.PARAGRAPH: _wrap_in("p"),
        NodeType.HEADING_1: render_heading,
        NodeType.HEADING_2: render_heading,
        NodeType.HEADING_3: render_heading,
        NodeType.HEADING_4: render_heading,
        NodeType.HEADING_5: render_heading,
        NodeType.HEADING_6: render_heading,
        NodeType.BLOCKQUOTE: _wrap_in("blockquote"),
        NodeType.HR: render_hr,
        NodeType.UNORDERED_LIST: _wrap_in("ul"),
        NodeType.ORDERED_LIST: _wrap_in("ol"),
        NodeType.LIST_ITEM: _wrap_in("li"),
        NodeType.TABLE: _wrap_in("table"),
        NodeType.TABLE_ROW: _wrap_in("tr"),
        NodeType.TABLE_CELL: _wrap_in("td"),
        NodeType.TABLE_HEADER_CELL: _wrap_in("th"),
        NodeType.TEXT: render_text,
        NodeType.HYPERLINK: render_hyperlink,
        NodeType.ENTRY_HYPERLINK: _content_only_renderer,
        NodeType.ASSET_HYPERLINK: _content_only_renderer,
        NodeType.EMBEDDED_ENTRY_INLINE: _null_renderer,
        NodeType.EMBEDDED_ENTRY_BLOCK: _null_renderer,
        NodeType.EMBEDDED_ASSET_BLOCK: _null_renderer,
    }
)
