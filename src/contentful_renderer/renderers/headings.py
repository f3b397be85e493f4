"""Heading rendering with optional slug ids."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from markupsafe import Markup

from contentful_renderer.nodes import HEADING_LEVELS, Content, Node, NodeType
from contentful_renderer.renderers.dispatch import render_content
from contentful_renderer.safe import content_tag

if TYPE_CHECKING:
    from contentful_renderer.config import RenderConfig


def extract_text(content: Content) -> str:
    """Concatenate the values of all text nodes under ``content``.

    Every other node contributes only its children's text, so links,
    embeds and renderer overrides add no markup. Marks are ignored.
    """
    if isinstance(content, Mapping):
        if content.get("nodeType") == NodeType.TEXT:
            return content.get("value") or ""
        return extract_text(content.get("content") or ())
    if isinstance(content, Sequence) and not isinstance(content, str):
        return "".join(extract_text(child) for child in content)
    return ""


def heading_id(node: Node, config: RenderConfig) -> str:
    """Derive the id slug of a heading from its plain text.

    Headings with the same text get the same id; duplicates are not
    disambiguated.
    """
    return config.slugify(extract_text(node.get("content") or ()))


def render_heading(node: Node, config: RenderConfig) -> Markup:
    """Render ``heading-1`` .. ``heading-6`` as ``<h1>`` .. ``<h6>``."""
    level = HEADING_LEVELS[node["nodeType"]]
    attrs = {"id": heading_id(node, config)} if config.heading_ids else {}
    return content_tag(f"h{level}", render_content(node, config), **attrs)
