"""Text leaves and mark composition.

A text node's value is escaped (unless the configuration opts out) and
then wrapped by its marks as a left fold: the first mark is innermost.

    {"value": "act", "marks": [{"type": "bold"}, {"type": "underline"}]}
    -> <u><b>act</b></u>

Unknown mark types raise UnknownMarkError. Unlike unknown node types,
there is no silent fallback for marks.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from markupsafe import Markup, escape

from contentful_renderer.errors import MissingFieldError, UnknownMarkError
from contentful_renderer.nodes import Mark, MarkType, Node, NodeType
from contentful_renderer.safe import content_tag, make_safe

if TYPE_CHECKING:
    from contentful_renderer.config import RenderConfig
    from contentful_renderer.renderers.protocol import MarkRenderer


def _wrap_in(tag: str) -> MarkRenderer:
    def render_mark(fragment: Markup, config: RenderConfig) -> Markup:
        return content_tag(tag, fragment)

    render_mark.__name__ = f"render_{tag}_mark"
    return render_mark


DEFAULT_MARK_RENDERERS: Mapping[str, MarkRenderer] = MappingProxyType(
    {
        MarkType.BOLD: _wrap_in("b"),
        MarkType.UNDERLINE: _wrap_in("u"),
        MarkType.CODE: _wrap_in("code"),
        MarkType.ITALIC: _wrap_in("i"),
    }
)


def render_text(node: Node, config: RenderConfig) -> Markup:
    """Render a text node, applying its marks.

    Raises:
        MissingFieldError: If ``value`` is absent or null, or a mark has no ``type``
        UnknownMarkError: If a mark type has neither override nor default
    """
    value = node.get("value")
    if value is None:
        raise MissingFieldError("value", node.get("nodeType", NodeType.TEXT))

    text = escape(value) if config.escape_html else Markup(value)

    if not config.render_marks:
        return text
    return apply_marks(text, node.get("marks") or (), config)


def apply_marks(text: Markup, marks: list[Mark] | tuple[Mark, ...], config: RenderConfig) -> Markup:
    """Fold marks over a fragment, first mark innermost."""
    fragment = text
    for mark in marks:
        renderer = mark_renderer_for(_mark_type(mark), config)
        fragment = make_safe(renderer(fragment, config))
    return fragment


def mark_renderer_for(mark_type: str, config: RenderConfig) -> MarkRenderer:
    """Return the override or default renderer for a mark type.

    Raises:
        UnknownMarkError: If no renderer exists for the mark type
    """
    renderer = config.mark_override_for(mark_type) or DEFAULT_MARK_RENDERERS.get(mark_type)
    if renderer is None:
        raise UnknownMarkError(mark_type)
    return renderer


def _mark_type(mark: Mark) -> str:
    try:
        return mark["type"]
    except KeyError:
        raise MissingFieldError("type", "mark") from None
