"""Renderer protocols — the callables a configuration can plug in.

Any callable ``(node, config) -> RenderResult`` is a node renderer; any
callable ``(fragment, config) -> RenderResult`` is a mark renderer. Plain
functions and lambdas conform, no subclassing required.

Example:
    from contentful_renderer import Markup, render_content

    def render_quote(node, config):
        return Markup('<blockquote class="pull">') + render_content(node, config) + Markup("</blockquote>")

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from markupsafe import Markup

    from contentful_renderer.config import RenderConfig
    from contentful_renderer.nodes import Node
    from contentful_renderer.safe import RenderResult


class NodeRenderer(Protocol):
    """Protocol for node renderers.

    Return ``Markup`` for HTML that is already safe. A plain ``str`` is
    treated as text and escaped by the enclosing join; ``None`` renders
    nothing.

    Thread Safety:
        Renderers should not touch shared mutable state. One configuration
        may serve concurrent renders of different documents.

    """

    def __call__(self, node: Node, config: RenderConfig) -> RenderResult:
        """Render one node.

        Args:
            node: The node to render (read-only).
            config: Active configuration; pass it on when recursing.

        Returns:
            Safe fragment, raw string, or None.

        """
        ...


class MarkRenderer(Protocol):
    """Protocol for mark renderers.

    Receives the fragment built so far (the text, possibly already wrapped
    by earlier marks) and returns it wrapped once more.

    Formatting the fragment into a plain ``str`` (an f-string, ``%`` or
    ``str.format``) makes it raw again, and it is escaped a second time.
    Build the result with ``Markup("<sup>{0}</sup>").format(fragment)`` or
    ``content_tag`` instead.

    """

    def __call__(self, fragment: Markup, config: RenderConfig) -> RenderResult: ...
