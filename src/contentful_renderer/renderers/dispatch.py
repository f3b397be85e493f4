"""Dispatch engine: walks a rich text tree and renders it to HTML.

For every node the renderer is resolved in this order:

1. the configuration's override for the node type
2. the built-in default for the node type
3. the unknown-type fallback, which renders nothing and emits a
   diagnostic so that new node types never break a page

Renderers recurse through ``render_content``, so an override for one node
type keeps the default traversal for everything below it.

Escaping is deferred: a renderer's result is returned as-is and a raw
string is only escaped when the enclosing join concatenates it (see
contentful_renderer.safe).

Thread Safety:
No module state is mutated while rendering. A configuration can be shared
by concurrent renders provided its overrides are free of side effects.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping, Sequence

from markupsafe import Markup

from contentful_renderer import diagnostics
from contentful_renderer.config import RenderConfig, resolve_config
from contentful_renderer.errors import MissingFieldError, RenderError
from contentful_renderer.nodes import Content, Node
from contentful_renderer.renderers.protocol import NodeRenderer
from contentful_renderer.renderers.registry import RendererRegistry, create_default_registry
from contentful_renderer.safe import RenderResult, join_safes, safe_to_string


@functools.cache
def default_registry() -> RendererRegistry:
    """Return the shared registry of built-in renderers."""
    return create_default_registry()


def resolve_renderer(node_type: str, config: RenderConfig | None = None) -> NodeRenderer | None:
    """Return the renderer used for a node type.

    Args:
        node_type: Node type to look up
        config: Configuration holding overrides (context default if None)

    Returns:
        The override if configured, else the built-in default, else None
        for node types nobody knows how to render
    """
    override = resolve_config(config).override_for(node_type)
    if override is not None:
        return override
    return default_registry().get(node_type)


def render(content: Content, config: RenderConfig | None = None) -> RenderResult:
    """Render a node, or a sequence of nodes, to a fragment.

    Sequences render each node in order and join the results into one
    safe fragment. A single node returns whatever its renderer returned;
    callers nesting it in their own markup should pass it through
    ``join_safes`` or ``content_tag``.

    Args:
        content: Node mapping or sequence of node mappings
        config: Render configuration (context default if None)

    Returns:
        Safe fragment, or a raw string from an override that returned one

    Raises:
        MissingFieldError: If a node has no ``nodeType``
        RenderError: If content is neither a node nor a sequence of nodes
    """
    config = resolve_config(config)

    if isinstance(content, Mapping):
        return _render_node(content, config)
    if isinstance(content, Sequence) and not isinstance(content, str | bytes):
        return join_safes(_render_node_or_fail(item, config) for item in content)

    msg = f"Cannot render {type(content).__name__}: expected a node mapping or a sequence of nodes"
    raise RenderError(msg)


def render_content(node: Node, config: RenderConfig | None = None) -> Markup:
    """Render the children of a node.

    Useful if you've overridden a renderer but don't want to reimplement
    how the renderer walks into the content.

    Args:
        node: Node whose ``content`` to render (missing content renders empty)
        config: Render configuration (context default if None)

    Returns:
        Safe fragment of the rendered children
    """
    return join_safes([render(node.get("content") or [], config)])


def render_document(document: Content, config: RenderConfig | None = None) -> str:
    """Render a rich text document to an HTML string.

    Example:
        >>> render_document({
        ...     "nodeType": "document",
        ...     "data": {},
        ...     "content": [
        ...         {
        ...             "nodeType": "paragraph",
        ...             "data": {},
        ...             "content": [
        ...                 {"nodeType": "text", "value": "Paragraph 1", "marks": [], "data": {}},
        ...             ],
        ...         },
        ...     ],
        ... })
        '<p>Paragraph 1</p>'

    Args:
        document: Root node (usually ``nodeType == "document"``) or a
            sequence of nodes
        config: Render configuration (context default if None)

    Returns:
        HTML string
    """
    return safe_to_string(render(document, config))


def render_with_diagnostics(
    document: Content, config: RenderConfig | None = None
) -> tuple[str, list[diagnostics.Diagnostic]]:
    """Render a document and return the diagnostics it produced.

    Any ``on_diagnostic`` sink already on the configuration still
    receives every event.

    Returns:
        Tuple of (HTML string, diagnostics in emission order)
    """
    config = resolve_config(config)
    log = diagnostics.DiagnosticLog()
    outer = config.on_diagnostic

    def collect(diagnostic: diagnostics.Diagnostic) -> None:
        log(diagnostic)
        if outer is not None:
            outer(diagnostic)

    html = render_document(document, config.with_overrides(on_diagnostic=collect))
    return html, log.diagnostics


def _render_node_or_fail(item: object, config: RenderConfig) -> RenderResult:
    if not isinstance(item, Mapping):
        msg = f"Cannot render {type(item).__name__} inside content: expected a node mapping"
        raise RenderError(msg)
    return _render_node(item, config)


def _render_node(node: Node, config: RenderConfig) -> RenderResult:
    """Resolve and invoke the renderer for a single node."""
    node_type = node.get("nodeType")
    if node_type is None:
        raise MissingFieldError("nodeType")

    renderer = resolve_renderer(node_type, config)
    if renderer is None:
        diagnostics.emit(diagnostics.unknown_node_type(node_type), config)
        return Markup("")

    result = renderer(node, config)
    return Markup("") if result is None else result
