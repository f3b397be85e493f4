"""
contentful_renderer — Rich Text to HTML renderer for Contentful CMS

Renders the rich text document trees of the Contentful delivery API to
HTML. Any node type's renderer can be overridden while the rest of the
tree keeps the default rendering, and output stays HTML-safe however
default and custom renderers are mixed.

Quick Start:
    >>> from contentful_renderer import render_document
    >>> render_document(entry["fields"]["body"])
    '<p>Paragraph 1</p><p>Paragraph 2</p>'

Custom Renderers:
    >>> from contentful_renderer import Markup, RenderConfig, render_content
    >>>
    >>> def render_card(node, config):
    ...     entry_id = node["data"]["target"]["sys"]["id"]
    ...     return Markup('<div class="card" data-id="{0}">{1}</div>').format(
    ...         entry_id, render_content(node, config)
    ...     )
    >>>
    >>> config = RenderConfig(renderers={"embedded-entry-block": render_card})
    >>> html = render_document(document, config)

Renderers return ``Markup`` for trusted HTML; a plain ``str`` is treated as
text and escaped.
"""

from markupsafe import Markup

from contentful_renderer.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from contentful_renderer.diagnostics import Diagnostic, DiagnosticKind, DiagnosticLog
from contentful_renderer.errors import (
    ContentfulRendererError,
    MissingFieldError,
    RenderError,
    UnknownMarkError,
)
from contentful_renderer.nodes import MarkType, NodeType
from contentful_renderer.renderers.dispatch import (
    render,
    render_content,
    render_document,
    render_with_diagnostics,
    resolve_renderer,
)
from contentful_renderer.renderers.registry import (
    RendererRegistry,
    RendererRegistryBuilder,
    create_default_registry,
)
from contentful_renderer.safe import RenderResult, content_tag, join_safes, make_safe

__version__ = "0.3.3"

__all__ = [
    # Rendering
    "render",
    "render_content",
    "render_document",
    "render_with_diagnostics",
    "resolve_renderer",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Registry
    "RendererRegistry",
    "RendererRegistryBuilder",
    "create_default_registry",
    # Safe fragments
    "Markup",
    "RenderResult",
    "content_tag",
    "join_safes",
    "make_safe",
    # Vocabulary
    "MarkType",
    "NodeType",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    # Errors
    "ContentfulRendererError",
    "MissingFieldError",
    "RenderError",
    "UnknownMarkError",
    "__version__",
]
