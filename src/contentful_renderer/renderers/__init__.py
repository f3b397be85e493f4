"""contentful_renderer renderers.

Renderers turn rich text nodes into safe HTML fragments.

Modules:
- dispatch: render, render_content, render_document (the tree walk)
- defaults: built-in renderer for every known node type
- marks: text leaves and mark composition
- headings: headings and their optional slug ids
- registry: immutable node type -> renderer tables
- protocol: NodeRenderer and MarkRenderer call signatures

Thread Safety:
Renderers keep no state between calls.
Safe for concurrent use from multiple threads.

"""

from contentful_renderer.renderers.protocol import MarkRenderer, NodeRenderer
from contentful_renderer.renderers.registry import (
    RendererRegistry,
    RendererRegistryBuilder,
    create_default_registry,
)

__all__ = [
    "MarkRenderer",
    "NodeRenderer",
    "RendererRegistry",
    "RendererRegistryBuilder",
    "create_default_registry",
]
