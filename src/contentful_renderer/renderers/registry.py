"""Renderer registry for node type lookup and registration.

The registry maps node types to renderers. It backs both the built-in
defaults table and the per-configuration overrides.

Thread Safety:
RendererRegistry is immutable after creation. Safe to share.
Use RendererRegistryBuilder for mutable construction.

Example:
    >>> builder = RendererRegistryBuilder()
    >>> builder.register("embedded-entry-inline", render_entry_chip)
    >>> builder.register("embedded-asset-block", render_figure)
    >>> registry = builder.build()
    >>> registry.get("embedded-asset-block") is render_figure
    True

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from contentful_renderer.renderers.protocol import NodeRenderer


class RendererRegistry(Mapping[str, "NodeRenderer"]):
    """Immutable registry of node renderers.

    Maps node type strings to renderers for lookup during dispatch.
    Behaves as a read-only mapping.

    Thread Safety:
        Immutable after creation. Safe to share across threads.

    """

    __slots__ = ("_by_type",)

    def __init__(self, by_type: Mapping[str, NodeRenderer] | None = None) -> None:
        """Initialize registry with a pre-built mapping.

        Use RendererRegistryBuilder to create instances.
        """
        self._by_type: dict[str, NodeRenderer] = {str(k): v for k, v in (by_type or {}).items()}

    def get(self, node_type: str, default: NodeRenderer | None = None) -> NodeRenderer | None:
        """Get renderer for node type.

        Args:
            node_type: Node type (e.g., "paragraph", "heading-2")
            default: Returned when nothing is registered

        Returns:
            Renderer if registered, default otherwise
        """
        return self._by_type.get(node_type, default)

    def has(self, node_type: str) -> bool:
        """Check if node type is registered."""
        return node_type in self._by_type

    @property
    def node_types(self) -> frozenset[str]:
        """Get all registered node types."""
        return frozenset(self._by_type)

    def __getitem__(self, node_type: str) -> NodeRenderer:
        return self._by_type[node_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_type)

    def __contains__(self, node_type: object) -> bool:
        """Support 'node_type in registry' syntax."""
        return node_type in self._by_type

    def __len__(self) -> int:
        """Number of registered node types."""
        return len(self._by_type)

    def __repr__(self) -> str:
        return f"RendererRegistry({sorted(self._by_type)!r})"


class RendererRegistryBuilder:
    """Mutable builder for RendererRegistry.

    Use this to register renderers, then call build() to create
    an immutable registry.

    Example:
            >>> builder = RendererRegistryBuilder()
            >>> builder.register("hr", lambda node, config: Markup("<hr class='fancy'/>"))
            >>> registry = builder.build()

    """

    __slots__ = ("_by_type",)

    def __init__(self) -> None:
        """Initialize empty builder."""
        self._by_type: dict[str, NodeRenderer] = {}

    def register(self, node_type: str, renderer: NodeRenderer) -> RendererRegistryBuilder:
        """Register a renderer for a node type.

        Node types outside the built-in set are accepted, so callers can
        render node types this package does not know yet.

        Args:
            node_type: Node type the renderer handles
            renderer: Callable implementing NodeRenderer

        Returns:
            Self for chaining

        Raises:
            TypeError: If renderer is not callable
            ValueError: If node type is already registered
        """
        if not callable(renderer):
            msg = f"Renderer for '{node_type}' must be callable, got {type(renderer).__name__}"
            raise TypeError(msg)

        node_type = str(node_type)
        if node_type in self._by_type:
            existing = self._by_type[node_type]
            msg = f"Node type '{node_type}' already registered by {getattr(existing, '__name__', existing)!r}"
            raise ValueError(msg)

        self._by_type[node_type] = renderer
        return self

    def register_all(self, renderers: Mapping[str, NodeRenderer]) -> RendererRegistryBuilder:
        """Register multiple renderers.

        Args:
            renderers: Mapping of node type to renderer

        Returns:
            Self for chaining
        """
        for node_type, renderer in renderers.items():
            self.register(node_type, renderer)
        return self

    def build(self) -> RendererRegistry:
        """Build immutable registry from registered renderers.

        Returns:
            Immutable RendererRegistry
        """
        return RendererRegistry(self._by_type)

    def __len__(self) -> int:
        """Number of registered renderers."""
        return len(self._by_type)


def create_default_registry() -> RendererRegistry:
    """Create registry with all built-in node renderers.

    Returns:
        Registry with paragraph, headings, lists, tables, hyperlinks, text
        and the placeholder renderers for embeds.

    """
    from contentful_renderer.renderers.defaults import DEFAULT_RENDERERS

    return RendererRegistryBuilder().register_all(DEFAULT_RENDERERS).build()
