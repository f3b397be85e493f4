"""Render configuration for contentful_renderer.

A RenderConfig bundles the per-node-type overrides, mark overrides and
the behaviour flags. It is immutable: derive variants with
``with_overrides()`` instead of mutating.

A context-local default configuration (PEP 567 ContextVar) is used by the
render entry points when they are called without an explicit config.

Thread Safety:
    RenderConfig is frozen and safe to share between threads. ContextVars
    are per-context by design, so setting the default in one thread does
    not affect another.

Usage:
    config = RenderConfig(
        renderers={"embedded-entry-inline": render_entry_chip},
        heading_ids=True,
    )
    html = render_document(document, config)

    # Or use the context manager
    with render_config_context(RenderConfig(escape_html=False)):
        html = render_document(document)

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from contentful_renderer.renderers.registry import RendererRegistry
from contentful_renderer.utils.text import slugify as default_slugify

if TYPE_CHECKING:
    from contentful_renderer.diagnostics import Diagnostic
    from contentful_renderer.renderers.protocol import MarkRenderer, NodeRenderer

_NODE_RENDERER_SUFFIX = "_node_renderer"
_MARK_RENDERER_SUFFIX = "_mark_renderer"


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        renderers: Overrides keyed by node type. Any mapping is accepted
            and normalized into a RendererRegistry.
        mark_renderers: Overrides keyed by mark type. May add mark types
            that have no built-in renderer.
        escape_html: Escape text node values (disable only for text that
            is already trusted HTML)
        render_marks: Wrap text in the tags of its marks
        heading_ids: Give headings an ``id`` slug derived from their text
        slugify: Function turning heading text into an id
        on_diagnostic: Optional sink called with every Diagnostic, in
            addition to the warning logged for it

    """

    renderers: RendererRegistry = field(default_factory=RendererRegistry)
    mark_renderers: Mapping[str, MarkRenderer] = field(
        default_factory=lambda: MappingProxyType({})
    )
    escape_html: bool = True
    render_marks: bool = True
    heading_ids: bool = False
    slugify: Callable[[str], str] = default_slugify
    on_diagnostic: Callable[[Diagnostic], None] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.renderers, RendererRegistry):
            object.__setattr__(self, "renderers", RendererRegistry(self.renderers))
        if not isinstance(self.mark_renderers, MappingProxyType):
            marks = {str(k): v for k, v in (self.mark_renderers or {}).items()}
            object.__setattr__(self, "mark_renderers", MappingProxyType(marks))

    def override_for(self, node_type: str) -> NodeRenderer | None:
        """Return the caller's renderer for a node type, if any."""
        return self.renderers.get(node_type)

    def mark_override_for(self, mark_type: str) -> MarkRenderer | None:
        """Return the caller's renderer for a mark type, if any."""
        return self.mark_renderers.get(mark_type)

    def with_overrides(self, **changes: Any) -> RenderConfig:
        """Return a copy with the given fields replaced.

        Example:
            >>> RenderConfig().with_overrides(render_marks=False).render_marks
            False

        """
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderConfig:
        """Create RenderConfig from a dictionary of options.

        Besides field names, keys of the form ``<node_type>_node_renderer``
        register a node override and ``<mark>_mark_renderer`` a mark
        override. Underscores in the node type stand for hyphens, so
        ``heading_1_node_renderer`` overrides ``heading-1``. Unknown keys
        are silently ignored.

        Args:
            config_dict: Option values keyed by name.

        Returns:
            New RenderConfig instance.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "heading_ids": True,
            ...     "embedded_entry_block_node_renderer": render_card,
            ...     "unknown_key": "ignored",
            ... })
            >>> "embedded-entry-block" in config.renderers
            True

        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}

        renderers = dict(filtered.pop("renderers", None) or {})
        mark_renderers = dict(filtered.pop("mark_renderers", None) or {})
        for key, value in config_dict.items():
            if key.endswith(_NODE_RENDERER_SUFFIX):
                node_type = key.removesuffix(_NODE_RENDERER_SUFFIX).replace("_", "-")
                renderers[node_type] = value
            elif key.endswith(_MARK_RENDERER_SUFFIX):
                mark_renderers[key.removesuffix(_MARK_RENDERER_SUFFIX)] = value

        return cls(renderers=renderers, mark_renderers=mark_renderers, **filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the default render configuration of the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the default render configuration for the current context.

    Args:
        config: RenderConfig used by render calls that pass no config.

    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary default configuration.

    Args:
        config: RenderConfig to use within the context.

    Yields:
        None

    Example:
        >>> with render_config_context(RenderConfig(heading_ids=True)):
        ...     html = render_document(document)
        >>> # Previous default restored here

    Thread Safety:
        Only affects the current context. Restores the previous config
        even if an exception is raised.

    """
    token = _render_config.set(config)
    try:
        yield
    finally:
        _render_config.reset(token)


def resolve_config(config: RenderConfig | None) -> RenderConfig:
    """Return config, or the context default when it is None."""
    return config if config is not None else _render_config.get()


__all__ = [
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "resolve_config",
    "set_render_config",
]
