"""Diagnostics for content the renderer drops or degrades.

Three situations never stop a render but usually mean an integrator
forgot an override:

- a node type the renderer does not know
- an embedded entry or asset rendered by the empty placeholder
- an entry or asset hyperlink rendered as its bare text

Each is logged at WARNING on the ``contentful_renderer`` logger and, when
the configuration has an ``on_diagnostic`` sink, handed to it as a
Diagnostic. Diagnostics never change the rendered output.

Example:
    >>> log = DiagnosticLog()
    >>> html = render_document(document, RenderConfig(on_diagnostic=log))
    >>> [d.node_type for d in log]
    ['embedded-entry-inline']

"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

from contentful_renderer.utils.logger import get_logger

if TYPE_CHECKING:
    from contentful_renderer.config import RenderConfig

logger = get_logger(__name__)


class DiagnosticKind(Enum):
    """Why content was dropped or degraded."""

    UNKNOWN_NODE_TYPE = auto()  # no override, no default
    NULL_RENDERER = auto()  # embed rendered as nothing
    CONTENT_ONLY_RENDERER = auto()  # link rendered as its text


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single non-fatal rendering event.

    Attributes:
        kind: Category of the event
        node_type: Type of the node concerned
        message: Human-readable description (also the logged text)

    """

    kind: DiagnosticKind
    node_type: str
    message: str

    def __str__(self) -> str:
        return self.message


def unknown_node_type(node_type: str) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.UNKNOWN_NODE_TYPE,
        node_type,
        f"Skipping rendering unexpected node type: {node_type}",
    )


def null_renderer(node_type: str) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.NULL_RENDERER,
        node_type,
        f"Using null renderer for {node_type} node",
    )


def content_only_renderer(node_type: str) -> Diagnostic:
    return Diagnostic(
        DiagnosticKind.CONTENT_ONLY_RENDERER,
        node_type,
        f"Using plain text renderer for {node_type} node",
    )


def emit(diagnostic: Diagnostic, config: RenderConfig) -> None:
    """Log a diagnostic and forward it to the configured sink."""
    logger.warning(diagnostic.message)
    if config.on_diagnostic is not None:
        config.on_diagnostic(diagnostic)


@dataclass(slots=True)
class DiagnosticLog:
    """Diagnostic sink that keeps every event in order.

    Pass an instance as ``RenderConfig.on_diagnostic``. Use one log per
    render if the configuration is shared between threads.

    """

    diagnostics: list[Diagnostic] = field(default_factory=list)

    def __call__(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def of_kind(self, kind: DiagnosticKind) -> list[Diagnostic]:
        """Return the collected diagnostics of one kind."""
        return [d for d in self.diagnostics if d.kind is kind]

    def clear(self) -> None:
        self.diagnostics.clear()

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.diagnostics)

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __bool__(self) -> bool:
        return bool(self.diagnostics)


__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "content_only_renderer",
    "emit",
    "null_renderer",
    "unknown_node_type",
]
