"""Exception classes for contentful_renderer.

Malformed documents raise subclasses of RenderError. Recoverable
conditions (unknown node types, embeds without an override) are reported
as diagnostics instead, see contentful_renderer.diagnostics.
"""

from __future__ import annotations


class ContentfulRendererError(Exception):
    """Base exception for all contentful_renderer errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(ContentfulRendererError):
    """Error during HTML rendering.

    Raised when the renderer is handed a value it cannot walk, such as
    something that is neither a node mapping nor a sequence of nodes.
    """

    pass


class MissingFieldError(RenderError):
    """A node or mark lacks a field its renderer requires.

    The document producer broke its contract, so there is no safe
    default to fall back on.
    """

    def __init__(self, field: str, node_type: str | None = None) -> None:
        """Initialize missing field error.

        Args:
            field: Name of the absent field (e.g., "value", "nodeType")
            node_type: Type of the node missing the field, if known
        """
        self.field = field
        self.node_type = node_type

        owner = f"'{node_type}' node" if node_type else "node"
        super().__init__(f"Missing required field '{field}' on {owner}")


class UnknownMarkError(RenderError):
    """A text node carries a mark type with no renderer."""

    def __init__(self, mark_type: str) -> None:
        """Initialize unknown mark error.

        Args:
            mark_type: The unrecognized mark type (e.g., "blink")
        """
        self.mark_type = mark_type
        super().__init__(f"No renderer for mark type '{mark_type}'")
