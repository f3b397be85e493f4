"""Safe fragment composition for rendered HTML.

Renderers may return three kinds of value:

- ``markupsafe.Markup``: HTML that is already safe, used verbatim
- ``str``: raw text, escaped exactly once when it is joined
- ``None``: renders nothing

Escaping lives here and nowhere else. Default renderers and caller
overrides can therefore be mixed freely: a raw string is escaped when it
reaches its enclosing join, and a safe fragment is never escaped again,
however many wrapping tags sit above it.

Example:
    >>> join_safes(["a < b", Markup("<br/>"), None])
    Markup('a &lt; b<br/>')
    >>> content_tag("a", "Tom & Jerry", href="/t?a=1&b=2")
    Markup('<a href="/t?a=1&amp;b=2">Tom &amp; Jerry</a>')

Thread Safety:
SafeBuilder instances are local to each render call.
No shared mutable state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from markupsafe import Markup, escape

RenderResult = Markup | str | None
"""What a node or mark renderer may return."""


def make_safe(value: RenderResult) -> Markup:
    """Convert one renderer result into a safe fragment.

    Args:
        value: Safe fragment, raw string or None

    Returns:
        The fragment itself if already safe, the escaped string if raw,
        or an empty fragment for None
    """
    if value is None:
        return Markup("")
    # markupsafe.escape() passes Markup (anything with __html__) through untouched
    return escape(value)


class SafeBuilder:
    """Accumulates fragments, escaping raw strings as they are appended.

    Appends to a list, joins once at the end.

    Usage:
            >>> sb = SafeBuilder()
            >>> sb.append(Markup("<p>"))
            >>> sb.append("Fish & Chips")
            >>> sb.append(Markup("</p>"))
            >>> sb.build()
            Markup('<p>Fish &amp; Chips</p>')

    Thread Safety:
        Instance is local to each render call.
        No shared mutable state.

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        """Initialize empty SafeBuilder."""
        self._parts: list[Markup] = []

    def append(self, value: RenderResult) -> SafeBuilder:
        """Append a renderer result.

        Args:
            value: Fragment to append (None and empty strings are skipped)

        Returns:
            self for method chaining
        """
        if value:
            self._parts.append(make_safe(value))
        return self

    def extend(self, values: Iterable[RenderResult]) -> SafeBuilder:
        """Append several renderer results, preserving order.

        Args:
            values: Fragments to append

        Returns:
            self for method chaining
        """
        self._parts.extend(make_safe(v) for v in values if v)
        return self

    def build(self) -> Markup:
        """Join all parts into a single safe fragment."""
        return Markup("").join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        """Return True if any parts have been appended."""
        return bool(self._parts)


def join_safes(values: Iterable[RenderResult]) -> Markup:
    """Concatenate renderer results into one safe fragment.

    Raw strings are escaped, safe fragments are kept verbatim and None
    contributes nothing. Order is preserved.
    """
    return SafeBuilder().extend(values).build()


def _attributes(attrs: Mapping[str, Any]) -> Markup:
    """Render attributes as ``name="value"`` pairs, skipping None values."""
    sb = SafeBuilder()
    for name, value in attrs.items():
        if value is None:
            continue
        # class_ -> class, for keywords that are reserved in Python
        name = name.rstrip("_").replace("_", "-")
        sb.append(Markup(' {0}="{1}"').format(name, value))
    return sb.build()


def content_tag(tag: str, content: RenderResult | Iterable[RenderResult] = None, **attrs: Any) -> Markup:
    """Wrap content in an HTML element.

    Args:
        tag: Element name (trusted, never escaped)
        content: A renderer result, or several to be joined in order
        **attrs: Attribute values (escaped; None values are omitted)

    Returns:
        Safe fragment ``<tag attrs>content</tag>``
    """
    if content is None or isinstance(content, str):
        inner = make_safe(content)
    else:
        inner = join_safes(content)
    return Markup(f"<{tag}") + _attributes(attrs) + Markup(">") + inner + Markup(f"</{tag}>")


def void_tag(tag: str, **attrs: Any) -> Markup:
    """Render a self-closing element such as ``<hr/>``."""
    return Markup(f"<{tag}") + _attributes(attrs) + Markup("/>")


def safe_to_string(value: RenderResult) -> str:
    """Turn a renderer result into a plain ``str``, escaping it if raw."""
    return str(make_safe(value))


__all__ = [
    "Markup",
    "RenderResult",
    "SafeBuilder",
    "content_tag",
    "join_safes",
    "make_safe",
    "safe_to_string",
    "void_tag",
]
