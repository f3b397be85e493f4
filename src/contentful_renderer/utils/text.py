"""Text processing utilities for contentful_renderer.

Provides the canonical slugify used for heading ids.

Example:
    >>> from contentful_renderer.utils.text import slugify
    >>> slugify("Hello World!")
    'hello-world'
"""

from __future__ import annotations

from slugify import slugify as _slugify


def slugify(text: str) -> str:
    """Convert text to an ASCII, URL-safe slug.

    Named HTML entities are decoded and letters are transliterated to ASCII
    before every run of other characters collapses into a single ``-``.
    Leading and trailing separators are trimmed.

    Examples:
        >>> slugify("Test &amp; Code")
        'test-code'
        >>> slugify("don't stop")
        'don-t-stop'
        >>> slugify("Café Crème")
        'cafe-creme'
    """
    if not text:
        return ""
    # Numeric entities are left as text; out-of-range code points make chr() raise.
    return _slugify(text, separator="-", decimal=False, hexadecimal=False)
