"""Utility modules for contentful_renderer.

Provides:
- text: slugify for heading ids
- logger: get_logger for logging
"""

from contentful_renderer.utils.logger import get_logger
from contentful_renderer.utils.text import slugify

__all__ = [
    "get_logger",
    "slugify",
]
