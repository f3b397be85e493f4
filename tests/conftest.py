"""Shared fixtures for contentful_renderer tests."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from contentful_renderer import reset_render_config

DOCUMENTS = Path(__file__).resolve().parent / "documents"


def _load_document(filename: str) -> dict[str, Any]:
    """Load the rich text body of the first entry in a delivery API response."""
    with (DOCUMENTS / filename).open(encoding="utf-8") as f:
        response = json.load(f)
    return response["items"][0]["fields"]["body"]


@pytest.fixture
def load_document() -> Callable[[str], dict[str, Any]]:
    """Return a loader for the JSON documents under tests/documents."""
    return _load_document


@pytest.fixture(autouse=True)
def _default_render_config():
    """Keep context default config changes from leaking between tests."""
    yield
    reset_render_config()
