"""Verify package imports work correctly."""


def test_import_contentful_renderer() -> None:
    """Test that the package can be imported and version matches pyproject."""
    import tomllib
    from pathlib import Path

    import contentful_renderer

    with (Path(__file__).resolve().parent.parent / "pyproject.toml").open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert contentful_renderer.__version__ == expected


def test_version_format() -> None:
    """Test version string format."""
    from contentful_renderer import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)


def test_submodules_import_in_any_order() -> None:
    """Config, registry and dispatch modules import without cycles."""
    import importlib

    for name in (
        "contentful_renderer.config",
        "contentful_renderer.renderers.registry",
        "contentful_renderer.renderers.dispatch",
        "contentful_renderer.renderers.defaults",
        "contentful_renderer.renderers.headings",
        "contentful_renderer.renderers.marks",
        "contentful_renderer.diagnostics",
    ):
        assert importlib.import_module(name) is not None


def test_public_api() -> None:
    import contentful_renderer

    for name in contentful_renderer.__all__:
        assert hasattr(contentful_renderer, name), name
