"""Tests for diagnostics on dropped or degraded content."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from contentful_renderer import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticLog,
    Markup,
    RenderConfig,
    render_document,
    render_with_diagnostics,
)


def _text(value: str) -> dict[str, Any]:
    return {"nodeType": "text", "value": value, "marks": [], "data": {}}


def _para(*content: dict[str, Any]) -> dict[str, Any]:
    return {"nodeType": "paragraph", "content": list(content)}


class TestUnknownNodeTypes:
    def test_renders_nothing_and_continues(self) -> None:
        document = [_para(_text("before")), {"nodeType": "mystery", "content": [_text("hidden")]}, _para(_text("after"))]
        assert render_document(document) == "<p>before</p><p>after</p>"

    def test_inline_unknown_node(self) -> None:
        document = _para(_text("a"), {"nodeType": "mention", "data": {}}, _text("b"))
        assert render_document(document) == "<p>ab</p>"

    def test_reported_to_sink(self) -> None:
        log = DiagnosticLog()
        render_document({"nodeType": "mystery"}, RenderConfig(on_diagnostic=log))
        assert log.diagnostics == [
            Diagnostic(
                DiagnosticKind.UNKNOWN_NODE_TYPE,
                "mystery",
                "Skipping rendering unexpected node type: mystery",
            )
        ]

    def test_logged_as_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="contentful_renderer"):
            render_document({"nodeType": "mystery"})
        assert "Skipping rendering unexpected node type: mystery" in caplog.text
        assert caplog.records[0].name == "contentful_renderer.diagnostics"
        assert caplog.records[0].levelno == logging.WARNING


class TestPlaceholderRenderers:
    @pytest.mark.parametrize(
        "node_type", ["embedded-entry-inline", "embedded-entry-block", "embedded-asset-block"]
    )
    def test_null_renderers(self, node_type: str) -> None:
        log = DiagnosticLog()
        html = render_document({"nodeType": node_type, "data": {}}, RenderConfig(on_diagnostic=log))
        assert html == ""
        assert [d.kind for d in log] == [DiagnosticKind.NULL_RENDERER]
        assert log.diagnostics[0].message == f"Using null renderer for {node_type} node"

    @pytest.mark.parametrize("node_type", ["entry-hyperlink", "asset-hyperlink"])
    def test_content_only_renderers(self, node_type: str) -> None:
        log = DiagnosticLog()
        node = {"nodeType": node_type, "data": {}, "content": [_text("label")]}
        html = render_document(node, RenderConfig(on_diagnostic=log))
        assert html == "label"
        assert [d.kind for d in log] == [DiagnosticKind.CONTENT_ONLY_RENDERER]
        assert str(log.diagnostics[0]) == f"Using plain text renderer for {node_type} node"

    def test_no_diagnostic_when_overridden(self) -> None:
        log = DiagnosticLog()
        config = RenderConfig(
            renderers={"embedded-entry-block": lambda node, config: Markup("<div></div>")},
            on_diagnostic=log,
        )
        render_document({"nodeType": "embedded-entry-block", "data": {}}, config)
        assert not log


class TestDiagnosticLog:
    def test_order_and_filter(self, load_document) -> None:
        document = load_document("embeds.json")
        document = {**document, "content": [*document["content"], {"nodeType": "poll"}]}

        log = DiagnosticLog()
        render_document(document, RenderConfig(on_diagnostic=log))

        assert [d.node_type for d in log] == ["embedded-entry-inline", "embedded-entry-block", "poll"]
        assert len(log.of_kind(DiagnosticKind.NULL_RENDERER)) == 2
        log.clear()
        assert len(log) == 0

    def test_diagnostics_do_not_change_output(self, load_document) -> None:
        document = load_document("embeds.json")
        assert render_document(document, RenderConfig(on_diagnostic=DiagnosticLog())) == render_document(document)


class TestRenderWithDiagnostics:
    def test_returns_events(self, load_document) -> None:
        html, events = render_with_diagnostics(load_document("embeds.json"))
        assert html.endswith("embedded link:.</p>")
        assert [d.kind for d in events] == [DiagnosticKind.NULL_RENDERER, DiagnosticKind.NULL_RENDERER]

    def test_forwards_to_configured_sink(self) -> None:
        outer = DiagnosticLog()
        _, events = render_with_diagnostics({"nodeType": "mystery"}, RenderConfig(on_diagnostic=outer))
        assert events == outer.diagnostics
        assert len(events) == 1

    def test_clean_document(self, load_document) -> None:
        _, events = render_with_diagnostics(load_document("paragraphs.json"))
        assert events == []
