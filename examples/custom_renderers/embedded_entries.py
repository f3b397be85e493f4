"""Render embedded entries yourself, keep the defaults for everything else."""

from contentful_renderer import (
    DiagnosticLog,
    Markup,
    RenderConfig,
    render_content,
    render_document,
)

ENTRIES = {"36uwIhhxw8rnyhsvr7IkZs": {"title": "Spring Sale", "url": "/sale"}}


def render_entry_link(node, config):
    """Render embedded-entry-inline as a link to the entry."""
    entry = ENTRIES[node["data"]["target"]["sys"]["id"]]
    return Markup('<a class="entry" href="{0}">{1}</a>').format(entry["url"], entry["title"])


def render_quote(node, config):
    """Delegate child traversal back to the renderer."""
    return Markup('<blockquote class="pull">{0}</blockquote>').format(render_content(node, config))


log = DiagnosticLog()
config = RenderConfig(
    renderers={
        "embedded-entry-inline": render_entry_link,
        "blockquote": render_quote,
    },
    heading_ids=True,
    on_diagnostic=log,
)

document = {
    "nodeType": "document",
    "data": {},
    "content": [
        {"nodeType": "heading-2", "data": {}, "content": [{"nodeType": "text", "value": "Deals & Offers", "marks": [], "data": {}}]},
        {
            "nodeType": "paragraph",
            "data": {},
            "content": [
                {"nodeType": "text", "value": "Don't miss ", "marks": [], "data": {}},
                {"nodeType": "embedded-entry-inline", "data": {"target": {"sys": {"id": "36uwIhhxw8rnyhsvr7IkZs"}}}, "content": []},
            ],
        },
        {"nodeType": "blockquote", "data": {}, "content": [{"nodeType": "paragraph", "data": {}, "content": [{"nodeType": "text", "value": "Best prices of the year.", "marks": [{"type": "italic"}], "data": {}}]}]},
        {"nodeType": "embedded-asset-block", "data": {"target": {"sys": {"id": "banner"}}}, "content": []},
    ],
}

print(render_document(document, config))
for diagnostic in log:
    print("warning:", diagnostic)
