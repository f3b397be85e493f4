"""Render a rich text document in one call — zero config."""

from contentful_renderer import render_document

document = {
    "nodeType": "document",
    "data": {},
    "content": [
        {
            "nodeType": "paragraph",
            "data": {},
            "content": [
                {"nodeType": "text", "value": "Hello ", "marks": [], "data": {}},
                {"nodeType": "text", "value": "World", "marks": [{"type": "bold"}], "data": {}},
            ],
        }
    ],
}

html = render_document(document)
print(html)
