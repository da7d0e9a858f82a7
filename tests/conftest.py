"""
Common test fixtures for the notion_blocks tests.
"""

import pytest


def span(text):
    return {
        "type": "text",
        "text": {"content": text, "link": None},
        "annotations": {"bold": False, "italic": False, "color": "default"},
        "plain_text": text,
        "href": None,
    }


@pytest.fixture
def paragraph_payload():
    """Fixture providing a paragraph block as returned by the API."""
    return {
        "object": "block",
        "id": "c02fc1d3-db8b-45c5-a222-27595b15aea7",
        "created_time": "2021-05-12T13:14:00.000Z",
        "last_edited_time": "2021-05-12T13:15:00.000Z",
        "has_children": False,
        "archived": False,
        "type": "paragraph",
        "paragraph": {"text": [span("Lacinato kale is a variety of kale.")]},
    }


@pytest.fixture
def nested_list_payload():
    """Fixture providing a bulleted list item with two nested children."""
    return {
        "object": "block",
        "id": "list-1",
        "type": "bulleted_list_item",
        "has_children": True,
        "bulleted_list_item": {
            "text": [span("Groceries")],
            "children": [
                {
                    "object": "block",
                    "id": "child-1",
                    "type": "to_do",
                    "to_do": {"text": [span("Kale")], "checked": False},
                },
                {
                    "object": "block",
                    "id": "child-2",
                    "type": "toggle",
                    "has_children": True,
                    "toggle": {
                        "text": [span("Spices")],
                        "children": [
                            {
                                "object": "block",
                                "id": "grandchild-1",
                                "type": "paragraph",
                                "paragraph": {"text": [span("Cumin")]},
                            }
                        ],
                    },
                },
            ],
        },
    }


@pytest.fixture
def children_page_payload(paragraph_payload):
    """Fixture providing one page of a block-children listing."""
    return {
        "object": "list",
        "results": [
            paragraph_payload,
            {
                "object": "block",
                "id": "heading-1",
                "type": "heading_2",
                "heading_2": {"text": [span("Notes")]},
            },
        ],
        "has_more": True,
        "next_cursor": "fe2cc560-036c-44cd-90e8-294d5a74cebc",
    }


@pytest.fixture
def external_image_payload():
    """Fixture providing an image block that links to an external file."""
    return {
        "object": "block",
        "type": "image",
        "image": {
            "type": "external",
            "external": {"url": "https://example.com/kale.png"},
            "caption": [span("Kale")],
        },
    }
