"""Tests for the document IR data classes."""

import pytest

from src.document_model import DocumentRoot, HeadingNode, ListNode, ParagraphNode, node_from_dict


class TestDocumentModel:
    """Test IR construction and the JSON wire shape."""

    def test_to_dict_wire_shape(self):
        """Documents serialize to the metadata/content/raw shape."""
        document = DocumentRoot(
            content=[
                HeadingNode(level=1, title="Intro", children=[ParagraphNode(text="Hello")]),
                ListNode(items=["a", "b"]),
                ParagraphNode(text="Bye"),
            ],
            raw="# Intro\nHello\n* a\n* b\nBye",
        )

        assert document.to_dict() == {
            "metadata": {},
            "content": [
                {
                    "type": "heading",
                    "level": 1,
                    "title": "Intro",
                    "children": [{"type": "paragraph", "text": "Hello"}],
                },
                {"type": "list", "items": ["a", "b"]},
                {"type": "paragraph", "text": "Bye"},
            ],
            "raw": "# Intro\nHello\n* a\n* b\nBye",
        }

    def test_from_dict_restores_document(self):
        """from_dict is the inverse of to_dict."""
        document = DocumentRoot(
            metadata={"title": "Doc"},
            content=[HeadingNode(level=2, title="Part", children=[ParagraphNode(text="p")]), ListNode(items=["x"])],
            raw="",
        )

        assert DocumentRoot.from_dict(document.to_dict()) == document

    def test_from_dict_is_lenient(self):
        """Missing fields get defaults, unknown nodes are dropped, levels are clamped."""
        document = DocumentRoot.from_dict(
            {
                "content": [
                    {"type": "heading", "title": "No level"},
                    {"type": "heading", "level": 9, "title": "Too deep"},
                    {"type": "table", "rows": []},
                    "not a node",
                    {"type": "list"},
                ]
            }
        )

        assert document.metadata == {}
        assert document.raw == ""
        assert document.content == [
            HeadingNode(level=1, title="No level"),
            HeadingNode(level=6, title="Too deep"),
            ListNode(items=[]),
        ]

    def test_from_dict_reads_null_as_empty_text(self):
        """JSON null never turns into the text "None"."""
        document = DocumentRoot.from_dict(
            {
                "content": [
                    {"type": "heading", "level": 1, "title": None, "children": [{"type": "paragraph", "text": None}]},
                    {"type": "list", "items": ["a", None, 2]},
                ]
            }
        )

        assert document.content == [
            HeadingNode(level=1, title="", children=[ParagraphNode(text="")]),
            ListNode(items=["a", "2"]),
        ]

    def test_from_dict_rejects_non_objects(self):
        """The root must be a JSON object."""
        with pytest.raises(ValueError):
            DocumentRoot.from_dict(["not", "an", "object"])

    def test_heading_level_bounds(self):
        """Headings outside 1..6 cannot be constructed."""
        with pytest.raises(ValueError):
            HeadingNode(level=0, title="zero")
        with pytest.raises(ValueError):
            HeadingNode(level=7, title="seven")

    def test_node_from_dict_paragraph(self):
        assert node_from_dict({"type": "paragraph", "text": "hi"}) == ParagraphNode(text="hi")
        assert node_from_dict({"type": "unknown"}) is None

    def test_without_raw(self):
        """without_raw keeps structure and metadata but drops the original text."""
        document = DocumentRoot(metadata={"a": 1}, content=[ParagraphNode(text="p")], raw="p")
        stripped = document.without_raw()

        assert stripped.raw == ""
        assert stripped.content == document.content
        assert stripped.metadata == {"a": 1}
        assert document.raw == "p"
