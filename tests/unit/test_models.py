"""Unit tests for classification data models."""

import dataclasses

import pytest

from clip_content.models import (
    ContentKind,
    ContentType,
    DetectedContent,
    make_preview,
)


class TestMakePreview:
    """Test preview truncation."""

    def test_short_text_is_unchanged(self):
        assert make_preview("hello") == "hello"

    def test_exactly_200_chars_is_unchanged(self):
        text = "x" * 200
        assert make_preview(text) == text

    def test_long_text_is_truncated_with_ellipsis(self):
        text = "a" * 150 + "b" * 100
        preview = make_preview(text)
        assert preview == text[:200] + "..."
        assert len(preview) == 203

    def test_empty_text(self):
        assert make_preview("") == ""


class TestDetectedContent:
    """Test the DetectedContent dataclass."""

    def test_build_derives_preview(self):
        content_type = ContentType(ContentKind.TEXT, 1.0)
        detected = DetectedContent.build("y" * 300, content_type)
        assert detected.original == "y" * 300
        assert detected.preview == "y" * 200 + "..."
        assert detected.content_type is content_type

    def test_is_immutable(self):
        detected = DetectedContent.build("abc", ContentType(ContentKind.TEXT, 1.0))
        with pytest.raises(dataclasses.FrozenInstanceError):
            detected.original = "changed"

    def test_content_type_repr(self):
        assert repr(ContentType(ContentKind.JSON, 0.95)) == "ContentType(kind=json, confidence=0.95)"

    def test_kind_values(self):
        assert [kind.value for kind in ContentKind] == [
            "json", "xml", "sql", "html", "markdown", "url", "email", "code", "text",
        ]
