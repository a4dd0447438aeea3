"""Tests for response schema inference."""
import pytest

from src.explorer.schema_inference import infer_schema


class TestInferSchema:
    """Test infer_schema."""

    def test_null(self):
        assert infer_schema(None) == "null"

    def test_scalars(self):
        assert infer_schema("x") == "string"
        assert infer_schema(3) == "number"
        assert infer_schema(2.5) == "number"
        assert infer_schema(True) == "boolean"
        assert infer_schema(False) == "boolean"

    def test_empty_array(self):
        assert infer_schema([]) == "empty array"

    def test_array_uses_first_element_only(self):
        """Mixed arrays are described by their first element."""
        assert infer_schema([1, 2, 3]) == ["number"]
        assert infer_schema([1, "two", None]) == ["number"]

    def test_object(self):
        assert infer_schema({"a": 1, "b": "x"}) == {"a": "number", "b": "string"}

    def test_empty_object(self):
        assert infer_schema({}) == {}

    def test_nested_feed(self):
        """Test a realistic feed response."""
        body = {
            "id": "feed",
            "next": None,
            "feed": [
                {
                    "id": "abc",
                    "content": {"id": 42, "title": "Article", "tags": []},
                    "annotations": [{"text": "quote", "score": 0.5}],
                },
            ],
        }

        assert infer_schema(body) == {
            "id": "string",
            "next": "null",
            "feed": [
                {
                    "id": "string",
                    "content": {"id": "number", "title": "string", "tags": "empty array"},
                    "annotations": [{"text": "string", "score": "number"}],
                }
            ],
        }

    def test_rejects_non_json_values(self):
        with pytest.raises(TypeError):
            infer_schema(object())
