# backend/tests/core/test_extractor.py
import pytest

from lingua.core.errors import JsonExtractionError, MalformedJsonError, NoJsonFoundError
from lingua.core.parsing import (
    BalancedBraceExtractor,
    BraceSpanExtractor,
    extract_json,
    strip_code_fences,
)


class TestExtractJson:

    def test_extracts_json_wrapped_in_prose_and_fences(self):
        response = '```json Some text {"name": "John", "age": 30} More text```'
        assert extract_json(response) == {"name": "John", "age": 30}

    def test_extracts_json_after_chatty_prefix(self):
        response = 'Sure! {"translatedText": "Bonjour", "detectedLanguage": "en"}'
        assert extract_json(response) == {"translatedText": "Bonjour", "detectedLanguage": "en"}

    def test_handles_nested_objects(self):
        response = '{"outer": {"name": "Alice", "inner": {"value": 123}}}'
        assert extract_json(response) == {"outer": {"name": "Alice", "inner": {"value": 123}}}

    @pytest.mark.parametrize("response", [
        "Some text with no JSON object",
        "only an opening { brace",
        "only a closing } brace",
        "} reversed {",
        "",
    ])
    def test_no_json_found(self, response):
        with pytest.raises(NoJsonFoundError) as excinfo:
            extract_json(response)
        assert "No valid JSON found" in str(excinfo.value)

    def test_invalid_span_is_malformed(self):
        with pytest.raises(MalformedJsonError) as excinfo:
            extract_json("Some text {invalid-json} More text")
        assert excinfo.value.candidate == "{invalid-json}"
        assert excinfo.value.category == "malformed_json"

    def test_first_to_last_brace_span_is_not_balanced(self):
        """A trailing unrelated brace pulls prose into the span."""
        response = '{"a": 1} and then {b}'
        with pytest.raises(MalformedJsonError):
            extract_json(response)

    def test_failures_share_a_base_class(self):
        for response in ("no braces", "{nope}"):
            with pytest.raises(JsonExtractionError):
                extract_json(response)


class TestBalancedBraceExtractor:

    def test_stops_at_first_balanced_object(self):
        response = '{"a": 1} and then {b}'
        assert BalancedBraceExtractor().extract(response) == {"a": 1}

    def test_ignores_braces_inside_strings(self):
        response = 'Result: {"text": "a } inside \\" quote {", "n": 2} trailing }'
        assert BalancedBraceExtractor().extract(response) == {"text": 'a } inside " quote {', "n": 2}

    def test_unbalanced_object(self):
        with pytest.raises(NoJsonFoundError):
            BalancedBraceExtractor().extract('{"a": {"b": 1}')

    def test_same_result_as_span_extractor_for_single_object(self):
        response = 'prefix {"x": [1, 2, {"y": null}]} suffix'
        assert BalancedBraceExtractor().extract(response) == BraceSpanExtractor().extract(response)


class TestStripCodeFences:

    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_bare_fence(self):
        assert strip_code_fences("```\n[1, 2]\n```") == "[1, 2]"

    def test_unfenced_text_is_stripped_only(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'
