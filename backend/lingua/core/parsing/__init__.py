"""Response resolution components.

This module turns raw model text into structured data:
- JsonExtractor: Locates and parses a JSON object in arbitrary text
- is_valid_json: Checks JSON validity and an optional shape skeleton
- segment_sentences: Heuristic sentence splitting for degraded mode
"""

from .extractor import (
    BalancedBraceExtractor,
    BraceSpanExtractor,
    JsonExtractor,
    extract_json,
    strip_code_fences,
)
from .segmenter import segment_sentences
from .validator import is_valid_json, json_type

__all__ = [
    "JsonExtractor",
    "BraceSpanExtractor",
    "BalancedBraceExtractor",
    "extract_json",
    "strip_code_fences",
    "segment_sentences",
    "is_valid_json",
    "json_type",
]
