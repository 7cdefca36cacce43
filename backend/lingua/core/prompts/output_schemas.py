"""Output skeletons for prompts with structured JSON output.

Each skeleton maps a field name to an example value whose type category is
the expected type of that field (see ``is_valid_json``).
"""

from typing import Any, Dict

# =============================================================================
# Translation Output
# =============================================================================

TRANSLATION_SKELETON: Dict[str, Any] = {
    "translatedText": "",
    "detectedLanguage": "",
}


# =============================================================================
# Sentence Split Output
# =============================================================================

# One entry of a "chunks" list
SENTENCE_PAIR_SKELETON: Dict[str, Any] = {
    "sourceText": "",
    "translatedText": "",
}

# One entry of a language-pair list
CHUNK_GROUP_SKELETON: Dict[str, Any] = {
    "chunks": [],
}
