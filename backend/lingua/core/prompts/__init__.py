"""Prompt builders and output skeletons.

- translation: System/user prompts for formality-aware translation
- sentence_split: System prompt for sentence chunking
- output_schemas: Shape skeletons for structured replies
"""

from .output_schemas import (
    CHUNK_GROUP_SKELETON,
    SENTENCE_PAIR_SKELETON,
    TRANSLATION_SKELETON,
)
from .sentence_split import (
    build_sentence_split_system_prompt,
    build_sentence_split_user_prompt,
)
from .translation import (
    build_translation_system_prompt,
    build_translation_user_prompt,
)

__all__ = [
    "build_translation_system_prompt",
    "build_translation_user_prompt",
    "build_sentence_split_system_prompt",
    "build_sentence_split_user_prompt",
    "TRANSLATION_SKELETON",
    "SENTENCE_PAIR_SKELETON",
    "CHUNK_GROUP_SKELETON",
]
