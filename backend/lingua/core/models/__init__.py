"""Request and result models.

This module provides structured data models for the orchestrators,
ensuring type safety and clear contracts between components.
"""

from .generation import GenerationRequest, GenerationResult
from .sentences import (
    SentenceChunks,
    SentencePair,
    SentenceSplitRequest,
    SentenceSplitResult,
)
from .translation import Formality, TranslationRequest, TranslationResult

__all__ = [
    # Generation models
    "GenerationRequest",
    "GenerationResult",
    # Sentence split models
    "SentencePair",
    "SentenceChunks",
    "SentenceSplitRequest",
    "SentenceSplitResult",
    # Translation models
    "Formality",
    "TranslationRequest",
    "TranslationResult",
]
