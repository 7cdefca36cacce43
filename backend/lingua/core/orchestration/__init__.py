"""Request orchestrators.

Each orchestrator validates its request, builds prompts, calls the injected
TextGenerator and resolves the reply into a result or a classified error.
"""

from .base import BaseOrchestrator
from .generation import GenerationOrchestrator
from .sentence_split import SentenceSplitOrchestrator
from .translation import TranslationOrchestrator

__all__ = [
    "BaseOrchestrator",
    "GenerationOrchestrator",
    "SentenceSplitOrchestrator",
    "TranslationOrchestrator",
]
