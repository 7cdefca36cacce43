"""API dependencies providing the text generator and orchestrators.

The generator is built once per process from settings. Tests replace it
through ``app.dependency_overrides[get_text_generator]``.
"""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from lingua.config import settings
from lingua.core.llm import GatewayFactory, LLMRuntimeConfig, TextGenerator
from lingua.core.orchestration import (
    GenerationOrchestrator,
    SentenceSplitOrchestrator,
    TranslationOrchestrator,
)

logger = logging.getLogger(__name__)


@lru_cache
def get_text_generator() -> TextGenerator:
    """Get the process-wide text generator."""
    config = LLMRuntimeConfig.from_settings(settings)
    if not config.api_key:
        logger.warning(
            "No API key configured for provider %s; model calls will fail",
            config.provider,
        )
    return GatewayFactory.from_config(config)


Generator = Annotated[TextGenerator, Depends(get_text_generator)]


def get_generation_orchestrator(generator: Generator) -> GenerationOrchestrator:
    return GenerationOrchestrator(generator)


def get_translation_orchestrator(generator: Generator) -> TranslationOrchestrator:
    return TranslationOrchestrator(generator)


def get_sentence_split_orchestrator(generator: Generator) -> SentenceSplitOrchestrator:
    return SentenceSplitOrchestrator(generator)
