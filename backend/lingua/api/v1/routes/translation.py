"""Translation route."""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from lingua.api.dependencies import get_translation_orchestrator
from lingua.core.models import TranslationRequest, TranslationResult
from lingua.core.orchestration import TranslationOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


class TranslationResponse(BaseModel):
    """Translation response."""

    translated_text: TranslationResult


@router.post("/generateTranslation", response_model=TranslationResponse)
async def generate_translation(
    request: TranslationRequest,
    orchestrator: TranslationOrchestrator = Depends(get_translation_orchestrator),
) -> TranslationResponse:
    """Translate text with the requested formality and tone.

    Blank text is rejected with 400 before any model call.
    """
    result = await orchestrator.run(request)
    logger.info(f"Translation done: detected_language={result.detected_language}")
    return TranslationResponse(translated_text=result)
