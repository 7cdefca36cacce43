"""Sentence split route."""

from typing import Dict, List, Union

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from lingua.api.dependencies import get_sentence_split_orchestrator
from lingua.core.models import SentenceChunks, SentenceSplitRequest
from lingua.core.orchestration import SentenceSplitOrchestrator

router = APIRouter()


class SentenceSplitResponse(BaseModel):
    """Sentence split response."""

    splitted_sentences: Union[Dict[str, List[SentenceChunks]], List[str]]
    degraded: bool = False


@router.post("/splitSentences", response_model=SentenceSplitResponse)
async def split_sentences(
    request: SentenceSplitRequest,
    orchestrator: SentenceSplitOrchestrator = Depends(get_sentence_split_orchestrator),
) -> SentenceSplitResponse:
    """Split sentence pairs into aligned chunks.

    ``degraded`` is True when the model reply could not be parsed and the
    sentences come from punctuation-based splitting.
    """
    result = await orchestrator.run(request)
    return SentenceSplitResponse(
        splitted_sentences=result.payload(),
        degraded=result.degraded,
    )
