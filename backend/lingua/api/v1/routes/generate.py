"""Free-form generation route."""

from fastapi import APIRouter, Depends

from lingua.api.dependencies import get_generation_orchestrator
from lingua.core.models import GenerationRequest, GenerationResult
from lingua.core.orchestration import GenerationOrchestrator

router = APIRouter()


@router.post("/generate", response_model=GenerationResult)
async def generate(
    request: GenerationRequest,
    orchestrator: GenerationOrchestrator = Depends(get_generation_orchestrator),
) -> GenerationResult:
    """Forward a prompt to the model and return its raw reply."""
    return await orchestrator.run(request)
