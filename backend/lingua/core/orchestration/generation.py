"""Free-form generation orchestrator."""

from ..errors import EmptyInputError
from ..models.generation import GenerationRequest, GenerationResult
from .base import BaseOrchestrator


class GenerationOrchestrator(BaseOrchestrator):
    """Forwards a prompt to the model and returns the raw reply."""

    async def run(self, request: GenerationRequest) -> GenerationResult:
        if not request.prompt or not request.prompt.strip():
            raise EmptyInputError()

        text = await self._invoke(request.prompt, "")
        return GenerationResult(response=text)
