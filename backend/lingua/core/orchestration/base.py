"""Shared orchestrator behaviour."""

import logging

from ..errors import ModelInvocationFailedError
from ..llm.base import TextGenerator

logger = logging.getLogger(__name__)


class BaseOrchestrator:
    """Base class for request orchestrators.

    The text generator is injected so that each orchestrator can be driven
    by any provider adapter or a test double.
    """

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def _invoke(self, user_prompt: str, system_prompt: str = "") -> str:
        """Call the model capability once.

        Raises:
            ModelInvocationFailedError: Wrapping any generator failure
        """
        try:
            return await self.generator.generate_text(user_prompt, system_prompt)
        except Exception as e:
            logger.error(f"Model invocation failed in {type(self).__name__}: {e}")
            raise ModelInvocationFailedError(str(e)) from e
