"""Translation orchestrator."""

import logging
from typing import Optional

from pydantic import ValidationError

from ..errors import (
    EmptyInputError,
    JsonExtractionError,
    ResponseParseFailedError,
)
from ..llm.base import TextGenerator
from ..models.translation import TranslationRequest, TranslationResult
from ..parsing import BraceSpanExtractor, JsonExtractor, is_valid_json
from ..prompts import (
    TRANSLATION_SKELETON,
    build_translation_system_prompt,
    build_translation_user_prompt,
)
from .base import BaseOrchestrator

logger = logging.getLogger(__name__)


class TranslationOrchestrator(BaseOrchestrator):
    """Runs a translation request through the response resolution pipeline.

    Flow:
    TranslationRequest -> prompts -> TextGenerator -> JsonExtractor -> TranslationResult
    """

    def __init__(
        self,
        generator: TextGenerator,
        extractor: Optional[JsonExtractor] = None,
        strict_shape: bool = False,
    ):
        """Initialize the orchestrator.

        Args:
            generator: Model capability
            extractor: JSON extractor, defaults to the first-to-last brace span
            strict_shape: Check the parsed object against TRANSLATION_SKELETON
                before building the result
        """
        super().__init__(generator)
        self.extractor = extractor or BraceSpanExtractor()
        self.strict_shape = strict_shape

    async def run(self, request: TranslationRequest) -> TranslationResult:
        """Translate the request text.

        Args:
            request: Translation request

        Returns:
            TranslationResult parsed from the model reply

        Raises:
            EmptyInputError: If the text is blank; no model call is made
            ModelInvocationFailedError: If the model call fails
            ResponseParseFailedError: If the reply holds no usable JSON object
        """
        if not request.text or not request.text.strip():
            raise EmptyInputError()

        system_prompt = build_translation_system_prompt(request.formality)
        user_prompt = build_translation_user_prompt(request)

        logger.info(
            "Translating: source=%s, target=%s, formality=%s, tone=%s, chars=%d",
            request.source_language,
            request.target_language,
            request.formality.value,
            request.tone,
            len(request.text),
        )

        raw = await self._invoke(user_prompt, system_prompt)

        try:
            parsed = self.extractor.extract(raw)
        except JsonExtractionError as e:
            logger.warning(f"Translation reply could not be parsed: {e}")
            raise ResponseParseFailedError(str(e)) from e

        if not isinstance(parsed, dict):
            raise ResponseParseFailedError(
                f"expected a JSON object, got {type(parsed).__name__}"
            )

        if self.strict_shape and not is_valid_json(parsed, TRANSLATION_SKELETON):
            raise ResponseParseFailedError(
                "reply does not match the translatedText/detectedLanguage shape"
            )

        try:
            return TranslationResult.model_validate(parsed)
        except ValidationError as e:
            raise ResponseParseFailedError(
                f"reply is missing translation fields: {e.error_count()} error(s)"
            ) from e
