"""Sentence split orchestrator.

Unlike translation, a reply that cannot be parsed is not fatal here: the
raw text is segmented heuristically and returned as a degraded result.
"""

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..errors import JsonExtractionError, UnexpectedResponseShapeError
from ..llm.base import TextGenerator
from ..models.sentences import SentenceChunks, SentenceSplitRequest, SentenceSplitResult
from ..parsing import (
    BraceSpanExtractor,
    JsonExtractor,
    is_valid_json,
    segment_sentences,
    strip_code_fences,
)
from ..prompts import (
    CHUNK_GROUP_SKELETON,
    SENTENCE_PAIR_SKELETON,
    build_sentence_split_system_prompt,
    build_sentence_split_user_prompt,
)
from .base import BaseOrchestrator

logger = logging.getLogger(__name__)

_NOT_PARSED = object()


class SentenceSplitOrchestrator(BaseOrchestrator):
    """Runs a sentence split request through the response resolution pipeline."""

    def __init__(self, generator: TextGenerator, extractor: Optional[JsonExtractor] = None):
        super().__init__(generator)
        self.extractor = extractor or BraceSpanExtractor()

    async def run(self, request: SentenceSplitRequest) -> SentenceSplitResult:
        """Split the request's sentence pairs into aligned chunks.

        Args:
            request: Sentence split request

        Returns:
            Structured result, or a degraded result from the fallback segmenter

        Raises:
            ModelInvocationFailedError: If the model call fails
            UnexpectedResponseShapeError: If the reply parses into an
                unsupported structure or nothing can be salvaged
        """
        system_prompt = build_sentence_split_system_prompt()
        user_prompt = build_sentence_split_user_prompt(request.text)

        raw = await self._invoke(user_prompt, system_prompt)

        parsed = self._parse(raw)
        if parsed is _NOT_PARSED:
            sentences = list(segment_sentences(raw))
            logger.warning(
                f"Sentence split reply is not JSON; fallback produced {len(sentences)} sentence(s)"
            )
            if not sentences:
                raise UnexpectedResponseShapeError("reply is empty")
            return SentenceSplitResult(sentences=sentences, degraded=True)

        return self._to_result(parsed)

    def _parse(self, raw: str) -> Any:
        """Parse the reply directly, then through the extractor.

        Returns:
            Parsed JSON value, or _NOT_PARSED
        """
        try:
            return json.loads(strip_code_fences(raw))
        except json.JSONDecodeError:
            pass

        try:
            return self.extractor.extract(raw)
        except JsonExtractionError as e:
            logger.debug(f"Extractor could not recover JSON: {e}")
            return _NOT_PARSED

    def _to_result(self, parsed: Any) -> SentenceSplitResult:
        """Validate the parsed reply and build the result.

        Accepts a language-pair mapping of chunk groups, or a list of strings.
        """
        if isinstance(parsed, list):
            if all(isinstance(item, str) for item in parsed):
                return SentenceSplitResult(sentences=parsed)
            raise UnexpectedResponseShapeError("array reply must contain only strings")

        if not isinstance(parsed, dict) or not parsed:
            raise UnexpectedResponseShapeError(
                f"expected a language-pair mapping, got {type(parsed).__name__}"
            )

        for pair_key, groups in parsed.items():
            if not isinstance(groups, list):
                raise UnexpectedResponseShapeError(f"'{pair_key}' is not an array")
            for group in groups:
                if (
                    not isinstance(group, dict)
                    or not is_valid_json(group, CHUNK_GROUP_SKELETON)
                    or not isinstance(group["chunks"], list)
                ):
                    raise UnexpectedResponseShapeError(
                        f"'{pair_key}' entry has no chunks array"
                    )
                for chunk in group["chunks"]:
                    if not is_valid_json(chunk, SENTENCE_PAIR_SKELETON):
                        raise UnexpectedResponseShapeError(
                            f"'{pair_key}' chunk lacks sourceText/translatedText"
                        )

        try:
            pairs = {
                pair_key: [SentenceChunks.model_validate(group) for group in groups]
                for pair_key, groups in parsed.items()
            }
        except ValidationError as e:
            raise UnexpectedResponseShapeError(str(e)) from e

        return SentenceSplitResult(pairs=pairs)
