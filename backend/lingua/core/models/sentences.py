"""Sentence split request and result models."""

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SentencePair(BaseModel):
    """A source sentence and its translation."""

    model_config = ConfigDict(populate_by_name=True)

    source_text: str = Field(..., alias="sourceText")
    translated_text: str = Field(..., alias="translatedText")


class SentenceChunks(BaseModel):
    """Chunks of one sentence pair, in source order."""

    chunks: List[SentencePair] = Field(default_factory=list)


class SentenceSplitRequest(BaseModel):
    """Sentence split request.

    ``text`` is a JSON-encoded mapping from language-pair key (``"fr-en"``)
    to a list of ``{sourceText, translatedText}`` pairs. It is forwarded to
    the model verbatim.
    """

    text: str = Field(..., description="JSON-encoded sentence pairs")


class SentenceSplitResult(BaseModel):
    """Structured or degraded sentence split output.

    Exactly one of ``pairs`` and ``sentences`` is set. ``degraded`` is True
    when the sentences were produced by the fallback segmenter rather than
    parsed from the model's reply.
    """

    pairs: Optional[Dict[str, List[SentenceChunks]]] = None
    sentences: Optional[List[str]] = None
    degraded: bool = False

    def payload(self) -> Union[Dict[str, List[SentenceChunks]], List[str]]:
        """Get whichever of ``pairs`` or ``sentences`` is populated."""
        if self.pairs is not None:
            return self.pairs
        return self.sentences or []
