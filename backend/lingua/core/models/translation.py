"""Translation request and result models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Formality(str, Enum):
    """Register requested for the translation."""

    FORMAL = "formal"
    INFORMAL = "informal"
    OTHER = "other"  # Merges the formal and informal guidelines


class TranslationRequest(BaseModel):
    """Translation request payload."""

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(..., description="Text to translate")
    source_language: str = Field(..., alias="sourceLanguage")
    target_language: str = Field(..., alias="targetLanguage")
    formality: Formality = Field(..., description="Requested register")
    tone: str = Field(..., description="Requested tone, e.g. 'neutral'")

    @field_validator("formality", mode="before")
    @classmethod
    def _coerce_formality(cls, value: Any) -> Any:
        """Map unrecognized formality values to OTHER."""
        if isinstance(value, Formality):
            return value
        if isinstance(value, str):
            try:
                return Formality(value.strip().lower())
            except ValueError:
                return Formality.OTHER
        return value


class TranslationResult(BaseModel):
    """Translation extracted from the model's JSON reply."""

    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(..., alias="translatedText")
    detected_language: str = Field(..., alias="detectedLanguage")
