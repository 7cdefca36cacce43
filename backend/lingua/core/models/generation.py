"""Free-form generation models."""

from pydantic import BaseModel, Field


class GenerationRequest(BaseModel):
    """Prompt forwarded to the model as-is."""

    prompt: str = Field(default="", description="User prompt")


class GenerationResult(BaseModel):
    """Raw model reply."""

    response: str = Field(..., description="Text produced by the model")
