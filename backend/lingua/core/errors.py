"""Error taxonomy for the response resolution pipeline.

Every error carries a ``category`` string so that callers (the HTTP layer
in particular) can choose a status code without matching on messages.
"""

from typing import Optional


class LinguaError(Exception):
    """Base class for all classified failures."""

    category = "internal_error"
    description = "Internal error"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail
        message = self.description if not detail else f"{self.description}: {detail}"
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class EmptyInputError(LinguaError):
    """Raised when the caller supplies blank text."""

    category = "empty_input"
    description = "Message cannot be empty"


class ModelError(LinguaError):
    """Raised by text generators when the provider call fails."""

    category = "model_error"
    description = "Model call failed"

    def __init__(self, detail: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(detail)


class ModelInvocationFailedError(LinguaError):
    """Raised by orchestrators when the model capability fails."""

    category = "model_invocation_failed"
    description = "Model invocation failed"


class JsonExtractionError(LinguaError):
    """Base class for extraction failures."""

    category = "json_extraction_failed"
    description = "JSON extraction failed"


class NoJsonFoundError(JsonExtractionError):
    """The text has no ``{`` ... ``}`` span to parse."""

    category = "no_json_found"
    description = "No valid JSON found in the response"


class MalformedJsonError(JsonExtractionError):
    """The extraction span is not valid JSON."""

    category = "malformed_json"
    description = "Malformed JSON in the response"

    def __init__(self, detail: Optional[str] = None, candidate: str = ""):
        self.candidate = candidate
        super().__init__(detail)


class ResponseParseFailedError(LinguaError):
    """The model reply could not be turned into the expected result."""

    category = "response_parse_failed"
    description = "Failed to parse model response"


class UnexpectedResponseShapeError(LinguaError):
    """The model reply parsed, but not into a supported structure."""

    category = "unexpected_response_shape"
    description = "Unexpected response shape"
