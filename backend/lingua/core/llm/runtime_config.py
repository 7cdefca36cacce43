"""LLM runtime configuration.

LLMRuntimeConfig is the single source of the parameters that reach
``litellm.acompletion``.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from lingua.config import Settings

# Gemini blocks some translations of offensive text by default
GEMINI_SAFETY_SETTINGS: List[Dict[str, str]] = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_NONE"},
    {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_NONE"},
]


@dataclass
class LLMRuntimeConfig:
    """Complete LLM configuration for a gateway."""

    # Connection parameters
    provider: str
    model: str
    api_key: Optional[str] = None
    base_url: Optional[str] = None

    # Generation parameters
    temperature: float = 0.5
    max_tokens: int = 8192
    top_p: Optional[float] = None
    timeout: Optional[float] = None

    safety_settings: List[Dict[str, str]] = field(default_factory=list)

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMRuntimeConfig":
        """Build the default configuration from application settings."""
        provider = settings.llm_provider.lower()
        return cls(
            provider=provider,
            model=settings.llm_model,
            api_key=settings.resolve_api_key(provider),
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
            top_p=settings.llm_top_p,
            timeout=settings.llm_timeout,
            safety_settings=list(GEMINI_SAFETY_SETTINGS) if provider == "gemini" else [],
        )

    def get_litellm_model(self) -> str:
        """Get model string in LiteLLM format (provider/model)."""
        provider_prefixes = {
            "openai": "",  # No prefix for OpenAI
            "anthropic": "anthropic/",
            "gemini": "gemini/",
            "deepseek": "deepseek/",
            "ollama": "ollama/",
            "openrouter": "openrouter/",
        }
        prefix = provider_prefixes.get(self.provider, f"{self.provider}/")

        if not prefix or self.model.startswith(prefix):
            return self.model
        return f"{prefix}{self.model}"

    def to_litellm_kwargs(self) -> Dict[str, Any]:
        """Convert to kwargs for litellm.acompletion()."""
        kwargs: Dict[str, Any] = {
            "model": self.get_litellm_model(),
            "temperature": self.temperature,
            "max_tokens": self.max_tokens,
        }

        if self.api_key:
            kwargs["api_key"] = self.api_key

        if self.base_url:
            kwargs["api_base"] = self.base_url

        if self.top_p is not None:
            kwargs["top_p"] = self.top_p

        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        if self.safety_settings:
            kwargs["safety_settings"] = self.safety_settings

        return kwargs
