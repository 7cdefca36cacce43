"""LiteLLM-backed text generation.

This module provides the concrete TextGenerator used in production, along
with a factory that applies per-provider defaults.
"""

import logging
import time
from typing import Any, Dict, Optional

from litellm import acompletion

from ..errors import ModelError
from .base import TextGenerator
from .runtime_config import GEMINI_SAFETY_SETTINGS, LLMRuntimeConfig
from lingua.utils.text import safe_truncate

logger = logging.getLogger(__name__)


class LiteLLMGateway(TextGenerator):
    """Unified gateway for all providers using LiteLLM."""

    def __init__(self, config: LLMRuntimeConfig):
        """Initialize LiteLLM gateway.

        Args:
            config: Connection and generation parameters
        """
        self.config = config
        logger.info(
            f"[LLM Gateway] Initialized: provider={config.provider}, model={config.model}, "
            f"litellm_model={config.get_litellm_model()}, base_url={config.base_url}"
        )

    @property
    def provider(self) -> str:
        return self.config.provider

    @property
    def model(self) -> str:
        return self.config.model

    async def generate_text(self, user_prompt: str, system_prompt: str = "") -> str:
        """Make LLM API call using LiteLLM.

        Args:
            user_prompt: User message content
            system_prompt: System message content, omitted when empty

        Returns:
            Raw reply text

        Raises:
            ModelError: If the call fails or the reply is empty
        """
        start_time = time.time()

        messages = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": user_prompt})

        kwargs = self.config.to_litellm_kwargs()
        kwargs["messages"] = messages

        logger.info(
            f"LLM call: model={kwargs['model']}, provider={self.provider}, "
            f"temperature={self.config.temperature}, max_tokens={self.config.max_tokens}"
        )

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            logger.error(
                f"LLM call failed: model={self.model}, status={status_code}, error={e}"
            )
            raise ModelError(f"{self.provider} call failed: {e}", status_code=status_code) from e

        latency_ms = int((time.time() - start_time) * 1000)
        content = response.choices[0].message.content if response.choices else None

        if not content:
            logger.error(f"{self.provider} returned an empty response")
            raise ModelError(f"{self.provider} returned an empty response")

        logger.info(f"LLM response: latency={latency_ms}ms, chars={len(content)}")
        logger.debug("LLM raw response: %s", safe_truncate(content, 500))

        return content


class GatewayFactory:
    """Factory for creating LLM gateways."""

    # Provider configurations
    PROVIDER_CONFIGS: Dict[str, Dict[str, Any]] = {
        "gemini": {
            "base_url": None,  # Let LiteLLM use default Gemini endpoint
            "safety_settings": GEMINI_SAFETY_SETTINGS,
        },
        "openai": {"base_url": None},
        "anthropic": {"base_url": None},
        "deepseek": {"base_url": "https://api.deepseek.com/v1"},
        "ollama": {"base_url": None},
        "openrouter": {"base_url": None},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        model: str,
        api_key: Optional[str] = None,
        **kwargs: Any,
    ) -> TextGenerator:
        """Create an LLM gateway for the specified provider.

        Unknown providers are routed to LiteLLM with a ``provider/`` model
        prefix and no base URL.

        Args:
            provider: Provider name (gemini, openai, anthropic, deepseek, ...)
            model: Model identifier
            api_key: API key for authentication
            **kwargs: Overrides for LLMRuntimeConfig fields (base_url,
                temperature, max_tokens, top_p, timeout)

        Returns:
            Configured TextGenerator
        """
        provider = provider.lower()
        defaults = cls.PROVIDER_CONFIGS.get(provider, {"base_url": None})

        config = LLMRuntimeConfig(
            provider=provider,
            model=model,
            api_key=api_key,
            base_url=kwargs.pop("base_url", defaults.get("base_url")),
            safety_settings=list(defaults.get("safety_settings", [])),
            **kwargs,
        )
        return LiteLLMGateway(config)

    @classmethod
    def from_config(cls, config: LLMRuntimeConfig) -> TextGenerator:
        """Create a gateway from a resolved configuration."""
        return LiteLLMGateway(config)

    @classmethod
    def get_supported_providers(cls) -> list[str]:
        """Get list of explicitly configured provider names."""
        return list(cls.PROVIDER_CONFIGS.keys())
