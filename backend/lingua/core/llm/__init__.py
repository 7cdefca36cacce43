"""LLM integration package.

This package provides:
- TextGenerator: The one capability the orchestrators depend on
- LiteLLMGateway: TextGenerator adapter for all LiteLLM providers
- GatewayFactory: Builds gateways with per-provider defaults
- LLMRuntimeConfig: Parameters that reach the LiteLLM call
"""

from .base import TextGenerator
from .gateway import GatewayFactory, LiteLLMGateway
from .runtime_config import LLMRuntimeConfig

__all__ = [
    "TextGenerator",
    "LiteLLMGateway",
    "GatewayFactory",
    "LLMRuntimeConfig",
]
