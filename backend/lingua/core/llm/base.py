"""Abstract text generation capability.

This module defines the single interface the orchestrators consume. Each
provider is an adapter implementing ``generate_text``.
"""

from abc import ABC, abstractmethod


class TextGenerator(ABC):
    """Abstract base class for model-backed text generation."""

    @property
    @abstractmethod
    def provider(self) -> str:
        """Get provider name."""
        pass

    @property
    @abstractmethod
    def model(self) -> str:
        """Get model identifier."""
        pass

    @abstractmethod
    async def generate_text(self, user_prompt: str, system_prompt: str = "") -> str:
        """Generate raw text for a prompt.

        Args:
            user_prompt: User message content
            system_prompt: System message content, may be empty

        Returns:
            Raw reply text

        Raises:
            ModelError: If the provider call fails or returns nothing
        """
        pass

    async def health_check(self) -> bool:
        """Check if the provider is available.

        Returns:
            True if a minimal generation succeeds
        """
        try:
            await self.generate_text("Hi")
            return True
        except Exception:
            return False
