"""Application configuration."""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Lingua Backend"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 5001

    # CORS
    cors_origins: list[str] = ["*"]

    # LLM defaults
    llm_provider: str = "gemini"
    llm_model: str = "gemini-1.5-flash"
    llm_temperature: float = 0.5
    llm_top_p: Optional[float] = 0.95
    llm_max_tokens: int = 8192
    llm_timeout: float = 60.0  # seconds

    # LLM API Keys
    gemini_api_key: Optional[str] = None
    google_api_key: Optional[str] = None  # Legacy name, used when GEMINI_API_KEY is unset
    openai_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    deepseek_api_key: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def resolve_api_key(self, provider: Optional[str] = None) -> Optional[str]:
        """Get the API key configured for a provider.

        Args:
            provider: Provider name, defaults to ``llm_provider``

        Returns:
            The API key, or None if not configured
        """
        provider = (provider or self.llm_provider).lower()
        if provider == "gemini":
            return self.gemini_api_key or self.google_api_key
        return getattr(self, f"{provider}_api_key", None)


settings = Settings()
