"""Application configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "HR Assistant"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    frontend_port: int = 5173
    api_prefix: str = "/api"

    # CORS - dynamically built based on frontend_port
    cors_origins: list[str] = []

    # Knowledge base (loaded once at startup, never reloaded)
    knowledge_base_path: Path = Path(__file__).parent.parent.parent / "data" / "hr_policies.json"

    # Generation service (required for /chat)
    cohere_api_key: Optional[str] = None
    generation_provider: str = "cohere_chat"
    generation_model: str = "command-r-plus-08-2024"
    generation_temperature: float = 0.1
    generation_max_tokens: int = 500

    # Translation service (optional - translation is a no-op without a key)
    sarvam_api_key: Optional[str] = None
    translation_url: str = "https://api.sarvam.ai/translate"
    translation_model: str = "mayura:v1"

    # Static labels reported in every chat response
    provider_label: str = "Cohere + Sarvam AI"
    model_label: str = "command-r-plus + Sarvam Translate"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Build CORS origins based on frontend port
        if not self.cors_origins:
            self.cors_origins = [
                f"http://localhost:{self.frontend_port}",
                f"http://127.0.0.1:{self.frontend_port}",
            ]


settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings (overridable in tests)."""
    return settings
