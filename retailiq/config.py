"""RetailIQ configuration — loaded from .env or environment variables."""

from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field

# Project root = retailiq/..
PROJECT_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # --- Mode ---
    app_env: str = Field(default="production", description="development or production")

    # --- LLM (any OpenAI-compatible chat completions endpoint) ---
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = "https://api.openai.com/v1"
    llm_temperature: float = 0.3
    llm_timeout: float = 30.0

    # --- Store ---
    database_path: Path = PROJECT_ROOT / "retail.db"
    query_timeout: float = 10.0

    # --- Server ---
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8501"]

    model_config = {
        "env_file": str(PROJECT_ROOT / ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    # --- Helpers ---
    @property
    def is_development(self) -> bool:
        return self.app_env.lower() == "development"

    @property
    def llm_available(self) -> bool:
        return bool(self.openai_api_key)


# Singleton
settings = Settings()
