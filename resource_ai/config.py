from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI-compatible completion provider (Groq by default)
    llm_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("LLM_API_KEY", "GROQ_API_KEY", "OPENAI_API_KEY"),
    )
    llm_base_url: str = "https://api.groq.com/openai/v1"
    llm_model: str = "llama-3.3-70b-versatile"
    llm_timeout: float = 60.0
    llm_temperature: float = 0.7

    summary_max_tokens: int = 1500
    flashcards_max_tokens: int = 4000
    chat_max_tokens: int = 1000

    # Catalog + artifact store
    postgres_host: str = "db"
    postgres_port: int = 5432
    postgres_user: str = "library"
    postgres_password: str = "library"
    postgres_db: str = "library"

    artifact_store_backend: Literal["postgres", "memory"] = "postgres"

    fetch_timeout: float = 30.0
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @property
    def pg_dsn(self) -> str:
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
