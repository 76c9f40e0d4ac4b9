"""
Service configuration.

Values come from environment variables (and an optional .env file) through
pydantic-settings. The application factory takes a Settings instance, so
tests build one explicitly instead of touching the environment.
"""

from functools import lru_cache
from typing import List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AI gateway
    ai_gateway_api_key: Optional[str] = Field(
        default=None,
        description="Bearer token for the chat-completions gateway",
    )
    ai_gateway_url: str = Field(
        default="https://ai.gateway.lovable.dev/v1/chat/completions",
        description="Chat-completions endpoint",
    )
    ai_model: str = Field(
        default="google/gemini-2.5-flash",
        description="Model name sent with every completion request",
    )
    ai_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout for the single outbound completion request",
    )

    # Projection
    projection_annual_rate: float = Field(
        default=0.02,
        ge=0.0,
        le=1.0,
        description="Fixed nominal annual rate used by the projection endpoint",
    )

    # HTTP
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed origins, or *",
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level

    @property
    def cors_origins_list(self) -> Union[List[str], str]:
        """Origins in the shape flask-cors expects."""
        if self.cors_origins.strip() == "*":
            return "*"
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Settings loaded from the environment (cached).

    Call get_settings.cache_clear() to reload.
    """
    return Settings()
