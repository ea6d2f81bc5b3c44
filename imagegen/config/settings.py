"""Configuration management for the application."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from imagegen.config.defaults import (
    DEFAULT_BASIC_MODEL_NAME,
    DEFAULT_IMAGE_MODEL_NAME,
    DEFAULT_SYSTEM_INSTRUCTION,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Public URL configuration, no default on purpose
    api_url: str = Field(..., description="Public base URL used for image links")

    # Storage Configuration
    storage_dir: str = Field(
        default="./uploads/ai-images", description="Directory for generated images"
    )

    # Model Configuration
    image_model_name: str = Field(
        default=DEFAULT_IMAGE_MODEL_NAME, description="Model for image generation"
    )
    basic_model_name: str = Field(
        default=DEFAULT_BASIC_MODEL_NAME, description="Model for text prompts"
    )
    system_instruction: str = Field(
        default=DEFAULT_SYSTEM_INSTRUCTION,
        description="System instruction for text prompts",
    )

    # GenAI Client Configuration
    gemini_api_key: str | None = Field(default=None, description="Gemini API key")
    use_vertexai: bool = Field(default=False, description="Use the Vertex AI backend")
    vertex_project_id: str | None = Field(default=None, description="GCP project ID")
    vertex_location: str = Field(default="us-central1", description="Vertex AI location")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Root log level")
    log_format: str = Field(
        default="%(asctime)s | %(levelname)-8s | %(name)s - %(message)s",
        description="logging format string",
    )

    # Tracing Configuration
    tracing_enabled: bool = Field(
        default=False, description="Enable Langfuse/OpenInference tracing"
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    max_upload_files: int = Field(
        default=10, description="Maximum attachments per HTTP request"
    )

    @field_validator("api_url")
    @classmethod
    def _normalize_api_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("API_URL must be set to a non-empty URL")
        return value.rstrip("/")

    @field_validator("vertex_project_id", "gemini_api_key")
    @classmethod
    def _blank_to_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


def load_settings(env: str) -> Settings:
    """Load settings for ``env``; ``.env.{env}`` overrides ``.env``."""
    return Settings(_env_file=(".env", f".env.{env}"))
