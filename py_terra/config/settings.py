"""Runtime settings read from the environment or a local .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings pulled from TERRA_* environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    # Generation
    max_sample_attempts: int = Field(
        default=100_000,
        gt=0,
        description="Random draws allowed when searching for a seed coordinate",
    )

    model_config = SettingsConfigDict(
        env_prefix="TERRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
