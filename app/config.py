"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Values come from environment variables (case-insensitive) or a local
    ``.env`` file.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Badge Labels"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./badge_labels.db"

    # Barcode rendering
    barcode_symbology: str = Field("code128", pattern=r"^(code128|code39)$")
    barcode_scale: int = Field(3, ge=1, le=10)  # pixels per module
    barcode_height: int = Field(12, ge=4, le=60)  # bar height in mm

    # Print sequencing (shared with the browser script)
    print_delay_ms: int = Field(300, ge=0)
    popup_poll_interval_ms: int = Field(100, ge=10)
    popup_poll_max_attempts: int = Field(50, ge=1)


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
