import logging
import os
from typing import Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cloud_samples.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Google Cloud
    GOOGLE_APPLICATION_CREDENTIALS: str | None = Field(None)
    GOOGLE_PROJECT_ID: str | None = Field(
        None,
        validation_alias=AliasChoices(
            "GOOGLE_PROJECT_ID", "GCLOUD_PROJECT", "GOOGLE_CLOUD_PROJECT"
        ),
    )

    # Translation
    TRANSLATE_LOCATION: str = Field("global")

    # App
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field("WARNING")

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        env_file_encoding="utf-8"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()


def ensure_credentials():
    """Ensure Google credentials are set in environment."""
    if settings.GOOGLE_APPLICATION_CREDENTIALS and "GOOGLE_APPLICATION_CREDENTIALS" not in os.environ:
        creds_path = settings.GOOGLE_APPLICATION_CREDENTIALS
        if not os.path.exists(creds_path):
            possible_paths = [
                creds_path.replace("/app/", ""),
                os.path.join("config", os.path.basename(creds_path)),
                os.path.join(os.getcwd(), os.path.basename(creds_path)),
            ]

            for path in possible_paths:
                if os.path.exists(path):
                    creds_path = path
                    break
            else:
                logger.warning(f"⚠️ Credentials file not found: {creds_path}")

        os.environ["GOOGLE_APPLICATION_CREDENTIALS"] = creds_path


def require_project_id(project_id: str | None = None) -> str:
    """Return the explicit project id, falling back to the configured one."""
    project_id = project_id or settings.GOOGLE_PROJECT_ID
    if not project_id:
        raise ConfigurationError(
            "GOOGLE_PROJECT_ID is not set. Export it (or GCLOUD_PROJECT) or add it to .env."
        )
    return project_id
