from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (parent of intercom_sink/) - used so .env is found regardless of cwd
_PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Explicitly load .env into os.environ so it works in tests and subprocesses
load_dotenv(_PROJECT_ROOT / ".env")


class Settings(BaseSettings):
    app_name: str = "intercom-sink"
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENV", "ENVIRONMENT"),
    )
    log_level: str = Field(default="INFO", json_schema_extra={"env": "LOG_LEVEL"})
    log_json: bool = Field(default=True, json_schema_extra={"env": "LOG_JSON"})

    # Storage
    output_bucket: Optional[str] = Field(
        default=None, json_schema_extra={"env": "OUTPUT_BUCKET"}
    )
    aws_region: Optional[str] = Field(
        default=None, json_schema_extra={"env": "AWS_REGION"}
    )
    upload_concurrency: int = Field(
        default=8, ge=1, le=64, json_schema_extra={"env": "UPLOAD_CONCURRENCY"}
    )

    model_config = SettingsConfigDict(
        env_file=str(_PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if the current environment is production."""
        return self.environment.lower() == "production"

    @property
    def is_test(self) -> bool:
        """Check if the current environment is test."""
        return self.environment.lower() == "test"


def get_settings() -> Settings:
    """Get application settings from the environment."""
    return Settings()
