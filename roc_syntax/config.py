"""Application settings for the Roc Syntax MCP Server."""

import logging
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Packaged syntax sample, resolved relative to this module
DEFAULT_SYNTAX_FILE = Path(__file__).resolve().parent / "data" / "all_roc_syntax.roc"


class Settings(BaseSettings):
    """Server settings loaded from environment/.env."""

    # Reference document
    syntax_file: Path | None = Field(
        default=None,
        validation_alias="ROC_SYNTAX_FILE",
        description="Override path to the Roc syntax sample file",
    )

    # Server identity
    server_name: str = Field(default="roc-syntax")

    # Transport
    transport: str = Field(default="stdio", description="stdio or http")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)
    debug: bool = Field(default=False)

    # Observability
    log_level: str = Field(default="INFO")
    environment: str = Field(default="development")
    sentry_dsn: str | None = Field(default=None)

    # HTTP limits
    cors_allowed_origins: str = Field(default="*")
    max_json_payload_size: int = Field(default=1024 * 1024, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("syntax_file", mode="before")
    @classmethod
    def _blank_syntax_file_is_unset(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def syntax_file_path(self) -> Path:
        """Effective path of the reference document."""
        return self.syntax_file or DEFAULT_SYNTAX_FILE

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS origins parsed from the comma-separated setting."""
        if self.cors_allowed_origins.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr.

    stdout carries the JSON-RPC stream when running on stdio, so nothing
    else may be written there.
    """
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
        force=True,
    )
