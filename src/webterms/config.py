"""Application configuration from environment variables."""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment (WEBTERMS_ prefix)."""

    model_config = SettingsConfigDict(
        env_prefix="WEBTERMS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Storage
    data_file: Path = Field(
        default=Path("data/db.json"),
        description="JSON file holding documents and publication jobs",
    )
    storage_dir: Path = Field(default=Path("storage"), description="Blob storage directory")

    # Conversion
    converter_url: str = Field(
        default="",
        description="Gotenberg-compatible converter URL; empty uses local soffice",
    )
    converter_timeout_seconds: float = Field(default=120.0, gt=0)
    soffice_binary: str = Field(default="soffice", description="LibreOffice executable")

    # Publication
    publication_target_repo: str = Field(
        default="CIMAFOUNDATION/cima-legal-public-docs",
        description="owner/name of the public documents repository",
    )
    publication_base_branch: str = Field(default="main")
    github_token: str = Field(default="", description="GitHub token; empty uses the stub publisher")
    github_api_url: str = Field(default="https://api.github.com")

    # Public URLs
    public_base_path: str = Field(default="/v1/public")
    api_base_path: str = Field(default="/v1")

    # HTTP
    require_login: bool = Field(default=False, description="Require a session token for writes")
    cors_origins: str = Field(default="*", description="Comma-separated allowed origins")
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8787)

    # Sessions
    session_tokens: str = Field(
        default="",
        description="Comma-separated subject:token pairs accepted as bearer tokens",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("session_tokens")
    @classmethod
    def check_session_tokens(cls, value: str) -> str:
        for pair in filter(None, (p.strip() for p in value.split(","))):
            subject, sep, token = pair.partition(":")
            if not sep or not subject.strip() or not token.strip():
                raise ValueError("session_tokens entries must be subject:token")
        return value

    def session_token_map(self) -> dict[str, str]:
        """token -> subject for the configured session tokens."""
        sessions: dict[str, str] = {}
        for pair in filter(None, (p.strip() for p in self.session_tokens.split(","))):
            subject, _, token = pair.partition(":")
            sessions[token.strip()] = subject.strip()
        return sessions


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def configure_logging(level: str) -> None:
    """Root logging setup for the service process."""
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
