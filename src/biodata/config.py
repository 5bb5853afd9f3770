"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_default_log_path() -> Path:
    """Get default path to the log file (the TUI owns the terminal)."""
    return Path.home() / ".cache" / "biodata" / "biodata.log"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="BIODATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # NCBI E-utilities
    eutils_base_url: str = Field(
        default="https://eutils.ncbi.nlm.nih.gov/entrez/eutils",
        description="Base URL of the Entrez E-utilities",
    )
    default_database: str = Field(
        default="nuccore",
        description="Entrez database used when a page does not name one",
    )
    search_sort: str = Field(
        default="relevance",
        description="Sort order passed to esearch",
    )
    max_results: int = Field(
        default=20,
        ge=1,
        description="Maximum number of ids returned by a search (retmax)",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for a single E-utilities request",
    )

    # Downloads
    sequence_path: Path = Field(
        default=Path("sequence.txt"),
        description="File the full sequence of a record is written to (overwritten)",
    )

    # Navigation
    result_page_offset: int = Field(
        default=1000,
        ge=1,
        description="First page id handed out to fetched result pages",
    )
    label_padding: int = Field(
        default=20,
        ge=1,
        description="Width of the label column in formatted records",
    )
    exit_on_fetch_error: bool = Field(
        default=False,
        description="Terminate the session when a search or fetch fails",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_file: Path = Field(
        default_factory=_get_default_log_path,
        description="Log file path",
    )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get application settings (cached singleton)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
