"""Environment and settings (Pydantic Settings)."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# Default locations follow the XDG layout.
_config_dir = Path.home() / ".config" / "xplr"
_data_dir = Path.home() / ".local" / "share" / "xplr"


class Settings(BaseSettings):
    """Process settings loaded from environment and .env.

    The explorer's own configuration lives in the file at ``config_path``;
    these settings only say where to find it and how to run.
    """

    model_config = SettingsConfigDict(
        env_prefix="XPLR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_path: Path = _config_dir / "config.yml"

    # Forces read-only mode even when the config does not ask for it
    read_only: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    # Threshold for messages echoed to stderr
    console_log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_file: Path = _data_dir / "xplr.log"


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()
