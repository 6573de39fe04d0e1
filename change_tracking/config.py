"""
Configuration loaded from environment variables (prefix CHANGE_TRACKING_).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """change_tracking settings"""

    # External programs
    git_binary: str = "git"
    find_binary: str = "find"

    # Logging (only applied by the CLI)
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Hex characters kept by fingerprint()
    fingerprint_length: int = 10

    model_config = SettingsConfigDict(
        env_prefix="CHANGE_TRACKING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
