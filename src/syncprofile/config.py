"""Configuration management for the sync profile tools."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file from config directory or project root
config_env = Path(__file__).parent.parent.parent / "config" / ".env"
if config_env.exists():
    load_dotenv(config_env)
else:
    load_dotenv()


class Config:
    """Application configuration."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Profile storage
        self.profile_directory = Path(
            os.getenv(
                "SYNCPROFILE_PROFILE_DIR",
                str(Path.home() / ".sync-profile" / "profiles"),
            )
        ).expanduser()

        # Logging
        self.log_level = os.getenv("SYNCPROFILE_LOG_LEVEL", "INFO").upper()
        log_file = os.getenv("SYNCPROFILE_LOG_FILE")
        self.log_file: Optional[Path] = Path(log_file).expanduser() if log_file else None


def get_config() -> Config:
    """Get application configuration."""
    return Config()
