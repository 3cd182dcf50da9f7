"""Configuration management for dagseg."""

import os
from pathlib import Path
from dataclasses import dataclass
from dotenv import load_dotenv


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    dict_path: Path | None = None
    dict_url: str | None = None

    # HTTP settings for remote dictionaries
    http_timeout: float = 30.0
    http_retries: int = 3

    log_level: str = "WARNING"

    @property
    def dictionary_source(self) -> str | None:
        """Configured dictionary source: local path first, then URL."""
        if self.dict_path is not None:
            return str(self.dict_path)
        return self.dict_url


def load_settings() -> Settings:
    """Load settings from environment variables.

    Looks for .env file in current directory and parents.
    """
    load_dotenv()

    dict_path_str = os.getenv("DAGSEG_DICT_PATH")
    dict_path = Path(dict_path_str) if dict_path_str else None

    return Settings(
        dict_path=dict_path,
        dict_url=os.getenv("DAGSEG_DICT_URL") or None,
        http_timeout=float(os.getenv("DAGSEG_HTTP_TIMEOUT", "30.0")),
        http_retries=int(os.getenv("DAGSEG_HTTP_RETRIES", "3")),
        log_level=os.getenv("DAGSEG_LOG_LEVEL", "WARNING"),
    )


# Global settings instance (lazy loaded)
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings
