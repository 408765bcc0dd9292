"""
Application configuration using Pydantic Settings
"""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Settings
    api_title: str = "ASCII Image Resolver API"
    api_description: str = (
        "Resolves a keyword to an image for ASCII-art rendering: "
        "local assets first, Unsplash as fallback"
    )
    api_version: str = "1.0.0"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False

    # Security Settings
    max_requests_per_minute: int = 60

    # Logging Settings
    log_level: str = "INFO"
    log_format: str = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    log_date_format: str = "%Y-%m-%d %H:%M:%S"
    log_file: str = ""  # empty = console only

    # Rendering defaults
    default_display_chars: str = "あいうえお"

    # Keyword Table Settings
    # JSON object {"keyword": ["/images/...", ...]}; empty = built-in table
    keyword_table_path: str = ""

    # Unsplash Settings
    unsplash_key: str = ""  # API key for Unsplash (client_id)
    unsplash_api_url: str = "https://api.unsplash.com/photos/random"
    unsplash_timeout: Optional[float] = None  # None = transport default

    @field_validator("default_display_chars")
    @classmethod
    def non_empty_display_chars(cls, v: str) -> str:
        """Reject an empty default; the renderer needs at least one glyph."""
        if not v:
            raise ValueError("default_display_chars must not be empty")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()
