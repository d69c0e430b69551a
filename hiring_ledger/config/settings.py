"""
Application settings and configuration.
Uses pydantic-settings for environment variable loading.
"""

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
    
    # Registry
    admin_identity: str = Field(
        default="admin",
        description="Identity that owns a registry when none is given explicitly"
    )
    max_rating: int = Field(
        default=5,
        ge=0,
        description="Largest rating accepted by a single provide_rating call"
    )
    hire_rating_bonus: int = Field(
        default=1,
        ge=0,
        description="Rating added to an applicant when they are hired"
    )
    
    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")


# Global settings instance
settings = Settings()
