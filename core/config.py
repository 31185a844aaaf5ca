"""
Configuration management using Pydantic Settings
Handles environment variables and validation
"""
from functools import lru_cache
from typing import Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # Environment
    environment: str = Field(default="development")

    # Application
    app_name: str = "lighthouse-tool"
    app_version: str = "0.1.0"

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")  # json or text

    # Lighthouse engine
    lighthouse_binary: str = Field(default="lighthouse", description="Lighthouse CLI executable")
    lighthouse_log_level: str = Field(default="error", description="Verbosity passed to Lighthouse")
    lighthouse_timeout_seconds: Optional[float] = Field(
        default=None, gt=0, description="Engine subprocess timeout, unset waits forever"
    )

    # Report output
    lighthouse_reports_base_dir: Optional[str] = Field(
        default=None, description="Base directory for reports, defaults to the working directory"
    )
    lighthouse_reports_subdir: str = Field(default="lighthouse-reports")

    # Host browser (CLI only)
    capture_snapshot: bool = Field(default=True)
    browser_debugging_port: int = Field(default=9222)
    browser_headless: bool = Field(default=True)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        allowed = ["json", "text"]
        if v not in allowed:
            raise ValueError(f"Log format must be one of: {allowed}")
        return v

    @field_validator("lighthouse_log_level")
    @classmethod
    def validate_lighthouse_log_level(cls, v):
        allowed = ["silent", "error", "info", "verbose"]
        if v not in allowed:
            raise ValueError(f"Lighthouse log level must be one of: {allowed}")
        return v

    @field_validator("browser_debugging_port")
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError("Debugging port must be between 1 and 65535")
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


# Global settings instance
settings = get_settings()
