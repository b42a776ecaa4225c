"""Configuration management for pagelinks."""

from enum import Enum
from functools import lru_cache
from typing import List, Union

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseSettings):
    """Package settings, read from PAGELINKS_* environment variables."""

    # Application
    app_name: str = "pagelinks"
    app_version: str = "0.1.0"
    environment: Environment = Environment.DEVELOPMENT

    # Logging
    log_level: LogLevel = LogLevel.INFO
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_json: bool = False
    configure_logging: bool = False

    # Request handling
    page_param: str = "page"
    excluded_query_params: Union[List[str], str] = Field(
        default_factory=lambda: ["url"]
    )

    # Display defaults
    max_numbers: int = 10
    show_first_last: bool = True
    show_prev_next: bool = True
    show_numbers: bool = True
    paging_wrapper: str = "<ul>{content}</ul>"

    @validator("excluded_query_params", pre=True)
    def parse_excluded_query_params(cls, v):
        """Parse excluded query params from comma-separated string."""
        if isinstance(v, str):
            return [param.strip() for param in v.split(",") if param.strip()]
        return v

    @validator("paging_wrapper")
    def wrapper_has_content_slot(cls, v):
        """Wrapper template must contain the {content} placeholder."""
        if "{content}" not in v:
            raise ValueError("paging_wrapper must contain '{content}'")
        return v

    class Config:
        """Pydantic config."""

        env_prefix = "PAGELINKS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Convenience function for getting settings
settings = get_settings()
