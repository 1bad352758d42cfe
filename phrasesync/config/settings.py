"""
Configuration management system using Pydantic Settings.
Supports environment-based configuration for different deployment environments.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import List
from enum import Enum


class Environment(str, Enum):
    """Supported deployment environments"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class DatabaseSettings(BaseSettings):
    """Phrase store database configuration"""

    url: str = Field(default="sqlite:///./phrasesync.db")
    echo: bool = Field(default=False)
    pool_pre_ping: bool = Field(default=True)

    model_config = {"env_prefix": "DATABASE_"}


class Settings(BaseSettings):
    """Main application settings"""

    # Application Configuration
    app_name: str = Field(default="phrasesync")
    environment: Environment = Field(default=Environment.DEVELOPMENT)

    # Logging Configuration
    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: str = Field(default="json", description="json or text")

    # Language catalog
    supported_languages: str = Field(
        default="en,de,fr,es,it,ja", description="Comma-separated language IDs"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @field_validator('environment', mode='before')
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment setting"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator('supported_languages', mode='before')
    @classmethod
    def join_supported_languages(cls, v):
        """Accept a list of language IDs as well as a comma-separated string"""
        if isinstance(v, (list, tuple, set)):
            return ",".join(v)
        return v

    def get_supported_languages(self) -> List[str]:
        """Parse language IDs, dropping blanks"""
        return [code.strip() for code in self.supported_languages.split(",") if code.strip()]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings instance"""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment and files"""
    global settings
    settings = Settings()
    return settings
