"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal

from pydantic import field_validator
from pydantic_settings import BaseSettings


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


class GuardedAccountConfig(BaseSettings):
    """Guarded account configuration"""

    # Console session configuration
    account_number: str = "123456"

    # Business rules configuration
    withdrawal_limit: Decimal = Decimal("500")  # Per-withdrawal ceiling

    # Observer configuration
    isolate_observer_errors: bool = True  # False = first failing observer aborts the rest

    # Logging configuration
    log_level: str = "WARNING"
    log_format: str = "json"  # json or text

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{value}'")
        return level

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, value: str) -> str:
        log_format = value.lower()
        if log_format not in LOG_FORMATS:
            raise ValueError(f"log_format must be one of {', '.join(LOG_FORMATS)}, got '{value}'")
        return log_format

    class Config:
        env_prefix = "GUARDED_ACCOUNT_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = GuardedAccountConfig()


def get_config() -> GuardedAccountConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> GuardedAccountConfig:
    """Reload configuration from environment"""
    global config
    config = GuardedAccountConfig()
    return config
