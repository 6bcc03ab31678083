"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
Only the formatting helpers read it; the converter itself takes explicit arguments.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class TafqeetConfig(BaseSettings):
    """Amount-in-words configuration"""

    model_config = SettingsConfigDict(
        env_prefix="TAFQEET_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Document defaults
    default_currency: str = "SAR"  # ISO code, see tafqeet.currency
    closing_phrase: bool = False  # Append "لا غير" to printed amounts
    placeholder: str = "—"  # Printed when an amount cannot be spelled out

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text


# Global configuration instance
config = TafqeetConfig()


def get_config() -> TafqeetConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> TafqeetConfig:
    """Reload configuration from environment"""
    global config
    config = TafqeetConfig()
    return config
