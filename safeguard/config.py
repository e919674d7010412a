"""
Configuration Management

Centralized configuration using Pydantic Settings with environment variables.
Supports validation, type checking, and default values.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


SUPPORTED_HASH_ALGORITHMS = ["SHA-256", "SHA-384", "SHA-512"]


class Settings(BaseSettings):
    """
    Security core settings loaded from environment variables.

    All settings can be overridden via environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===================================
    # Application Settings
    # ===================================
    APP_NAME: str = Field(default="Safeguard", description="Application name")

    # ===================================
    # Randomness
    # ===================================
    RANDOM_ALGORITHM: str = Field(default="SystemRandom", description="Name of the CSPRNG algorithm")
    GUID_HASH_SALT: str = Field(default="salt", description="Salt used when hashing GUID seeds")

    # ===================================
    # Hashing
    # ===================================
    HASH_ALGORITHM: str = Field(default="SHA-512", description="Digest algorithm for the hasher")
    HASH_ITERATIONS: int = Field(default=1024, ge=1, description="Number of digest rounds")

    # ===================================
    # Logging Configuration
    # ===================================
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: str = Field(default="json", description="Log format: json or text")
    LOG_FILE: Optional[str] = Field(default=None, description="Log file path")

    # ===================================
    # Monitoring
    # ===================================
    ENABLE_METRICS: bool = Field(default=True, description="Enable Prometheus metrics")

    # ===================================
    # Validators
    # ===================================

    @field_validator("HASH_ALGORITHM")
    @classmethod
    def validate_hash_algorithm(cls, v):
        """Validate hash algorithm name."""
        v = v.upper()
        if v not in SUPPORTED_HASH_ALGORITHMS:
            raise ValueError(f"Hash algorithm must be one of: {SUPPORTED_HASH_ALGORITHMS}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v):
        """Validate log format."""
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("Log format must be one of: ['json', 'text']")
        return v

    # ===================================
    # Configuration Provider
    # ===================================

    def get_random_algorithm(self) -> str:
        """
        Get the configured random algorithm name.

        Returns:
            str: Algorithm identifier, e.g. ``SystemRandom``
        """
        return self.RANDOM_ALGORITHM


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.

    Returns:
        Settings: Application settings
    """
    return Settings()
