"""Application settings with validation."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class CalculatorSettings(BaseSettings):
    """Poisson calculator configuration."""

    model_config = SettingsConfigDict(
        env_prefix="POISSON_",
        env_file=".env",
        extra="ignore"
    )

    goal_limit: int = 5  # Grid covers scorelines 0-0 to 5-5
    guard_zero_average: bool = False
    zero_average_default: float = 1.0

    @field_validator("goal_limit")
    @classmethod
    def validate_goal_limit(cls, v: int) -> int:
        """Validate goal limit is non-negative."""
        if v < 0:
            raise ValueError(f"Invalid goal limit: {v}. Must be >= 0")
        return v

    @field_validator("zero_average_default")
    @classmethod
    def validate_zero_average_default(cls, v: float) -> float:
        """Validate substitute average is positive."""
        if v <= 0:
            raise ValueError(f"Invalid zero average default: {v}. Must be > 0")
        return v


class AppSettings(BaseSettings):
    """Application-wide settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    # Nested settings
    calculator: CalculatorSettings = Field(default_factory=CalculatorSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()


# Singleton instance
settings = AppSettings()
