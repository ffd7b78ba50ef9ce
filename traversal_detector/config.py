"""
Traversal Detector - Configuration
"""
from typing import Any, List

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from traversal_detector.core.vuln_engine.injection_context import (
    DEFAULT_INJECTION_POINTS,
    InjectionPoint,
)


class ConfigurationError(Exception):
    """Exception raised when detector settings are invalid."""
    pass


class Settings(BaseSettings):
    """Detector settings"""

    # Budgets
    MAX_CRAWLED_URLS_TO_FUZZ: int = Field(50, ge=0)
    MAX_EXPLOITS_TO_TEST: int = Field(200, ge=0)

    # Injection points, highest priority first
    INJECTION_POINTS: List[InjectionPoint] = Field(
        default_factory=lambda: list(DEFAULT_INJECTION_POINTS)
    )

    # Transport
    MAX_CONCURRENT_REQUESTS: int = Field(10, ge=1)
    REQUEST_TIMEOUT: float = Field(30.0, gt=0)

    class Config:
        env_prefix = "PATH_TRAVERSAL_"
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @field_validator("INJECTION_POINTS")
    @classmethod
    def validate_injection_points(cls, v: List[InjectionPoint]) -> List[InjectionPoint]:
        """Injection points must be non-empty and unique; order is priority."""
        if not v:
            raise ValueError("At least one injection point must be configured")
        seen = set()
        for point in v:
            if point in seen:
                raise ValueError(f"Injection point configured twice: {point.value}")
            seen.add(point)
        return v


def load_settings(**overrides: Any) -> Settings:
    """Build validated settings from the environment plus explicit overrides.

    Raises:
        ConfigurationError: if any value fails validation.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid path traversal detector configuration: {e}") from e
