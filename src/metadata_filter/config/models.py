"""
Configuration Models - Pydantic Models for Filter Set Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration settings."""

    level: str = Field(default="WARNING")

    @field_validator("level", mode="before")
    @classmethod
    def check_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.upper()
            if value not in LOG_LEVELS:
                raise ValueError(f"Unknown log level: {value}")
        return value


class FilterSetConfig(BaseModel):
    """Root configuration object: field name to dotted callable paths."""

    version: str = "1.0"
    fields: Dict[str, List[str]] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("fields", mode="before")
    @classmethod
    def normalize_fields(cls, value: Any) -> Any:
        """Wrap single paths into one-element lists."""
        if isinstance(value, dict):
            return {
                field: [paths] if isinstance(paths, str) else paths
                for field, paths in value.items()
            }
        return value

    @field_validator("fields")
    @classmethod
    def check_fields(cls, value: Dict[str, List[str]]) -> Dict[str, List[str]]:
        for field, paths in value.items():
            if not paths:
                raise ValueError(f"Field '{field}' has no filter functions")
            if any(not path.strip() for path in paths):
                raise ValueError(f"Field '{field}' has an empty filter path")
        return value
