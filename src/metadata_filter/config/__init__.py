"""
Configuration Module - YAML-Driven Filter Sets.

Components:
    - FilterSetConfig: Pydantic model for a filter set
    - ConfigLoader: YAML loading with profiles appended to field chains
    - build_filter: Resolve callables and build a MetadataFilter
"""

from metadata_filter.config.builder import (
    build_filter,
    create_filter_from_config,
    resolve_callable,
)
from metadata_filter.config.loader import ConfigLoader, apply_profile, load_config
from metadata_filter.config.models import FilterSetConfig, LoggingConfig

__all__ = [
    "ConfigLoader",
    "apply_profile",
    "FilterSetConfig",
    "LoggingConfig",
    "build_filter",
    "create_filter_from_config",
    "load_config",
    "resolve_callable",
]
