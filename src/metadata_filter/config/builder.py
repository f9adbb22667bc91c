"""
Filter Builder - Turn Config Into a MetadataFilter.

Dotted paths such as ``builtins.str.strip`` or
``mypkg.filters.remove_remastered`` are resolved by importing the longest
importable module prefix and following the remaining attributes.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from metadata_filter.config.loader import ProfileNames, load_config
from metadata_filter.config.models import FilterSetConfig
from metadata_filter.exceptions import InvalidArgumentError
from metadata_filter.interfaces.metadata_filter import FilterFunction
from metadata_filter.registry.metadata_filter import (
    MetadataFilter,
    assert_filter_function_is_valid,
)

logger = logging.getLogger(__name__)


def resolve_callable(dotted_path: str, field: Optional[str] = None) -> FilterFunction:
    """
    Resolve a dotted import path to a filter function.

    Args:
        dotted_path: Path like ``package.module.function``
        field: Field the function is resolved for

    Returns:
        The resolved callable

    Raises:
        InvalidArgumentError: If the path cannot be resolved or the
                              result is not callable
    """
    parts = dotted_path.strip().split(".")
    if not all(parts):
        raise InvalidArgumentError(f"Invalid filter path: '{dotted_path}'")

    for i in range(len(parts), 0, -1):
        module_name = ".".join(parts[:i])
        try:
            obj: Any = importlib.import_module(module_name)
        except ModuleNotFoundError as e:
            # A missing dependency inside an existing module is a real error
            if e.name and not (
                module_name == e.name or module_name.startswith(e.name + ".")
            ):
                raise
            continue

        for attr in parts[i:]:
            try:
                obj = getattr(obj, attr)
            except AttributeError as e:
                raise InvalidArgumentError(
                    f"Cannot resolve filter path '{dotted_path}': "
                    f"'{module_name}' has no attribute path '{'.'.join(parts[i:])}'"
                ) from e

        assert_filter_function_is_valid(obj, field)
        return obj

    raise InvalidArgumentError(f"Cannot import filter path: '{dotted_path}'")


def build_filter(config: FilterSetConfig) -> MetadataFilter:
    """
    Build a MetadataFilter from a validated configuration.

    Args:
        config: Filter set configuration

    Returns:
        MetadataFilter with callables in configured order

    Raises:
        InvalidArgumentError: If a path does not resolve to a callable
    """
    filter_set: Dict[str, List[FilterFunction]] = {}
    for field, paths in config.fields.items():
        filters = []
        for path in paths:
            fn = resolve_callable(path, field)
            logger.debug(f"Resolved filter '{path}' for field '{field}'")
            filters.append(fn)
        filter_set[field] = filters

    return MetadataFilter(filter_set)


def create_filter_from_config(
    config_path: Union[str, Path],
    profile: ProfileNames = None,
    base_path: Optional[Path] = None,
) -> MetadataFilter:
    """
    Load a YAML config and build a MetadataFilter from it.

    The log level is applied to the package logger only when the config
    has a logging section.
    """
    config = load_config(config_path, profile=profile, base_path=base_path)
    if "logging" in config.model_fields_set:
        logging.getLogger("metadata_filter").setLevel(config.logging.level)
    return build_filter(config)
