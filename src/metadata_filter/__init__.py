"""
Metadata Filter - Composable Field-Based Text Filters.

Applies ordered chains of pure ``str -> str`` functions to metadata
values such as artist names or track titles. Callers supply the filter
functions; this package merges them per field and applies them.

Main Components:
    - registry: MetadataFilter and factory helpers
    - interfaces: Protocol and type aliases for filter functions
    - config: YAML-driven filter sets
    - exceptions: InvalidArgumentError and InvalidFieldError

Example:
    >>> from metadata_filter import create_filter
    >>> title_filter = create_filter({"title": str.strip})
    >>> title_filter.filter_field("title", "  abc  ")
    'abc'
"""

import logging

from metadata_filter.exceptions import (
    InvalidArgumentError,
    InvalidFieldError,
    MetadataFilterError,
)
from metadata_filter.interfaces import FilterFunction, FilterSet, MetadataFilterProtocol
from metadata_filter.registry import (
    MetadataFilter,
    create_filter,
    create_filter_from_function,
    identity,
)

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Metadata Filter.

    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import metadata_filter
        >>> metadata_filter.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("metadata_filter").setLevel(level)


__all__ = [
    "FilterFunction",
    "FilterSet",
    "InvalidArgumentError",
    "InvalidFieldError",
    "MetadataFilter",
    "MetadataFilterError",
    "MetadataFilterProtocol",
    "configure_logging",
    "create_filter",
    "create_filter_from_function",
    "identity",
]
