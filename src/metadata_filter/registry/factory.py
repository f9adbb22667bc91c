"""
Filter Factory Helpers.

Shortcuts for building filters where the same function applies to
several fields.
"""

from __future__ import annotations

from typing import Iterable

from metadata_filter.interfaces.metadata_filter import FilterFunction
from metadata_filter.registry.metadata_filter import MetadataFilter, create_filter


def create_filter_from_function(
    filter_fn: FilterFunction,
    fields: Iterable[str],
) -> MetadataFilter:
    """
    Create a filter that applies one filter function to each given field.

    Args:
        filter_fn: Filter function
        fields: Fields to apply the function to

    Returns:
        MetadataFilter instance

    Example:
        >>> strip_filter = create_filter_from_function(str.strip, ["artist", "track"])
        >>> strip_filter.filter_field("artist", "  Queen ")
        'Queen'
    """
    return create_filter({field: filter_fn for field in fields})


def identity(text: str) -> str:
    """Return the input unchanged."""
    return text
