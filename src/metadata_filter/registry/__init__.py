"""
Registry Module - Metadata Filter Management.

Components:
    - MetadataFilter: Merged field to filter-chain mapping
    - create_filter: Factory for MetadataFilter
    - create_filter_from_function: Same function for several fields
"""

from metadata_filter.registry.factory import create_filter_from_function, identity
from metadata_filter.registry.metadata_filter import (
    MetadataFilter,
    assert_filter_function_is_valid,
    create_filter,
)

__all__ = [
    "MetadataFilter",
    "assert_filter_function_is_valid",
    "create_filter",
    "create_filter_from_function",
    "identity",
]
