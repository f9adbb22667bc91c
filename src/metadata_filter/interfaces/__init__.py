"""
Interfaces Layer - Protocols and Type Aliases.

Protocols:
    - MetadataFilterProtocol: Public surface of a metadata filter

Type Aliases:
    - FilterFunction: A ``str -> str`` transformation
    - FilterSet: Mapping of field name to one or more filter functions
"""

from metadata_filter.interfaces.metadata_filter import (
    FilterFunction,
    FilterSet,
    MetadataFilterProtocol,
)

__all__ = [
    "FilterFunction",
    "FilterSet",
    "MetadataFilterProtocol",
]
