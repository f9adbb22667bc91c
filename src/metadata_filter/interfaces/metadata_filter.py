"""
Metadata Filter Protocol.

Defines the abstract interface for objects that filter metadata fields.
Callers that only need to apply filters should depend on this protocol
rather than on the concrete MetadataFilter class.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Filter functions are opaque ``str -> str`` callables
    - Merge operations return the same instance for chaining
"""

from __future__ import annotations

from typing import (
    Any,
    Callable,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
    TYPE_CHECKING,
    Union,
    runtime_checkable,
)

if TYPE_CHECKING:
    from metadata_filter.registry.metadata_filter import MetadataFilter

FilterFunction = Callable[[str], str]

FilterSet = Mapping[str, Union[FilterFunction, Sequence[FilterFunction]]]


@runtime_checkable
class MetadataFilterProtocol(Protocol):
    """Abstract interface for metadata filters."""

    def filter_field(self, field: str, field_value: Optional[str]) -> Any:
        """
        Filter a field value using the filters configured for the field.

        Args:
            field: Metadata field name
            field_value: Value to filter

        Returns:
            Filtered value, or the value itself if it is empty

        Raises:
            InvalidFieldError: If the field has no filters
        """
        ...

    def append(self, filter_set: FilterSet) -> MetadataFilterProtocol:
        """Append filter functions from a filter set."""
        ...

    def extend(self, other: MetadataFilter) -> MetadataFilterProtocol:
        """
        Append all filter functions of another MetadataFilter.

        Raises:
            InvalidArgumentError: If other is not a MetadataFilter
        """
        ...

    def can_filter_field(self, field: str) -> bool:
        """Check if the filter has filter functions for a field."""
        ...

    def get_fields(self) -> List[str]:
        """List fields the filter can filter."""
        ...
