"""
Metadata Filter - Field-Based Chains of Text Filters.

A metadata filter holds, for every field it knows about (e.g. "artist",
"track"), an ordered list of filter functions. Filtering a field value
passes it through that list from first to last.

Usage:
    metadata_filter = create_filter({
        "track": [str.strip, remove_remastered_suffix],
        "artist": str.strip,
    })
    metadata_filter.append({"track": remove_live_suffix})

    metadata_filter.filter_field("track", " Song (Remastered) ")

Design Notes:
    - Merges are append-only: existing filters are never removed or reordered
    - A filter set is fully validated before any field is changed
    - No internal locking; an instance belongs to one caller at a time
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from metadata_filter.exceptions import InvalidArgumentError, InvalidFieldError
from metadata_filter.interfaces.metadata_filter import FilterFunction, FilterSet

logger = logging.getLogger(__name__)


class MetadataFilter:
    """
    Filters metadata fields by a merged set of filter functions.

    Each field can be given a single filter function or a list of them.
    A filter function is a pure function which takes a non-empty string
    and returns a modified string.
    """

    def __init__(self, filter_set: Optional[FilterSet]) -> None:
        """
        Initialize filter from a filter set.

        Args:
            filter_set: Mapping of field name to filter function(s)

        Raises:
            InvalidArgumentError: If no filter set is given or it holds
                                  a non-callable filter
        """
        if filter_set is None:
            raise InvalidArgumentError("No filter set is specified!")

        self._field_filters: Dict[str, List[FilterFunction]] = {}
        self._append_filters(filter_set)
        logger.debug(f"MetadataFilter created for fields: {self.get_fields()}")

    def filter_field(self, field: str, field_value: Optional[str]) -> Any:
        """
        Filter the field value using filters for the given field.

        Args:
            field: Metadata field
            field_value: Field value to be filtered

        Returns:
            Filtered string; empty values are returned unchanged

        Raises:
            InvalidFieldError: If the field has no filters
        """
        if field not in self._field_filters:
            raise InvalidFieldError(field)

        return self._filter_text(field_value, self._field_filters[field])

    def append(self, filter_set: FilterSet) -> MetadataFilter:
        """
        Append a new filter set.

        Args:
            filter_set: Mapping of field name to filter function(s)

        Returns:
            Current instance
        """
        self._append_filters(filter_set)
        return self

    def extend(self, other: MetadataFilter) -> MetadataFilter:
        """
        Extend the filter by all filters of another filter.

        Args:
            other: Filter whose filters are appended; it is not modified

        Returns:
            Current instance
        """
        if not isinstance(other, MetadataFilter):
            raise InvalidArgumentError(
                f"Cannot extend by '{type(other).__name__}', "
                f"expected 'MetadataFilter'"
            )

        self._append_filters(other._field_filters)
        return self

    def can_filter_field(self, field: str) -> bool:
        """Check if the filter contains filter functions for a given field."""
        return field in self._field_filters

    def get_fields(self) -> List[str]:
        """Return fields that the filter can filter, in insertion order."""
        return list(self._field_filters)

    def get_filters(self, field: str) -> List[FilterFunction]:
        """
        Return a copy of the filter functions for a field, in apply order.

        Raises:
            InvalidFieldError: If the field has no filters
        """
        if field not in self._field_filters:
            raise InvalidFieldError(field)
        return list(self._field_filters[field])

    def __contains__(self, field: object) -> bool:
        return field in self._field_filters

    def __len__(self) -> int:
        return len(self._field_filters)

    def __repr__(self) -> str:
        counts = ", ".join(
            f"{field}={len(filters)}" for field, filters in self._field_filters.items()
        )
        return f"MetadataFilter({counts})"

    @staticmethod
    def _filter_text(text: Optional[str], filters: Iterable[FilterFunction]) -> Any:
        """Pass text through filters from first to last."""
        if not text:
            return text

        filtered_text = text
        for filter_fn in filters:
            filtered_text = filter_fn(filtered_text)

        return filtered_text

    def _append_filters(self, filter_set: FilterSet) -> None:
        """
        Add filters of a filter set to current ones.

        All fields are validated first, so an invalid filter set leaves
        the current filters untouched.
        """
        if not isinstance(filter_set, Mapping):
            raise InvalidArgumentError(
                f"Invalid filter set: expected 'Mapping', "
                f"got '{type(filter_set).__name__}'"
            )

        pending = [
            (field, self._create_filters(field, filters))
            for field, filters in filter_set.items()
        ]

        for field, filters in pending:
            self._field_filters.setdefault(field, []).extend(filters)

        logger.debug(
            f"Appended {sum(len(f) for _, f in pending)} filter(s) "
            f"across {len(pending)} field(s)"
        )

    @staticmethod
    def _create_filters(field: str, filters: Any) -> List[FilterFunction]:
        """Convert a filter function or a list of them into a new list."""
        if isinstance(filters, (list, tuple)):
            if not filters:
                raise InvalidArgumentError(
                    f"Invalid filter list for field '{field}': no filter functions",
                    field=field,
                    value_type=type(filters).__name__,
                )
            for filter_fn in filters:
                assert_filter_function_is_valid(filter_fn, field)
            return list(filters)

        assert_filter_function_is_valid(filters, field)
        return [filters]


def assert_filter_function_is_valid(fn: Any, field: Optional[str] = None) -> None:
    """
    Raise an error if the given object is not a callable filter function.

    Args:
        fn: Object to check
        field: Field the object was supplied for

    Raises:
        InvalidArgumentError: If the object is not callable
    """
    if not callable(fn):
        logger.debug(
            f"Rejected filter for field '{field}': {type(fn).__name__} is not callable"
        )
        raise InvalidArgumentError.for_value(fn, field)


def create_filter(filter_set: Optional[FilterSet]) -> MetadataFilter:
    """
    Create a new MetadataFilter instance from a given filter set.

    Args:
        filter_set: Mapping of field name to filter function(s)

    Returns:
        MetadataFilter instance
    """
    return MetadataFilter(filter_set)
