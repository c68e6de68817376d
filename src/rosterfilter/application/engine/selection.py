"""Selection queries over a filter collection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rosterfilter.application.coercion import coerce
from rosterfilter.domain.model.enums import Category
from rosterfilter.domain.model.options import AttributeDescriptor

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rosterfilter.domain.model.filter_item import AttributeValue, FilterItem


def find_filter(filters: Sequence[FilterItem], filter_id: str) -> FilterItem | None:
    """Get filter by id. Returns None if not found."""
    return next((f for f in filters if f.id == filter_id), None)


def find_target_filter(filters: Sequence[FilterItem], category: Category, target_id: str) -> FilterItem | None:
    """Get relationship/group/person filter whose value is target_id."""
    return next((f for f in filters if f.category is category and f.value == target_id), None)


def find_attribute_filter(filters: Sequence[FilterItem], key: str) -> FilterItem | None:
    """Get the filter for an attribute. At most one exists per attribute."""
    for flt in filters:
        if isinstance(flt.descriptor, AttributeDescriptor) and flt.descriptor.key == key:
            return flt
    return None


def is_target_selected(filters: Sequence[FilterItem], category: Category, target_id: str) -> bool:
    """True if a relationship/group/person target has a filter."""
    return find_target_filter(filters, category, target_id) is not None


def is_value_selected(filters: Sequence[FilterItem], value: AttributeValue) -> bool:
    """True if an attribute value is held by its attribute's filter."""
    flt = find_attribute_filter(filters, value.key)
    if flt is None or not isinstance(flt.descriptor, AttributeDescriptor):
        return False
    canonical = coerce(flt.descriptor.data_type, value.value)
    return any(v.value == canonical for v in flt.attribute_values)


def attribute_filters(filters: Sequence[FilterItem]) -> tuple[FilterItem, ...]:
    """Filters of the ATTRIBUTES category, in collection order."""
    return tuple(f for f in filters if f.category is Category.ATTRIBUTES)
