"""Filter collection mutations.

Every operation takes the current collection and returns the next one.
Collections are immutable tuples; an ignored mutation returns the input
unchanged. Ignored mutations are stale-UI races, not faults: they are
logged at DEBUG and never raise.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import TYPE_CHECKING

from rosterfilter.application.coercion import coerce
from rosterfilter.application.engine.selection import (
    find_attribute_filter,
    find_filter,
    find_target_filter,
)
from rosterfilter.application.formatting import display_value_for
from rosterfilter.application.operators import SELECTION_OPERATORS, default_operator, operators_for
from rosterfilter.domain.model.configuration import DEFAULT_CONFIG
from rosterfilter.domain.model.enums import Category, Operator
from rosterfilter.domain.model.filter_item import AttributeValue, FilterItem

if TYPE_CHECKING:
    from rosterfilter.domain.model import FilterList
    from rosterfilter.domain.model.configuration import EngineConfig
    from rosterfilter.domain.model.options import (
        AttributeDescriptor,
        GroupOption,
        OptionCatalogs,
        PersonOption,
        RelationshipOption,
    )

logger = logging.getLogger(__name__)


def new_filter_id() -> str:
    """Generate an opaque unique filter id."""
    return f"filter-{uuid.uuid4().hex}"


def toggle(
    filters: FilterList,
    catalogs: OptionCatalogs,
    category: Category | str,
    target: str | AttributeValue,
    checked: bool,
    config: EngineConfig | None = None,
) -> FilterList:
    """Apply a checkbox toggle event.

    Args:
        filters: Current collection
        catalogs: Option catalogs the target is looked up in
        category: Category of the toggled option, as enum or its wire string
        target: Relationship option id, group id or person id; an
            AttributeValue for attributes
        checked: True = select, False = deselect
        config: Engine configuration

    Returns:
        Next collection
    """
    if isinstance(category, str):
        try:
            category = Category(category)
        except ValueError:
            logger.debug("unknown category %r, toggle ignored", category)
            return filters

    match category:
        case Category.ATTRIBUTES:
            if not isinstance(target, AttributeValue):
                logger.debug("attribute toggle requires AttributeValue, got %r", target)
                return filters
            return toggle_attribute_value(filters, catalogs, target, checked, config)
        case _ if isinstance(target, AttributeValue):
            logger.debug("%s toggle requires a target id, got %r", category.value, target)
            return filters
        case Category.RELATIONSHIPS:
            return toggle_relationship(filters, catalogs, target, checked, config)
        case Category.GROUPS:
            return toggle_group(filters, catalogs, target, checked, config)
        case Category.PEOPLE:
            return toggle_person(filters, catalogs, target, checked, config)
        case _:
            logger.debug("unsupported category %r, toggle ignored", category)
            return filters


def toggle_relationship(
    filters: FilterList,
    catalogs: OptionCatalogs,
    option_id: str,
    checked: bool,
    config: EngineConfig | None = None,
) -> FilterList:
    """Select or deselect a relationship option."""
    option = catalogs.relationship(option_id) if checked else None
    return _toggle_target(filters, Category.RELATIONSHIPS, option_id, option, checked, config)


def toggle_group(
    filters: FilterList,
    catalogs: OptionCatalogs,
    group_id: str,
    checked: bool,
    config: EngineConfig | None = None,
) -> FilterList:
    """Select or deselect a group."""
    option = catalogs.group(group_id) if checked else None
    return _toggle_target(filters, Category.GROUPS, group_id, option, checked, config)


def toggle_person(
    filters: FilterList,
    catalogs: OptionCatalogs,
    person_id: str,
    checked: bool,
    config: EngineConfig | None = None,
) -> FilterList:
    """Select or deselect a person."""
    option = catalogs.person(person_id) if checked else None
    return _toggle_target(filters, Category.PEOPLE, person_id, option, checked, config)


def _toggle_target(
    filters: FilterList,
    category: Category,
    target_id: str,
    option: RelationshipOption | GroupOption | PersonOption | None,
    checked: bool,
    config: EngineConfig | None,
) -> FilterList:
    """Shared toggle for single-valued categories."""
    existing = find_target_filter(filters, category, target_id)

    if not checked:
        if existing is None:
            return filters
        return remove_filter(filters, existing.id)

    if existing is not None:
        return filters
    if option is None:
        logger.debug("%s target %s not in catalog, ignored", category.value, target_id)
        return filters
    if not _has_capacity(filters, config):
        return filters

    item = FilterItem(
        id=new_filter_id(),
        category=category,
        subject=option.label,
        operator=Operator.IS,
        value=target_id,
        display_value=display_value_for(option, target_id),
        available_operators=SELECTION_OPERATORS,
        descriptor=option,
    )
    return (*filters, item)


def toggle_attribute_value(
    filters: FilterList,
    catalogs: OptionCatalogs,
    target: AttributeValue,
    checked: bool,
    config: EngineConfig | None = None,
) -> FilterList:
    """Add or remove one value of an attribute filter.

    One filter exists per attribute. Adding a second value promotes the
    scalar to a list with operator "is one of"; removing down to one
    value demotes it back to a scalar with operator "is"; removing the
    last value deletes the filter.

    Args:
        filters: Current collection
        catalogs: Catalogs holding the attribute descriptor
        target: Attribute key and value
        checked: True = add value, False = remove value
        config: Engine configuration

    Returns:
        Next collection
    """
    descriptor = catalogs.attribute(target.key)
    if descriptor is None:
        logger.debug("attribute %s not in catalog, ignored", target.key)
        return filters

    canonical = coerce(descriptor.data_type, target.value)
    if canonical is None:
        logger.debug("value %r is not a valid %s, ignored", target.value, descriptor.data_type.value)
        return filters
    value = AttributeValue(key=descriptor.key, value=canonical)

    existing = find_attribute_filter(filters, descriptor.key)
    if checked:
        return _add_value(filters, descriptor, existing, value, config)
    return _remove_value(filters, descriptor, existing, value)


def _add_value(
    filters: FilterList,
    descriptor: AttributeDescriptor,
    existing: FilterItem | None,
    value: AttributeValue,
    config: EngineConfig | None,
) -> FilterList:
    if existing is None:
        if not _has_capacity(filters, config):
            return filters
        item = FilterItem(
            id=new_filter_id(),
            category=Category.ATTRIBUTES,
            subject=descriptor.label,
            operator=Operator.IS,
            value=value,
            display_value=display_value_for(descriptor, value),
            available_operators=operators_for(descriptor.data_type, 1),
            descriptor=descriptor,
        )
        return (*filters, item)

    current = existing.attribute_values
    if value in current:
        return filters

    values = (*current, value)
    if existing.is_multi:
        updated = replace(existing, value=values, display_value=display_value_for(descriptor, values))
    else:
        updated = _reshape(existing, descriptor, values)
    return _replace_item(filters, updated)


def _remove_value(
    filters: FilterList,
    descriptor: AttributeDescriptor,
    existing: FilterItem | None,
    value: AttributeValue,
) -> FilterList:
    if existing is None or value not in existing.attribute_values:
        return filters

    remaining = tuple(v for v in existing.attribute_values if v != value)
    if not remaining:
        return remove_filter(filters, existing.id)
    if len(remaining) == 1:
        return _replace_item(filters, _reshape(existing, descriptor, remaining))

    updated = replace(existing, value=remaining, display_value=display_value_for(descriptor, remaining))
    return _replace_item(filters, updated)


def _reshape(existing: FilterItem, descriptor: AttributeDescriptor, values: tuple[AttributeValue, ...]) -> FilterItem:
    """Rebuild a filter whose cardinality crossed the single/multi boundary.

    Operator resets: "is" for one value, "is one of" for several.
    """
    cardinality = len(values)
    value = values[0] if cardinality == 1 else values
    return replace(
        existing,
        operator=default_operator(cardinality),
        value=value,
        display_value=display_value_for(descriptor, value),
        available_operators=operators_for(descriptor.data_type, cardinality),
    )


def change_operator(filters: FilterList, filter_id: str, operator: Operator | str) -> FilterList:
    """Change the operator of one filter.

    Value and shape are untouched. Operators outside the filter's
    available operators are ignored.

    Args:
        filters: Current collection
        filter_id: Filter to change
        operator: New operator, as enum or its display string

    Returns:
        Next collection
    """
    existing = find_filter(filters, filter_id)
    if existing is None:
        logger.debug("filter %s not found, operator change ignored", filter_id)
        return filters

    if isinstance(operator, str):
        try:
            operator = Operator(operator)
        except ValueError:
            logger.debug("unknown operator %r ignored", operator)
            return filters

    if operator not in existing.available_operators:
        logger.debug("operator %r not available for filter %s, ignored", operator.value, filter_id)
        return filters
    if operator is existing.operator:
        return filters

    return _replace_item(filters, replace(existing, operator=operator))


def remove_filter(filters: FilterList, filter_id: str) -> FilterList:
    """Delete a filter by id, regardless of category or shape."""
    if find_filter(filters, filter_id) is None:
        return filters
    return tuple(f for f in filters if f.id != filter_id)


def clear_filters(filters: FilterList) -> FilterList:
    """Delete every filter."""
    if filters:
        logger.debug("clearing %d filters", len(filters))
    return ()


def _replace_item(filters: FilterList, updated: FilterItem) -> FilterList:
    return tuple(updated if f.id == updated.id else f for f in filters)


def _has_capacity(filters: FilterList, config: EngineConfig | None) -> bool:
    limit = (config or DEFAULT_CONFIG).max_selections
    if len(filters) >= limit:
        logger.debug("selection limit %d reached, new filter ignored", limit)
        return False
    return True
