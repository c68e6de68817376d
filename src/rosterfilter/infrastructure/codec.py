"""JSON codec: FilterList <-> JSON string.

Wire shape per filter:
    {"id", "category", "subject", "operator", "value", "displayValue",
     "availableOperators"}

Relationship/group/person values are target ids. Attribute values are
{"key", "value"} objects (a list of them for list shape) with dates as
ISO strings. The descriptor is not stored; decoding rebuilds it from
category and value against the option catalogs. displayValue and
availableOperators are recomputed from the rebuilt descriptor and value
shape; the stored copies are informational.
"""

from __future__ import annotations

import json
from datetime import date
from typing import TYPE_CHECKING

from rosterfilter.application.coercion import coerce
from rosterfilter.application.formatting import display_value_for
from rosterfilter.application.operators import SELECTION_OPERATORS, operators_for
from rosterfilter.domain.exceptions import FilterDecodeError
from rosterfilter.domain.model.enums import Category, Operator
from rosterfilter.domain.model.filter_item import AttributeValue, FilterItem
from rosterfilter.domain.model.options import AttributeDescriptor

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from rosterfilter.domain.model import FilterList
    from rosterfilter.domain.model.filter_item import FilterValue, Scalar
    from rosterfilter.domain.model.options import Descriptor, OptionCatalogs

_REQUIRED_KEYS = ("id", "category", "subject", "operator", "value")


def filters_to_json(filters: Sequence[FilterItem], *, indent: int | None = 2) -> str:
    """Serialize a filter collection.

    Args:
        filters: Filters to serialize, in order
        indent: JSON indentation. None for compact output.

    Returns:
        JSON array string
    """
    return json.dumps([filter_to_dict(f) for f in filters], indent=indent)


def filters_from_json(text: str, catalogs: OptionCatalogs) -> FilterList:
    """Deserialize a filter collection.

    Args:
        text: JSON array produced by filters_to_json
        catalogs: Catalogs descriptors are rebuilt from

    Returns:
        Filter collection in stored order

    Raises:
        FilterDecodeError: If text is not valid JSON or any entry is malformed
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FilterDecodeError(f"invalid JSON: {e.msg} at line {e.lineno}") from e

    if not isinstance(data, list):
        raise FilterDecodeError(f"expected a JSON array, got {type(data).__name__}")

    filters = tuple(filter_from_dict(entry, catalogs) for entry in data)
    ids = [f.id for f in filters]
    if len(set(ids)) != len(ids):
        raise FilterDecodeError("duplicate filter ids")

    seen: set[tuple[Category, str]] = set()
    for flt in filters:
        target = _target_key(flt)
        if target in seen:
            raise FilterDecodeError(f"more than one {flt.category.value} filter for '{target[1]}'")
        seen.add(target)
    return filters


def _target_key(flt: FilterItem) -> tuple[Category, str]:
    """One filter per attribute key, one per relationship/group/person target."""
    if isinstance(flt.value, str):
        return flt.category, flt.value
    return flt.category, flt.attribute_values[0].key


def filter_to_dict(flt: FilterItem) -> dict[str, object]:
    """Convert FilterItem to its wire dict."""
    return {
        "id": flt.id,
        "category": flt.category.value,
        "subject": flt.subject,
        "operator": flt.operator.value,
        "value": _value_to_wire(flt.value),
        "displayValue": flt.display_value,
        "availableOperators": [op.value for op in flt.available_operators],
    }


def _value_to_wire(value: FilterValue) -> object:
    match value:
        case str():
            return value
        case AttributeValue():
            return _attribute_value_to_dict(value)
        case _:
            return [_attribute_value_to_dict(v) for v in value]


def _attribute_value_to_dict(value: AttributeValue) -> dict[str, object]:
    raw = value.value
    return {"key": value.key, "value": raw.isoformat() if isinstance(raw, date) else raw}


def filter_from_dict(data: Mapping[str, object], catalogs: OptionCatalogs) -> FilterItem:
    """Rebuild a FilterItem from its wire dict.

    Display value and available operators are recomputed from the rebuilt
    descriptor and value shape. The stored operator must be legal for them.

    Raises:
        FilterDecodeError: If data is malformed or references an unknown target
    """
    if not isinstance(data, dict):
        raise FilterDecodeError(f"expected a JSON object, got {type(data).__name__}")
    missing = [k for k in _REQUIRED_KEYS if k not in data]
    if missing:
        raise FilterDecodeError(f"missing keys {missing}")

    category = _enum(Category, data["category"], "category")
    operator = _enum(Operator, data["operator"], "operator")
    descriptor, value = _rebuild(category, data["value"], catalogs)

    if isinstance(descriptor, AttributeDescriptor):
        cardinality = len(value) if isinstance(value, tuple) else 1
        available = operators_for(descriptor.data_type, cardinality)
    else:
        available = SELECTION_OPERATORS
    if operator not in available:
        raise FilterDecodeError(
            f"operator '{operator.value}' not in available operators {[op.value for op in available]}"
        )

    try:
        return FilterItem(
            id=_text(data["id"], "id"),
            category=category,
            subject=_text(data["subject"], "subject"),
            operator=operator,
            value=value,
            display_value=display_value_for(descriptor, value),
            available_operators=available,
            descriptor=descriptor,
        )
    except (ValueError, TypeError) as e:
        raise FilterDecodeError(str(e)) from e


def _rebuild(category: Category, raw: object, catalogs: OptionCatalogs) -> tuple[Descriptor, FilterValue]:
    """Resolve descriptor and typed value for category."""
    if category is Category.ATTRIBUTES:
        return _rebuild_attribute(raw, catalogs)

    target_id = _text(raw, "value")
    match category:
        case Category.RELATIONSHIPS:
            option = catalogs.relationship(target_id)
        case Category.GROUPS:
            option = catalogs.group(target_id)
        case _:
            option = catalogs.person(target_id)

    if option is None:
        raise FilterDecodeError(f"unknown {category.value} target '{target_id}'")
    return option, target_id


def _rebuild_attribute(raw: object, catalogs: OptionCatalogs) -> tuple[AttributeDescriptor, FilterValue]:
    entries = raw if isinstance(raw, list) else [raw]
    if not entries:
        raise FilterDecodeError("attribute value list must not be empty")

    keys: set[str] = set()
    parsed: list[tuple[str, object]] = []
    for entry in entries:
        if not isinstance(entry, dict) or "key" not in entry or "value" not in entry:
            raise FilterDecodeError(f"attribute value must be a {{key, value}} object, got {entry!r}")
        key = _text(entry["key"], "key")
        keys.add(key)
        parsed.append((key, entry["value"]))

    if len(keys) != 1:
        raise FilterDecodeError(f"attribute values mix keys {sorted(keys)}")
    key = keys.pop()
    descriptor = catalogs.attribute(key)
    if descriptor is None:
        raise FilterDecodeError(f"unknown attribute '{key}'")

    values = tuple(AttributeValue(key=key, value=_coerced(descriptor, v)) for _, v in parsed)
    if isinstance(raw, list):
        if len(values) < 2:
            raise FilterDecodeError(f"list value requires >= 2 entries, got {len(values)}")
        return descriptor, values
    return descriptor, values[0]


def _coerced(descriptor: AttributeDescriptor, raw: object) -> Scalar:
    value = coerce(descriptor.data_type, raw)
    if value is None:
        raise FilterDecodeError(f"{raw!r} is not a valid {descriptor.data_type.value} for '{descriptor.key}'")
    return value


def _enum[E: (Category, Operator)](enum_type: type[E], raw: object, name: str) -> E:
    try:
        return enum_type(raw)
    except ValueError as e:
        raise FilterDecodeError(f"unknown {name} {raw!r}") from e


def _text(raw: object, name: str) -> str:
    if not isinstance(raw, str) or not raw:
        raise FilterDecodeError(f"{name} must be a non-empty string")
    return raw
