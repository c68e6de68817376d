"""Display formatting: filter values -> human-readable labels.

Pure functions. Applied on every mutation so display_value never goes stale.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

from rosterfilter.application.catalog.attributes import find_attribute
from rosterfilter.domain.model.enums import DataType
from rosterfilter.domain.model.options import AttributeDescriptor

if TYPE_CHECKING:
    from rosterfilter.domain.model.filter_item import FilterValue
    from rosterfilter.domain.model.options import Descriptor

# Fixed English abbreviations: output must not depend on process locale.
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_UNIT_SUFFIXES = {
    "probation_length": "months",
    "weekly_hours": "hours",
}


def parse_date(raw: object) -> date | None:
    """Coerce date, datetime or ISO string to date. None if not parseable."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str):
        text = raw.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def format_date(value: date) -> str:
    """Format as DD Mon YYYY, e.g. "05 Mar 2024"."""
    return f"{value.day:02d} {_MONTHS[value.month - 1]} {value.year:04d}"


def format_scalar(raw: object) -> str:
    """String form of a raw value. Integral floats lose their decimals."""
    if isinstance(raw, Enum):
        return str(raw.value)
    if isinstance(raw, float) and raw.is_integer():
        return str(int(raw))
    return str(raw)


def format_value(attribute_key: str, raw: object, data_type: DataType | None = None) -> str:
    """Render one attribute value.

    Args:
        attribute_key: Person field name
        raw: Value to render
        data_type: Attribute data type. Looked up in the attribute
            catalog when omitted.

    Returns:
        "<n> months" for probation length, "<n> hours" for weekly hours,
        DD Mon YYYY for dates, the string form otherwise.
    """
    suffix = _UNIT_SUFFIXES.get(attribute_key)
    if suffix is not None:
        return f"{format_scalar(raw)} {suffix}"

    if data_type is None:
        descriptor = find_attribute(attribute_key)
        data_type = descriptor.data_type if descriptor is not None else None

    if data_type is DataType.DATE or isinstance(raw, date):
        parsed = parse_date(raw)
        if parsed is not None:
            return format_date(parsed)

    return format_scalar(raw)


def pluralize(label: str) -> str:
    """Lower-case label with an "s" appended unless it already ends in one."""
    lowered = label.lower()
    return lowered if lowered.endswith("s") else f"{lowered}s"


def summarize(label: str, count: int) -> str:
    """Count-based summary for multi-value filters, e.g. "3 positions"."""
    return f"{count} {pluralize(label)}"


def display_value_for(descriptor: Descriptor, value: FilterValue) -> str:
    """Display value of a filter built from descriptor and value."""
    if isinstance(descriptor, AttributeDescriptor):
        if isinstance(value, tuple):
            return summarize(descriptor.label, len(value))
        raw = value.value if not isinstance(value, str) else value
        return format_value(descriptor.key, raw, descriptor.data_type)
    return descriptor.label
