"""Option search and attribute candidate values.

The search query narrows which options are shown. It never changes filter
semantics.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from rosterfilter.application.formatting import format_value, parse_date
from rosterfilter.domain.model.configuration import DEFAULT_CONFIG
from rosterfilter.domain.model.enums import DataType
from rosterfilter.domain.model.person import PERSON_FIELDS

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rosterfilter.domain.model.configuration import EngineConfig
    from rosterfilter.domain.model.filter_item import Scalar
    from rosterfilter.domain.model.options import AttributeDescriptor, OptionCatalogs
    from rosterfilter.domain.model.person import Person

NO_VALUES = "No values available"
NO_MATCHES = "No values match your search"
UNSUPPORTED = "Unsupported data type"


@dataclass(frozen=True, slots=True)
class CandidateValues:
    """Selectable values for one attribute.

    Attributes:
        values: Raw values in display order
        message: Why values is empty, None otherwise
    """

    values: tuple[Scalar, ...]
    message: str | None = None

    @property
    def supported(self) -> bool:
        """False if the attribute cannot be listed at all."""
        return self.message != UNSUPPORTED


def _matches(query: str, *fields: str) -> bool:
    return any(query in f.lower() for f in fields if f)


def search_options(catalogs: OptionCatalogs, query: str) -> OptionCatalogs:
    """Narrow every option family by case-insensitive substring query.

    Args:
        catalogs: Full catalogs
        query: Free text. Empty or whitespace returns catalogs unchanged.

    Returns:
        Catalogs containing only matching options, order preserved
    """
    term = query.strip().lower()
    if not term:
        return catalogs

    return replace(
        catalogs,
        relationships=tuple(r for r in catalogs.relationships if _matches(term, r.label, r.description)),
        groups=tuple(
            g for g in catalogs.groups if _matches(term, g.label, g.description, g.category.value)
        ),
        attributes=tuple(a for a in catalogs.attributes if _matches(term, a.label, a.description)),
        people=tuple(
            p
            for p in catalogs.people
            if _matches(term, p.label, p.position, p.department, p.team, p.email)
        ),
    )


def candidate_values(
    descriptor: AttributeDescriptor,
    people: Iterable[Person],
    query: str = "",
    config: EngineConfig | None = None,
) -> CandidateValues:
    """List selectable values of an attribute.

    enum: declared values. string: distinct non-empty roster values,
    sorted. number: distinct min, midpoint and max of roster values.
    date: distinct roster dates, ascending. Values are kept when their
    formatted display contains the query; string and date lists are
    capped at config.candidate_value_limit.

    Args:
        descriptor: Attribute to list
        people: Roster people
        query: Free text narrowing the values
        config: Engine configuration

    Returns:
        CandidateValues, with a message when empty
    """
    cfg = config or DEFAULT_CONFIG
    if descriptor.key not in PERSON_FIELDS:
        return CandidateValues(values=(), message=UNSUPPORTED)

    term = query.strip().lower()
    limit: int | None = None

    match descriptor.data_type:
        case DataType.ENUM:
            values: tuple[Scalar, ...] = descriptor.possible_values
        case DataType.STRING:
            found = {str(v) for v in _roster_values(descriptor.key, people) if v}
            values = tuple(sorted(found))
            limit = cfg.candidate_value_limit
        case DataType.NUMBER:
            values = _number_landmarks(_roster_values(descriptor.key, people))
        case DataType.DATE:
            dates = {parse_date(v) for v in _roster_values(descriptor.key, people)}
            values = tuple(sorted(d for d in dates if d is not None))
            limit = cfg.candidate_value_limit
        case _:
            return CandidateValues(values=(), message=UNSUPPORTED)

    if not values:
        return CandidateValues(values=(), message=NO_VALUES)

    if term:
        values = tuple(
            v for v in values if term in format_value(descriptor.key, v, descriptor.data_type).lower()
        )
    if limit is not None:
        values = values[:limit]

    if not values:
        return CandidateValues(values=(), message=NO_MATCHES if term else NO_VALUES)
    return CandidateValues(values=values)


def _roster_values(key: str, people: Iterable[Person]) -> list[object]:
    """Non-None values of a field across people."""
    return [value for person in people if (value := person.get_attribute(key)) is not None]


def _number_landmarks(raw: list[object]) -> tuple[Scalar, ...]:
    """Distinct min, rounded midpoint and max."""
    numbers = [v for v in raw if isinstance(v, int | float) and not isinstance(v, bool)]
    if not numbers:
        return ()
    low, high = min(numbers), max(numbers)
    middle = int((low + high) / 2 + 0.5)
    return tuple(sorted({low, middle, high}))
