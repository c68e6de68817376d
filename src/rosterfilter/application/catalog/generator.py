"""Option generation: roster -> four browsable option catalogs.

Pure and total: an empty roster yields empty group and people catalogs;
relationship and attribute catalogs are fixed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rosterfilter.application.catalog.attributes import ATTRIBUTE_CATALOG
from rosterfilter.application.catalog.relationships import RELATIONSHIP_CATALOG
from rosterfilter.domain.model.options import GroupOption, OptionCatalogs, PersonOption

if TYPE_CHECKING:
    from collections.abc import Iterable

    from rosterfilter.domain.model.organization import Group
    from rosterfilter.domain.model.person import Person
    from rosterfilter.domain.model.roster import Roster


def generate_options(roster: Roster) -> OptionCatalogs:
    """Derive option catalogs from a roster.

    Departments and teams are not offered as groups; only explicit Group
    entities are.

    Args:
        roster: Roster snapshot

    Returns:
        OptionCatalogs with relationships, groups, attributes, people
    """
    return OptionCatalogs(
        relationships=RELATIONSHIP_CATALOG,
        groups=generate_group_options(roster.groups),
        attributes=ATTRIBUTE_CATALOG,
        people=generate_person_options(roster.people),
    )


def generate_group_options(groups: Iterable[Group]) -> tuple[GroupOption, ...]:
    """One option per group, labelled by group name."""
    return tuple(
        GroupOption(
            id=f"group-{group.id}",
            label=group.name,
            group_id=group.id,
            member_count=group.member_count,
            category=group.category,
            description=group.description,
        )
        for group in groups
    )


def generate_person_options(people: Iterable[Person]) -> tuple[PersonOption, ...]:
    """One option per person, labelled by full name."""
    return tuple(
        PersonOption(
            id=f"person-{person.id}",
            label=person.full_name,
            person_id=person.id,
            position=person.position,
            department=person.department,
            team=person.team,
            email=person.email,
        )
        for person in people
    )
