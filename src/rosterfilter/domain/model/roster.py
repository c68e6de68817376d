"""Roster aggregate root."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from rosterfilter.domain.exceptions import RosterIntegrityError

if TYPE_CHECKING:
    from rosterfilter.domain.model.organization import Department, Group, Team
    from rosterfilter.domain.model.person import Person

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Roster:
    """Snapshot of people and organizational reference data.

    Supplied wholesale by the caller and never mutated by the engine.

    Attributes:
        people: All persons
        departments: All departments
        teams: All teams
        groups: All explicit groups
    """

    people: tuple[Person, ...] = ()
    departments: tuple[Department, ...] = ()
    teams: tuple[Team, ...] = ()
    groups: tuple[Group, ...] = ()
    _people_by_id: dict[str, Person] = field(init=False, repr=False, compare=False)
    _people_by_name: dict[str, Person] = field(init=False, repr=False, compare=False)
    _groups_by_id: dict[str, Group] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate invariants and build indexes. FAIL-FIRST."""
        people_by_id: dict[str, Person] = {}
        for person in self.people:
            if person.id in people_by_id:
                raise RosterIntegrityError(f"duplicate person id '{person.id}'")
            people_by_id[person.id] = person

        groups_by_id: dict[str, Group] = {}
        for group in self.groups:
            if group.id in groups_by_id:
                raise RosterIntegrityError(f"duplicate group id '{group.id}'")
            groups_by_id[group.id] = group

        for person in self.people:
            unknown = [g for g in person.groups if g not in groups_by_id]
            if unknown:
                raise RosterIntegrityError(f"person '{person.id}' references unknown groups {unknown}")

        # first occurrence wins for duplicate names
        people_by_name: dict[str, Person] = {}
        for person in self.people:
            people_by_name.setdefault(person.full_name, person)

        object.__setattr__(self, "_people_by_id", people_by_id)
        object.__setattr__(self, "_people_by_name", people_by_name)
        object.__setattr__(self, "_groups_by_id", groups_by_id)

    def get_person(self, person_id: str) -> Person | None:
        """Get person by id. Returns None if not found."""
        return self._people_by_id.get(person_id)

    def find_person_by_name(self, full_name: str | None) -> Person | None:
        """Get person by full name. Returns None if not found."""
        if not full_name:
            return None
        return self._people_by_name.get(full_name)

    def get_group(self, group_id: str) -> Group | None:
        """Get group by id. Returns None if not found."""
        return self._groups_by_id.get(group_id)

    def find_team(self, name: str) -> Team | None:
        """Get team by name. Returns None if not found."""
        for team in self.teams:
            if team.name == name:
                return team
        return None

    def find_department(self, name: str) -> Department | None:
        """Get department by name. Returns None if not found."""
        for department in self.departments:
            if department.name == name:
                return department
        return None

    def members_of(self, group_id: str) -> tuple[Person, ...]:
        """Resolve a group's member ids to persons.

        Unknown group yields no members. Dangling member ids are skipped.
        """
        group = self.get_group(group_id)
        if group is None:
            return ()

        members: list[Person] = []
        for member_id in group.members:
            person = self._people_by_id.get(member_id)
            if person is None:
                logger.debug("group %s: member %s not found", group_id, member_id)
                continue
            members.append(person)
        return tuple(members)

    @classmethod
    def empty(cls) -> Roster:
        """Create roster with no data."""
        return cls()
