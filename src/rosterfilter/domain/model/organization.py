"""Organizational units: Department, Team, Group.

Static reference data, read-only during filter evaluation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from rosterfilter.domain.model.enums import GroupCategory


@dataclass(frozen=True, slots=True)
class Department:
    """Department with a lead.

    Attributes:
        id: Unique identifier
        name: Display name, referenced by Person.department
        lead: Full name of the department lead
        description: Free text
    """

    id: str
    name: str
    lead: str
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")


@dataclass(frozen=True, slots=True)
class Team:
    """Team inside a department.

    Attributes:
        id: Unique identifier
        name: Display name, referenced by Person.team
        lead: Full name of the team lead
        department: Name of the parent department
        description: Free text
    """

    id: str
    name: str
    lead: str
    department: str
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")


@dataclass(frozen=True, slots=True)
class Group:
    """Explicit collection of people.

    Member ids are a soft reference: ids without a matching Person are
    tolerated and treated as "member not found".

    Attributes:
        id: Unique identifier, referenced by Person.groups
        name: Display name
        category: Group classification
        members: Person ids
        is_active: Whether the group is in use
        description: Free text
        created_date: Creation date, if known
    """

    id: str
    name: str
    category: GroupCategory
    members: tuple[str, ...] = ()
    is_active: bool = True
    description: str = ""
    created_date: date | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def member_count(self) -> int:
        """Number of listed member ids."""
        return len(self.members)
