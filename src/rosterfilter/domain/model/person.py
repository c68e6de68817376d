"""Person entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from rosterfilter.domain.model.enums import EmploymentStatus, EmploymentType, Gender


@dataclass(frozen=True, slots=True)
class Person:
    """One employee of the roster.

    Attributes:
        id: Globally unique identifier
        first_name: Given name (may include a title, e.g. "Dr. Sarah")
        last_name: Family name
        gender: Gender classification
        email: Work email
        employment_type: internal/external
        employment_status: Work schedule
        position: Job title
        department: Department name
        team: Team name
        weekly_hours: Contracted hours per week
        workplace: Office location
        supervisor: Full name of supervisor ("CEO" at the top)
        legal_entity: Employing company
        hire_date: Employment start
        probation_length: Probation period in months
        cost_center: Financial cost center tag
        secondary_supervisor: Full name of secondary supervisor, if any
        contract_end_date: End of fixed-term contract, if any
        groups: Ids of groups the person belongs to
    """

    id: str
    first_name: str
    last_name: str
    gender: Gender
    email: str
    employment_type: EmploymentType
    employment_status: EmploymentStatus
    position: str
    department: str
    team: str
    weekly_hours: float
    workplace: str
    supervisor: str
    legal_entity: str
    hire_date: date
    probation_length: int
    cost_center: str
    secondary_supervisor: str | None = None
    contract_end_date: date | None = None
    groups: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.first_name and not self.last_name:
            raise ValueError(f"person {self.id} must have a name")
        if self.weekly_hours < 0:
            raise ValueError(f"weekly_hours must be >= 0, got {self.weekly_hours}")
        if self.probation_length < 0:
            raise ValueError(f"probation_length must be >= 0, got {self.probation_length}")
        if self.contract_end_date is not None and self.contract_end_date < self.hire_date:
            raise ValueError(
                f"contract_end_date ({self.contract_end_date}) must be >= hire_date ({self.hire_date})"
            )
        if len(set(self.groups)) != len(self.groups):
            raise ValueError(f"person {self.id} lists a group more than once")

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def get_attribute(self, key: str) -> object:
        """Read a field by name.

        Raises:
            KeyError: If key is not a Person field
        """
        if key not in PERSON_FIELDS:
            raise KeyError(key)
        return getattr(self, key)


PERSON_FIELDS: frozenset[str] = frozenset(Person.__dataclass_fields__)
