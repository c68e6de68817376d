"""Catalog entries: the selectable options per filter category.

A FilterItem keeps the entry it was created from as its descriptor.
"""

from __future__ import annotations

from dataclasses import dataclass

from rosterfilter.domain.model.enums import Category, DataType, GroupCategory, RelationshipKind


@dataclass(frozen=True, slots=True)
class RelationshipOption:
    """Fixed relationship catalog entry.

    Attributes:
        id: Stable identifier (e.g. "rel-supervisor")
        label: Display label
        kind: Which relationship is resolved
        description: Target-role description for UI hinting
    """

    id: str
    label: str
    kind: RelationshipKind
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.label:
            raise ValueError("label must not be empty")


@dataclass(frozen=True, slots=True)
class GroupOption:
    """Group catalog entry, one per Group entity.

    Attributes:
        id: Option identifier ("group-<group_id>")
        label: Group name
        group_id: Referenced Group id
        member_count: Number of listed members
        category: Group classification
        description: Group description
    """

    id: str
    label: str
    group_id: str
    member_count: int
    category: GroupCategory
    description: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.group_id:
            raise ValueError("group_id must not be empty")
        if self.member_count < 0:
            raise ValueError(f"member_count must be >= 0, got {self.member_count}")


@dataclass(frozen=True, slots=True)
class AttributeDescriptor:
    """Filterable Person field.

    Attributes:
        id: Option identifier ("attr-<key>")
        key: Person field name
        label: Display label
        data_type: Selects operators, formatting and coercion
        description: UI hint
        possible_values: Closed value list, required for ENUM
    """

    id: str
    key: str
    label: str
    data_type: DataType
    description: str = ""
    possible_values: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key:
            raise ValueError("key must not be empty")
        if not self.label:
            raise ValueError("label must not be empty")
        if self.data_type is DataType.ENUM and not self.possible_values:
            raise ValueError(f"enum attribute '{self.key}' requires possible_values")
        if self.data_type is not DataType.ENUM and self.possible_values:
            raise ValueError(f"possible_values only allowed for enum attributes, got {self.data_type.value}")


@dataclass(frozen=True, slots=True)
class PersonOption:
    """Person catalog entry, one per Person.

    Position, department, team and email are carried for search matching.
    """

    id: str
    label: str
    person_id: str
    position: str = ""
    department: str = ""
    team: str = ""
    email: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.person_id:
            raise ValueError("person_id must not be empty")


type Descriptor = RelationshipOption | GroupOption | AttributeDescriptor | PersonOption


def category_of(descriptor: Descriptor) -> Category:
    """Get the filter category a descriptor belongs to.

    Exhaustive match on Descriptor union.
    """
    match descriptor:
        case RelationshipOption():
            return Category.RELATIONSHIPS
        case GroupOption():
            return Category.GROUPS
        case AttributeDescriptor():
            return Category.ATTRIBUTES
        case PersonOption():
            return Category.PEOPLE
        case _:
            raise TypeError(f"not a catalog descriptor: {type(descriptor).__name__}")


@dataclass(frozen=True, slots=True)
class OptionCatalogs:
    """The four browsable option families.

    Attributes:
        relationships: Fixed relationship catalog
        groups: One option per Group
        attributes: Fixed attribute catalog
        people: One option per Person
    """

    relationships: tuple[RelationshipOption, ...] = ()
    groups: tuple[GroupOption, ...] = ()
    attributes: tuple[AttributeDescriptor, ...] = ()
    people: tuple[PersonOption, ...] = ()

    def relationship(self, option_id: str) -> RelationshipOption | None:
        """Get relationship option by id. Returns None if not found."""
        return next((r for r in self.relationships if r.id == option_id), None)

    def group(self, group_id: str) -> GroupOption | None:
        """Get group option by referenced group id. Returns None if not found."""
        return next((g for g in self.groups if g.group_id == group_id), None)

    def attribute(self, key: str) -> AttributeDescriptor | None:
        """Get attribute descriptor by Person field name. Returns None if not found."""
        return next((a for a in self.attributes if a.key == key), None)

    def person(self, person_id: str) -> PersonOption | None:
        """Get person option by referenced person id. Returns None if not found."""
        return next((p for p in self.people if p.person_id == person_id), None)

    @property
    def is_empty(self) -> bool:
        """True if every family is empty."""
        return not (self.relationships or self.groups or self.attributes or self.people)
