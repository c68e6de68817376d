"""Tests for application/catalog: fixed catalogs and option generation."""

from rosterfilter.application.catalog import (
    ATTRIBUTE_CATALOG,
    RELATIONSHIP_CATALOG,
    find_attribute,
    generate_options,
)
from rosterfilter.domain.model.enums import DataType, GroupCategory
from rosterfilter.domain.model.roster import Roster


class TestFixedCatalogs:
    """Tests for the relationship and attribute catalogs."""

    def test_relationships(self) -> None:
        assert [r.label for r in RELATIONSHIP_CATALOG] == [
            "Supervisor",
            "Secondary Supervisor",
            "Supervisor's Supervisor",
            "Team Lead",
            "Department Lead",
        ]
        assert all(r.description for r in RELATIONSHIP_CATALOG)

    def test_attributes_in_order(self) -> None:
        assert [(a.key, a.data_type) for a in ATTRIBUTE_CATALOG] == [
            ("gender", DataType.ENUM),
            ("employment_type", DataType.ENUM),
            ("employment_status", DataType.ENUM),
            ("position", DataType.STRING),
            ("weekly_hours", DataType.NUMBER),
            ("workplace", DataType.STRING),
            ("legal_entity", DataType.STRING),
            ("probation_length", DataType.NUMBER),
            ("cost_center", DataType.STRING),
            ("hire_date", DataType.DATE),
            ("contract_end_date", DataType.DATE),
        ]
        assert all(a.description for a in ATTRIBUTE_CATALOG)

    def test_enum_values(self) -> None:
        status = find_attribute("employment_status")
        assert status is not None
        assert status.possible_values == ("Full time", "Part time", "Working student")

    def test_find_attribute_missing(self) -> None:
        assert find_attribute("department") is None


class TestGenerateOptions:
    """Tests for generate_options."""

    def test_empty_roster(self) -> None:
        catalogs = generate_options(Roster.empty())
        assert catalogs.groups == ()
        assert catalogs.people == ()
        assert catalogs.relationships == RELATIONSHIP_CATALOG
        assert catalogs.attributes == ATTRIBUTE_CATALOG

    def test_groups_only_explicit(self, roster: Roster) -> None:
        catalogs = generate_options(roster)
        labels = [g.label for g in catalogs.groups]
        assert labels == ["Berlin Office", "Leadership Circle", "Python Guild"]
        assert "Engineering" not in labels
        assert "Platform" not in labels

    def test_group_option_fields(self, roster: Roster) -> None:
        berlin = generate_options(roster).groups[0]
        assert berlin.id == "group-g-berlin"
        assert berlin.group_id == "g-berlin"
        assert berlin.member_count == 3
        assert berlin.category is GroupCategory.GEOGRAPHIC
        assert berlin.description == "Everyone based in Berlin"

    def test_person_options(self, roster: Roster) -> None:
        people = generate_options(roster).people
        assert len(people) == 5
        clara = people[2]
        assert clara.id == "person-p3"
        assert clara.label == "Clara Fischer"
        assert clara.position == "Software Engineer"
        assert clara.team == "Platform"
        assert clara.email == "clara.fischer@example.com"

    def test_relationships_independent_of_roster(self, roster: Roster) -> None:
        assert generate_options(roster).relationships == generate_options(Roster.empty()).relationships
