"""Tests for application/evaluation/evaluator.py.

Tests:
- per-category predicates
- ALL / ANY combination
- relationships relative to the requester
- explain, matching_people, eligible_approvers
"""

import logging
from dataclasses import replace

import pytest

from rosterfilter.application.catalog import generate_options
from rosterfilter.application.engine import (
    change_operator,
    toggle_attribute_value,
    toggle_group,
    toggle_person,
    toggle_relationship,
)
from rosterfilter.application.evaluation import (
    compile_filter,
    eligible_approvers,
    evaluate,
    explain,
    matching_people,
)
from rosterfilter.domain.model.approval_step import ApprovalStep
from rosterfilter.domain.model.configuration import EngineConfig
from rosterfilter.domain.model.enums import ApprovalMode, DataType, EmploymentStatus, Operator
from rosterfilter.domain.model.filter_item import AttributeValue, FilterItem
from rosterfilter.domain.model.person import Person
from rosterfilter.domain.model.roster import Roster
from tests.factories import (
    make_attribute_filter,
    make_descriptor,
    make_group,
    make_person,
    make_roster,
    sample_catalogs,
)


def _person(roster: Roster, person_id: str) -> Person:
    person = roster.get_person(person_id)
    assert person is not None
    return person


class TestScenarios:
    """Evaluation of the documented example scenarios."""

    def test_weekly_hours_greater_than(self) -> None:
        person = make_person(department="Engineering", weekly_hours=40)
        flt = make_attribute_filter("weekly_hours", 35, operator=Operator.GREATER_THAN)
        assert evaluate(make_roster(person), person, (flt,)) is True

    def test_group_membership(self) -> None:
        person = make_person(groups=("G1", "G2"))
        roster = make_roster(person, groups=(make_group("G3"),))
        catalogs = generate_options(roster)
        in_g1 = toggle_group((), catalogs, "G1", True)
        in_g3 = toggle_group((), catalogs, "G3", True)
        assert evaluate(roster, person, in_g1) is True
        assert evaluate(roster, person, in_g3) is False

    def test_status_is_one_of(self) -> None:
        person = make_person(employment_status=EmploymentStatus.WORKING_STUDENT)
        flt = make_attribute_filter("employment_status", "Full time", "Part time")
        assert flt.operator is Operator.IS_ONE_OF
        assert evaluate(make_roster(person), person, (flt,)) is False

    def test_modes(self) -> None:
        person = make_person(department="Engineering", weekly_hours=40)
        roster = make_roster(person)
        department = make_attribute_filter("department", "Engineering", filter_id="f-dept")
        hours = make_attribute_filter("weekly_hours", 35, operator=Operator.GREATER_THAN, filter_id="f-hours")
        assert evaluate(roster, person, (department, hours), ApprovalMode.ALL) is True

        too_many_hours = make_attribute_filter("weekly_hours", 45, operator=Operator.GREATER_THAN, filter_id="f-hours")
        assert evaluate(roster, person, (department, too_many_hours), ApprovalMode.ALL) is False
        assert evaluate(roster, person, (department, too_many_hours), ApprovalMode.ANY) is True


class TestCombination:
    """Empty collections and mode semantics."""

    def test_empty_collection(self) -> None:
        person = make_person()
        roster = make_roster(person)
        assert evaluate(roster, person, (), ApprovalMode.ALL) is True
        assert evaluate(roster, person, (), ApprovalMode.ANY) is False

    def test_any_all_false(self) -> None:
        person = make_person(workplace="Berlin")
        flt = make_attribute_filter("workplace", "Munich")
        assert evaluate(make_roster(person), person, (flt,), ApprovalMode.ANY) is False


class TestTargetFilters:
    """Group and person filters."""

    def test_person(self, roster: Roster) -> None:
        filters = toggle_person((), sample_catalogs(), "p2", True)
        assert evaluate(roster, _person(roster, "p2"), filters) is True
        assert evaluate(roster, _person(roster, "p3"), filters) is False

    def test_is_not_negates(self, roster: Roster) -> None:
        filters = toggle_group((), sample_catalogs(), "g-berlin", True)
        filters = change_operator(filters, filters[0].id, Operator.IS_NOT)
        assert evaluate(roster, _person(roster, "p3"), filters) is False
        assert evaluate(roster, _person(roster, "p4"), filters) is True

    def test_unknown_selection_operator_fails_closed(
        self, roster: Roster, caplog: pytest.LogCaptureFixture
    ) -> None:
        filters = toggle_group((), sample_catalogs(), "g-berlin", True)
        odd = replace(filters[0], operator=Operator.CONTAINS, available_operators=(Operator.CONTAINS,))
        person = _person(roster, "p3")
        with caplog.at_level(logging.WARNING, logger="rosterfilter"):
            assert evaluate(roster, person, (odd,)) is False
        assert "unrecognized operator" in caplog.text
        assert evaluate(roster, person, (odd,), config=EngineConfig(fail_open_on_unknown_operator=True)) is True


class TestAttributeFilters:
    """Attribute filters built through the engine."""

    def test_is_all_of_on_status_never_matches_scalar(self, roster: Roster) -> None:
        catalogs = sample_catalogs()
        filters: tuple[FilterItem, ...] = ()
        for status in ("Full time", "Part time"):
            target = AttributeValue(key="employment_status", value=status)
            filters = toggle_attribute_value(filters, catalogs, target, True)
        filters = change_operator(filters, filters[0].id, Operator.IS_ALL_OF)
        assert matching_people(roster, filters) == ()

    def test_hire_date_before(self, roster: Roster) -> None:
        catalogs = sample_catalogs()
        filters = toggle_attribute_value((), catalogs, AttributeValue(key="hire_date", value="2020-01-01"), True)
        filters = change_operator(filters, filters[0].id, Operator.BEFORE)
        assert [p.id for p in matching_people(roster, filters)] == ["p1", "p2"]

    def test_unknown_attribute_fails_closed(self, roster: Roster) -> None:
        flt = make_attribute_filter("salary", 1000, descriptor=make_descriptor("salary", DataType.NUMBER))
        assert compile_filter(roster, flt)(_person(roster, "p1")) is False


class TestRelationshipFilters:
    """Relationship filters resolve against the requester."""

    @pytest.mark.parametrize(
        ("option_id", "requester", "approver"),
        [
            ("rel-supervisor", "p5", "p3"),
            ("rel-secondary-supervisor", "p3", "p4"),
            ("rel-skip-level", "p5", "p2"),
            ("rel-team-lead", "p2", "p3"),
            ("rel-department-lead", "p4", "p4"),
        ],
    )
    def test_matches_only_target(self, roster: Roster, option_id: str, requester: str, approver: str) -> None:
        filters = toggle_relationship((), sample_catalogs(), option_id, True)
        matched = matching_people(roster, filters, requester=_person(roster, requester))
        assert [p.id for p in matched] == [approver]

    def test_no_requester_matches_nobody(self, roster: Roster) -> None:
        filters = toggle_relationship((), sample_catalogs(), "rel-supervisor", True)
        assert matching_people(roster, filters) == ()

    def test_unresolved_is_not_matches_everyone(self, roster: Roster) -> None:
        filters = toggle_relationship((), sample_catalogs(), "rel-supervisor", True)
        filters = change_operator(filters, filters[0].id, Operator.IS_NOT)
        ceo = _person(roster, "p1")
        assert len(matching_people(roster, filters, requester=ceo)) == 5

    def test_is_not_excludes_target(self, roster: Roster) -> None:
        filters = toggle_relationship((), sample_catalogs(), "rel-supervisor", True)
        filters = change_operator(filters, filters[0].id, Operator.IS_NOT)
        matched = matching_people(roster, filters, requester=_person(roster, "p3"))
        assert "p2" not in [p.id for p in matched]
        assert len(matched) == 4


class TestExplain:
    """Tests for explain."""

    def test_lists_failed_filters(self) -> None:
        person = make_person(workplace="Berlin", weekly_hours=20)
        roster = make_roster(person)
        place = make_attribute_filter("workplace", "Berlin", filter_id="f-place")
        hours = make_attribute_filter("weekly_hours", 35, operator=Operator.GREATER_THAN, filter_id="f-hours")

        result = explain(roster, person, (place, hours))
        assert result.passes is False
        assert result.failed_filters == ("f-hours",)

        any_result = explain(roster, person, (place, hours), ApprovalMode.ANY)
        assert any_result.passes is True
        assert any_result.failed_count == 1

    def test_empty(self) -> None:
        person = make_person()
        roster = make_roster(person)
        assert explain(roster, person, ()).passes is True
        assert explain(roster, person, (), ApprovalMode.ANY).passes is False


class TestEligibleApprovers:
    """Tests for eligible_approvers."""

    def test_filters_minus_exclusions(self, roster: Roster) -> None:
        catalogs = sample_catalogs()
        leaders = toggle_group((), catalogs, "g-leaders", True)
        exclude_dora = toggle_person((), catalogs, "p4", True)
        step = ApprovalStep(filters=leaders, exclusions=exclude_dora, mode=ApprovalMode.ANY)
        assert [p.id for p in eligible_approvers(roster, step)] == ["p1", "p2"]

    def test_requester_relationships(self, roster: Roster) -> None:
        catalogs = sample_catalogs()
        filters = toggle_relationship((), catalogs, "rel-supervisor", True)
        filters = toggle_relationship(filters, catalogs, "rel-department-lead", True)
        step = ApprovalStep(filters=filters, mode=ApprovalMode.ANY)
        approvers = eligible_approvers(roster, step, requester=_person(roster, "p5"))
        assert [p.id for p in approvers] == ["p2", "p3"]

    def test_empty_step_yields_nobody(self, roster: Roster) -> None:
        assert eligible_approvers(roster, ApprovalStep(mode=ApprovalMode.ALL)) == ()
