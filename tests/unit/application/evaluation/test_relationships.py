"""Tests for application/evaluation/relationships.py."""

import pytest

from rosterfilter.application.evaluation import resolve_relationship
from rosterfilter.domain.model.enums import RelationshipKind
from rosterfilter.domain.model.roster import Roster
from tests.factories import make_person, make_roster


def _resolved_id(roster: Roster, requester_id: str, kind: RelationshipKind) -> str | None:
    requester = roster.get_person(requester_id)
    assert requester is not None
    target = resolve_relationship(roster, requester, kind)
    return target.id if target is not None else None


class TestResolveRelationship:
    """Tests for resolve_relationship on the sample organization."""

    @pytest.mark.parametrize(
        ("requester", "kind", "expected"),
        [
            ("p3", RelationshipKind.SUPERVISOR, "p2"),
            ("p3", RelationshipKind.SECONDARY_SUPERVISOR, "p4"),
            ("p3", RelationshipKind.SKIP_LEVEL, "p1"),
            ("p5", RelationshipKind.SKIP_LEVEL, "p2"),
            ("p5", RelationshipKind.TEAM_LEAD, "p3"),
            ("p5", RelationshipKind.DEPARTMENT_LEAD, "p2"),
            ("p4", RelationshipKind.TEAM_LEAD, "p4"),
        ],
    )
    def test_resolves(self, roster: Roster, requester: str, kind: RelationshipKind, expected: str) -> None:
        assert _resolved_id(roster, requester, kind) == expected

    def test_top_of_chain(self, roster: Roster) -> None:
        assert _resolved_id(roster, "p1", RelationshipKind.SUPERVISOR) is None
        assert _resolved_id(roster, "p2", RelationshipKind.SKIP_LEVEL) is None

    def test_no_secondary_supervisor(self, roster: Roster) -> None:
        assert _resolved_id(roster, "p2", RelationshipKind.SECONDARY_SUPERVISOR) is None

    def test_unknown_team_and_department(self) -> None:
        roster = make_roster(make_person(team="Ghost", department="Nowhere"))
        assert _resolved_id(roster, "p1", RelationshipKind.TEAM_LEAD) is None
        assert _resolved_id(roster, "p1", RelationshipKind.DEPARTMENT_LEAD) is None
