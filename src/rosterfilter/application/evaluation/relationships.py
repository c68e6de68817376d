"""Relationship resolution against the roster.

Supervisors and leads are stored as full names; each hop is a name lookup.
Any hop that cannot be resolved ends the walk with None.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rosterfilter.domain.model.enums import RelationshipKind

if TYPE_CHECKING:
    from rosterfilter.domain.model.person import Person
    from rosterfilter.domain.model.roster import Roster


def resolve_relationship(roster: Roster, requester: Person, kind: RelationshipKind) -> Person | None:
    """Find the person standing in a relationship to the requester.

    Args:
        roster: Roster to look people, teams and departments up in
        requester: Person whose relationship is resolved
        kind: Relationship to resolve

    Returns:
        SUPERVISOR: person named by requester.supervisor
        SECONDARY_SUPERVISOR: person named by requester.secondary_supervisor
        SKIP_LEVEL: supervisor of the requester's supervisor
        TEAM_LEAD: lead of the team named by requester.team
        DEPARTMENT_LEAD: lead of the department named by requester.department
        None when any lookup fails.
    """
    match kind:
        case RelationshipKind.SUPERVISOR:
            return roster.find_person_by_name(requester.supervisor)
        case RelationshipKind.SECONDARY_SUPERVISOR:
            return roster.find_person_by_name(requester.secondary_supervisor)
        case RelationshipKind.SKIP_LEVEL:
            supervisor = roster.find_person_by_name(requester.supervisor)
            if supervisor is None:
                return None
            return roster.find_person_by_name(supervisor.supervisor)
        case RelationshipKind.TEAM_LEAD:
            team = roster.find_team(requester.team)
            return roster.find_person_by_name(team.lead) if team is not None else None
        case RelationshipKind.DEPARTMENT_LEAD:
            department = roster.find_department(requester.department)
            return roster.find_person_by_name(department.lead) if department is not None else None
        case _:
            return None
