"""Fixed relationship catalog.

Independent of roster size: each entry is resolved per requester at
evaluation time.
"""

from rosterfilter.domain.model.enums import RelationshipKind
from rosterfilter.domain.model.options import RelationshipOption

RELATIONSHIP_CATALOG: tuple[RelationshipOption, ...] = (
    RelationshipOption(
        id="rel-supervisor",
        label="Supervisor",
        kind=RelationshipKind.SUPERVISOR,
        description="The requester's direct supervisor",
    ),
    RelationshipOption(
        id="rel-secondary-supervisor",
        label="Secondary Supervisor",
        kind=RelationshipKind.SECONDARY_SUPERVISOR,
        description="The requester's secondary supervisor",
    ),
    RelationshipOption(
        id="rel-skip-level",
        label="Supervisor's Supervisor",
        kind=RelationshipKind.SKIP_LEVEL,
        description="The supervisor of the requester's supervisor",
    ),
    RelationshipOption(
        id="rel-team-lead",
        label="Team Lead",
        kind=RelationshipKind.TEAM_LEAD,
        description="Lead of the requester's team",
    ),
    RelationshipOption(
        id="rel-department-lead",
        label="Department Lead",
        kind=RelationshipKind.DEPARTMENT_LEAD,
        description="Lead of the requester's department",
    ),
)
