"""Domain model entities."""

from rosterfilter.domain.model.approval_step import ApprovalStep
from rosterfilter.domain.model.configuration import DEFAULT_CONFIG, EngineConfig
from rosterfilter.domain.model.enums import (
    ApprovalMode,
    Category,
    DataType,
    EmploymentStatus,
    EmploymentType,
    Gender,
    GroupCategory,
    Operator,
    RelationshipKind,
)
from rosterfilter.domain.model.evaluation_result import EvaluationResult
from rosterfilter.domain.model.filter_item import AttributeValue, FilterItem, FilterValue, Scalar
from rosterfilter.domain.model.options import (
    AttributeDescriptor,
    Descriptor,
    GroupOption,
    OptionCatalogs,
    PersonOption,
    RelationshipOption,
    category_of,
)
from rosterfilter.domain.model.organization import Department, Group, Team
from rosterfilter.domain.model.person import Person
from rosterfilter.domain.model.roster import Roster

type FilterList = tuple[FilterItem, ...]

__all__ = [
    # Enums
    "ApprovalMode",
    "Category",
    "DataType",
    "EmploymentStatus",
    "EmploymentType",
    "Gender",
    "GroupCategory",
    "Operator",
    "RelationshipKind",
    # Roster
    "Person",
    "Department",
    "Team",
    "Group",
    "Roster",
    # Catalogs
    "AttributeDescriptor",
    "Descriptor",
    "GroupOption",
    "OptionCatalogs",
    "PersonOption",
    "RelationshipOption",
    "category_of",
    # Filters
    "AttributeValue",
    "FilterItem",
    "FilterList",
    "FilterValue",
    "Scalar",
    # Steps and results
    "ApprovalStep",
    "EvaluationResult",
    # Configuration
    "DEFAULT_CONFIG",
    "EngineConfig",
]
