"""Domain enumerations.

Values are the display strings used by the roster data and operator menus.
"""

from enum import Enum


class Category(Enum):
    """Filter category. Fixed at FilterItem creation."""

    RELATIONSHIPS = "relationships"
    GROUPS = "groups"
    ATTRIBUTES = "attributes"
    PEOPLE = "people"


class DataType(Enum):
    """Attribute data type. Selects the base operator set."""

    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    ENUM = "enum"


class Operator(Enum):
    """Comparison operator vocabulary.

    operators_for offers a subset to filters. starts with, ends with,
    is empty and the inclusive comparisons are evaluation-only: apply_operator
    understands them, but neither the mutation engine nor the codec
    lets a filter carry them.
    """

    # equality
    IS = "is"
    IS_NOT = "is not"

    # text
    CONTAINS = "contains"
    DOES_NOT_CONTAIN = "does not contain"
    STARTS_WITH = "starts with"
    ENDS_WITH = "ends with"
    IS_EMPTY = "is empty"

    # multi-value
    IS_ONE_OF = "is one of"
    IS_ALL_OF = "is all of"

    # number
    GREATER_THAN = "greater than"
    LESS_THAN = "less than"
    GREATER_THAN_OR_EQUAL = "greater than or equal"
    LESS_THAN_OR_EQUAL = "less than or equal"

    # date
    BEFORE = "before"
    AFTER = "after"
    ON_OR_BEFORE = "on or before"
    ON_OR_AFTER = "on or after"


class ApprovalMode(Enum):
    """How filters of one approval step combine."""

    ALL = "all"  # all must approve: AND
    ANY = "any"  # any may approve: OR


class RelationshipKind(Enum):
    """Organizational relationship resolved against the requester."""

    SUPERVISOR = "supervisor"
    SECONDARY_SUPERVISOR = "secondary_supervisor"
    SKIP_LEVEL = "skip_level"
    TEAM_LEAD = "team_lead"
    DEPARTMENT_LEAD = "department_lead"


class Gender(Enum):
    """Person gender."""

    DIVERSE = "Diverse"
    FEMALE = "Female"
    MALE = "Male"
    UNDEFINED = "Undefined"


class EmploymentType(Enum):
    """Employment relationship."""

    INTERNAL = "internal"
    EXTERNAL = "external"


class EmploymentStatus(Enum):
    """Work schedule."""

    FULL_TIME = "Full time"
    PART_TIME = "Part time"
    WORKING_STUDENT = "Working student"


class GroupCategory(Enum):
    """Group classification."""

    FUNCTIONAL = "Functional"
    GEOGRAPHIC = "Geographic"
    LEADERSHIP = "Leadership"
    PROJECT = "Project"
    SPECIAL_INTEREST = "Special Interest"
