"""Fixed attribute catalog.

Configuration, not derived from the Person schema. Candidate values of
string, number and date attributes come from the roster at query time.
"""

from rosterfilter.domain.model.enums import DataType, EmploymentStatus, EmploymentType, Gender
from rosterfilter.domain.model.options import AttributeDescriptor

ATTRIBUTE_CATALOG: tuple[AttributeDescriptor, ...] = (
    AttributeDescriptor(
        id="attr-gender",
        key="gender",
        label="Gender",
        data_type=DataType.ENUM,
        description="Filter by gender identity",
        possible_values=tuple(g.value for g in Gender),
    ),
    AttributeDescriptor(
        id="attr-employment_type",
        key="employment_type",
        label="Employment Type",
        data_type=DataType.ENUM,
        description="Filter by employment relationship",
        possible_values=tuple(t.value for t in EmploymentType),
    ),
    AttributeDescriptor(
        id="attr-employment_status",
        key="employment_status",
        label="Employment Status",
        data_type=DataType.ENUM,
        description="Filter by work schedule",
        possible_values=tuple(s.value for s in EmploymentStatus),
    ),
    AttributeDescriptor(
        id="attr-position",
        key="position",
        label="Position",
        data_type=DataType.STRING,
        description="Filter by job title",
    ),
    AttributeDescriptor(
        id="attr-weekly_hours",
        key="weekly_hours",
        label="Weekly Hours",
        data_type=DataType.NUMBER,
        description="Filter by weekly work hours",
    ),
    AttributeDescriptor(
        id="attr-workplace",
        key="workplace",
        label="Workplace",
        data_type=DataType.STRING,
        description="Filter by office location",
    ),
    AttributeDescriptor(
        id="attr-legal_entity",
        key="legal_entity",
        label="Legal Entity",
        data_type=DataType.STRING,
        description="Filter by company legal structure",
    ),
    AttributeDescriptor(
        id="attr-probation_length",
        key="probation_length",
        label="Probation Length",
        data_type=DataType.NUMBER,
        description="Filter by probation period in months",
    ),
    AttributeDescriptor(
        id="attr-cost_center",
        key="cost_center",
        label="Cost Center",
        data_type=DataType.STRING,
        description="Filter by financial cost center",
    ),
    AttributeDescriptor(
        id="attr-hire_date",
        key="hire_date",
        label="Hire Date",
        data_type=DataType.DATE,
        description="Filter by employment start date",
    ),
    AttributeDescriptor(
        id="attr-contract_end_date",
        key="contract_end_date",
        label="Contract End Date",
        data_type=DataType.DATE,
        description="Filter by contract end date",
    ),
)


def find_attribute(key: str) -> AttributeDescriptor | None:
    """Get catalog descriptor by Person field name. Returns None if not found."""
    return next((a for a in ATTRIBUTE_CATALOG if a.key == key), None)
