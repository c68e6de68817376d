"""Operator catalog: legal operators per data type and cardinality."""

from __future__ import annotations

from types import MappingProxyType

from rosterfilter.domain.model.enums import Category, DataType, Operator

BASE_OPERATORS: MappingProxyType[DataType, tuple[Operator, ...]] = MappingProxyType(
    {
        DataType.STRING: (Operator.IS, Operator.IS_NOT, Operator.CONTAINS, Operator.DOES_NOT_CONTAIN),
        DataType.NUMBER: (Operator.IS, Operator.IS_NOT, Operator.GREATER_THAN, Operator.LESS_THAN),
        DataType.DATE: (Operator.IS, Operator.IS_NOT, Operator.BEFORE, Operator.AFTER),
        DataType.ENUM: (Operator.IS, Operator.IS_NOT),
    }
)

# Any attribute with two or more selected values, regardless of data type.
MULTI_VALUE_OPERATORS: tuple[Operator, ...] = (Operator.IS_ONE_OF, Operator.IS_ALL_OF, Operator.IS_NOT)

# Relationship, group and person filters.
SELECTION_OPERATORS: tuple[Operator, ...] = (Operator.IS, Operator.IS_NOT)


def operators_for(data_type: DataType, cardinality: int) -> tuple[Operator, ...]:
    """Get ordered legal operators for an attribute filter.

    Args:
        data_type: Attribute data type
        cardinality: Number of selected values (>= 1)

    Returns:
        Base operators for cardinality 1, multi-value operators otherwise.
        Unknown data types fall back to is / is not.

    Raises:
        ValueError: If cardinality < 1
    """
    if cardinality < 1:
        raise ValueError(f"cardinality must be >= 1, got {cardinality}")
    if cardinality > 1:
        return MULTI_VALUE_OPERATORS
    return BASE_OPERATORS.get(data_type, SELECTION_OPERATORS)


def operators_for_category(category: Category) -> tuple[Operator, ...]:
    """Get operators for a single-valued category.

    Raises:
        ValueError: For ATTRIBUTES, whose operators depend on data type
    """
    if category is Category.ATTRIBUTES:
        raise ValueError("attribute operators depend on data type, use operators_for()")
    return SELECTION_OPERATORS


def default_operator(cardinality: int) -> Operator:
    """Operator assigned when a filter is created or changes shape."""
    return Operator.IS if cardinality == 1 else Operator.IS_ONE_OF
