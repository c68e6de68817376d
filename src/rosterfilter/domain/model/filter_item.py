"""FilterItem: one typed predicate clause.

Value shape is tied to cardinality: one value is stored as a scalar, two
or more as a tuple. An empty value never exists; the item is removed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from rosterfilter.domain.model.enums import Category, Operator
from rosterfilter.domain.model.options import AttributeDescriptor, Descriptor, category_of

type Scalar = str | int | float | date


@dataclass(frozen=True, slots=True)
class AttributeValue:
    """Attribute value qualified by its attribute key.

    Attributes:
        key: Person field name
        value: Raw value (str, number or date)
    """

    key: str
    value: Scalar

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.key:
            raise ValueError("key must not be empty")
        if self.value is None:
            raise TypeError("value must not be None")

    def __str__(self) -> str:
        """Format as key:value."""
        return f"{self.key}:{self.value}"


type FilterValue = str | AttributeValue | tuple[AttributeValue, ...]


@dataclass(frozen=True, slots=True)
class FilterItem:
    """Filter clause a person either satisfies or not.

    Attributes:
        id: Opaque identifier, stable for the item's lifetime
        category: Fixed at creation
        subject: Human label of what is filtered
        operator: Current operator, always in available_operators
        value: Target id (relationship/group/person) or attribute value(s)
        display_value: Human-readable rendering of value
        available_operators: Legal operators for current category/shape
        descriptor: Catalog entry the item was created from
    """

    id: str
    category: Category
    subject: str
    operator: Operator
    value: FilterValue
    display_value: str
    available_operators: tuple[Operator, ...]
    descriptor: Descriptor = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.id:
            raise ValueError("id must not be empty")
        if not self.subject:
            raise ValueError("subject must not be empty")
        if not self.available_operators:
            raise ValueError("available_operators must not be empty")
        if self.operator not in self.available_operators:
            raise ValueError(
                f"operator '{self.operator.value}' not in available operators "
                f"{[op.value for op in self.available_operators]}"
            )
        if category_of(self.descriptor) is not self.category:
            raise ValueError(
                f"descriptor {type(self.descriptor).__name__} does not match category {self.category.value}"
            )

        if isinstance(self.descriptor, AttributeDescriptor):
            self._validate_attribute_value(self.descriptor.key)
        elif not isinstance(self.value, str) or not self.value:
            raise ValueError(f"{self.category.value} filter requires a non-empty target id")

    def _validate_attribute_value(self, key: str) -> None:
        """Check scalar/list shape of attribute values."""
        if isinstance(self.value, AttributeValue):
            values: tuple[AttributeValue, ...] = (self.value,)
        elif isinstance(self.value, tuple):
            if len(self.value) < 2:
                raise ValueError(f"list value requires >= 2 entries, got {len(self.value)}")
            if len(set(self.value)) != len(self.value):
                raise ValueError("list value must not contain duplicates")
            values = self.value
        else:
            raise TypeError(f"attribute filter value must be AttributeValue, got {type(self.value).__name__}")

        for item in values:
            if not isinstance(item, AttributeValue):
                raise TypeError(f"attribute filter value must be AttributeValue, got {type(item).__name__}")
            if item.key != key:
                raise ValueError(f"value key '{item.key}' does not match attribute '{key}'")

    @property
    def is_multi(self) -> bool:
        """True if value has list shape."""
        return isinstance(self.value, tuple)

    @property
    def cardinality(self) -> int:
        """Number of values held."""
        return len(self.value) if isinstance(self.value, tuple) else 1

    @property
    def attribute_values(self) -> tuple[AttributeValue, ...]:
        """Attribute values as a tuple regardless of shape. Empty for other categories."""
        if isinstance(self.value, tuple):
            return self.value
        if isinstance(self.value, AttributeValue):
            return (self.value,)
        return ()

    @property
    def raw_values(self) -> tuple[Scalar, ...]:
        """Unqualified values: target id, or attribute values without their key."""
        if isinstance(self.value, str):
            return (self.value,)
        return tuple(v.value for v in self.attribute_values)
