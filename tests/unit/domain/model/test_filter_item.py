"""Tests for domain/model/filter_item.py."""

from dataclasses import replace
from datetime import date

import pytest

from rosterfilter.domain.model.enums import Category, Operator
from rosterfilter.domain.model.filter_item import AttributeValue, FilterItem
from tests.factories import make_attribute_filter, sample_catalogs


def _group_filter(**overrides: object) -> FilterItem:
    group = sample_catalogs().group("g-berlin")
    fields: dict[str, object] = {
        "id": "f1",
        "category": Category.GROUPS,
        "subject": "Berlin Office",
        "operator": Operator.IS,
        "value": "g-berlin",
        "display_value": "Berlin Office",
        "available_operators": (Operator.IS, Operator.IS_NOT),
        "descriptor": group,
    }
    fields.update(overrides)
    return FilterItem(**fields)  # type: ignore[arg-type]


class TestAttributeValue:
    """Tests for AttributeValue."""

    def test_str(self) -> None:
        assert str(AttributeValue(key="employment_status", value="Full time")) == "employment_status:Full time"

    def test_equality_includes_key(self) -> None:
        assert AttributeValue(key="position", value="Lead") != AttributeValue(key="team", value="Lead")

    def test_none_value_raises(self) -> None:
        with pytest.raises(TypeError, match="value must not be None"):
            AttributeValue(key="position", value=None)  # type: ignore[arg-type]

    def test_empty_key_raises(self) -> None:
        with pytest.raises(ValueError, match="key must not be empty"):
            AttributeValue(key="", value="x")


class TestFilterItemCreation:
    """Tests for valid FilterItem creation and shape helpers."""

    def test_target_filter(self) -> None:
        flt = _group_filter()
        assert flt.is_multi is False
        assert flt.cardinality == 1
        assert flt.attribute_values == ()
        assert flt.raw_values == ("g-berlin",)

    def test_scalar_attribute(self) -> None:
        flt = make_attribute_filter("weekly_hours", 40)
        assert flt.is_multi is False
        assert flt.attribute_values == (AttributeValue(key="weekly_hours", value=40),)
        assert flt.raw_values == (40,)

    def test_list_attribute(self) -> None:
        flt = make_attribute_filter("employment_status", "Full time", "Part time")
        assert flt.is_multi is True
        assert flt.cardinality == 2
        assert flt.operator is Operator.IS_ONE_OF
        assert flt.raw_values == ("Full time", "Part time")

    def test_descriptor_not_compared(self) -> None:
        flt = make_attribute_filter("position", "Engineer")
        other = replace(flt.descriptor, description="other")
        rebuilt = make_attribute_filter("position", "Engineer", descriptor=other)  # type: ignore[arg-type]
        assert flt.descriptor != rebuilt.descriptor
        assert flt == rebuilt


class TestFilterItemFailFirst:
    """Tests for FAIL-FIRST validation in FilterItem."""

    def test_operator_not_available_raises(self) -> None:
        with pytest.raises(ValueError, match="not in available operators"):
            _group_filter(operator=Operator.CONTAINS)

    def test_empty_available_operators_raises(self) -> None:
        with pytest.raises(ValueError, match="available_operators must not be empty"):
            _group_filter(available_operators=())

    def test_descriptor_category_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="does not match category"):
            _group_filter(category=Category.PEOPLE)

    def test_empty_target_raises(self) -> None:
        with pytest.raises(ValueError, match="non-empty target id"):
            _group_filter(value="")

    def test_single_entry_list_raises(self) -> None:
        flt = make_attribute_filter("hire_date", date(2022, 3, 15))
        with pytest.raises(ValueError, match=">= 2 entries"):
            FilterItem(
                id="f1",
                category=Category.ATTRIBUTES,
                subject=flt.subject,
                operator=Operator.IS,
                value=(AttributeValue(key="hire_date", value=date(2022, 3, 15)),),
                display_value=flt.display_value,
                available_operators=flt.available_operators,
                descriptor=flt.descriptor,
            )

    def test_duplicate_list_entries_raise(self) -> None:
        with pytest.raises(ValueError, match="duplicates"):
            make_attribute_filter("position", "Engineer", "Engineer")

    def test_foreign_key_raises(self) -> None:
        flt = make_attribute_filter("position", "Engineer")
        with pytest.raises(ValueError, match="does not match attribute"):
            FilterItem(
                id="f1",
                category=Category.ATTRIBUTES,
                subject=flt.subject,
                operator=Operator.IS,
                value=AttributeValue(key="team", value="Engineer"),
                display_value="Engineer",
                available_operators=flt.available_operators,
                descriptor=flt.descriptor,
            )

    def test_plain_string_attribute_value_raises(self) -> None:
        flt = make_attribute_filter("position", "Engineer")
        with pytest.raises(TypeError, match="must be AttributeValue"):
            FilterItem(
                id="f1",
                category=Category.ATTRIBUTES,
                subject=flt.subject,
                operator=Operator.IS,
                value="position:Engineer",
                display_value="Engineer",
                available_operators=flt.available_operators,
                descriptor=flt.descriptor,
            )
