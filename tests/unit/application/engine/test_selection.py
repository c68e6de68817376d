"""Tests for application/engine/selection.py."""

from rosterfilter.application.engine import (
    attribute_filters,
    find_attribute_filter,
    find_filter,
    is_target_selected,
    is_value_selected,
    toggle_attribute_value,
    toggle_group,
)
from rosterfilter.domain.model.enums import Category
from rosterfilter.domain.model.filter_item import AttributeValue
from tests.factories import sample_catalogs


def _filters():
    catalogs = sample_catalogs()
    filters = toggle_group((), catalogs, "g-berlin", True)
    filters = toggle_attribute_value(filters, catalogs, AttributeValue(key="weekly_hours", value=40), True)
    return toggle_attribute_value(filters, catalogs, AttributeValue(key="weekly_hours", value=20), True)


class TestSelectionQueries:
    """Tests for selection queries."""

    def test_find_filter(self) -> None:
        filters = _filters()
        assert find_filter(filters, filters[1].id) is filters[1]
        assert find_filter(filters, "missing") is None

    def test_is_target_selected(self) -> None:
        filters = _filters()
        assert is_target_selected(filters, Category.GROUPS, "g-berlin") is True
        assert is_target_selected(filters, Category.GROUPS, "g-leaders") is False
        assert is_target_selected(filters, Category.PEOPLE, "g-berlin") is False

    def test_is_value_selected_coerces(self) -> None:
        filters = _filters()
        assert is_value_selected(filters, AttributeValue(key="weekly_hours", value="20")) is True
        assert is_value_selected(filters, AttributeValue(key="weekly_hours", value=30)) is False
        assert is_value_selected(filters, AttributeValue(key="workplace", value="Berlin")) is False

    def test_find_attribute_filter(self) -> None:
        filters = _filters()
        flt = find_attribute_filter(filters, "weekly_hours")
        assert flt is not None and flt.cardinality == 2
        assert find_attribute_filter(filters, "position") is None

    def test_attribute_filters(self) -> None:
        assert [f.subject for f in attribute_filters(_filters())] == ["Weekly Hours"]
