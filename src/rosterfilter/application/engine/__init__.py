"""Filter engine: pure mutations over immutable filter collections."""

from rosterfilter.application.engine.mutations import (
    change_operator,
    clear_filters,
    new_filter_id,
    remove_filter,
    toggle,
    toggle_attribute_value,
    toggle_group,
    toggle_person,
    toggle_relationship,
)
from rosterfilter.application.engine.selection import (
    attribute_filters,
    find_attribute_filter,
    find_filter,
    find_target_filter,
    is_target_selected,
    is_value_selected,
)

__all__ = [
    # Mutations
    "change_operator",
    "clear_filters",
    "new_filter_id",
    "remove_filter",
    "toggle",
    "toggle_attribute_value",
    "toggle_group",
    "toggle_person",
    "toggle_relationship",
    # Queries
    "attribute_filters",
    "find_attribute_filter",
    "find_filter",
    "find_target_filter",
    "is_target_selected",
    "is_value_selected",
]
