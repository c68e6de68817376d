"""FilterSession: stateful holder over the pure engine.

The engine functions take a collection and return the next one. The
session keeps the current collection and the catalogs generated from its
roster, so a UI can bind to one object.

Example:
    session = FilterSession(roster)
    session.toggle_attribute("employment_status", "Full time", True)
    session.toggle_attribute("employment_status", "Part time", True)
    session.matching_people()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rosterfilter.application.catalog.generator import generate_options
from rosterfilter.application.engine import (
    change_operator,
    clear_filters,
    is_target_selected,
    is_value_selected,
    remove_filter,
    toggle_attribute_value,
    toggle_group,
    toggle_person,
    toggle_relationship,
)
from rosterfilter.application.evaluation import evaluate, explain, matching_people
from rosterfilter.application.search import candidate_values, search_options
from rosterfilter.domain.model.configuration import DEFAULT_CONFIG
from rosterfilter.domain.model.enums import ApprovalMode, Category
from rosterfilter.domain.model.filter_item import AttributeValue
from rosterfilter.infrastructure.codec import filters_from_json, filters_to_json

if TYPE_CHECKING:
    from rosterfilter.application.search import CandidateValues
    from rosterfilter.domain.model import FilterList
    from rosterfilter.domain.model.configuration import EngineConfig
    from rosterfilter.domain.model.enums import Operator
    from rosterfilter.domain.model.evaluation_result import EvaluationResult
    from rosterfilter.domain.model.filter_item import Scalar
    from rosterfilter.domain.model.options import OptionCatalogs
    from rosterfilter.domain.model.person import Person
    from rosterfilter.domain.model.roster import Roster


class FilterSession:
    """Current filter collection for one roster.

    Attributes:
        _roster: Roster options and evaluation are based on
        _config: Engine configuration
        _catalogs: Options generated from the roster
        _filters: Current collection
    """

    def __init__(self, roster: Roster, config: EngineConfig | None = None) -> None:
        """Initialize session with an empty collection.

        Args:
            roster: Roster to build options from and evaluate against
            config: Engine configuration. Uses defaults if None.

        Raises:
            TypeError: If roster is None
        """
        if roster is None:
            raise TypeError("roster must not be None")
        self._roster = roster
        self._config = config or DEFAULT_CONFIG
        self._catalogs = generate_options(roster)
        self._filters: FilterList = ()

    @property
    def roster(self) -> Roster:
        """Roster the session is bound to."""
        return self._roster

    @property
    def catalogs(self) -> OptionCatalogs:
        """All browsable options."""
        return self._catalogs

    @property
    def filters(self) -> FilterList:
        """Current collection."""
        return self._filters

    @property
    def config(self) -> EngineConfig:
        """Engine configuration."""
        return self._config

    def __len__(self) -> int:
        """Number of filters."""
        return len(self._filters)

    # Mutations

    def toggle_relationship(self, option_id: str, checked: bool) -> FilterList:
        """Select or deselect a relationship option."""
        self._filters = toggle_relationship(self._filters, self._catalogs, option_id, checked, self._config)
        return self._filters

    def toggle_group(self, group_id: str, checked: bool) -> FilterList:
        """Select or deselect a group."""
        self._filters = toggle_group(self._filters, self._catalogs, group_id, checked, self._config)
        return self._filters

    def toggle_person(self, person_id: str, checked: bool) -> FilterList:
        """Select or deselect a person."""
        self._filters = toggle_person(self._filters, self._catalogs, person_id, checked, self._config)
        return self._filters

    def toggle_attribute(self, key: str, value: Scalar, checked: bool) -> FilterList:
        """Add or remove one value of an attribute filter."""
        target = AttributeValue(key=key, value=value)
        self._filters = toggle_attribute_value(self._filters, self._catalogs, target, checked, self._config)
        return self._filters

    def change_operator(self, filter_id: str, operator: Operator | str) -> FilterList:
        """Change the operator of one filter."""
        self._filters = change_operator(self._filters, filter_id, operator)
        return self._filters

    def remove(self, filter_id: str) -> FilterList:
        """Delete a filter by id."""
        self._filters = remove_filter(self._filters, filter_id)
        return self._filters

    def clear(self) -> FilterList:
        """Delete every filter."""
        self._filters = clear_filters(self._filters)
        return self._filters

    # Option lists

    def search(self, query: str) -> OptionCatalogs:
        """Catalogs narrowed by a free-text query."""
        return search_options(self._catalogs, query)

    def values_for(self, key: str, query: str = "") -> CandidateValues:
        """Selectable values of an attribute.

        Raises:
            KeyError: If key is not in the attribute catalog
        """
        descriptor = self._catalogs.attribute(key)
        if descriptor is None:
            raise KeyError(f"unknown attribute '{key}'")
        return candidate_values(descriptor, self._roster.people, query, self._config)

    def is_selected(self, category: Category, target_id: str) -> bool:
        """True if a relationship/group/person target has a filter."""
        return is_target_selected(self._filters, category, target_id)

    def is_value_selected(self, key: str, value: Scalar) -> bool:
        """True if an attribute value is selected."""
        return is_value_selected(self._filters, AttributeValue(key=key, value=value))

    # Evaluation

    def matches(
        self,
        person: Person,
        mode: ApprovalMode = ApprovalMode.ALL,
        requester: Person | None = None,
    ) -> bool:
        """True if person satisfies the current collection under mode."""
        return evaluate(self._roster, person, self._filters, mode, requester, self._config)

    def explain(
        self,
        person: Person,
        mode: ApprovalMode = ApprovalMode.ALL,
        requester: Person | None = None,
    ) -> EvaluationResult:
        """Evaluate person and list the filters it fails."""
        return explain(self._roster, person, self._filters, mode, requester, self._config)

    def matching_people(
        self,
        mode: ApprovalMode = ApprovalMode.ALL,
        requester: Person | None = None,
    ) -> tuple[Person, ...]:
        """Roster people satisfying the current collection."""
        return matching_people(self._roster, self._filters, mode, requester, self._config)

    # Persistence

    def to_json(self) -> str:
        """Serialize the current collection."""
        return filters_to_json(self._filters)

    def load_json(self, text: str) -> FilterList:
        """Replace the current collection with a serialized one.

        Raises:
            FilterDecodeError: If text is malformed. The collection is unchanged.
        """
        self._filters = filters_from_json(text, self._catalogs)
        return self._filters
