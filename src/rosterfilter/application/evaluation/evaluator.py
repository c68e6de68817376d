"""Predicate evaluator: filters -> PersonPredicate -> bool.

Each FilterItem compiles to a PersonPredicate. A collection combines
under ApprovalMode: ALL = AND, ANY = OR.

Relationship filters are relative to a requester: a candidate satisfies
"Supervisor" iff the candidate is the requester's supervisor. Without a
requester no candidate is anyone's supervisor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rosterfilter.application.evaluation.attributes import apply_operator
from rosterfilter.application.evaluation.relationships import resolve_relationship
from rosterfilter.domain.model.configuration import DEFAULT_CONFIG
from rosterfilter.domain.model.enums import ApprovalMode, Operator
from rosterfilter.domain.model.evaluation_result import EvaluationResult
from rosterfilter.domain.model.options import (
    AttributeDescriptor,
    GroupOption,
    PersonOption,
    RelationshipOption,
)
from rosterfilter.domain.predicates.composite import all_of, always, any_of, negate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from rosterfilter.domain.model.approval_step import ApprovalStep
    from rosterfilter.domain.model.configuration import EngineConfig
    from rosterfilter.domain.model.filter_item import FilterItem
    from rosterfilter.domain.model.person import Person
    from rosterfilter.domain.model.roster import Roster
    from rosterfilter.domain.predicates.base import PersonPredicate

logger = logging.getLogger(__name__)


def compile_filter(
    roster: Roster,
    flt: FilterItem,
    requester: Person | None = None,
    config: EngineConfig | None = None,
) -> PersonPredicate:
    """Build the predicate for one filter.

    Args:
        roster: Roster for relationship traversal
        flt: Filter to compile
        requester: Person relationships are resolved for
        config: Engine configuration

    Returns:
        PersonPredicate
    """
    cfg = config or DEFAULT_CONFIG

    match flt.descriptor:
        case AttributeDescriptor():
            return _attribute_predicate(flt, flt.descriptor, cfg)
        case GroupOption():
            group_id = flt.value

            def in_group(person: Person) -> bool:
                return group_id in person.groups

            return _selection(flt, in_group, cfg)
        case PersonOption():
            person_id = flt.value

            def is_person(person: Person) -> bool:
                return person.id == person_id

            return _selection(flt, is_person, cfg)
        case RelationshipOption(kind=kind):
            target = resolve_relationship(roster, requester, kind) if requester is not None else None
            if target is None:
                logger.debug("relationship %s unresolved for requester %s", kind.value, requester)

            def is_related(person: Person) -> bool:
                return target is not None and person.id == target.id

            return _selection(flt, is_related, cfg)
        case _:
            logger.warning("filter %s has no known descriptor, evaluated as False", flt.id)
            return always(False)


def _selection(flt: FilterItem, member: PersonPredicate, config: EngineConfig) -> PersonPredicate:
    """Apply is / is not to a membership test."""
    match flt.operator:
        case Operator.IS:
            return member
        case Operator.IS_NOT:
            return negate(member)
        case _:
            logger.warning(
                "unrecognized operator %r for %s filter %s evaluated as %s",
                flt.operator.value,
                flt.category.value,
                flt.id,
                config.fail_open_on_unknown_operator,
            )
            return always(config.fail_open_on_unknown_operator)


def _attribute_predicate(flt: FilterItem, descriptor: AttributeDescriptor, config: EngineConfig) -> PersonPredicate:
    operator = flt.operator
    expected = flt.raw_values
    fail_open = config.fail_open_on_unknown_operator

    def matches(person: Person) -> bool:
        try:
            actual = person.get_attribute(descriptor.key)
        except KeyError:
            logger.debug("unsupported attribute %s, filter %s evaluated as False", descriptor.key, flt.id)
            return False
        return apply_operator(operator, actual, expected, descriptor.data_type, fail_open=fail_open)

    return matches


def compile_filters(
    roster: Roster,
    filters: Sequence[FilterItem],
    mode: ApprovalMode = ApprovalMode.ALL,
    requester: Person | None = None,
    config: EngineConfig | None = None,
) -> PersonPredicate:
    """Combine filters under mode.

    Empty filters: ALL = always True, ANY = always False.
    """
    predicates = [compile_filter(roster, f, requester, config) for f in filters]
    if mode is ApprovalMode.ALL:
        return all_of(*predicates)
    return any_of(*predicates)


def evaluate(
    roster: Roster,
    person: Person,
    filters: Sequence[FilterItem],
    mode: ApprovalMode = ApprovalMode.ALL,
    requester: Person | None = None,
    config: EngineConfig | None = None,
) -> bool:
    """Decide whether person satisfies filters under mode.

    Args:
        roster: Roster for relationship traversal
        person: Candidate
        filters: Filter collection
        mode: ALL = every filter, ANY = at least one
        requester: Person relationships are resolved for
        config: Engine configuration

    Returns:
        True if person satisfies the collection
    """
    return compile_filters(roster, filters, mode, requester, config)(person)


def explain(
    roster: Roster,
    person: Person,
    filters: Sequence[FilterItem],
    mode: ApprovalMode = ApprovalMode.ALL,
    requester: Person | None = None,
    config: EngineConfig | None = None,
) -> EvaluationResult:
    """Evaluate and report which filters the person fails."""
    outcomes = [(f.id, compile_filter(roster, f, requester, config)(person)) for f in filters]
    failed = tuple(filter_id for filter_id, passed in outcomes if not passed)

    if mode is ApprovalMode.ALL:
        passes = not failed
    else:
        passes = len(failed) < len(outcomes)
    return EvaluationResult(person=person, passes=passes, failed_filters=failed)


def matching_people(
    roster: Roster,
    filters: Sequence[FilterItem],
    mode: ApprovalMode = ApprovalMode.ALL,
    requester: Person | None = None,
    config: EngineConfig | None = None,
) -> tuple[Person, ...]:
    """All roster people satisfying filters under mode, in roster order."""
    predicate = compile_filters(roster, filters, mode, requester, config)
    return tuple(p for p in roster.people if predicate(p))


def eligible_approvers(
    roster: Roster,
    step: ApprovalStep,
    requester: Person | None = None,
    config: EngineConfig | None = None,
) -> tuple[Person, ...]:
    """People who may approve a step.

    Matched by the step's filters under its mode and by none of its
    exclusions. A step without filters has no approvers.
    """
    if not step.filters:
        return ()

    include = compile_filters(roster, step.filters, step.mode, requester, config)
    exclude = compile_filters(roster, step.exclusions, ApprovalMode.ANY, requester, config)
    return tuple(p for p in roster.people if include(p) and not exclude(p))
