"""Person predicate combinators.

An approval step in ALL mode folds its filters with all_of, in ANY mode
with any_of. "is not" filters wrap their membership test in negate.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rosterfilter.domain.model.person import Person
    from rosterfilter.domain.predicates.base import PersonPredicate


def all_of(*predicates: PersonPredicate) -> PersonPredicate:
    """Select people who satisfy every filter predicate.

    With no predicates every person is selected. Evaluation stops at
    the first failing filter.
    """

    def _selects(person: Person) -> bool:
        return all(p(person) for p in predicates)

    return _selects


def any_of(*predicates: PersonPredicate) -> PersonPredicate:
    """Select people who satisfy at least one filter predicate.

    With no predicates nobody is selected.
    """

    def _selects(person: Person) -> bool:
        return any(p(person) for p in predicates)

    return _selects


def negate(predicate: PersonPredicate) -> PersonPredicate:
    """Select exactly the people predicate rejects."""

    def _rejects(person: Person) -> bool:
        return not predicate(person)

    return _rejects


def always(result: bool) -> PersonPredicate:
    """Select everyone (True) or nobody (False), e.g. for an unusable filter."""

    def _constant(person: Person) -> bool:
        return result

    return _constant
