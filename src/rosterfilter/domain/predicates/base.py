"""Predicate type alias.

PersonPredicate: takes Person, returns True if the person is selected.
"""

from collections.abc import Callable

from rosterfilter.domain.model.person import Person

type PersonPredicate = Callable[[Person], bool]
