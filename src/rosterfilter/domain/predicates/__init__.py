"""Domain predicates: PersonPredicate = Callable[[Person], bool].

Usage:
    from rosterfilter.domain.predicates import all_of, negate

    flt = all_of(in_engineering, negate(is_external))
    selected = [p for p in roster.people if flt(p)]
"""

from rosterfilter.domain.predicates.base import PersonPredicate
from rosterfilter.domain.predicates.composite import all_of, always, any_of, negate

__all__ = [
    "PersonPredicate",
    "all_of",
    "always",
    "any_of",
    "negate",
]
