"""Per-person evaluation outcome."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rosterfilter.domain.model.person import Person


@dataclass(frozen=True, slots=True)
class EvaluationResult:
    """Whether a person satisfies a filter collection, and which filters failed.

    Attributes:
        person: Evaluated person
        passes: Combined result under the evaluation mode
        failed_filters: Ids of filters the person does not satisfy
    """

    person: Person
    passes: bool
    failed_filters: tuple[str, ...] = ()

    @property
    def failed_count(self) -> int:
        """Number of failed filters."""
        return len(self.failed_filters)
