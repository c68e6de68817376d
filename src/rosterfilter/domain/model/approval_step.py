"""Approval step: filters, exclusions and combination mode."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rosterfilter.domain.model.enums import ApprovalMode

if TYPE_CHECKING:
    from rosterfilter.domain.model.filter_item import FilterItem


@dataclass(frozen=True, slots=True)
class ApprovalStep:
    """One step of an approval chain.

    Attributes:
        filters: Who may approve
        exclusions: Who must not approve, even if matched by filters
        mode: ALL = every filter must hold, ANY = one suffices
        title: Display title
    """

    filters: tuple[FilterItem, ...] = ()
    exclusions: tuple[FilterItem, ...] = ()
    mode: ApprovalMode = ApprovalMode.ANY
    title: str = ""

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        ids = [f.id for f in self.filters] + [f.id for f in self.exclusions]
        if len(set(ids)) != len(ids):
            raise ValueError("filter ids must be unique within a step")
