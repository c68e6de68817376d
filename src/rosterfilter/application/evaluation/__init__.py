"""Predicate evaluation of filters against people."""

from rosterfilter.application.evaluation.attributes import apply_operator
from rosterfilter.application.evaluation.evaluator import (
    compile_filter,
    compile_filters,
    eligible_approvers,
    evaluate,
    explain,
    matching_people,
)
from rosterfilter.application.evaluation.relationships import resolve_relationship

__all__ = [
    "apply_operator",
    "compile_filter",
    "compile_filters",
    "eligible_approvers",
    "evaluate",
    "explain",
    "matching_people",
    "resolve_relationship",
]
