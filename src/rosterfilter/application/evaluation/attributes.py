"""Attribute operator application.

Filter values are coerced to the attribute's data type before comparison.
A missing person value or a value that cannot be coerced never satisfies
a positive operator.

apply_operator covers the whole Operator vocabulary. Filters only ever
carry operators from operators_for, so the text prefix/suffix, is empty
and inclusive comparison branches serve direct callers only.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from rosterfilter.application.coercion import coerce, to_number
from rosterfilter.application.formatting import format_scalar, parse_date
from rosterfilter.domain.model.enums import Operator

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from datetime import date

    from rosterfilter.domain.model.enums import DataType
    from rosterfilter.domain.model.filter_item import Scalar

logger = logging.getLogger(__name__)

_COLLECTIONS = (tuple, list, set, frozenset)


def person_values(actual: object, data_type: DataType) -> tuple[Scalar, ...]:
    """Coerce a person field to comparable values.

    Collection fields (e.g. group ids) yield one value per element.
    None yields no values.
    """
    if actual is None:
        return ()
    items = actual if isinstance(actual, _COLLECTIONS) else (actual,)
    values = (coerce(data_type, item) for item in items)
    return tuple(v for v in values if v is not None)


def apply_operator(
    operator: Operator,
    actual: object,
    expected: Sequence[object],
    data_type: DataType,
    *,
    fail_open: bool = False,
) -> bool:
    """Decide whether a person field satisfies operator and expected values.

    Args:
        operator: Operator to apply
        actual: Raw person field
        expected: Filter values without attribute key
        data_type: Attribute data type
        fail_open: Result for an operator this function does not know

    Returns:
        True if satisfied
    """
    have = person_values(actual, data_type)
    want = tuple(v for v in (coerce(data_type, e) for e in expected) if v is not None)

    match operator:
        case Operator.IS | Operator.IS_ONE_OF:
            return _equals_any(have, want)
        case Operator.IS_NOT:
            return not _equals_any(have, want)
        case Operator.IS_ALL_OF:
            return bool(want) and set(want) <= set(have)
        case Operator.CONTAINS:
            return _text_test(have, want, str.__contains__)
        case Operator.DOES_NOT_CONTAIN:
            return not _text_test(have, want, str.__contains__)
        case Operator.STARTS_WITH:
            return _text_test(have, want, str.startswith)
        case Operator.ENDS_WITH:
            return _text_test(have, want, str.endswith)
        case Operator.IS_EMPTY:
            return all(not _text(v).strip() for v in have)
        case Operator.GREATER_THAN:
            return _number_test(have, want, lambda a, b: a > b)
        case Operator.LESS_THAN:
            return _number_test(have, want, lambda a, b: a < b)
        case Operator.GREATER_THAN_OR_EQUAL:
            return _number_test(have, want, lambda a, b: a >= b)
        case Operator.LESS_THAN_OR_EQUAL:
            return _number_test(have, want, lambda a, b: a <= b)
        case Operator.BEFORE:
            return _date_test(have, want, lambda a, b: a < b)
        case Operator.AFTER:
            return _date_test(have, want, lambda a, b: a > b)
        case Operator.ON_OR_BEFORE:
            return _date_test(have, want, lambda a, b: a <= b)
        case Operator.ON_OR_AFTER:
            return _date_test(have, want, lambda a, b: a >= b)
        case _:
            logger.warning("unrecognized operator %r evaluated as %s", operator, fail_open)
            return fail_open


def _equals_any(have: tuple[Scalar, ...], want: tuple[Scalar, ...]) -> bool:
    return any(h == w for h in have for w in want)


def _text(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return format_scalar(value)


def _text_test(have: tuple[Scalar, ...], want: tuple[Scalar, ...], test: Callable[[str, str], bool]) -> bool:
    """Case-insensitive text test of any person value against any filter value."""
    return any(test(_text(h).lower(), _text(w).lower()) for h in have for w in want)


def _number_test(
    have: tuple[Scalar, ...], want: tuple[Scalar, ...], compare: Callable[[float, float], bool]
) -> bool:
    if not have or not want:
        return False
    left, right = to_number(have[0]), to_number(want[0])
    if left is None or right is None:
        return False
    return compare(left, right)


def _date_test(
    have: tuple[Scalar, ...], want: tuple[Scalar, ...], compare: Callable[[date, date], bool]
) -> bool:
    if not have or not want:
        return False
    left, right = parse_date(have[0]), parse_date(want[0])
    if left is None or right is None:
        return False
    return compare(left, right)
