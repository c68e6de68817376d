"""Value coercion to an attribute's data type.

Used by the engine to canonicalize toggled values and by the evaluator
to compare filter values with person fields.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import TYPE_CHECKING

from rosterfilter.application.formatting import parse_date
from rosterfilter.domain.model.enums import DataType

if TYPE_CHECKING:
    from rosterfilter.domain.model.filter_item import Scalar


def to_number(raw: object) -> int | float | None:
    """Coerce to int or float. Integral values become int.

    None if not numeric or not finite (nan, inf).
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        number = raw
    elif isinstance(raw, str):
        try:
            number = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return int(number) if number.is_integer() else number


def coerce(data_type: DataType, raw: object) -> Scalar | None:
    """Coerce raw value to the canonical form for data_type.

    Args:
        data_type: Target data type
        raw: Value from UI, roster or storage

    Returns:
        int/float for NUMBER, date for DATE, str for STRING and ENUM.
        None if raw is None or cannot be coerced.
    """
    if raw is None:
        return None
    if isinstance(raw, Enum):
        raw = raw.value

    match data_type:
        case DataType.NUMBER:
            return to_number(raw)
        case DataType.DATE:
            return parse_date(raw)
        case DataType.STRING | DataType.ENUM:
            return str(raw)
        case _:
            return None
