import math
from enum import Enum
from typing import Mapping, Type

from ergorisk.exceptions import ConfigurationError


def clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(value, high))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves going up (2.5 -> 3, -2.5 -> -2).

    Python's round() is banker's rounding; scores are rounded half-up so that
    boundary values land in the same band every time.
    """
    return int(math.floor(value + 0.5))


def require_exhaustive(table: Mapping, enum_cls: Type[Enum], name: str) -> Mapping:
    """
    Fail at import if a lookup table does not cover every enum member.
    """
    missing = [m.value for m in enum_cls if m not in table]
    if missing:
        raise ConfigurationError(f"{name} missing entries for: {', '.join(missing)}")
    return table


def band_penalty(value: float, bands) -> float:
    """
    Exclusive bands: return the penalty of the first (threshold, penalty)
    pair with value > threshold, else 0. Bands are ordered worst first.
    """
    for threshold, penalty in bands:
        if value > threshold:
            return penalty
    return 0
