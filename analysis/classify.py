"""Categorical labels derived from a record's digit sum.

The high/low split is intentionally asymmetric: sums 3-10 are Low and 11-18
are High.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Final

from .dto import Record

LOW_MIN: Final[int] = 3
LOW_MAX: Final[int] = 10


class Parity(StrEnum):
    """Parity of a digit sum."""

    even = "Even"
    odd = "Odd"


class RangeLabel(StrEnum):
    """High/low bucket of a digit sum."""

    low = "Low"
    high = "High"

    @property
    def traditional(self) -> str:
        """Return the Tai/Xiu name for this bucket."""

        return "Xiu" if self is RangeLabel.low else "Tai"


Classifier = Callable[[int], StrEnum]


def classify_parity(total: int) -> Parity:
    """Return `Parity.even` when `total` is divisible by 2."""

    return Parity.even if total % 2 == 0 else Parity.odd


def classify_range(total: int) -> RangeLabel:
    """Return `RangeLabel.low` for sums in [3, 10], otherwise `RangeLabel.high`."""

    return RangeLabel.low if LOW_MIN <= total <= LOW_MAX else RangeLabel.high


def record_total(record: Record) -> int:
    """Return the digit sum of a record."""

    return sum(record.numbers)


CLASSIFIERS: Final[dict[str, Classifier]] = {
    "range": classify_range,
    "parity": classify_parity,
}


def get_classifier(key: str) -> Classifier:
    """Return a classifier function by key.

    Args:
        key: Either "range" or "parity".

    Returns:
        The classifier callable.

    Raises:
        KeyError: When the key is unknown.
    """

    try:
        return CLASSIFIERS[key]
    except KeyError as exc:
        raise KeyError(f"Unknown classifier: {key!r}") from exc
