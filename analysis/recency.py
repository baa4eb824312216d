"""Recency of digit values across newest-first records."""

from __future__ import annotations

from collections.abc import Sequence

from .dto import DIGIT_MAX, DIGIT_MIN, RecencyEntry, Record


def records_since_last_appearance(records: Sequence[Record], value: int) -> int:
    """Return how many records have passed since `value` last appeared.

    Args:
        records: Records ordered newest first.
        value: Digit value to look for in any column.

    Returns:
        Index of the newest record containing `value`. When no record contains
        it, the total record count is returned (0 for an empty sequence).
    """

    for idx, record in enumerate(records):
        if value in record.numbers:
            return idx
    return len(records)


def recency_table(records: Sequence[Record]) -> tuple[RecencyEntry, ...]:
    """Return recency for every digit value 1-6, in ascending digit order."""

    return tuple(
        RecencyEntry(value=value, records_since=records_since_last_appearance(records, value))
        for value in range(DIGIT_MIN, DIGIT_MAX + 1)
    )
