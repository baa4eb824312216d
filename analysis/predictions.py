"""Per-column successor predictions and frequency histograms.

Both predictors anchor on the newest record and scan the remaining history for
rows where a column repeats the newest record's value. They differ in which
neighbour of each match counts as the "next" value:

- `next_number_prediction` takes the neighbour one step newer (index - 1).
- `prediction_analysis` takes the neighbour one step older (index + 1).

The two answer different questions and are kept as separate operations.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from .dto import (
    COLUMN_COUNT,
    DIGIT_MAX,
    DIGIT_MIN,
    ColumnTable,
    PredictionResult,
    Record,
    ValueCount,
)

DEFAULT_HISTOGRAM_LIMIT: Final[int] = 20

_EMPTY_COLUMNS: Final[tuple[ColumnTable, ...]] = tuple(() for _ in range(COLUMN_COUNT))


def rank_counts(values: Iterable[int]) -> ColumnTable:
    """Tally digit values and rank them by descending count.

    Counts are accumulated in a fixed-size array indexed by digit. Ties are
    ordered by ascending digit value.

    Args:
        values: Observed digit values in [1, 6].

    Returns:
        A tuple of ValueCount entries, one per distinct observed value.
    """

    counts = [0] * (DIGIT_MAX + 1)
    for value in values:
        counts[value] += 1

    observed = [
        ValueCount(value=value, count=counts[value])
        for value in range(DIGIT_MIN, DIGIT_MAX + 1)
        if counts[value] > 0
    ]
    observed.sort(key=lambda item: item.count, reverse=True)
    return tuple(observed)


def next_number_prediction(records: Sequence[Record], *, window: int | None = None) -> PredictionResult:
    """Predict each column's next value from the newer neighbour of past matches.

    Args:
        records: Records ordered newest first.
        window: Optional cap on how many history records (after the newest)
            are scanned. None scans the full history.

    Returns:
        PredictionResult anchored on the newest record. Fewer than two records
        yield empty column tables.
    """

    if len(records) < 2:
        return PredictionResult(latest=records[0] if records else None, columns=_EMPTY_COLUMNS)

    latest = records[0]
    history = records[1:] if window is None else records[1 : 1 + max(window, 0)]

    columns: list[ColumnTable] = []
    for col in range(COLUMN_COUNT):
        current = latest.numbers[col]
        successors = [
            history[idx - 1].numbers[col]
            for idx, record in enumerate(history)
            if record.numbers[col] == current and idx - 1 >= 0
        ]
        columns.append(rank_counts(successors))
    return PredictionResult(latest=latest, columns=tuple(columns))


def prediction_analysis(records: Sequence[Record]) -> PredictionResult:
    """Predict each column's next value from the older neighbour of past matches.

    Args:
        records: Records ordered newest first.

    Returns:
        PredictionResult anchored on the newest record. Fewer than two records
        yield empty column tables. History is never capped.
    """

    if len(records) < 2:
        return PredictionResult(latest=records[0] if records else None, columns=_EMPTY_COLUMNS)

    latest = records[0]
    history = records[1:]

    columns: list[ColumnTable] = []
    for col in range(COLUMN_COUNT):
        current = latest.numbers[col]
        successors = [
            history[idx + 1].numbers[col]
            for idx, record in enumerate(history)
            if record.numbers[col] == current and idx + 1 < len(history)
        ]
        columns.append(rank_counts(successors))
    return PredictionResult(latest=latest, columns=tuple(columns))


def history_analysis(
    records: Sequence[Record],
    *,
    limit: int = DEFAULT_HISTOGRAM_LIMIT,
) -> tuple[ColumnTable, ...]:
    """Count how often each value appears per column in recent records.

    Args:
        records: Records ordered newest first.
        limit: Number of newest records to include.

    Returns:
        One ranked frequency table per column.
    """

    recent = records[: max(limit, 0)]
    return tuple(rank_counts(record.numbers[col] for record in recent) for col in range(COLUMN_COUNT))


def pad_columns(columns: Sequence[ColumnTable]) -> tuple[tuple[ValueCount | None, ...], ...]:
    """Pad ragged column tables into row-major rows for tabulation.

    Args:
        columns: Column tables of possibly different lengths.

    Returns:
        Rows of length `len(columns)`; missing cells are None. At least one row
        is returned so empty predictions still render a placeholder.
    """

    height = max([len(column) for column in columns] + [1])
    return tuple(
        tuple(column[row] if row < len(column) else None for column in columns)
        for row in range(height)
    )
