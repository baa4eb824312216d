"""DTO types used and returned by the Analysis Engine.

DTOs are plain data containers used to transport analysis results to the UI.
They intentionally avoid any Django dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

COLUMN_COUNT = 3
DIGIT_MIN = 1
DIGIT_MAX = 6


@dataclass(frozen=True, slots=True)
class Record:
    """A single submitted roll of three dice.

    Attributes:
        id: Unique identifier assigned by the record store.
        numbers: The three digits, each in [1, 6], in column order.
        created_at: Creation timestamp (informational only).
    """

    id: int
    numbers: tuple[int, int, int]
    created_at: datetime

    @property
    def total(self) -> int:
        """Return the sum of the three digits."""

        return sum(self.numbers)

    def as_json(self) -> dict[str, Any]:
        """Return a JSON-serializable representation."""

        return {
            "id": self.id,
            "numbers": list(self.numbers),
            "total": self.total,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class StreakResult:
    """The current leading run of same-labeled records.

    Attributes:
        label: Label shared by the run, or "None" when there are no records.
        count: Number of records in the run.
    """

    label: str
    count: int


@dataclass(frozen=True, slots=True)
class RowAnnotation:
    """Per-record labels and trailing streak lengths for the history table."""

    record: Record
    total: int
    range_label: str
    range_streak: int
    parity_label: str
    parity_streak: int


@dataclass(frozen=True, slots=True)
class RecencyEntry:
    """Records elapsed since a digit value last appeared."""

    value: int
    records_since: int


@dataclass(frozen=True, slots=True)
class ValueCount:
    """A digit value and how often it was observed.

    Attributes:
        value: Digit value in [1, 6].
        count: Observation count (>= 1).
    """

    value: int
    count: int

    def as_json(self) -> dict[str, int]:
        """Return a JSON-serializable representation."""

        return {"value": self.value, "count": self.count}


ColumnTable = tuple[ValueCount, ...]


@dataclass(frozen=True, slots=True)
class PredictionResult:
    """Per-column successor tables anchored on the latest record.

    Attributes:
        latest: The most recent record, or None for an empty store.
        columns: One ranked successor table per column.
    """

    latest: Record | None
    columns: tuple[ColumnTable, ...] = ((), (), ())


@dataclass(frozen=True, slots=True)
class TrackerAnalysis:
    """Everything the dashboard derives from one snapshot of the store.

    Attributes:
        record_count: Number of records analyzed.
        latest: The most recent record, if any.
        range_streak: Current leading run by high/low label.
        parity_streak: Current leading run by even/odd label.
        recency: Records since each digit value last appeared.
        rows: Per-record annotations, newest first.
        backward_prediction: Successors looking toward more recent history.
        forward_prediction: Successors looking toward older history.
        histogram: Per-column frequency counts over the recent window.
    """

    record_count: int
    latest: Record | None
    range_streak: StreakResult
    parity_streak: StreakResult
    recency: tuple[RecencyEntry, ...]
    rows: tuple[RowAnnotation, ...]
    backward_prediction: PredictionResult
    forward_prediction: PredictionResult
    histogram: tuple[ColumnTable, ...]

    def as_json(self) -> dict[str, Any]:
        """Return a JSON-serializable representation for API responses."""

        def _columns(columns: tuple[ColumnTable, ...]) -> list[list[dict[str, int]]]:
            return [[item.as_json() for item in column] for column in columns]

        return {
            "record_count": self.record_count,
            "latest": self.latest.as_json() if self.latest is not None else None,
            "streaks": {
                "range": {"label": self.range_streak.label, "count": self.range_streak.count},
                "parity": {"label": self.parity_streak.label, "count": self.parity_streak.count},
            },
            "recency": {str(entry.value): entry.records_since for entry in self.recency},
            "rows": [
                {
                    "record": row.record.as_json(),
                    "range": {"label": row.range_label, "streak": row.range_streak},
                    "parity": {"label": row.parity_label, "streak": row.parity_streak},
                }
                for row in self.rows
            ],
            "backward_prediction": _columns(self.backward_prediction.columns),
            "forward_prediction": _columns(self.forward_prediction.columns),
            "histogram": _columns(self.histogram),
        }
