"""Process-memory record store.

Records live only for the lifetime of the process. The store keeps them
newest first and serializes every mutation and snapshot read behind a single
lock, so derivations always see a consistent tuple.
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import replace
from datetime import datetime
from typing import Final

from django.utils import timezone

from analysis.dto import COLUMN_COUNT, Record
from analysis.validation import EDIT_RANGE_MESSAGE, DigitRangeError, is_valid_digit, parse_digits

DEFAULT_KEEP: Final[int] = 20


class RecordStore:
    """Ordered, newest-first collection of records with unique ids."""

    def __init__(self) -> None:
        self._records: list[Record] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def snapshot(self) -> tuple[Record, ...]:
        """Return an immutable copy of the records, newest first."""

        with self._lock:
            return tuple(self._records)

    def prepend(self, numbers: tuple[int, int, int], *, created_at: datetime | None = None) -> Record:
        """Validate a triple and insert it as the newest record.

        Args:
            numbers: Three digits in [1, 6].
            created_at: Optional creation timestamp; defaults to now.

        Returns:
            The newly created Record.

        Raises:
            RecordValidationError: When the triple is malformed. The store is
                left unchanged.
        """

        validated = parse_digits(numbers)
        with self._lock:
            record = Record(
                id=next(self._ids),
                numbers=validated,
                created_at=created_at or timezone.now(),
            )
            self._records.insert(0, record)
        return record

    def replace_digit(self, record_id: int, column_index: int, value: int) -> Record | None:
        """Replace one digit of one record in place.

        Args:
            record_id: Identifier of the record to edit.
            column_index: Column position in [0, 2].
            value: Replacement digit in [1, 6].

        Returns:
            The updated Record, or None when the record id or column index is
            unknown (no-op).

        Raises:
            DigitRangeError: When `value` is outside [1, 6]. The store is left
                unchanged.
        """

        if not is_valid_digit(value):
            raise DigitRangeError(EDIT_RANGE_MESSAGE, value=value)
        if not 0 <= column_index < COLUMN_COUNT:
            return None

        with self._lock:
            for idx, record in enumerate(self._records):
                if record.id != record_id:
                    continue
                numbers = list(record.numbers)
                numbers[column_index] = value
                updated = replace(record, numbers=(numbers[0], numbers[1], numbers[2]))
                self._records[idx] = updated
                return updated
        return None

    def truncate(self, keep: int = DEFAULT_KEEP) -> int:
        """Drop everything but the `keep` newest records.

        Returns:
            Number of records removed.
        """

        keep = max(keep, 0)
        with self._lock:
            removed = max(len(self._records) - keep, 0)
            del self._records[keep:]
        return removed

    def clear(self) -> int:
        """Remove every record. Ids keep increasing afterwards.

        Returns:
            Number of records removed.
        """

        with self._lock:
            removed = len(self._records)
            self._records.clear()
        return removed


_default_store = RecordStore()


def get_store() -> RecordStore:
    """Return the process-wide record store."""

    return _default_store
