"""Service-layer functions for the tracker app.

Services coordinate the process-memory record store with the pure validation
and analysis modules. Validation errors are raised as `RecordValidationError`
subclasses and never leave the store partially updated.
"""

from __future__ import annotations

from collections.abc import Sequence

from loguru import logger

from analysis.dto import Record, TrackerAnalysis
from analysis.engine import AnalysisConfig, analyze_records
from analysis.validation import RecordValidationError, parse_digits, parse_edit_value
from tracker.store import DEFAULT_KEEP, RecordStore, get_store


def submit(raw: str | Sequence[int], *, store: RecordStore | None = None) -> Record:
    """Validate a roll and prepend it to the store.

    Args:
        raw: Free text such as `"123"` or a sequence of three ints.
        store: Optional store override; defaults to the process-wide store.

    Returns:
        The created Record.

    Raises:
        DigitCountError: When the input does not hold exactly three digits.
        DigitRangeError: When any digit falls outside [1, 6].
    """

    store = get_store() if store is None else store
    try:
        numbers = parse_digits(raw)
    except RecordValidationError as exc:
        logger.warning(f"Rejected submission {raw!r}: {exc}")
        raise
    record = store.prepend(numbers)
    logger.info(f"Recorded roll {record.numbers} as record {record.id}")
    return record


def edit_digit(
    record_id: int,
    column_index: int,
    new_value: object,
    *,
    store: RecordStore | None = None,
) -> bool:
    """Replace one digit of an existing record.

    Args:
        record_id: Identifier of the record to edit.
        column_index: Column position in [0, 2].
        new_value: Replacement digit; ints and integer strings are accepted.
        store: Optional store override; defaults to the process-wide store.

    Returns:
        True when a record was updated; False when the record id or column
        index is unknown.

    Raises:
        DigitRangeError: When the value is not an integer in [1, 6].
    """

    store = get_store() if store is None else store
    try:
        value = parse_edit_value(new_value)
    except RecordValidationError as exc:
        logger.warning(f"Rejected edit of record {record_id} column {column_index}: {exc}")
        raise

    updated = store.replace_digit(record_id, column_index, value)
    if updated is None:
        logger.debug(f"Ignored edit for unknown record {record_id} column {column_index}")
        return False
    logger.info(f"Edited record {record_id} column {column_index} -> {updated.numbers}")
    return True


def truncate_history(keep: int = DEFAULT_KEEP, *, store: RecordStore | None = None) -> int:
    """Keep only the `keep` newest records.

    Returns:
        Number of records removed.
    """

    store = get_store() if store is None else store
    removed = store.truncate(keep)
    logger.info(f"Truncated history to {keep} records ({removed} removed)")
    return removed


def reset_history(*, store: RecordStore | None = None) -> int:
    """Remove every record from the store.

    Returns:
        Number of records removed.
    """

    store = get_store() if store is None else store
    removed = store.clear()
    logger.info(f"Reset history ({removed} removed)")
    return removed


def current_analysis(*, store: RecordStore | None = None, config: AnalysisConfig | None = None) -> TrackerAnalysis:
    """Analyze a consistent snapshot of the store."""

    store = get_store() if store is None else store
    return analyze_records(store.snapshot(), config)
