"""Streak computations over newest-first record sequences.

A streak is the number of contiguous records, scanning toward older records,
that share one classification label.
"""

from __future__ import annotations

from collections.abc import Sequence

from .classify import Classifier, classify_parity, classify_range, record_total
from .dto import Record, RowAnnotation, StreakResult

NO_STREAK_LABEL = "None"


def current_streak(records: Sequence[Record], classify: Classifier) -> StreakResult:
    """Return the label and length of the run starting at the newest record.

    Args:
        records: Records ordered newest first.
        classify: Function mapping a digit sum to a label.

    Returns:
        StreakResult for the leading run, or `StreakResult("None", 0)` when
        `records` is empty.
    """

    if not records:
        return StreakResult(label=NO_STREAK_LABEL, count=0)
    label = classify(record_total(records[0]))
    return StreakResult(label=str(label), count=trailing_streak_from(records, 0, classify))


def trailing_streak_from(records: Sequence[Record], index: int, classify: Classifier) -> int:
    """Count records from `index` toward older records sharing its label.

    Args:
        records: Records ordered newest first.
        index: Anchor position; the anchor itself is counted.
        classify: Function mapping a digit sum to a label.

    Returns:
        Run length including the anchor, or 0 when `index` is out of range.
    """

    if index < 0 or index >= len(records):
        return 0

    label = classify(record_total(records[index]))
    count = 1
    for record in records[index + 1 :]:
        if classify(record_total(record)) != label:
            break
        count += 1
    return count


def trailing_streaks(
    records: Sequence[Record],
    classify: Classifier,
    *,
    limit: int | None = None,
) -> tuple[int, ...]:
    """Compute every record's trailing streak in a single pass.

    Element `i` equals `trailing_streak_from(records, i, classify)`. The scan
    walks from the oldest record toward the newest so each run length is
    derived from its older neighbour.

    Args:
        records: Records ordered newest first.
        classify: Function mapping a digit sum to a label.
        limit: Optional cap on how many leading records are considered.

    Returns:
        A tuple aligned with the (possibly capped) records.
    """

    window = records if limit is None else records[: max(limit, 0)]
    labels = [classify(record_total(record)) for record in window]

    lengths = [0] * len(labels)
    for idx in range(len(labels) - 1, -1, -1):
        if idx + 1 < len(labels) and labels[idx + 1] == labels[idx]:
            lengths[idx] = lengths[idx + 1] + 1
        else:
            lengths[idx] = 1
    return tuple(lengths)


def annotate_rows(records: Sequence[Record], *, limit: int | None = None) -> tuple[RowAnnotation, ...]:
    """Annotate each record with its labels and trailing streak lengths.

    Args:
        records: Records ordered newest first.
        limit: Optional cap on how many leading records are annotated.

    Returns:
        One RowAnnotation per annotated record, newest first.
    """

    window = records if limit is None else records[: max(limit, 0)]
    range_runs = trailing_streaks(window, classify_range)
    parity_runs = trailing_streaks(window, classify_parity)

    rows: list[RowAnnotation] = []
    for record, range_run, parity_run in zip(window, range_runs, parity_runs):
        total = record_total(record)
        rows.append(
            RowAnnotation(
                record=record,
                total=total,
                range_label=str(classify_range(total)),
                range_streak=range_run,
                parity_label=str(classify_parity(total)),
                parity_streak=parity_run,
            )
        )
    return tuple(rows)
