"""Golden tests for records-since-last-appearance."""

from __future__ import annotations

import pytest

from analysis.recency import recency_table, records_since_last_appearance

pytestmark = [pytest.mark.unit, pytest.mark.golden]


def test_empty_records_return_zero() -> None:
    """An empty history reports 0 for every value."""

    assert records_since_last_appearance((), 3) == 0
    assert all(entry.records_since == 0 for entry in recency_table(()))


def test_recency_returns_index_of_newest_appearance(make_records) -> None:
    """The count is the index of the newest record containing the value."""

    records = make_records([1, 2, 3], [4, 4, 4], [5, 1, 1])

    assert records_since_last_appearance(records, 1) == 0
    assert records_since_last_appearance(records, 4) == 1
    assert records_since_last_appearance(records, 5) == 2


def test_never_seen_value_reports_total_record_count(make_records) -> None:
    """A value absent from every record reports the store length."""

    records = make_records([1, 2, 3], [4, 4, 4], [5, 1, 1])

    assert records_since_last_appearance(records, 6) == len(records)


def test_recency_table_covers_digits_one_through_six(make_records) -> None:
    """The table has one entry per digit in ascending order."""

    table = recency_table(make_records([1, 2, 3], [4, 4, 4], [5, 1, 1]))

    assert [entry.value for entry in table] == [1, 2, 3, 4, 5, 6]
    assert [entry.records_since for entry in table] == [0, 0, 0, 1, 2, 3]
