"""Golden tests for successor predictors and the frequency histogram."""

from __future__ import annotations

import pytest

from analysis.dto import ValueCount
from analysis.predictions import (
    history_analysis,
    next_number_prediction,
    pad_columns,
    prediction_analysis,
    rank_counts,
)

pytestmark = [pytest.mark.unit, pytest.mark.golden]

# Newest first. Column 0 repeats the latest value (3) at history indices 1, 3, 5
# with asymmetric neighbours; column 1 is constant; column 2's latest value (6)
# never reappears.
ASYMMETRIC = (
    [3, 4, 6],
    [5, 4, 1],
    [3, 4, 1],
    [5, 4, 1],
    [3, 4, 1],
    [1, 4, 1],
    [3, 4, 1],
    [2, 4, 1],
)


def _pairs(column: tuple[ValueCount, ...]) -> list[tuple[int, int]]:
    return [(item.value, item.count) for item in column]


def test_predictors_need_two_records(make_records) -> None:
    """Fewer than two records yield empty column tables."""

    for predict in (next_number_prediction, prediction_analysis):
        empty = predict(())
        assert empty.latest is None
        assert empty.columns == ((), (), ())

        single = make_records([1, 2, 3])
        result = predict(single)
        assert result.latest == single[0]
        assert result.columns == ((), (), ())


def test_backward_predictor_tallies_newer_neighbours(make_records) -> None:
    """Each match contributes the value one step closer to the present."""

    records = make_records(*ASYMMETRIC)

    result = next_number_prediction(records)

    assert result.latest == records[0]
    assert _pairs(result.columns[0]) == [(5, 2), (1, 1)]
    assert _pairs(result.columns[1]) == [(4, 6)]
    assert result.columns[2] == ()


def test_forward_predictor_tallies_older_neighbours(make_records) -> None:
    """Each match contributes the value one step further into the past."""

    records = make_records(*ASYMMETRIC)

    result = prediction_analysis(records)

    assert _pairs(result.columns[0]) == [(1, 1), (2, 1), (5, 1)]
    assert _pairs(result.columns[1]) == [(4, 6)]
    assert result.columns[2] == ()


def test_backward_and_forward_predictors_differ_on_asymmetric_history(make_records) -> None:
    """The two directions answer different questions on the same history."""

    records = make_records(*ASYMMETRIC)

    assert next_number_prediction(records).columns[0] != prediction_analysis(records).columns[0]


def test_backward_predictor_window_caps_history(make_records) -> None:
    """Only the newest `window` history records are scanned."""

    records = make_records(*ASYMMETRIC)

    result = next_number_prediction(records, window=3)

    assert _pairs(result.columns[0]) == [(5, 1)]
    assert _pairs(result.columns[1]) == [(4, 2)]
    assert result.columns[2] == ()


def test_rank_counts_orders_ties_by_ascending_value() -> None:
    """Ties are broken deterministically by digit value."""

    ranked = rank_counts([5, 2, 5, 2, 3])

    assert _pairs(ranked) == [(2, 2), (5, 2), (3, 1)]
    assert rank_counts([5, 2, 5, 2, 3]) == rank_counts([3, 2, 2, 5, 5])


def test_history_analysis_counts_each_column(make_records) -> None:
    """Raw per-column frequencies over the recent window."""

    histogram = history_analysis(make_records([1, 2, 3], [1, 5, 3], [2, 5, 3]))

    assert _pairs(histogram[0]) == [(1, 2), (2, 1)]
    assert _pairs(histogram[1]) == [(5, 2), (2, 1)]
    assert _pairs(histogram[2]) == [(3, 3)]


def test_history_analysis_limits_to_newest_twenty(make_records) -> None:
    """Records older than the newest 20 are ignored."""

    records = make_records(*([[1, 2, 3]] * 20 + [[6, 6, 6]] * 5))

    histogram = history_analysis(records)

    assert _pairs(histogram[0]) == [(1, 20)]
    assert _pairs(histogram[1]) == [(2, 20)]
    assert _pairs(histogram[2]) == [(3, 20)]


def test_history_analysis_on_empty_records() -> None:
    """An empty store yields three empty tables."""

    assert history_analysis(()) == ((), (), ())


def test_pad_columns_fills_ragged_columns() -> None:
    """Shorter columns are padded with None up to the tallest column."""

    a, b, c = ValueCount(1, 3), ValueCount(2, 1), ValueCount(6, 2)

    assert pad_columns(((a, b), (c,), ())) == ((a, c, None), (b, None, None))
    assert pad_columns(((), (), ())) == ((None, None, None),)
