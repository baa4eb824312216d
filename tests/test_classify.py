"""Golden tests for sum classification."""

from __future__ import annotations

import pytest

from analysis.classify import Parity, RangeLabel, classify_parity, classify_range, get_classifier, record_total

pytestmark = [pytest.mark.unit, pytest.mark.golden]


@pytest.mark.parametrize("total", range(3, 19))
def test_classify_range_splits_at_ten(total: int) -> None:
    """Sums 3-10 are Low and 11-18 are High, with no symmetric midpoint."""

    expected = RangeLabel.low if 3 <= total <= 10 else RangeLabel.high
    assert classify_range(total) is expected


@pytest.mark.parametrize("total", range(3, 19))
def test_classify_parity_follows_modulo_two(total: int) -> None:
    """Even iff the sum is divisible by 2."""

    expected = Parity.even if total % 2 == 0 else Parity.odd
    assert classify_parity(total) is expected


def test_one_two_three_is_low_and_even(make_records) -> None:
    """A 1-2-3 roll sums to 6: Low and Even."""

    (record,) = make_records([1, 2, 3])
    total = record_total(record)

    assert total == 6
    assert classify_range(total) == "Low"
    assert classify_parity(total) == "Even"


def test_range_label_exposes_traditional_names() -> None:
    """Low maps to Xiu and High maps to Tai."""

    assert RangeLabel.low.traditional == "Xiu"
    assert RangeLabel.high.traditional == "Tai"


def test_get_classifier_resolves_keys_and_rejects_unknown() -> None:
    """Classifiers are addressable by key."""

    assert get_classifier("range") is classify_range
    assert get_classifier("parity") is classify_parity
    with pytest.raises(KeyError):
        get_classifier("colour")
