"""Pytest fixtures shared across analysis and Django integration tests."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from datetime import datetime, timezone

import pytest

from analysis.dto import Record
from tracker.store import RecordStore, get_store

RecordFactory = Callable[..., tuple[Record, ...]]


@pytest.fixture
def make_records() -> RecordFactory:
    """Return a builder that turns triples (newest first) into Records."""

    created_at = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _build(*triples: Sequence[int]) -> tuple[Record, ...]:
        total = len(triples)
        return tuple(
            Record(id=total - idx, numbers=(triple[0], triple[1], triple[2]), created_at=created_at)
            for idx, triple in enumerate(triples)
        )

    return _build


@pytest.fixture
def store() -> RecordStore:
    """Return a fresh, empty RecordStore isolated from the process-wide one."""

    return RecordStore()


@pytest.fixture
def default_store() -> Iterator[RecordStore]:
    """Return the process-wide store, emptied before and after the test."""

    shared = get_store()
    shared.clear()
    yield shared
    shared.clear()


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no request cycle or subprocess.
    - `integration`: tests touching Django views, settings checks, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
