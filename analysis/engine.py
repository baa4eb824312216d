"""Orchestration entry point for the Analysis Engine.

The Analysis Engine is a pure, non-Django module that accepts an in-memory,
newest-first record sequence and returns DTOs. It must not import Django or
mutate its inputs.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .classify import classify_parity, classify_range
from .dto import Record, TrackerAnalysis
from .predictions import DEFAULT_HISTOGRAM_LIMIT, history_analysis, next_number_prediction, prediction_analysis
from .recency import recency_table
from .streaks import annotate_rows, current_streak

DEFAULT_BACKWARD_WINDOW = 25


@dataclass(frozen=True, slots=True)
class AnalysisConfig:
    """Tunable windows for one analysis pass.

    Attributes:
        backward_window: History records scanned by the backward predictor
            (None scans everything).
        annotation_limit: Optional cap on how many newest records receive row
            annotations.
        histogram_limit: Newest records included in the frequency histogram.
    """

    backward_window: int | None = DEFAULT_BACKWARD_WINDOW
    annotation_limit: int | None = None
    histogram_limit: int = DEFAULT_HISTOGRAM_LIMIT


def analyze_records(records: Sequence[Record], config: AnalysisConfig | None = None) -> TrackerAnalysis:
    """Derive every dashboard statistic from a newest-first record sequence.

    Args:
        records: Records ordered newest first.
        config: Optional window configuration; defaults to `AnalysisConfig()`.

    Returns:
        TrackerAnalysis bundling streaks, recency, row annotations, both
        predictors and the frequency histogram.
    """

    config = config or AnalysisConfig()
    snapshot = tuple(records)

    return TrackerAnalysis(
        record_count=len(snapshot),
        latest=snapshot[0] if snapshot else None,
        range_streak=current_streak(snapshot, classify_range),
        parity_streak=current_streak(snapshot, classify_parity),
        recency=recency_table(snapshot),
        rows=annotate_rows(snapshot, limit=config.annotation_limit),
        backward_prediction=next_number_prediction(snapshot, window=config.backward_window),
        forward_prediction=prediction_analysis(snapshot),
        histogram=history_analysis(snapshot, limit=config.histogram_limit),
    )
