"""Pure analysis package for the Tai Xiu tracker.

This package contains deterministic, testable computations that operate on
in-memory, newest-first record sequences and return DTOs. It must not import
Django or hold state of its own.
"""

from .engine import AnalysisConfig, analyze_records

__all__ = ["AnalysisConfig", "analyze_records"]
