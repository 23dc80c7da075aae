"""
Gauge Analyzers
===============

Pure scoring functions: the strength analyzer, its three pattern
detectors, and the checklist builder.
"""

from gauge.analyzers.checklist import build_checklist
from gauge.analyzers.patterns import (
    count_keyboard_sequences,
    count_repeats,
    count_sequential_runs,
)
from gauge.analyzers.strength import analyze, score_for

__all__ = [
    "analyze",
    "build_checklist",
    "count_keyboard_sequences",
    "count_repeats",
    "count_sequential_runs",
    "score_for",
]
