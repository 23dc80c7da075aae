"""
Gauge Core Module
=================

Data models and exceptions for PassGauge. The engine facade lives in
:mod:`gauge.core.engine` and is imported from there directly.
"""

from gauge.core.errors import (
    GaugeError,
    InvalidLengthError,
    RandomnessUnavailableError,
)
from gauge.core.models import (
    AnalysisResult,
    CheckStatus,
    ChecklistItem,
    GeneratorPolicy,
    StrengthScore,
)

__all__ = [
    "AnalysisResult",
    "CheckStatus",
    "ChecklistItem",
    "GaugeError",
    "GeneratorPolicy",
    "InvalidLengthError",
    "RandomnessUnavailableError",
    "StrengthScore",
]
