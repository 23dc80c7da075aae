"""
Gauge Core Data Models
======================

Pydantic models for the PassGauge analyzer and generator. Analysis
results are immutable values: every call to
:func:`gauge.analyzers.strength.analyze` builds a fresh
:class:`AnalysisResult`, and assigning to a field raises a validation
error.

All models are serialisable to JSON and are consumed by both the console
output layer and the JSON report writer.
"""

from __future__ import annotations

import enum
import string

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class StrengthScore(int, enum.Enum):
    """Discrete strength class derived from adjusted entropy (bits).

    Thresholds are half-open with an inclusive lower bound:

    ==========  ==============
    Score       Adjusted bits
    ==========  ==============
    VERY_WEAK   [0, 28)
    WEAK        [28, 36)
    FAIR        [36, 60)
    GOOD        [60, 80)
    VERY_GOOD   [80, 120)
    EXCELLENT   [120, inf)
    ==========  ==============
    """

    VERY_WEAK = 0
    WEAK = 1
    FAIR = 2
    GOOD = 3
    VERY_GOOD = 4
    EXCELLENT = 5

    @property
    def label(self) -> str:
        """Display label, e.g. ``"Very Good"``."""
        return self.name.replace("_", " ").title()

    @property
    def colour(self) -> str:
        """Rich colour used for the meter bar."""
        return _SCORE_COLOURS[self]


_SCORE_COLOURS: dict[StrengthScore, str] = {
    StrengthScore.VERY_WEAK: "red",
    StrengthScore.WEAK: "red",
    StrengthScore.FAIR: "yellow",
    StrengthScore.GOOD: "green",
    StrengthScore.VERY_GOOD: "bright_green",
    StrengthScore.EXCELLENT: "bright_green",
}


class CheckStatus(str, enum.Enum):
    """Outcome of a single checklist item."""

    OK = "ok"
    WARN = "warn"
    BAD = "bad"


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class AnalysisResult(BaseModel):
    """Complete heuristic strength analysis of one password.

    Attributes:
        length: Number of characters (code points).
        has_lower: At least one ASCII lowercase letter.
        has_upper: At least one ASCII uppercase letter.
        has_digit: At least one ASCII digit.
        has_symbol: At least one character outside ``[A-Za-z0-9]``.
        pool: Estimated alphabet size (26/26/10/32 per class present).
        entropy: ``length * log2(pool)`` in bits.
        repeats: Repeated runs plus repeated adjacent substrings.
        seqs: Monotonic +1/-1 code point runs of length 3 or more.
        keyboard_seqs: Keyboard patterns found in the case-folded input.
        penalty: Weighted detector penalty in bits.
        adjusted_entropy: ``max(0, entropy - penalty)``.
        score: Strength class 0..5.
        is_common: Case-folded password is in the common-password set.
        suggestions: Ordered improvement hints, common warning first.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(default=0, ge=0)
    has_lower: bool = False
    has_upper: bool = False
    has_digit: bool = False
    has_symbol: bool = False
    pool: int = Field(default=0, ge=0)
    entropy: float = Field(default=0.0, ge=0.0)
    repeats: int = Field(default=0, ge=0)
    seqs: int = Field(default=0, ge=0)
    keyboard_seqs: int = Field(default=0, ge=0)
    penalty: float = Field(default=0.0, ge=0.0)
    adjusted_entropy: float = Field(default=0.0, ge=0.0)
    score: int = Field(default=0, ge=0, le=5)
    is_common: bool = False
    suggestions: tuple[str, ...] = ()

    @property
    def strength(self) -> StrengthScore:
        """The score as a :class:`StrengthScore` member."""
        return StrengthScore(self.score)

    @property
    def label(self) -> str:
        """Display label for the score."""
        return self.strength.label


class ChecklistItem(BaseModel):
    """One line of the strength checklist shown beside the meter.

    Attributes:
        key: Stable identifier (``"length"``, ``"lowercase"`` ...).
        text: Human-readable description.
        ok: Whether the check passed.
        status: ``OK`` when passed; otherwise ``BAD`` for hazards
            (repetition, sequences, common password) or ``WARN``.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    text: str
    ok: bool
    status: CheckStatus


# ===================================================================== #
#  Generator Models
# ===================================================================== #

# Symbol alphabet used by the generator. Distinct from the scoring
# "symbol" class, which is any character outside [A-Za-z0-9].
GENERATOR_SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>?"


class GeneratorPolicy(BaseModel):
    """Character classes a generated password must cover.

    Every alphabet contributes at least one character; the remaining
    positions are drawn from the union of all alphabets.

    Attributes:
        alphabets: Non-empty class alphabets, in placement order.
    """

    model_config = ConfigDict(frozen=True)

    alphabets: tuple[str, ...] = (
        string.ascii_lowercase,
        string.ascii_uppercase,
        string.digits,
        GENERATOR_SYMBOLS,
    )

    @field_validator("alphabets")
    @classmethod
    def _require_non_empty(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v:
            raise ValueError("at least one character class is required")
        if any(not alphabet for alphabet in v):
            raise ValueError("character class alphabets must not be empty")
        return v

    @property
    def min_length(self) -> int:
        """Shortest length that can hold one character per class."""
        return len(self.alphabets)

    @property
    def union(self) -> str:
        """All alphabets concatenated, used for the fill positions."""
        return "".join(self.alphabets)
