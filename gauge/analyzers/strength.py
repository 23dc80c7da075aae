"""
Heuristic Password Strength Analyzer
====================================

Estimates password strength from a character-pool entropy model reduced
by pattern penalties, then classifies the result into six strength
classes and produces ordered improvement suggestions.

Entropy model:

    pool     = 26 (lower) + 26 (upper) + 10 (digit) + 32 (symbol),
               counting only the classes present
    entropy  = length * log2(pool)
    penalty  = 1.5 * repeats + 2.0 * seqs + 2.5 * keyboard_seqs
    adjusted = max(0, entropy - penalty)

The pool is an upper-bound estimate of the alphabet rather than the set
of characters actually used; any non-alphanumeric character (including
unicode) adds the same fixed 32.

This is guidance for users choosing a password, not cryptanalysis.
"""

from __future__ import annotations

import bisect
import math
import string

from gauge.analyzers.patterns import (
    count_keyboard_sequences,
    count_repeats,
    count_sequential_runs,
)
from gauge.core.models import AnalysisResult


# ===================================================================== #
#  Scoring Tables
# ===================================================================== #

LOWER_POOL = 26
UPPER_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = 32

REPEAT_WEIGHT = 1.5
SEQUENCE_WEIGHT = 2.0
KEYBOARD_WEIGHT = 2.5

# Lower bounds (bits) of scores 1..5; score 0 covers [0, 28)
SCORE_THRESHOLDS: tuple[float, ...] = (28.0, 36.0, 60.0, 80.0, 120.0)

RECOMMENDED_LENGTH = 12

# Small in-memory set of extremely common passwords. Not exhaustive.
COMMON_PASSWORDS: frozenset[str] = frozenset({
    "123456",
    "password",
    "123456789",
    "12345678",
    "12345",
    "qwerty",
    "abc123",
    "password1",
    "111111",
    "1234",
})

SUGGEST_COMMON = "This password is extremely common. Choose a different one."
SUGGEST_LENGTH = (
    "Use at least 12 characters. Longer passwords are generally stronger."
)
SUGGEST_DIGITS = "Add digits (0-9)."
SUGGEST_UPPER = "Add uppercase letters (A-Z)."
SUGGEST_SYMBOLS = "Include special characters like !@#$%&*()."
SUGGEST_REPEATS = "Avoid repeated characters or repeated sequences."
SUGGEST_SEQUENCES = 'Avoid simple sequential patterns like "abcd" or "1234".'

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)
_ALNUM = _LOWER | _UPPER | _DIGITS


# ===================================================================== #
#  Public API
# ===================================================================== #


def analyze(password: str) -> AnalysisResult:
    """Analyse *password* and return a fresh :class:`AnalysisResult`.

    Total over every string, including the empty string, control
    characters and unicode. No normalisation is applied except the case
    folding used by the common-password and keyboard checks.

    Usage::

        result = analyze("Tr0ub4dor&3")
        print(result.label, f"{result.adjusted_entropy:.1f} bits")
    """
    length = len(password)
    has_lower = any(c in _LOWER for c in password)
    has_upper = any(c in _UPPER for c in password)
    has_digit = any(c in _DIGITS for c in password)
    has_symbol = any(c not in _ALNUM for c in password)

    pool = pool_size(has_lower, has_upper, has_digit, has_symbol)
    entropy = raw_entropy(length, pool)

    repeats = count_repeats(password)
    seqs = count_sequential_runs(password)
    keyboard_seqs = count_keyboard_sequences(password)

    penalty = (
        repeats * REPEAT_WEIGHT
        + seqs * SEQUENCE_WEIGHT
        + keyboard_seqs * KEYBOARD_WEIGHT
    )
    adjusted_entropy = max(0.0, entropy - penalty)
    is_common = password.lower() in COMMON_PASSWORDS

    suggestions: list[str] = []
    if length < RECOMMENDED_LENGTH:
        suggestions.append(SUGGEST_LENGTH)
    if not has_digit:
        suggestions.append(SUGGEST_DIGITS)
    if not has_upper:
        suggestions.append(SUGGEST_UPPER)
    if not has_symbol:
        suggestions.append(SUGGEST_SYMBOLS)
    if repeats > 0:
        suggestions.append(SUGGEST_REPEATS)
    if seqs > 0:
        suggestions.append(SUGGEST_SEQUENCES)
    if is_common:
        suggestions.insert(0, SUGGEST_COMMON)

    return AnalysisResult(
        length=length,
        has_lower=has_lower,
        has_upper=has_upper,
        has_digit=has_digit,
        has_symbol=has_symbol,
        pool=pool,
        entropy=entropy,
        repeats=repeats,
        seqs=seqs,
        keyboard_seqs=keyboard_seqs,
        penalty=penalty,
        adjusted_entropy=adjusted_entropy,
        score=score_for(adjusted_entropy),
        is_common=is_common,
        suggestions=tuple(suggestions),
    )


def pool_size(
    has_lower: bool,
    has_upper: bool,
    has_digit: bool,
    has_symbol: bool,
) -> int:
    """Sum the fixed class sizes of the classes present."""
    pool = 0
    if has_lower:
        pool += LOWER_POOL
    if has_upper:
        pool += UPPER_POOL
    if has_digit:
        pool += DIGIT_POOL
    if has_symbol:
        pool += SYMBOL_POOL
    return pool


def raw_entropy(length: int, pool: int) -> float:
    """Combinatorial entropy ``length * log2(pool)`` in bits.

    Returns 0.0 when either argument is zero, never NaN or -inf.
    """
    if length <= 0 or pool <= 0:
        return 0.0
    return length * math.log2(pool)


def score_for(adjusted_entropy: float) -> int:
    """Map adjusted entropy (bits) to a score in ``0..5``.

    Each threshold is an inclusive lower bound, so 28.0 scores 1 while
    27.9 scores 0.
    """
    return bisect.bisect_right(SCORE_THRESHOLDS, adjusted_entropy)
