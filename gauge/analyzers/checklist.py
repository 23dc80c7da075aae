"""
Strength Checklist
==================

Turns an :class:`~gauge.core.models.AnalysisResult` into the fixed,
ordered list of pass/fail checks displayed beside the strength meter.
"""

from __future__ import annotations

from gauge.analyzers.strength import RECOMMENDED_LENGTH
from gauge.core.models import AnalysisResult, CheckStatus, ChecklistItem


def build_checklist(result: AnalysisResult) -> tuple[ChecklistItem, ...]:
    """Build the eight checklist items for *result*, in display order.

    Failing hazard checks (repetition, sequences, common password) are
    marked ``BAD``; other failing checks are ``WARN``.
    """
    checks = (
        (
            "length",
            result.length >= RECOMMENDED_LENGTH,
            f"Length: {result.length} characters "
            f"(recommended {RECOMMENDED_LENGTH}+)",
            False,
        ),
        ("lowercase", result.has_lower, "Contains lowercase letters", False),
        ("uppercase", result.has_upper, "Contains uppercase letters", False),
        ("digits", result.has_digit, "Contains digits", False),
        ("symbols", result.has_symbol, "Contains special characters", False),
        (
            "repeats",
            result.repeats == 0,
            "No obvious repeated sequences",
            True,
        ),
        (
            "sequences",
            result.seqs == 0,
            "No obvious sequential characters",
            True,
        ),
        (
            "common",
            not result.is_common,
            "Not an extremely common password",
            True,
        ),
    )

    items: list[ChecklistItem] = []
    for key, ok, text, hazard in checks:
        if ok:
            status = CheckStatus.OK
        elif hazard:
            status = CheckStatus.BAD
        else:
            status = CheckStatus.WARN
        items.append(ChecklistItem(key=key, text=text, ok=ok, status=status))
    return tuple(items)
