"""
PassGauge Shared Data Models
============================

Pydantic v2 models shared by the PassGauge engine, console output and
JSON report layer. A :class:`ScanResult` bundles the findings produced for
one analysed (or generated) password together with timing and metadata.

Finding structure is loosely modelled on SARIF result objects.

References:
    - SARIF v2.1.0 Specification (OASIS, 2020).
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import datetime as _dt
import json as _json
from enum import Enum
from typing import Any, Optional

from pydantic import (
    BaseModel,
    Field,
    ConfigDict,
    field_validator,
)


def _utcnow() -> _dt.datetime:
    return _dt.datetime.now(_dt.timezone.utc)


# ========================== Enumerations ===================================


class Severity(str, Enum):
    """Finding severity level.

    Attributes:
        CRITICAL: Password is trivially guessable.
        HIGH:     Password falls to a modest offline attack.
        MEDIUM:   Usable, but noticeably below recommended strength.
        LOW:      Minor weakness.
        INFO:     Informational observation; no direct risk.
    """

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"
    INFO = "INFO"


# ========================== Core Models ====================================


class Finding(BaseModel):
    """A single observation produced while assessing a password.

    Attributes:
        severity:       Qualitative severity rating.
        title:          Short, descriptive finding title.
        description:    Detailed explanation of the finding.
        evidence:       Raw data supporting the finding (never the password).
        recommendation: Suggested remediation action.
        references:     External reference URLs or citations.
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
    )

    severity: Severity = Field(
        ...,
        description="Severity level of this finding",
    )
    title: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Short descriptive title",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Detailed explanation",
    )
    evidence: str = Field(
        default="",
        description="Supporting evidence or raw data",
    )
    recommendation: str = Field(
        default="",
        description="Suggested remediation",
    )
    references: list[str] = Field(
        default_factory=list,
        description="Technical references",
    )

    @field_validator("evidence", mode="before")
    @classmethod
    def _coerce_evidence(cls, v: Any) -> str:
        """Auto-convert non-string evidence (dict, list) to JSON string."""
        if isinstance(v, str):
            return v
        if isinstance(v, (dict, list)):
            return _json.dumps(v, ensure_ascii=False, default=str)
        return str(v)


class ScanResult(BaseModel):
    """Aggregated result of a single analysis run.

    Attributes:
        tool_name:  Name of the tool that produced the result.
        target:     What was analysed. Passwords are never stored here.
        start_time: UTC timestamp when the run started.
        end_time:   UTC timestamp when the run ended.
        findings:   Individual findings.
        summary:    Human-readable summary text.
        metadata:   Structured payload (analysis values, checklist).
    """

    model_config = ConfigDict(
        validate_assignment=True,
        use_enum_values=False,
        extra="ignore",
    )

    tool_name: str = Field(
        ...,
        min_length=1,
        description="Tool name",
    )
    target: str = Field(
        ...,
        min_length=1,
        description="Analysis target",
    )
    start_time: _dt.datetime = Field(
        default_factory=_utcnow,
        description="Run start timestamp (UTC)",
    )
    end_time: Optional[_dt.datetime] = Field(
        default=None,
        description="Run end timestamp (UTC)",
    )
    findings: list[Finding] = Field(
        default_factory=list,
        description="List of findings",
    )
    summary: str = Field(
        default="",
        description="Human-readable result summary",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional metadata",
    )

    # ------------------------------------------------------------------ #
    #  Derived properties
    # ------------------------------------------------------------------ #

    @property
    def duration_seconds(self) -> float | None:
        """Elapsed time in seconds, or ``None`` if *end_time* is unset."""
        if self.end_time is None or self.start_time is None:
            return None
        return (self.end_time - self.start_time).total_seconds()

    @property
    def severity_counts(self) -> dict[str, int]:
        """Count of findings grouped by severity.

        Returns:
            Dict mapping severity name to occurrence count, e.g.
            ``{"CRITICAL": 1, "HIGH": 0, "MEDIUM": 0, ...}``.
        """
        counts: dict[str, int] = {s.value: 0 for s in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts

    @property
    def highest_severity(self) -> Severity | None:
        """The most severe finding, or ``None`` when the list is empty."""
        if not self.findings:
            return None
        order = list(Severity)
        return min(
            (f.severity for f in self.findings),
            key=lambda s: order.index(s),
        )

    @property
    def finding_count(self) -> int:
        """Total number of findings."""
        return len(self.findings)

    # ------------------------------------------------------------------ #
    #  Mutating helpers
    # ------------------------------------------------------------------ #

    def add_finding(self, finding: Finding) -> None:
        """Append a finding to the result."""
        self.findings.append(finding)

    def finalize(self, summary: str) -> ScanResult:
        """Set *end_time* and *summary*; returns ``self``."""
        self.end_time = _utcnow()
        self.summary = summary
        return self
