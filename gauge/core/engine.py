"""
Gauge Analysis Engine
=====================

Central orchestrator for PassGauge. :class:`GaugeEngine` is the adapter
between the pure scoring core (:mod:`gauge.analyzers`,
:mod:`gauge.generators`) and the presentation layer: it wraps results in
:class:`~shared.models.ScanResult` objects, turns them into findings,
and logs every operation without ever recording password text.

Architecture follows the Facade pattern (Gamma et al., 1994).
"""

from __future__ import annotations

from typing import Optional

from shared.config import GaugeConfig
from shared.logger import GaugeLogger
from shared.models import Finding, ScanResult, Severity

from gauge.analyzers.checklist import build_checklist
from gauge.analyzers.strength import (
    KEYBOARD_WEIGHT,
    REPEAT_WEIGHT,
    SEQUENCE_WEIGHT,
    analyze,
)
from gauge.core.errors import GaugeError
from gauge.core.models import (
    AnalysisResult,
    ChecklistItem,
    GeneratorPolicy,
    StrengthScore,
)
from gauge.generators.password import generate


_SCORE_SEVERITY: dict[StrengthScore, Severity] = {
    StrengthScore.VERY_WEAK: Severity.CRITICAL,
    StrengthScore.WEAK: Severity.HIGH,
    StrengthScore.FAIR: Severity.MEDIUM,
    StrengthScore.GOOD: Severity.LOW,
    StrengthScore.VERY_GOOD: Severity.INFO,
    StrengthScore.EXCELLENT: Severity.INFO,
}


class GaugeEngine:
    """Orchestrates password analysis and generation.

    Usage::

        engine = GaugeEngine()
        result = engine.analyze_password("P@ssw0rd!")
        password, analysis = engine.generate_password(20)

    Attributes:
        config: PassGauge configuration instance.
        logger: Logger for the engine.
    """

    def __init__(self, config: Optional[GaugeConfig] = None) -> None:
        self.config = config or GaugeConfig()
        settings = self.config.global_settings
        self.logger = GaugeLogger(
            "gauge.engine",
            log_level="DEBUG" if settings.debug else settings.log_level,
            log_file=settings.log_file,
            json_logs=settings.log_json,
        )

    # ------------------------------------------------------------------ #
    #  Password Analysis
    # ------------------------------------------------------------------ #

    def analyze_password(self, password: str) -> ScanResult:
        """Analyse the strength of a password.

        The analysis values and checklist are stored in
        ``metadata["analysis"]`` and ``metadata["checklist"]``.

        Args:
            password: The password to analyse.

        Returns:
            ScanResult containing strength, pattern and suggestion findings.
        """
        result, _, _ = self.evaluate(password)
        return result

    def evaluate(
        self, password: str
    ) -> tuple[ScanResult, AnalysisResult, tuple[ChecklistItem, ...]]:
        """Analyse *password* and return the findings with the typed values.

        Used by the console view, which renders the meter and checklist
        from the models and the findings table from the ScanResult.
        """
        result = ScanResult(tool_name="gauge", target="[password]")

        with self.logger.operation("analyze"), self.logger.timed("password analysis"):
            analysis = analyze(password)
            checklist = build_checklist(analysis)

            self.logger.info(
                "Analysed password: length=%d score=%d adjusted=%.2f bits",
                analysis.length,
                analysis.score,
                analysis.adjusted_entropy,
            )

        result.metadata = {
            "analysis": analysis.model_dump(mode="json"),
            "checklist": [item.model_dump(mode="json") for item in checklist],
        }
        for finding in self._findings(analysis):
            result.add_finding(finding)

        result.finalize(
            f"Password analysis: {analysis.label}, "
            f"adjusted entropy={analysis.adjusted_entropy:.1f} bits, "
            f"score={analysis.score}/5"
        )
        return result, analysis, checklist

    def checklist(self, password: str) -> tuple[AnalysisResult, tuple[ChecklistItem, ...]]:
        """Return the analysis of *password* together with its checklist."""
        analysis = analyze(password)
        return analysis, build_checklist(analysis)

    # ------------------------------------------------------------------ #
    #  Password Generation
    # ------------------------------------------------------------------ #

    def generate_password(
        self,
        length: Optional[int] = None,
        policy: Optional[GeneratorPolicy] = None,
    ) -> tuple[str, AnalysisResult]:
        """Generate a password and analyse it for display.

        Args:
            length: Password length; defaults to
                ``config.generator.default_length``.
            policy: Character classes to cover; defaults to the
                generator's four-class policy.

        Returns:
            Tuple of the generated password and its analysis.

        Raises:
            InvalidLengthError: If *length* is too short for the policy.
            RandomnessUnavailableError: If the OS entropy source fails.
        """
        if length is None:
            length = self.config.generator.default_length

        with self.logger.operation("generate"):
            try:
                password = generate(length, policy)
            except GaugeError as exc:
                self.logger.error("Password generation failed: %s", exc)
                raise
            analysis = analyze(password)
            self.logger.info(
                "Generated password: length=%d score=%d",
                analysis.length,
                analysis.score,
            )

        return password, analysis

    # ------------------------------------------------------------------ #
    #  Findings
    # ------------------------------------------------------------------ #

    @staticmethod
    def _findings(analysis: AnalysisResult) -> list[Finding]:
        """Convert an analysis into findings, most important first."""
        findings: list[Finding] = []

        if analysis.is_common:
            findings.append(Finding(
                title="Extremely Common Password",
                description=(
                    "This password appears in the list of the most commonly "
                    "used passwords and will be among the first guesses."
                ),
                severity=Severity.CRITICAL,
                recommendation="Choose a different, randomly generated password.",
            ))

        findings.append(Finding(
            title=f"Password Strength: {analysis.label}",
            description=(
                f"Adjusted entropy: {analysis.adjusted_entropy:.2f} bits "
                f"(raw {analysis.entropy:.2f} bits, penalty "
                f"{analysis.penalty:.1f} bits). Character pool: "
                f"{analysis.pool}. Length: {analysis.length}. "
                f"Score: {analysis.score}/5."
            ),
            severity=_SCORE_SEVERITY[analysis.strength],
            evidence={
                "length": analysis.length,
                "pool": analysis.pool,
                "entropy": round(analysis.entropy, 2),
                "adjusted_entropy": round(analysis.adjusted_entropy, 2),
                "score": analysis.score,
            },
        ))

        detectors = (
            (
                analysis.repeats,
                REPEAT_WEIGHT,
                "Repeated Characters",
                "repeated character runs or repeated substrings",
            ),
            (
                analysis.seqs,
                SEQUENCE_WEIGHT,
                "Sequential Characters",
                "sequential character runs",
            ),
            (
                analysis.keyboard_seqs,
                KEYBOARD_WEIGHT,
                "Keyboard Pattern",
                "keyboard patterns",
            ),
        )
        for count, weight, title, noun in detectors:
            if count:
                findings.append(Finding(
                    title=f"Pattern Detected: {title}",
                    description=(
                        f"Found {count} {noun}, reducing estimated entropy "
                        f"by {count * weight:.1f} bits."
                    ),
                    severity=Severity.LOW,
                    evidence={"count": count, "penalty": count * weight},
                ))

        for suggestion in analysis.suggestions:
            findings.append(Finding(
                title="Password Improvement Suggestion",
                description=suggestion,
                severity=Severity.INFO,
            ))

        return findings
