"""
Gauge Report Generator
======================

Writes PassGauge results as JSON for scripts and CI pipelines. Reports
contain analysis values, checklist and findings, never the password
itself.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from gauge import __version__
from shared.models import ScanResult


class GaugeReportGenerator:
    """Build JSON reports from :class:`~shared.models.ScanResult` objects.

    Usage::

        generator = GaugeReportGenerator()
        generator.generate_json(scan_result, Path("report.json"))
    """

    def build(self, result: ScanResult) -> dict[str, Any]:
        """Assemble the report structure for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": __version__,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [f.model_dump(mode="json") for f in result.findings],
            "metadata": result.metadata,
        }

    def to_json(self, result: ScanResult) -> str:
        """Serialise the report for *result* to an indented JSON string."""
        return json.dumps(
            self.build(result), indent=2, ensure_ascii=False, default=str
        )

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the JSON report for *result* to *output_path*.

        Args:
            result: ScanResult to serialise.
            output_path: Destination file; parent directories are created.

        Returns:
            Path to the generated JSON file.
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.to_json(result), encoding="utf-8")
        return output_path
