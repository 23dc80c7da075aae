"""
Gauge Output Module
===================

Rich console renderers and the JSON report writer.
"""

from gauge.output.console import GaugeConsoleOutput
from gauge.output.report import GaugeReportGenerator

__all__ = ["GaugeConsoleOutput", "GaugeReportGenerator"]
