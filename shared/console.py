"""
PassGauge Console Interface
===========================

Rich-powered console abstraction providing a unified presentation layer
for the PassGauge CLI.

The class wraps :class:`rich.console.Console` and adds convenience methods
for banners, section headers, success and error lines and the
findings table, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

import datetime as _dt
from typing import Sequence

from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from shared.models import Finding, Severity

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all PassGauge output
# ---------------------------------------------------------------------------
_GAUGE_THEME = Theme(
    {
        "gauge.section": "bold bright_magenta",
        "gauge.success": "bold green",
        "gauge.error": "bold red",
        "gauge.dim": "dim white",
        "gauge.critical": "bold white on red",
        "gauge.high": "bold red",
        "gauge.medium": "bold yellow",
        "gauge.low": "bold bright_cyan",
        "gauge.informational": "bold bright_blue",
        "gauge.tagline": "bold bright_green",
    }
)

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.CRITICAL: "gauge.critical",
    Severity.HIGH: "gauge.high",
    Severity.MEDIUM: "gauge.medium",
    Severity.LOW: "gauge.low",
    Severity.INFO: "gauge.informational",
}

# ---------------------------------------------------------------------------
# ASCII banner art
# ---------------------------------------------------------------------------
_BANNER_ART = r"""
[bright_cyan]
  ___               ___
 | _ \__ _ ______  / __|__ _ _  _ __ _ ___
 |  _/ _` (_-<_-< | (_ / _` | || / _` / -_)
 |_| \__,_/__/__/  \___\__,_|\_,_\__, \___|
                                 |___/
[/bright_cyan]"""

_TAGLINE = "Heuristic Password Strength Gauge"


class GaugeConsole:
    """Unified console interface for PassGauge.

    Usage::

        con = GaugeConsole()
        con.banner()
        con.section("Password Analysis")
        con.success("Password generated")
    """

    # ------------------------------------------------------------------ #
    #  Construction
    # ------------------------------------------------------------------ #

    def __init__(
        self,
        *,
        record: bool = False,
        width: int | None = None,
    ) -> None:
        """Initialise the console.

        Args:
            record: Enable Rich recording for text / HTML export.
            width:  Fixed console width; ``None`` auto-detects.
        """
        self._console = Console(
            theme=_GAUGE_THEME,
            record=record,
            width=width,
            highlight=False,
        )

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Banner
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the PassGauge ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        now = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        subtitle = (
            f"[gauge.tagline]{_TAGLINE}[/gauge.tagline]\n"
            f"[gauge.dim]Version: {version}  |  {now}[/gauge.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="gauge.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Status lines
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[gauge.success][✔] SUCCESS:[/gauge.success] {escape(message)}"
        )

    def error(self, message: str) -> None:
        """Print an error message."""
        self._console.print(
            f"[gauge.error][✘] ERROR:[/gauge.error] {escape(message)}"
        )

    def findings_table(self, findings: Sequence[Finding]) -> None:
        """Render findings in order, the severity cell coloured per level.

        Prints nothing when *findings* is empty.
        """
        if not findings:
            return

        tbl = Table(
            title="Findings",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
            padding=(0, 1),
        )
        tbl.add_column("#", style="dim", width=4, justify="right")
        tbl.add_column("Severity", width=12)
        tbl.add_column("Title")
        tbl.add_column("Description", ratio=2)

        for idx, finding in enumerate(findings, start=1):
            tbl.add_row(
                str(idx),
                Text(finding.severity.value, style=_SEVERITY_STYLES[finding.severity]),
                Text(finding.title),
                Text(finding.description),
            )

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def blank(self, count: int = 1) -> None:
        """Print *count* blank lines."""
        for _ in range(count):
            self._console.print()

    def export_text(self) -> str:
        """Export recorded console output as plain text (requires ``record=True``)."""
        return self._console.export_text()
