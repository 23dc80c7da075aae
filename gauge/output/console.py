"""
Gauge Console Output
====================

Rich-based renderers for PassGauge results: the strength meter, the
details table, the checklist and the suggestion list. This is the only
layer that knows about colours and widths; it consumes
:class:`~gauge.core.models.AnalysisResult` values and never computes
scores itself.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.config import MeterConfig
from shared.console import GaugeConsole
from gauge.core.models import AnalysisResult, CheckStatus, ChecklistItem


# ===================================================================== #
#  Style Maps
# ===================================================================== #

_CHECK_STYLES: dict[CheckStatus, tuple[str, str]] = {
    CheckStatus.OK: ("✓", "green"),
    CheckStatus.WARN: ("•", "yellow"),
    CheckStatus.BAD: ("•", "red"),
}


def meter_percent(adjusted_entropy: float, meter: MeterConfig) -> int:
    """Width of the meter bar as a percentage.

    Proportional to *adjusted_entropy* over ``meter.full_scale_bits``,
    clamped to ``[meter.min_percent, meter.max_percent]`` so a 0-bit
    password still shows a sliver.
    """
    scale = max(1.0, meter.full_scale_bits)
    percent = round(adjusted_entropy / scale * 100)
    return min(meter.max_percent, max(meter.min_percent, percent))


def mask_password(password: str) -> str:
    """Show the first and last character with asterisks in between."""
    if len(password) <= 2:
        return "*" * len(password)
    return password[0] + "*" * (len(password) - 2) + password[-1]


class GaugeConsoleOutput:
    """Console output formatters for PassGauge results.

    Usage::

        console = GaugeConsole()
        output = GaugeConsoleOutput(console)
        output.display_analysis(analysis, checklist, password)
    """

    def __init__(
        self,
        console: Optional[GaugeConsole] = None,
        meter: Optional[MeterConfig] = None,
    ) -> None:
        """Initialise the console output formatter.

        Args:
            console: GaugeConsole instance. Creates one if not provided.
            meter: Meter display settings. Defaults to :class:`MeterConfig`.
        """
        self.console = console or GaugeConsole()
        self.meter = meter or MeterConfig()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Composite Display
    # ------------------------------------------------------------------ #

    def display_analysis(
        self,
        result: AnalysisResult,
        checklist: Sequence[ChecklistItem],
        password: Optional[str] = None,
    ) -> None:
        """Display meter, details, checklist and suggestions in order."""
        self.console.section("Password Analysis")
        self.display_meter(result)
        self.display_details(result, password)
        self.display_checklist(checklist)
        self.display_suggestions(result)

    # ------------------------------------------------------------------ #
    #  Strength Meter
    # ------------------------------------------------------------------ #

    def display_meter(self, result: AnalysisResult) -> None:
        """Display the coloured strength bar and its label."""
        colour = result.strength.colour
        width = max(1, self.meter.width)
        percent = meter_percent(result.adjusted_entropy, self.meter)
        filled = max(0, min(width, round(width * percent / 100)))

        meter = Text()
        meter.append("[", style="dim")
        meter.append("█" * filled, style=colour)
        meter.append("░" * (width - filled), style="dim")
        meter.append("]", style="dim")
        meter.append(f" {percent:>3d}%\n")
        meter.append("Strength: ", style="bold")
        meter.append(result.label, style=f"bold {colour}")
        meter.append(f" - {round(result.adjusted_entropy)} bits (est.)")

        self._rich.print(Panel(meter, title="Strength Meter", border_style="cyan"))

    # ------------------------------------------------------------------ #
    #  Details
    # ------------------------------------------------------------------ #

    def display_details(
        self,
        result: AnalysisResult,
        password: Optional[str] = None,
    ) -> None:
        """Display the numeric analysis values in a table."""
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")

        if password is not None:
            shown = mask_password(password) if self.meter.mask_password else password
            tbl.add_row("Password", Text(shown))
        tbl.add_row("Length", str(result.length))
        tbl.add_row("Character Pool", str(result.pool))
        tbl.add_row("Raw Entropy", f"{result.entropy:.2f} bits")
        tbl.add_row(
            "Pattern Penalty",
            f"{result.penalty:.1f} bits "
            f"(repeats {result.repeats}, sequences {result.seqs}, "
            f"keyboard {result.keyboard_seqs})",
        )
        tbl.add_row("Adjusted Entropy", f"{result.adjusted_entropy:.2f} bits")
        tbl.add_row("Score", f"{result.score}/5 ({result.label})")

        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Checklist and Suggestions
    # ------------------------------------------------------------------ #

    def display_checklist(self, items: Sequence[ChecklistItem]) -> None:
        """Display checklist items with a tick or bullet per status."""
        self._rich.print()
        self._rich.print("[bold]Checklist:[/bold]")
        for item in items:
            icon, style = _CHECK_STYLES[item.status]
            line = Text("  ")
            line.append(icon, style=style)
            line.append(f" {item.text}")
            self._rich.print(line)

    def display_suggestions(self, result: AnalysisResult) -> None:
        """Display suggestions in analyzer order; nothing when empty."""
        if not result.suggestions:
            return
        self._rich.print()
        self._rich.print("[bold]Suggestions:[/bold]")
        for suggestion in result.suggestions:
            line = Text("  ")
            line.append("•", style="bright_cyan")
            line.append(f" {suggestion}")
            self._rich.print(line)

    # ------------------------------------------------------------------ #
    #  Generator
    # ------------------------------------------------------------------ #

    def display_generated(self, passwords: Sequence[str]) -> None:
        """Display generated passwords unmasked, one per row."""
        tbl = Table(
            title="Generated Passwords",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Password", style="bold bright_white")
        for idx, password in enumerate(passwords, start=1):
            tbl.add_row(str(idx), Text(password))
        self._rich.print(tbl)
