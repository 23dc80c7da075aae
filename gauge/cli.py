"""
Gauge CLI
=========

Click-based command-line interface for PassGauge. Provides subcommands
for password analysis, the strength checklist, and password generation.

Usage::

    python -m gauge analyze "MyP@ssw0rd!"
    python -m gauge analyze                 # prompts with hidden input
    python -m gauge checklist "hunter2"
    python -m gauge generate --length 20 --count 3
    python -m gauge -o json analyze "correct horse"

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import click

from shared.config import GaugeConfig
from shared.console import GaugeConsole
from shared.models import ScanResult

from gauge import __version__
from gauge.core.engine import GaugeEngine
from gauge.core.errors import GaugeError
from gauge.core.models import AnalysisResult
from gauge.output.console import GaugeConsoleOutput
from gauge.output.report import GaugeReportGenerator


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.version_option(__version__, prog_name="passgauge")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to PassGauge configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default=None,
    help="Output format (defaults to the configured format).",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the JSON report to this file instead of stdout.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress the banner.",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Log engine activity to stderr (-v info, -vv debug).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: Optional[str],
    output_file: Optional[str],
    quiet: bool,
    verbose: int,
) -> None:
    """PassGauge -- heuristic password strength gauge.

    Estimate password entropy, flag weakening patterns, and generate
    random passwords. Everything runs locally; nothing is transmitted.
    """
    ctx.ensure_object(dict)

    gauge_config = GaugeConfig.load(config) if config else GaugeConfig()
    if verbose:
        gauge_config.global_settings.log_level = "DEBUG" if verbose > 1 else "INFO"

    output_format = output or gauge_config.global_settings.output_format
    ctx.obj["config"] = gauge_config
    ctx.obj["output_format"] = output_format
    ctx.obj["output_file"] = output_file

    console = GaugeConsole()
    ctx.obj["console"] = console
    ctx.obj["engine"] = GaugeEngine(gauge_config)
    ctx.obj["display"] = GaugeConsoleOutput(console, gauge_config.meter)
    ctx.obj["reporter"] = GaugeReportGenerator()

    if not quiet and output_format == "console":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: ScanResult) -> None:
    """Write *result* as JSON to the output file or stdout."""
    output_file = ctx.obj["output_file"]
    reporter: GaugeReportGenerator = ctx.obj["reporter"]
    console: GaugeConsole = ctx.obj["console"]

    if output_file:
        path = reporter.generate_json(result, Path(output_file))
        console.success(f"JSON report saved to: {path}")
    else:
        click.echo(reporter.to_json(result))


def _read_password(password: Optional[str]) -> str:
    """Return *password*, prompting with hidden input when it is omitted."""
    if password is not None:
        return password
    return click.prompt("Password", hide_input=True, default="", show_default=False)


# ===================================================================== #
#  Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password", required=False)
@click.pass_context
def analyze(ctx: click.Context, password: Optional[str]) -> None:
    """Analyse password strength.

    Shows the strength meter, entropy details, checklist, suggestions
    and findings. Omit PASSWORD to type it at a hidden prompt.
    """
    engine: GaugeEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]

    password = _read_password(password)
    result, analysis, items = engine.evaluate(password)

    if ctx.obj["output_format"] == "console":
        display.display_analysis(analysis, items, password)
        ctx.obj["console"].blank()
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.argument("password", required=False)
@click.pass_context
def checklist(ctx: click.Context, password: Optional[str]) -> None:
    """Show only the strength checklist and suggestions."""
    engine: GaugeEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]

    password = _read_password(password)
    analysis, items = engine.checklist(password)

    if ctx.obj["output_format"] == "console":
        display.display_checklist(items)
        display.display_suggestions(analysis)
    else:
        click.echo(json.dumps(
            {
                "checklist": [item.model_dump(mode="json") for item in items],
                "suggestions": list(analysis.suggestions),
            },
            indent=2,
            ensure_ascii=False,
        ))


@cli.command()
@click.option(
    "--length", "-l",
    type=int,
    default=None,
    help="Password length (default from config, 16).",
)
@click.option(
    "--count", "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of passwords to generate (default from config, 1).",
)
@click.option(
    "--analysis/--no-analysis",
    default=True,
    help="Analyse each generated password.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    length: Optional[int],
    count: Optional[int],
    analysis: bool,
) -> None:
    """Generate random passwords from the system CSPRNG.

    Every password contains at least one lowercase letter, uppercase
    letter, digit and symbol.
    """
    engine: GaugeEngine = ctx.obj["engine"]
    display: GaugeConsoleOutput = ctx.obj["display"]
    console: GaugeConsole = ctx.obj["console"]
    config: GaugeConfig = ctx.obj["config"]

    generated: list[tuple[str, AnalysisResult]] = []
    try:
        for _ in range(count or config.generator.count):
            generated.append(engine.generate_password(length))
    except GaugeError as exc:
        console.error(str(exc))
        ctx.exit(1)

    if ctx.obj["output_format"] == "console":
        display.display_generated([password for password, _ in generated])
        if analysis:
            for _, result in generated:
                display.display_meter(result)
    else:
        payload = [
            {
                "password": password,
                **({"analysis": result.model_dump(mode="json")} if analysis else {}),
            }
            for password, result in generated
        ]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the PassGauge CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
