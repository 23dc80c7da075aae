"""
PassGauge -- Heuristic Password Strength Gauge
==============================================

Estimates password strength with a character-pool entropy model reduced
by pattern penalties (repeated runs, sequential runs, keyboard
patterns), renders a strength meter and checklist, and generates random
passwords from the system CSPRNG.

Modules:
    - gauge.analyzers: Pure scoring functions and pattern detectors
    - gauge.generators: Random password generator
    - gauge.core: Data models, exceptions and the engine facade
    - gauge.output: Console and JSON output
    - gauge.cli: Click-based command-line interface
"""

__version__ = "1.0.0"
__tool_name__ = "gauge"
