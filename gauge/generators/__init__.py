"""
Gauge Generators
================

Random password generation backed by the :mod:`secrets` CSPRNG.
"""

from gauge.generators.password import DEFAULT_LENGTH, generate

__all__ = ["DEFAULT_LENGTH", "generate"]
