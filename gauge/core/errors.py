"""
Gauge Exceptions
================

The analyzer is total over all strings and raises nothing; these errors
come from the generator and the layers around it.
"""

from __future__ import annotations


class GaugeError(Exception):
    """Base class for all PassGauge errors."""

    pass


class InvalidLengthError(GaugeError, ValueError):
    """Requested password length cannot satisfy the generator policy."""

    def __init__(self, length: int, minimum: int) -> None:
        self.length = length
        self.minimum = minimum
        super().__init__(
            f"Password length must be at least {minimum} "
            f"(one character per class), got {length}"
        )


class RandomnessUnavailableError(GaugeError, RuntimeError):
    """The operating system entropy source could not be used.

    Raised instead of falling back to a non-cryptographic generator.
    """

    pass
