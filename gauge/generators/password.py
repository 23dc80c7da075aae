"""
Random Password Generator
=========================

Produces passwords that contain at least one character from every class
of a :class:`~gauge.core.models.GeneratorPolicy`. All randomness comes
from the operating system CSPRNG via :mod:`secrets`; the permutation is a
Fisher-Yates shuffle driven by :func:`secrets.randbelow`, so every
ordering is equally likely.
"""

from __future__ import annotations

import secrets
from typing import Optional

from gauge.core.errors import InvalidLengthError, RandomnessUnavailableError
from gauge.core.models import GeneratorPolicy

DEFAULT_LENGTH = 16

DEFAULT_POLICY = GeneratorPolicy()


def generate(
    length: int = DEFAULT_LENGTH,
    policy: Optional[GeneratorPolicy] = None,
) -> str:
    """Generate a random password of exactly *length* characters.

    One character is drawn from each class alphabet, the remaining
    positions are drawn uniformly with replacement from the union of all
    alphabets, and the whole sequence is shuffled.

    Args:
        length: Number of characters. Must be at least one per class
            (4 with the default policy).
        policy: Class alphabets to cover. Defaults to lowercase,
            uppercase, digits and ``!@#$%^&*()-_=+[]{};:,.<>?``.

    Returns:
        The generated password.

    Raises:
        InvalidLengthError: If *length* is shorter than the number of
            classes in *policy*.
        RandomnessUnavailableError: If the OS entropy source fails.
    """
    policy = policy or DEFAULT_POLICY
    if length < policy.min_length:
        raise InvalidLengthError(length, policy.min_length)

    try:
        chars = [secrets.choice(alphabet) for alphabet in policy.alphabets]
        union = policy.union
        chars.extend(secrets.choice(union) for _ in range(length - len(chars)))
        _shuffle(chars)
    except (OSError, NotImplementedError) as exc:
        raise RandomnessUnavailableError(
            f"System random source unavailable: {exc}"
        ) from exc

    return "".join(chars)


def _shuffle(items: list[str]) -> None:
    """Fisher-Yates shuffle in place."""
    for i in range(len(items) - 1, 0, -1):
        j = secrets.randbelow(i + 1)
        items[i], items[j] = items[j], items[i]
