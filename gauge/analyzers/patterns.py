"""
Password Pattern Detectors
==========================

Three independent scanners whose counts feed the analyzer's entropy
penalty:

- :func:`count_repeats` -- runs of one character plus short substrings
  immediately repeated (``aaa``, ``abab``).
- :func:`count_sequential_runs` -- monotonic code point runs (``abcd``,
  ``4321``).
- :func:`count_keyboard_sequences` -- literal keyboard patterns
  (``qwerty``, ``asdf``).

All three are pure and linear in the input length.
"""

from __future__ import annotations


# Longest substring compared by the repeated-substring scan
_MAX_REPEAT_UNIT = 4

# A run of identical characters counts once it is longer than this
_MIN_RUN_EXCLUSIVE = 2

# A sequential run counts once it reaches this length
_MIN_SEQUENCE = 3

KEYBOARD_PATTERNS: tuple[str, ...] = (
    "qwerty",
    "asdf",
    "zxcv",
    "12345",
    "!@#$%",
    "qaz",
    "wsx",
)


def count_repeats(s: str) -> int:
    """Count repeated characters and repeated short substrings.

    Sums two scans:

    1. Each maximal run of one character longer than two counts once
       (``"aaaaa"`` is one run).
    2. For unit lengths 1-4, every position where a unit is immediately
       followed by an identical unit counts once. Overlapping positions
       all count, so ``"aaaa"`` also contributes here.

    Args:
        s: Input string.

    Returns:
        Combined count, never negative.
    """
    if not s:
        return 0

    repeats = 0

    run = 1
    for i in range(1, len(s)):
        if s[i] == s[i - 1]:
            run += 1
        else:
            if run > _MIN_RUN_EXCLUSIVE:
                repeats += 1
            run = 1
    if run > _MIN_RUN_EXCLUSIVE:
        repeats += 1

    for unit in range(1, _MAX_REPEAT_UNIT + 1):
        for i in range(len(s) - 2 * unit + 1):
            part = s[i : i + unit]
            if part and part == s[i + unit : i + 2 * unit]:
                repeats += 1

    return max(0, repeats)


def count_sequential_runs(s: str) -> int:
    """Count runs of consecutive code points such as ``abc`` or ``321``.

    A run grows while every step is +1 (ascending) or -1 (descending) in
    the direction it started with. A change of direction closes the run,
    and the pair that changed direction starts the next one. Runs of three
    or more characters count once each.

    The scan works on raw code points, so punctuation that happens to be
    adjacent (``"9:;<"``) counts the same as letters or digits.

    Args:
        s: Input string.

    Returns:
        Number of qualifying runs.
    """
    if len(s) < _MIN_SEQUENCE:
        return 0

    runs = 0
    run_len = 1
    direction = 0

    for i in range(1, len(s)):
        step = ord(s[i]) - ord(s[i - 1])
        if step in (1, -1) and (direction == 0 or step == direction):
            run_len += 1
            direction = step
            continue

        if run_len >= _MIN_SEQUENCE:
            runs += 1
        if step in (1, -1):
            run_len = 2
            direction = step
        else:
            run_len = 1
            direction = 0

    if run_len >= _MIN_SEQUENCE:
        runs += 1
    return runs


def count_keyboard_sequences(s: str) -> int:
    """Count keyboard patterns present anywhere in *s*, ignoring case.

    Each entry of :data:`KEYBOARD_PATTERNS` contributes at most one,
    however often it occurs.
    """
    if not s:
        return 0
    lower = s.lower()
    return sum(1 for pattern in KEYBOARD_PATTERNS if pattern in lower)
