import pytest

from gauge.analyzers.patterns import (
    KEYBOARD_PATTERNS,
    count_keyboard_sequences,
    count_repeats,
    count_sequential_runs,
)


@pytest.mark.parametrize(
    "s, expected",
    [
        ("", 0),
        ("a", 0),
        ("abc", 0),
        ("aa", 1),        # one adjacent unit match, run too short
        ("aaa", 3),       # 1 run + 2 unit-1 matches
        ("abab", 1),      # "ab" followed by "ab"
        ("aaaaa", 7),     # 1 run + 4 unit-1 + 2 unit-2 matches
        ("aaaaaaaaaaaa", 33),  # 1 + 11 + 9 + 7 + 5
    ],
)
def test_count_repeats(s, expected):
    assert count_repeats(s) == expected


def test_long_run_counts_once_in_run_scan():
    # Two runs of three plus four unit-1 matches
    assert count_repeats("aaaxbbb") == 2 + 4


def test_repeated_units_up_to_four_characters():
    assert count_repeats("abcdabcd") == 1
    assert count_repeats("abcdeabcde") == 0


@pytest.mark.parametrize(
    "s, expected",
    [
        ("", 0),
        ("ab", 0),
        ("abc", 1),
        ("abcdefghijkl", 1),
        ("4321", 1),
        ("abcxyz", 2),
        ("9:;<", 1),      # adjacent code points outside letters and digits
        ("abab", 0),      # direction flips every step
        ("abcba", 2),     # ascending run then descending run
        ("aceg", 0),
        ("zyx1234", 2),
    ],
)
def test_count_sequential_runs(s, expected):
    assert count_sequential_runs(s) == expected


def test_sequential_runs_are_case_sensitive():
    # 'c' (99) and 'D' (68) are not adjacent code points
    assert count_sequential_runs("abcDEF") == 2
    assert count_sequential_runs("aBc") == 0


@pytest.mark.parametrize(
    "s, expected",
    [
        ("", 0),
        ("Qwerty123!", 1),
        ("QWERTYasdf", 2),
        ("qwertyqwerty", 1),
        ("x12345x", 1),
        ("!@#$%", 1),
        ("qazwsx", 2),
        ("1234", 0),
        ("ZXCV", 1),
    ],
)
def test_count_keyboard_sequences(s, expected):
    assert count_keyboard_sequences(s) == expected


def test_every_keyboard_pattern_is_detected():
    text = "".join(KEYBOARD_PATTERNS)
    assert count_keyboard_sequences(text) == len(KEYBOARD_PATTERNS)
