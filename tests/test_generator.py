import secrets
import string

import pytest
from pydantic import ValidationError

from gauge.analyzers.strength import analyze
from gauge.core.errors import InvalidLengthError, RandomnessUnavailableError
from gauge.core.models import GENERATOR_SYMBOLS, GeneratorPolicy
from gauge.generators.password import DEFAULT_LENGTH, generate


def _covers_all_classes(password):
    return (
        any(c in string.ascii_lowercase for c in password)
        and any(c in string.ascii_uppercase for c in password)
        and any(c in string.digits for c in password)
        and any(c in GENERATOR_SYMBOLS for c in password)
    )


def test_default_length_is_sixteen():
    assert DEFAULT_LENGTH == 16
    assert len(generate()) == 16


def test_generate_covers_every_class():
    allowed = set(GeneratorPolicy().union)
    for _ in range(1000):
        password = generate(16)
        assert len(password) == 16
        assert _covers_all_classes(password)
        assert set(password) <= allowed


@pytest.mark.parametrize("length", [4, 5, 12, 64, 128])
def test_generate_exact_length(length):
    password = generate(length)
    assert len(password) == length
    assert _covers_all_classes(password)


@pytest.mark.parametrize("length", [3, 1, 0, -5])
def test_generate_rejects_short_lengths(length):
    with pytest.raises(InvalidLengthError) as excinfo:
        generate(length)
    assert excinfo.value.minimum == 4
    assert isinstance(excinfo.value, ValueError)


def test_guaranteed_characters_are_shuffled():
    first_chars = {generate(4)[0] for _ in range(200)}
    assert not first_chars <= set(string.ascii_lowercase)


def test_custom_policy():
    policy = GeneratorPolicy(alphabets=("ab", "12"))
    for _ in range(50):
        password = generate(2, policy)
        assert sorted(password)[0] in "12"
        assert set(password) & set("ab")
    with pytest.raises(InvalidLengthError):
        generate(1, policy)


@pytest.mark.parametrize("alphabets", [(), ("abc", "")])
def test_policy_rejects_empty_alphabets(alphabets):
    with pytest.raises(ValidationError):
        GeneratorPolicy(alphabets=alphabets)


def test_random_source_failure_is_not_masked(monkeypatch):
    def unavailable(seq):
        raise OSError("entropy source exhausted")

    monkeypatch.setattr(secrets, "choice", unavailable)
    with pytest.raises(RandomnessUnavailableError):
        generate(16)


def test_generated_password_analyses_with_full_pool():
    result = analyze(generate(16))
    assert result.pool == 94
    assert result.has_lower and result.has_upper and result.has_digit and result.has_symbol
