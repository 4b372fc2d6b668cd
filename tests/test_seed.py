import hashlib
from fractions import Fraction

import pytest

from terragen.errors import InvalidArgument
from terragen.synth.seed import SeedDeriver, text_to_seed


def test_numeric_seed_is_kept_as_is():
    seed = SeedDeriver()
    seed.set(42)
    assert seed.raw == 42
    assert seed.numeric == 42

    seed.set(3.25)
    assert seed.numeric == 3.25


def test_text_seed_uses_last_eight_md5_hex_digits():
    expected = int(hashlib.md5(b"abc").hexdigest()[-8:], 16)
    assert text_to_seed("abc") == expected
    assert 0 <= expected < 2 ** 32


def test_text_seed_is_stable():
    first = SeedDeriver()
    second = SeedDeriver()
    first.set("misty isles")
    second.set("misty isles")
    assert first.raw == "misty isles"
    assert first.numeric == second.numeric
    assert first.numeric != text_to_seed("misty isle")


def test_numeric_looking_text_is_a_number():
    seed = SeedDeriver()
    seed.set("42")
    assert seed.raw == "42"
    assert seed.numeric == 42

    seed.set(" 2.5")
    assert seed.numeric == 2.5


@pytest.mark.parametrize("text", ["nan", "inf", "-Infinity", "42abc", ""])
def test_number_names_and_mixed_text_are_hashed(text):
    seed = SeedDeriver()
    seed.set(text)
    assert seed.numeric == text_to_seed(text)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_rejects_non_finite_numbers(bad):
    seed = SeedDeriver()
    with pytest.raises(InvalidArgument, match="finite"):
        seed.set(bad)
    assert not seed.is_set()


def test_accepts_other_real_numbers():
    seed = SeedDeriver()
    seed.set(Fraction(3, 4))
    assert seed.numeric == Fraction(3, 4)

    seed.set(10 ** 400)
    assert seed.numeric == 10 ** 400


@pytest.mark.parametrize("bad", [None, [1, 2], {"a": 1}, True, b"abc"])
def test_rejects_other_types(bad):
    seed = SeedDeriver()
    with pytest.raises(InvalidArgument) as excinfo:
        seed.set(bad)
    assert "map_seed" in str(excinfo.value)
    assert type(bad).__name__ in str(excinfo.value)
    assert not seed.is_set()


def test_invalid_argument_is_a_type_error():
    with pytest.raises(TypeError):
        SeedDeriver().set(object())
