import pytest
from hypothesis import given
from hypothesis import strategies as st

from secret_recovery import (
    DigitOutOfRange,
    InvalidBase,
    InvalidDigit,
    decode,
    encode,
)


@given(value=st.integers(min_value=0, max_value=2**512), base=st.integers(min_value=2, max_value=36))
def test_decode_inverts_encode(value, base):
    assert decode(encode(value, base), base) == value


def test_decode_is_case_insensitive():
    assert decode("1A", 16) == decode("1a", 16) == 26
    assert decode("Zz", 36) == 35 * 36 + 35


def test_decode_known_values():
    assert decode("111", 2) == 7
    assert decode("213", 4) == 39
    assert decode("0007", 10) == 7
    assert decode("aed7015a346d63", 15) == 21394886326566393


def test_decode_is_exact_for_large_values():
    digits = "z" * 200
    assert decode(digits, 36) == 36**200 - 1


def test_letter_beyond_base_is_invalid_digit():
    with pytest.raises(InvalidDigit) as exc:
        decode("G", 16)
    assert isinstance(exc.value, DigitOutOfRange)
    assert exc.value.digit == 16


@pytest.mark.parametrize(
    "digits, char, position",
    [("1-2", "-", 1), ("12 ", " ", 2), ("+5", "+", 0), ("1_0", "_", 1), ("\u0663", "\u0663", 0)],
)
def test_character_outside_alphabet(digits, char, position):
    with pytest.raises(InvalidDigit) as exc:
        decode(digits, 10)
    assert not isinstance(exc.value, DigitOutOfRange)
    assert exc.value.char == char
    assert exc.value.position == position


def test_digit_out_of_range():
    with pytest.raises(DigitOutOfRange):
        decode("2", 2)

    with pytest.raises(DigitOutOfRange) as exc:
        decode("102", 2)
    assert exc.value.digit == 2
    assert exc.value.base == 2
    assert exc.value.position == 2


def test_empty_digits_rejected():
    with pytest.raises(InvalidDigit):
        decode("", 10)


@pytest.mark.parametrize("base", [0, 1, 37, -2, True, 10.0])
def test_invalid_base(base):
    with pytest.raises(InvalidBase):
        decode("1", base)


def test_encode_zero_and_negative():
    assert encode(0, 7) == "0"
    with pytest.raises(ValueError):
        encode(-1, 10)
