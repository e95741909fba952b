import pytest
from random import seed, randrange
from .base_decoder import decode, encode
from .errors import InvalidBaseError, InvalidDigitError, ErrorKind


def test_decode_simple_values():
    assert decode("4", 10) == 4
    assert decode("111", 2) == 7
    assert decode("213", 4) == 39
    assert decode("0", 7) == 0
    assert decode("ff", 16) == 255
    assert decode("zz", 36) == 35*36 + 35


def test_decode_is_case_insensitive():
    assert decode("FF", 16) == decode("ff", 16) == decode("fF", 16)
    assert decode("45153788322A1255483", 12) == decode("45153788322a1255483", 12)


def test_decode_leading_zeros():
    assert decode("000101", 2) == 5


def test_decode_beyond_double_precision():
    # 2**53 + 1 is the first integer a double cannot hold
    assert decode(str(2**53 + 1), 10) == 2**53 + 1
    assert decode("e1b5e05623d881f", 16) == 0xe1b5e05623d881f
    assert decode("1" * 300, 2) == 2**300 - 1


def test_decode_very_long_decimal_string():
    # int() refuses decimal strings this long by default
    assert decode("9" * 5000, 10) == 10**5000 - 1


def test_round_trip_every_base():
    seed(1)
    for base in range(2, 37):
        values = [0, 1, base - 1, base, 2**53 + 1, 2**64] + [randrange(2**256) for _ in range(20)]
        for value in values:
            assert decode(encode(value, base), base) == value


def test_encode_known_values():
    assert encode(0, 2) == "0"
    assert encode(39, 4) == "213"
    assert encode(255, 16) == "ff"
    assert encode(35, 36) == "z"


@pytest.mark.parametrize("base", [0, 1, 37, -2, 100, True, 10.0, "10", None])
def test_invalid_base(base):
    with pytest.raises(InvalidBaseError) as exc_info:
        decode("1", base)
    assert exc_info.value.kind is ErrorKind.INVALID_BASE
    assert exc_info.value.base == base
    assert repr(base) in str(exc_info.value)


@pytest.mark.parametrize("value, base", [
    ("2", 2),
    ("g", 16),
    ("", 10),
    (" 4", 10),
    ("4 ", 10),
    ("4\n", 10),
    ("-4", 10),
    ("+4", 10),
    ("1_000", 10),
    ("0x1f", 16),
    ("1.5", 10),
    ("١٢", 10),  # arabic-indic digits, which int() would accept
    ("K", 36),  # kelvin sign, lowercases to 'k'
])
def test_invalid_digits(value, base):
    with pytest.raises(InvalidDigitError) as exc_info:
        decode(value, base)
    assert exc_info.value.kind is ErrorKind.INVALID_DIGIT
    assert exc_info.value.value == value
    assert exc_info.value.base == base


def test_invalid_digit_is_a_value_error():
    with pytest.raises(ValueError):
        decode("9", 8)


def test_decode_rejects_non_strings():
    with pytest.raises(InvalidDigitError):
        decode(12, 10)


def test_encode_rejects_negative_and_bad_base():
    with pytest.raises(ValueError):
        encode(-1, 10)
    with pytest.raises(InvalidBaseError):
        encode(10, 1)
