from .errors import InvalidBaseError, InvalidDigitError

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)

# letters are case-insensitive
DIGIT_VALUES = {c: i for i, c in enumerate(DIGITS)} | {c.upper(): i for i, c in enumerate(DIGITS)}


def check_base(base):
    # bool is an int subclass but never a sensible base
    if not isinstance(base, int) or isinstance(base, bool) or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBaseError(base)


def decode(raw_value: str, base: int) -> int:
    """
    converts a string of digits in the given base (2-36) into an exact integer.
    nothing but digits of that base is accepted - no sign, whitespace, underscores or prefixes.
    int(raw_value, base) lets all of those through and refuses very long decimal strings, so the digits are folded in by hand
    """
    check_base(base)

    if not isinstance(raw_value, str) or raw_value == "":
        raise InvalidDigitError(raw_value, base)

    value = 0
    for c in raw_value:
        digit = DIGIT_VALUES.get(c)
        if digit is None or digit >= base:
            raise InvalidDigitError(raw_value, base)
        value = value*base + digit
    return value


def encode(value: int, base: int) -> str:
    check_base(base)
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"Can only encode non-negative integers (got {value!r})")

    # conversion by repeated divmod, least significant digit first
    digits = []
    while True:
        value, remainder = divmod(value, base)
        digits.append(DIGITS[remainder])
        if value == 0:
            break
    return ''.join(reversed(digits))
