from dataclasses import dataclass
from .base_decoder import decode
from .errors import SecretRecoveryError, InvalidBaseError, MalformedTestCaseError


@dataclass(frozen=True)
class Share:
    index: int
    base: int
    raw_value: str

    def to_point(self) -> "Point":
        return Point(self.index, decode(self.raw_value, self.base))


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class ShareSet:
    n: int
    k: int
    points: tuple[Point, ...]

    @property
    def degree(self):
        return self.k - 1


def _positive_int(keys, name):
    value = keys.get(name)
    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
        raise MalformedTestCaseError(f"Invalid test case format: keys.{name} must be a positive integer (got {value!r})")
    return value


def _is_index_key(key):
    return isinstance(key, str) and key.isascii() and key.isdigit()


def _share_index(key):
    # share indices are positive decimal string keys, n is not an upper bound for them.
    # decode rather than int() so an absurdly long key is not refused by the int string limit
    index = decode(key, 10)
    if index < 1:
        raise MalformedTestCaseError(f"Share index must be positive (got {key!r})")
    return index


def _parse_base(raw_base):
    # the base is itself written in decimal
    if isinstance(raw_base, int) and not isinstance(raw_base, bool):
        return raw_base
    if not isinstance(raw_base, str) or not (raw_base.isascii() and raw_base.isdigit()):
        raise InvalidBaseError(raw_base)
    return decode(raw_base, 10)


def parse_point(key, entry) -> Point:
    # messages quote the key as written, str() of a huge index would hit the int string limit
    index = _share_index(key)
    if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
        raise MalformedTestCaseError(f"Share {key} must have a 'base' and a 'value'")
    if not isinstance(entry["value"], str):
        raise MalformedTestCaseError(f"Share {key} value must be a string (got {entry['value']!r})")

    try:
        share = Share(index, _parse_base(entry["base"]), entry["value"])
        return share.to_point()
    except SecretRecoveryError as e:
        e.share_key = key
        raise


def parse_test_case(test_case: dict) -> ShareSet:
    """
    Turns a test case record into a ShareSet.

    Expected shape:
        {"keys": {"n": 4, "k": 3}, "1": {"base": "10", "value": "4"}, "2": {...}, ...}

    Shares are ordered by ascending index. Indices may be missing, but at least k shares must be present.
    Keys that are not decimal indices, such as "keys" or a comment, are skipped.
    A share that fails to decode raises its own error (InvalidBaseError/InvalidDigitError) tagged with the share key.
    """
    if not isinstance(test_case, dict):
        raise MalformedTestCaseError(f"Test case must be an object (got {type(test_case).__name__})")

    keys = test_case.get("keys")
    if not isinstance(keys, dict) or "n" not in keys or "k" not in keys:
        raise MalformedTestCaseError("Invalid test case format: missing keys.n or keys.k")

    n = _positive_int(keys, "n")
    k = _positive_int(keys, "k")

    found = {}
    for key, entry in test_case.items():
        if not _is_index_key(key):
            continue
        point = parse_point(key, entry)
        # "1" and "01" name the same share
        if point.x in found:
            raise MalformedTestCaseError(f"Share keys {found[point.x][0]!r} and {key!r} name the same index")
        found[point.x] = (key, point)

    points = [found[index][1] for index in sorted(found)]

    if len(points) < k:
        raise MalformedTestCaseError(f"Insufficient points: need {k}, found {len(points)}")

    return ShareSet(n, k, tuple(points))
