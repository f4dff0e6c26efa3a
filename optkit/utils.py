import math

from typing import Optional, Union

from .errors import InvalidIntError

Number = Union[int, float]

_RADIX = {"0x": 16, "0o": 8, "0b": 2}
_INFINITY = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def tryNumber(value: str) -> Optional[Number]:
    """
    Loosely coerces a string to a number.

    Surrounding whitespace is ignored and the empty string is zero. Decimal
    integers, floats with an optional exponent, `0x`/`0o`/`0b` literals and
    `Infinity` are accepted. Integral results are returned as `int`.
    Values too large for a float become infinite.

    Returns:
        The number, or None if the string is not numeric.
    """
    s = value.strip()
    if s == "":
        return 0

    if "_" in s:
        return None

    if s in _INFINITY:
        return _INFINITY[s]

    radix = _RADIX.get(s[:2].lower())
    if radix is not None:
        digits = s[2:]
        if not digits.isalnum():
            return None
        try:
            return int(digits, radix)
        except ValueError:
            return None

    try:
        return int(s)
    except ValueError:
        pass

    try:
        n = float(s)
    except ValueError:
        return None

    if s.lstrip("+-").lower() in ("inf", "infinity", "nan"):
        # only the spelled-out Infinity is numeric
        return None

    if math.isinf(n):
        # overflow, as in 1e400
        return n

    if n.is_integer():
        return int(n)
    return n


def validateNumber(value: str) -> None:
    if tryNumber(value) is None:
        raise InvalidIntError(value)


def toNumber(value: str) -> Number:
    n = tryNumber(value)
    if n is None:
        raise InvalidIntError(value)
    return n


def isInteger(value: object) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()
