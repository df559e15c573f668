"""Raw string to typed value coercion.

Every parser takes the raw string exactly as stored and either returns the
typed value or raises ValueError. None of them trim whitespace: a value is
taken literally, the way it appeared in the source file or environment.

Floats are rounded to IEEE-754 single precision and returned as Python floats
holding the rounded value.
"""

import math
import re
import struct
from typing import Dict, List

LIST_SEPARATOR = ","
PAIR_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = ":"

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_TRUE_LITERALS = frozenset({"1", "t", "true"})
_FALSE_LITERALS = frozenset({"0", "f", "false"})

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")
_HEX_FLOAT_PREFIX = re.compile(r"[+-]?0[xX]")
# Hex mantissa requires a binary exponent: 0x1p-2, 0x1.8P1
_HEX_FLOAT_LITERAL = re.compile(
    r"[+-]?0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_INFINITY_LITERAL = re.compile(r"[+-]?inf(inity)?", re.IGNORECASE)
_SIGNED_NAN_LITERAL = re.compile(r"[+-]nan", re.IGNORECASE)

_FLOAT32 = struct.Struct("<f")


def parse_bool(raw: str) -> bool:
    """Parse 1/0, t/f or true/false in any letter case."""
    lowered = raw.lower()
    if lowered in _TRUE_LITERALS:
        return True
    if lowered in _FALSE_LITERALS:
        return False
    raise ValueError(f"invalid boolean literal {raw!r}")


def round_float32(value: float) -> float:
    """Round a float to the nearest single-precision value.

    Raises:
        ValueError: If the value is finite but outside the single-precision range
    """
    try:
        return _FLOAT32.unpack(_FLOAT32.pack(value))[0]
    except OverflowError as exc:
        raise ValueError(f"{value!r} is out of single-precision range") from exc


def parse_float(raw: str) -> float:
    """Parse a decimal, scientific, hex or inf/nan literal as a 32-bit float."""
    if not raw.isascii() or raw != raw.strip() or "_" in raw:
        raise ValueError(f"invalid float literal {raw!r}")
    if _SIGNED_NAN_LITERAL.fullmatch(raw):
        raise ValueError(f"invalid float literal {raw!r}")

    is_hex = _HEX_FLOAT_PREFIX.match(raw) is not None
    if is_hex and not _HEX_FLOAT_LITERAL.fullmatch(raw):
        raise ValueError(f"invalid float literal {raw!r}")

    try:
        if is_hex:
            value = float.fromhex(raw)
        else:
            value = float(raw)
    except OverflowError as exc:
        raise ValueError(f"float literal {raw!r} is out of range") from exc
    except ValueError as exc:
        raise ValueError(f"invalid float literal {raw!r}") from exc

    # float() saturates overflowing literals to inf instead of failing
    if math.isinf(value) and not _INFINITY_LITERAL.fullmatch(raw):
        raise ValueError(f"float literal {raw!r} is out of range")

    return round_float32(value)


def parse_int(raw: str) -> int:
    """Parse a base-10 integer that fits in a signed 64-bit word."""
    if not _INT_LITERAL.fullmatch(raw):
        raise ValueError(f"invalid integer literal {raw!r}")

    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer literal {raw!r} is out of range")
    return value


def parse_map(raw: str) -> Dict[str, str]:
    """Parse ``k1:v1;k2:v2`` into a dict.

    Only the first two ``:`` segments of a pair are used, so ``a:b:c`` maps
    ``a`` to ``b``. A pair with no ``:`` at all is malformed.
    """
    result: Dict[str, str] = {}
    for pair in raw.split(PAIR_SEPARATOR):
        segments = pair.split(KEY_VALUE_SEPARATOR)
        if len(segments) < 2:
            raise ValueError(f"map pair {pair!r} has no {KEY_VALUE_SEPARATOR!r} separator")
        result[segments[0]] = segments[1]
    return result


def parse_slice(raw: str) -> List[str]:
    return raw.split(LIST_SEPARATOR)


def parse_slice_float(raw: str) -> List[float]:
    return [parse_float(item) for item in parse_slice(raw)]


def parse_slice_int(raw: str) -> List[int]:
    return [parse_int(item) for item in parse_slice(raw)]


__all__ = [
    "parse_bool",
    "parse_float",
    "parse_int",
    "parse_map",
    "parse_slice",
    "parse_slice_float",
    "parse_slice_int",
    "round_float32",
]
