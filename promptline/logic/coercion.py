"""Coercion and narrowing helpers for raw answer tokens.

Provides the two conversions an answer passes through:
- coerce: raw text token -> wide CoercedValue for a TypeTag
- narrow: wide CoercedValue -> value sized for a destination kind

Only ASCII decimal digits, a leading sign and (for floats) a single decimal
point are accepted. No locale-aware parsing is attempted.
"""

from __future__ import annotations

import math
import re
import struct
from typing import Union

from promptline.errors import CoercionError, ConfigurationError, NarrowError
from promptline.models.coerced_value import CoercedValue
from promptline.models.type_tag import (
    INT64_MAX,
    INT64_MIN,
    KIND_BITS,
    KIND_TAGS,
    UINT64_MAX,
    DestinationKind,
    TypeTag,
)


_UINT_RE = re.compile(r"\+?[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")

_FLOAT32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
# Widest 64-bit magnitude has 20 digits; longer tokens never reach int()
_MAX_DIGITS = len(str(UINT64_MAX))


def _whole_number(token: str, what: str) -> int:
    digits = token.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        raise CoercionError(f"{token!r} is out of range for {what}")
    return -int(digits) if token.startswith("-") else int(digits)


def _coerce_uint(token: str) -> int:
    if not _UINT_RE.fullmatch(token):
        raise CoercionError(f"{token!r} is not an unsigned integer")
    value = _whole_number(token, "an unsigned integer")
    if value > UINT64_MAX:
        raise CoercionError(f"{token!r} is out of range for an unsigned integer")
    return value


def _coerce_int(token: str) -> int:
    if not _INT_RE.fullmatch(token):
        raise CoercionError(f"{token!r} is not an integer")
    value = _whole_number(token, "an integer")
    if not INT64_MIN <= value <= INT64_MAX:
        raise CoercionError(f"{token!r} is out of range for an integer")
    return value


def _coerce_float(token: str) -> float:
    if not _FLOAT_RE.fullmatch(token):
        raise CoercionError(f"{token!r} is not a number")
    value = float(token)
    if math.isinf(value):
        raise CoercionError(f"{token!r} is out of range for a number")
    return value


def coerce(token: str, tag: str) -> CoercedValue:
    """Convert a raw token into the wide representation of `tag`.

    Raises CoercionError on malformed text or magnitude overflow and
    ConfigurationError when `tag` is not a known TypeTag.
    """
    if tag == TypeTag.TEXT:
        return CoercedValue(tag=tag, value=str(token))
    if tag == TypeTag.UINT:
        return CoercedValue(tag=tag, value=_coerce_uint(token))
    if tag == TypeTag.INT:
        return CoercedValue(tag=tag, value=_coerce_int(token))
    if tag == TypeTag.FLOAT:
        return CoercedValue(tag=tag, value=_coerce_float(token))
    raise ConfigurationError(f"unknown answer type {tag!r}", reason="type_tag_unknown")


def narrow(coerced: CoercedValue, kind: str) -> Union[int, float, str]:
    """Fit a wide value into the destination kind.

    Raises NarrowError when the value's tag does not belong to `kind` or the
    value does not fit the kind's bit width.
    """
    expected = KIND_TAGS.get(kind)
    if expected is None:
        raise ConfigurationError(f"unusable destination kind {kind!r}", reason="destination_unsupported")
    if coerced.tag != expected:
        raise NarrowError(f"cannot assign a {coerced.tag} answer to a {kind} destination")

    value = coerced.value
    if expected == TypeTag.TEXT:
        return value
    bits = KIND_BITS[kind]
    if expected == TypeTag.UINT:
        if value > (1 << bits) - 1:
            raise NarrowError(f"{value} does not fit in {kind}")
        return value
    if expected == TypeTag.INT:
        if not -(1 << (bits - 1)) <= value <= (1 << (bits - 1)) - 1:
            raise NarrowError(f"{value} does not fit in {kind}")
        return value
    if kind == DestinationKind.FLOAT32:
        if abs(value) > _FLOAT32_MAX:
            raise NarrowError(f"{value} does not fit in {kind}")
        return struct.unpack("<f", struct.pack("<f", value))[0]
    return value


__all__ = ["coerce", "narrow"]
