"""Functional tests for coercion and narrowing of answer tokens.

Covers the four TypeTags, the 64-bit wide range limits, the ASCII-only
grammar, and narrowing into every destination width.
"""

from __future__ import annotations

import pydantic
import pytest

from promptline.errors import CoercionError, ConfigurationError, NarrowError
from promptline.logic.coercion import coerce, narrow
from promptline.models.coerced_value import CoercedValue
from promptline.models.type_tag import DestinationKind, TypeTag


@pytest.mark.parametrize(
    "token,tag,kind,expected",
    [
        ("0", TypeTag.UINT, DestinationKind.UINT8, 0),
        ("255", TypeTag.UINT, DestinationKind.UINT8, 255),
        ("18446744073709551615", TypeTag.UINT, DestinationKind.UINT64, 18446744073709551615),
        ("-128", TypeTag.INT, DestinationKind.INT8, -128),
        ("+42", TypeTag.INT, DestinationKind.INT, 42),
        ("-9223372036854775808", TypeTag.INT, DestinationKind.INT64, -9223372036854775808),
        ("3.25", TypeTag.FLOAT, DestinationKind.FLOAT64, 3.25),
        ("-.5", TypeTag.FLOAT, DestinationKind.FLOAT32, -0.5),
        ("7", TypeTag.FLOAT, DestinationKind.FLOAT64, 7.0),
        ("hello world", TypeTag.TEXT, DestinationKind.STR, "hello world"),
    ],
)
def test_in_range_tokens_round_trip_through_narrow(token, tag, kind, expected) -> None:
    value = coerce(token, tag)
    assert value.tag == tag
    assert narrow(value, kind) == expected


@pytest.mark.parametrize(
    "token,tag",
    [
        ("18446744073709551616", TypeTag.UINT),
        ("9223372036854775808", TypeTag.INT),
        ("-9223372036854775809", TypeTag.INT),
        ("1" + "0" * 400, TypeTag.FLOAT),
    ],
)
def test_overflowing_tokens_fail_coercion(token, tag) -> None:
    with pytest.raises(CoercionError):
        coerce(token, tag)


@pytest.mark.parametrize(
    "token,tag",
    [
        ("9" * 5000, TypeTag.UINT),
        ("1" * 5000, TypeTag.INT),
        ("-" + "1" * 5000, TypeTag.INT),
        ("+" + "9" * 21, TypeTag.UINT),
    ],
)
def test_very_long_integer_tokens_are_out_of_range(token, tag) -> None:
    with pytest.raises(CoercionError) as exc:
        coerce(token, tag)
    assert "out of range" in str(exc.value)


def test_leading_zeros_do_not_count_toward_magnitude() -> None:
    assert coerce("0" * 5000 + "42", TypeTag.UINT).value == 42
    assert coerce("-" + "0" * 5000 + "7", TypeTag.INT).value == -7
    assert coerce("0" * 30, TypeTag.INT).value == 0


@pytest.mark.parametrize(
    "token,tag",
    [
        ("", TypeTag.UINT),
        ("-1", TypeTag.UINT),
        ("12a", TypeTag.INT),
        ("1_000", TypeTag.INT),
        ("١٢", TypeTag.INT),  # Arabic-Indic digits are not ASCII
        (" 5", TypeTag.INT),
        ("1.2.3", TypeTag.FLOAT),
        ("1e5", TypeTag.FLOAT),
        ("nan", TypeTag.FLOAT),
        ("inf", TypeTag.FLOAT),
        (".", TypeTag.FLOAT),
    ],
)
def test_malformed_tokens_fail_coercion(token, tag) -> None:
    with pytest.raises(CoercionError):
        coerce(token, tag)


def test_text_coercion_always_succeeds() -> None:
    assert coerce("", TypeTag.TEXT).value == ""
    assert coerce("  spaced  ", TypeTag.TEXT).value == "  spaced  "


def test_unknown_tag_is_a_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        coerce("1", "complex")


@pytest.mark.parametrize(
    "token,tag,kind",
    [
        ("256", TypeTag.UINT, DestinationKind.UINT8),
        ("65536", TypeTag.UINT, DestinationKind.UINT16),
        ("4294967296", TypeTag.UINT, DestinationKind.UINT32),
        ("128", TypeTag.INT, DestinationKind.INT8),
        ("-129", TypeTag.INT, DestinationKind.INT8),
        ("2147483648", TypeTag.INT, DestinationKind.INT32),
        ("1" + "0" * 39, TypeTag.FLOAT, DestinationKind.FLOAT32),
    ],
)
def test_values_wider_than_destination_fail_narrowing(token, tag, kind) -> None:
    with pytest.raises(NarrowError):
        narrow(coerce(token, tag), kind)


def test_narrowing_rejects_mismatched_tag() -> None:
    with pytest.raises(NarrowError):
        narrow(coerce("5", TypeTag.INT), DestinationKind.UINT8)
    with pytest.raises(NarrowError):
        narrow(coerce("5", TypeTag.TEXT), DestinationKind.FLOAT64)


def test_float32_narrowing_rounds_to_single_precision() -> None:
    narrowed = narrow(coerce("0.1", TypeTag.FLOAT), DestinationKind.FLOAT32)
    assert narrowed != 0.1
    assert narrowed == pytest.approx(0.1, rel=1e-7)


def test_coerced_value_rejects_inconsistent_tag() -> None:
    with pytest.raises(pydantic.ValidationError):
        CoercedValue(tag=TypeTag.UINT, value=-1)
    with pytest.raises(pydantic.ValidationError):
        CoercedValue(tag=TypeTag.FLOAT, value=1)
    with pytest.raises(pydantic.ValidationError):
        CoercedValue(tag=TypeTag.TEXT, value=3)
    with pytest.raises(pydantic.ValidationError):
        CoercedValue(tag="bool", value="true")
