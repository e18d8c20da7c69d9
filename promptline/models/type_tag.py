"""TypeTag and DestinationKind enumerations for answer coercion.

Provides simple constants containers instead of an Enum to keep imports
lightweight in architectural tests. The lookup tables map every declared
destination kind to the wide answer type it is coerced through and, for
numeric kinds, to its bit width.
"""

from __future__ import annotations

from typing import Dict


class TypeTag:
    UINT = "uint"
    INT = "int"
    FLOAT = "float"
    TEXT = "text"

    ALL = frozenset({UINT, INT, FLOAT, TEXT})


class DestinationKind:
    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    STR = "str"


KIND_TAGS: Dict[str, str] = {
    DestinationKind.UINT: TypeTag.UINT,
    DestinationKind.UINT8: TypeTag.UINT,
    DestinationKind.UINT16: TypeTag.UINT,
    DestinationKind.UINT32: TypeTag.UINT,
    DestinationKind.UINT64: TypeTag.UINT,
    DestinationKind.INT: TypeTag.INT,
    DestinationKind.INT8: TypeTag.INT,
    DestinationKind.INT16: TypeTag.INT,
    DestinationKind.INT32: TypeTag.INT,
    DestinationKind.INT64: TypeTag.INT,
    DestinationKind.FLOAT32: TypeTag.FLOAT,
    DestinationKind.FLOAT64: TypeTag.FLOAT,
    DestinationKind.STR: TypeTag.TEXT,
}

# Text destinations have no width
KIND_BITS: Dict[str, int] = {
    DestinationKind.UINT: 64,
    DestinationKind.UINT8: 8,
    DestinationKind.UINT16: 16,
    DestinationKind.UINT32: 32,
    DestinationKind.UINT64: 64,
    DestinationKind.INT: 64,
    DestinationKind.INT8: 8,
    DestinationKind.INT16: 16,
    DestinationKind.INT32: 32,
    DestinationKind.INT64: 64,
    DestinationKind.FLOAT32: 32,
    DestinationKind.FLOAT64: 64,
}

UINT64_MAX = (1 << 64) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


__all__ = [
    "TypeTag",
    "DestinationKind",
    "KIND_TAGS",
    "KIND_BITS",
    "UINT64_MAX",
    "INT64_MIN",
    "INT64_MAX",
]
