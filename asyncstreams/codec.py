"""
Fixed-width value kinds understood by the typed stream operations.

Every kind maps to a single ``struct`` format character.  With the default
byte order ``@`` values are written in the host's native in-memory layout,
which is NOT a portable wire format: a stream written on a little-endian
machine reads back differently on a big-endian one, and ``int``/``uint``
follow the platform's ``ssize_t``/``size_t`` width.  Peers on different
architectures must agree on an explicit byte order (``<``, ``>`` or ``!``),
in which case ``int``/``uint`` are always 8 bytes wide.
"""
import enum
import struct

from typing import Any, Dict

import asyncstreams.err as err

NATIVE = "@"


@enum.unique
class Kind(enum.Enum):
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT = "int"
    UINT = "uint"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    FLOAT = "float"
    BOOL = "bool"
    BYTE = "byte"


_NATIVE_FORMATS: Dict[Kind, str] = {
    Kind.INT8: "b",
    Kind.INT16: "h",
    Kind.INT32: "i",
    Kind.INT64: "q",
    Kind.UINT8: "B",
    Kind.UINT16: "H",
    Kind.UINT32: "I",
    Kind.UINT64: "Q",
    Kind.INT: "n",
    Kind.UINT: "N",
    Kind.FLOAT32: "f",
    Kind.FLOAT64: "d",
    Kind.FLOAT: "d",
    Kind.BOOL: "?",
    Kind.BYTE: "B",
}

# ssize_t/size_t only exist in native mode
_STANDARD_OVERRIDES: Dict[Kind, str] = {
    Kind.INT: "q",
    Kind.UINT: "Q",
}


def get_kind(kind: Any) -> Kind:
    if isinstance(kind, Kind):
        return kind
    try:
        return Kind(kind)
    except ValueError:
        raise err.Error("unknown value kind {!r}".format(kind))


def get_struct(kind: Any, byte_order: str = NATIVE) -> struct.Struct:
    k = get_kind(kind)
    if byte_order == NATIVE:
        fmt = _NATIVE_FORMATS[k]
    else:
        fmt = _STANDARD_OVERRIDES.get(k, _NATIVE_FORMATS[k])
    return _cached_struct(byte_order + fmt)


_structs: Dict[str, struct.Struct] = {}


def _cached_struct(fmt: str) -> struct.Struct:
    s = _structs.get(fmt)
    if s is None:
        s = struct.Struct(fmt)
        _structs[fmt] = s
    return s


def sizeof(kind: Any, byte_order: str = NATIVE) -> int:
    return get_struct(kind, byte_order).size


def encode(kind: Any, value: Any, byte_order: str = NATIVE) -> bytes:
    return get_struct(kind, byte_order).pack(value)


def decode(kind: Any, data: bytes, byte_order: str = NATIVE) -> Any:
    return get_struct(kind, byte_order).unpack(data)[0]
