"""Property loaders for primitive, binary, string and float array values."""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass
from typing import Any

from fbxdom.properties import LoadProperty, PropertyHandle
from fbxdom.tree import AttributeType, AttributeTypeError, AttributeValue


class PropertyLoadError(ValueError):
    """A property value could not be loaded as the requested type."""


def _type_error(target_name: str, actual: AttributeType, prop: PropertyHandle) -> PropertyLoadError:
    return PropertyLoadError(
        "Unexpected attribute value type for boolean property: "
        f"expected {target_name} but got {actual.value}, node_id={prop.node_id!r}"
    )


def check_attrs_len(
    prop: PropertyHandle, expected_len: int, target_name: str
) -> tuple[AttributeValue, ...]:
    """Return the value part of the property if it has exactly ``expected_len`` items."""
    value_part = prop.value_part()
    length = len(value_part)
    if length < expected_len:
        raise PropertyLoadError(
            f"Not enough node attributes for {target_name} property: "
            f"node_id={prop.node_id!r}, expected {expected_len} but got {length}"
        )
    if length > expected_len:
        raise PropertyLoadError(
            f"Too many node attributes for {target_name} property: "
            f"node_id={prop.node_id!r}, expected {expected_len} but got {length}"
        )
    return value_part


def _get(value: AttributeValue, kind: AttributeType, target_name: str, prop: PropertyHandle) -> Any:
    try:
        return value.get(kind)
    except AttributeTypeError as e:
        raise _type_error(target_name, e.actual, prop) from e


def _to_f32(value: float) -> float:
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class Primitive(enum.Enum):
    """Target type of a primitive property loader."""

    BOOL = "bool"
    I16 = "i16"
    U16 = "u16"
    I32 = "i32"
    U32 = "u32"
    I64 = "i64"
    U64 = "u64"
    F32 = "f32"
    F64 = "f64"


# Target name used in length checks, and name used in type errors.
_PRIMITIVE_NAMES: dict[Primitive, tuple[str, str]] = {
    Primitive.BOOL: ("boolean", "boolean"),
    Primitive.I16: ("`i16`", "`i16`"),
    Primitive.U16: ("`u16`", "`u16`"),
    Primitive.I32: ("`i32`", "i32"),
    Primitive.U32: ("`u32`", "u32"),
    Primitive.I64: ("`i64`", "i64"),
    Primitive.U64: ("`u64`", "u64"),
    Primitive.F32: ("`f32`", "i64"),
    Primitive.F64: ("`f64`", "i64"),
}

_INTEGER_KINDS = (AttributeType.I16, AttributeType.I32, AttributeType.I64)


def _convert_primitive(target: Primitive, value: AttributeValue) -> Any:
    """Convert the attribute to the target type, or raise ``LookupError``."""
    kind, raw = value.kind, value.value
    if target is Primitive.BOOL:
        if kind is AttributeType.BOOL:
            return bool(raw)
        if kind in _INTEGER_KINDS:
            return raw != 0
    elif target in (Primitive.I16, Primitive.U16):
        if kind is AttributeType.I16:
            return raw if target is Primitive.I16 else raw & 0xFFFF
    elif target in (Primitive.I32, Primitive.U32):
        if kind in (AttributeType.I16, AttributeType.I32):
            return raw if target is Primitive.I32 else raw & 0xFFFFFFFF
    elif target in (Primitive.I64, Primitive.U64):
        if kind in _INTEGER_KINDS:
            return raw if target is Primitive.I64 else raw & 0xFFFFFFFFFFFFFFFF
    elif target is Primitive.F32:
        if kind is AttributeType.F32:
            return float(raw)
        if kind is AttributeType.F64:
            return _to_f32(float(raw))
    elif target is Primitive.F64:
        if kind in (AttributeType.F32, AttributeType.F64):
            return float(raw)
    raise LookupError(kind)


@dataclass(frozen=True)
class PrimitiveLoader(LoadProperty):
    """Loads a primitive value, applying safe widening conversions.

    Integers are widened from narrower attribute types, booleans accept
    integers, and ``f32``/``f64`` are converted in both directions.
    """

    target: Primitive

    def __init__(self, target: Primitive) -> None:
        object.__setattr__(self, "target", Primitive(target))

    def expecting(self) -> str:
        return _PRIMITIVE_NAMES[self.target][0]

    def load(self, prop: PropertyHandle) -> Any:
        target_name, error_name = _PRIMITIVE_NAMES[self.target]
        (value,) = check_attrs_len(prop, 1, target_name)
        try:
            return _convert_primitive(self.target, value)
        except LookupError:
            raise _type_error(error_name, value.kind, prop) from None


@dataclass(frozen=True)
class _SingleValueLoader(LoadProperty):
    _kind = AttributeType.STRING
    _target_name = ""

    def expecting(self) -> str:
        return self._target_name

    def load(self, prop: PropertyHandle) -> Any:
        (value,) = check_attrs_len(prop, 1, self._target_name)
        return _get(value, self._kind, self._target_name, prop)


@dataclass(frozen=True)
class StrictF32Loader(_SingleValueLoader):
    """Loads an ``f32`` value, rejecting ``f64``."""

    _kind = AttributeType.F32
    _target_name = "strict `f32`"

    def expecting(self) -> str:
        return self._target_name

    def load(self, prop: PropertyHandle) -> float:
        return float(super().load(prop))


@dataclass(frozen=True)
class StrictF64Loader(_SingleValueLoader):
    """Loads an ``f64`` value, rejecting ``f32``."""

    _kind = AttributeType.F64
    _target_name = "strict `f64`"

    def expecting(self) -> str:
        return self._target_name

    def load(self, prop: PropertyHandle) -> float:
        return float(super().load(prop))


@dataclass(frozen=True)
class BinaryLoader(_SingleValueLoader):
    """Loads a binary value, rejecting strings."""

    _kind = AttributeType.BINARY
    _target_name = "binary"

    def expecting(self) -> str:
        return self._target_name

    def load(self, prop: PropertyHandle) -> bytes:
        return bytes(super().load(prop))


@dataclass(frozen=True)
class StringLoader(_SingleValueLoader):
    """Loads a string value."""

    _kind = AttributeType.STRING
    _target_name = "string"

    def expecting(self) -> str:
        return self._target_name

    def load(self, prop: PropertyHandle) -> str:
        return str(super().load(prop))


_F64_ARRAY_LENGTHS = (2, 3, 4, 16)


@dataclass(frozen=True)
class F64ArrLoader(LoadProperty):
    """Loads a fixed-length array of ``f64`` values, rejecting ``f32``."""

    length: int

    def __init__(self, length: int) -> None:
        if length not in _F64_ARRAY_LENGTHS:
            raise ValueError(
                f"unsupported array length {length}: expected one of {_F64_ARRAY_LENGTHS}"
            )
        object.__setattr__(self, "length", length)

    def expecting(self) -> str:
        return f"`[f64; {self.length}]`"

    def load(self, prop: PropertyHandle) -> tuple[float, ...]:
        target_name = self.expecting()
        value_part = check_attrs_len(prop, self.length, target_name)
        return tuple(
            float(_get(value, AttributeType.F64, target_name, prop)) for value in value_part
        )