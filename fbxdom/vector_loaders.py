"""Property loaders for vectors, points, matrices and colours."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar

from fbxdom.loaders import PropertyLoadError, check_attrs_len
from fbxdom.properties import LoadProperty, PropertyHandle
from fbxdom.tree import AttributeType, AttributeTypeError, AttributeValue


class Element(enum.Enum):
    """Element type of a vector or colour value.

    Loaders using an element type accept only attributes of exactly that
    type: ``f32`` and ``f64`` are never converted into each other.
    """

    F32 = "f32"
    F64 = "f64"

    @property
    def attribute_type(self) -> AttributeType:
        return AttributeType.F32 if self is Element.F32 else AttributeType.F64


@dataclass(frozen=True)
class Point2:
    """A 2D point."""

    x: float
    y: float

    LENGTH: ClassVar[int] = 2

    @classmethod
    def _from_values(cls, values: list[float]) -> Point2:
        return cls(*values)


@dataclass(frozen=True)
class Point3:
    """A 3D point."""

    x: float
    y: float
    z: float

    LENGTH: ClassVar[int] = 3

    @classmethod
    def _from_values(cls, values: list[float]) -> Point3:
        return cls(*values)


@dataclass(frozen=True)
class Vector2:
    """A 2D vector."""

    x: float
    y: float

    LENGTH: ClassVar[int] = 2

    @classmethod
    def _from_values(cls, values: list[float]) -> Vector2:
        return cls(*values)


@dataclass(frozen=True)
class Vector3:
    """A 3D vector."""

    x: float
    y: float
    z: float

    LENGTH: ClassVar[int] = 3

    @classmethod
    def _from_values(cls, values: list[float]) -> Vector3:
        return cls(*values)


@dataclass(frozen=True)
class Vector4:
    """A 4D vector."""

    x: float
    y: float
    z: float
    w: float

    LENGTH: ClassVar[int] = 4

    @classmethod
    def _from_values(cls, values: list[float]) -> Vector4:
        return cls(*values)


@dataclass(frozen=True)
class ColumnMatrix4:
    """A 4x4 matrix stored as four column vectors."""

    x: Vector4
    y: Vector4
    z: Vector4
    w: Vector4

    LENGTH: ClassVar[int] = 16

    @classmethod
    def _from_values(cls, values: list[float]) -> ColumnMatrix4:
        return cls(*(Vector4(*values[start : start + 4]) for start in range(0, 16, 4)))


@dataclass(frozen=True)
class RowMatrix4:
    """A 4x4 matrix stored as four row vectors.

    The source values are in column-major order, so each row takes every
    fourth value.
    """

    x: Vector4
    y: Vector4
    z: Vector4
    w: Vector4

    LENGTH: ClassVar[int] = 16

    @classmethod
    def _from_values(cls, values: list[float]) -> RowMatrix4:
        return cls(*(Vector4(*values[row::4]) for row in range(4)))


@dataclass(frozen=True)
class RGB:
    """An RGB colour."""

    r: float
    g: float
    b: float

    LENGTH: ClassVar[int] = 3

    @classmethod
    def _from_values(cls, values: list[float]) -> RGB:
        return cls(*values)


@dataclass(frozen=True)
class RGBA:
    """An RGBA colour."""

    r: float
    g: float
    b: float
    a: float

    LENGTH: ClassVar[int] = 4

    @classmethod
    def _from_values(cls, values: list[float]) -> RGBA:
        return cls(*values)


_MINT_TARGETS = (Point2, Point3, Vector2, Vector3, Vector4, ColumnMatrix4, RowMatrix4)
_RGB_TARGETS = (RGB, RGBA)


def _read_value(
    value: AttributeValue, element: Element, target_name: str, prop: PropertyHandle
) -> float:
    try:
        return float(value.get(element.attribute_type))
    except AttributeTypeError as e:
        raise PropertyLoadError(
            "Unexpected attribute value type for boolean property: "
            f"expected {target_name} but got {e.actual.value}, node_id={prop.node_id!r}"
        ) from e


def _load_values(
    prop: PropertyHandle, length: int, element: Element, target_name: str
) -> list[float]:
    value_part = check_attrs_len(prop, length, target_name)
    return [_read_value(value, element, target_name, prop) for value in value_part]


@dataclass(frozen=True)
class _ComposedLoader(LoadProperty):
    target: type
    element: Element

    _allowed: ClassVar[tuple[type, ...]] = ()

    def __init__(self, target: type, element: Element | str = Element.F64) -> None:
        if target not in self._allowed:
            names = ", ".join(t.__name__ for t in self._allowed)
            raise ValueError(
                f"unsupported target type {getattr(target, '__name__', target)!r}: "
                f"expected one of {names}"
            )
        object.__setattr__(self, "target", target)
        object.__setattr__(self, "element", Element(element))

    def expecting(self) -> str:
        return f"`{self.target.__name__}<{self.element.value}>`"

    def load(self, prop: PropertyHandle) -> Any:
        target_name = self.expecting()
        values = _load_values(prop, self.target.LENGTH, self.element, target_name)
        return self.target._from_values(values)


@dataclass(frozen=True, init=False)
class MintLoader(_ComposedLoader):
    """Loads a point, vector or 4x4 matrix of ``f32`` or ``f64`` values."""

    _allowed: ClassVar[tuple[type, ...]] = _MINT_TARGETS

    def __init__(self, target: type, element: Element | str = Element.F64) -> None:
        super().__init__(target, element)

    def expecting(self) -> str:
        return super().expecting()

    def load(self, prop: PropertyHandle) -> Any:
        return super().load(prop)


@dataclass(frozen=True, init=False)
class RgbLoader(_ComposedLoader):
    """Loads an RGB or RGBA colour of ``f32`` or ``f64`` values."""

    _allowed: ClassVar[tuple[type, ...]] = _RGB_TARGETS

    def __init__(self, target: type, element: Element | str = Element.F64) -> None:
        super().__init__(target, element)

    def expecting(self) -> str:
        return super().expecting()

    def load(self, prop: PropertyHandle) -> Any:
        return super().load(prop)