"""Texture property accessors with their defaults."""

from __future__ import annotations

from typing import Any

from fbxdom.loaders import (
    F64ArrLoader,
    Primitive,
    PrimitiveLoader,
    PropertyLoadError,
    StringLoader,
)
from fbxdom.properties import LoadProperty, ObjectProperties, PropertyError, PropertyHandle
from fbxdom.vector_loaders import Element, MintLoader, Point3, Vector3

_BOOL = PrimitiveLoader(Primitive.BOOL)
_F64 = PrimitiveLoader(Primitive.F64)
_VEC3 = MintLoader(Vector3, Element.F64)
_POINT3 = MintLoader(Point3, Element.F64)
_ARR3 = F64ArrLoader(3)
_STRING = StringLoader()


class TextureProperties:
    """Typed access to the properties of a texture."""

    def __init__(self, properties: ObjectProperties) -> None:
        self.properties = properties

    def __repr__(self) -> str:
        return f"TextureProperties({self.properties!r})"

    def get_property(self, name: str) -> PropertyHandle | None:
        """Return the named property, direct or default, if found."""
        return self.properties.get_property(name)

    def _load(self, name: str, loader: LoadProperty, description: str) -> Any:
        prop = self.properties.get_property(name)
        if prop is None:
            return None
        try:
            return prop.load_value(loader)
        except (PropertyLoadError, PropertyError) as e:
            raise PropertyLoadError(f"Failed to load {description}: {e}") from e

    def _load_or(self, name: str, loader: LoadProperty, description: str, default: Any) -> Any:
        value = self._load(name, loader, description)
        return default if value is None else value

    def alpha(self) -> float | None:
        """Return the texture alpha value if set."""
        return self._load("Texture alpha", _F64, "texture alpha value")

    def alpha_or_default(self) -> float:
        """Return the texture alpha value, or the default."""
        return self._load_or("Texture alpha", _F64, "texture alpha value", 1.0)

    def uv_swap(self) -> bool | None:
        """Return whether U and V should be swapped, if set."""
        return self._load("UVSwap", _BOOL, "UV swap flag")

    def uv_swap_or_default(self) -> bool:
        """Return whether U and V should be swapped, or the default."""
        return self._load_or("UVSwap", _BOOL, "UV swap flag", False)

    def premultiply_alpha(self) -> bool | None:
        """Return whether alpha is premultiplied, if set."""
        return self._load("PremultiplyAlpha", _BOOL, "premultiply-alpha flag")

    def premultiply_alpha_or_default(self) -> bool:
        """Return whether alpha is premultiplied, or the default."""
        return self._load_or("PremultiplyAlpha", _BOOL, "premultiply-alpha flag", False)

    def translation(self) -> Vector3 | None:
        """Return the translation vector if set."""
        return self._load("Translation", _VEC3, "translation vector")

    def translation_or_default(self) -> Vector3:
        """Return the translation vector, or the default."""
        return self._load_or(
            "Translation", _VEC3, "translation vector", Vector3(0.0, 0.0, 0.0)
        )

    def rotation(self) -> tuple[float, ...] | None:
        """Return the rotation vector if set."""
        return self._load("Rotation", _ARR3, "rotation vector")

    def rotation_or_default(self) -> tuple[float, ...]:
        """Return the rotation vector, or the default."""
        return self._load_or("Rotation", _ARR3, "rotation vector", (0.0, 0.0, 0.0))

    def scaling(self) -> Vector3 | None:
        """Return the scaling vector if set."""
        return self._load("Scaling", _VEC3, "scaling vector")

    def scaling_or_default(self) -> Vector3:
        """Return the scaling vector, or the default."""
        return self._load_or("Scaling", _VEC3, "scaling vector", Vector3(1.0, 1.0, 1.0))

    def rotation_pivot(self) -> Point3 | None:
        """Return the rotation pivot if set."""
        return self._load("TextureRotationPivot", _POINT3, "rotation pivot vector")

    def rotation_pivot_or_default(self) -> Point3:
        """Return the rotation pivot, or the default."""
        return self._load_or(
            "TextureRotationPivot", _POINT3, "rotation pivot vector", Point3(0.0, 0.0, 0.0)
        )

    def scaling_pivot(self) -> Point3 | None:
        """Return the scaling pivot if set."""
        return self._load("TextureScalingPivot", _POINT3, "scaling pivot vector")

    def scaling_pivot_or_default(self) -> Point3:
        """Return the scaling pivot, or the default."""
        return self._load_or(
            "TextureScalingPivot", _POINT3, "scaling pivot vector", Point3(0.0, 0.0, 0.0)
        )

    def uv_set(self) -> str | None:
        """Return the UV set name if set."""
        return self._load("UVSet", _STRING, "UV set name")

    def uv_set_or_default(self) -> str:
        """Return the UV set name, or the default."""
        return self._load_or("UVSet", _STRING, "UV set name", "default")