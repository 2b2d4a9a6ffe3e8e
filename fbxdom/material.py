"""Material property accessors with their defaults."""

from __future__ import annotations

from typing import Any

from fbxdom.loaders import F64ArrLoader, Primitive, PrimitiveLoader, PropertyLoadError
from fbxdom.properties import LoadProperty, ObjectProperties, PropertyError, PropertyHandle
from fbxdom.vector_loaders import RGB, Element, RgbLoader

_BOOL = PrimitiveLoader(Primitive.BOOL)
_F64 = PrimitiveLoader(Primitive.F64)
_RGB = RgbLoader(RGB, Element.F64)
_ARR3 = F64ArrLoader(3)


def select_material_properties(
    phong: ObjectProperties, lambert: ObjectProperties
) -> MaterialProperties:
    """Pick the Phong properties if they have defaults, otherwise the Lambert ones."""
    if phong.has_default_properties():
        return MaterialProperties(phong)
    return MaterialProperties(lambert)


class MaterialProperties:
    """Typed access to the properties of a material."""

    def __init__(self, properties: ObjectProperties) -> None:
        self.properties = properties

    def __repr__(self) -> str:
        return f"MaterialProperties({self.properties!r})"

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

    def multi_layer(self) -> bool | None:
        """Return the multi layer flag if set."""
        return self._load("MultiLayer", _BOOL, "multi layer flag")

    def multi_layer_or_default(self) -> bool:
        """Return the multi layer flag, or the default."""
        return self._load_or("MultiLayer", _BOOL, "multi layer flag", False)

    def emissive_color(self) -> RGB | None:
        """Return the emissive color if set."""
        return self._load("EmissiveColor", _RGB, "emissive color")

    def emissive_color_or_default(self) -> RGB:
        """Return the emissive color, or the default."""
        return self._load_or("EmissiveColor", _RGB, "emissive color", RGB(0.0, 0.0, 0.0))

    def emissive_factor(self) -> float | None:
        """Return the emissive factor if set."""
        return self._load("EmissiveFactor", _F64, "emissive factor")

    def emissive_factor_or_default(self) -> float:
        """Return the emissive factor, or the default."""
        return self._load_or("EmissiveFactor", _F64, "emissive factor", 1.0)

    def ambient_color(self) -> RGB | None:
        """Return the ambient color if set."""
        return self._load("AmbientColor", _RGB, "ambient color")

    def ambient_color_or_default(self) -> RGB:
        """Return the ambient color, or the default."""
        return self._load_or("AmbientColor", _RGB, "ambient color", RGB(0.2, 0.2, 0.2))

    def ambient_factor(self) -> float | None:
        """Return the ambient factor if set."""
        return self._load("AmbientFactor", _F64, "ambient factor")

    def ambient_factor_or_default(self) -> float:
        """Return the ambient factor, or the default."""
        return self._load_or("AmbientFactor", _F64, "ambient factor", 1.0)

    def diffuse_color(self) -> RGB | None:
        """Return the diffuse color if set."""
        return self._load("DiffuseColor", _RGB, "diffuse color")

    def diffuse_color_or_default(self) -> RGB:
        """Return the diffuse color, or the default."""
        return self._load_or("DiffuseColor", _RGB, "diffuse color", RGB(0.8, 0.8, 0.8))

    def diffuse_factor(self) -> float | None:
        """Return the diffuse factor if set."""
        return self._load("DiffuseFactor", _F64, "diffuse factor")

    def diffuse_factor_or_default(self) -> float:
        """Return the diffuse factor, or the default."""
        return self._load_or("DiffuseFactor", _F64, "diffuse factor", 1.0)

    def bump(self) -> tuple[float, ...] | None:
        """Return the bump vector if set."""
        return self._load("Bump", _ARR3, "bump vector")

    def bump_or_default(self) -> tuple[float, ...]:
        """Return the bump vector, or the default."""
        return self._load_or("Bump", _ARR3, "bump vector", (0.0, 0.0, 0.0))

    def bump_factor(self) -> float | None:
        """Return the bump factor if set."""
        return self._load("BumpFactor", _F64, "bump factor")

    def bump_factor_or_default(self) -> float:
        """Return the bump factor, or the default."""
        return self._load_or("BumpFactor", _F64, "bump factor", 1.0)

    def normal_map(self) -> tuple[float, ...] | None:
        """Return the normal map vector if set."""
        return self._load("NormalMap", _ARR3, "normal map")

    def normal_map_or_default(self) -> tuple[float, ...]:
        """Return the normal map vector, or the default."""
        return self._load_or("NormalMap", _ARR3, "normal map", (0.0, 0.0, 0.0))

    def transparent_color(self) -> RGB | None:
        """Return the transparent color if set."""
        return self._load("TransparentColor", _RGB, "transparent color")

    def transparent_color_or_default(self) -> RGB:
        """Return the transparent color, or the default."""
        return self._load_or(
            "TransparentColor", _RGB, "transparent color", RGB(0.0, 0.0, 0.0)
        )

    def transparency_factor(self) -> float | None:
        """Return the transparency factor if set."""
        return self._load("TransparencyFactor", _F64, "transparency factor")

    def transparency_factor_or_default(self) -> float:
        """Return the transparency factor, or the default."""
        return self._load_or("TransparencyFactor", _F64, "transparency factor", 0.0)

    def displacement_color(self) -> RGB | None:
        """Return the displacement color if set."""
        return self._load("DisplacementColor", _RGB, "displacement color")

    def displacement_color_or_default(self) -> RGB:
        """Return the displacement color, or the default."""
        return self._load_or(
            "DisplacementColor", _RGB, "displacement color", RGB(0.0, 0.0, 0.0)
        )

    def displacement_factor(self) -> float | None:
        """Return the displacement factor if set."""
        return self._load("DisplacementFactor", _F64, "displacement factor")

    def displacement_factor_or_default(self) -> float:
        """Return the displacement factor, or the default."""
        return self._load_or("DisplacementFactor", _F64, "displacement factor", 1.0)

    def vector_displacement_color(self) -> RGB | None:
        """Return the vector displacement color if set."""
        return self._load("VectorDisplacementColor", _RGB, "vector displacement color")

    def vector_displacement_color_or_default(self) -> RGB:
        """Return the vector displacement color, or the default."""
        return self._load_or(
            "VectorDisplacementColor",
            _RGB,
            "vector displacement color",
            RGB(0.0, 0.0, 0.0),
        )

    def vector_displacement_factor(self) -> float | None:
        """Return the vector displacement factor if set."""
        return self._load("VectorDisplacementFactor", _F64, "vector displacement factor")

    def vector_displacement_factor_or_default(self) -> float:
        """Return the vector displacement factor, or the default."""
        return self._load_or(
            "VectorDisplacementFactor", _F64, "vector displacement factor", 1.0
        )

    def specular(self) -> RGB | None:
        """Return the specular color if set."""
        return self._load("SpecularColor", _RGB, "specular color")

    def specular_or_default(self) -> RGB:
        """Return the specular color, or the default."""
        return self._load_or("SpecularColor", _RGB, "specular color", RGB(0.2, 0.2, 0.2))

    def specular_factor(self) -> float | None:
        """Return the specular factor if set."""
        return self._load("SpecularFactor", _F64, "specular factor")

    def specular_factor_or_default(self) -> float:
        """Return the specular factor, or the default."""
        return self._load_or("SpecularFactor", _F64, "specular factor", 1.0)

    def shininess(self) -> float | None:
        """Return the shininess exponent if set."""
        return self._load("ShininessExponent", _F64, "shininess")

    def shininess_or_default(self) -> float:
        """Return the shininess exponent, or the default."""
        return self._load_or("ShininessExponent", _F64, "shininess", 20.0)

    def reflection(self) -> RGB | None:
        """Return the reflection color if set."""
        return self._load("ReflectionColor", _RGB, "reflection color")

    def reflection_or_default(self) -> RGB:
        """Return the reflection color, or the default."""
        return self._load_or(
            "ReflectionColor", _RGB, "reflection color", RGB(0.2, 0.2, 0.2)
        )

    def reflection_factor(self) -> float | None:
        """Return the reflection factor if set."""
        return self._load("ReflectionFactor", _F64, "reflection factor")

    def reflection_factor_or_default(self) -> float:
        """Return the reflection factor, or the default."""
        return self._load_or("ReflectionFactor", _F64, "reflection factor", 1.0)