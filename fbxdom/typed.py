"""Classification of object nodes into typed object categories."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Union


class ObjectCategory(enum.Enum):
    """Category of an object node, decided by its node name and class."""

    DEFORMER = "Deformer"
    GEOMETRY = "Geometry"
    MATERIAL = "Material"
    MODEL = "Model"
    NODE_ATTRIBUTE = "NodeAttribute"
    SUB_DEFORMER = "SubDeformer"
    TEXTURE = "Texture"
    VIDEO = "Video"
    UNKNOWN = None


class DeformerKind(enum.Enum):
    """Kind of a ``Deformer`` object."""

    BLEND_SHAPE = "BlendShape"
    SKIN = "Skin"
    UNKNOWN = None


class SubDeformerKind(enum.Enum):
    """Kind of a ``SubDeformer`` object."""

    BLEND_SHAPE_CHANNEL = "BlendShapeChannel"
    CLUSTER = "Cluster"
    UNKNOWN = None


class GeometryKind(enum.Enum):
    """Kind of a ``Geometry`` object."""

    MESH = "Mesh"
    SHAPE = "Shape"
    UNKNOWN = None


class ModelKind(enum.Enum):
    """Kind of a ``Model`` object."""

    CAMERA = "Camera"
    LIGHT = "Light"
    LIMB_NODE = "LimbNode"
    MESH = "Mesh"
    NULL = "Null"
    UNKNOWN = None


class NodeAttributeKind(enum.Enum):
    """Kind of a ``NodeAttribute`` object."""

    CAMERA = "Camera"
    LIGHT = "Light"
    LIMB_NODE = "LimbNode"
    NULL = "Null"
    UNKNOWN = None


class VideoKind(enum.Enum):
    """Kind of a ``Video`` object."""

    CLIP = "Clip"
    UNKNOWN = None


Kind = Union[
    DeformerKind,
    SubDeformerKind,
    GeometryKind,
    ModelKind,
    NodeAttributeKind,
    VideoKind,
]


@dataclass(frozen=True)
class TypedObject:
    """The category of an object and, where the category has kinds, its kind."""

    category: ObjectCategory
    kind: Kind | None = None

    @property
    def is_unknown(self) -> bool:
        """Whether either the category or the kind is not recognised."""
        if self.category is ObjectCategory.UNKNOWN:
            return True
        return self.kind is not None and self.kind.value is None


def _resolve(kind_cls: type, expected_class: str, class_name: str, subclass_name: str):
    if class_name == expected_class and isinstance(subclass_name, str):
        try:
            return kind_cls(subclass_name)
        except ValueError:
            pass
    return kind_cls.UNKNOWN


# Node name -> (category, kind enum, class expected for a known kind).
_KINDED: dict[str, tuple[ObjectCategory, type, str]] = {
    "Geometry": (ObjectCategory.GEOMETRY, GeometryKind, "Geometry"),
    "Model": (ObjectCategory.MODEL, ModelKind, "Model"),
    "NodeAttribute": (ObjectCategory.NODE_ATTRIBUTE, NodeAttributeKind, "NodeAttribute"),
    "Video": (ObjectCategory.VIDEO, VideoKind, "Video"),
}

_KINDLESS: dict[str, ObjectCategory] = {
    "Material": ObjectCategory.MATERIAL,
    "Texture": ObjectCategory.TEXTURE,
}


def classify(node_name: str, class_name: str, subclass_name: str) -> TypedObject:
    """Classify an object node by its node name, class and subclass."""
    if node_name == "Deformer":
        if class_name == "Deformer":
            return TypedObject(
                ObjectCategory.DEFORMER,
                _resolve(DeformerKind, "Deformer", class_name, subclass_name),
            )
        if class_name == "SubDeformer":
            return TypedObject(
                ObjectCategory.SUB_DEFORMER,
                _resolve(SubDeformerKind, "SubDeformer", class_name, subclass_name),
            )
        return TypedObject(ObjectCategory.UNKNOWN)
    if node_name in _KINDED:
        category, kind_cls, expected_class = _KINDED[node_name]
        return TypedObject(
            category, _resolve(kind_cls, expected_class, class_name, subclass_name)
        )
    if node_name in _KINDLESS:
        return TypedObject(_KINDLESS[node_name])
    return TypedObject(ObjectCategory.UNKNOWN)