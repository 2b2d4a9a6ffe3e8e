"""Data accessors for scene, video clip and geometry mesh nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from fbxdom.cache import ObjectsCache
from fbxdom.tree import AttributeType, AttributeTypeError, AttributeValue, Node


class NodeDataError(ValueError):
    """A node does not hold the data expected of it."""


def _first_attribute(node: Node, child_name: str, what: str) -> AttributeValue:
    child = node.first_child_by_name(child_name)
    if child is None:
        raise NodeDataError(f"`{child_name}` child node not found for {what}")
    if not child.attributes:
        raise NodeDataError(f"`{child_name}` node has no attributes")
    return child.attributes[0]


@dataclass(frozen=True)
class SceneHandle:
    """Handle of a ``Document`` node, which names the root object of a scene."""

    cache: ObjectsCache
    node: Node

    @staticmethod
    def from_node(cache: ObjectsCache, node: Node) -> SceneHandle | None:
        """Return a scene handle if the node is a loaded ``Document`` node."""
        if node.node_id not in cache.document_nodes():
            return None
        return SceneHandle(cache, node)

    def root_object_id(self) -> int:
        """Return the root object ID of the scene."""
        root = self.node.first_child_by_name("RootNode")
        if root is None:
            raise NodeDataError("`RootNode` not found for scene object node")
        if not root.attributes:
            raise NodeDataError("Attributes not found for `RootNode`")
        try:
            return root.attributes[0].get(AttributeType.I64)
        except AttributeTypeError as e:
            raise NodeDataError(
                "Unexpected attribute type for `RootNode`: expected `i64` but got "
                f"{e.actual.value}"
            ) from e

    def root_object_node_id(self) -> int:
        """Return the node ID of the scene's root object.

        Raises NodeDataError if the root object has no node, which can
        happen in valid data.
        """
        object_id = self.root_object_id()
        node_id = self.cache.node_id(object_id)
        if node_id is None:
            raise NodeDataError(
                "Root object of the scene has no corresponding node: "
                f"object_id={object_id!r}"
            )
        return node_id


def clip_relative_filename(node: Node) -> str:
    """Return the raw relative filename of a video clip node.

    The path separator may be a slash or a backslash.
    """
    attr = _first_attribute(node, "RelativeFilename", "video clip object")
    try:
        return attr.get(AttributeType.STRING)
    except AttributeTypeError as e:
        raise NodeDataError(
            f"Expected string as `RelativeFilename` value, but got {e.actual.value}"
        ) from e


def clip_content(node: Node) -> bytes | None:
    """Return the embedded content of a video clip node, if present."""
    child = node.first_child_by_name("Content")
    if child is None or not child.attributes:
        return None
    try:
        return bytes(child.attributes[0].get(AttributeType.BINARY))
    except AttributeTypeError:
        return None


def mesh_control_points(node: Node) -> tuple[float, ...]:
    """Return the flat control point coordinates of a geometry mesh node."""
    attr = _first_attribute(node, "Vertices", "geometry mesh")
    try:
        return tuple(float(v) for v in attr.get(AttributeType.ARR_F64))
    except AttributeTypeError as e:
        raise NodeDataError(
            "`Vertices` has wrong type attribute: expected `[f64]` but got "
            f"{e.actual.value}"
        ) from e


def mesh_raw_polygon_vertices(node: Node) -> tuple[int, ...]:
    """Return the raw polygon vertex indices of a geometry mesh node."""
    attr = _first_attribute(node, "PolygonVertexIndex", "geometry mesh")
    try:
        return tuple(int(v) for v in attr.get(AttributeType.ARR_I32))
    except AttributeTypeError as e:
        raise NodeDataError(
            "`PolygonVertexIndex` has wrong type attribute: expected `[i32]` but got "
            f"{e.actual.value}"
        ) from e


def mesh_layers(node: Node) -> Iterator[Node]:
    """Yield the ``Layer`` child nodes of a geometry mesh node."""
    return node.children_by_name("Layer")