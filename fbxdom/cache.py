"""Cache of object metadata loaded from the node tree."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from fbxdom.tree import AttributeType, AttributeTypeError, Node, Tree

logger = logging.getLogger(__name__)

_NAME_CLASS_SEPARATOR = "\x00\x01"


class LoadError(Exception):
    """The document could not be loaded."""


class StructureError(LoadError):
    """A required toplevel node is missing."""

    def __init__(self, node_name: str) -> None:
        super().__init__(f"Missing toplevel `{node_name}` node")
        self.node_name = node_name


class ObjectMetaError(LoadError):
    """An object node has invalid metadata attributes."""

    def __init__(
        self,
        reason: str,
        message: str,
        node_id: int | None,
        object_id: int | None = None,
        other_node_id: int | None = None,
        actual_type: AttributeType | None = None,
    ) -> None:
        super().__init__(message)
        self.reason = reason
        self.node_id = node_id
        self.object_id = object_id
        self.other_node_id = other_node_id
        self.actual_type = actual_type


@dataclass(frozen=True)
class ObjectMeta:
    """Metadata of an object node."""

    object_id: int
    name: str | None
    class_name: str
    subclass_name: str


class ObjectsCache:
    """Maps object IDs to nodes and holds object metadata."""

    def __init__(self) -> None:
        self._obj_id_to_node_id: dict[int, int] = {}
        self._meta: dict[int, ObjectMeta] = {}
        self._document_nodes: list[int] = []

    @classmethod
    def from_tree(cls, tree: Tree) -> ObjectsCache:
        """Load the objects cache from the given tree."""
        logger.debug("Loading objects cache")
        cache = cls()
        cache._load_objects(tree)
        cache._load_documents(tree)
        logger.debug(
            "Loaded objects cache successfully: %d objects", len(cache._obj_id_to_node_id)
        )
        return cache

    def node_id(self, object_id: int) -> int | None:
        """Return the node ID of the object with the given ID."""
        return self._obj_id_to_node_id.get(object_id)

    def meta_from_node_id(self, node_id: int) -> ObjectMeta | None:
        """Return the metadata of the object node."""
        return self._meta.get(node_id)

    def document_nodes(self) -> tuple[int, ...]:
        """Return the node IDs of the ``Document`` nodes."""
        return tuple(self._document_nodes)

    def object_node_ids(self) -> Iterator[int]:
        """Yield the node IDs of all loaded objects."""
        return iter(list(self._meta))

    def _load_objects(self, tree: Tree) -> None:
        objects_node = tree.root.first_child_by_name("Objects")
        if objects_node is None:
            raise StructureError("Objects")
        for object_node in objects_node.children:
            self._load_object(object_node)

    def _load_documents(self, tree: Tree) -> None:
        documents_node = tree.root.first_child_by_name("Documents")
        if documents_node is None:
            raise StructureError("Documents")
        for object_node in documents_node.children_by_name("Document"):
            self._document_nodes.append(self._load_object(object_node))

    def _load_object(self, node: Node) -> int:
        node_id = node.node_id
        logger.debug("Loading object metadata, node_id=%r", node_id)
        if node_id in self._meta:
            raise RuntimeError(f"The node is already loaded: node_id={node_id!r}")

        object_id = self._load_object_id(node)
        name, class_name = self._load_name_class(node, object_id)
        subclass_name = self._load_subclass(node, object_id)

        meta = ObjectMeta(object_id, name, class_name, subclass_name)
        logger.debug("Loaded object metadata: node_id=%r, metadata=%r", node_id, meta)
        self._obj_id_to_node_id[object_id] = node_id
        self._meta[node_id] = meta
        return node_id

    def _load_object_id(self, node: Node) -> int:
        if not node.attributes:
            raise ObjectMetaError(
                "missing_id", f"Missing object ID: node_id={node.node_id!r}", node.node_id
            )
        try:
            object_id = node.attributes[0].get(AttributeType.I64)
        except AttributeTypeError as e:
            raise ObjectMetaError(
                "invalid_id_type",
                f"Invalid object ID type: node_id={node.node_id!r}, type={e.actual.value}",
                node.node_id,
                actual_type=e.actual,
            ) from e
        other = self._obj_id_to_node_id.get(object_id)
        if other is not None:
            raise ObjectMetaError(
                "duplicate_object_id",
                f"Duplicate object ID {object_id}: node_id={node.node_id!r}, "
                f"other_node_id={other!r}",
                node.node_id,
                object_id=object_id,
                other_node_id=other,
            )
        return object_id

    def _load_name_class(self, node: Node, object_id: int) -> tuple[str | None, str]:
        if len(node.attributes) < 2:
            raise ObjectMetaError(
                "missing_name_class",
                f"Missing name and class: node_id={node.node_id!r}, object_id={object_id}",
                node.node_id,
                object_id=object_id,
            )
        try:
            name_class = node.attributes[1].get(AttributeType.STRING)
        except AttributeTypeError as e:
            raise ObjectMetaError(
                "invalid_name_class_type",
                f"Invalid name and class type: node_id={node.node_id!r}, "
                f"object_id={object_id}, type={e.actual.value}",
                node.node_id,
                object_id=object_id,
                actual_type=e.actual,
            ) from e
        name, sep, class_name = name_class.partition(_NAME_CLASS_SEPARATOR)
        if not sep:
            return None, ""
        return name, class_name

    def _load_subclass(self, node: Node, object_id: int) -> str:
        if len(node.attributes) < 3:
            raise ObjectMetaError(
                "missing_subclass",
                f"Missing subclass: node_id={node.node_id!r}, object_id={object_id}",
                node.node_id,
                object_id=object_id,
            )
        try:
            return node.attributes[2].get(AttributeType.STRING)
        except AttributeTypeError as e:
            raise ObjectMetaError(
                "invalid_subclass_type",
                f"Invalid subclass type: node_id={node.node_id!r}, "
                f"object_id={object_id}, type={e.actual.value}",
                node.node_id,
                object_id=object_id,
                actual_type=e.actual,
            ) from e