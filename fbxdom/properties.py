"""Property nodes, property sets and per-object property lookup."""

from __future__ import annotations

import abc
import logging
from typing import Any

from fbxdom.tree import AttributeType, AttributeTypeError, AttributeValue, Node

logger = logging.getLogger(__name__)


class PropertyError(Exception):
    """A property node does not have the expected structure."""


class LoadProperty(abc.ABC):
    """Loads a typed value from a property node."""

    @abc.abstractmethod
    def expecting(self) -> str:
        """Describe the expected value."""

    @abc.abstractmethod
    def load(self, prop: PropertyHandle) -> Any:
        """Load a value from the property, raising on failure."""


class PropertyHandle:
    """Handle of a ``P`` node under a ``Properties70`` node."""

    def __init__(self, node: Node) -> None:
        self.node = node

    @property
    def node_id(self) -> int | None:
        return self.node.node_id

    def __repr__(self) -> str:
        return f"PropertyHandle(node_id={self.node_id!r})"

    def load_value(self, loader: LoadProperty) -> Any:
        """Load a value from this property using the given loader."""
        return loader.load(self)

    def name(self) -> str:
        """Return the property name."""
        return self._string_attr(0, "name")

    def data_type(self) -> str:
        """Return the property type name."""
        return self._string_attr(1, "data type")

    def label(self) -> str:
        """Return the property label."""
        return self._string_attr(2, "label")

    def value_part(self) -> tuple[AttributeValue, ...]:
        """Return the value attributes of the property node."""
        attrs = self.node.attributes
        if len(attrs) < 4:
            logger.warning(
                "Ignoring error: Not enough node attribute for property node: "
                "node_id=%r, num_attrs=%d",
                self.node_id,
                len(attrs),
            )
            return ()
        return attrs[4:]

    def _string_attr(self, index: int, what: str) -> str:
        attrs = self.node.attributes
        if index >= len(attrs):
            raise PropertyError(
                f"Failed to get property {what}: no attribute found: "
                f"node_id={self.node_id!r}, attr_index={index}"
            )
        try:
            return attrs[index].get(AttributeType.STRING)
        except AttributeTypeError as e:
            raise PropertyError(
                f"Failed to get property {what}: expected string but got "
                f"{e.actual.value}: node_id={self.node_id!r}, attr_index={index}"
            ) from e


class PropertiesHandle:
    """Handle of a ``Properties70`` node."""

    def __init__(self, node: Node) -> None:
        self.node = node

    @property
    def node_id(self) -> int | None:
        return self.node.node_id

    def __repr__(self) -> str:
        return f"PropertiesHandle(node_id={self.node_id!r})"

    @staticmethod
    def from_node(node: Node) -> PropertiesHandle | None:
        """Return the handle of the node's ``Properties70`` child, if any."""
        child = node.first_child_by_name("Properties70")
        return PropertiesHandle(child) if child is not None else None

    def get_property(self, name: str) -> PropertyHandle | None:
        """Return the first ``P`` child whose name attribute equals ``name``."""
        for child in self.node.children_by_name("P"):
            if not child.attributes:
                logger.warning(
                    "Ignoring error for `P` node (node_id=%r): No attributes found",
                    self.node_id,
                )
                continue
            try:
                prop_name = child.attributes[0].get(AttributeType.STRING)
            except AttributeTypeError as e:
                logger.warning(
                    "Ignoring error for `P` node (node_id=%r): Expected string as "
                    "property name (first attribute), but got %s",
                    self.node_id,
                    e.actual.value,
                )
                continue
            if prop_name == name:
                return PropertyHandle(child)
        return None


class ObjectProperties:
    """Properties of an object: its own, falling back to the defaults."""

    def __init__(
        self,
        direct_props: PropertiesHandle | None,
        default_props: PropertiesHandle | None,
    ) -> None:
        self.direct_props = direct_props
        self.default_props = default_props

    def __repr__(self) -> str:
        return (
            f"ObjectProperties(direct_props={self.direct_props!r}, "
            f"default_props={self.default_props!r})"
        )

    @staticmethod
    def from_object_node(
        object_node: Node, default_props: PropertiesHandle | None
    ) -> ObjectProperties:
        """Build the properties of an object node with the given defaults."""
        return ObjectProperties(PropertiesHandle.from_node(object_node), default_props)

    def get_property(self, name: str) -> PropertyHandle | None:
        """Return the direct property, or the default one, if found."""
        prop = self.get_direct_property(name)
        if prop is None:
            prop = self.get_default_property(name)
        return prop

    def get_direct_property(self, name: str) -> PropertyHandle | None:
        """Return the object's own property if found."""
        if self.direct_props is None:
            return None
        return self.direct_props.get_property(name)

    def get_default_property(self, name: str) -> PropertyHandle | None:
        """Return the default property if found."""
        if self.default_props is None:
            return None
        return self.default_props.get_property(name)

    def has_default_properties(self) -> bool:
        """Return whether a default properties node is available."""
        return self.default_props is not None