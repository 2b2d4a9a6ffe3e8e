"""In-memory node tree with typed node attributes."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


class AttributeType(enum.Enum):
    """Type of a node attribute value."""

    BOOL = "bool"
    I16 = "i16"
    I32 = "i32"
    I64 = "i64"
    F32 = "f32"
    F64 = "f64"
    ARR_BOOL = "[bool]"
    ARR_I32 = "[i32]"
    ARR_I64 = "[i64]"
    ARR_F32 = "[f32]"
    ARR_F64 = "[f64]"
    BINARY = "binary"
    STRING = "string"


class AttributeTypeError(TypeError):
    """An attribute value has a different type than the one requested."""

    def __init__(self, expected: AttributeType, actual: AttributeType) -> None:
        super().__init__(
            f"expected attribute of type {expected.value} but got {actual.value}"
        )
        self.expected = expected
        self.actual = actual


@dataclass(frozen=True)
class AttributeValue:
    """A single typed node attribute."""

    kind: AttributeType
    value: Any

    def get(self, kind: AttributeType) -> Any:
        """Return the value if it has the given type, else raise AttributeTypeError."""
        if self.kind is not kind:
            raise AttributeTypeError(kind, self.kind)
        return self.value


@dataclass(eq=False)
class Node:
    """A named node holding attributes and child nodes."""

    name: str
    attributes: tuple[AttributeValue, ...] = ()
    children: list[Node] = field(default_factory=list)
    node_id: int | None = field(default=None, init=False, compare=False)

    def __post_init__(self) -> None:
        self.attributes = tuple(self.attributes)
        self.children = list(self.children)

    def children_by_name(self, name: str) -> Iterator[Node]:
        """Yield the child nodes with the given name, in order."""
        return (child for child in self.children if child.name == name)

    def first_child_by_name(self, name: str) -> Node | None:
        """Return the first child node with the given name, if any."""
        return next(self.children_by_name(name), None)


class Tree:
    """A node tree whose nodes are numbered in pre-order from the root."""

    def __init__(self, root: Node) -> None:
        self.root = root
        self._nodes: list[Node] = []
        seen: set[int] = set()
        stack: list[Node] = [root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                raise ValueError(f"node {node.name!r} appears more than once in the tree")
            seen.add(id(node))
            node.node_id = len(self._nodes)
            self._nodes.append(node)
            stack.extend(reversed(node.children))

    def node(self, node_id: int) -> Node:
        """Return the node with the given ID."""
        if not 0 <= node_id < len(self._nodes):
            raise KeyError(node_id)
        return self._nodes[node_id]

    def _all_nodes(self) -> Iterable[Node]:
        return iter(self._nodes)