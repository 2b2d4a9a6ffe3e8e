# fbxdom

`fbxdom` gives object-level access to an FBX 7.4 node tree held in memory.
It reads object metadata from the `Objects` and `Documents` sections, sorts
objects into categories (models, geometries, deformers, sub-deformers,
materials, textures, videos, node attributes), and loads values out of
`Properties70` property nodes with type-checked loaders.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `fbxdom.tree` — the node tree. A `Node` has a `name`, a tuple of
  `AttributeValue`s and a list of child nodes. `AttributeValue(kind, value)`
  pairs an `AttributeType` with a value; `AttributeValue.get(kind)` returns
  the value or raises `AttributeTypeError`. `Tree(root)` numbers every node
  in pre-order (stored as `node.node_id`) and `Tree.node(node_id)` looks one
  up.
- `fbxdom.cache` — `ObjectsCache.from_tree(tree)` reads every child of
  `Objects` and every `Document` child of `Documents`. Each object node must
  carry an `i64` object ID, a `"name\x00\x01class"` string and a subclass
  string; the result is an `ObjectMeta(object_id, name, class_name,
  subclass_name)`. Look-ups: `node_id(object_id)`,
  `meta_from_node_id(node_id)`, `document_nodes()` and `object_node_ids()`.
  A missing section raises `StructureError`; a malformed or duplicate object
  raises `ObjectMetaError` (both are `LoadError`s).
- `fbxdom.typed` — `classify(node_name, class_name, subclass_name)` returns
  a `TypedObject` with an `ObjectCategory` and, for categories that have
  them, a kind (`DeformerKind`, `SubDeformerKind`, `GeometryKind`,
  `ModelKind`, `NodeAttributeKind`, `VideoKind`). Unrecognised names give
  `UNKNOWN` members; `TypedObject.is_unknown` reports either case.
- `fbxdom.properties` — `PropertiesHandle` wraps a `Properties70` node and
  finds `P` nodes by name with `get_property(name)`. `PropertyHandle` gives
  a property's `name()`, `data_type()`, `label()` and `value_part()` (the
  attributes from the fifth on), and `load_value(loader)`.
  `ObjectProperties(direct_props, default_props)` looks a property up on the
  object first and then in the default set; `from_object_node(node,
  default_props)` takes the object's own `Properties70` child. `LoadProperty`
  is the base class for loaders.
- `fbxdom.loaders` — `PrimitiveLoader(Primitive.X)` for booleans, integers
  and floats, with widening conversions (integers into booleans and wider
  integers, `f32` and `f64` both ways); `StrictF32Loader` and
  `StrictF64Loader`, which take only their own float type; `StringLoader`;
  `BinaryLoader`; and `F64ArrLoader(length)` for 2, 3, 4 or 16 `f64` values.
  `check_attrs_len` checks the number of values. Failures raise
  `PropertyLoadError`.
- `fbxdom.vector_loaders` — `MintLoader(target, element)` loads `Point2`,
  `Point3`, `Vector2`, `Vector3`, `Vector4`, `ColumnMatrix4` or `RowMatrix4`;
  `RgbLoader(target, element)` loads `RGB` or `RGBA`. `element` is
  `Element.F32` or `Element.F64` (the default) and is never converted.
- `fbxdom.nodes` — `SceneHandle.from_node(cache, node)` for `Document`
  nodes, with `root_object_id()` and `root_object_node_id()`;
  `clip_relative_filename(node)` and `clip_content(node)` for video clips;
  `mesh_control_points(node)`, `mesh_raw_polygon_vertices(node)` and
  `mesh_layers(node)` for geometry meshes. Missing or mistyped data raises
  `NodeDataError`.
- `fbxdom.material` and `fbxdom.texture` — `MaterialProperties` and
  `TextureProperties` offer each known property twice: the plain method
  returns `None` when the property is absent, the `*_or_default` method
  returns the FBX default instead. `select_material_properties(phong,
  lambert)` picks the Phong set when it has default properties, otherwise
  the Lambert set.

## Example

```python
from fbxdom.cache import ObjectsCache
from fbxdom.material import MaterialProperties
from fbxdom.properties import ObjectProperties
from fbxdom.tree import AttributeType, AttributeValue, Node, Tree
from fbxdom.typed import classify


def s(text):
    return AttributeValue(AttributeType.STRING, text)


def f(number):
    return AttributeValue(AttributeType.F64, number)


diffuse = Node("P", (s("DiffuseColor"), s("Color"), s(""), s("A"), f(1.0), f(0.5), f(0.0)))
material = Node(
    "Material",
    (AttributeValue(AttributeType.I64, 1), s("Wood\x00\x01Material"), s("")),
    [Node("Properties70", (), [diffuse])],
)
tree = Tree(Node("", (), [Node("Objects", (), [material]), Node("Documents")]))

cache = ObjectsCache.from_tree(tree)
node = tree.node(cache.node_id(1))
meta = cache.meta_from_node_id(node.node_id)
print(meta.name)                                   # Wood
print(classify(node.name, meta.class_name, meta.subclass_name).category)
                                                   # ObjectCategory.MATERIAL

props = MaterialProperties(ObjectProperties.from_object_node(node, None))
print(props.diffuse_color())                       # RGB(r=1.0, g=0.5, b=0.0)
print(props.shininess_or_default())                # 20.0
```

## What it does not do

- It does not read FBX files. The `Tree` must be built from `Node` and
  `AttributeValue` objects by the caller.
- It does not follow object connections: there is no way to ask for a
  model's parent or children, a mesh's materials, a material's textures or a
  texture's video clip.
- It does not read the `Definitions` section. Default property sets are
  passed in by the caller as a `PropertiesHandle`, or `None`.
- It has no loaders for shading model, wrap mode or blend mode values, and
  no way to interpret mesh layers beyond returning the `Layer` nodes.