import pytest

from fbxdom.cache import ObjectsCache
from fbxdom.nodes import (
    NodeDataError,
    SceneHandle,
    clip_content,
    clip_relative_filename,
    mesh_control_points,
    mesh_layers,
    mesh_raw_polygon_vertices,
)
from fbxdom.tree import AttributeType, AttributeValue, Node, Tree

I64 = AttributeType.I64
STRING = AttributeType.STRING


def obj_node(node_name, object_id, name, class_name, subclass, children=()):
    return Node(
        node_name,
        (
            AttributeValue(I64, object_id),
            AttributeValue(STRING, f"{name}\x00\x01{class_name}"),
            AttributeValue(STRING, subclass),
        ),
        list(children),
    )


def build(root_node):
    model = obj_node("Model", 10, "m", "Model", "Mesh")
    doc_children = [root_node] if root_node is not None else []
    doc = obj_node("Document", 1, "Scene", "Scene", "Scene", doc_children)
    root = Node("", (), [Node("Objects", (), [model]), Node("Documents", (), [doc])])
    Tree(root)
    return ObjectsCache.from_tree(Tree.__new__(Tree)) if False else _cache(root), doc, model


def _cache(root):
    tree = Tree.__new__(Tree)
    Tree.__init__(tree, root)
    return ObjectsCache.from_tree(tree)


def root_node(object_id):
    return Node("RootNode", (AttributeValue(I64, object_id),))


def test_scene_from_document_node():
    cache, doc, _ = build(root_node(10))
    scene = SceneHandle.from_node(cache, doc)
    assert scene is not None
    assert scene.node is doc


def test_scene_from_non_document_node_is_none():
    cache, _, model = build(root_node(10))
    assert SceneHandle.from_node(cache, model) is None


def test_root_object_id_and_node_id():
    cache, doc, model = build(root_node(10))
    scene = SceneHandle.from_node(cache, doc)
    assert scene.root_object_id() == 10
    assert scene.root_object_node_id() == model.node_id


def test_root_object_without_node():
    cache, doc, _ = build(root_node(999))
    scene = SceneHandle.from_node(cache, doc)
    assert scene.root_object_id() == 999
    with pytest.raises(NodeDataError, match="no corresponding node"):
        scene.root_object_node_id()


def test_missing_root_node():
    cache, doc, _ = build(None)
    scene = SceneHandle.from_node(cache, doc)
    with pytest.raises(NodeDataError, match="`RootNode` not found"):
        scene.root_object_id()


def test_root_node_without_attributes():
    cache, doc, _ = build(Node("RootNode"))
    scene = SceneHandle.from_node(cache, doc)
    with pytest.raises(NodeDataError, match="Attributes not found"):
        scene.root_object_id()


def test_root_node_wrong_type():
    cache, doc, _ = build(Node("RootNode", (AttributeValue(STRING, "x"),)))
    scene = SceneHandle.from_node(cache, doc)
    with pytest.raises(NodeDataError, match="expected `i64`"):
        scene.root_object_id()


def test_clip_relative_filename():
    clip = Node(
        "Video",
        (),
        [Node("RelativeFilename", (AttributeValue(STRING, "tex\\wood.png"),))],
    )
    assert clip_relative_filename(clip) == "tex\\wood.png"


def test_clip_relative_filename_errors():
    with pytest.raises(NodeDataError, match="not found"):
        clip_relative_filename(Node("Video"))
    with pytest.raises(NodeDataError, match="has no attributes"):
        clip_relative_filename(Node("Video", (), [Node("RelativeFilename")]))
    bad = Node("Video", (), [Node("RelativeFilename", (AttributeValue(I64, 3),))])
    with pytest.raises(NodeDataError, match="Expected string"):
        clip_relative_filename(bad)


def test_clip_content():
    data = b"\x89PNG data"
    clip = Node("Video", (), [Node("Content", (AttributeValue(AttributeType.BINARY, data),))])
    assert clip_content(clip) == data


def test_clip_content_absent_or_wrong_type():
    assert clip_content(Node("Video")) is None
    assert clip_content(Node("Video", (), [Node("Content")])) is None
    wrong = Node("Video", (), [Node("Content", (AttributeValue(STRING, "abc"),))])
    assert clip_content(wrong) is None


def test_mesh_data():
    points = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
    indices = [0, 1, -3]
    mesh = Node(
        "Geometry",
        (),
        [
            Node("Vertices", (AttributeValue(AttributeType.ARR_F64, points),)),
            Node("PolygonVertexIndex", (AttributeValue(AttributeType.ARR_I32, indices),)),
        ],
    )
    assert mesh_control_points(mesh) == tuple(points)
    assert mesh_raw_polygon_vertices(mesh) == tuple(indices)


def test_mesh_data_errors():
    with pytest.raises(NodeDataError, match="`Vertices` child node not found"):
        mesh_control_points(Node("Geometry"))
    with pytest.raises(NodeDataError, match="`PolygonVertexIndex` child node not found"):
        mesh_raw_polygon_vertices(Node("Geometry"))
    wrong = Node(
        "Geometry",
        (),
        [
            Node("Vertices", (AttributeValue(AttributeType.ARR_F32, [1.0]),)),
            Node("PolygonVertexIndex", (AttributeValue(AttributeType.ARR_I64, [1]),)),
        ],
    )
    with pytest.raises(NodeDataError, match=r"expected `\[f64\]`"):
        mesh_control_points(wrong)
    with pytest.raises(NodeDataError, match=r"expected `\[i32\]`"):
        mesh_raw_polygon_vertices(wrong)


def test_mesh_layers_in_order():
    first = Node("Layer", (AttributeValue(AttributeType.I32, 0),))
    second = Node("Layer", (AttributeValue(AttributeType.I32, 1),))
    mesh = Node("Geometry", (), [first, Node("Vertices"), second])
    layers = list(mesh_layers(mesh))
    assert layers == [first, second]
    assert list(mesh_layers(Node("Geometry"))) == []