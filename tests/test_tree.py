import pytest

from fbxdom.tree import AttributeType, AttributeTypeError, AttributeValue, Node, Tree


def test_get_returns_value_of_matching_kind():
    attr = AttributeValue(AttributeType.I64, 42)
    assert attr.get(AttributeType.I64) == 42


def test_get_raises_for_other_kind():
    attr = AttributeValue(AttributeType.I64, 42)
    with pytest.raises(AttributeTypeError) as info:
        attr.get(AttributeType.STRING)
    assert info.value.expected is AttributeType.STRING
    assert info.value.actual is AttributeType.I64


def test_attribute_type_error_is_type_error():
    with pytest.raises(TypeError):
        AttributeValue(AttributeType.F32, 1.0).get(AttributeType.F64)


def test_attributes_are_stored_as_tuple():
    attrs = [AttributeValue(AttributeType.STRING, "a"), AttributeValue(AttributeType.I16, 3)]
    node = Node("N", attrs)
    assert node.attributes == tuple(attrs)


def test_children_by_name_keeps_order():
    a1 = Node("A", [AttributeValue(AttributeType.I32, 1)])
    b = Node("B")
    a2 = Node("A", [AttributeValue(AttributeType.I32, 2)])
    parent = Node("P", children=[a1, b, a2])
    assert list(parent.children_by_name("A")) == [a1, a2]
    assert list(parent.children_by_name("C")) == []


def test_first_child_by_name():
    b1 = Node("B")
    b2 = Node("B")
    parent = Node("P", children=[Node("A"), b1, b2])
    assert parent.first_child_by_name("B") is b1
    assert parent.first_child_by_name("Z") is None


def test_tree_root_has_id_zero():
    root = Node("")
    tree = Tree(root)
    assert root.node_id == 0
    assert tree.node(0) is root


def test_tree_lookup_round_trip():
    leaf = Node("Leaf")
    mid = Node("Mid", children=[leaf])
    other = Node("Other")
    root = Node("", children=[mid, other])
    tree = Tree(root)
    nodes = [root, mid, leaf, other]
    assert len({n.node_id for n in nodes}) == len(nodes)
    for n in nodes:
        assert tree.node(n.node_id) is n


def test_tree_ids_are_preorder():
    leaf = Node("Leaf")
    mid = Node("Mid", children=[leaf])
    other = Node("Other")
    root = Node("", children=[mid, other])
    Tree(root)
    assert root.node_id < mid.node_id < leaf.node_id < other.node_id


@pytest.mark.parametrize("bad_id", [-1, 5, 100])
def test_tree_unknown_id_raises(bad_id):
    tree = Tree(Node("", children=[Node("A")]))
    with pytest.raises(KeyError):
        tree.node(bad_id)


def test_tree_rejects_shared_node():
    shared = Node("S")
    root = Node("", children=[shared, shared])
    with pytest.raises(ValueError):
        Tree(root)