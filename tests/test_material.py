import pytest

from fbxdom.loaders import PropertyLoadError
from fbxdom.material import MaterialProperties, select_material_properties
from fbxdom.properties import ObjectProperties, PropertiesHandle
from fbxdom.tree import AttributeType, AttributeValue, Node
from fbxdom.vector_loaders import RGB


def _s(text):
    return AttributeValue(AttributeType.STRING, text)


def _f64(value):
    return AttributeValue(AttributeType.F64, value)


def _prop(name, *values):
    return Node("P", (_s(name), _s("type"), _s(""), _s("A"), *values))


def _props(*props):
    return PropertiesHandle(Node("Properties70", children=list(props)))


def _material(direct=None, default=None):
    return MaterialProperties(ObjectProperties(direct, default))


def test_missing_values_are_none():
    mat = _material()
    assert mat.diffuse_color() is None
    assert mat.shininess() is None
    assert mat.multi_layer() is None


def test_defaults_fixed_by_source():
    mat = _material()
    assert mat.diffuse_color_or_default() == RGB(0.8, 0.8, 0.8)
    assert mat.ambient_color_or_default() == RGB(0.2, 0.2, 0.2)
    assert mat.shininess_or_default() == 20.0
    assert mat.transparency_factor_or_default() == 0.0
    assert mat.multi_layer_or_default() is False
    assert mat.bump_or_default() == (0.0, 0.0, 0.0)


def test_direct_property_loaded():
    direct = _props(_prop("DiffuseColor", _f64(0.1), _f64(0.2), _f64(0.3)))
    mat = _material(direct=direct)
    assert mat.diffuse_color() == RGB(0.1, 0.2, 0.3)
    assert mat.diffuse_color_or_default() == RGB(0.1, 0.2, 0.3)


def test_default_property_fallback_and_direct_override():
    default = _props(
        _prop("ShininessExponent", _f64(5.0)),
        _prop("SpecularFactor", _f64(0.5)),
    )
    direct = _props(_prop("ShininessExponent", _f64(7.0)))
    mat = _material(direct=direct, default=default)
    assert mat.shininess() == 7.0
    assert mat.specular_factor_or_default() == 0.5


def test_bool_from_integer():
    direct = _props(_prop("MultiLayer", AttributeValue(AttributeType.I32, 1)))
    assert _material(direct=direct).multi_layer() is True


def test_wrong_type_raises_with_description():
    direct = _props(_prop("DiffuseColor", _f64(0.1), _f64(0.2)))
    with pytest.raises(PropertyLoadError, match="Failed to load diffuse color"):
        _material(direct=direct).diffuse_color()


def test_bump_rejects_f32():
    f32 = AttributeValue(AttributeType.F32, 1.0)
    direct = _props(_prop("Bump", f32, f32, f32))
    with pytest.raises(PropertyLoadError, match="bump vector"):
        _material(direct=direct).bump_or_default()


def test_select_prefers_phong_with_defaults():
    phong = ObjectProperties(None, _props(_prop("ShininessExponent", _f64(3.0))))
    lambert = ObjectProperties(None, None)
    selected = select_material_properties(phong, lambert)
    assert selected.properties is phong
    assert selected.shininess() == 3.0


def test_select_falls_back_to_lambert():
    phong = ObjectProperties(_props(), None)
    lambert = ObjectProperties(None, _props(_prop("DiffuseFactor", _f64(0.25))))
    selected = select_material_properties(phong, lambert)
    assert selected.properties is lambert
    assert selected.diffuse_factor() == 0.25