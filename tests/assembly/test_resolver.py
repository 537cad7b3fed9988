import numpy as np
import pytest

from hgeo import Attribute, AttributeResolver, BoundsViolation, GeometryDocument, decode


def create_document():
    # Two triangles sharing an edge: 4 points, 6 vertices
    return GeometryDocument(
        name="pair",
        point_count=4,
        point_refs=[0, 1, 2, 2, 1, 3],
        attributes=[
            Attribute("P", "float", "point", 3, np.arange(12)),
            Attribute("uv", "float", "vertex", 2, np.arange(12)),
            Attribute("Cd", "float", "primitive", 3, [1, 0, 0, 0, 1, 0]),
            Attribute("scale", "float", "detail", 1, [2.5]),
        ],
    )


def test_point_index():
    resolver = AttributeResolver(create_document())
    assert resolver.point_index(0) == 0
    assert resolver.point_index(3) == 2
    assert resolver.point_index(5) == 3
    assert resolver.point_indices([5, 4, 3]).tolist() == [3, 1, 2]

    with pytest.raises(BoundsViolation):
        resolver.point_index(6)
    with pytest.raises(BoundsViolation):
        resolver.point_index(-1)
    with pytest.raises(BoundsViolation):
        resolver.point_indices([0, 6])


def test_value_at_point_and_vertex():
    doc = create_document()
    resolver = AttributeResolver(doc)
    p = doc.get_attribute("P")
    uv = doc.get_attribute("uv")
    pvalues = decode(p, "vec3")
    uvvalues = decode(uv, "vec2")

    # Point attributes are indexed by point, vertex attributes by vertex
    vertex = 4
    point = resolver.point_index(vertex)
    assert resolver.value_at(p, pvalues, vertex, point, None).tolist() == [3, 4, 5]
    assert resolver.value_at(uv, uvvalues, vertex, point, None).tolist() == [8, 9]

    # Vertices that share a point share its value
    a = resolver.value_at(p, pvalues, 2, resolver.point_index(2), None)
    b = resolver.value_at(p, pvalues, 3, resolver.point_index(3), None)
    assert a.tolist() == b.tolist()


def test_value_at_defaults():
    doc = create_document()
    resolver = AttributeResolver(doc)
    cd = doc.get_attribute("Cd")
    cdvalues = decode(cd, "color")

    default = (1.0, 1.0, 1.0, 1.0)
    assert resolver.value_at(None, None, 0, 0, default) == default
    assert resolver.value_at(cd, cdvalues, 0, 0, default) == default


def test_value_at_out_of_range():
    doc = create_document()
    resolver = AttributeResolver(doc)
    p = doc.get_attribute("P")
    pvalues = decode(p, "vec3")
    with pytest.raises(BoundsViolation) as err:
        resolver.value_at(p, pvalues, 0, 4, None)
    assert err.value.index == 4
    assert err.value.size == 4
    # Negative indices are not wrapped
    with pytest.raises(BoundsViolation):
        resolver.value_at(p, pvalues, 0, -1, None)


def test_values_at():
    doc = create_document()
    resolver = AttributeResolver(doc)
    p = doc.get_attribute("P")
    uv = doc.get_attribute("uv")
    vertices = np.array([0, 1, 2, 3, 4, 5])
    points = resolver.point_indices(vertices)

    positions = resolver.values_at(p, decode(p, "vec3"), vertices, points, None)
    assert positions.shape == (6, 3)
    assert positions[:, 0].tolist() == [0, 3, 6, 6, 3, 9]

    uvs = resolver.values_at(uv, decode(uv, "vec2"), vertices, points, None)
    assert uvs[:, 0].tolist() == [0, 2, 4, 6, 8, 10]

    # Unresolvable owners get the default, with the dtype of the values
    cd = doc.get_attribute("Cd")
    cdvalues = decode(cd, "color")
    colors = resolver.values_at(cd, cdvalues, vertices, points, np.ones(4))
    assert colors.shape == (6, 4)
    assert colors.dtype == np.float32
    assert np.all(colors == 1)

    # The result can be written to
    colors[0] = 0
    assert colors[1].tolist() == [1, 1, 1, 1]

    with pytest.raises(BoundsViolation):
        resolver.values_at(p, decode(p, "vec3"), vertices, [0, 1, 2, 3, 4, 5], None)
    with pytest.raises(BoundsViolation):
        resolver.values_at(uv, decode(uv, "vec2"), [-1], [0], None)


def test_primitive_and_detail_values():
    doc = create_document()
    resolver = AttributeResolver(doc)
    cd = doc.get_attribute("Cd")
    cdvalues = decode(cd, "vec3")
    scale = doc.get_attribute("scale")
    scalevalues = decode(scale, "float")

    assert resolver.primitive_value(cd, cdvalues, 1, None).tolist() == [0, 1, 0]
    assert resolver.primitive_value(scale, scalevalues, 1, None) == 2.5
    assert resolver.primitive_value(None, None, 1, "x") == "x"
    p = doc.get_attribute("P")
    assert resolver.primitive_value(p, decode(p, "vec3"), 1, "x") == "x"
    with pytest.raises(BoundsViolation):
        resolver.primitive_value(cd, cdvalues, 2, None)

    values = resolver.primitive_values(cd, cdvalues, [1, 1, 0])
    assert values.tolist() == [[0, 1, 0], [0, 1, 0], [1, 0, 0]]

    assert resolver.detail_value(scale, scalevalues, 0) == 2.5
    assert resolver.detail_value(cd, cdvalues, 0) == 0
    assert resolver.detail_value(None, None, 7) == 7
