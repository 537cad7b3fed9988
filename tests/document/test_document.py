import pytest

from hgeo import (
    Attribute,
    BoundsViolation,
    FileInfo,
    GeometryDocument,
    PolyPrimitive,
    BezierCurvePrimitive,
    NurbCurvePrimitive,
)


def create_document():
    return GeometryDocument(
        name="quad",
        point_count=4,
        point_refs=[0, 1, 2, 3],
        primitives=[
            PolyPrimitive([0, 1, 2], [0, 1, 2], id=0),
            BezierCurvePrimitive([0, 1, 2, 3], order=4, id=1),
        ],
        attributes=[
            Attribute("P", "float", "point", 3, [0] * 12),
            Attribute("uv", "float", "vertex", 2, [0] * 8),
            Attribute("Cd", "float", "primitive", 3, [1] * 6),
            Attribute("Cd", "float", "point", 3, [0.5] * 12),
            Attribute("shop_materialpath", "string", "primitive", 1, ["a", "b"]),
            Attribute("varmap", "string", "detail", 1, ["x"]),
        ],
    )


def test_counts():
    doc = create_document()
    assert doc.point_count == 4
    assert doc.vertex_count == 4
    assert doc.prim_count == 2
    assert doc.count("point") == 4
    assert doc.count("vertex") == 4
    assert doc.count("primitive") == 2
    assert doc.count("detail") == 1
    with pytest.raises(ValueError):
        doc.count("any")


def test_primitive_views():
    doc = create_document()
    doc.primitives.append(NurbCurvePrimitive([0, 1], id=2))
    assert [p.id for p in doc.poly_primitives] == [0]
    assert [p.id for p in doc.bezier_curve_primitives] == [1]
    assert [p.id for p in doc.nurb_curve_primitives] == [2]
    assert doc.poly_primitives[0].type == "Poly"


def test_attribute_lookup():
    doc = create_document()

    assert doc.has_attribute("P")
    assert doc.has_attribute("P", "point")
    assert not doc.has_attribute("P", "vertex")
    assert not doc.has_attribute("N")

    # With any owner, the first one in declaration order wins
    cd = doc.get_attribute("Cd")
    assert cd.owner == "primitive"
    assert doc.get_attribute("Cd", "point").owner == "point"
    assert doc.get_attribute("Cd", "vertex") is None

    # Filter by type
    assert doc.get_attribute("shop_materialpath", type="string") is not None
    assert doc.get_attribute("shop_materialpath", type="float") is None

    with pytest.raises(ValueError):
        doc.get_attribute("P", "invalid")


def test_attribute_names():
    doc = create_document()
    # Only point and vertex attributes
    assert doc.attribute_names() == ["P", "uv", "Cd"]


def test_add_attribute_unique_per_owner():
    doc = create_document()
    with pytest.raises(ValueError):
        doc.add_attribute(Attribute("P", "float", "point", 3, [0] * 12))
    # Same name on another owner is fine
    doc.add_attribute(Attribute("P", "float", "vertex", 3, [0] * 12))
    with pytest.raises(TypeError):
        doc.add_attribute("P")


def test_create_attribute():
    doc = create_document()

    n = doc.create_attribute("N", "vec3", "point")
    assert n.type == "float"
    assert n.tuple_size == 3
    assert n.count == 4
    assert doc.get_attribute("N") is n

    alpha = doc.create_attribute("Alpha", "float", "vertex", default=1.0)
    assert alpha.values.data.tolist() == [1, 1, 1, 1]

    # Colors are created with 3 components
    color = doc.create_attribute("Cd", "color", "vertex", default=(1, 0, 0, 1))
    assert color.tuple_size == 3
    assert color.values.data.tolist() == [1, 0, 0] * 4

    name = doc.create_attribute("name", "string", "primitive")
    assert name.values.data == ["", ""]

    assert doc.create_attribute("m", "matrix3", "point") is None
    with pytest.raises(ValueError):
        doc.create_attribute("uv2", "vec2", "vertex", default=(1,))


def test_add_points_and_vertices():
    doc = create_document()

    ids = doc.add_points(2)
    assert ids == [4, 5]
    assert doc.point_count == 6
    p = doc.get_attribute("P")
    assert p.count == 6
    assert p.values.data[-6:].tolist() == [0] * 6

    ids = doc.add_vertices([4, 5, 0])
    assert ids == [4, 5, 6]
    assert doc.vertex_count == 7
    assert doc.point_refs.tolist() == [0, 1, 2, 3, 4, 5, 0]
    assert doc.get_attribute("uv").count == 7

    with pytest.raises(BoundsViolation):
        doc.add_vertices([6])
    with pytest.raises(BoundsViolation):
        doc.add_vertices([-1])
    assert doc.vertex_count == 7

    doc.validate()


def test_add_primitive():
    doc = create_document()
    prim = doc.add_primitive(PolyPrimitive([1, 2, 3], [0, 1, 2]))
    assert prim.id == 2
    assert doc.prim_count == 3
    assert doc.get_attribute("shop_materialpath").values.data == ["a", "b", ""]
    assert doc.get_attribute("Cd").count == 3

    with pytest.raises(BoundsViolation):
        doc.add_primitive(PolyPrimitive([1, 2, 4], [0, 1, 2]))

    doc.validate()


def test_validate():
    doc = create_document()
    doc.validate()

    doc = GeometryDocument(point_count=2, point_refs=[0, 1, 2])
    with pytest.raises(BoundsViolation):
        doc.validate()

    doc = GeometryDocument(
        point_count=3,
        point_refs=[0, 1, 2],
        primitives=[PolyPrimitive([0, 1, 3], [0, 1, 2], id=0)],
    )
    with pytest.raises(BoundsViolation):
        doc.validate()

    doc = GeometryDocument(
        point_count=3,
        point_refs=[0, 1, 2],
        primitives=[PolyPrimitive([0, 1, 2], [0, 1, 2])],
    )
    doc.primitives[0].id = 4
    with pytest.raises(BoundsViolation):
        doc.validate()

    doc = GeometryDocument(
        point_count=3,
        point_refs=[0, 1, 2],
        attributes=[Attribute("P", "float", "point", 3, [0] * 6)],
    )
    with pytest.raises(ValueError):
        doc.validate()


def test_poly_triangles_multiple_of_three():
    with pytest.raises(ValueError):
        PolyPrimitive([0, 1, 2], [0, 1])


def test_file_info():
    info = FileInfo(software="Houdini 19.5", artist="someone", time_to_cook=2)
    assert info.time_to_cook == 2.0
    info2 = info.copy()
    assert info2 is not info
    assert info2.software == "Houdini 19.5"
    assert info2.artist == "someone"

    doc = GeometryDocument(file_info=info)
    assert doc.file_info is info
    assert GeometryDocument().file_info is not None

    with pytest.raises(TypeError):
        GeometryDocument(file_info={"software": "x"})


def test_primitive_ids_from_constructor():
    # Primitives without an id get their position
    doc = GeometryDocument(
        point_count=3,
        point_refs=[0, 1, 2],
        primitives=[
            PolyPrimitive([0, 1, 2], [0, 1, 2]),
            PolyPrimitive([2, 1, 0], [0, 1, 2]),
        ],
    )
    assert [p.id for p in doc.primitives] == [0, 1]
    doc.validate()

    # Explicit ids may be in any order, as long as they are dense
    doc = GeometryDocument(
        point_count=3,
        point_refs=[0, 1, 2],
        primitives=[
            PolyPrimitive([0, 1, 2], [0, 1, 2], id=1),
            PolyPrimitive([2, 1, 0], [0, 1, 2], id=0),
        ],
    )
    assert [p.id for p in doc.primitives] == [1, 0]

    with pytest.raises(ValueError):
        GeometryDocument(primitives=[PolyPrimitive([], [], id=3)])
    with pytest.raises(ValueError):
        GeometryDocument(
            primitives=[PolyPrimitive([], [], id=0), PolyPrimitive([], [], id=0)]
        )
    # A missing id that collides with an explicit one
    with pytest.raises(ValueError):
        GeometryDocument(primitives=[PolyPrimitive([], [], id=1), PolyPrimitive()])
