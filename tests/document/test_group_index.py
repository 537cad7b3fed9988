import pytest

from hgeo import (
    EdgeGroup,
    GeometryDocument,
    GroupIndex,
    GroupKindMismatch,
    PointGroup,
    PrimitiveGroup,
)
from hgeo.document import Group


def create_document():
    return GeometryDocument(
        name="groups",
        point_count=3,
        point_refs=[0, 1, 2],
        point_groups=[PointGroup("top", [0, 1], [0, 1])],
        primitive_groups=[PrimitiveGroup("faces", [0])],
        edge_groups=[EdgeGroup("seam", [(0, 1), (1, 2)])],
    )


def test_get():
    doc = create_document()
    index = GroupIndex(doc)

    top = index.get("top", "points")
    assert isinstance(top, PointGroup)
    assert top.ids == [0, 1]
    assert len(index.get("seam", "edges")) == 2

    # Names are looked up per kind
    assert index.get("top", "primitives") is None
    assert index.get("nope", "points") is None

    assert index.names("points") == ["top"]
    assert index.names("edges") == ["seam"]


def test_get_or_create():
    doc = create_document()
    index = GroupIndex(doc)

    selected = index.get_or_create("Selected", "points")
    assert isinstance(selected, PointGroup)
    assert selected.name == "Selected"
    assert len(selected) == 0
    assert selected in doc.point_groups

    # A second call gives the same group
    assert index.get_or_create("Selected", "points") is selected
    assert index.names("points") == ["top", "Selected"]

    # The group is visible to other indices of the same document
    assert GroupIndex(doc).get("Selected", "points") is selected

    edges = index.get_or_create("Selected", "edges")
    assert isinstance(edges, EdgeGroup)
    assert edges is not selected


def test_invalid_kind():
    index = GroupIndex(create_document())
    with pytest.raises(ValueError):
        index.get("top", "invalid")
    with pytest.raises(ValueError):
        index.get_or_create("top", "vertices")
    with pytest.raises(ValueError):
        index.names("invalid")


def test_get_typed():
    doc = create_document()
    index = GroupIndex(doc)

    assert index.get_typed("faces", PrimitiveGroup).ids == [0]
    assert index.get_typed("faces", PrimitiveGroup, "primitives").ids == [0]
    assert index.get_typed("nope", PrimitiveGroup) is None

    with pytest.raises(GroupKindMismatch):
        index.get_typed("faces", PrimitiveGroup, "points")
    with pytest.raises(GroupKindMismatch):
        index.get_typed("faces", EdgeGroup, "primitives")
    # A mismatch is also a TypeError
    with pytest.raises(TypeError):
        index.get_typed("faces", PointGroup, "primitives")

    with pytest.raises(TypeError):
        index.get_typed("faces", Group)
    with pytest.raises(TypeError):
        index.get_typed("faces", dict)


def test_get_typed_stored_mismatch():
    doc = create_document()
    # A group of the wrong class, stored under the points kind
    doc.point_groups.append(PrimitiveGroup("odd", [1]))
    index = GroupIndex(doc)
    assert index.get("odd", "points") is not None
    with pytest.raises(GroupKindMismatch):
        index.get_typed("odd", PointGroup)
    with pytest.raises(GroupKindMismatch):
        index.get_or_create_typed("odd", PointGroup)


def test_get_or_create_typed():
    doc = create_document()
    index = GroupIndex(doc)

    group = index.get_or_create_typed("Selected", PrimitiveGroup)
    assert isinstance(group, PrimitiveGroup)
    assert group in doc.primitive_groups
    assert index.get_or_create_typed("Selected", PrimitiveGroup) is group
    assert index.get_or_create("Selected", "primitives") is group

    with pytest.raises(GroupKindMismatch):
        index.get_or_create_typed("Selected", PrimitiveGroup, "edges")
