"""
The geometry document: points, vertices, primitives, attributes and groups.

.. currentmodule:: hgeo.document

A document is the in-memory form of a procedurally authored geometry file.
Vertices reference points, primitives reference vertices, and attributes
(see :mod:`hgeo.attributes`) hold the data of each element domain.

.. autosummary::
    :toctree: document/

    GeometryDocument
    FileInfo
    PolyPrimitive
    BezierCurvePrimitive
    NurbCurvePrimitive
    PointGroup
    PrimitiveGroup
    EdgeGroup
    GroupIndex

"""

# ruff: noqa: F401

from ._primitives import (
    Primitive,
    PolyPrimitive,
    BezierCurvePrimitive,
    NurbCurvePrimitive,
)
from ._groups import Group, PointGroup, PrimitiveGroup, EdgeGroup
from ._document import FileInfo, GeometryDocument
from ._group_index import GroupIndex

__all__ = [
    "BezierCurvePrimitive",
    "EdgeGroup",
    "FileInfo",
    "GeometryDocument",
    "Group",
    "GroupIndex",
    "NurbCurvePrimitive",
    "PointGroup",
    "PolyPrimitive",
    "Primitive",
    "PrimitiveGroup",
]
