import copy

import numpy as np

from ..attributes import Attribute, attribute_type_and_size, default_value
from ..errors import BoundsViolation
from ..utils import logger, assert_type
from ..utils.enums import AttributeOwner, AttributeType, PrimitiveType


class FileInfo:
    """File-level metadata, as written by the authoring tool.

    hgeo does not use any of it. It is carried through assembly unchanged.
    """

    def __init__(
        self,
        *,
        date=None,
        time_to_cook=0.0,
        software="",
        artist="",
        hostname="",
        time=0.0,
        bounds=None,
        primcount_summary="",
        attribute_summary="",
        group_summary="",
    ):
        self.date = date
        self.time_to_cook = float(time_to_cook)
        self.software = software
        self.artist = artist
        self.hostname = hostname
        self.time = float(time)
        self.bounds = bounds
        self.primcount_summary = primcount_summary
        self.attribute_summary = attribute_summary
        self.group_summary = group_summary

    def __repr__(self):
        return f"<FileInfo from '{self.software}' by '{self.artist}' at {hex(id(self))}>"

    def copy(self):
        return copy.copy(self)


class GeometryDocument:
    """The point/vertex/primitive graph of a procedurally authored geometry.

    Vertices reference points through ``point_refs``, primitives reference
    vertices, and attributes hold the per-element data of each domain. The
    document is normally populated once by a parser, and is not modified
    during assembly.

    Parameters
    ----------
    name : str
        The name of the geometry, used as the name of the assembled mesh.
    point_count : int
        The number of points.
    point_refs : array
        For each vertex, the index of the point it references. Its length
        is the vertex count.
    primitives : list
        The primitives, in declaration order.
    attributes : list
        The attributes, in declaration order.
    point_groups, primitive_groups, edge_groups : list
        The named groups of each kind.
    file_info : FileInfo | None
        Metadata from the authoring tool.
    file_version : str
        The version of the file format the document was read from.
    has_index : bool
        Whether the file carried an index.
    """

    def __init__(
        self,
        *,
        name="",
        point_count=0,
        point_refs=(),
        primitives=(),
        attributes=(),
        point_groups=(),
        primitive_groups=(),
        edge_groups=(),
        file_info=None,
        file_version="",
        has_index=False,
    ):
        assert_type("file_info", file_info, None, FileInfo)
        self.name = name
        self.file_version = file_version
        self.has_index = bool(has_index)
        self.file_info = file_info if file_info is not None else FileInfo()

        self._point_count = int(point_count)
        self._point_refs = np.asarray(point_refs, np.int32).ravel()
        self.primitives = list(primitives)
        self._assign_primitive_ids()
        self.attributes = []
        for attribute in attributes:
            self.add_attribute(attribute)

        self.point_groups = list(point_groups)
        self.primitive_groups = list(primitive_groups)
        self.edge_groups = list(edge_groups)

    def __repr__(self):
        return (
            f"<GeometryDocument '{self.name}' with {self.point_count} points, "
            f"{self.vertex_count} vertices, {self.prim_count} primitives "
            f"at {hex(id(self))}>"
        )

    # %% Counts

    @property
    def point_count(self):
        return self._point_count

    @property
    def vertex_count(self):
        return len(self._point_refs)

    @property
    def prim_count(self):
        return len(self.primitives)

    @property
    def point_refs(self):
        """The vertex -> point index map, as an int32 array."""
        return self._point_refs

    def count(self, owner):
        """The number of elements in the domain of the given owner."""
        if owner == AttributeOwner.vertex:
            return self.vertex_count
        elif owner == AttributeOwner.point:
            return self.point_count
        elif owner == AttributeOwner.primitive:
            return self.prim_count
        elif owner == AttributeOwner.detail:
            return 1
        raise ValueError(f"Cannot count elements of owner {owner!r}")

    # %% Primitives

    def _assign_primitive_ids(self):
        # Primitives without an id get their position in the list
        for i, primitive in enumerate(self.primitives):
            if primitive.id == -1:
                primitive.id = i
        ids = sorted(p.id for p in self.primitives)
        if ids != list(range(len(ids))):
            raise ValueError(
                f"Primitive ids must be unique and in [0, {len(ids)}), got {ids}"
            )

    @property
    def poly_primitives(self):
        return [p for p in self.primitives if p.type == PrimitiveType.poly]

    @property
    def bezier_curve_primitives(self):
        return [p for p in self.primitives if p.type == PrimitiveType.bezier_curve]

    @property
    def nurb_curve_primitives(self):
        return [p for p in self.primitives if p.type == PrimitiveType.nurb_curve]

    # %% Attribute lookup

    def _find_attributes(self, name, owner, type):
        if owner not in AttributeOwner or owner == AttributeOwner.invalid:
            raise ValueError(f"Cannot look up attributes with owner {owner!r}")
        for attribute in self.attributes:
            if attribute.name != name:
                continue
            if owner != AttributeOwner.any and attribute.owner != owner:
                continue
            if type is not None and attribute.type != type:
                continue
            yield attribute

    def has_attribute(self, name, owner=AttributeOwner.any):
        """Get whether an attribute with the given name (and owner) exists."""
        return next(self._find_attributes(name, owner, None), None) is not None

    def get_attribute(self, name, owner=AttributeOwner.any, type=None):
        """Get an attribute by name, optionally constrained by owner and type.

        With owner "any", the first attribute with that name in declaration
        order is returned, even if other owners have one by the same name.
        Returns None if there is no match.
        """
        return next(self._find_attributes(name, owner, type), None)

    def attribute_names(self):
        """The names of the point and vertex attributes, in declaration order."""
        return [
            a.name
            for a in self.attributes
            if a.owner in (AttributeOwner.point, AttributeOwner.vertex)
        ]

    # %% Authoring

    def add_attribute(self, attribute):
        """Register an attribute. Names must be unique per owner."""
        assert_type("attribute", attribute, Attribute)
        if self.get_attribute(attribute.name, attribute.owner) is not None:
            raise ValueError(
                f"Document already has a {attribute.owner} attribute '{attribute.name}'"
            )
        self.attributes.append(attribute)
        return attribute

    def create_attribute(self, name, kind, owner, default=None):
        """Create and register an attribute of the given value kind.

        The attribute type and tuple size follow from the kind, and every
        element in the owner's domain gets the default value.
        """
        type, tuple_size = attribute_type_and_size(kind)
        if type == AttributeType.invalid:
            return None
        if default is None:
            default = default_value(kind)
        if not isinstance(default, (tuple, list)):
            default = (default,)
        default = tuple(default)[:tuple_size]
        if len(default) < tuple_size:
            raise ValueError(
                f"Default value for a {kind} attribute needs {tuple_size} components."
            )
        values = list(default) * self.count(owner)
        attribute = Attribute(name, type, owner, tuple_size, values)
        return self.add_attribute(attribute)

    def _grow_attributes(self, owner, n):
        for attribute in self.attributes:
            if attribute.owner == owner:
                attribute.append_default(n)

    def add_points(self, n=1):
        """Add n points. Point attributes are padded with default values.

        Returns the ids of the new points.
        """
        first = self._point_count
        self._point_count += n
        self._grow_attributes(AttributeOwner.point, n)
        logger.debug(f"Added {n} points to '{self.name}'")
        return list(range(first, first + n))

    def add_vertices(self, point_refs):
        """Add vertices referencing the given points. Vertex attributes are padded.

        Returns the ids of the new vertices.
        """
        refs = np.asarray(point_refs, np.int32).ravel()
        if len(refs) and (refs.min() < 0 or refs.max() >= self._point_count):
            raise BoundsViolation(
                f"Vertices must reference points in [0, {self._point_count})",
                size=self._point_count,
            )
        first = self.vertex_count
        self._point_refs = np.concatenate([self._point_refs, refs])
        self._grow_attributes(AttributeOwner.vertex, len(refs))
        return list(range(first, first + len(refs)))

    def add_primitive(self, primitive):
        """Add a primitive. It gets the next id and primitive attributes are padded."""
        if len(primitive.indices) and (
            primitive.indices.min() < 0 or primitive.indices.max() >= self.vertex_count
        ):
            raise BoundsViolation(
                f"Primitive vertices must be in [0, {self.vertex_count})",
                size=self.vertex_count,
            )
        primitive.id = self.prim_count
        self.primitives.append(primitive)
        self._grow_attributes(AttributeOwner.primitive, 1)
        return primitive

    # %% Checks

    def validate(self):
        """Check the structural invariants of the document.

        Raises BoundsViolation for indices that point outside their domain,
        and ValueError for attributes whose length does not match the size
        of their domain.
        """
        refs = self._point_refs
        if len(refs) and (refs.min() < 0 or refs.max() >= self._point_count):
            raise BoundsViolation(
                f"point_refs must be in [0, {self._point_count})",
                size=self._point_count,
            )
        for primitive in self.primitives:
            indices = primitive.indices
            if len(indices) and (indices.min() < 0 or indices.max() >= self.vertex_count):
                raise BoundsViolation(
                    f"Vertex indices of primitive {primitive.id} must be in "
                    f"[0, {self.vertex_count})",
                    size=self.vertex_count,
                )
            if not 0 <= primitive.id < self.prim_count:
                raise BoundsViolation(
                    f"Primitive id {primitive.id} must be in [0, {self.prim_count})",
                    primitive.id,
                    self.prim_count,
                )
        for attribute in self.attributes:
            expected = self.count(attribute.owner) * attribute.tuple_size
            if len(attribute.values) != expected:
                raise ValueError(
                    f"{attribute.owner} attribute '{attribute.name}' has "
                    f"{len(attribute.values)} values, expected {expected}"
                )
        logger.debug(f"Document '{self.name}' is valid")
