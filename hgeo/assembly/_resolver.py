import numpy as np

from ..errors import BoundsViolation
from ..utils.enums import AttributeOwner


def _check_index(attribute, values, index):
    if not 0 <= index < len(values):
        raise BoundsViolation(
            f"Index {index} is out of range for {attribute.owner} attribute "
            f"'{attribute.name}' with {len(values)} elements",
            index,
            len(values),
        )


def _check_indices(attribute, values, indices):
    if len(indices) == 0:
        return
    lo, hi = int(indices.min()), int(indices.max())
    if lo < 0 or hi >= len(values):
        index = lo if lo < 0 else hi
        raise BoundsViolation(
            f"Index {index} is out of range for {attribute.owner} attribute "
            f"'{attribute.name}' with {len(values)} elements",
            index,
            len(values),
        )


class AttributeResolver:
    """Resolve attribute values for vertices, regardless of the attribute's owner.

    A vertex either has its own value (vertex attributes) or shares the
    value of the point it references (point attributes). Primitive and
    detail attributes are not resolved per vertex: see
    :meth:`primitive_value` and :meth:`detail_value`.

    All methods take the attribute together with its decoded values (see
    :func:`hgeo.attributes.decode`), so that decoding happens only once per
    attribute. An index outside the decoded values raises
    :class:`BoundsViolation`, it is never clamped or wrapped.

    Parameters
    ----------
    document : GeometryDocument
        The document that the vertex indices refer to.
    """

    def __init__(self, document):
        self._document = document

    @property
    def document(self):
        return self._document

    def point_index(self, vertex_index):
        """The index of the point that the given vertex references."""
        point_refs = self._document.point_refs
        if not 0 <= vertex_index < len(point_refs):
            raise BoundsViolation(
                f"Vertex {vertex_index} is out of range for a document "
                f"with {len(point_refs)} vertices",
                vertex_index,
                len(point_refs),
            )
        return int(point_refs[vertex_index])

    def point_indices(self, vertex_indices):
        """The point indices for an array of vertex indices."""
        point_refs = self._document.point_refs
        vertex_indices = np.asarray(vertex_indices, np.int64)
        if len(vertex_indices) and (
            vertex_indices.min() < 0 or vertex_indices.max() >= len(point_refs)
        ):
            raise BoundsViolation(
                f"Vertex indices must be in [0, {len(point_refs)})",
                size=len(point_refs),
            )
        return point_refs[vertex_indices].astype(np.int64)

    def value_at(self, attribute, values, vertex_index, point_index, default):
        """Get the value for a single vertex.

        Vertex attributes are indexed by vertex, point attributes by point.
        For any other owner, or when attribute is None, the default is
        returned.
        """
        if attribute is None:
            return default
        if attribute.owner == AttributeOwner.vertex:
            index = vertex_index
        elif attribute.owner == AttributeOwner.point:
            index = point_index
        else:
            return default
        _check_index(attribute, values, index)
        return values[index]

    def values_at(self, attribute, values, vertex_indices, point_indices, default):
        """Get the values for an array of vertices.

        The vectorized form of :meth:`value_at`. Returns an array with one
        row per vertex. Vertices get ``default`` where the owner cannot be
        resolved per vertex.
        """
        n = len(vertex_indices)
        if attribute is None or attribute.owner not in (
            AttributeOwner.vertex,
            AttributeOwner.point,
        ):
            dtype = None if values is None else values.dtype
            default = np.asarray(default, dtype)
            return np.broadcast_to(default, (n,) + default.shape).copy()
        if attribute.owner == AttributeOwner.vertex:
            indices = np.asarray(vertex_indices, np.int64)
        else:
            indices = np.asarray(point_indices, np.int64)
        _check_indices(attribute, values, indices)
        return values[indices]

    def primitive_value(self, attribute, values, prim_id, default):
        """Get the value for a whole primitive.

        Primitive attributes are indexed by the primitive id, and detail
        attributes give their single value. Returns the default for other
        owners, or when attribute is None.
        """
        if attribute is None:
            return default
        if attribute.owner == AttributeOwner.primitive:
            _check_index(attribute, values, prim_id)
            return values[prim_id]
        elif attribute.owner == AttributeOwner.detail:
            return self.detail_value(attribute, values, default)
        return default

    def primitive_values(self, attribute, values, prim_ids):
        """Get the values of a primitive attribute for an array of primitive ids."""
        prim_ids = np.asarray(prim_ids, np.int64)
        _check_indices(attribute, values, prim_ids)
        return values[prim_ids]

    def detail_value(self, attribute, values, default):
        """Get the document-wide value of a detail attribute."""
        if attribute is None or attribute.owner != AttributeOwner.detail:
            return default
        _check_index(attribute, values, 0)
        return values[0]
