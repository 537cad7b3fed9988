import numpy as np

from ..utils.enums import PrimitiveType


class Primitive:
    """Base class for the primitives of a document.

    A primitive references an ordered list of vertices. Its ``id`` is its
    dense index in the primitive domain, and is used to look up
    primitive-owned attribute values.
    """

    type = None

    def __init__(self, indices=(), *, id=-1):
        self.indices = np.asarray(indices, np.int32).ravel()
        self.id = int(id)

    def __repr__(self):
        return (
            f"<{self.__class__.__name__} {self.id} with {len(self.indices)}"
            f" vertices at {hex(id(self))}>"
        )

    @property
    def vertex_count(self):
        return len(self.indices)


class PolyPrimitive(Primitive):
    """A polygon face.

    Parameters
    ----------
    indices : array
        The vertex indices of the polygon, in document vertex space.
    triangles : array
        The precomputed triangulation, as a flat list of indices into the
        assembled (local) vertex array. Three per triangle.
    id : int
        The primitive id.
    """

    type = PrimitiveType.poly

    def __init__(self, indices=(), triangles=(), *, id=-1):
        super().__init__(indices, id=id)
        self.triangles = np.asarray(triangles, np.int32).ravel()
        if len(self.triangles) % 3:
            raise ValueError("The triangles of a PolyPrimitive must be a multiple of 3.")


class BezierCurvePrimitive(Primitive):
    """A Bezier curve. Only its data is carried, it is not assembled."""

    type = PrimitiveType.bezier_curve

    def __init__(self, indices=(), order=4, knots=(), *, id=-1):
        super().__init__(indices, id=id)
        self.order = int(order)
        self.knots = list(knots)


class NurbCurvePrimitive(Primitive):
    """A NURBS curve. Only its data is carried, it is not assembled."""

    type = PrimitiveType.nurb_curve

    def __init__(
        self, indices=(), order=4, knots=(), *, end_interpolation=False, id=-1
    ):
        super().__init__(indices, id=id)
        self.order = int(order)
        self.end_interpolation = bool(end_interpolation)
        self.knots = list(knots)
