import numpy as np
import pylinalg as la


class Bounds:
    """An axis-aligned bounding box (aabb).

    The aabb is a 2x3 array holding the minimum and maximum corner. Used for
    the bounds stored in a document's file info, and for the bounds that are
    derived from assembled positions.
    """

    __slots__ = ["aabb"]

    def __init__(self, aabb):
        aabb = np.asarray(aabb, dtype=float)
        if aabb.shape != (2, 3):
            raise ValueError("aabb must be 2x3 array")
        self.aabb = aabb

    def __repr__(self):
        p1 = ", ".join(f"{i:0.4g}" for i in self.aabb[0])
        p2 = ", ".join(f"{i:0.4g}" for i in self.aabb[1])
        return f"<Bounds aabb from ({p1}) to ({p2}) at {hex(id(self))}>"

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return bool(np.all(self.aabb == other.aabb))

    @property
    def min(self):
        return tuple(float(i) for i in self.aabb[0])

    @property
    def max(self):
        return tuple(float(i) for i in self.aabb[1])

    @property
    def center(self):
        aabb = self.aabb
        return tuple(float(i) for i in 0.5 * (aabb[0] + aabb[1]))

    @property
    def size(self):
        """The width, height and depth of the box."""
        aabb = self.aabb
        return tuple(float(i) for i in aabb[1] - aabb[0])

    @property
    def sphere(self):
        """The bounding sphere (x, y, z, radius) that encloses the box."""
        x, y, z, r = la.aabb_to_sphere(self.aabb)
        return float(x), float(y), float(z), float(r)

    @classmethod
    def from_center_size(cls, center, size):
        center = np.asarray(center, float)
        half = 0.5 * np.asarray(size, float)
        return cls(np.array([center - half, center + half]))

    @classmethod
    def from_points(cls, points):
        aabb = points_to_aabb(points)
        if aabb is None:
            return None
        return cls(aabb)


def points_to_aabb(points):
    """Get the 2x3 aabb of a set of 2D or 3D points, or None if there are none.

    Nonfinite points are ignored.
    """
    points = np.asarray(points)
    if not (points.ndim == 2 and points.shape[1] in (2, 3)):
        raise ValueError("Points must be a list of 2D or 3D points.")
    if points.shape[0] == 0:
        return None

    with np.errstate(invalid="ignore"):
        aabb = np.array([np.min(points, axis=0), np.max(points, axis=0)], dtype=float)
    if aabb.shape[1] == 2:
        aabb = np.column_stack([aabb, np.zeros((2, 1), float)])

    # The min/max above is a cheap way to detect nonfinite values, so only
    # filter the points themselves when needed.
    if not np.isfinite(aabb).all():
        finite_mask = np.isfinite(points).all(axis=1)
        return points_to_aabb(points[finite_mask])

    return aabb
