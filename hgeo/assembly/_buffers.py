import numpy as np


class Submesh:
    """A partition of the triangle indices that shares one material name."""

    __slots__ = ["material_name", "indices"]

    def __init__(self, material_name, indices):
        self.material_name = material_name
        self.indices = np.asarray(indices, np.int32).ravel()

    def __repr__(self):
        return (
            f"<Submesh '{self.material_name}' with {len(self.indices) // 3}"
            f" triangles at {hex(id(self))}>"
        )

    def __eq__(self, other):
        if not isinstance(other, Submesh):
            return NotImplemented
        return self.material_name == other.material_name and np.array_equal(
            self.indices, other.indices
        )

    @property
    def triangle_count(self):
        return len(self.indices) // 3


class MeshBuffers:
    """The render buffers assembled from a geometry document.

    All per-vertex arrays have one row per assembled vertex. Channels that
    were not authored are None (or absent from ``uvs``), they are never
    zero-filled.

    Attributes
    ----------
    name : str
        The name of the mesh.
    positions : ndarray
        Nx3 float32 positions.
    normals : ndarray | None
        Nx3 float32 normals. Generated from the triangles when no normal
        attribute is authored (see ``normals_generated``).
    tangents : ndarray | None
        Nx4 float32 tangents.
    colors : ndarray | None
        Nx4 float32 rgba colors.
    uvs : dict
        Maps uv set index (0-7) to an Nx2 float32 array. Sparse.
    submeshes : list
        The :class:`Submesh` objects, in order of first use of their material.
    bounds : Bounds | None
        The bounds of the positions, None if there are no vertices.
    normals_generated : bool
        Whether the normals were computed rather than authored.
    file_info : FileInfo | None
        A copy of the document's file info.
    diagnostics : list
        The :class:`Diagnostic` objects recorded during assembly.
    """

    def __init__(
        self,
        *,
        name="",
        positions=None,
        normals=None,
        tangents=None,
        colors=None,
        uvs=None,
        submeshes=None,
        bounds=None,
        normals_generated=False,
        file_info=None,
        diagnostics=None,
    ):
        self.name = name
        if positions is None:
            positions = np.zeros((0, 3), np.float32)
        self.positions = positions
        self.normals = normals
        self.tangents = tangents
        self.colors = colors
        self.uvs = dict(uvs or {})
        self.submeshes = list(submeshes or [])
        self.bounds = bounds
        self.normals_generated = bool(normals_generated)
        self.file_info = file_info
        self.diagnostics = list(diagnostics or [])

    def __repr__(self):
        return (
            f"<MeshBuffers '{self.name}' with {self.vertex_count} vertices and "
            f"{len(self.submeshes)} submeshes at {hex(id(self))}>"
        )

    @property
    def vertex_count(self):
        return len(self.positions)

    @property
    def is_empty(self):
        return self.vertex_count == 0 and not self.submeshes

    @property
    def material_names(self):
        return [submesh.material_name for submesh in self.submeshes]

    @property
    def indices(self):
        """The triangles of all submeshes, as an Mx3 int32 array."""
        if not self.submeshes:
            return np.zeros((0, 3), np.int32)
        flat = np.concatenate([submesh.indices for submesh in self.submeshes])
        return flat.reshape(-1, 3)

    def uv(self, n):
        """Get uv set n (0-7), or None if it is not authored."""
        return self.uvs.get(n, None)

    def same_as(self, other):
        """Get whether two mesh buffers hold identical data, byte for byte."""

        def same(a, b):
            if a is None or b is None:
                return a is None and b is None
            return a.dtype == b.dtype and a.shape == b.shape and a.tobytes() == b.tobytes()

        return (
            self.name == other.name
            and same(self.positions, other.positions)
            and same(self.normals, other.normals)
            and same(self.tangents, other.tangents)
            and same(self.colors, other.colors)
            and sorted(self.uvs) == sorted(other.uvs)
            and all(same(self.uvs[k], other.uvs[k]) for k in self.uvs)
            and self.submeshes == other.submeshes
        )
