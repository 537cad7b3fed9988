import logging

import numpy as np
import pylinalg as la

from ..attributes import KINDS, decode
from ..errors import (
    BoundsViolation,
    NoRenderableGeometry,
    VertexBudgetExceeded,
    report,
)
from ..utils import logger, assert_type, normals_from_vertices
from ..utils.bounds import Bounds
from ..utils.enums import AttributeOwner, DiagnosticKind, EmptyGeometryPolicy, ValueKind
from ._buffers import MeshBuffers, Submesh
from ._config import AssemblyConfig
from ._resolver import AttributeResolver


# The source data is right-handed and the target left-handed: flip z
FLIP_Z = la.mat_from_scale((1, 1, -1))

PER_VERTEX_OWNERS = (AttributeOwner.vertex, AttributeOwner.point)


def flip_z(vectors):
    """Negate the z component of an Nx3 (or Nx4) array of vectors."""
    vectors = np.asarray(vectors, np.float32)
    if len(vectors) == 0:
        return vectors.copy()
    flipped = vectors.copy()
    flipped[:, :3] = la.vec_transform(vectors[:, :3], FLIP_Z)
    return flipped


class _Channel:
    """An attribute that was found for a channel, with its decoded values."""

    __slots__ = ["attribute", "values"]

    def __init__(self, attribute, values):
        self.attribute = attribute
        self.values = values

    @property
    def owner(self):
        return self.attribute.owner


class MeshAssembler:
    """Assemble the poly primitives of a document into indexed mesh buffers.

    The assembler gathers the channels named in its config (position,
    normal, tangent, color, alpha, material and up to 8 uv sets), resolves
    them for every vertex, partitions the triangles into one submesh per
    material, and converts the result to the target coordinate system.

    Structural problems raise: too many vertices
    (:class:`VertexBudgetExceeded`), no poly primitives
    (:class:`NoRenderableGeometry`, unless the config says "empty") and
    indices that point outside their data (:class:`BoundsViolation`).
    Everything else degrades gracefully and is recorded in the
    ``diagnostics`` of the result.

    Parameters
    ----------
    config : AssemblyConfig | None
        The assembly options. Default ``AssemblyConfig()``.
    """

    def __init__(self, config=None):
        assert_type("config", config, None, AssemblyConfig)
        self._config = config if config is not None else AssemblyConfig()

    @property
    def config(self):
        """The :class:`AssemblyConfig`."""
        return self._config

    def _get_channel(self, document, name, kind, diagnostics):
        if name is None:
            return None
        # Prefer an attribute of the right type, under any owner
        attribute = document.get_attribute(name, type=KINDS[kind].family)
        if attribute is not None:
            return _Channel(attribute, decode(attribute, kind, diagnostics))
        attribute = document.get_attribute(name)
        if attribute is None:
            report(
                diagnostics,
                logging.DEBUG,
                DiagnosticKind.missing_channel,
                f"'{document.name}' has no attribute '{name}'",
                name,
            )
        else:
            # Reports the mismatch, the channel is then treated as not authored
            decode(attribute, kind, diagnostics)
        return None

    def _check_per_vertex(self, channel, diagnostics, allow_primitive=False):
        if channel is None:
            return
        allowed = PER_VERTEX_OWNERS
        if allow_primitive:
            allowed += (AttributeOwner.primitive,)
        if channel.owner not in allowed:
            report(
                diagnostics,
                logging.WARNING,
                DiagnosticKind.unsupported_owner,
                f"{channel.owner} attribute '{channel.attribute.name}' cannot be "
                "resolved per vertex, it gets default values",
                channel.attribute.name,
            )

    def assemble(self, document):
        """Assemble a document into :class:`MeshBuffers`.

        Parameters
        ----------
        document : GeometryDocument
            The document to assemble. It is not modified.

        Returns
        -------
        buffers : MeshBuffers
            The assembled buffers.
        """
        config = self._config
        diagnostics = []
        resolver = AttributeResolver(document)
        file_info = document.file_info.copy() if document.file_info else None

        # Preflight

        polys = document.poly_primitives
        if not polys:
            msg = f"Cannot assemble '{document.name}' because it has no poly primitives"
            if config.empty_geometry == EmptyGeometryPolicy.empty:
                report(
                    diagnostics,
                    logging.WARNING,
                    DiagnosticKind.no_renderable_geometry,
                    msg,
                )
                return MeshBuffers(
                    name=document.name, file_info=file_info, diagnostics=diagnostics
                )
            raise NoRenderableGeometry(msg)

        flat = np.concatenate([p.indices for p in polys]).astype(np.int64)
        vertex_count = len(flat)
        if vertex_count > config.vertex_budget:
            raise VertexBudgetExceeded(vertex_count, config.vertex_budget)
        point_indices = resolver.point_indices(flat)

        # Channel lookup

        position = self._get_channel(document, config.position, ValueKind.vec3, diagnostics)
        if position is None:
            report(
                diagnostics,
                logging.WARNING,
                DiagnosticKind.missing_position,
                f"'{document.name}' has no position attribute on points or vertices",
                config.position,
            )
        normal = self._get_channel(document, config.normal, ValueKind.vec3, diagnostics)
        tangent = self._get_channel(document, config.tangent, ValueKind.vec4, diagnostics)
        color = self._get_channel(document, config.color, ValueKind.color, diagnostics)
        alpha = self._get_channel(document, config.alpha, ValueKind.float, diagnostics)
        material = self._get_channel(
            document, config.material, ValueKind.string, diagnostics
        )
        uvs = {}
        for index, name in enumerate(config.uvs):
            channel = self._get_channel(document, name, ValueKind.vec2, diagnostics)
            if channel is not None:
                uvs[index] = channel

        self._check_per_vertex(position, diagnostics)
        self._check_per_vertex(normal, diagnostics, allow_primitive=True)
        self._check_per_vertex(tangent, diagnostics)
        self._check_per_vertex(color, diagnostics, allow_primitive=True)
        for channel in uvs.values():
            self._check_per_vertex(channel, diagnostics)

        # Fold alpha into the color, if both have as many elements

        if color is not None and alpha is not None:
            if len(color.values) == len(alpha.values):
                color.values[:, 3] = alpha.values
            else:
                report(
                    diagnostics,
                    logging.DEBUG,
                    DiagnosticKind.count_mismatch,
                    f"Color '{color.attribute.name}' has {len(color.values)} elements "
                    f"and alpha '{alpha.attribute.name}' has {len(alpha.values)}, "
                    "alpha is not applied",
                    alpha.attribute.name,
                )

        # Resolve vertex and point attributes per vertex

        def resolve(channel, default):
            if channel is None:
                return resolver.values_at(None, None, flat, point_indices, default)
            return resolver.values_at(
                channel.attribute, channel.values, flat, point_indices, default
            )

        positions = resolve(position, np.zeros(3, np.float32))
        normals = resolve(normal, np.zeros(3, np.float32)) if normal is not None else None
        tangents = resolve(tangent, np.zeros(4, np.float32)) if tangent is not None else None
        colors = resolve(color, np.ones(4, np.float32)) if color is not None else None
        uv_arrays = {
            index: resolve(channel, np.zeros(2, np.float32))
            for index, channel in uvs.items()
        }

        # Broadcast primitive attributes to the vertices of each primitive.
        # A vertex maps to the first local slot that it was assembled into.

        broadcast = [
            (channel, array)
            for channel, array in ((normal, normals), (color, colors))
            if channel is not None and channel.owner == AttributeOwner.primitive
        ]
        if broadcast:
            unique_verts, first_slots = np.unique(flat, return_index=True)
            slots = first_slots[np.searchsorted(unique_verts, flat)]
            prim_ids = np.concatenate(
                [np.full(len(p.indices), p.id, np.int64) for p in polys]
            )
            for channel, array in broadcast:
                array[slots] = resolver.primitive_values(
                    channel.attribute, channel.values, prim_ids
                )

        # Partition the triangles per material, in order of first use

        if material is None:
            report(
                diagnostics,
                logging.DEBUG,
                DiagnosticKind.default_material,
                f"'{document.name}' has no material attribute, "
                f"using '{config.default_material}'",
            )
            material_attribute = material_values = None
        else:
            material_attribute, material_values = material.attribute, material.values
            if material.owner not in (AttributeOwner.primitive, AttributeOwner.detail):
                report(
                    diagnostics,
                    logging.WARNING,
                    DiagnosticKind.unsupported_owner,
                    f"{material.owner} attribute '{material.attribute.name}' cannot "
                    f"give a material per primitive, using '{config.default_material}'",
                    material.attribute.name,
                )

        buckets = {}
        for prim in polys:
            material_name = resolver.primitive_value(
                material_attribute, material_values, prim.id, config.default_material
            )
            buckets.setdefault(str(material_name), []).append(prim.triangles)

        submeshes = []
        for material_name, parts in buckets.items():
            indices = np.concatenate(parts)
            if len(indices) == 0:
                continue
            if indices.min() < 0 or indices.max() >= vertex_count:
                raise BoundsViolation(
                    f"Triangles of material '{material_name}' reference vertices "
                    f"outside [0, {vertex_count})",
                    size=vertex_count,
                )
            # Reversed by default, because the z axis is flipped below
            if not config.reverse_winding:
                indices = indices[::-1]
            submeshes.append(Submesh(material_name, indices))

        # Convert to the target coordinate system

        positions = flip_z(positions)
        if normals is not None:
            normals = flip_z(normals)
        if tangents is not None:
            tangents = flip_z(tangents)

        # Derived data

        bounds = Bounds.from_points(positions)
        normals_generated = False
        if normal is None:
            triangles = [s.indices for s in submeshes]
            triangles = np.concatenate(triangles) if triangles else np.zeros(0, np.int32)
            normals = normals_from_vertices(positions, triangles)
            normals_generated = True

        logger.debug(
            f"Assembled '{document.name}': {vertex_count} vertices, "
            f"{len(submeshes)} submeshes, {len(diagnostics)} diagnostics"
        )

        return MeshBuffers(
            name=document.name,
            positions=positions,
            normals=normals,
            tangents=tangents,
            colors=None if colors is None else colors.astype(np.float32),
            uvs={k: v.astype(np.float32) for k, v in uv_arrays.items()},
            submeshes=submeshes,
            bounds=bounds,
            normals_generated=normals_generated,
            file_info=file_info,
            diagnostics=diagnostics,
        )


def assemble(document, config=None, **options):
    """Assemble a document into :class:`MeshBuffers`.

    Options given as keyword arguments override those of the config, see
    :class:`AssemblyConfig`. E.g. ``assemble(doc, reverse_winding=True)``.
    """
    if config is None:
        config = AssemblyConfig(**options)
    elif options:
        config = config.replace(**options)
    return MeshAssembler(config).assemble(document)
