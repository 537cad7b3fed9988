"""
Assembly of geometry documents into indexed render buffers.

.. currentmodule:: hgeo.assembly

The assembler resolves the attributes of a document per vertex (through the
:class:`AttributeResolver`), partitions the triangles of its poly primitives
per material, and converts the result to the target coordinate system.

.. autosummary::
    :toctree: assembly/

    assemble
    AssemblyConfig
    AttributeResolver
    MeshAssembler
    MeshBuffers
    Submesh

"""

# ruff: noqa: F401

from ._config import (
    AssemblyConfig,
    DEFAULT_MATERIAL_NAME,
    DEFAULT_UV_NAMES,
    DEFAULT_VERTEX_BUDGET,
)
from ._resolver import AttributeResolver
from ._buffers import MeshBuffers, Submesh
from ._assembler import MeshAssembler, assemble, flip_z

__all__ = [
    "AssemblyConfig",
    "AttributeResolver",
    "MeshAssembler",
    "MeshBuffers",
    "Submesh",
    "assemble",
]
