"""
The enums used in hgeo. The enums are all available from the root ``hgeo`` namespace.

.. currentmodule:: hgeo.utils.enums

.. autosummary::
    :toctree: utils/enums

    AttributeOwner
    AttributeType
    DiagnosticKind
    EmptyGeometryPolicy
    GroupKind
    PrimitiveType
    ValueKind

"""

from wgpu.utils import BaseEnum


__all__ = [
    "AttributeOwner",
    "AttributeType",
    "DiagnosticKind",
    "EmptyGeometryPolicy",
    "GroupKind",
    "PrimitiveType",
    "ValueKind",
]


class Enum(BaseEnum):
    """Enum base class for hgeo."""


class AttributeType(Enum):
    """The storage family of an attribute's values."""

    invalid = None  #: A type that hgeo does not model.
    float = None  #: 32-bit floats.
    integer = None  #: 32-bit signed integers.
    string = None  #: Strings.


class AttributeOwner(Enum):
    """The element domain that an attribute is attached to."""

    invalid = None  #: Not a valid owner.
    vertex = None  #: One tuple per vertex.
    point = None  #: One tuple per point. Vertices alias it through ``point_refs``.
    primitive = None  #: One tuple per primitive, indexed by primitive id.
    detail = None  #: A single tuple for the whole document.
    any = None  #: Wildcard for lookups by name only. Never stored on an attribute.


class PrimitiveType(Enum):
    """The kinds of primitive a document can hold."""

    poly = "Poly"  #: A polygon with a precomputed triangle list.
    bezier_curve = "BezierCurve"  #: A Bezier curve (data only).
    nurb_curve = "NURBCurve"  #: A NURBS curve (data only).


class GroupKind(Enum):
    """The element kind that a named group selects."""

    invalid = None  #: Not a valid kind, requesting it is an error.
    points = None  #: A set of points (and optionally vertices).
    primitives = None  #: A set of primitives.
    edges = None  #: A set of point pairs.


class ValueKind(Enum):
    """The semantic value kinds that an attribute can be decoded into.

    Each kind has a fixed arity and storage family, see
    :func:`hgeo.attributes.attribute_type_and_size`.
    """

    float = None  #: A single float.
    vec2 = None  #: Two floats.
    vec3 = None  #: Three floats.
    vec4 = None  #: Four floats.
    color = None  #: RGBA floats. Authored as RGB, alpha zero-fills.
    quaternion = None  #: Four floats (x, y, z, w).
    int = None  #: A single integer.
    bool = None  #: A single integer, where 1 means True.
    ivec2 = None  #: Two integers.
    ivec3 = None  #: Three integers.
    string = None  #: A single string.


class EmptyGeometryPolicy(Enum):
    """What assembly does with a document that has no poly primitives."""

    raise_error = "raise"  #: Raise ``NoRenderableGeometry``.
    empty = "empty"  #: Log a warning and return empty mesh buffers.


class DiagnosticKind(Enum):
    """The non-fatal anomalies that decoding and assembly record."""

    type_mismatch = None  #: An attribute was decoded as the wrong storage family.
    unrecognized_value_type = None  #: A value type or kind that hgeo does not model.
    missing_channel = None  #: An optional channel has no attribute.
    missing_position = None  #: The position channel has no attribute.
    count_mismatch = None  #: Color and alpha have different element counts.
    default_material = None  #: No material attribute, a default name is used.
    unsupported_owner = None  #: An attribute's owner cannot feed the channel.
    no_renderable_geometry = None  #: The document has no poly primitives.


# NOTE: Don't forget to add new enums to the toctree and __all__
