"""The table of value kinds that attributes can be created from and decoded into."""

import logging

from ..errors import BoundsViolation, report
from ..utils.enums import AttributeType, DiagnosticKind, ValueKind


class KindInfo:
    """Static description of a value kind.

    * ``family``: the attribute type that stores it.
    * ``tuple_size``: the tuple size an attribute of this kind is created with.
    * ``width``: the number of components of a decoded element.
    """

    __slots__ = ["family", "tuple_size", "width"]

    def __init__(self, family, tuple_size, width):
        self.family = family
        self.tuple_size = tuple_size
        self.width = width

    def __repr__(self):
        return f"<KindInfo {self.family} {self.tuple_size} -> {self.width}>"


KINDS = {
    ValueKind.float: KindInfo(AttributeType.float, 1, 1),
    ValueKind.vec2: KindInfo(AttributeType.float, 2, 2),
    ValueKind.vec3: KindInfo(AttributeType.float, 3, 3),
    ValueKind.vec4: KindInfo(AttributeType.float, 4, 4),
    # Colors are authored as rgb and carry alpha once decoded
    ValueKind.color: KindInfo(AttributeType.float, 3, 4),
    ValueKind.quaternion: KindInfo(AttributeType.float, 4, 4),
    ValueKind.int: KindInfo(AttributeType.integer, 1, 1),
    ValueKind.bool: KindInfo(AttributeType.integer, 1, 1),
    ValueKind.ivec2: KindInfo(AttributeType.integer, 2, 2),
    ValueKind.ivec3: KindInfo(AttributeType.integer, 3, 3),
    ValueKind.string: KindInfo(AttributeType.string, 1, 1),
}


def kind_info(kind, diagnostics=None):
    """Get the :class:`KindInfo` for a kind, or None (logged) if it is not modelled."""
    info = KINDS.get(kind, None)
    if info is None:
        report(
            diagnostics,
            logging.WARNING,
            DiagnosticKind.unrecognized_value_type,
            f"Tried to use value of unrecognized kind {kind!r}",
        )
    return info


def attribute_type_and_size(kind, diagnostics=None):
    """Get the (attribute type, tuple size) to create an attribute of the given kind with.

    Returns ``("invalid", 0)`` for kinds that are not modelled.
    """
    info = kind_info(kind, diagnostics)
    if info is None:
        return AttributeType.invalid, 0
    return info.family, info.tuple_size


def default_value(kind):
    """The value a new element of the given kind gets."""
    info = KINDS[kind]
    if info.family == AttributeType.string:
        return ""
    elif kind == ValueKind.bool:
        return False
    scalar = 0.0 if info.family == AttributeType.float else 0
    if info.width == 1:
        return scalar
    return (scalar,) * info.width


def get_value(attribute, kind, index, diagnostics=None):
    """Get the single element at index of an attribute, as the given kind.

    Vector kinds give a tuple, ``bool`` gives a bool, scalars give a float,
    int or str. Missing trailing components are zero. Returns None (and logs)
    when the kind is not modelled or does not match the attribute type.
    """
    info = kind_info(kind, diagnostics)
    if info is None:
        return None
    if attribute.type != info.family:
        report(
            diagnostics,
            logging.ERROR,
            DiagnosticKind.type_mismatch,
            f"Cannot convert raw values of {attribute.owner} attribute "
            f"'{attribute.name}' to {kind} (type: {attribute.type})",
            attribute.name,
        )
        return None
    if not 0 <= index < attribute.count:
        raise BoundsViolation(
            f"Index {index} is out of range for {attribute.owner} attribute "
            f"'{attribute.name}' with {attribute.count} elements",
            index,
            attribute.count,
        )

    size = attribute.tuple_size
    raw = attribute.values.data
    components = []
    for c in range(info.width):
        if c < size:
            components.append(raw[index * size + c])
        elif info.family == AttributeType.float:
            components.append(0.0)
        else:
            components.append(0)

    if info.family == AttributeType.string:
        return components[0]
    elif info.family == AttributeType.float:
        components = [float(v) for v in components]
    else:
        components = [int(v) for v in components]

    if kind == ValueKind.bool:
        return components[0] == 1
    elif info.width == 1:
        return components[0]
    return tuple(components)
