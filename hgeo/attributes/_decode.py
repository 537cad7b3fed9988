import logging

import numpy as np

from ..errors import report
from ..utils.enums import AttributeType, DiagnosticKind, ValueKind
from ._kinds import kind_info


_DTYPES = {
    AttributeType.float: np.float32,
    AttributeType.integer: np.int32,
    AttributeType.string: object,
}


def _empty(info):
    dtype = _DTYPES[info.family]
    if info.width == 1:
        return np.zeros((0,), dtype)
    return np.zeros((0, info.width), dtype)


def decode(attribute, kind, diagnostics=None):
    """Decode the packed values of an attribute into an array of elements.

    The result has one row per element: shape (count,) for scalar kinds
    and (count, width) for vector kinds. For a ``width``-component kind,
    component ``c`` of element ``i`` is ``values[i * tuple_size + c]``, or
    zero when ``c >= tuple_size``. So a tuple size that is too small is
    allowed and zero-fills the missing trailing components.

    Decoding a kind of another storage family than the attribute's type
    (e.g. a ``vec3`` from a string attribute) is logged as a type mismatch
    and gives an empty array. So does an attribute type or kind that is not
    modelled. Nothing is raised in either case.

    Parameters
    ----------
    attribute : Attribute
        The attribute to decode.
    kind : ValueKind
        The kind of element to produce.
    diagnostics : list | None
        If given, anomalies are appended to it as :class:`Diagnostic` objects.

    Returns
    -------
    values : ndarray
        float32 for the float kinds, int32 for the integer kinds (bool for
        ``bool``), and object (str) for ``string``.
    """
    info = kind_info(kind, diagnostics)
    if info is None:
        return np.zeros((0,), np.float32)

    if attribute.type not in _DTYPES:
        report(
            diagnostics,
            logging.WARNING,
            DiagnosticKind.unrecognized_value_type,
            f"Cannot decode {attribute.owner} attribute '{attribute.name}' "
            f"of unrecognized type {attribute.type!r}",
            attribute.name,
        )
        return _empty(info)

    if attribute.type != info.family:
        report(
            diagnostics,
            logging.ERROR,
            DiagnosticKind.type_mismatch,
            f"Cannot convert raw values of {attribute.owner} attribute "
            f"'{attribute.name}' to {kind} (type: {attribute.type})",
            attribute.name,
        )
        return _empty(info)

    size = attribute.tuple_size
    count = attribute.count
    n = min(size, info.width)

    if info.family == AttributeType.string:
        raw = attribute.values.data
        values = np.empty((count,), object)
        values[:] = [raw[i * size] for i in range(count)]
        return values

    raw = attribute.values.data[: count * size].reshape(count, size)
    values = np.zeros((count, info.width), _DTYPES[info.family])
    values[:, :n] = raw[:, :n]

    if kind == ValueKind.bool:
        return values[:, 0] == 1
    elif info.width == 1:
        return values[:, 0].copy()
    return values
