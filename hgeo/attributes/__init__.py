"""
Typed, tuple-packed attribute storage.

.. currentmodule:: hgeo.attributes

An attribute is a named channel of values attached to one element domain
of a document (vertices, points, primitives or the document itself). Its
values are stored flat in a :class:`ValueBuffer` and are turned into
per-element arrays with :func:`decode`.

.. autosummary::
    :toctree: attributes/

    Attribute
    ValueBuffer
    decode
    get_value
    attribute_type_and_size

"""

# ruff: noqa: F401

from ._base import Attribute, ValueBuffer
from ._kinds import KINDS, KindInfo, attribute_type_and_size, default_value, get_value
from ._decode import decode

__all__ = [
    "Attribute",
    "ValueBuffer",
    "attribute_type_and_size",
    "decode",
    "default_value",
    "get_value",
]
