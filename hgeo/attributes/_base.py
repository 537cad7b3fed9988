import numpy as np

from ..utils import assert_type
from ..utils.enums import AttributeOwner, AttributeType


# The storage of each attribute type, and the value used to pad new elements
_STORAGE = {
    AttributeType.float: (np.float32, 0.0),
    AttributeType.integer: (np.int32, 0),
    AttributeType.string: (None, ""),
    AttributeType.invalid: (None, None),
}


def _flatten(values):
    flat = []
    for v in values:
        if isinstance(v, (list, tuple)):
            flat.extend(v)
        else:
            flat.append(v)
    return flat


class ValueBuffer:
    """Packed scalar storage for the values of one attribute.

    The storage is selected by the attribute type: a float32 array for
    float attributes, an int32 array for integer attributes and a list of
    str for string attributes. Values are always stored flat, i.e. tuples
    are packed one after the other.

    Parameters
    ----------
    type : AttributeType
        The storage family.
    values : iterable
        The initial (flat or nested) values.
    """

    __slots__ = ["_type", "_data"]

    def __init__(self, type, values=()):
        if type not in AttributeType:
            raise ValueError(f"Value type must be in {AttributeType}, not {type!r}")
        self._type = type
        self._data = self._convert(values)

    def _convert(self, values):
        dtype, _ = _STORAGE[self._type]
        if isinstance(values, np.ndarray):
            if dtype is not None:
                return values.astype(dtype).ravel()
            values = values.ravel().tolist()
        if dtype is not None:
            return np.asarray(_flatten(values), dtype=dtype).ravel()
        elif self._type == AttributeType.string:
            return [str(v) for v in _flatten(values)]
        else:
            return list(_flatten(values))

    def __repr__(self):
        return f"<ValueBuffer {self._type} with {len(self)} values at {hex(id(self))}>"

    def __len__(self):
        return len(self._data)

    @property
    def type(self):
        """The :obj:`AttributeType` of the stored values."""
        return self._type

    @property
    def data(self):
        """The flat values, a numpy array for numeric types and a list otherwise."""
        return self._data

    @property
    def default(self):
        """The value used to pad new elements."""
        return _STORAGE[self._type][1]

    def extend(self, values):
        new = self._convert(values)
        if isinstance(self._data, np.ndarray):
            self._data = np.concatenate([self._data, new])
        else:
            self._data.extend(new)

    def extend_default(self, n):
        """Append n default scalars."""
        self.extend([self.default] * n)


class Attribute:
    """A named, typed, tuple-packed value channel attached to an owner domain.

    Parameters
    ----------
    name : str
        The attribute name, e.g. "P" or "Cd".
    type : AttributeType
        The storage family of the values.
    owner : AttributeOwner
        The domain the values belong to: vertex, point, primitive or detail.
    tuple_size : int
        The number of scalars per element.
    values : iterable
        The flat (or nested per element) values.
    """

    def __init__(self, name, type, owner, tuple_size=1, values=()):
        assert_type("name", name, str)
        assert_type("tuple_size", tuple_size, int)
        if owner not in AttributeOwner or owner in (
            AttributeOwner.any,
            AttributeOwner.invalid,
        ):
            raise ValueError(
                f"Attribute owner must be vertex, point, primitive or detail, not {owner!r}"
            )
        if tuple_size < 1:
            raise ValueError("Attribute tuple_size must be at least 1.")
        self._name = name
        self._owner = owner
        self._tuple_size = tuple_size
        self._values = ValueBuffer(type, values)
        if len(self._values) % tuple_size:
            raise ValueError(
                f"Attribute '{name}' has {len(self._values)} values, "
                f"which is not a multiple of its tuple size {tuple_size}."
            )

    def __repr__(self):
        return (
            f"<Attribute '{self._name}' ({self._owner}, {self.type}x{self._tuple_size})"
            f" with {self.count} elements at {hex(id(self))}>"
        )

    @property
    def name(self):
        return self._name

    @property
    def type(self):
        """The :obj:`AttributeType`."""
        return self._values.type

    @property
    def owner(self):
        """The :obj:`AttributeOwner`."""
        return self._owner

    @property
    def tuple_size(self):
        return self._tuple_size

    @property
    def values(self):
        """The :class:`ValueBuffer` holding the packed values."""
        return self._values

    @property
    def count(self):
        """The number of elements (tuples)."""
        return len(self._values) // self._tuple_size

    def append_default(self, n=1):
        """Append n default-valued elements."""
        self._values.extend_default(n * self._tuple_size)
