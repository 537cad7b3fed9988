from ..utils import assert_type
from ..utils.enums import EmptyGeometryPolicy


DEFAULT_VERTEX_BUDGET = 65000
DEFAULT_MATERIAL_NAME = "Default"
DEFAULT_UV_NAMES = ("uv", "uv2", "uv3", "uv4", "uv5", "uv6", "uv7", "uv8")
MAX_UV_SETS = 8


class AssemblyConfig:
    """The options that control how a document is assembled into mesh buffers.

    Parameters
    ----------
    position : str
        Name of the position attribute. Default "P".
    normal : str | None
        Name of the normal attribute. Default "N".
    color : str | None
        Name of the color attribute. Default "Cd".
    alpha : str | None
        Name of the alpha attribute, folded into the color. Default "Alpha".
    tangent : str | None
        Name of the tangent attribute. Default "tangent".
    material : str | None
        Name of the (string) material attribute. Default "shop_materialpath".
    uvs : tuple of str
        Names of up to 8 uv attributes. Default ("uv", "uv2", ..., "uv8").
        A None entry disables that uv set.
    default_material : str
        The material name used when no material attribute is authored.
    reverse_winding : bool
        Submesh indices are reversed by default, to compensate for the flip
        of the z axis. Setting this keeps the authored index order instead.
        Default False.
    vertex_budget : int
        The maximum number of assembled vertices. Default 65000.
    empty_geometry : str
        What to do with a document without poly primitives: "raise"
        (default) or "empty". See :obj:`EmptyGeometryPolicy`.

    A channel name set to None is never looked up, as if it was not authored.
    """

    __slots__ = [
        "position",
        "normal",
        "color",
        "alpha",
        "tangent",
        "material",
        "uvs",
        "default_material",
        "reverse_winding",
        "vertex_budget",
        "empty_geometry",
    ]

    def __init__(
        self,
        *,
        position="P",
        normal="N",
        color="Cd",
        alpha="Alpha",
        tangent="tangent",
        material="shop_materialpath",
        uvs=DEFAULT_UV_NAMES,
        default_material=DEFAULT_MATERIAL_NAME,
        reverse_winding=False,
        vertex_budget=DEFAULT_VERTEX_BUDGET,
        empty_geometry=EmptyGeometryPolicy.raise_error,
    ):
        assert_type("position", position, str)
        assert_type("normal", normal, None, str)
        assert_type("color", color, None, str)
        assert_type("alpha", alpha, None, str)
        assert_type("tangent", tangent, None, str)
        assert_type("material", material, None, str)
        assert_type("uvs", uvs, tuple, list)
        assert_type("default_material", default_material, str)
        assert_type("reverse_winding", reverse_winding, bool)
        assert_type("vertex_budget", vertex_budget, int)
        if isinstance(vertex_budget, bool):
            raise TypeError("Expected 'vertex_budget' to be an int, but got bool object.")

        uvs = tuple(uvs)
        if len(uvs) > MAX_UV_SETS:
            raise ValueError(f"At most {MAX_UV_SETS} uv sets are supported, got {len(uvs)}.")
        for name in uvs:
            assert_type("uvs", name, None, str)
        if vertex_budget < 0:
            raise ValueError("vertex_budget cannot be negative.")
        if empty_geometry not in EmptyGeometryPolicy:
            raise ValueError(
                f"empty_geometry must be a string in {EmptyGeometryPolicy}, not {empty_geometry!r}"
            )

        self.position = position
        self.normal = normal
        self.color = color
        self.alpha = alpha
        self.tangent = tangent
        self.material = material
        self.uvs = uvs + (None,) * (MAX_UV_SETS - len(uvs))
        self.default_material = default_material
        self.reverse_winding = reverse_winding
        self.vertex_budget = vertex_budget
        self.empty_geometry = empty_geometry

    def __repr__(self):
        options = ", ".join(f"{key}={getattr(self, key)!r}" for key in self.__slots__)
        return f"AssemblyConfig({options})"

    def __eq__(self, other):
        if not isinstance(other, AssemblyConfig):
            return NotImplemented
        return all(getattr(self, k) == getattr(other, k) for k in self.__slots__)

    def to_dict(self):
        return {key: getattr(self, key) for key in self.__slots__}

    def replace(self, **kwargs):
        """Get a copy of this config with the given options changed."""
        options = self.to_dict()
        for key in kwargs:
            if key not in options:
                raise TypeError(f"AssemblyConfig has no option '{key}'")
        options.update(kwargs)
        return AssemblyConfig(**options)
