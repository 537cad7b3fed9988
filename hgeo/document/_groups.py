from ..utils.enums import GroupKind


class Group:
    """Base class for named subsets of a document's elements."""

    kind = None

    def __init__(self, name):
        self.name = str(name)

    def __repr__(self):
        return f"<{self.__class__.__name__} '{self.name}' with {len(self)} items at {hex(id(self))}>"


class PointGroup(Group):
    """A named set of point ids, optionally with the matching vertex ids."""

    kind = GroupKind.points

    def __init__(self, name, ids=None, vert_ids=None):
        super().__init__(name)
        self.ids = list(ids or [])
        self.vert_ids = list(vert_ids or [])

    def __len__(self):
        return len(self.ids)


class PrimitiveGroup(Group):
    """A named set of primitive ids."""

    kind = GroupKind.primitives

    def __init__(self, name, ids=None):
        super().__init__(name)
        self.ids = list(ids or [])

    def __len__(self):
        return len(self.ids)


class EdgeGroup(Group):
    """A named set of edges, each given as a pair of point ids."""

    kind = GroupKind.edges

    def __init__(self, name, point_pairs=None):
        super().__init__(name)
        self.point_pairs = [(int(a), int(b)) for a, b in (point_pairs or [])]

    def __len__(self):
        return len(self.point_pairs)


GROUP_CLASSES = {
    GroupKind.points: PointGroup,
    GroupKind.primitives: PrimitiveGroup,
    GroupKind.edges: EdgeGroup,
}
