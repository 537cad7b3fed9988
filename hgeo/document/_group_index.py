from ..errors import GroupKindMismatch
from ..utils import logger
from ..utils.enums import GroupKind
from ._groups import GROUP_CLASSES, Group


class GroupIndex:
    """Query and create the named groups of a document.

    Groups are looked up by name within a kind (points, primitives or
    edges). New groups are registered on the document itself, so that
    they are visible to anything else that holds the document.

    Parameters
    ----------
    document : GeometryDocument
        The document whose groups to index.
    """

    def __init__(self, document):
        self._document = document

    def _groups(self, kind):
        if kind == GroupKind.points:
            return self._document.point_groups
        elif kind == GroupKind.primitives:
            return self._document.primitive_groups
        elif kind == GroupKind.edges:
            return self._document.edge_groups
        raise ValueError(f"Group kind must be points, primitives or edges, not {kind!r}")

    def names(self, kind):
        """The names of the groups of the given kind, in registration order."""
        return [group.name for group in self._groups(kind)]

    def get(self, name, kind):
        """Get the group with the given name and kind, or None if there is none."""
        for group in self._groups(kind):
            if group.name == name:
                return group
        return None

    def get_or_create(self, name, kind):
        """Get the group with the given name and kind, creating an empty one if needed."""
        group = self.get(name, kind)
        if group is None:
            group = GROUP_CLASSES[kind](name)
            self._groups(kind).append(group)
            logger.debug(f"Created {kind} group '{name}'")
        return group

    def _check_typed(self, group_class, kind):
        if not (isinstance(group_class, type) and issubclass(group_class, Group)):
            raise TypeError(f"Expected a Group subclass, not {group_class!r}")
        if group_class.kind is None:
            raise TypeError(f"Cannot look up groups as the abstract {group_class.__name__}")
        if kind is None:
            return group_class.kind
        self._groups(kind)  # validates kind
        if kind != group_class.kind:
            raise GroupKindMismatch(
                f"Requested a {group_class.__name__} for {kind} groups"
            )
        return kind

    def _check_stored(self, group, group_class):
        if group is not None and not isinstance(group, group_class):
            raise GroupKindMismatch(
                f"Group '{group.name}' is a {group.__class__.__name__}, "
                f"not a {group_class.__name__}"
            )
        return group

    def get_typed(self, name, group_class, kind=None):
        """Like :meth:`get`, with the kind given by the group class.

        If kind is given too, it must match the class. A stored group that
        is not an instance of the class is also a mismatch.
        """
        kind = self._check_typed(group_class, kind)
        return self._check_stored(self.get(name, kind), group_class)

    def get_or_create_typed(self, name, group_class, kind=None):
        """Like :meth:`get_or_create`, with the kind given by the group class."""
        kind = self._check_typed(group_class, kind)
        group = self._check_stored(self.get(name, kind), group_class)
        if group is None:
            group = group_class(name)
            self._groups(kind).append(group)
            logger.debug(f"Created {kind} group '{name}'")
        return group
