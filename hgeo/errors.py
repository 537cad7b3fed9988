"""
The exceptions raised by hgeo.

Only structural problems raise. Per-channel anomalies (a type mismatch,
a missing optional channel, a color/alpha count mismatch) are logged and
recorded as :class:`Diagnostic` entries instead.
"""

from .utils import logger
from .utils.enums import DiagnosticKind


class HGeoError(Exception):
    """Base class for the errors raised by hgeo."""


class BoundsViolation(HGeoError, IndexError):
    """An index points outside the data it refers to.

    This indicates a malformed document. Indices are never clamped.
    """

    def __init__(self, message, index=None, size=None):
        super().__init__(message)
        self.index = index
        self.size = size


class VertexBudgetExceeded(HGeoError, ValueError):
    """The number of assembled vertices exceeds the configured budget."""

    def __init__(self, actual, limit):
        super().__init__(f"Vertex count ({actual}) exceeds limit of {limit}!")
        self.actual = actual
        self.limit = limit


class NoRenderableGeometry(HGeoError, ValueError):
    """The document has no poly primitives to assemble."""


class GroupKindMismatch(HGeoError, TypeError):
    """A group was requested as a variant that does not match its kind."""


class Diagnostic:
    """A non-fatal anomaly, recorded during decoding or assembly."""

    __slots__ = ["kind", "message", "attribute"]

    def __init__(self, kind, message, attribute=None):
        if kind not in DiagnosticKind:
            raise ValueError(f"Diagnostic kind must be in {DiagnosticKind}, not {kind!r}")
        self.kind = kind
        self.message = message
        self.attribute = attribute

    def __repr__(self):
        return f"<Diagnostic {self.kind}: {self.message}>"

    def __eq__(self, other):
        if not isinstance(other, Diagnostic):
            return NotImplemented
        return (self.kind, self.message, self.attribute) == (
            other.kind,
            other.message,
            other.attribute,
        )


def report(diagnostics, level, kind, message, attribute=None):
    """Log a diagnostic on the hgeo logger and append it to diagnostics (if not None)."""
    logger.log(level, message)
    if diagnostics is not None:
        diagnostics.append(Diagnostic(kind, message, attribute))
