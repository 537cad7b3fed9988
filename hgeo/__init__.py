"""Assemble procedurally authored geometry documents into render buffers."""

# ruff: noqa: F401, F403

from ._version import __version__, version_info, repo_dir as _repo_dir
from . import utils

from .attributes import *
from .document import *
from .assembly import *

from .errors import (
    HGeoError,
    BoundsViolation,
    VertexBudgetExceeded,
    NoRenderableGeometry,
    GroupKindMismatch,
    Diagnostic,
)
from .utils.bounds import Bounds
from .utils import enums, logger
from .utils.enums import *


# Checking dependency versions only makes sense for devs working from a checkout
if _repo_dir:
    from ._version import check_dependency_versions

    check_dependency_versions()
    del check_dependency_versions
