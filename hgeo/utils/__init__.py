"""
Utility functions for hgeo.

.. currentmodule:: hgeo.utils

.. autosummary::
    :toctree: utils/

    bounds.Bounds
    enums
    normals_from_vertices

"""

import os
import types
import logging
import inspect

import numpy as np

from . import enums  # noqa: F401


logger = logging.getLogger("hgeo")


def _set_log_level():
    # Set default level
    logger.setLevel(logging.WARN)
    # Set user-specified level
    level = os.getenv("HGEO_LOG_LEVEL", "")
    if level:
        try:
            if level.isnumeric():
                logger.setLevel(int(level))
            else:
                logger.setLevel(level.upper())
        except Exception:
            logger.warning(f"Invalid hgeo log level: {level}")


_set_log_level()


def normals_from_vertices(rr, tris):
    """Compute smooth vertex normals for a triangulated surface.

    Each vertex normal is the normalized sum of the (unit) normals of the
    faces that use it. Vertices that no triangle references get a zero
    normal.
    """
    # Sum in float64 so that the bincount trick below stays accurate
    rr = rr[:, :3].astype(np.float64)
    tris = np.asarray(tris, np.int64).reshape(-1, 3)
    npts = len(rr)
    nn = np.zeros((npts, 3))
    if len(tris) == 0:
        return nn.astype(np.float32)

    # Face normals
    r1 = rr[tris[:, 0], :]
    r2 = rr[tris[:, 1], :]
    r3 = rr[tris[:, 2], :]
    tri_nn = np.cross((r2 - r1), (r3 - r1))
    size = np.sqrt(np.sum(tri_nn * tri_nn, axis=1))
    size[size == 0] = 1.0  # degenerate faces
    tri_nn /= size[:, np.newaxis]

    # Accumulate per vertex, vectorized:
    #
    # for p, verts in enumerate(tris):
    #     nn[verts, :] += tri_nn[p, :]
    #
    for verts in tris.T:
        for idx in range(3):
            nn[:, idx] += np.bincount(verts, tri_nn[:, idx], minlength=npts)
    size = np.sqrt(np.sum(nn * nn, axis=1))
    size[size == 0] = 1.0
    nn /= size[:, np.newaxis]
    return nn.astype(np.float32)


def assert_type(name, value, *classes):
    """Raise a TypeError pointing at the caller if value is not of the given classes.

    Pass None as the first class to also allow None.
    """
    allow_none = False
    if classes[0] is None:
        if value is None:
            return
        allow_none = True
        classes = classes[1:]

    if not isinstance(value, classes):
        # Get traceback object to point of the frame of interest
        f = inspect.currentframe()
        f = f.f_back
        if name:
            # Step back to calling code
            f = f.f_back
            # If this is a constructor that has name as a (kw) argument, take another step back
            if f.f_code.co_name == "__init__" and name in f.f_code.co_varnames:
                f = f.f_back
        tb = types.TracebackType(None, f, f.f_lasti, f.f_lineno)

        msg = "Expected"
        if name:
            msg += f" '{name}' to be"
        class_strings = [cls.__name__ for cls in classes]
        msg += f" an instance of {' | '.join(class_strings)}"
        if allow_none:
            msg += " or None"
        valuestr = value.__class__.__name__
        msg += f", but got {valuestr} object."

        raise TypeError(msg).with_traceback(tb) from None
