"""
The hgeo version, and the version ranges of the libraries it builds on.

The release number below is bumped by hand for each release. When running
from a git checkout, ``git describe`` is used to tag the version with the
number of commits since that release and the current commit hash.
"""

import logging
import importlib
import subprocess
from pathlib import Path


__version__ = "0.3.0"

# Read by setup.py. Lower bound inclusive, upper bound exclusive.
__wgpu_version_range__ = "0.18", "1.0"
__pylinalg_version_range__ = "0.4", "1.0"


logger = logging.getLogger("hgeo")

repo_dir = Path(__file__).parents[1]
if not repo_dir.joinpath(".git").is_dir():
    repo_dir = None


def _describe():
    """Get (release, post, labels) from ``git describe``, or None if that fails."""
    command = ["git", "describe", "--long", "--always", "--tags", "--dirty"]
    try:
        p = subprocess.run(command, cwd=repo_dir, capture_output=True)
    except OSError as e:
        logger.warning(f"Could not get hgeo version: {e}")
        return None
    if p.returncode:
        stderr = p.stderr.decode(errors="ignore").strip()
        logger.warning(f"Could not get hgeo version from git: {stderr}")
        return None

    parts = p.stdout.decode(errors="ignore").strip().lstrip("v").split("-")
    if len(parts) <= 2:
        # Untagged repo: only the hash, and maybe 'dirty'
        return None, None, parts
    release, post, *labels = parts
    return release, post, labels


def get_version():
    """Get the version string, with git info for dev installs."""
    if not repo_dir:
        return __version__
    described = _describe()
    if described is None:
        return __version__

    release, post, labels = described
    if release and release != __version__:
        logger.warning(
            f"hgeo version from git ({release}) and __version__ ({__version__}) don't match."
        )
    version = release or __version__
    if post and post != "0":
        version += f".post{post}"
    if labels:
        version += "+" + ".".join(labels)
    return version


def _parse(version):
    return tuple(int(i) if i.isnumeric() else i for i in version.split("+")[0].split("."))


def check_dependency_versions():
    """Log when wgpu or pylinalg are outside of the supported version range."""
    ranges = {
        "wgpu": __wgpu_version_range__,
        "pylinalg": __pylinalg_version_range__,
    }
    for libname, (min_ver, max_ver) in ranges.items():
        lib = importlib.import_module(libname)
        detected = f"Detected {lib.__version__}, need >={min_ver}, <{max_ver}."
        version = _parse(lib.__version__)
        if version < _parse(min_ver):
            logger.error(
                f"Incompatible version of {libname}:\n    {detected}\n"
                f"    To update, use e.g. `pip install -U {libname}`."
            )
        elif version >= _parse(max_ver):
            logger.warning(f"Possible incompatible version of {libname}:\n    {detected}")


__version__ = get_version()
version_info = _parse(__version__)
