"""Configuration script for Sphinx."""

import os
import sys
import shutil
from pathlib import Path


ROOT_DIR = Path(__file__).parents[1]  # repo root

sys.path.insert(0, str(ROOT_DIR))

import hgeo  # noqa: E402


# -- Project information -----------------------------------------------------

project = "hgeo"
copyright = "2024, the hgeo contributors"
author = "the hgeo contributors"

release = hgeo.__version__

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.autosummary",
    "sphinx_rtd_theme",
    "sphinx.ext.intersphinx",
]

# Just let autosummary produce a new version each time
shutil.rmtree(os.path.join(os.path.dirname(__file__), "_autosummary"), True)

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# -- Read The Docs integration ---------------------------------------------------

html_baseurl = os.environ.get("READTHEDOCS_CANONICAL_URL", "")

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
    "wgpu": ("https://wgpu-py.readthedocs.io/en/latest", None),
}
