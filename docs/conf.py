"""Sphinx configuration for mlnutils documentation."""

import sys
from pathlib import Path

# Add the src directory to the path for autodoc
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# Project information
project = "mlnutils"
author = "mlnutils developers"

# Get version from package
try:
    from mlnutils._version import __version__

    release = __version__
    version = ".".join(release.split(".")[:2])
except ImportError:
    version = "dev"
    release = "dev"

# General configuration
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "numpydoc",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

# Autodoc settings
autodoc_default_options = {
    "members": True,
    "show-inheritance": True,
}
autodoc_typehints = "description"

# Napoleon settings (NumPy style docstrings only)
napoleon_google_docstring = False
napoleon_numpy_docstring = True

# Numpydoc settings
numpydoc_show_class_members = False

# Intersphinx mapping
intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

# HTML output options
html_theme = "sphinx_rtd_theme"
html_static_path = ["_static"]
html_title = f"mlnutils {release}"

# Create _static directory if it doesn't exist
Path(__file__).parent.joinpath("_static").mkdir(exist_ok=True)
