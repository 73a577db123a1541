"""Sphinx configuration for bomdetect documentation."""

import bomdetect

project = "bomdetect"
author = "bomdetect contributors"
release = bomdetect.__version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}
