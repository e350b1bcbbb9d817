import os
import sys

# -- Path setup --------------------------------------------------------------
sys.path.insert(0, os.path.abspath("../.."))

# -- Project information -----------------------------------------------------
project = "funcinterp"
author = "funcinterp developers"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.viewcode",  # Adds '[source]' links
    "sphinx.ext.intersphinx",
    "autoapi.extension",
]

templates_path = ["_templates"]
exclude_patterns = []

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable", None),
}

# -- Mocking Dependencies ----------------------------------------------------
# Lets the API reference build without the numerical stack installed.
autodoc_mock_imports = [
    "numpy",
]

# -- Options for HTML output -------------------------------------------------
html_theme = "shibuya"

autoapi_dirs = ["../../funcinterp"]
