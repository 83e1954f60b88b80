# Configuration file for the Sphinx documentation builder.
# https://www.sphinx-doc.org/en/master/usage/configuration.html

import os
import sys
from datetime import datetime


# -- Path setup --------------------------------------------------------------
# Add source directory to sys.path for autodoc
sys.path.insert(0, os.path.abspath("../../src"))

# -- Project information -----------------------------------------------------
project = "doubleslider"
copyright = f"{datetime.now().year}, doubleslider contributors"
author = "doubleslider contributors"
version = "0.1.0"
release = "0.1.0"

# -- General configuration ---------------------------------------------------
extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.viewcode",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "myst_parser",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}
master_doc = "index"

# -- MyST-Parser configuration -----------------------------------------------
myst_enable_extensions = [
    "colon_fence",
    "deflist",
    "fieldlist",
]
myst_heading_anchors = 3

# -- Napoleon configuration (NumPy docstrings) -------------------------------
napoleon_google_docstring = True
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True
napoleon_preprocess_types = True
napoleon_use_ivar = True
napoleon_attr_annotations = True

# -- Autodoc configuration ---------------------------------------------------
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "special-members": "__init__",
    "undoc-members": True,
    "exclude-members": "__weakref__, __dict__, __module__, __dataclass_fields__, __dataclass_params__",
    "show-inheritance": True,
}
autodoc_typehints = "description"
autodoc_typehints_description_target = "documented"
autodoc_member_order = "bysource"

# Mock imports for modules that may not be available during doc build
autodoc_mock_imports = [
    "numpy",
    "tyro",
    "yaml",
]

# -- Autosummary configuration -----------------------------------------------
autosummary_generate = True
autosummary_imported_members = False

# -- Intersphinx configuration -----------------------------------------------
intersphinx_mapping = {
    "python": ("https://docs.python.org/3.12", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
}

# -- HTML output options -----------------------------------------------------
html_theme = "furo"
html_title = "doubleslider Documentation"
html_short_title = "doubleslider"

html_theme_options = {
    "sidebar_hide_name": False,
    "navigation_with_keys": True,
}

html_show_sourcelink = True
html_show_sphinx = False

# -- Copy button configuration -----------------------------------------------
copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True
