import os
import sys

# Put project root on sys.path so autoapi/doctest can import urnpoll
sys.path.insert(0, os.path.abspath("../.."))

project = "urnpoll"
author = "urnpoll contributors"

extensions = [
    "autoapi.extension",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "myst_nb",
    "sphinx_copybutton",
]
templates_path = []
exclude_patterns = []

nb_execution_mode = "off"

# Book-style layout when the theme is installed, alabaster otherwise so a
# bare Sphinx install can still build the docs.
try:
    import importlib.util

    if importlib.util.find_spec("sphinx_book_theme") is not None:
        html_theme = "sphinx_book_theme"
        html_theme_options = {
            "path_to_docs": "docs/source",
            "launch_buttons": {"colab_url": "https://colab.research.google.com"},
        }
    else:
        html_theme = "alabaster"
        html_theme_options = {}
except Exception:
    html_theme = "alabaster"
    html_theme_options = {}

myst_enable_extensions = [
    "deflist",
    "colon_fence",
    "dollarmath",
]

master_doc = "index"

# ---------------------------------------------------------------------------
# sphinx-autoapi: API reference for the `urnpoll` package
# ---------------------------------------------------------------------------
autoapi_type = "python"
autoapi_dirs = ["../../urnpoll"]
autoapi_ignore = [
    "**/tests/**",
    "**/__pycache__/**",
]

autodoc_typehints = "description"

autoapi_options = [
    "members",
    "undoc-members",
    "show-inheritance",
    "show-module-summary",
]

autoapi_python_class_content = "both"
