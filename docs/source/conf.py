import os
import sys
import warnings
import logging

# Suppress all warnings during documentation build
warnings.filterwarnings('ignore')

# Also suppress specific Sphinx/autodoc logging
logging.getLogger('sphinx').setLevel(logging.ERROR)

# Add source path for documentation build
sys.path.insert(0, os.path.abspath('../../src'))
sys.path.insert(0, os.path.abspath('../../'))

project = 'Pattern Filters'
copyright = '2025, Pattern Filters contributors'
author = 'Pattern Filters contributors'
release = '0.1.0'
version = '0.1.0'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
    'sphinx.ext.autosummary',
    'myst_parser',
    'sphinx_autodoc_typehints',
]

autosummary_generate = True

autodoc_default_options = {
    'members': True,
    'undoc-members': True,
    'show-inheritance': True,
    'inherited-members': True,
}

autodoc_typehints = 'none'
autodoc_typehints_description_target = 'documented'

# torch is only needed for the torch.Generator adapter
autodoc_mock_imports = ['torch']

suppress_warnings = [
    'ref.python',
    'myst.xref_missing',
]

autodoc_inherit_docstrings = False
autodoc_typehints_format = 'short'
autodoc_preserve_defaults = True

# Napoleon settings
napoleon_google_docstring = True
napoleon_numpy_docstring = True
napoleon_include_init_with_doc = False
napoleon_include_private_with_doc = False
napoleon_include_special_with_doc = True
napoleon_use_param = True
napoleon_use_rtype = True

templates_path = ['_templates']
exclude_patterns = []

html_theme = "furo"
html_static_path = ['_static']

intersphinx_mapping = {
    'python': ('https://docs.python.org/3', None),
    'numpy': ('https://numpy.org/doc/stable/', None),
    'torch': ('https://pytorch.org/docs/stable/', None),
}
