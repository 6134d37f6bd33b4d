# -- Configuration file for the Sphinx documentation builder ------------------


# -- Project information ------------------------------------------------------

project = 'cdrshort'
copyright = '2022, cdrshort Committers'
author = 'cdrshort Committers'

extlinks = {
    "py_repo":          ("https://github.com/eclipse-cyclonedds/cyclonedds-python/", None),
    "venv":             ("https://docs.python.org/3/tutorial/venv.html", None),
    "py_enum":          ("https://docs.python.org/3/library/enum.html", None),
    "py_installing":    ("https://docs.python.org/3/installing/index.html", None)
}


# -- General configuration ----------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.extlinks',
    'sphinx.ext.napoleon',
    'sphinx.ext.intersphinx',
    "sphinx.ext.viewcode"
]
autodoc_member_order = 'bysource'
autodoc_typehints = 'description'

intersphinx_mapping = {'python': ('https://docs.python.org/3', None)}

napoleon_google_docstring = False
napoleon_numpy_docstring = True

templates_path = ['templates']
html_static_path = ['static']

exclude_patterns = ['Thumbs.db', '.DS_Store']

html_theme = 'sphinx_rtd_theme'
pygments_style = 'friendly'
