import os
import sys

# Add the project root to the Python path for autodoc
sys.path.insert(0, os.path.abspath('../../'))

project = 'Learning Platform Backend'
copyright = '2025, Learning Platform'
author = 'Learning Platform'
release = '0.1'

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.viewcode',
    'sphinx.ext.napoleon',
]

templates_path = ['_templates']
exclude_patterns = [
    '_build',
    'Thumbs.db',
    '.DS_Store',
    '.venv',
    '**/.venv/**'
]

language = 'en'
html_theme = 'alabaster'
