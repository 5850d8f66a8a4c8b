# gitguy/__init__.py
# gitguy: AI commit messages & PR descriptions w/ a side-by-side diff viewer

__version__ = "0.1.0"
