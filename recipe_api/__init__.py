"""
Top‑level package for the Recipe API.

This file makes ``recipe_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``recipe_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
