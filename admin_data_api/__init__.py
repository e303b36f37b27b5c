"""
Top‑level package for the Admin Data API.

This file makes ``admin_data_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``admin_data_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
