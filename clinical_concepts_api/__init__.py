"""
Top‑level package for the Clinical Concepts API.

This file makes ``clinical_concepts_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``clinical_concepts_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
