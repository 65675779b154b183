"""
Top‑level API router.

Aggregates domain‑specific routers.  The concept routes keep the
paths used by the web client (``/api/concepts``,
``/api/loadHardcodedData``, ``/api/loadCsvData``), so no version
segment is inserted.
"""

from fastapi import APIRouter

from .endpoints import concepts

router = APIRouter()

router.include_router(concepts.router, tags=["concepts"])
