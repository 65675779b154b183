"""
FastAPI dependencies shared by endpoint modules.
"""

from fastapi import Request

from clinical_concepts_api.app.services.catalog_service import CatalogService


def get_catalog_service(request: Request) -> CatalogService:
    """Return the catalog service composed by ``create_app``."""
    return request.app.state.catalog_service
