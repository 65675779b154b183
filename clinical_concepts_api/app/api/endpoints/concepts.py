"""
Concept endpoints.

Read the catalog, edit single concepts and trigger the two bootstrap
paths.  Handlers are plain functions, so FastAPI runs them in its
thread pool and requests are served in parallel; safety comes from
the store's per‑record atomicity.

Errors are not handled here: ``CatalogError`` subclasses propagate to
the exception handlers registered in ``main.create_app``.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse

from clinical_concepts_api.app.api.deps import get_catalog_service
from clinical_concepts_api.app.core.errors import ValidationError
from clinical_concepts_api.app.schemas.concept import ClinicalConcept
from clinical_concepts_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("/concepts", response_model=List[ClinicalConcept])
def get_all_concepts(
    service: CatalogService = Depends(get_catalog_service),
) -> List[ClinicalConcept]:
    """Return every concept in the catalog."""
    return service.get_all()


@router.get("/concepts/{concept_id}", response_model=ClinicalConcept)
def get_concept(
    concept_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> ClinicalConcept:
    """Return a single concept or HTTP 404."""
    concept = service.get_by_id(concept_id)
    if concept is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Concept not found")
    return concept


@router.post("/concepts", response_model=ClinicalConcept, status_code=status.HTTP_201_CREATED)
def create_concept(
    concept_in: ClinicalConcept,
    service: CatalogService = Depends(get_catalog_service),
) -> ClinicalConcept:
    """Create a concept, replacing any existing one with the same id."""
    return service.add_or_update(concept_in)


@router.put("/concepts", response_model=ClinicalConcept)
def update_concept(
    concept_in: ClinicalConcept,
    concept_id: str = Query(..., alias="conceptId"),
    service: CatalogService = Depends(get_catalog_service),
) -> ClinicalConcept:
    """Replace the concept named by the ``conceptId`` query parameter.

    An empty body id takes the query value; a body id that differs
    from the query parameter is rejected.
    """
    if concept_in.concept_id and concept_in.concept_id != concept_id:
        raise ValidationError(
            f"conceptId in body ({concept_in.concept_id}) does not match query ({concept_id})"
        )
    concept = concept_in.model_copy(update={"concept_id": concept_id})
    return service.add_or_update(concept)


@router.delete("/concepts", status_code=status.HTTP_204_NO_CONTENT)
def delete_concept(
    concept_id: str = Query(..., alias="conceptId"),
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    """Delete a concept; unknown ids are ignored."""
    service.delete(concept_id)
    return None


@router.get("/loadHardcodedData", response_class=PlainTextResponse)
def load_hardcoded_data(
    service: CatalogService = Depends(get_catalog_service),
) -> str:
    service.load_seed_set()
    return "Hardcoded data loaded successfully!"


@router.get("/loadCsvData", response_class=PlainTextResponse)
def load_csv_data(
    service: CatalogService = Depends(get_catalog_service),
) -> str:
    service.load_tabular_resource()
    return "CSV data loaded successfully!"
