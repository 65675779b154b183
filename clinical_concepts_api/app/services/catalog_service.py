"""
Catalog orchestration.

``CatalogService`` is the only component that writes to the
``ConceptStore``.  It validates single upserts and drives the two
bootstrap paths: the built‑in seed set and the bundled tabular
resource.  Both paths are idempotent because every record is applied
as an upsert keyed by concept id.

The service holds no state of its own besides its collaborators, so
one instance may serve concurrent requests.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from clinical_concepts_api.app.core.errors import CsvFormatError, IngestError, ValidationError
from clinical_concepts_api.app.schemas.concept import ClinicalConcept
from clinical_concepts_api.app.services import csv_loader
from clinical_concepts_api.app.services.concept_store import ConceptStore
from clinical_concepts_api.app.services.seed_data import seed_concepts


class CatalogService:
    """Reads and writes the concept catalog."""

    def __init__(self, store: ConceptStore, csv_resource: str = "data.csv") -> None:
        self.store = store
        self.csv_resource = csv_resource

    def get_all(self) -> List[ClinicalConcept]:
        return self.store.list()

    def get_by_id(self, concept_id: str) -> Optional[ClinicalConcept]:
        return self.store.get(concept_id)

    def add_or_update(self, concept: ClinicalConcept) -> ClinicalConcept:
        """Validate and upsert a single concept.

        Raises ``ValidationError`` if ``concept_id`` or
        ``display_name`` is empty; the store is left untouched.
        """
        if not concept.concept_id:
            raise ValidationError("conceptId must not be empty")
        if not concept.display_name:
            raise ValidationError("displayName must not be empty")
        return self.store.upsert(concept)

    def delete(self, concept_id: str) -> None:
        self.store.delete(concept_id)

    def load_seed_set(self) -> List[ClinicalConcept]:
        """Upsert the ten built‑in concepts in their fixed order."""
        logger = logging.getLogger(__name__)
        stored = [self.add_or_update(concept) for concept in seed_concepts()]
        logger.info("Loaded %d seed concepts", len(stored))
        return stored

    def load_tabular_resource(self) -> int:
        """Upsert every record of the tabular resource in file order.

        Ingest is best effort: records preceding a malformed line stay
        stored and the error is logged and re‑raised.  Returns the
        number of records upserted.
        """
        logger = logging.getLogger(__name__)
        count = 0
        try:
            for concept in csv_loader.load_concepts(self.csv_resource):
                try:
                    self.add_or_update(concept)
                except ValidationError as exc:
                    # Every earlier data line produced a record, so the
                    # offending line follows the header and ``count`` lines.
                    raise CsvFormatError(count + 2, f"line {count + 2}: {exc}") from exc
                count += 1
        except CsvFormatError as exc:
            logger.error(
                "Tabular ingest of %s stopped at line %d after %d records: %s",
                self.csv_resource, exc.line_number, count, exc,
            )
            raise
        except IngestError as exc:
            logger.error("Tabular ingest of %s failed: %s", self.csv_resource, exc)
            raise
        logger.info("Loaded %d concepts from %s", count, self.csv_resource)
        return count
