"""
SQLite‑backed store of clinical concepts keyed by concept id.

Each operation opens its own connection, so one ``ConceptStore`` may
be shared by request handlers running in parallel threads.  Upserts
use ``INSERT ... ON CONFLICT DO UPDATE`` which SQLite applies
atomically; concurrent writers of the same id serialize on the
database lock and the last one wins.  There is no transaction
spanning several records.

Edge lists are stored as JSON text so that ordering and duplicates
are preserved exactly as ingested.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import List, Optional

from clinical_concepts_api.app.core.db import get_cursor
from clinical_concepts_api.app.schemas.concept import ClinicalConcept


logger = logging.getLogger(__name__)


class ConceptStore:
    """Durable keyed collection of ``ClinicalConcept`` records."""

    def __init__(self, db_path: str, timeout: float = 30.0) -> None:
        self.db_path = db_path
        self.timeout = timeout

    def list(self) -> List[ClinicalConcept]:
        """Return every stored concept in first‑insert order."""
        with get_cursor(self.db_path, self.timeout) as cursor:
            rows = cursor.execute("SELECT * FROM concepts ORDER BY rowid").fetchall()
        return [self._row_to_concept(row) for row in rows]

    def get(self, concept_id: str) -> Optional[ClinicalConcept]:
        """Return the concept stored under ``concept_id`` or ``None``."""
        with get_cursor(self.db_path, self.timeout) as cursor:
            row = cursor.execute(
                "SELECT * FROM concepts WHERE concept_id = ?",
                (concept_id,),
            ).fetchone()
        if not row:
            return None
        return self._row_to_concept(row)

    def upsert(self, concept: ClinicalConcept) -> ClinicalConcept:
        """Insert or replace the record stored under ``concept.concept_id``.

        Both edge lists are replaced wholesale.  Returns the stored
        record.
        """
        with get_cursor(self.db_path, self.timeout) as cursor:
            cursor.execute(
                """
                INSERT INTO concepts (concept_id, display_name, description, parent_ids, child_ids, alternate_names)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(concept_id) DO UPDATE SET
                    display_name = excluded.display_name,
                    description = excluded.description,
                    parent_ids = excluded.parent_ids,
                    child_ids = excluded.child_ids,
                    alternate_names = excluded.alternate_names
                """,
                (
                    concept.concept_id,
                    concept.display_name,
                    concept.description,
                    json.dumps(concept.parent_ids),
                    json.dumps(concept.child_ids),
                    concept.alternate_names,
                ),
            )
        logger.debug("Upserted concept %s", concept.concept_id)
        return concept.model_copy(deep=True)

    def delete(self, concept_id: str) -> bool:
        """Delete a concept by id.

        Absence is not an error.  Returns ``True`` if a record was
        removed.
        """
        with get_cursor(self.db_path, self.timeout) as cursor:
            cursor.execute("DELETE FROM concepts WHERE concept_id = ?", (concept_id,))
            affected = cursor.rowcount
        if affected:
            logger.debug("Deleted concept %s", concept_id)
        return affected > 0

    @staticmethod
    def _row_to_concept(row: sqlite3.Row) -> ClinicalConcept:
        """Convert a database row to a ``ClinicalConcept``."""
        return ClinicalConcept(
            concept_id=row["concept_id"],
            display_name=row["display_name"],
            description=row["description"],
            parent_ids=json.loads(row["parent_ids"]),
            child_ids=json.loads(row["child_ids"]),
            alternate_names=row["alternate_names"],
        )
