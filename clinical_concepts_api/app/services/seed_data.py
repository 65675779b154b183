"""
Built‑in seed set of ten clinical concepts.

``CatalogService.load_seed_set`` upserts these records in list order.
"""

from typing import List

from clinical_concepts_api.app.schemas.concept import ClinicalConcept


SEED_CONCEPTS: List[dict] = [
    {
        "concept_id": "C001",
        "display_name": "Hypertension",
        "description": "A condition in which the force of the blood against the artery walls is too high.",
        "parent_ids": ["P001", "P002"],
        "child_ids": ["C002", "C003"],
        "alternate_names": "High Blood Pressure",
    },
    {
        "concept_id": "C002",
        "display_name": "Diabetes Mellitus",
        "description": "A disease that occurs when your blood glucose, also called blood sugar, is too high.",
        "parent_ids": ["P003"],
        "child_ids": ["C004", "C005"],
        "alternate_names": "Diabetes",
    },
    {
        "concept_id": "C003",
        "display_name": "Asthma",
        "description": "A condition in which your airways narrow and swell and may produce extra mucus.",
        "parent_ids": ["P004"],
        "child_ids": ["C006"],
        "alternate_names": "Bronchial Asthma",
    },
    {
        "concept_id": "C004",
        "display_name": "Chronic Kidney Disease",
        "description": "A condition characterized by a gradual loss of kidney function over time.",
        "parent_ids": ["P002"],
        "child_ids": ["C005", "C006"],
        "alternate_names": "CKD",
    },
    {
        "concept_id": "C005",
        "display_name": "Alzheimer's Disease",
        "description": "A progressive disease that destroys memory and other important mental functions.",
        "parent_ids": ["P005"],
        "child_ids": [],
        "alternate_names": "Alzheimer's",
    },
    {
        "concept_id": "C006",
        "display_name": "Parkinson's Disease",
        "description": "A disorder of the central nervous system that affects movement, often including tremors.",
        "parent_ids": ["P006"],
        "child_ids": [],
        "alternate_names": "Parkinson's",
    },
    {
        "concept_id": "C007",
        "display_name": "Coronary Artery Disease",
        "description": "A disease caused by the buildup of plaque resulting in the arteries to become hardened and narrowed.",
        "parent_ids": ["P001"],
        "child_ids": ["C008"],
        "alternate_names": "CAD",
    },
    {
        "concept_id": "C008",
        "display_name": "Stroke",
        "description": "Occurs when the blood supply to part of your brain is reduced, preventing brain tissue from getting oxygen.",
        "parent_ids": ["P003"],
        "child_ids": [],
        "alternate_names": "Cerebrovascular Accident",
    },
    {
        "concept_id": "C009",
        "display_name": "Chronic Obstructive Pulmonary Disease",
        "description": "A group of lung diseases that block airflow and make it difficult to breathe.",
        "parent_ids": ["P004"],
        "child_ids": ["C010"],
        "alternate_names": "COPD",
    },
    {
        "concept_id": "C010",
        "display_name": "Lung Cancer",
        "description": "A type of cancer that begins in the lungs.",
        "parent_ids": ["P007"],
        "child_ids": [],
        "alternate_names": "Pulmonary Carcinoma",
    },
]


def seed_concepts() -> List[ClinicalConcept]:
    """Return fresh ``ClinicalConcept`` instances for the seed set."""
    return [ClinicalConcept(**record) for record in SEED_CONCEPTS]
