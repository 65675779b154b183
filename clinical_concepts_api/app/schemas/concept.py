"""
Pydantic schema for clinical concepts.

A concept is one node of the catalog graph.  ``parent_ids`` and
``child_ids`` reference other concepts by id; neither dangling
references, duplicates nor asymmetric links are rejected.  On the
wire every field uses its camelCase alias (``conceptId``,
``displayName`` ...), matching what the web client sends and expects.
"""

from typing import List

from pydantic import BaseModel, Field


class ClinicalConcept(BaseModel):
    """A clinical concept as stored in and served from the catalog."""

    concept_id: str = Field(..., alias="conceptId", examples=["C001"])
    display_name: str = Field(..., alias="displayName", examples=["Hypertension"])
    description: str = Field("", examples=["A condition in which the force of the blood against the artery walls is too high."])
    parent_ids: List[str] = Field(default_factory=list, alias="parentIds", examples=[["P001", "P002"]])
    child_ids: List[str] = Field(default_factory=list, alias="childIds", examples=[["C002", "C003"]])
    alternate_names: str = Field("", alias="alternateNames", examples=["High Blood Pressure"])

    # Accept both ``concept_id=...`` from Python code and ``conceptId``
    # from JSON bodies.
    model_config = {
        "populate_by_name": True,
    }
