"""Pydantic models for hyperbuild's public API.

Row models describe the already-filtered records the dataset pipelines
consume; the result models summarise an assembled hypergraph.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreditRow(BaseModel):
    """One credit: a person working on a film in some category."""

    model_config = ConfigDict(frozen=True)

    film_id: str
    person_id: str
    category: str


class PredationRow(BaseModel):
    """A directed food-web edge between raw (pre-remap) species ids.

    Raw ids are the dataset's own numbering, typically 0-based.
    """

    model_config = ConfigDict(frozen=True)

    source: int = Field(ge=0)
    target: int = Field(ge=0)


class SpeciesRow(BaseModel):
    """Metadata for one food-web species, keyed by its raw id."""

    model_config = ConfigDict(frozen=True)

    node_id: int = Field(ge=0)
    name: str
    group: str | None = None

    @field_validator("group", mode="before")
    @classmethod
    def _blank_group_is_missing(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ValidationResult(BaseModel):
    """Result of a hypergraph consistency check.

    Contains a pass/fail flag, a list of errors, and a list of warnings
    found during validation.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class HypergraphStats(BaseModel):
    """Summary counts for a hypergraph.

    Reports vertex and edge counts, edges broken down by size and vertices
    broken down by cluster name.
    """

    vertex_count: int
    edge_count: int
    edges_by_size: dict[int, int] = Field(default_factory=dict)
    cluster_sizes: dict[str, int] = Field(default_factory=dict)
    unclustered: int = 0
