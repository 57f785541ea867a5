"""hyperbuild: assemble graphs and hypergraphs from relational datasets."""

__version__ = "0.1.0"

from hyperbuild.engine import (
    MISSING_CLUSTER,
    MISSING_LABEL,
    HyperedgeAssembler,
    Hypergraph,
    IdentifierRegistry,
    InvalidInputError,
    MotifHypergraphBuilder,
    build_correction,
)
from hyperbuild.models import CreditRow, HypergraphStats, PredationRow, SpeciesRow, ValidationResult

__all__ = [
    "MISSING_CLUSTER",
    "MISSING_LABEL",
    "CreditRow",
    "HyperedgeAssembler",
    "Hypergraph",
    "HypergraphStats",
    "IdentifierRegistry",
    "InvalidInputError",
    "MotifHypergraphBuilder",
    "PredationRow",
    "SpeciesRow",
    "ValidationResult",
    "build_correction",
    "__version__",
]
