from hyperbuild.engine.assembler import HyperedgeAssembler, group_rows
from hyperbuild.engine.core import (
    MISSING_CLUSTER,
    MISSING_LABEL,
    Hypergraph,
    IdentifierRegistry,
    InvalidInputError,
)
from hyperbuild.engine.motifs import MotifHypergraphBuilder
from hyperbuild.engine.persistence import load_edgelist, load_hypergraph, save_hypergraph
from hyperbuild.engine.remap import build_correction, remap_edges, retained

__all__ = [
    "MISSING_CLUSTER",
    "MISSING_LABEL",
    "Hypergraph",
    "IdentifierRegistry",
    "InvalidInputError",
    "HyperedgeAssembler",
    "group_rows",
    "MotifHypergraphBuilder",
    "build_correction",
    "remap_edges",
    "retained",
    "save_hypergraph",
    "load_edgelist",
    "load_hypergraph",
]
