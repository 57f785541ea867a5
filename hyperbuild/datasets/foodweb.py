"""Food-web network and its predation-motif hypergraph.

The raw data numbers species from 0. Ids are shifted by ``offset`` into the
1-based index space, a fixed set of non-living compartments is excluded, and
the survivors are renumbered densely. The motif hypergraph then links every
two prey species that share two predators.

Default exclusions are the detritus and other non-species compartments of
the Florida Bay data set (128 compartments).
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Mapping, Sequence
from typing import Any

from hyperbuild.engine.core import MISSING_CLUSTER, MISSING_LABEL, Hypergraph, InvalidInputError
from hyperbuild.engine.motifs import MotifHypergraphBuilder, Strategy
from hyperbuild.engine.remap import build_correction, remap_edges, retained
from hyperbuild.models import PredationRow, SpeciesRow

logger = logging.getLogger("hyperbuild.datasets.foodweb")

FOODWEB_UNIVERSE_SIZE = 128
FOODWEB_EXCLUDED: tuple[int, ...] = (12, 123, 124, 126)


def _as_edge(row: PredationRow | Mapping[str, Any] | Sequence[int]) -> PredationRow:
    if isinstance(row, PredationRow):
        return row
    if isinstance(row, Mapping):
        return PredationRow.model_validate(row)
    source, target = row
    return PredationRow(source=source, target=target)


def _as_species(row: SpeciesRow | Mapping[str, Any]) -> SpeciesRow:
    if isinstance(row, SpeciesRow):
        return row
    return SpeciesRow.model_validate(row)


def build_foodweb_network(
    edges: Iterable[PredationRow | Mapping[str, Any] | Sequence[int]],
    species: Iterable[SpeciesRow | Mapping[str, Any]],
    universe_size: int = FOODWEB_UNIVERSE_SIZE,
    excluded: Collection[int] = FOODWEB_EXCLUDED,
    offset: int = 1,
) -> Hypergraph:
    """Build the renumbered predation graph.

    Args:
        edges: Raw ``(source, target)`` predation pairs
        species: Raw species metadata (``node_id``, ``name``, ``group``)
        universe_size: Number of compartments before exclusion
        excluded: 1-based (shifted) indices to drop
        offset: Added to every raw id to reach the 1-based index space

    Returns:
        Hypergraph of 2-vertex edges with species names and group clusters

    Raises:
        InvalidInputError: If a raw id falls outside the universe, a species
            is listed twice, or an excluded index is out of range
    """
    correction = build_correction(universe_size, excluded)

    shifted = [(e.source + offset, e.target + offset) for e in map(_as_edge, edges)]
    for u, v in shifted:
        if not (1 <= u <= universe_size and 1 <= v <= universe_size):
            raise InvalidInputError(
                f"Edge ({u}, {v}) is outside the universe [1, {universe_size}]"
            )

    labels = [MISSING_LABEL] * universe_size
    groups: list[str | None] = [None] * universe_size
    seen: set[int] = set()
    cluster_names: list[str] = []
    for row in map(_as_species, species):
        index = row.node_id + offset
        if not 1 <= index <= universe_size:
            raise InvalidInputError(
                f"Species {row.name!r} has index {index} outside [1, {universe_size}]"
            )
        if index in seen:
            raise InvalidInputError(f"Species index {index} listed twice")
        seen.add(index)
        labels[index - 1] = row.name
        groups[index - 1] = row.group
        if row.group is not None and row.group not in cluster_names:
            cluster_names.append(row.group)

    cluster_ids = {name: cid for cid, name in enumerate(cluster_names, start=1)}
    clusters = [MISSING_CLUSTER if g is None else cluster_ids[g] for g in groups]

    network = Hypergraph(
        edges=remap_edges(shifted, correction, excluded),
        vertex_labels=retained(labels, excluded),
        vertex_clusters=retained(clusters, excluded),
        cluster_names=cluster_names,
    )
    logger.info(
        "Food-web network: %d vertices, %d edges, %d clusters",
        len(network.vertex_labels),
        network.num_edges,
        len(cluster_names),
    )
    return network


def build_foodweb_hypergraph(
    network: Hypergraph,
    *,
    workers: int = 1,
    strategy: Strategy = "scan",
) -> Hypergraph:
    """Build the two-prey/two-predator motif hypergraph of ``network``.

    Edges of ``network`` are read as prey -> predator. The hypergraph shares
    the network's vertex labels, clusters and cluster names.
    """
    builder = MotifHypergraphBuilder(network.edges, bound=network.num_vertices)
    return builder.to_hypergraph(
        network.vertex_labels or None,
        network.vertex_clusters or None,
        network.cluster_names,
        workers=workers,
        strategy=strategy,
    )
