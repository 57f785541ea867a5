"""Core graph/hypergraph assembly structures.

Holds the pieces shared by every builder: the error type raised on caller
contract violations, the sentinels substituted for missing labels and
clusters, the identifier registry that hands out dense vertex indices, and
the ``Hypergraph`` container that the writer consumes.

Thread Safety:
    ``IdentifierRegistry`` guards index assignment with an internal RLock, so
    several producers may call ``id_for`` concurrently. Index assignment order
    is still first-seen order, which is only reproducible with a single
    producer and a deterministic traversal. Use ``batch()`` to assign a group
    of keys without interleaving:

        with registry.batch():
            for key in members:
                registry.id_for(key)

Sentinels:
    MISSING_LABEL ("missing") replaces a label absent from its source map.
    MISSING_CLUSTER (0) marks a vertex without a cluster assignment; cluster
    ids proper are 1-based.
"""

from __future__ import annotations

import logging
import threading
from collections import Counter
from collections.abc import Generator, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from hyperbuild.models import HypergraphStats, ValidationResult

logger = logging.getLogger("hyperbuild.engine")

MISSING_LABEL = "missing"
MISSING_CLUSTER = 0


class InvalidInputError(ValueError):
    """A caller contract violation: out-of-range index, unknown category, etc."""


class IdentifierRegistry:
    """Maps entity keys to dense 1-based vertex indices in first-seen order.

    There is no removal: the set of assigned indices is always exactly
    ``{1, ..., len(registry)}``.
    """

    def __init__(self) -> None:
        self._index: dict[str, int] = {}
        self._lock = threading.RLock()

    def __getstate__(self) -> dict[str, Any]:
        """Support for pickle/deepcopy - exclude the lock."""
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state: dict[str, Any]) -> None:
        """Support for pickle/deepcopy - recreate the lock."""
        self.__dict__.update(state)
        self._lock = threading.RLock()

    @contextmanager
    def batch(self) -> Generator[None, None, None]:
        """Hold the lock across several ``id_for`` calls."""
        with self._lock:
            yield

    def id_for(self, key: str) -> int:
        """Return the index of ``key``, assigning the next one if unseen.

        Raises:
            TypeError: If key is not a string
        """
        if not isinstance(key, str):
            raise TypeError(f"Entity key must be a string, got: {type(key).__name__}")
        with self._lock:
            index = self._index.get(key)
            if index is None:
                index = len(self._index) + 1
                self._index[key] = index
            return index

    @staticmethod
    def label_for(key: str, source: Mapping[str, str], fallback: str = MISSING_LABEL) -> str:
        """Look up ``key`` in ``source``, or return ``fallback``."""
        label = source.get(key)
        return fallback if label is None else label

    def get(self, key: str) -> int | None:
        with self._lock:
            return self._index.get(key)

    def keys(self) -> list[str]:
        """Keys in index order."""
        with self._lock:
            return list(self._index)

    def items(self) -> list[tuple[str, int]]:
        with self._lock:
            return list(self._index.items())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._index

    def __len__(self) -> int:
        with self._lock:
            return len(self._index)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


@dataclass
class Hypergraph:
    """An assembled graph or hypergraph, ready to be written.

    Attributes:
        edges: Ordered edge/hyperedge records of 1-based vertex indices
        vertex_labels: One label per vertex, in index order
        edge_labels: One label per edge, in edge order (may be empty)
        vertex_clusters: One cluster id per vertex (may be empty)
        cluster_names: One name per cluster id, in cluster-id order
    """

    edges: list[tuple[int, ...]] = field(default_factory=list)
    vertex_labels: list[str] = field(default_factory=list)
    edge_labels: list[str] = field(default_factory=list)
    vertex_clusters: list[int] = field(default_factory=list)
    cluster_names: list[str] = field(default_factory=list)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    @property
    def max_vertex(self) -> int:
        """Largest vertex index referenced by an edge (0 when there are none)."""
        return max((v for edge in self.edges for v in edge), default=0)

    @property
    def num_vertices(self) -> int:
        """Vertex count: labelled vertices, or the largest referenced index."""
        return max(len(self.vertex_labels), len(self.vertex_clusters), self.max_vertex)

    def validate(self) -> ValidationResult:
        """Check index ranges and that per-vertex/per-edge lists line up."""
        errors: list[str] = []
        warnings: list[str] = []
        n = self.num_vertices

        for position, edge in enumerate(self.edges, start=1):
            if len(edge) < 2:
                errors.append(f"Edge {position} has fewer than 2 vertices: {list(edge)}")
            for v in edge:
                if v < 1:
                    errors.append(f"Edge {position} references non-positive vertex {v}")

        if self.vertex_labels and len(self.vertex_labels) != n:
            errors.append(f"Expected {n} vertex labels, got {len(self.vertex_labels)}")
        if self.edge_labels and len(self.edge_labels) != len(self.edges):
            errors.append(f"Expected {len(self.edges)} edge labels, got {len(self.edge_labels)}")
        if self.vertex_clusters:
            if len(self.vertex_clusters) != n:
                errors.append(f"Expected {n} cluster ids, got {len(self.vertex_clusters)}")
            for index, cluster in enumerate(self.vertex_clusters, start=1):
                if cluster != MISSING_CLUSTER and not 1 <= cluster <= len(self.cluster_names):
                    errors.append(f"Vertex {index} has unknown cluster id {cluster}")
                elif cluster == MISSING_CLUSTER:
                    warnings.append(f"Vertex {index} has no cluster")

        used = {v for edge in self.edges for v in edge}
        for index in range(1, n + 1):
            if index not in used:
                warnings.append(f"Vertex {index} is isolated")

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)

    def stats(self) -> HypergraphStats:
        sizes = Counter(len(edge) for edge in self.edges)
        clusters = Counter(self.vertex_clusters)
        cluster_sizes = {
            name: clusters.get(cid, 0) for cid, name in enumerate(self.cluster_names, start=1)
        }
        return HypergraphStats(
            vertex_count=self.num_vertices,
            edge_count=self.num_edges,
            edges_by_size=dict(sorted(sizes.items())),
            cluster_sizes=cluster_sizes,
            unclustered=clusters.get(MISSING_CLUSTER, 0),
        )
