"""Motif hypergraph construction from a directed relation.

The motif is two distinct source vertices ("prey") that both point at the
same two target vertices ("predators"). Every occurrence becomes one
4-vertex hyperedge ``(p1, p2, t1, t2)``.

Enumeration order:
    - ``p1`` ascends over ``1..bound``; vertices without out-edges are skipped
    - ``(t1, t2)`` runs over positions ``i < j`` of ``out[p1]`` in insertion order
    - ``p2`` ascends over ``p1 + 1..bound`` and must point at both targets

``p2 > p1`` keeps each prey pair once. Target pairs are not deduplicated
separately; the out-lists are deduplicated on insert, which is what keeps a
target pair from appearing twice for the same ``p1``.

Strategies:
    "scan" follows the enumeration above literally. Its cost is the number
    of candidate target pairs times a linear scan over ``p2``.
    "indexed" first indexes every prey by the unordered target pairs it
    covers, then reads candidate ``p2`` vertices off that index. It emits
    the same tuples in the same order.

References:
- Benson, Gleich & Leskovec: "Higher-order organization of complex networks" (2016)
- Li & Milenkovic: "Inhomogeneous hypergraph clustering with applications" (2017)
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Literal

from hyperbuild.engine.core import Hypergraph, InvalidInputError

logger = logging.getLogger("hyperbuild.engine.motifs")

Motif = tuple[int, int, int, int]
Strategy = Literal["scan", "indexed"]
STRATEGIES: tuple[str, ...] = ("scan", "indexed")


class MotifHypergraphBuilder:
    """Finds every two-prey/two-predator motif in a directed edge set.

    Adjacency is built once in the constructor and never mutated afterwards.
    The target-pair index is built lazily under a lock, so the builder can be
    shared between threads.

    Args:
        edges: Directed ``(u, v)`` pairs of 1-based vertex indices
        bound: Declared vertex range ``[1, bound]``; defaults to the largest id seen

    Raises:
        InvalidInputError: If an edge is not a pair, references a vertex < 1,
            or references a vertex above ``bound``
    """

    def __init__(self, edges: Iterable[Sequence[int]], bound: int | None = None) -> None:
        self._out: dict[int, list[int]] = {}
        self._in: dict[int, list[int]] = {}
        # Membership mirrors of the lists above for O(1) containment checks
        self._out_sets: dict[int, set[int]] = {}
        self._in_sets: dict[int, set[int]] = {}
        self._pair_index: dict[tuple[int, int], list[int]] | None = None
        self._index_lock = threading.Lock()

        largest = 0
        edge_count = 0
        for edge in edges:
            if len(edge) != 2:
                raise InvalidInputError(f"Directed edge must have 2 endpoints, got: {list(edge)}")
            u, v = int(edge[0]), int(edge[1])
            if u < 1 or v < 1:
                raise InvalidInputError(f"Vertex indices must be >= 1, got edge ({u}, {v})")
            largest = max(largest, u, v)
            edge_count += 1
            self._insert(self._out, self._out_sets, u, v)
            self._insert(self._in, self._in_sets, v, u)

        if bound is None:
            bound = largest
        elif largest > bound:
            raise InvalidInputError(
                f"Edge references vertex {largest} beyond declared bound {bound}"
            )
        self.bound = bound
        logger.debug(
            "Adjacency over %d vertices: %d edges, %d prey, %d predators",
            bound,
            edge_count,
            len(self._out),
            len(self._in),
        )

    @staticmethod
    def _insert(
        lists: dict[int, list[int]], sets: dict[int, set[int]], key: int, value: int
    ) -> None:
        members = sets.get(key)
        if members is None:
            lists[key] = [value]
            sets[key] = {value}
        elif value not in members:
            lists[key].append(value)
            members.add(value)

    # ========== Adjacency ==========

    def out_neighbors(self, vertex: int) -> list[int]:
        """Targets of ``vertex`` in insertion order (empty if none)."""
        return list(self._out.get(vertex, ()))

    def in_neighbors(self, vertex: int) -> list[int]:
        """Sources pointing at ``vertex`` in insertion order (empty if none)."""
        return list(self._in.get(vertex, ()))

    def count_pair_candidates(self) -> int:
        """Number of target pairs generated: sum of C(deg, 2) over prey."""
        return sum(len(targets) * (len(targets) - 1) // 2 for targets in self._out.values())

    # ========== Enumeration ==========

    def _target_pairs(self, prey: int) -> Iterator[tuple[int, int]]:
        targets = self._out[prey]
        for i in range(len(targets)):
            for j in range(i + 1, len(targets)):
                yield targets[i], targets[j]

    def _scan(self, p1: int) -> list[Motif]:
        found: list[Motif] = []
        for t1, t2 in self._target_pairs(p1):
            for p2 in range(p1 + 1, self.bound + 1):
                targets = self._out_sets.get(p2)
                if targets is not None and t1 in targets and t2 in targets:
                    found.append((p1, p2, t1, t2))
        return found

    def _build_pair_index(self) -> dict[tuple[int, int], list[int]]:
        # Prey are added in ascending order, so each list is already sorted
        index: dict[tuple[int, int], list[int]] = defaultdict(list)
        for prey in sorted(self._out):
            for t1, t2 in self._target_pairs(prey):
                key = (t1, t2) if t1 < t2 else (t2, t1)
                index[key].append(prey)
        return dict(index)

    def _indexed(self, p1: int) -> list[Motif]:
        assert self._pair_index is not None
        found: list[Motif] = []
        for t1, t2 in self._target_pairs(p1):
            key = (t1, t2) if t1 < t2 else (t2, t1)
            for p2 in self._pair_index[key]:
                if p2 > p1:
                    found.append((p1, p2, t1, t2))
        return found

    def _finder(self, strategy: Strategy):
        if strategy == "scan":
            return self._scan
        if strategy == "indexed":
            with self._index_lock:
                if self._pair_index is None:
                    self._pair_index = self._build_pair_index()
            return self._indexed
        raise ValueError(f"Unknown strategy: {strategy!r}")

    def _prey(self) -> list[int]:
        return [p for p in range(1, self.bound + 1) if p in self._out]

    def motifs(self, strategy: Strategy = "scan") -> Iterator[Motif]:
        """Yield every motif in enumeration order."""
        find = self._finder(strategy)
        for p1 in self._prey():
            yield from find(p1)

    def build(self, workers: int = 1, strategy: Strategy = "scan") -> list[Motif]:
        """Collect every motif, optionally fanning ``p1`` out over threads.

        Per-prey results are concatenated in ``p1`` order, so the output does
        not depend on ``workers``.
        """
        if workers < 1:
            raise ValueError(f"workers must be >= 1, got: {workers}")
        find = self._finder(strategy)
        prey = self._prey()
        if workers == 1:
            motifs = [m for p1 in prey for m in find(p1)]
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                motifs = [m for found in pool.map(find, prey) for m in found]
        logger.info(
            "Found %d motifs from %d prey (%d candidate pairs, strategy=%s)",
            len(motifs),
            len(prey),
            self.count_pair_candidates(),
            strategy,
        )
        return motifs

    def to_hypergraph(
        self,
        vertex_labels: Sequence[str] | None = None,
        vertex_clusters: Sequence[int] | None = None,
        cluster_names: Sequence[str] | None = None,
        *,
        workers: int = 1,
        strategy: Strategy = "scan",
    ) -> Hypergraph:
        """Wrap the motifs in a ``Hypergraph`` over the same vertex space.

        Raises:
            InvalidInputError: If a per-vertex list does not have ``bound`` entries
        """
        per_vertex = (("vertex_labels", vertex_labels), ("vertex_clusters", vertex_clusters))
        for name, values in per_vertex:
            if values is not None and len(values) != self.bound:
                raise InvalidInputError(
                    f"{name} has {len(values)} entries for {self.bound} vertices"
                )
        return Hypergraph(
            edges=list(self.build(workers=workers, strategy=strategy)),
            vertex_labels=list(vertex_labels or []),
            vertex_clusters=list(vertex_clusters or []),
            cluster_names=list(cluster_names or []),
        )
