"""Plain-text persistence for assembled hypergraphs.

A hypergraph is written as up to five files sharing a path prefix:

    prefix.edgelist   # one edge per line, space-separated 1-based vertex indices
    prefix.vertices   # one label per line, vertex-index order
    prefix.edges      # one label per line, edge order
    prefix.gt         # one integer cluster id per line, vertex-index order
    prefix.clusters   # one cluster name per line, cluster-id order

The format is deliberately lossy: direction and edge multiplicity semantics
are not recorded.

Security:
    Prefixes are resolved to absolute paths; null bytes are rejected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .core import Hypergraph

logger = logging.getLogger("hyperbuild.engine.persistence")

EDGELIST_SUFFIX = ".edgelist"
VERTICES_SUFFIX = ".vertices"
EDGES_SUFFIX = ".edges"
GT_SUFFIX = ".gt"
CLUSTERS_SUFFIX = ".clusters"


def _validate_prefix(prefix: str | Path) -> Path:
    """Validate and resolve an output prefix.

    Raises:
        ValueError: If the prefix contains null bytes or names a directory
    """
    prefix = str(prefix)
    if "\x00" in prefix:
        raise ValueError(f"Invalid path (contains null bytes): {prefix!r}")
    resolved = Path(prefix).resolve()
    if resolved.is_dir():
        raise ValueError(f"Prefix {prefix} is a directory, expected a file prefix")
    return resolved


def _with_suffix(prefix: Path, suffix: str) -> Path:
    return prefix.with_name(prefix.name + suffix)


def _write_lines(path: Path, lines: Iterable[str]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line)
            f.write("\n")


def _read_lines(path: Path) -> list[str]:
    with open(path, encoding="utf-8") as f:
        return [line.rstrip("\n") for line in f]


def save_hypergraph(hypergraph: Hypergraph, prefix: str | Path) -> list[Path]:
    """Write ``hypergraph`` next to ``prefix`` and return the written paths.

    The edgelist and vertices files are always written. The edges file is
    written only when there are edge labels, and the gt/clusters files only
    when there are cluster ids.

    Raises:
        ValueError: If the prefix is invalid
    """
    base = _validate_prefix(prefix)
    base.parent.mkdir(parents=True, exist_ok=True)

    outputs: list[tuple[str, list[str]]] = [
        (EDGELIST_SUFFIX, [" ".join(str(v) for v in edge) for edge in hypergraph.edges]),
        (VERTICES_SUFFIX, list(hypergraph.vertex_labels)),
    ]
    if hypergraph.edge_labels:
        outputs.append((EDGES_SUFFIX, list(hypergraph.edge_labels)))
    if hypergraph.vertex_clusters:
        outputs.append((GT_SUFFIX, [str(c) for c in hypergraph.vertex_clusters]))
        outputs.append((CLUSTERS_SUFFIX, list(hypergraph.cluster_names)))

    written: list[Path] = []
    for suffix, lines in outputs:
        path = _with_suffix(base, suffix)
        _write_lines(path, lines)
        written.append(path)
    logger.info("Wrote %d edges to %s", hypergraph.num_edges, _with_suffix(base, EDGELIST_SUFFIX))
    return written


def parse_edgelist(lines: Iterable[str]) -> list[tuple[int, ...]]:
    """Parse edgelist lines; blank lines and ``#`` comments are skipped.

    Raises:
        ValueError: If a line holds a non-integer token
    """
    edges: list[tuple[int, ...]] = []
    for number, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        try:
            edges.append(tuple(int(token) for token in stripped.split()))
        except ValueError:
            raise ValueError(f"Line {number}: expected integers, got {stripped!r}") from None
    return edges


def load_edgelist(path: str | Path) -> list[tuple[int, ...]]:
    """Read a ``.edgelist`` file.

    Raises:
        ValueError: If the path is invalid or a line is malformed
        FileNotFoundError: If the file does not exist
    """
    validated = _validate_prefix(path)
    with open(validated, encoding="utf-8") as f:
        return parse_edgelist(f)


def load_hypergraph(prefix: str | Path) -> Hypergraph:
    """Read back whatever ``save_hypergraph`` wrote for ``prefix``.

    Raises:
        FileNotFoundError: If the edgelist file does not exist
    """
    base = _validate_prefix(prefix)
    hypergraph = Hypergraph(edges=load_edgelist(_with_suffix(base, EDGELIST_SUFFIX)))

    vertices = _with_suffix(base, VERTICES_SUFFIX)
    if vertices.exists():
        hypergraph.vertex_labels = _read_lines(vertices)
    edges = _with_suffix(base, EDGES_SUFFIX)
    if edges.exists():
        hypergraph.edge_labels = _read_lines(edges)
    gt = _with_suffix(base, GT_SUFFIX)
    if gt.exists():
        hypergraph.vertex_clusters = [int(line) for line in _read_lines(gt) if line.strip()]
    clusters = _with_suffix(base, CLUSTERS_SUFFIX)
    if clusters.exists():
        hypergraph.cluster_names = _read_lines(clusters)
    return hypergraph
