"""Renumbering of a vertex index space after exclusions.

Excluded indices disappear and every retained index shifts down by the
number of excluded indices below it, so the survivors form a dense
``1..M`` range in their original relative order.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable, Sequence
from typing import TypeVar

from hyperbuild.engine.core import InvalidInputError

logger = logging.getLogger("hyperbuild.engine.remap")

T = TypeVar("T")


def _check_excluded(universe_size: int, excluded: Collection[int]) -> None:
    if universe_size < 0:
        raise InvalidInputError(f"Universe size must be non-negative, got: {universe_size}")
    out_of_range = sorted(i for i in excluded if not 1 <= i <= universe_size)
    if out_of_range:
        raise InvalidInputError(
            f"Excluded indices outside [1, {universe_size}]: {out_of_range}"
        )


def build_correction(universe_size: int, excluded: Collection[int]) -> dict[int, int]:
    """Map each retained old index in ``1..universe_size`` to its new index.

    Excluded indices get no entry; callers must filter them out before
    looking anything up.

    Args:
        universe_size: Number of vertices before exclusion (N)
        excluded: 1-based indices to drop

    Returns:
        Dict old_index -> new_index, in ascending old-index order

    Raises:
        InvalidInputError: If N is negative or an excluded index is outside [1, N]
    """
    excluded = frozenset(excluded)
    _check_excluded(universe_size, excluded)

    correction: dict[int, int] = {}
    shift = 0
    for old in range(1, universe_size + 1):
        if old in excluded:
            shift += 1
            continue
        correction[old] = old - shift

    logger.debug(
        "Correction for %d vertices: %d excluded, %d retained",
        universe_size,
        len(excluded),
        len(correction),
    )
    return correction


def remap_edges(
    edges: Iterable[Sequence[int]],
    correction: dict[int, int],
    excluded: Collection[int],
) -> list[tuple[int, ...]]:
    """Drop edges touching an excluded vertex and renumber the rest.

    Every endpoint is checked against the exclusion set before any endpoint
    of the same edge is remapped. Edge order is preserved.

    Raises:
        InvalidInputError: If an endpoint is neither excluded nor in the correction map
    """
    excluded = frozenset(excluded)
    remapped: list[tuple[int, ...]] = []
    dropped = 0
    for edge in edges:
        if any(v in excluded for v in edge):
            dropped += 1
            continue
        try:
            remapped.append(tuple(correction[v] for v in edge))
        except KeyError as exc:
            raise InvalidInputError(
                f"Edge {list(edge)} references vertex {exc.args[0]} outside the universe"
            ) from None
    logger.debug("Remapped %d edges, dropped %d", len(remapped), dropped)
    return remapped


def retained(items: Iterable[T], excluded: Collection[int], offset: int = 1) -> list[T]:
    """Keep the items of a per-vertex sequence whose index is not excluded.

    The first item has index ``offset``.
    """
    excluded = frozenset(excluded)
    return [item for index, item in enumerate(items, start=offset) if index not in excluded]
