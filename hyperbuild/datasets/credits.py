"""Film-credit hypergraph: one hyperedge per film over its principal cast and crew.

Vertices are people, numbered in the order they first appear in a kept
credit. Each person's ground-truth cluster is the category they were first
kept under. Edge labels are film titles; vertex labels are person names.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from hyperbuild.engine.assembler import HyperedgeAssembler, group_rows
from hyperbuild.engine.core import Hypergraph
from hyperbuild.models import CreditRow

logger = logging.getLogger("hyperbuild.datasets.credits")

# Cluster ids are positions in this table: actor=1, actress=2, director=3
CREDIT_CATEGORIES: tuple[str, ...] = ("actor", "actress", "director")
CREDIT_EDGE_ORDER: tuple[str, ...] = ("actress", "actor", "director")


def _as_row(row: CreditRow | Mapping[str, Any]) -> CreditRow:
    if isinstance(row, CreditRow):
        return row
    return CreditRow.model_validate(row)


def build_credit_hypergraph(
    films: Mapping[str, str],
    people: Mapping[str, str],
    credits: Iterable[CreditRow | Mapping[str, Any]],
    cap: int = 1,
) -> Hypergraph:
    """Assemble the credit hypergraph.

    Args:
        films: Film id -> title; credits for other films are ignored
        people: Person id -> name; unknown people are labelled "missing"
        credits: Credit rows (``film_id``, ``person_id``, ``category``)
        cap: Keep at most this many people per category and film

    Returns:
        Hypergraph with film-title edge labels and role clusters
    """
    kept: list[CreditRow] = []
    skipped = 0
    for raw in credits:
        row = _as_row(raw)
        if row.film_id in films and row.category in CREDIT_CATEGORIES:
            kept.append(row)
        else:
            skipped += 1
    logger.debug("Kept %d credits, skipped %d", len(kept), skipped)

    assembler = HyperedgeAssembler(
        CREDIT_CATEGORIES,
        cap,
        order=CREDIT_EDGE_ORDER,
        vertex_labels=people,
        edge_labels=films,
    )
    assembler.add_groups(group_rows(kept, "film_id", "person_id", "category"))
    return assembler.build()
