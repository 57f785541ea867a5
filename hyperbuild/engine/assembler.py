"""Category-capped hyperedges, one per group.

Each group (for example a film) brings its members partitioned by category
(for example actor/actress/director). The assembler keeps at most ``cap``
members of each category, concatenates the survivors in a fixed category
order, and numbers new members through an ``IdentifierRegistry``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from hyperbuild.engine.core import (
    MISSING_LABEL,
    Hypergraph,
    IdentifierRegistry,
    InvalidInputError,
)

logger = logging.getLogger("hyperbuild.engine.assembler")


def _field(row: Any, name: str) -> Any:
    if isinstance(row, Mapping):
        return row[name]
    return getattr(row, name)


def group_rows(
    rows: Iterable[Any],
    group_field: str,
    member_field: str,
    category_field: str,
) -> dict[str, dict[str, list[str]]]:
    """Group records into ``{group: {category: [member, ...]}}``.

    Groups, categories and members all keep first-seen order. Rows may be
    mappings or objects with matching attributes.
    """
    groups: dict[str, dict[str, list[str]]] = {}
    for row in rows:
        group = _field(row, group_field)
        category = _field(row, category_field)
        groups.setdefault(group, {}).setdefault(category, []).append(_field(row, member_field))
    return groups


class HyperedgeAssembler:
    """Builds one capped hyperedge per group.

    Args:
        categories: Category names; the cluster id of a category is its position + 1
        cap: Keep at most this many members of each category
        order: Concatenation order of categories (defaults to ``categories``)
        vertex_labels: Member key -> label source
        edge_labels: Group key -> label source

    Raises:
        InvalidInputError: On a negative cap, duplicate categories, or an
            ``order`` naming a category not in ``categories``
    """

    def __init__(
        self,
        categories: Sequence[str],
        cap: int = 1,
        *,
        order: Sequence[str] | None = None,
        vertex_labels: Mapping[str, str] | None = None,
        edge_labels: Mapping[str, str] | None = None,
    ) -> None:
        if cap < 0:
            raise InvalidInputError(f"Cap must be non-negative, got: {cap}")
        if len(set(categories)) != len(categories):
            raise InvalidInputError(f"Duplicate categories: {list(categories)}")
        self.categories = list(categories)
        self.cluster_ids = {name: cid for cid, name in enumerate(self.categories, start=1)}
        self.order = list(order) if order is not None else list(self.categories)
        unknown = [name for name in self.order if name not in self.cluster_ids]
        if unknown:
            raise InvalidInputError(f"Order names unknown categories: {unknown}")
        self.cap = cap
        self.registry = IdentifierRegistry()
        self._vertex_source: Mapping[str, str] = vertex_labels or {}
        self._edge_source: Mapping[str, str] = edge_labels or {}

        self._edges: list[tuple[int, ...]] = []
        self._edge_labels: list[str] = []
        self._vertex_labels: list[str] = []
        self._vertex_clusters: list[int] = []

    def select(self, members: Mapping[str, Sequence[str]]) -> list[tuple[str, str]]:
        """Capped ``(category, member)`` pairs in concatenation order."""
        unknown = [name for name in members if name not in self.cluster_ids]
        if unknown:
            raise InvalidInputError(f"Unknown categories: {unknown}")
        selected: list[tuple[str, str]] = []
        for category in self.order:
            for member in list(members.get(category, ()))[: self.cap]:
                selected.append((category, member))
        return selected

    def add(
        self,
        group_key: str,
        members: Mapping[str, Sequence[str]],
        label: str | None = None,
    ) -> tuple[int, ...] | None:
        """Append the hyperedge for one group and return it.

        Returns None, and records nothing, when no member survives the cap.

        Raises:
            InvalidInputError: If ``members`` names a category not in the table
        """
        selected = self.select(members)
        if not selected:
            logger.debug("Group %s has no members after capping, skipped", group_key)
            return None

        edge: list[int] = []
        with self.registry.batch():
            for category, member in selected:
                known = member in self.registry
                index = self.registry.id_for(member)
                if not known:
                    self._vertex_labels.append(
                        self.registry.label_for(member, self._vertex_source)
                    )
                    self._vertex_clusters.append(self.cluster_ids[category])
                edge.append(index)

        if label is None:
            label = self.registry.label_for(group_key, self._edge_source, MISSING_LABEL)
        self._edges.append(tuple(edge))
        self._edge_labels.append(label)
        return tuple(edge)

    def add_groups(self, groups: Mapping[str, Mapping[str, Sequence[str]]]) -> int:
        """Add every group in mapping order; return the number of hyperedges added."""
        added = 0
        for group_key, members in groups.items():
            if self.add(group_key, members) is not None:
                added += 1
        return added

    def build(self) -> Hypergraph:
        logger.info(
            "Assembled %d hyperedges over %d vertices", len(self._edges), len(self.registry)
        )
        return Hypergraph(
            edges=list(self._edges),
            vertex_labels=list(self._vertex_labels),
            edge_labels=list(self._edge_labels),
            vertex_clusters=list(self._vertex_clusters),
            cluster_names=list(self.categories),
        )
