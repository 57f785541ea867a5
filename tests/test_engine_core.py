"""Tests for the identifier registry and the Hypergraph container."""

import copy
import pickle

import pytest

from hyperbuild.engine.core import (
    MISSING_CLUSTER,
    MISSING_LABEL,
    Hypergraph,
    IdentifierRegistry,
)


class TestIdentifierRegistry:
    """Tests for first-seen index assignment."""

    def test_first_seen_order_reuses_indices(self):
        registry = IdentifierRegistry()
        assigned = [registry.id_for(key) for key in ["f9", "f2", "f9", "f7"]]
        assert assigned == [1, 2, 1, 3]
        assert dict(registry.items()) == {"f9": 1, "f2": 2, "f7": 3}

    def test_indices_are_contiguous(self):
        registry = IdentifierRegistry()
        keys = ["k3", "k1", "k3", "k2", "k1", "k5", "k4"]
        for key in keys:
            registry.id_for(key)
        assert sorted(index for _, index in registry.items()) == list(range(1, len(set(keys)) + 1))
        assert len(registry) == len(set(keys))

    def test_deterministic_across_runs(self):
        keys = ["b", "a", "c", "a", "b", "d"]
        first, second = IdentifierRegistry(), IdentifierRegistry()
        assert [first.id_for(k) for k in keys] == [second.id_for(k) for k in keys]

    def test_keys_in_index_order(self):
        registry = IdentifierRegistry()
        for key in ["z", "y", "z", "x"]:
            registry.id_for(key)
        assert registry.keys() == ["z", "y", "x"]
        assert list(registry) == ["z", "y", "x"]

    def test_membership_and_get(self):
        registry = IdentifierRegistry()
        registry.id_for("present")
        assert "present" in registry
        assert "absent" not in registry
        assert registry.get("present") == 1
        assert registry.get("absent") is None

    def test_membership_query_does_not_assign(self):
        registry = IdentifierRegistry()
        assert "x" not in registry
        assert registry.get("x") is None
        assert len(registry) == 0

    def test_non_string_key_raises(self):
        registry = IdentifierRegistry()
        with pytest.raises(TypeError, match="must be a string"):
            registry.id_for(42)

    def test_label_for_present(self):
        assert IdentifierRegistry.label_for("nm1", {"nm1": "Ann"}) == "Ann"

    def test_label_for_missing_uses_default_fallback(self):
        assert IdentifierRegistry.label_for("nm1", {}) == MISSING_LABEL == "missing"

    def test_label_for_custom_fallback(self):
        assert IdentifierRegistry.label_for("nm1", {"nm2": "Bob"}, "?") == "?"

    def test_pickle_roundtrip_recreates_lock(self):
        registry = IdentifierRegistry()
        registry.id_for("a")
        restored = pickle.loads(pickle.dumps(registry))
        assert restored.id_for("a") == 1
        assert restored.id_for("b") == 2

    def test_deepcopy_is_independent(self):
        registry = IdentifierRegistry()
        registry.id_for("a")
        clone = copy.deepcopy(registry)
        clone.id_for("b")
        assert len(registry) == 1
        assert len(clone) == 2


class TestHypergraph:
    """Tests for the Hypergraph container."""

    def test_counts(self, labelled_hypergraph):
        assert labelled_hypergraph.num_edges == 2
        assert labelled_hypergraph.num_vertices == 3
        assert labelled_hypergraph.max_vertex == 3

    def test_num_vertices_without_labels(self):
        hg = Hypergraph(edges=[(1, 7), (2, 3)])
        assert hg.num_vertices == 7

    def test_empty(self):
        hg = Hypergraph()
        assert hg.num_vertices == 0
        assert hg.max_vertex == 0
        assert hg.validate().valid

    def test_validate_ok(self, labelled_hypergraph):
        result = labelled_hypergraph.validate()
        assert result.valid
        assert result.errors == []
        assert "Vertex 3 has no cluster" in result.warnings

    def test_validate_reports_isolated_vertex(self):
        hg = Hypergraph(edges=[(1, 2)], vertex_labels=["a", "b", "c"])
        result = hg.validate()
        assert result.valid
        assert result.warnings == ["Vertex 3 is isolated"]

    def test_validate_label_count_mismatch(self):
        hg = Hypergraph(edges=[(1, 4)], vertex_labels=["a", "b"])
        result = hg.validate()
        assert not result.valid
        assert any("vertex labels" in e for e in result.errors)

    def test_validate_edge_label_count_mismatch(self):
        hg = Hypergraph(edges=[(1, 2), (2, 1)], edge_labels=["only one"])
        assert not hg.validate().valid

    def test_validate_unknown_cluster(self):
        hg = Hypergraph(edges=[(1, 2)], vertex_clusters=[1, 5], cluster_names=["x"])
        result = hg.validate()
        assert not result.valid
        assert "Vertex 2 has unknown cluster id 5" in result.errors

    def test_validate_non_positive_vertex(self):
        hg = Hypergraph(edges=[(0, 1)])
        assert not hg.validate().valid

    def test_validate_short_edge(self):
        hg = Hypergraph(edges=[(1,)])
        assert not hg.validate().valid

    def test_stats(self, labelled_hypergraph):
        s = labelled_hypergraph.stats()
        assert s.vertex_count == 3
        assert s.edge_count == 2
        assert s.edges_by_size == {2: 1, 3: 1}
        assert s.cluster_sizes == {"red": 1, "blue": 1}
        assert s.unclustered == 1

    def test_stats_without_clusters(self):
        s = Hypergraph(edges=[(1, 2, 3, 4)]).stats()
        assert s.cluster_sizes == {}
        assert s.unclustered == 0
        assert s.edges_by_size == {4: 1}

    def test_missing_cluster_sentinel(self):
        assert MISSING_CLUSTER == 0
