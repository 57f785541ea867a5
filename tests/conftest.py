"""Shared fixtures for hyperbuild tests."""

import pytest

from hyperbuild.engine import Hypergraph


@pytest.fixture()
def square_edges():
    """Two prey (1, 2) that both feed predators 10 and 11."""
    return [(1, 10), (1, 11), (2, 10), (2, 11)]


@pytest.fixture()
def small_foodweb():
    """Raw (0-based) food web of six species with one excluded compartment.

    Species (raw id -> name, group):
        0 algae (producer), 1 grass (producer), 2 snail (grazer),
        3 crab (predator), 4 fish (predator), 5 detritus (no group)

    Edges (prey -> predator, raw ids):
        algae -> snail, algae -> crab, algae -> fish,
        grass -> crab, grass -> fish, snail -> fish,
        detritus -> snail, detritus -> crab
    """
    species = [
        {"node_id": 0, "name": "algae", "group": "producer"},
        {"node_id": 1, "name": "grass", "group": "producer"},
        {"node_id": 2, "name": "snail", "group": "grazer"},
        {"node_id": 3, "name": "crab", "group": "predator"},
        {"node_id": 4, "name": "fish", "group": "predator"},
        {"node_id": 5, "name": "detritus", "group": None},
    ]
    edges = [(0, 2), (0, 3), (0, 4), (1, 3), (1, 4), (2, 4), (5, 2), (5, 3)]
    return {"species": species, "edges": edges, "universe_size": 6, "excluded": (6,)}


@pytest.fixture()
def credit_data():
    """Two films with mixed credits and one credit for an unknown film."""
    films = {"tt1": "Alpha", "tt2": "Beta"}
    people = {"nm1": "Ann", "nm2": "Bob", "nm3": "Cid", "nm4": "Dee"}
    credits = [
        {"film_id": "tt1", "person_id": "nm2", "category": "actor"},
        {"film_id": "tt1", "person_id": "nm1", "category": "actress"},
        {"film_id": "tt1", "person_id": "nm3", "category": "director"},
        {"film_id": "tt1", "person_id": "nm4", "category": "actor"},
        {"film_id": "tt2", "person_id": "nm9", "category": "actor"},
        {"film_id": "tt2", "person_id": "nm3", "category": "director"},
        {"film_id": "tt2", "person_id": "nm1", "category": "writer"},
        {"film_id": "tt3", "person_id": "nm4", "category": "actor"},
    ]
    return {"films": films, "people": people, "credits": credits}


@pytest.fixture()
def labelled_hypergraph():
    """Three vertices, two hyperedges, every optional list populated."""
    return Hypergraph(
        edges=[(1, 2, 3), (2, 3)],
        vertex_labels=["a", "b", "c"],
        edge_labels=["first", "second"],
        vertex_clusters=[1, 2, 0],
        cluster_names=["red", "blue"],
    )
