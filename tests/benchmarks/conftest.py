"""Benchmark fixtures for motif enumeration."""

import random

import pytest


def generate_food_web(
    num_prey: int,
    num_predators: int,
    avg_degree: float = 6.0,
    seed: int = 42,
) -> list[tuple[int, int]]:
    """Generate a random bipartite prey -> predator edge list.

    Args:
        num_prey: Prey vertices, numbered 1..num_prey
        num_predators: Predator vertices, numbered after the prey
        avg_degree: Average number of predators per prey
        seed: Random seed for reproducibility

    Returns:
        Edge list with duplicates possible
    """
    rng = random.Random(seed)
    edges = []
    for prey in range(1, num_prey + 1):
        for _ in range(max(1, int(rng.expovariate(1 / avg_degree)))):
            edges.append((prey, num_prey + rng.randint(1, num_predators)))
    return edges


@pytest.fixture(scope="session")
def web_300():
    """300 prey feeding 80 predators."""
    return generate_food_web(300, 80)


@pytest.fixture(scope="session")
def web_2k():
    """2000 prey feeding 300 predators."""
    return generate_food_web(2000, 300, avg_degree=8.0)
