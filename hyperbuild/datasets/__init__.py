from hyperbuild.datasets.credits import (
    CREDIT_CATEGORIES,
    CREDIT_EDGE_ORDER,
    build_credit_hypergraph,
)
from hyperbuild.datasets.foodweb import (
    FOODWEB_EXCLUDED,
    FOODWEB_UNIVERSE_SIZE,
    build_foodweb_hypergraph,
    build_foodweb_network,
)

__all__ = [
    "CREDIT_CATEGORIES",
    "CREDIT_EDGE_ORDER",
    "build_credit_hypergraph",
    "FOODWEB_EXCLUDED",
    "FOODWEB_UNIVERSE_SIZE",
    "build_foodweb_network",
    "build_foodweb_hypergraph",
]
