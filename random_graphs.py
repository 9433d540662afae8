"""
Random friendship graph generator for the demo.

The generator draws from an explicit numpy Generator: pass either `rng`
or a `seed` (a fresh Generator is created from it). Nothing touches the
global random state, so two calls with the same seed give the same graph.

Output format:
    FriendshipGraph with vertices "v0".."v{n-1}"; edge ids are handed out
    as the edge count grows.
"""

from typing import Optional

import numpy as np

from friendship_graph import FriendshipGraph


VERTEX_PREFIX = "v"


def _make_rng(seed: Optional[int], rng: Optional[np.random.Generator]) -> np.random.Generator:
    if rng is not None:
        return rng
    return np.random.default_rng(seed)


def generate_uniform_random(
    vertex_count: int,
    edge_count: int,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    prefix: str = VERTEX_PREFIX
) -> FriendshipGraph:
    """
    Graph with `edge_count` uniformly drawn edges.

    Each draw picks two vertex indices uniformly at random. Self-loops and
    repeated pairs are drawn like any other pair and then ignored by the
    graph, so the result usually has slightly fewer than `edge_count` edges.

    Args:
        vertex_count: Number of vertices (>= 1), named prefix + index.
        edge_count: Number of edge draws (>= 0).
        seed: Optional random seed for reproducibility.
        rng: Optional numpy Generator (takes precedence over seed).
        prefix: Vertex name prefix.
    """
    if vertex_count <= 0:
        raise ValueError("vertex_count must be positive")
    if edge_count < 0:
        raise ValueError("edge_count must be non-negative")

    rng = _make_rng(seed, rng)
    graph = FriendshipGraph()

    for i in range(vertex_count):
        graph.add_vertex(f"{prefix}{i}")

    for _ in range(edge_count):
        n1, n2 = rng.integers(0, vertex_count, size=2)
        graph.add_edge(graph.edge_count(), f"{prefix}{n1}", f"{prefix}{n2}")

    return graph
