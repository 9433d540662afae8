"""
Tests for the seedable random graph generator.
"""

import numpy as np
import pytest

from random_graphs import generate_uniform_random


class TestUniformRandom:

    def test_vertex_names_and_counts(self):
        graph = generate_uniform_random(20, 50, seed=1)

        assert graph.vertices() == {f"v{i}" for i in range(20)}
        assert 0 < graph.edge_count() <= 50

    def test_same_seed_same_graph(self):
        g1 = generate_uniform_random(30, 80, seed=42)
        g2 = generate_uniform_random(30, 80, seed=42)

        assert g1.adjacency() == g2.adjacency()

    def test_explicit_rng_wins_over_seed(self):
        g1 = generate_uniform_random(30, 80, seed=1, rng=np.random.default_rng(9))
        g2 = generate_uniform_random(30, 80, seed=9)

        assert g1.adjacency() == g2.adjacency()

    def test_no_self_loops(self):
        graph = generate_uniform_random(5, 200, seed=3)

        for v in graph.vertices():
            assert v not in graph.neighbors(v)

    def test_edge_ids_follow_edge_count(self):
        graph = generate_uniform_random(10, 30, seed=5)

        ids = sorted(graph.find_edge(u, v) for u in graph.vertices() for v in graph.neighbors(u))
        assert set(ids) == set(range(graph.edge_count()))

    def test_custom_prefix(self):
        graph = generate_uniform_random(3, 0, prefix="user")

        assert graph.vertices() == {"user0", "user1", "user2"}
        assert graph.edge_count() == 0

    @pytest.mark.parametrize("vertices,edges", [(0, 10), (-1, 10), (10, -1)])
    def test_invalid_parameters(self, vertices, edges):
        with pytest.raises(ValueError):
            generate_uniform_random(vertices, edges)
