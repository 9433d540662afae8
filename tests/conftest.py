"""
Shared fixtures: small hand-built friendship graphs with known scores.
"""

import pytest

from friendship_graph import FriendshipGraph


def _adjacency(edges, isolated=()):
    adj = {}
    for u, v in edges:
        adj.setdefault(u, set()).add(v)
        adj.setdefault(v, set()).add(u)
    for v in isolated:
        adj.setdefault(v, set())
    return adj


@pytest.fixture
def triangle():
    return _adjacency([("A", "B"), ("B", "C"), ("A", "C")])


@pytest.fixture
def path_graph():
    # v1 - v0 - v2
    return _adjacency([("v0", "v1"), ("v0", "v2")])


@pytest.fixture
def star():
    return _adjacency([("s", "l1"), ("s", "l2"), ("s", "l3")])


@pytest.fixture
def circle():
    """
    a has friends b, c, d (b and c are friends).
    e has friends b, c only; a and e are not friends.
    """
    return _adjacency(
        [("a", "b"), ("a", "c"), ("a", "d"), ("b", "c"), ("e", "b"), ("e", "c")],
        isolated=["x"],
    )


@pytest.fixture
def circle_with_direct_edge(circle):
    adj = {u: set(neigh) for u, neigh in circle.items()}
    adj["a"].add("e")
    adj["e"].add("a")
    return adj


@pytest.fixture
def friendship_graph(circle_with_direct_edge):
    return FriendshipGraph.from_adjacency(circle_with_direct_edge)
