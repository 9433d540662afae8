"""
Asymmetric social similarity between two users of a friendship graph.

Implements the network-based measure from Akcora et al., "Network and
profile based measures for user similarities on social networks":

    fr      = #edges in the ego network of v1 (v1 + its friends)
    mutual  = fr + #edges from v1's friends to v2
    sim(v1 -> v2) = log(fr) / log(2 * mutual)

The direct v1-v2 friendship is never counted: v2 is not treated as a
friend of v1 while the ego network is built. The input graph is only read,
the ego / mutual friendship graphs are separate networkx graphs owned by
each call.
"""

import math
from typing import Dict, Hashable, Iterable, List, Optional, Tuple

import networkx as nx

from friendship_graph import (
    GraphView,
    InconsistentGraphStateError,
    InvalidArgumentError,
    as_view,
)


# ------------------------------------------------------------
# Validation helpers
# ------------------------------------------------------------

def _require_vertex(view: GraphView, v: Hashable) -> None:
    if not view.has_vertex(v):
        raise InvalidArgumentError(f"Vertex {v!r} not in graph")


def _require_pair(view: GraphView, v1: Hashable, v2: Hashable) -> None:
    _require_vertex(view, v1)
    _require_vertex(view, v2)
    if v1 == v2:
        raise InvalidArgumentError(f"Similarity of vertex {v1!r} to itself is undefined")


# ------------------------------------------------------------
# Ego network / mutual friendship graph
# ------------------------------------------------------------

def ego_network(graph, v1: Hashable, exclude: Optional[Hashable] = None) -> nx.Graph:
    """
    Induced subgraph on v1 and its friends.

    Args:
        graph: FriendshipGraph, networkx.Graph or adjacency dict.
        v1: center of the ego network.
        exclude: a vertex whose direct friendship with v1 is ignored, so it
                 is left out of the ego network (the target of a query).

    Returns:
        ego: networkx.Graph with v1, its friends and every friendship among them.
    """
    view = as_view(graph)
    _require_vertex(view, v1)

    ego = nx.Graph()
    ego.add_node(v1)
    ego.add_nodes_from(n for n in view.neighbors(v1) if n != exclude)

    members = list(ego.nodes())
    for i in range(len(members)):
        for j in range(i + 1, len(members)):
            if view.is_adjacent(members[i], members[j]):
                ego.add_edge(members[i], members[j])

    return ego


def mutual_friendship_graph(
    graph,
    v1: Hashable,
    v2: Hashable,
    ego: Optional[nx.Graph] = None
) -> nx.Graph:
    """
    Ego network of v1 extended with v2 and the edges v2 shares with v1's friends.

    A precomputed ego network (built with exclude=v2) can be passed in; it is
    copied, never modified. It must contain v1 and must not contain v2.
    """
    view = as_view(graph)
    _require_pair(view, v1, v2)

    if ego is None:
        ego = ego_network(view, v1, exclude=v2)
    elif v1 not in ego:
        raise InvalidArgumentError(f"Ego network does not contain {v1!r}")
    elif v2 in ego:
        raise InvalidArgumentError(f"Ego network must be built with exclude={v2!r}")

    mutual = ego.copy()
    mutual.add_node(v2)
    for n in ego.neighbors(v1):
        if view.is_adjacent(n, v2):
            mutual.add_edge(n, v2)

    return mutual


# ------------------------------------------------------------
# Similarity
# ------------------------------------------------------------

def similarity_breakdown(graph, v1: Hashable, v2: Hashable) -> Dict[str, object]:
    """
    Compute the similarity of v1 to v2 together with its intermediate counts.

    Returns:
        {
            "source": v1,
            "target": v2,
            "ego_vertices": int,
            "fr_edge_count": int,
            "mutual_vertices": int (0 when the ego network has no edges),
            "mutual_edge_count": int (0 when the ego network has no edges),
            "score": float,
        }
    """
    view = as_view(graph)
    _require_pair(view, v1, v2)

    ego = ego_network(view, v1, exclude=v2)
    fr_edge_count = ego.number_of_edges()

    result: Dict[str, object] = {
        "source": v1,
        "target": v2,
        "ego_vertices": ego.number_of_nodes(),
        "fr_edge_count": fr_edge_count,
        "mutual_vertices": 0,
        "mutual_edge_count": 0,
        "score": 0.0,
    }

    # No friendships around v1 -> nothing to compare against.
    if fr_edge_count == 0:
        return result

    mutual = mutual_friendship_graph(view, v1, v2, ego=ego)
    mutual_edge_count = mutual.number_of_edges()
    if mutual_edge_count == 0:
        raise InconsistentGraphStateError(
            f"Mutual friendship graph of {v1!r} and {v2!r} lost the ego network edges"
        )

    result["mutual_vertices"] = mutual.number_of_nodes()
    result["mutual_edge_count"] = mutual_edge_count
    result["score"] = math.log(fr_edge_count) / math.log(2 * mutual_edge_count)
    return result


def social_similarity(graph, v1: Hashable, v2: Hashable) -> float:
    """
    Asymmetric social similarity of v1 to v2.

    social_similarity(g, a, b) and social_similarity(g, b, a) generally differ.

    Raises:
        InvalidArgumentError: v1 or v2 is not in the graph, or v1 == v2.
    """
    return similarity_breakdown(graph, v1, v2)["score"]


# ------------------------------------------------------------
# Batch scoring
# ------------------------------------------------------------

def score_social_similarity(
    graph,
    u: Hashable,
    candidates: Optional[Iterable[Hashable]] = None
) -> Dict[Hashable, float]:
    """
    Similarity of u to each candidate (default: every other vertex).

    Each candidate builds its own ego network, so the cost is
    O(len(candidates) * deg(u)^2).
    """
    view = as_view(graph)
    _require_vertex(view, u)

    if candidates is None:
        candidates = [v for v in view.vertices() if v != u]

    return {v: social_similarity(view, u, v) for v in candidates}


def top_k_similar(
    graph,
    u: Hashable,
    k: int = 5,
    non_friends_only: bool = False
) -> List[Tuple[Hashable, float]]:
    """
    The k vertices u is most similar to, highest score first.

    With non_friends_only=True, current friends of u are skipped, which turns
    the ranking into friend recommendations.
    """
    if k <= 0:
        raise InvalidArgumentError("k must be positive")

    view = as_view(graph)
    _require_vertex(view, u)

    candidates = [v for v in view.vertices() if v != u]
    if non_friends_only:
        friends = view.neighbors(u)
        candidates = [v for v in candidates if v not in friends]

    scores = score_social_similarity(view, u, candidates)
    # Ties are broken by vertex name so the ranking is the same on every run.
    return sorted(scores.items(), key=lambda x: (-x[1], str(x[0])))[:k]
