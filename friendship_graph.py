"""
Undirected friendship graph used by the social similarity code.

Two representations are supported everywhere:

    adjacency: dict[vertex, set[vertex]]      (plain)
    FriendshipGraph                           (adds edge ids / handles)

A networkx.Graph is also accepted wherever a graph is only read.
Vertices can be any hashable identifier ("v0", 17, ...).
"""

from typing import Dict, Set, Hashable, Iterable, Mapping, Optional, Tuple

import networkx as nx


Adjacency = Dict[Hashable, Set[Hashable]]


class InvalidArgumentError(ValueError):
    """A requested vertex is absent from the graph, or is malformed."""


class InconsistentGraphStateError(RuntimeError):
    """An edge the graph reports cannot be found or removed."""


# ------------------------------------------------------------
# Read-only view
# ------------------------------------------------------------

class GraphView:
    """
    Read-only view over an adjacency mapping.

    The view never copies the neighbor sets, so it reflects later changes
    made through the owning graph. It offers no mutating methods.
    """

    def __init__(self, adj: Mapping[Hashable, Iterable[Hashable]]):
        self._adj = adj

    def vertices(self) -> Set[Hashable]:
        return set(self._adj.keys())

    def has_vertex(self, v: Hashable) -> bool:
        try:
            return v in self._adj
        except TypeError:
            raise InvalidArgumentError(f"Malformed vertex identifier: {v!r}")

    def neighbors(self, v: Hashable) -> Set[Hashable]:
        if not self.has_vertex(v):
            raise InvalidArgumentError(f"Vertex {v!r} not in graph")
        return set(self._adj[v])

    def is_adjacent(self, u: Hashable, v: Hashable) -> bool:
        if not self.has_vertex(u) or not self.has_vertex(v):
            return False
        return v in self._adj[u]

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        # A self-loop shows up once in its own neighbor set.
        loops = sum(1 for u, neigh in self._adj.items() if u in neigh)
        return (sum(len(neigh) for neigh in self._adj.values()) + loops) // 2


def as_view(graph) -> GraphView:
    """
    Wrap any supported graph in a GraphView.

    Accepts FriendshipGraph, GraphView, networkx.Graph or an adjacency dict.
    """
    if isinstance(graph, GraphView):
        return graph
    if isinstance(graph, FriendshipGraph):
        return graph.view()
    if isinstance(graph, nx.Graph):
        if graph.is_directed():
            raise InvalidArgumentError("Social similarity needs an undirected graph")
        return GraphView(graph.adj)
    if isinstance(graph, Mapping):
        return GraphView(graph)
    raise InvalidArgumentError(f"Unsupported graph type: {type(graph).__name__}")


# ------------------------------------------------------------
# Mutable graph with edge handles
# ------------------------------------------------------------

class FriendshipGraph:
    """
    Simple undirected graph whose edges carry ids.

    Self-loops and a second edge between already adjacent vertices are
    ignored by add_edge (it returns False), so the graph stays simple.
    """

    def __init__(self):
        self._adj: Adjacency = {}
        self._edges: Dict[Hashable, Tuple[Hashable, Hashable]] = {}
        self._edge_ids: Dict[frozenset, Hashable] = {}
        self._next_id = 0

    # --- construction -------------------------------------------------

    @classmethod
    def from_adjacency(cls, adj: Mapping[Hashable, Iterable[Hashable]]) -> "FriendshipGraph":
        graph = cls()
        for u in adj:
            graph.add_vertex(u)
        for u, neigh in adj.items():
            for v in neigh:
                graph.add_edge(None, u, v)
        return graph

    @classmethod
    def from_networkx(cls, G: nx.Graph) -> "FriendshipGraph":
        if G.is_directed():
            raise InvalidArgumentError("Social similarity needs an undirected graph")
        graph = cls()
        for u in G.nodes():
            graph.add_vertex(u)
        for u, v in G.edges():
            graph.add_edge(None, u, v)
        return graph

    def to_networkx(self) -> nx.Graph:
        G = nx.Graph()
        G.add_nodes_from(self._adj)
        for edge_id, (u, v) in self._edges.items():
            G.add_edge(u, v, id=edge_id)
        return G

    def adjacency(self) -> Adjacency:
        return {u: set(neigh) for u, neigh in self._adj.items()}

    def view(self) -> GraphView:
        return GraphView(self._adj)

    # --- queries --------------------------------------------------------

    def vertices(self) -> Set[Hashable]:
        return set(self._adj.keys())

    def neighbors(self, v: Hashable) -> Set[Hashable]:
        return self.view().neighbors(v)

    def is_adjacent(self, u: Hashable, v: Hashable) -> bool:
        return self.view().is_adjacent(u, v)

    def find_edge(self, u: Hashable, v: Hashable) -> Optional[Hashable]:
        if not self.is_adjacent(u, v):
            return None
        return self._edge_ids[frozenset((u, v))]

    def edge_endpoints(self, edge_id: Hashable) -> Tuple[Hashable, Hashable]:
        if edge_id not in self._edges:
            raise InvalidArgumentError(f"Edge {edge_id!r} not in graph")
        return self._edges[edge_id]

    def vertex_count(self) -> int:
        return len(self._adj)

    def edge_count(self) -> int:
        return len(self._edges)

    # --- mutation -------------------------------------------------------

    def add_vertex(self, v: Hashable) -> bool:
        try:
            if v in self._adj:
                return False
        except TypeError:
            raise InvalidArgumentError(f"Malformed vertex identifier: {v!r}")
        self._adj[v] = set()
        return True

    def add_edge(self, edge_id: Optional[Hashable], u: Hashable, v: Hashable) -> bool:
        """
        Add an undirected edge u-v under edge_id (next free int if None).

        Missing endpoints are added as vertices. Returns False when the
        edge was ignored (self-loop, or u and v already adjacent). A rejected
        call leaves the graph untouched.
        """
        # Malformed ids raise before anything changes.
        view = self.view()
        view.has_vertex(u)
        view.has_vertex(v)

        if edge_id is not None:
            try:
                in_use = edge_id in self._edges
            except TypeError:
                raise InvalidArgumentError(f"Malformed edge id: {edge_id!r}")
            if in_use:
                raise InvalidArgumentError(
                    f"Edge id {edge_id!r} already used by {self._edges[edge_id]}"
                )

        self.add_vertex(u)
        self.add_vertex(v)

        if u == v or v in self._adj[u]:
            return False

        if edge_id is None:
            while self._next_id in self._edges:
                self._next_id += 1
            edge_id = self._next_id

        self._adj[u].add(v)
        self._adj[v].add(u)
        self._edges[edge_id] = (u, v)
        self._edge_ids[frozenset((u, v))] = edge_id
        return True

    def remove_edge(self, edge_id: Hashable) -> Tuple[Hashable, Hashable]:
        """Remove the edge with this id and return its endpoints."""
        if edge_id not in self._edges:
            raise InconsistentGraphStateError(f"Edge {edge_id!r} cannot be removed: not in graph")

        u, v = self._edges.pop(edge_id)
        del self._edge_ids[frozenset((u, v))]
        self._adj[u].discard(v)
        self._adj[v].discard(u)
        return u, v

    def __contains__(self, v) -> bool:
        return self.view().has_vertex(v)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"FriendshipGraph({self.vertex_count()} vertices, {self.edge_count()} edges)"
