"""Conversion between ``FlowNetwork`` and NetworkX graphs or adjacency matrices.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "t", capacity=7)
    >>> net = from_networkx(G)
    >>> [str(a) for a in net.arcs()]
    ['s->t (7)', 's->t:rev (0)']
    >>> nx.maximum_flow_value(to_digraph(net), "s", "t")
    7
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Tuple

import networkx as nx
import numpy as np

from flownet.graph.network import FlowNetwork
from flownet.graph.pairing import find_unpaired


def to_networkx(network: FlowNetwork) -> nx.MultiDiGraph:
    """Return a ``MultiDiGraph`` with one edge per arc.

    Edge keys are arc ids; every edge carries ``capacity`` (current residual),
    ``initial_capacity`` and ``reverse`` (id of the paired arc or ``None``).
    """
    G = nx.MultiDiGraph(name=network.name)
    G.add_nodes_from(network)
    for arc in network.arcs():
        G.add_edge(
            arc.source.id,
            arc.target.id,
            key=arc.id,
            capacity=arc.capacity,
            initial_capacity=arc.initial_capacity,
            reverse=arc.reverse.id if arc.reverse is not None else None,
        )
    return G


def to_digraph(network: FlowNetwork, *, residual: bool = False) -> nx.DiGraph:
    """Return a ``DiGraph`` with parallel arcs merged by summing capacities.

    Args:
        network: Network to convert.
        residual: Use current residual capacities instead of initial ones.

    Returns:
        A DiGraph suitable for ``networkx`` flow algorithms.
    """
    G = nx.DiGraph(name=network.name)
    G.add_nodes_from(network)
    for arc in network.arcs():
        u, v = arc.source.id, arc.target.id
        cap = arc.capacity if residual else arc.initial_capacity
        if G.has_edge(u, v):
            G[u][v]["capacity"] += cap
        else:
            G.add_edge(u, v, capacity=cap)
    return G


def _edges_with_ids(G: Any) -> Iterator[Tuple[Hashable, Hashable, str, Dict]]:
    if G.is_multigraph():
        for u, v, key, data in G.edges(keys=True, data=True):
            yield u, v, f"{u}->{v}#{key}", data
    else:
        for u, v, data in G.edges(data=True):
            yield u, v, f"{u}->{v}", data


def from_networkx(
    G: Any,
    *,
    capacity_attr: str = "capacity",
    default_capacity: int = 0,
    add_reverse: bool = True,
    name: str = "",
) -> FlowNetwork:
    """Build a ``FlowNetwork`` from any NetworkX graph.

    Undirected edges become two paired arcs of equal capacity. Directed edges
    become single arcs, paired with an opposite edge when one exists. With
    ``add_reverse`` every arc still unpaired afterwards receives a
    zero-capacity reverse arc ``f"{arc_id}:rev"``.

    Args:
        G: Graph, DiGraph, MultiGraph or MultiDiGraph.
        capacity_attr: Edge attribute holding integer capacity.
        default_capacity: Capacity for edges without ``capacity_attr``.
        add_reverse: Complete missing reverse arcs.
        name: Network name; defaults to ``G.name``.

    Returns:
        The new network.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
        InvalidArgumentError: If a capacity is not a non-negative integer.
    """
    if not isinstance(G, (nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph)):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")

    network = FlowNetwork(name or G.name)
    for node in G.nodes():
        network.create_vertex(node)

    directed = G.is_directed()
    for u, v, arc_id, data in _edges_with_ids(G):
        cap = data.get(capacity_attr, default_capacity)
        if directed:
            network.create_arc(arc_id, u, v, cap)
        else:
            network.create_arc_pair(arc_id, u, v, cap, reverse_id=f"{arc_id}:rev")

    if add_reverse:
        for arc in find_unpaired(network):
            network.create_arc(f"{arc.id}:rev", arc.target, arc.source, 0)
    return network


def adjacency_matrix(network: FlowNetwork) -> Tuple[np.ndarray, List[Hashable]]:
    """Count arcs between every ordered pair of vertices.

    Returns:
        ``(matrix, order)`` where ``matrix[i, j]`` is the number of arcs from
        ``order[i]`` to ``order[j]``; ``order`` is vertex insertion order.
    """
    order = list(network)
    index = {vertex_id: i for i, vertex_id in enumerate(order)}
    matrix = np.zeros((len(order), len(order)), dtype=np.int64)
    for arc in network.arcs():
        matrix[index[arc.source.id], index[arc.target.id]] += 1
    return matrix, order


def capacity_matrix(network: FlowNetwork, *, residual: bool = True) -> np.ndarray:
    """Sum of capacities between every ordered vertex pair, in insertion order."""
    index = {vertex_id: i for i, vertex_id in enumerate(network)}
    n = len(index)
    matrix = np.zeros((n, n), dtype=np.int64)
    for arc in network.arcs():
        cap = arc.capacity if residual else arc.initial_capacity
        matrix[index[arc.source.id], index[arc.target.id]] += cap
    return matrix
