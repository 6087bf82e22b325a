"""Random test networks.

``random_simple_network`` builds a connected, simple, undirected network: a
random spanning tree plus extra random edges, where every edge is a pair of
arcs with equal capacity in both directions.
"""

from __future__ import annotations

import random
from typing import List, Optional, Set, Tuple

from flownet.config import FLOW_CONFIG
from flownet.errors import InvalidArgumentError
from flownet.graph.network import FlowNetwork, Vertex
from flownet.logging import get_logger

logger = get_logger(__name__)


def _add_edge(network: FlowNetwork, u: Vertex, v: Vertex, capacity: int) -> None:
    network.create_arc_pair(f"a{u}_{v}", u, v, capacity, reverse_id=f"a{v}_{u}")


def random_tree(
    network: FlowNetwork,
    n: int,
    capacity: int,
    rng: random.Random,
) -> List[Vertex]:
    """Add vertices ``v1..vn`` to ``network`` joined by a random spanning tree.

    Each new vertex is attached to a uniformly chosen earlier vertex.

    Returns:
        The new vertices in creation order.
    """
    vertices: List[Vertex] = []
    for i in range(n):
        vertex = network.create_vertex(f"v{i + 1}")
        if i > 0:
            _add_edge(network, vertices[rng.randrange(i)], vertex, capacity)
        vertices.append(vertex)
    return vertices


def random_simple_network(
    n: int,
    m: int,
    *,
    capacity: Optional[int] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    name: str = "",
) -> FlowNetwork:
    """Create a connected simple network with ``n`` vertices and ``m`` edges.

    No loops and no multiple edges. Every edge ``{u, v}`` becomes arcs
    ``a{u}_{v}`` and ``a{v}_{u}``, both with ``capacity``.

    Args:
        n: Number of vertices. ``n <= 0`` yields an empty network.
        m: Number of undirected edges, ``n - 1 <= m <= n * (n - 1) / 2``.
        capacity: Capacity of each arc (``FLOW_CONFIG.default_capacity`` if None).
        seed: Seed for a private ``random.Random``; ignored when ``rng`` is given.
        rng: Random generator to draw from.
        name: Network name.

    Returns:
        The generated network.

    Raises:
        InvalidArgumentError: If ``n`` exceeds ``FLOW_CONFIG.max_vertices`` or
            ``m`` is outside the feasible range.
    """
    network = FlowNetwork(name)
    if n <= 0:
        return network
    if n > FLOW_CONFIG.max_vertices:
        raise InvalidArgumentError(f"Too many vertices: {n}")
    if m < n - 1 or m > n * (n - 1) // 2:
        raise InvalidArgumentError(f"Impossible number of edges: {m}")
    if capacity is None:
        capacity = FLOW_CONFIG.default_capacity
    if rng is None:
        rng = random.Random(seed)

    vertices = random_tree(network, n, capacity, rng)
    connected: Set[Tuple[int, int]] = set()
    index = {vertex.id: i for i, vertex in enumerate(vertices)}
    for arc in network.arcs():
        connected.add((index[arc.source.id], index[arc.target.id]))

    remaining = m - (n - 1)
    free_pairs = n * (n - 1) // 2 - (n - 1)
    if remaining > free_pairs // 2:
        # Dense request: sample from the explicit list of free pairs.
        candidates = [
            (i, j) for i in range(n) for j in range(i + 1, n) if (i, j) not in connected
        ]
        chosen = rng.sample(candidates, remaining)
    else:
        chosen = []
        while len(chosen) < remaining:
            i = rng.randrange(n)
            j = rng.randrange(n)
            if i == j or (i, j) in connected:
                continue
            connected.add((i, j))
            connected.add((j, i))
            chosen.append((i, j))

    for i, j in chosen:
        _add_edge(network, vertices[i], vertices[j], capacity)

    logger.debug(
        "Generated network '%s': %d vertices, %d edges, seed=%s", name, n, m, seed
    )
    return network
