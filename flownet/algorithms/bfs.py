"""Breadth-first search for augmenting paths in the residual network."""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Optional, Set

from flownet.algorithms.types import SearchResult
from flownet.graph.network import Arc, FlowNetwork, Vertex, VertexID, VertexRef


def bfs(
    network: FlowNetwork,
    source: VertexRef,
    target: Optional[VertexRef] = None,
) -> SearchResult:
    """Breadth-first search over arcs with positive residual capacity.

    Each vertex is enqueued once, when first reached, and the arc that reached
    it is recorded in ``pred``. The recorded arcs form a tree rooted at the
    source, so following ``pred`` from any reached vertex yields a path with the
    fewest arcs; ties go to the arc enumerated first.

    When ``target`` is given the search stops as soon as the target is
    dequeued. Without a target the whole residual component is explored and
    ``reachable`` is False.

    Args:
        network: Network to search.
        source: Source vertex or id.
        target: Optional target vertex or id.

    Returns:
        SearchResult with a fresh predecessor map.
    """
    src = network.resolve(source)
    dst = network.resolve(target) if target is not None else None

    if dst is src:
        return SearchResult(reachable=True, order=[src.id])

    pred: Dict[VertexID, Arc] = {}
    order: List[VertexID] = []
    visited: Set[VertexID] = {src.id}
    queue: Deque[Vertex] = deque([src])

    while queue:
        vertex = queue.popleft()
        order.append(vertex.id)
        if vertex is dst:
            break
        for arc in vertex.neighbors():
            neighbor = arc.target
            if neighbor.id not in visited and arc.is_residual():
                visited.add(neighbor.id)
                pred[neighbor.id] = arc
                queue.append(neighbor)

    reachable = dst is not None and dst.id in pred
    return SearchResult(reachable=reachable, pred=pred, order=order)


def path_to(result: SearchResult, target: VertexID) -> List[Arc]:
    """Follow ``result.pred`` back from ``target`` and return the arcs source-first.

    Returns an empty list when ``target`` was not reached or is the source.
    """
    path: List[Arc] = []
    arc = result.pred.get(target)
    while arc is not None:
        path.append(arc)
        arc = result.pred.get(arc.source.id)
    path.reverse()
    return path


def reachable_set(network: FlowNetwork, source: VertexRef) -> Set[VertexID]:
    """Vertices reachable from ``source`` through arcs with residual capacity."""
    result = bfs(network, source)
    return set(result.order)
