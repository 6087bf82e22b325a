"""Maximum flow via shortest augmenting paths (Edmonds-Karp).

Each round runs a breadth-first search over arcs with residual capacity,
pushes the bottleneck amount along the path found, and credits the same
amount to every reverse arc on it. The loop ends when the search no longer
reaches the target. The number of rounds is bounded by O(V * E).
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional, Tuple, Union, overload

from flownet.algorithms.bfs import bfs, path_to, reachable_set
from flownet.algorithms.types import EngineState, FlowSummary
from flownet.config import FLOW_CONFIG
from flownet.errors import NoAugmentingPathError
from flownet.graph.network import Arc, ArcID, FlowNetwork, VertexRef
from flownet.graph.pairing import reverse_of, validate_pairing
from flownet.logging import get_logger

logger = get_logger(__name__)


@overload
def calc_max_flow(
    network: FlowNetwork,
    source: VertexRef,
    target: VertexRef,
    *,
    return_summary: Literal[False] = False,
    copy_network: bool = False,
    raise_on_zero: Optional[bool] = None,
) -> int: ...


@overload
def calc_max_flow(
    network: FlowNetwork,
    source: VertexRef,
    target: VertexRef,
    *,
    return_summary: Literal[True],
    copy_network: bool = False,
    raise_on_zero: Optional[bool] = None,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    network: FlowNetwork,
    source: VertexRef,
    target: VertexRef,
    *,
    return_summary: bool = False,
    copy_network: bool = False,
    raise_on_zero: Optional[bool] = None,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow from ``source`` to ``target``.

    The computation consumes residual capacity of ``network`` in place unless
    ``copy_network`` is set. Running it again on the same network therefore
    returns only the flow that is still missing (0 once saturated); call
    ``network.reset_capacities()`` to start over.

    A result of 0 is a valid answer (the target is unreachable through
    arcs with positive capacity). Pass ``raise_on_zero=True``, or set
    ``FLOW_CONFIG.raise_on_zero_flow``, to get ``NoAugmentingPathError``
    instead.

    Args:
        network: Network whose arcs all have reverse arcs.
        source: Source vertex or id.
        target: Target vertex or id.
        return_summary: Also return a ``FlowSummary``.
        copy_network: Work on a copy and leave ``network`` untouched.
        raise_on_zero: Override ``FLOW_CONFIG.raise_on_zero_flow``.

    Returns:
        Total flow, or ``(total_flow, summary)`` with ``return_summary``.

    Raises:
        NotFoundError: If ``source`` or ``target`` is not in the network.
        MalformedNetworkError: If any arc lacks a reverse arc. Raised before
            any capacity is modified.
        NoAugmentingPathError: If the flow is 0 and zero flow is an error.

    Example:
        >>> net = FlowNetwork()
        >>> for v in ("A", "B", "C"):
        ...     _ = net.create_vertex(v)
        >>> _ = net.create_arc("ab", "A", "B", 3, add_reverse=True)
        >>> _ = net.create_arc("bc", "B", "C", 5, add_reverse=True)
        >>> calc_max_flow(net, "A", "C")
        3
    """
    if raise_on_zero is None:
        raise_on_zero = FLOW_CONFIG.raise_on_zero_flow

    src = network.resolve(source)
    dst = network.resolve(target)
    flow_network = network
    if copy_network:
        flow_network = network.copy()
        src = flow_network.get_vertex(src.id)
        dst = flow_network.get_vertex(dst.id)
    validate_pairing(flow_network)

    total_flow = 0
    augmentations = 0
    length_distribution: Dict[int, int] = {}

    # Degenerate case (s == t): conservation leaves no surplus to send.
    if src is not dst:
        state = EngineState.SEARCHING
        while state is not EngineState.DONE:
            result = bfs(flow_network, src, dst)
            if not result.reachable:
                state = EngineState.DONE
                continue

            state = EngineState.AUGMENTING
            path = path_to(result, dst.id)
            bottleneck = augment(path)
            total_flow += bottleneck
            augmentations += 1
            length_distribution[len(path)] = (
                length_distribution.get(len(path), 0) + bottleneck
            )
            logger.debug(
                "Augmentation %d: pushed %d along %d arc(s), total %d",
                augmentations,
                bottleneck,
                len(path),
                total_flow,
            )
            state = EngineState.SEARCHING

    logger.debug(
        "Max flow %s -> %s in '%s': %d after %d augmentation(s)",
        src.id,
        dst.id,
        flow_network.name,
        total_flow,
        augmentations,
    )

    if total_flow == 0 and raise_on_zero:
        raise NoAugmentingPathError(
            f"There is no path between vertices '{src.id}' and '{dst.id}'"
        )

    if not return_summary:
        return total_flow
    summary = _build_flow_summary(
        flow_network, src.id, total_flow, augmentations, length_distribution
    )
    return total_flow, summary


def bottleneck_of(path: List[Arc]) -> int:
    """Smallest residual capacity along ``path`` (0 for an empty path)."""
    return min((arc.capacity for arc in path), default=0)


def augment(path: List[Arc]) -> int:
    """Push the bottleneck amount along ``path`` and return it.

    Every arc on the path loses the amount and its reverse arc gains it, so
    the capacity sum of each pair stays unchanged.

    Raises:
        MalformedNetworkError: If an arc on the path has no reverse arc. No
            capacity is changed in that case.
    """
    reverses = [reverse_of(arc) for arc in path]
    amount = bottleneck_of(path)
    for arc, reverse in zip(path, reverses):
        arc.decrease(amount)
        reverse.increase(amount)
    return amount


def _build_flow_summary(
    network: FlowNetwork,
    source_id,
    total_flow: int,
    augmentations: int,
    length_distribution: Dict[int, int],
) -> FlowSummary:
    """Collect per-arc flow, residuals and the min cut from the residual network."""
    arc_flow: Dict[ArcID, int] = {}
    residual_cap: Dict[ArcID, int] = {}
    for arc in network.arcs():
        arc_flow[arc.id] = arc.flow
        residual_cap[arc.id] = arc.capacity

    reachable = reachable_set(network, source_id)
    min_cut = [
        arc.id
        for arc in network.arcs()
        if arc.source.id in reachable
        and arc.target.id not in reachable
        and arc.initial_capacity > 0
    ]
    return FlowSummary(
        total_flow=total_flow,
        arc_flow=arc_flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=min_cut,
        augmentations=augmentations,
        path_length_distribution=length_distribution,
    )


def saturated_arcs(
    network: FlowNetwork,
    source: VertexRef,
    target: VertexRef,
) -> List[ArcID]:
    """Ids of arcs left with no residual capacity by a max flow.

    Only arcs with positive initial capacity are reported. ``network`` is not
    modified.
    """
    _, summary = calc_max_flow(
        network, source, target, return_summary=True, copy_network=True
    )
    return [
        arc.id
        for arc in network.arcs()
        if arc.initial_capacity > 0 and summary.residual_cap[arc.id] == 0
    ]
