"""Plain-text dump of a network and its current residual capacities."""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from flownet.graph.network import FlowNetwork


def format_network(network: FlowNetwork) -> str:
    """Render ``network`` one vertex per line.

    Each line reads ``v --> a1 (cap) (v->w) a2 (cap) (v->x)``; the first line
    holds the network name. Read-only.

    Example:
        >>> net = FlowNetwork("G")
        >>> _ = net.create_vertex("A")
        >>> _ = net.create_vertex("B")
        >>> _ = net.create_arc("ab", "A", "B", 5, add_reverse=True, reverse_id="ba")
        >>> print(format_network(net))
        G
        A --> ab (5) (A->B)
        B --> ba (0) (B->A)
    """
    lines: List[str] = [network.name]
    for vertex in network.vertices():
        parts = [f"{vertex} -->"]
        for arc in vertex.neighbors():
            parts.append(f"{arc} ({vertex}->{arc.target})")
        lines.append(" ".join(parts))
    return "\n".join(lines)
