"""Residual arc pairing.

Each arc ``u -> v`` is linked to exactly one arc ``v -> u``. The link is set
once, when the second arc of the pair is created, so resolving a reverse arc
during augmentation is a plain attribute read.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from flownet.config import FLOW_CONFIG
from flownet.errors import InvalidArgumentError, MalformedNetworkError

if TYPE_CHECKING:
    from flownet.graph.network import Arc, FlowNetwork


def link_reverse(arc: Arc, partner: Optional[Arc] = None) -> Optional[Arc]:
    """Pair a freshly created arc with its reverse.

    Without ``partner``, the first unpaired arc in ``arc.target.arcs`` that
    points back to ``arc.source`` is used. Parallel arcs are therefore paired
    in creation order.

    Args:
        arc: The new arc. Must not be paired yet.
        partner: Arc to pair with explicitly.

    Returns:
        The paired arc, or ``None`` if no candidate exists yet.

    Raises:
        InvalidArgumentError: If ``partner`` does not run opposite to ``arc``
            or is already paired.
    """
    if partner is None:
        for candidate in arc.target.arcs:
            if (
                candidate.reverse is None
                and candidate is not arc
                and candidate.target is arc.source
            ):
                partner = candidate
                break
        else:
            return None
    elif (
        partner.reverse is not None
        or partner.source is not arc.target
        or partner.target is not arc.source
    ):
        raise InvalidArgumentError(
            f"Arc '{partner.id}' cannot be paired with arc '{arc.id}'"
        )

    arc.reverse = partner
    partner.reverse = arc
    return partner


def reverse_of(arc: Arc) -> Arc:
    """Return the arc paired with ``arc``.

    Raises:
        MalformedNetworkError: If ``arc`` has no pair.
    """
    if arc.reverse is None:
        raise MalformedNetworkError(
            f"Arc '{arc.id}' ({arc.source.id}->{arc.target.id}) has no reverse arc"
        )
    return arc.reverse


def pair_total(arc: Arc) -> int:
    """Sum of residual capacities in both directions; augmentation never changes it."""
    return arc.capacity + reverse_of(arc).capacity


def find_unpaired(network: FlowNetwork) -> List[Arc]:
    """Return all arcs of ``network`` without a reverse arc, in creation order."""
    return [arc for arc in network.arcs() if arc.reverse is None]


def is_well_formed(network: FlowNetwork) -> bool:
    """True if every arc has a reverse arc."""
    return all(arc.reverse is not None for arc in network.arcs())


def validate_pairing(network: FlowNetwork) -> None:
    """Check that every arc has a reverse arc.

    Raises:
        MalformedNetworkError: Listing (some of) the unpaired arc ids.
    """
    unpaired = find_unpaired(network)
    if not unpaired:
        return
    limit = FLOW_CONFIG.max_unpaired_reported
    shown = ", ".join(str(arc.id) for arc in unpaired[:limit])
    if len(unpaired) > limit:
        shown += f", ... ({len(unpaired) - limit} more)"
    raise MalformedNetworkError(
        f"{len(unpaired)} arc(s) without a reverse arc: {shown}"
    )
