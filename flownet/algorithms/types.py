"""Result containers for the augmenting-path search and the max-flow engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set

from flownet.graph.network import Arc, ArcID, VertexID


class EngineState(Enum):
    """Phases of one max-flow computation."""

    SEARCHING = "searching"
    AUGMENTING = "augmenting"
    DONE = "done"


@dataclass
class SearchResult:
    """Outcome of one breadth-first search over residual arcs.

    Attributes:
        reachable: Whether the target was reached (always True when
            source equals target).
        pred: Arc through which each reached vertex was first discovered.
            The source itself has no entry.
        order: Vertex ids in the order they were dequeued.
    """

    reachable: bool
    pred: Dict[VertexID, Arc] = field(default_factory=dict)
    order: List[VertexID] = field(default_factory=list)


@dataclass(frozen=True)
class FlowSummary:
    """Details of a completed max-flow computation.

    Attributes:
        total_flow: Maximum flow value.
        arc_flow: Flow carried per arc id (``initial - residual`` when positive).
        residual_cap: Residual capacity per arc id after the computation.
        reachable: Vertices reachable from the source in the final residual network.
        min_cut: Ids of arcs with positive initial capacity leaving ``reachable``.
        augmentations: Number of augmenting paths used.
        path_length_distribution: Flow pushed per augmenting-path length (arc count).
    """

    total_flow: int
    arc_flow: Dict[ArcID, int]
    residual_cap: Dict[ArcID, int]
    reachable: Set[VertexID]
    min_cut: List[ArcID]
    augmentations: int
    path_length_distribution: Dict[int, int]
