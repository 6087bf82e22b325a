"""Flow algorithms: residual breadth-first search and the max-flow engine."""

from flownet.algorithms.bfs import bfs, path_to, reachable_set
from flownet.algorithms.max_flow import augment, calc_max_flow, saturated_arcs
from flownet.algorithms.types import EngineState, FlowSummary, SearchResult

__all__ = [
    "EngineState",
    "FlowSummary",
    "SearchResult",
    "augment",
    "bfs",
    "calc_max_flow",
    "path_to",
    "reachable_set",
    "saturated_arcs",
]
