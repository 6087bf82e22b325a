"""flownet: maximum flow on capacitated directed networks.

Primary API:
    FlowNetwork, Vertex, Arc - network store with paired residual arcs
    calc_max_flow() - Edmonds-Karp maximum flow
    bfs() - shortest augmenting-path search over the residual network
    random_simple_network() - connected random test networks
    load_network_yaml() / load_network_file() - YAML definitions

Example:
    from flownet import FlowNetwork, calc_max_flow

    net = FlowNetwork("example")
    net.create_vertex("A")
    net.create_vertex("B")
    net.create_arc("A_B", "A", "B", 5, add_reverse=True)

    flow = calc_max_flow(net, "A", "B")  # 5
"""

from __future__ import annotations

from flownet import logging
from flownet._version import __version__
from flownet.algorithms import (
    EngineState,
    FlowSummary,
    SearchResult,
    bfs,
    calc_max_flow,
    saturated_arcs,
)
from flownet.config import FLOW_CONFIG, FlowConfig
from flownet.dsl import load_network_file, load_network_yaml
from flownet.errors import (
    DuplicateIdError,
    FlowNetError,
    InvalidArgumentError,
    MalformedNetworkError,
    NoAugmentingPathError,
    NotFoundError,
)
from flownet.generators import random_simple_network
from flownet.graph import (
    Arc,
    FlowNetwork,
    Vertex,
    format_network,
    reverse_of,
    validate_pairing,
)

__all__ = [
    "__version__",
    # Model
    "Arc",
    "FlowNetwork",
    "Vertex",
    "format_network",
    "reverse_of",
    "validate_pairing",
    # Algorithms
    "EngineState",
    "FlowSummary",
    "SearchResult",
    "bfs",
    "calc_max_flow",
    "saturated_arcs",
    # Construction helpers
    "load_network_file",
    "load_network_yaml",
    "random_simple_network",
    # Configuration
    "FLOW_CONFIG",
    "FlowConfig",
    # Errors
    "DuplicateIdError",
    "FlowNetError",
    "InvalidArgumentError",
    "MalformedNetworkError",
    "NoAugmentingPathError",
    "NotFoundError",
    # Utilities
    "logging",
]
