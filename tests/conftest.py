"""Shared network fixtures.

Every fixture returns a fresh ``FlowNetwork`` with all arcs paired.
"""

from __future__ import annotations

import pytest

from flownet.cli import build_demo_network
from flownet.graph.network import FlowNetwork
from flownet.logging import reset_logging, setup_root_logger


@pytest.fixture(autouse=True)
def _fresh_logging():
    yield
    reset_logging()
    setup_root_logger()


@pytest.fixture
def two_vertex():
    #      [5]
    #  A ───────► B
    #  A ◄─────── B
    #      [0]
    net = FlowNetwork("two_vertex")
    net.create_vertex("A")
    net.create_vertex("B")
    net.create_arc("A_B", "A", "B", 5)
    net.create_arc("B_A", "B", "A", 0)
    return net


@pytest.fixture
def chain():
    #      [3]       [5]
    #  A ───────► B ───────► C
    net = FlowNetwork("chain")
    for v in ("A", "B", "C"):
        net.create_vertex(v)
    net.create_arc("A_B", "A", "B", 3, add_reverse=True, reverse_id="B_A")
    net.create_arc("B_C", "B", "C", 5, add_reverse=True, reverse_id="C_B")
    return net


@pytest.fixture
def diamond():
    # Capacity:
    #          [4]
    #    v0 ─────────► v1 ───[8]───► v3
    #     │           ▲ │            ▲
    #    [8]       [1]│ │[1]         │
    #     │           │ ▼            │
    #     └─────────► v2 ────[3]─────┘
    #
    # All remaining directions exist with capacity 0.
    return build_demo_network("diamond")


@pytest.fixture
def disconnected():
    #      [4]             [6]
    #  A ◄─────► B     C ◄─────► D
    net = FlowNetwork("disconnected")
    for v in ("A", "B", "C", "D"):
        net.create_vertex(v)
    net.create_arc_pair("A_B", "A", "B", 4, reverse_id="B_A")
    net.create_arc_pair("C_D", "C", "D", 6, reverse_id="D_C")
    return net


@pytest.fixture
def clrs():
    # Classic textbook network, max flow s -> t is 23.
    net = FlowNetwork("clrs")
    for v in ("s", "v1", "v2", "v3", "v4", "t"):
        net.create_vertex(v)
    for source, target, capacity in [
        ("s", "v1", 16),
        ("s", "v2", 13),
        ("v1", "v3", 12),
        ("v2", "v1", 4),
        ("v2", "v4", 14),
        ("v3", "v2", 9),
        ("v3", "t", 20),
        ("v4", "v3", 7),
        ("v4", "t", 4),
    ]:
        net.create_arc(f"{source}_{target}", source, target, capacity, add_reverse=True)
    return net


@pytest.fixture
def two_paths():
    #        [1]      [1]
    #   ┌──► X ──────► T ◄──┐
    #   S                   │
    #   └──► Y ─────────────┘
    #        [1]      [1]
    net = FlowNetwork("two_paths")
    for v in ("S", "X", "Y", "T"):
        net.create_vertex(v)
    net.create_arc("S_X", "S", "X", 1, add_reverse=True)
    net.create_arc("S_Y", "S", "Y", 1, add_reverse=True)
    net.create_arc("X_T", "X", "T", 1, add_reverse=True)
    net.create_arc("Y_T", "Y", "T", 1, add_reverse=True)
    return net
