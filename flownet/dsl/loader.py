"""YAML network definitions.

A definition looks like::

    name: diamond
    bidirectional: false        # optional, pair every arc with a 0-capacity reverse
    vertices: [v0, v1, v2, v3]  # optional, fixes vertex order
    arcs:
      - {id: v0_v1, source: v0, target: v1, capacity: 4}
      - {source: v1, target: v0}                  # id defaults to "v1_v0"
      - {source: v1, target: v3, capacity: 8, reverse_capacity: 0}

Vertices referenced only by arcs are created in order of first mention.
An arc with ``reverse_capacity`` gets its reverse arc created with it.
With ``bidirectional: true`` any arc left without a reverse after loading
receives one with capacity 0.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

from flownet.errors import InvalidArgumentError
from flownet.graph.network import FlowNetwork
from flownet.graph.pairing import find_unpaired
from flownet.logging import get_logger

logger = get_logger(__name__)

_TOP_LEVEL_KEYS = {"name", "bidirectional", "vertices", "arcs"}
_ARC_KEYS = {"id", "source", "target", "capacity", "reverse_id", "reverse_capacity"}


def _check_id(value: Any, what: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise InvalidArgumentError(
            f"{what} must be a string or an integer, got {value!r}"
        )


def _check_shape(data: Any) -> Dict[str, Any]:
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(
            "The provided YAML must map to a dictionary at top-level."
        )
    extra = set(data) - _TOP_LEVEL_KEYS
    if extra:
        raise InvalidArgumentError(
            f"Unrecognized top-level key(s): {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(_TOP_LEVEL_KEYS)}"
        )
    if not isinstance(data.get("vertices", []), list):
        raise InvalidArgumentError("'vertices' must be a list")
    for vertex_id in data.get("vertices", []):
        _check_id(vertex_id, "Vertex id")
    arcs = data.get("arcs", [])
    if not isinstance(arcs, list):
        raise InvalidArgumentError("'arcs' must be a list")
    for entry in arcs:
        if not isinstance(entry, dict):
            raise InvalidArgumentError(
                "Each arc definition must be a mapping with 'source' and 'target'"
            )
        if "source" not in entry or "target" not in entry:
            raise InvalidArgumentError(
                "Each arc definition must include 'source' and 'target'"
            )
        unknown = set(entry) - _ARC_KEYS
        if unknown:
            raise InvalidArgumentError(
                f"Unrecognized key(s) {sorted(map(str, unknown))} in arc "
                f"{entry['source']}->{entry['target']}"
            )
        _check_id(entry["source"], "Arc source")
        _check_id(entry["target"], "Arc target")
        for key in ("id", "reverse_id"):
            if key in entry:
                _check_id(entry[key], f"Arc {key}")
    return data


def build_network(data: Dict[str, Any]) -> FlowNetwork:
    """Build a network from an already parsed definition dictionary."""
    data = _check_shape(data)
    network = FlowNetwork(str(data.get("name", "")))

    for vertex_id in data.get("vertices", []):
        network.create_vertex(vertex_id)

    arcs: List[Dict[str, Any]] = data.get("arcs", [])
    for entry in arcs:
        for endpoint in (entry["source"], entry["target"]):
            if endpoint not in network:
                network.create_vertex(endpoint)

    for entry in arcs:
        source, target = entry["source"], entry["target"]
        arc_id = entry.get("id", f"{source}_{target}")
        capacity = entry.get("capacity", 0)
        if "reverse_capacity" in entry:
            network.create_arc(
                arc_id,
                source,
                target,
                capacity,
                add_reverse=True,
                reverse_id=entry.get("reverse_id", f"{target}_{source}"),
                reverse_capacity=entry["reverse_capacity"],
            )
        else:
            network.create_arc(arc_id, source, target, capacity)

    if data.get("bidirectional", False):
        for arc in find_unpaired(network):
            reverse_id = f"{arc.target.id}_{arc.source.id}"
            if network.find_arc(reverse_id) is not None:
                reverse_id = f"{arc.id}:rev"
            network.create_arc(reverse_id, arc.target, arc.source, 0)

    logger.debug(
        "Loaded network '%s': %d vertices, %d arcs",
        network.name,
        network.num_vertices(),
        network.num_arcs(),
    )
    return network


def load_network_yaml(yaml_str: str) -> FlowNetwork:
    """Parse a YAML network definition.

    Raises:
        InvalidArgumentError: If the document does not have the expected shape.
        DuplicateIdError: If vertex or arc ids repeat.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise InvalidArgumentError(f"Invalid YAML: {exc}") from exc
    return build_network(data)


def load_network_file(path: Union[str, Path]) -> FlowNetwork:
    """Read and parse a YAML network definition from ``path``."""
    path = Path(path)
    network = load_network_yaml(path.read_text(encoding="utf-8"))
    if not network.name:
        network.name = path.stem
    return network
