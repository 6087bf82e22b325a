"""Command-line interface for flownet."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from flownet.algorithms.max_flow import calc_max_flow
from flownet.algorithms.types import FlowSummary
from flownet.dsl.loader import load_network_file
from flownet.errors import FlowNetError
from flownet.generators import random_simple_network
from flownet.graph.network import FlowNetwork
from flownet.graph.pairing import find_unpaired
from flownet.graph.render import format_network
from flownet.logging import configure_verbosity, get_logger

logger = get_logger(__name__)

# (arc id, source, target, capacity) of the fixed demo network
DEMO_ARCS = [
    ("v3_v2", "v3", "v2", 0),
    ("v3_v1", "v3", "v1", 0),
    ("v2_v3", "v2", "v3", 3),
    ("v2_v1", "v2", "v1", 1),
    ("v2_v0", "v2", "v0", 0),
    ("v1_v3", "v1", "v3", 8),
    ("v1_v2", "v1", "v2", 1),
    ("v1_v0", "v1", "v0", 0),
    ("v0_v2", "v0", "v2", 8),
    ("v0_v1", "v0", "v1", 4),
]
DEMO_QUERIES = [("v1", "v0"), ("v2", "v3"), ("v0", "v1")]


def build_demo_network(name: str = "G2") -> FlowNetwork:
    """Four-vertex network with every arc explicitly paired."""
    network = FlowNetwork(name)
    for vertex_id in ("v3", "v2", "v1", "v0"):
        network.create_vertex(vertex_id)
    for arc_id, source, target, capacity in DEMO_ARCS:
        network.create_arc(arc_id, source, target, capacity)
    return network


def _format_duration(seconds: float) -> str:
    """Return a short duration string: "12.3 ms" or "1.23 s"."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    return f"{seconds:.2f} s"


def _summary_to_dict(summary: FlowSummary) -> Dict[str, Any]:
    return {
        "total_flow": summary.total_flow,
        "augmentations": summary.augmentations,
        "min_cut": [str(a) for a in summary.min_cut],
        "reachable": sorted(str(v) for v in summary.reachable),
        "arc_flow": {str(k): v for k, v in summary.arc_flow.items() if v > 0},
        "path_length_distribution": {
            str(k): v for k, v in sorted(summary.path_length_distribution.items())
        },
    }


def _solve(
    network: FlowNetwork,
    source: str,
    target: str,
    summary: bool = False,
    show: bool = False,
) -> int:
    """Compute and print the max flow for one source/target pair."""
    start = perf_counter()
    if summary:
        flow, flow_summary = calc_max_flow(
            network, source, target, return_summary=True
        )
    else:
        flow = calc_max_flow(network, source, target)
    elapsed = perf_counter() - start
    logger.info(
        f"Max flow {source} -> {target} in '{network.name}': {flow} "
        f"({_format_duration(elapsed)})"
    )

    if show:
        print(format_network(network))
    if summary:
        print(json.dumps(_summary_to_dict(flow_summary), indent=2))
    else:
        print(f"Result: {flow}")
    return flow


def _run_file(
    path: Path, source: str, target: str, summary: bool, show: bool
) -> None:
    logger.info(f"Loading network from: {path}")
    network = load_network_file(path)
    _solve(network, source, target, summary=summary, show=show)


def _run_random(
    vertices: int,
    edges: int,
    source: str,
    target: str,
    seed: Optional[int],
    capacity: Optional[int],
    summary: bool,
    show: bool,
) -> None:
    network = random_simple_network(
        vertices,
        edges,
        capacity=capacity,
        seed=seed,
        name=f"G: {source} -> {target}",
    )
    _solve(network, source, target, summary=summary, show=show)


def _run_demo(seed: Optional[int], show: bool) -> None:
    _run_random(4, 4, "v1", "v2", seed, None, summary=False, show=show)
    for source, target in DEMO_QUERIES:
        network = build_demo_network(f"G2: {source} -> {target}")
        _solve(network, source, target, show=show)


def _show_file(path: Path) -> None:
    network = load_network_file(path)
    print(format_network(network))
    unpaired = find_unpaired(network)
    if unpaired:
        print(f"Unpaired arcs: {', '.join(str(a.id) for a in unpaired)}")
    else:
        print(
            f"{network.num_vertices()} vertices, {network.num_arcs()} arcs, "
            "all arcs paired"
        )


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flownet`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flownet",
        description="Compute maximum flow between two vertices of a network.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,random,demo,show}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Max flow on a YAML network")
    run_parser.add_argument("network", type=Path, help="Path to network YAML")

    random_parser = subparsers.add_parser(
        "random", help="Max flow on a random connected network"
    )
    random_parser.add_argument("--vertices", "-n", type=int, required=True)
    random_parser.add_argument("--edges", "-m", type=int, required=True)
    random_parser.add_argument("--seed", type=int, default=None)
    random_parser.add_argument(
        "--capacity", type=int, default=None, help="Capacity of every arc"
    )

    for p in (run_parser, random_parser):
        p.add_argument("--source", "-s", required=True, help="Source vertex id")
        p.add_argument("--target", "-t", required=True, help="Target vertex id")
        p.add_argument(
            "--summary", action="store_true", help="Print a JSON flow summary"
        )

    demo_parser = subparsers.add_parser("demo", help="Run the built-in examples")
    demo_parser.add_argument("--seed", type=int, default=None)

    show_parser = subparsers.add_parser(
        "show", help="Print a YAML network and its pairing status"
    )
    show_parser.add_argument("network", type=Path, help="Path to network YAML")

    for p in (run_parser, random_parser, demo_parser):
        p.add_argument(
            "--show",
            action="store_true",
            help="Print the residual network after the computation",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)
    configure_verbosity(verbose=args.verbose, quiet=args.quiet)

    try:
        if args.command == "run":
            _run_file(args.network, args.source, args.target, args.summary, args.show)
        elif args.command == "random":
            _run_random(
                args.vertices,
                args.edges,
                args.source,
                args.target,
                args.seed,
                args.capacity,
                args.summary,
                args.show,
            )
        elif args.command == "demo":
            _run_demo(args.seed, args.show)
        elif args.command == "show":
            _show_file(args.network)
    except FileNotFoundError as e:
        logger.error(f"Network file not found: {e.filename}")
        print(f"ERROR: Network file not found: {e.filename}")
        sys.exit(1)
    except FlowNetError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
