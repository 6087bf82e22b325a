"""Loading networks from YAML definitions."""

from flownet.dsl.loader import build_network, load_network_file, load_network_yaml

__all__ = ["build_network", "load_network_file", "load_network_yaml"]
