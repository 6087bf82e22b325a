"""Configuration classes for flownet components."""

from dataclasses import dataclass


@dataclass
class FlowConfig:
    """Defaults shared by the flow engine, generators and CLI."""

    # Upper bound on vertices accepted by the random network generator
    max_vertices: int = 2500

    # Capacity given to each direction of a generated edge
    default_capacity: int = 10

    # Raise NoAugmentingPathError instead of returning 0 flow
    raise_on_zero_flow: bool = False

    # Number of unpaired arc ids listed in a MalformedNetworkError message
    max_unpaired_reported: int = 5


# Global configuration instance
FLOW_CONFIG = FlowConfig()
