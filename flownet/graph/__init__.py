"""Network store and helpers.

``network`` holds the ``FlowNetwork`` container with its ``Vertex`` and ``Arc``
types, ``pairing`` the reverse-arc links, ``render`` the textual dump and
``convert`` the NetworkX / matrix conversions.
"""

from flownet.graph.network import Arc, ArcID, FlowNetwork, Vertex, VertexID
from flownet.graph.pairing import (
    find_unpaired,
    is_well_formed,
    pair_total,
    reverse_of,
    validate_pairing,
)
from flownet.graph.render import format_network

__all__ = [
    "Arc",
    "ArcID",
    "FlowNetwork",
    "Vertex",
    "VertexID",
    "find_unpaired",
    "format_network",
    "is_well_formed",
    "pair_total",
    "reverse_of",
    "validate_pairing",
]
