"""Capacitated directed network: vertices, arcs and the network store.

``FlowNetwork`` is strict in the same way throughout:

  - Vertex ids and arc ids are unique; reusing one raises ``DuplicateIdError``.
  - Arcs never create missing vertices; unknown endpoints raise ``NotFoundError``.
  - Capacities are non-negative integers.
  - Each vertex owns its outgoing arcs in creation order.

Reverse pairing is established when the second arc of a pair is created (see
``flownet.graph.pairing``). Creating an arc does not create its reverse unless
``add_reverse=True`` is passed.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Optional, Tuple, Union

from flownet.errors import DuplicateIdError, InvalidArgumentError, NotFoundError
from flownet.graph.pairing import link_reverse, reverse_of
from flownet.logging import get_logger

logger = get_logger(__name__)

VertexID = Hashable
ArcID = Hashable


def check_capacity(capacity: object, what: str = "capacity") -> int:
    """Return ``capacity`` if it is a non-negative ``int``.

    Raises:
        InvalidArgumentError: For floats, bools, other types or negative values.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidArgumentError(
            f"{what} must be a non-negative integer, got {capacity!r}"
        )
    if capacity < 0:
        raise InvalidArgumentError(f"{what} must be non-negative, got {capacity}")
    return capacity


class Vertex:
    """A vertex and its ordered list of outgoing arcs.

    Attributes:
        id: Unique identifier within the owning network.
        arcs: Outgoing arcs, in creation order.
    """

    __slots__ = ("id", "arcs")

    def __init__(self, vertex_id: VertexID) -> None:
        self.id = vertex_id
        self.arcs: List[Arc] = []

    def neighbors(self) -> Iterator[Arc]:
        """Iterate over outgoing arcs. Each call starts a fresh pass."""
        return iter(self.arcs)

    def out_degree(self) -> int:
        return len(self.arcs)

    def __repr__(self) -> str:
        return f"Vertex({self.id!r})"

    def __str__(self) -> str:
        return str(self.id)


class Arc:
    """One direction of a residual pair.

    Attributes:
        id: Unique identifier within the owning network.
        source: Vertex the arc leaves.
        target: Vertex the arc enters.
        capacity: Current residual capacity.
        initial_capacity: Capacity at creation time.
        reverse: Paired arc running ``target -> source``, or ``None`` while unpaired.
    """

    __slots__ = ("id", "source", "target", "capacity", "initial_capacity", "reverse")

    def __init__(
        self, arc_id: ArcID, source: Vertex, target: Vertex, capacity: int = 0
    ) -> None:
        self.id = arc_id
        self.source = source
        self.target = target
        self.capacity = check_capacity(capacity)
        self.initial_capacity = capacity
        self.reverse: Optional[Arc] = None

    def is_residual(self) -> bool:
        """True if more flow can be pushed along this arc."""
        return self.capacity > 0

    @property
    def flow(self) -> int:
        """Net flow carried by this arc relative to its initial capacity."""
        return max(0, self.initial_capacity - self.capacity)

    def decrease(self, amount: int) -> None:
        """Remove ``amount`` of residual capacity.

        Raises:
            InvalidArgumentError: If ``amount`` is negative or exceeds ``capacity``.
        """
        if amount < 0 or amount > self.capacity:
            raise InvalidArgumentError(
                f"Cannot decrease arc '{self.id}' (capacity {self.capacity}) by {amount}"
            )
        self.capacity -= amount

    def increase(self, amount: int) -> None:
        """Add ``amount`` of residual capacity."""
        if amount < 0:
            raise InvalidArgumentError(
                f"Cannot increase arc '{self.id}' by negative amount {amount}"
            )
        self.capacity += amount

    def __repr__(self) -> str:
        return (
            f"Arc({self.id!r}, {self.source.id!r}->{self.target.id!r}, "
            f"capacity={self.capacity})"
        )

    def __str__(self) -> str:
        return f"{self.id} ({self.capacity})"


VertexRef = Union[Vertex, VertexID]


class FlowNetwork:
    """Store of vertices and arcs, addressable by id.

    Args:
        name: Free-form label shown in the textual dump.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._vertices: Dict[VertexID, Vertex] = {}
        self._arcs: Dict[ArcID, Arc] = {}

    #
    # Vertices
    #
    def create_vertex(self, vertex_id: VertexID) -> Vertex:
        """Insert a new vertex.

        Raises:
            DuplicateIdError: If ``vertex_id`` is already present.
        """
        if vertex_id in self._vertices:
            raise DuplicateIdError(f"Vertex '{vertex_id}' already exists.")
        vertex = Vertex(vertex_id)
        self._vertices[vertex_id] = vertex
        return vertex

    def get_vertex(self, vertex_id: VertexID) -> Vertex:
        """Return the vertex with ``vertex_id``.

        Raises:
            NotFoundError: If no such vertex exists.
        """
        vertex = self._vertices.get(vertex_id)
        if vertex is None:
            raise NotFoundError(f"Vertex not found: {vertex_id}")
        return vertex

    def find_vertex(self, vertex_id: VertexID) -> Optional[Vertex]:
        """Return the vertex with ``vertex_id`` or ``None``."""
        return self._vertices.get(vertex_id)

    def resolve(self, ref: VertexRef) -> Vertex:
        """Accept a vertex id or a ``Vertex`` of this network and return the vertex.

        Raises:
            NotFoundError: If the id is unknown or the vertex belongs elsewhere.
        """
        if isinstance(ref, Vertex):
            if self._vertices.get(ref.id) is not ref:
                raise NotFoundError(f"Vertex '{ref.id}' is not part of this network")
            return ref
        return self.get_vertex(ref)

    def vertices(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())

    def num_vertices(self) -> int:
        return len(self._vertices)

    #
    # Arcs
    #
    def create_arc(
        self,
        arc_id: ArcID,
        source: VertexRef,
        target: VertexRef,
        capacity: int = 0,
        *,
        add_reverse: bool = False,
        reverse_id: Optional[ArcID] = None,
        reverse_capacity: int = 0,
    ) -> Arc:
        """Create the arc ``source -> target`` and append it to ``source.arcs``.

        If an unpaired arc ``target -> source`` already exists, the two are
        paired. With ``add_reverse=True`` a reverse arc is created right away
        (id ``reverse_id`` or ``f"{arc_id}:rev"``, capacity ``reverse_capacity``).

        Args:
            arc_id: Unique arc identifier.
            source: Source vertex or its id.
            target: Target vertex or its id.
            capacity: Non-negative integer capacity.
            add_reverse: Create the paired reverse arc as well.
            reverse_id: Id for the reverse arc when ``add_reverse`` is set.
            reverse_capacity: Capacity of the reverse arc when ``add_reverse`` is set.

        Returns:
            The new forward arc.

        Raises:
            NotFoundError: If an endpoint is unknown.
            DuplicateIdError: If an arc id is already in use.
            InvalidArgumentError: If a capacity is not a non-negative integer.
        """
        src = self.resolve(source)
        dst = self.resolve(target)
        check_capacity(capacity)
        if add_reverse:
            check_capacity(reverse_capacity, "reverse_capacity")
            if reverse_id is None:
                reverse_id = f"{arc_id}:rev"
            if reverse_id == arc_id or reverse_id in self._arcs:
                raise DuplicateIdError(f"Arc with id '{reverse_id}' already exists.")
        if arc_id in self._arcs:
            raise DuplicateIdError(f"Arc with id '{arc_id}' already exists.")

        if not add_reverse:
            return self._add_arc(arc_id, src, dst, capacity)

        # The two new arcs are paired with each other, never with older arcs.
        arc = self._add_arc(arc_id, src, dst, capacity, pair=False)
        self._add_arc(reverse_id, dst, src, reverse_capacity, partner=arc)
        return arc

    def create_arc_pair(
        self,
        arc_id: ArcID,
        source: VertexRef,
        target: VertexRef,
        capacity: int,
        reverse_capacity: Optional[int] = None,
        reverse_id: Optional[ArcID] = None,
    ) -> Tuple[Arc, Arc]:
        """Create an undirected edge as two paired arcs.

        The reverse capacity defaults to ``capacity``.

        Returns:
            ``(forward, reverse)`` arcs.
        """
        arc = self.create_arc(
            arc_id,
            source,
            target,
            capacity,
            add_reverse=True,
            reverse_id=reverse_id,
            reverse_capacity=capacity if reverse_capacity is None else reverse_capacity,
        )
        return arc, reverse_of(arc)

    def _add_arc(
        self,
        arc_id: ArcID,
        src: Vertex,
        dst: Vertex,
        capacity: int,
        *,
        pair: bool = True,
        partner: Optional[Arc] = None,
    ) -> Arc:
        arc = Arc(arc_id, src, dst, capacity)
        src.arcs.append(arc)
        self._arcs[arc_id] = arc
        if pair:
            link_reverse(arc, partner)
        logger.debug(
            "Created arc %s %s->%s capacity=%d", arc_id, src.id, dst.id, capacity
        )
        return arc

    def get_arc(self, arc_id: ArcID) -> Arc:
        """Return the arc with ``arc_id``.

        Raises:
            NotFoundError: If no such arc exists.
        """
        arc = self._arcs.get(arc_id)
        if arc is None:
            raise NotFoundError(f"Arc not found: {arc_id}")
        return arc

    def find_arc(self, arc_id: ArcID) -> Optional[Arc]:
        return self._arcs.get(arc_id)

    def arcs(self) -> Iterator[Arc]:
        return iter(self._arcs.values())

    def num_arcs(self) -> int:
        return len(self._arcs)

    #
    # State
    #
    def reset_capacities(self) -> None:
        """Restore every arc to its initial capacity, discarding placed flow."""
        for arc in self._arcs.values():
            arc.capacity = arc.initial_capacity

    def copy(self) -> FlowNetwork:
        """Return an independent deep copy, including current residual capacities.

        Vertex order, arc order and pairings are preserved.
        """
        clone = FlowNetwork(self.name)
        for vertex_id in self._vertices:
            clone.create_vertex(vertex_id)
        for arc in self._arcs.values():
            new_arc = Arc(
                arc.id,
                clone._vertices[arc.source.id],
                clone._vertices[arc.target.id],
                arc.initial_capacity,
            )
            new_arc.capacity = arc.capacity
            new_arc.source.arcs.append(new_arc)
            clone._arcs[arc.id] = new_arc
        for arc in self._arcs.values():
            if arc.reverse is not None:
                clone._arcs[arc.id].reverse = clone._arcs[arc.reverse.id]
        return clone

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    def __iter__(self) -> Iterator[VertexID]:
        return iter(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"FlowNetwork(name={self.name!r}, vertices={self.num_vertices()}, "
            f"arcs={self.num_arcs()})"
        )

    def __str__(self) -> str:
        from flownet.graph.render import format_network

        return format_network(self)
