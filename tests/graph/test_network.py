import pytest

from flownet.errors import DuplicateIdError, InvalidArgumentError, NotFoundError
from flownet.graph.network import Arc, FlowNetwork, Vertex
from flownet.graph.render import format_network


class TestVertices:
    def test_create_and_get(self):
        net = FlowNetwork()
        v = net.create_vertex("A")
        assert isinstance(v, Vertex)
        assert net.get_vertex("A") is v
        assert "A" in net
        assert len(net) == net.num_vertices() == 1

    def test_integer_ids(self):
        net = FlowNetwork()
        net.create_vertex(0)
        net.create_vertex(1)
        assert list(net) == [0, 1]

    def test_duplicate_vertex(self):
        net = FlowNetwork()
        net.create_vertex("A")
        with pytest.raises(DuplicateIdError, match="already exists"):
            net.create_vertex("A")

    def test_duplicate_vertex_is_value_error(self):
        net = FlowNetwork()
        net.create_vertex("A")
        with pytest.raises(ValueError):
            net.create_vertex("A")

    def test_get_missing_vertex(self):
        net = FlowNetwork()
        with pytest.raises(NotFoundError, match="Vertex not found: X"):
            net.get_vertex("X")
        with pytest.raises(KeyError):
            net.get_vertex("X")

    def test_find_vertex(self):
        net = FlowNetwork()
        v = net.create_vertex("A")
        assert net.find_vertex("A") is v
        assert net.find_vertex("X") is None

    def test_vertex_from_other_network(self):
        net = FlowNetwork()
        net.create_vertex("A")
        other = FlowNetwork()
        foreign = other.create_vertex("A")
        with pytest.raises(NotFoundError):
            net.resolve(foreign)

    def test_neighbors_is_restartable(self, clrs):
        v = clrs.get_vertex("v2")
        first = [a.id for a in v.neighbors()]
        second = [a.id for a in v.neighbors()]
        assert first == second
        assert first[0] == "s_v2:rev"
        assert v.out_degree() == len(first)


class TestArcs:
    def test_create_arc_appends_to_source(self):
        net = FlowNetwork()
        net.create_vertex("A")
        net.create_vertex("B")
        a1 = net.create_arc("a1", "A", "B", 2)
        a2 = net.create_arc("a2", "A", "B", 3)
        assert net.get_vertex("A").arcs == [a1, a2]
        assert net.get_vertex("B").arcs == []
        assert a1.reverse is None
        assert net.num_arcs() == 2

    def test_create_arc_with_vertex_objects(self):
        net = FlowNetwork()
        a = net.create_vertex("A")
        b = net.create_vertex("B")
        arc = net.create_arc("ab", a, b, 1)
        assert arc.source is a and arc.target is b

    def test_unknown_endpoint(self):
        net = FlowNetwork()
        net.create_vertex("A")
        with pytest.raises(NotFoundError):
            net.create_arc("ab", "A", "B", 1)
        assert net.num_arcs() == 0

    def test_duplicate_arc_id(self, two_vertex):
        with pytest.raises(DuplicateIdError):
            two_vertex.create_arc("A_B", "B", "A", 1)

    def test_duplicate_reverse_id(self, two_vertex):
        with pytest.raises(DuplicateIdError):
            two_vertex.create_arc("x", "A", "B", 1, add_reverse=True, reverse_id="B_A")
        assert two_vertex.find_arc("x") is None

    @pytest.mark.parametrize("capacity", [-1, 1.5, 2.0, True, "3", None])
    def test_invalid_capacity(self, capacity):
        net = FlowNetwork()
        net.create_vertex("A")
        net.create_vertex("B")
        with pytest.raises(InvalidArgumentError):
            net.create_arc("ab", "A", "B", capacity)

    def test_add_reverse(self):
        net = FlowNetwork()
        net.create_vertex("A")
        net.create_vertex("B")
        arc = net.create_arc("ab", "A", "B", 7, add_reverse=True)
        rev = net.get_arc("ab:rev")
        assert arc.reverse is rev and rev.reverse is arc
        assert rev.capacity == 0
        assert rev.source.id == "B" and rev.target.id == "A"

    def test_create_arc_pair(self):
        net = FlowNetwork()
        net.create_vertex("A")
        net.create_vertex("B")
        fwd, rev = net.create_arc_pair("ab", "A", "B", 4, reverse_id="ba")
        assert fwd.capacity == rev.capacity == 4
        assert fwd.reverse is rev
        fwd2, rev2 = net.create_arc_pair("ab2", "A", "B", 4, reverse_capacity=1)
        assert rev2.capacity == 1
        assert rev2.id == "ab2:rev"

    def test_get_missing_arc(self, two_vertex):
        with pytest.raises(NotFoundError):
            two_vertex.get_arc("nope")
        assert two_vertex.find_arc("nope") is None

    def test_arc_decrease_and_increase(self, two_vertex):
        arc = two_vertex.get_arc("A_B")
        arc.decrease(2)
        assert arc.capacity == 3
        assert arc.flow == 2
        assert arc.is_residual()
        arc.increase(1)
        assert arc.capacity == 4
        with pytest.raises(InvalidArgumentError):
            arc.decrease(5)
        with pytest.raises(InvalidArgumentError):
            arc.decrease(-1)
        with pytest.raises(InvalidArgumentError):
            arc.increase(-1)

    def test_arc_flow_never_negative(self, two_vertex):
        rev = two_vertex.get_arc("B_A")
        rev.increase(3)
        assert rev.flow == 0

    def test_arc_str(self, two_vertex):
        arc = two_vertex.get_arc("A_B")
        assert isinstance(arc, Arc)
        assert str(arc) == "A_B (5)"
        assert "A'->'B" in repr(arc)


class TestNetworkState:
    def test_reset_capacities(self, chain):
        arc = chain.get_arc("A_B")
        arc.decrease(3)
        chain.get_arc("B_A").increase(3)
        chain.reset_capacities()
        assert arc.capacity == 3
        assert chain.get_arc("B_A").capacity == 0

    def test_copy_is_independent(self, chain):
        chain.get_arc("B_C").decrease(1)
        clone = chain.copy()
        assert clone is not chain
        assert clone.name == chain.name
        assert list(clone) == list(chain)
        assert [a.id for a in clone.arcs()] == [a.id for a in chain.arcs()]

        arc = clone.get_arc("B_C")
        assert arc.capacity == 4
        assert arc.initial_capacity == 5
        assert arc.reverse is clone.get_arc("C_B")
        assert arc.source is clone.get_vertex("B")

        arc.decrease(4)
        assert chain.get_arc("B_C").capacity == 4

    def test_str_uses_textual_dump(self, two_vertex):
        assert str(two_vertex) == format_network(two_vertex)

    def test_repr(self, chain):
        assert repr(chain) == "FlowNetwork(name='chain', vertices=3, arcs=4)"
