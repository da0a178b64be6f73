import pytest

from adjgraph.core.errors import DuplicateNameError, InvalidVertexError
from adjgraph.core.graph import INITIAL_CAPACITY, Graph


class TestAddVertex:
    """Slot allocation and naming."""

    def test_slots_are_allocated_in_order(self):
        g = Graph()
        assert [g.add_vertex(n) for n in ("a", "b", "c")] == [0, 1, 2]
        assert g.num_vertices() == 3
        assert len(g) == 3
        assert g.capacity == INITIAL_CAPACITY

    def test_name_number_mapping(self):
        g = Graph()
        v = g.add_vertex("alpha")
        assert g.vertex_number("alpha") == v
        assert g.slot_for("alpha") == v
        assert g.vertex_name(v) == "alpha"
        assert g.name_for(v) == "alpha"
        assert "alpha" in g and v in g

    def test_lookups_of_unknown_vertices_are_not_errors(self):
        g = Graph()
        g.add_vertex("a")
        assert g.vertex_number("zzz") == -1
        assert g.slot_for("zzz") is None
        assert g.vertex_name(7) is None
        assert g.vertex_name(-3) is None
        assert g.vertex_name(10_000) is None
        assert "zzz" not in g
        assert 7 not in g

    def test_duplicate_name(self):
        g = Graph()
        g.add_vertex("a")
        with pytest.raises(DuplicateNameError) as exc:
            g.add_vertex("a")
        assert isinstance(exc.value, ValueError)
        assert exc.value.slot == 0
        assert g.num_vertices() == 1

    def test_rejects_empty_and_non_string_names(self):
        g = Graph()
        with pytest.raises(ValueError):
            g.add_vertex("")
        with pytest.raises(TypeError):
            g.add_vertex(3)
        assert g.num_vertices() == 0

    @pytest.mark.parametrize("name", ["new york", "a\tb", "line\n", " lead", "trail "])
    def test_rejects_names_with_whitespace(self, name):
        g = Graph()
        with pytest.raises(ValueError, match="whitespace"):
            g.add_vertex(name)
        assert g.num_vertices() == 0
        assert g.capacity == INITIAL_CAPACITY

    def test_add_bumps_version(self):
        g = Graph()
        before = g.version
        g.add_vertex("a")
        assert g.version > before

    @pytest.mark.parametrize("capacity", [0, -4, "16", 2.5])
    def test_bad_initial_capacity(self, capacity):
        with pytest.raises(ValueError):
            Graph(initial_capacity=capacity)


class TestAnonymousVertex:
    def test_generated_name_uses_slot(self):
        g = Graph()
        v = g.add_anonymous_vertex()
        assert v == 0
        assert g.vertex_name(v) == "v0"

    def test_add_vertex_without_name(self):
        g = Graph()
        g.add_vertex("x")
        v = g.add_vertex()
        assert g.vertex_name(v) == f"v{v}"

    def test_free_slots_are_reused_after_fresh_ones(self):
        g = Graph()
        g.add_vertex("v1")  # slot 0
        g.add_vertex("vv1")  # slot 1
        v = g.add_anonymous_vertex()  # slot 2
        assert v == 2
        assert g.vertex_name(v) == "v2"
        g.remove_vertex("v1")
        g.remove_vertex(v)
        g.add_vertex("v3")  # slot 3
        # queue of free slots is now [4, ..., 15, 0, 2]
        slots = [g.add_anonymous_vertex() for _ in range(INITIAL_CAPACITY - 4)]
        assert slots == list(range(4, INITIAL_CAPACITY))
        assert g.add_anonymous_vertex() == 0
        assert g.vertex_name(0) == "v0"

    def test_generated_name_prefixes_until_unique(self):
        g = Graph(initial_capacity=3)
        g.add_vertex("v2")  # slot 0
        g.add_vertex("vv2")  # slot 1
        v = g.add_anonymous_vertex()
        assert v == 2
        assert g.vertex_name(v) == "vvv2"
        assert g.vertex_number("vvv2") == 2


class TestRemoveVertex:
    def _graph(self):
        g = Graph()
        for name in ("a", "b", "c"):
            g.add_vertex(name)
        g.add_edge("a", "b", 1)
        g.add_edge("b", "c", 2)
        g.add_edge("c", "a", 3)
        g.add_edge("b", "a", 4)
        g.add_edge("c", "b", 5)
        return g

    def test_removes_outgoing_and_incoming_edges(self):
        g = self._graph()
        g.remove_vertex("b")
        assert g.num_vertices() == 2
        assert g.num_edges() == 1
        assert not g.is_valid(1)
        assert g.vertex_number("b") == -1
        assert g.vertex_name(1) is None
        for e in g.edges():
            assert e.source != 1 and e.target != 1
        assert [e.as_tuple() for e in g.edges()] == [(2, 0, 3)]

    def test_remove_by_slot(self):
        g = self._graph()
        g.remove_vertex(0)
        assert "a" not in g
        assert g.num_edges() == 2

    def test_remove_is_idempotent(self):
        g = self._graph()
        g.remove_vertex("b")
        version = g.version
        g.remove_vertex("b")
        g.remove_vertex(1)
        g.remove_vertex(99)
        g.remove_vertex(-1)
        g.remove_vertex("nope")
        assert g.version == version
        assert g.num_vertices() == 2

    def test_removed_slot_is_reused_for_a_new_name(self):
        g = Graph(initial_capacity=2)
        g.add_vertex("a")
        g.add_vertex("b")
        g.remove_vertex("a")
        v = g.add_vertex("c")
        assert v == 0
        assert g.capacity == 2
        assert g.vertex_name(0) == "c"
        assert g.vertex_number("a") == -1

    def test_reused_slot_has_no_edges(self):
        g = self._graph()
        g.remove_vertex("b")
        # slot 1 only comes back after the untouched free slots
        for i in range(INITIAL_CAPACITY - 3):
            g.add_vertex(f"filler{i}")
        v = g.add_vertex("d")
        assert v == 1
        assert list(g.edges_from(v)) == []
        assert g.get_edge("a", "d") is None


class TestCapacityGrowth:
    def test_doubling_preserves_slots_and_names(self):
        g = Graph(initial_capacity=2)
        names = ["a", "b", "c", "d", "e"]
        slots = [g.add_vertex(n) for n in names]
        assert slots == [0, 1, 2, 3, 4]
        assert g.capacity == 8
        for n, v in zip(names, slots):
            assert g.vertex_name(v) == n
            assert g.vertex_number(n) == v

    def test_doubling_keeps_edges(self):
        g = Graph(initial_capacity=1)
        g.add_vertex("a")
        g.add_vertex("b")
        g.add_edge("a", "b", 7)
        for i in range(10):
            g.add_vertex(f"x{i}")
        assert g.capacity == 16
        assert g.get_edge("a", "b").weight == 7
        assert g.num_edges() == 1

    def test_new_slots_are_queued_in_ascending_order(self):
        g = Graph(initial_capacity=3)
        for n in "abc":
            g.add_vertex(n)
        assert [g.add_vertex(n) for n in "defg"] == [3, 4, 5, 6]


def test_invalid_vertex_error_is_a_key_error():
    g = Graph()
    with pytest.raises(KeyError):
        g.mark("missing")
    with pytest.raises(InvalidVertexError, match="Invalid vertex 'missing'"):
        g.mark("missing")
