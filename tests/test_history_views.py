import json

import numpy as np
import polars as pl
import pytest
import scipy.sparse as sp

from adjgraph.core.graph import Graph, UndirectedGraph


class TestHistory:
    def test_records_mutations_in_order(self, abc_graph):
        h = abc_graph.history()
        assert [e["op"] for e in h] == ["add_vertex"] * 3 + ["add_edge"] * 3
        assert [e["version"] for e in h] == [1, 2, 3, 4, 5, 6]
        assert h[0]["name"] == "a"
        assert h[0]["result"] == 0
        last = h[-1]
        assert (last["source"], last["target"], last["weight"]) == ("b", "c", 3)
        assert last["result"] == [1, 2, 3]

    def test_event_fields(self, abc_graph):
        h = abc_graph.history()
        for evt in h:
            assert evt["ts_utc"].endswith("Z")
        mono = [evt["mono_ns"] for evt in h]
        assert mono == sorted(mono)

    def test_removals_and_anonymous(self):
        g = Graph()
        g.add_anonymous_vertex()
        g.add_vertex()
        g.remove_vertex(0)
        g.remove_edge(1, 0)
        ops = [(e["op"], e["result"]) for e in g.history()]
        assert ops == [
            ("add_anonymous_vertex", 0),
            ("add_vertex", 1),
            ("remove_vertex", None),
            ("remove_edge", 0),
        ]

    def test_undirected_logs_created_endpoints(self):
        g = UndirectedGraph()
        g.add_edge("a", "b", 1)
        assert [e["op"] for e in g.history()] == ["add_vertex", "add_vertex", "add_edge"]
        assert g.history()[-1]["version"] == g.version

    def test_marks_and_reads_are_not_logged(self, abc_graph):
        n = len(abc_graph.history())
        abc_graph.mark("a")
        abc_graph.path("a", "c")
        list(abc_graph.edges())
        assert len(abc_graph.history()) == n

    def test_disabled(self):
        g = Graph(history=False)
        g.add_vertex("a")
        assert g.history() == []
        g.enable_history()
        g.add_vertex("b")
        assert [e["name"] for e in g.history()] == ["b"]
        g.enable_history(False)
        g.add_vertex("c")
        assert len(g.history()) == 1

    def test_clear(self, abc_graph):
        abc_graph.clear_history()
        assert abc_graph.history() == []
        abc_graph.remove_vertex("a")
        assert len(abc_graph.history()) == 1

    def test_history_is_a_copy(self, abc_graph):
        abc_graph.history().clear()
        assert len(abc_graph.history()) == 6

    def test_as_df(self, abc_graph):
        df = abc_graph.history(as_df=True)
        assert isinstance(df, pl.DataFrame)
        assert df.columns == ["version", "ts_utc", "mono_ns", "op", "args", "result"]
        assert df.height == 6
        assert df["op"].to_list()[-1] == "add_edge"
        assert json.loads(df["args"][0]) == {"name": "a"}
        assert json.loads(df["args"][3]) == {"source": "a", "target": "b", "weight": 1}
        assert json.loads(df["result"][3]) == [0, 1, 1]

    def test_export_csv(self, abc_graph, tmp_path):
        p = tmp_path / "history.csv"
        assert abc_graph.export_history(p) == 6
        back = pl.read_csv(p)
        assert back.height == 6
        assert back["op"].to_list()[0] == "add_vertex"

    def test_export_ndjson(self, abc_graph, tmp_path):
        p = tmp_path / "history.ndjson"
        assert abc_graph.export_history(str(p)) == 6
        assert pl.read_ndjson(p)["version"].to_list() == [1, 2, 3, 4, 5, 6]

    def test_export_empty(self, tmp_path):
        g = Graph()
        p = tmp_path / "empty.csv"
        assert g.export_history(p) == 0
        assert not p.exists()


class TestFrames:
    def test_edges_frame(self, abc_graph):
        df = abc_graph.edges_frame()
        assert df.columns == ["source", "target", "weight", "source_slot", "target_slot"]
        assert df["source"].to_list() == ["a", "a", "b"]
        assert df["target"].to_list() == ["b", "c", "c"]
        assert df["weight"].to_list() == [1, 2, 3]
        assert df["source_slot"].to_list() == [0, 0, 1]

    def test_empty_edges_frame(self):
        df = Graph().edges_frame()
        assert df.height == 0
        assert df.schema["weight"] == pl.Int64

    def test_vertices_frame(self, abc_graph):
        abc_graph.mark("b", Graph.MARK03)
        abc_graph.remove_vertex("a")
        df = abc_graph.vertices_frame()
        assert df["slot"].to_list() == [1, 2]
        assert df["name"].to_list() == ["b", "c"]
        assert df["out_degree"].to_list() == [1, 0]
        assert df["marks"].to_list() == [4, 0]


class TestAdjacencyMatrix:
    def test_values(self, abc_graph):
        A = abc_graph.adjacency_matrix()
        assert sp.issparse(A)
        assert A.shape == (16, 16)
        dense = A.toarray()
        assert dense[0, 1] == 1 and dense[0, 2] == 2 and dense[1, 2] == 3
        assert np.count_nonzero(dense) == 3

    def test_cached_per_version(self, abc_graph):
        g = abc_graph
        assert g.cache.info() == {"adjacency": {"cached": False}}
        A = g.adjacency_matrix()
        assert g.cache.has_adjacency()
        assert g.adjacency_matrix() is A
        assert g.cache.info()["adjacency"]["nnz"] == 3

        g.add_edge("c", "a", 7)
        assert not g.cache.has_adjacency()
        B = g.adjacency_matrix()
        assert B is not A
        assert B.toarray()[2, 0] == 7

    def test_marks_keep_cache(self, abc_graph):
        A = abc_graph.adjacency_matrix()
        abc_graph.mark("a")
        assert abc_graph.adjacency_matrix() is A

    def test_grows_with_capacity(self):
        g = Graph(initial_capacity=2)
        for name in "abc":
            g.add_vertex(name)
        g.add_edge("c", "a", 5)
        A = g.adjacency_matrix()
        assert A.shape == (4, 4)
        assert A.toarray()[2, 0] == 5

    def test_invalidate(self, abc_graph):
        A = abc_graph.adjacency_matrix()
        abc_graph.cache.invalidate()
        assert not abc_graph.cache.has_adjacency()
        assert abc_graph.adjacency_matrix() is not A


@pytest.mark.parametrize("history", [True, False])
def test_history_flag_does_not_change_behaviour(history):
    g = Graph(history=history)
    g.add_vertex("a")
    g.add_vertex("b")
    e = g.add_edge("a", "b", 2)
    assert e.weight == 2
    assert g.remove_edge("a", "b") == 1
