import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from adjgraph.core.graph import Graph


@pytest.fixture
def abc_graph():
    """a -> b (1), a -> c (2), b -> c (3) on slots 0, 1, 2."""
    g = Graph()
    for name in ("a", "b", "c"):
        g.add_vertex(name)
    g.add_edge("a", "b", 1)
    g.add_edge("a", "c", 2)
    g.add_edge("b", "c", 3)
    return g


@pytest.fixture
def path_graph():
    """Seven vertices a..g with a few cycles; f is isolated."""
    g = Graph()
    for name in "abcdefg":
        g.add_vertex(name)
    for src, dst in [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e"),
                     ("e", "g"), ("e", "a"), ("c", "g"), ("g", "e")]:
        g.add_edge(src, dst, 0)
    return g


@pytest.fixture
def tmpdir_fixture(tmp_path):
    return pathlib.Path(tmp_path)
