"""
Plain-text edge lists: one ``FROM TO WEIGHT`` edge per line.

``FROM`` and ``TO`` are vertex names (created on demand when loading) and
``WEIGHT`` is a base-10 integer in the 32-bit signed range. Tokens are separated by whitespace.

Public entry points:
- read_edges(graph, source, strict=False) -> LoadReport
- write(graph, stream), save(graph, path)
- load(path, undirected=False, **graph_options) -> Graph
- dump(graph, stream=None), dump_with_names(graph, stream=None)

Lines that do not have exactly three tokens, whose weight is not an integer
(or is out of range), or that describe a self-loop are skipped. Skipped lines are listed in the
returned :class:`LoadReport` and a warning is issued; pass ``strict=True`` to
raise :class:`~adjgraph.core.errors.MalformedLineError` on the first one
instead (edges read before it stay in the graph).
"""
from __future__ import annotations

import logging
import os
import sys
import warnings
from contextlib import contextmanager
from typing import List, Tuple

from ..core.errors import MalformedLineError
from ..core.graph import WEIGHT_MAX, WEIGHT_MIN, Graph, UndirectedGraph

logger = logging.getLogger(__name__)


class LoadReport:
    """Outcome of :func:`read_edges`.

    Attributes
    ----------
    edges_loaded : int
        Lines turned into an ``add_edge`` call (replacements included).
    vertices_created : int
        Vertices added because a name was seen for the first time.
    skipped : list[tuple[int, str, str]]
        ``(line_no, content, reason)`` for each line that was not loaded.
    """

    def __init__(self):
        self.edges_loaded = 0
        self.vertices_created = 0
        self.skipped: List[Tuple[int, str, str]] = []

    @property
    def ok(self) -> bool:
        """True if no line was skipped."""
        return not self.skipped

    def __repr__(self):
        return (
            f"LoadReport(edges_loaded={self.edges_loaded}, "
            f"vertices_created={self.vertices_created}, skipped={len(self.skipped)})"
        )


@contextmanager
def _lines(source):
    if isinstance(source, (str, os.PathLike)):
        with open(source, "r", encoding="utf-8") as f:
            yield f
    else:
        yield source


def read_edges(graph, source, *, strict: bool = False) -> LoadReport:
    """Add the edges described in ``source`` to ``graph``.

    Parameters
    ----------
    graph : Graph
        Target graph. Unknown vertex names are added to it.
    source : str | os.PathLike | Iterable[str]
        Path to a text file, or any iterable of lines (e.g. an open file).
    strict : bool
        Raise on the first malformed line instead of skipping it.

    Returns
    -------
    LoadReport

    Raises
    ------
    MalformedLineError
        Only when ``strict`` is True.
    """
    return _read_edges(graph, source, strict, stacklevel=3)


def _read_edges(graph, source, strict, stacklevel):
    # stacklevel counts from here to the caller of the public entry point
    report = LoadReport()

    def _bad(line_no, content, reason):
        if strict:
            raise MalformedLineError(line_no, content, reason)
        report.skipped.append((line_no, content, reason))

    with _lines(source) as lines:
        for line_no, raw in enumerate(lines, start=1):
            content = raw.rstrip("\n\r")
            toks = content.split()
            if not toks:
                continue
            if len(toks) != 3:
                _bad(line_no, content, "expected 'FROM TO WEIGHT'")
                continue
            src, dst, w = toks
            try:
                weight = int(w, 10)
            except ValueError:
                _bad(line_no, content, f"weight {w!r} is not an integer")
                continue
            if not WEIGHT_MIN <= weight <= WEIGHT_MAX:
                _bad(line_no, content, f"weight {w} is out of range")
                continue
            if src == dst:
                _bad(line_no, content, "self-loop")
                continue

            for name in (src, dst):
                if name not in graph:
                    graph.add_vertex(name)
                    report.vertices_created += 1
            graph.add_edge(src, dst, weight)
            report.edges_loaded += 1

    if report.skipped:
        warnings.warn(
            f"Skipped {len(report.skipped)} malformed line(s); "
            f"first at line {report.skipped[0][0]}: {report.skipped[0][2]}",
            stacklevel=stacklevel,
        )
    logger.debug(f"Loaded edge list: {report!r}")
    return report


def edge_triples(graph) -> List[Tuple[str, str, int]]:
    """``(from_name, to_name, weight)`` for every edge, in write order."""
    return [
        (graph.vertex_name(e.source), graph.vertex_name(e.target), e.weight)
        for e in graph.edges()
    ]


def write(graph, stream):
    """Write one ``NAME_FROM NAME_TO WEIGHT`` line per edge.

    Vertices are visited in ascending slot order and edges in list order,
    so the output can be fed back to :func:`read_edges`.
    """
    for src, dst, weight in edge_triples(graph):
        stream.write(f"{src} {dst} {weight}\n")


def save(graph, path):
    """Write ``graph`` to the file at ``path`` (see :func:`write`)."""
    with open(path, "w", encoding="utf-8") as f:
        write(graph, f)


def load(path, *, undirected: bool = False, strict: bool = False, **graph_options):
    """Build a new graph from an edge file.

    Parameters
    ----------
    path : str | os.PathLike | Iterable[str]
    undirected : bool
        Build an :class:`~adjgraph.core.graph.UndirectedGraph`.
    strict : bool
        See :func:`read_edges`.
    **graph_options
        Passed to the graph constructor (e.g. ``initial_capacity``).

    Returns
    -------
    Graph

    Notes
    -----
    The graph keeps a mutation log by default, one event per created vertex
    and loaded edge. Pass ``history=False`` when loading large files.
    """
    cls = UndirectedGraph if undirected else Graph
    graph = cls(**graph_options)
    _read_edges(graph, path, strict, stacklevel=3)
    return graph


def dump(graph, stream=None):
    """Print the vertex/edge counts and each vertex's edges by slot number."""
    pen = stream if stream is not None else sys.stdout
    pen.write("A Graph\n")
    pen.write(f"  with {graph.num_vertices()} vertices\n")
    pen.write(f"  and {graph.num_edges()} edges\n")
    for vertex in graph.vertices():
        edges = "".join(f"{e!r} " for e in graph.edges_from(vertex))
        pen.write(f"{vertex}: {edges}\n")
    pen.write("\n")


def dump_with_names(graph, stream=None):
    """Print the vertex names, then each edge as ``A --W-> B``."""
    pen = stream if stream is not None else sys.stdout
    pen.write("Vertices: \n")
    pen.write(" " + "".join(f" {name}" for name in graph.vertex_names()) + "\n")
    pen.write("Edges: \n")
    for src, dst, weight in edge_triples(graph):
        pen.write(f"  {src} --{weight}-> {dst}\n")
    pen.write("\n")


__all__ = [
    "LoadReport",
    "read_edges",
    "edge_triples",
    "write",
    "save",
    "load",
    "dump",
    "dump_with_names",
]
