import inspect
import json
import logging
import operator
import time
from collections import deque
from datetime import UTC, datetime
from functools import wraps

import numpy as np
import polars as pl
import scipy.sparse as sp

from ._state import _State
from .edge import Edge
from .errors import DuplicateNameError, InvalidVertexError, SelfLoopError
from .iterators import EdgeIterator, EdgesFromIterator, VertexIterator
from .structure import EdgeType, policy_for

logger = logging.getLogger(__name__)

# The default initial capacity (# of vertex slots) of a graph.
INITIAL_CAPACITY = 16

# Vertex marks. Each is one bit of the per-vertex uint8 mark field.
MARK01 = 1
MARK02 = 2
MARK03 = 4
MARK04 = 8
MARK05 = 16
MARK06 = 32
MARK07 = 64
MARK = MARK01
MARKS = (MARK01, MARK02, MARK03, MARK04, MARK05, MARK06, MARK07)

_MARK_MASK = 0xFF

# Edge weights are 32-bit signed integers.
WEIGHT_MIN = -(2**31)
WEIGHT_MAX = 2**31 - 1


def _check_weight(weight) -> int:
    weight = operator.index(weight)
    if not WEIGHT_MIN <= weight <= WEIGHT_MAX:
        raise ValueError(f"weight must be in {WEIGHT_MIN}..{WEIGHT_MAX}, got {weight}")
    return weight


class CacheManager:
    """Cache manager for materialized matrix views."""

    def __init__(self, graph):
        self._G = graph
        self._adjacency = None
        self._adjacency_version = None

    @property
    def adjacency(self):
        """Weighted adjacency matrix in CSR (Compressed Sparse Row) format.

        Shape is ``(capacity, capacity)``; row/column ``i`` is slot ``i``.
        Rebuilt on access only when the graph version changed.
        """
        version = self._G._state.version
        if self._adjacency is None or self._adjacency_version != version:
            self._adjacency = self._G._build_adjacency()
            self._adjacency_version = version
        return self._adjacency

    def has_adjacency(self) -> bool:
        """True if adjacency cache exists and matches current graph version."""
        return (
            self._adjacency is not None
            and self._adjacency_version == self._G._state.version
        )

    def invalidate(self):
        self._adjacency = None
        self._adjacency_version = None

    def info(self):
        """Get cache status."""
        if self._adjacency is None:
            return {"adjacency": {"cached": False}}
        m = self._adjacency
        return {
            "adjacency": {
                "cached": True,
                "version": self._adjacency_version,
                "nnz": m.nnz,
                "shape": m.shape,
            }
        }


class Graph:
    """Weighted graph on adjacency lists with reusable integer vertex slots.

    Vertices are slots in a set of parallel arrays (names, outgoing edge
    lists, marks). A slot is occupied while it carries a name; removed
    vertices return their slot to a FIFO queue of free slots, and the arrays
    double when that queue runs dry. Occupied slot numbers never change.

    Every vertex argument may be given as a slot (``int``) or as a name
    (``str``). Unknown names behave like an invalid slot.

    Parameters
    ----------
    initial_capacity : int, optional
        Number of slots allocated up front. Defaults to ``INITIAL_CAPACITY``.
    edge_type : EdgeType | str | bool, optional
        ``EdgeType.DIRECTED`` (default) stores each edge as given;
        ``EdgeType.UNDIRECTED`` mirrors every edge mutation on both endpoints.
    history : bool, optional
        Record an in-memory log of mutating calls (see :meth:`history`).

    Notes
    -----
    - At most one edge exists per ``(source, target)`` pair; adding it again
      replaces the weight in place.
    - Self-loops are rejected.
    - Iterators returned by :meth:`vertices`, :meth:`edges` and
      :meth:`edges_from` fail fast on any structural change.
    - With ``history=True`` every mutating call appends one event to an
      in-memory log that is never trimmed; see :meth:`clear_history`.

    See Also
    --------
    add_vertex, add_edge, path, edges_from

    """

    MARK = MARK
    MARK01 = MARK01
    MARK02 = MARK02
    MARK03 = MARK03
    MARK04 = MARK04
    MARK05 = MARK05
    MARK06 = MARK06
    MARK07 = MARK07

    # Construction

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY, edge_type=EdgeType.DIRECTED, history: bool = True):
        """Initialize an empty graph.

        Parameters
        ----------
        initial_capacity : int, optional
            Number of vertex slots to allocate. Must be positive.
        edge_type : EdgeType | str | bool, optional
            Edge mirroring policy.
        history : bool, optional
            Enable the mutation log.

        Raises
        ------
        ValueError
            If ``initial_capacity`` is not a positive integer or ``edge_type``
            is unknown.

        """
        try:
            initial_capacity = operator.index(initial_capacity)
        except TypeError:
            raise ValueError(f"initial_capacity must be an int, got {initial_capacity!r}") from None
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {initial_capacity}")

        self._policy = policy_for(edge_type)

        # Slot arena (parallel arrays indexed by slot)
        self._names = [None] * initial_capacity  # slot -> name (None = free)
        self._adjacency = [[] for _ in range(initial_capacity)]  # slot -> [Edge]
        self._marks = np.zeros(initial_capacity, dtype=np.uint8)
        self._unused = deque(range(initial_capacity))  # free slots, FIFO

        # Name -> slot
        self._vertex_numbers = {}

        self._num_vertices = 0
        self._num_edges = 0

        # Structural version (fail-fast iterators, caches)
        self._state = _State()
        self.cache = CacheManager(self)

        # History and Timeline
        self._history_enabled = bool(history)
        self._history = []  # list[dict]
        self._history_clock0 = time.perf_counter_ns()
        self._install_history_hooks()  # wrap mutating methods

    @classmethod
    def from_file(cls, path, **kwargs):
        """Create a graph and load the ``FROM TO WEIGHT`` edges in ``path``.

        Keyword arguments go to the constructor.
        """
        from ..io.edgelist import _read_edges

        graph = cls(**kwargs)
        _read_edges(graph, path, False, stacklevel=3)
        return graph

    # Vertex names/numbers

    def vertex_name(self, vertex):
        """Name of a vertex, or ``None`` if there is no such vertex."""
        v = self._slot(vertex)
        if not self.is_valid(v):
            return None
        return self._names[v]

    def vertex_number(self, vertex) -> int:
        """Slot of a vertex, or ``-1`` if there is no such vertex."""
        v = self._slot(vertex)
        return v if self.is_valid(v) else -1

    def slot_for(self, name):
        """Slot bound to ``name``, or ``None``."""
        return self._vertex_numbers.get(name)

    def name_for(self, slot):
        """Name bound to ``slot``, or ``None``."""
        return self.vertex_name(slot)

    def is_valid(self, vertex) -> bool:
        """True iff ``vertex`` is in range and currently occupied."""
        v = self._slot(vertex)
        return 0 <= v < len(self._names) and self._names[v] is not None

    def has_vertex(self, vertex) -> bool:
        return self.is_valid(vertex)

    # Basic queries

    def num_vertices(self) -> int:
        return self._num_vertices

    def num_edges(self) -> int:
        """Number of stored directed edges.

        An undirected graph stores two per undirected edge.
        """
        return self._num_edges

    @property
    def capacity(self) -> int:
        """Number of allocated slots (occupied + free)."""
        return len(self._names)

    @property
    def version(self) -> int:
        return self._state.version

    @property
    def edge_type(self) -> EdgeType:
        return self._policy.edge_type

    @property
    def directed(self) -> bool:
        return self._policy.edge_type is EdgeType.DIRECTED

    def get_edge(self, source, target):
        """The edge ``source -> target``, or ``None``."""
        u, v = self._slot(source), self._slot(target)
        if not self.is_valid(u):
            return None
        for e in self._adjacency[u]:
            if e.target == v:
                return e
        return None

    def has_edge(self, source, target) -> bool:
        return self.get_edge(source, target) is not None

    def out_degree(self, vertex) -> int:
        v = self._slot(vertex)
        return len(self._adjacency[v]) if self.is_valid(v) else 0

    def neighbors(self, vertex):
        """Targets of the outgoing edges of ``vertex``, in list order."""
        return [e.target for e in self.edges_from(vertex)]

    def vertex_names(self):
        """Names of occupied slots in slot order."""
        return [self._names[v] for v in self.vertices()]

    def __len__(self):
        return self._num_vertices

    def __contains__(self, vertex):
        if isinstance(vertex, str):
            return vertex in self._vertex_numbers
        try:
            return self.is_valid(vertex)
        except TypeError:
            return False

    def __iter__(self):
        return self.vertices()

    def __repr__(self):
        return (
            f"{type(self).__name__}(vertices={self._num_vertices}, edges={self._num_edges}, "
            f"capacity={self.capacity}, edge_type={self.edge_type.value!r})"
        )

    # Iteration

    def vertices(self):
        """Fail-fast iterator over occupied slots in ascending order."""
        return VertexIterator(self)

    def edges(self):
        """Fail-fast iterator over all edges.

        Vertices are visited in ascending slot order and, within a vertex,
        edges in list order.
        """
        return EdgeIterator(self)

    all_edges = edges

    def edges_from(self, vertex):
        """Fail-fast iterator over the outgoing edges of ``vertex``.

        Edges come in insertion order; a replaced edge keeps its position.
        An invalid vertex yields an empty (still fail-fast) iterator.
        """
        return EdgesFromIterator(self, self._slot(vertex))

    # Build graph

    def add_vertex(self, name=None) -> int:
        """Add a vertex.

        Parameters
        ----------
        name : str, optional
            Vertex name. If omitted, a fresh name is generated as in
            :meth:`add_anonymous_vertex`.

        Returns
        -------
        int
            The slot of the new vertex. Free slots are reused before the
            graph grows.

        Raises
        ------
        DuplicateNameError
            If ``name`` is already in use.
        ValueError
            If ``name`` is empty or contains whitespace.
        TypeError
            If ``name`` is not a string.

        """
        if name is None:
            return self._add_anonymous()
        if not isinstance(name, str):
            raise TypeError(f"Vertex name must be a str, got {type(name).__name__}")
        if not name:
            raise ValueError("Vertex name must be non-empty")
        if name.split() != [name]:
            # names are whitespace-separated tokens in edge files
            raise ValueError(f"Vertex name must not contain whitespace, got {name!r}")
        if name in self._vertex_numbers:
            raise DuplicateNameError(name, self._vertex_numbers[name])
        return self._bind(name, self._new_slot())

    def add_anonymous_vertex(self) -> int:
        """Add a vertex with a generated name.

        The name is ``"v<slot>"``, with extra ``"v"`` prefixes until it is
        not already in use.
        """
        return self._add_anonymous()

    def add_edge(self, source, target, weight=None):
        """Add an edge, replacing any existing edge between the same ends.

        Parameters
        ----------
        source, target : int | str
            Endpoints (slot or name).
        weight : int, optional
            Edge weight; ``None`` stores an unweighted edge that reads as 0.
            Must lie in ``WEIGHT_MIN..WEIGHT_MAX`` (32-bit signed).

        Returns
        -------
        Edge
            The stored ``source -> target`` edge.

        Raises
        ------
        SelfLoopError
            If both ends denote the same vertex (checked first).
        InvalidVertexError
            If either end is not an occupied slot. Undirected graphs create
            missing named endpoints instead.
        ValueError
            If ``weight`` is out of range.

        Notes
        -----
        Replacing an edge keeps its list position and the edge count, but still
        bumps the version.

        """
        if self._same_vertex(source, target):
            raise SelfLoopError(source)
        if weight is not None:
            weight = _check_weight(weight)
        if self._policy.create_missing:
            # slots are never created, so check them before adding any name
            for end in (source, target):
                if not isinstance(end, str):
                    self._require(end)
            source = self._ensure_named(source)
            target = self._ensure_named(target)
        u = self._require(source)
        v = self._require(target)
        for a, b in self._policy.pairs(u, v):
            self._insert_edge(a, b, weight)
        return self.get_edge(u, v)

    # Remove / mutate down

    def remove_edge(self, source, target) -> int:
        """Remove the edge ``source -> target`` (both directions if undirected).

        Does nothing if the edge or the source vertex does not exist.

        Returns
        -------
        int
            Number of directed edges removed.

        """
        u, v = self._slot(source), self._slot(target)
        return sum(self._delete_edge(a, b) for a, b in self._policy.pairs(u, v))

    def remove_vertex(self, vertex):
        """Remove a vertex and every edge into or out of it.

        Does nothing if the vertex does not exist. The slot goes back to the
        free queue and may later be reused for a different name.
        """
        v = self._slot(vertex)
        if not self.is_valid(v):
            return

        self._state.bump()
        self._num_vertices -= 1
        self._num_edges -= len(self._adjacency[v])

        # Clear out the entries associated with the vertex
        self._adjacency[v].clear()
        name = self._names[v]
        self._names[v] = None
        del self._vertex_numbers[name]

        # Clear out edges to that vertex
        incoming = 0
        for edges in self._adjacency:
            kept = [e for e in edges if e.target != v]
            if len(kept) != len(edges):
                removed = len(edges) - len(kept)
                edges[:] = kept
                self._num_edges -= removed
                incoming += removed
                self._state.bump()

        self._unused.append(v)
        logger.debug(f"Removed vertex {name!r} (slot {v}) with {incoming} incoming edges")

    # Marking vertices

    def mark(self, vertex, mark=MARK):
        """Set one mark bit (default ``MARK``) on a vertex."""
        v = self._require(vertex)
        mark = self._check_mark(mark)
        self._marks[v] = int(self._marks[v]) | mark

    def unmark(self, vertex, mark=None):
        """Clear one mark bit, or every bit when ``mark`` is None."""
        v = self._require(vertex)
        if mark is None:
            self._marks[v] = 0
            return
        mark = self._check_mark(mark)
        self._marks[v] = (int(self._marks[v]) | mark) - mark

    def is_marked(self, vertex, mark=None) -> bool:
        """True if ``vertex`` carries ``mark`` (any mark when None)."""
        v = self._require(vertex)
        bits = int(self._marks[v])
        if mark is None:
            return bits != 0
        return (bits & self._check_mark(mark)) != 0

    def marks(self, vertex) -> int:
        """Raw mark bits of a vertex."""
        return int(self._marks[self._require(vertex)])

    def clear_marks(self):
        """Remove all of the marks."""
        self._marks = np.zeros_like(self._marks)

    # Traversal

    def path(self, start, finish):
        """Find a path with the fewest edges from ``start`` to ``finish``.

        Breadth-first search; weights are ignored. Among equally short paths,
        the one found first in edge-list order wins.

        Returns
        -------
        list[Edge] | None
            Edges in start-to-finish order, ``[]`` when ``start`` and
            ``finish`` are the same vertex, or ``None`` if either end is
            invalid or ``finish`` is unreachable.

        """
        s, f = self._slot(start), self._slot(finish)
        if not (self.is_valid(s) and self.is_valid(f)):
            return None
        if s == f:
            return []

        # incoming[v] is the edge through which v was first reached
        incoming = {}
        remaining = deque([s])
        while f not in incoming and remaining:
            v = remaining.popleft()
            for e in self.edges_from(v):
                to = e.target
                if to != s and to not in incoming:
                    incoming[to] = e
                    remaining.append(to)

        if f not in incoming:
            return None
        path = deque()
        current = f
        while current != s:
            e = incoming[current]
            path.appendleft(e)
            current = e.source
        return list(path)

    def path_vertices(self, start, finish):
        """Slots along :meth:`path`, including both ends; ``None`` if no path."""
        edges = self.path(start, finish)
        if edges is None:
            return None
        if not edges:
            return [self._slot(start)]
        return [edges[0].source] + [e.target for e in edges]

    def reachable(self, start):
        """Set of slots reachable from ``start`` (excluding it unless on a cycle)."""
        s = self._slot(start)
        if not self.is_valid(s):
            return set()
        seen = set()
        remaining = deque([s])
        while remaining:
            v = remaining.popleft()
            for e in self.edges_from(v):
                if e.target not in seen:
                    seen.add(e.target)
                    remaining.append(e.target)
        return seen

    # I/O

    def read_edges(self, source, *, strict=False):
        """Load ``FROM TO WEIGHT`` lines; see :func:`adjgraph.io.edgelist.read_edges`."""
        from ..io.edgelist import _read_edges

        return _read_edges(self, source, strict, stacklevel=3)

    def write(self, stream):
        """Write the graph in the form expected by :meth:`read_edges`."""
        from ..io.edgelist import write

        write(self, stream)

    def save(self, path):
        """Save the graph to ``path`` in the form expected by :meth:`read_edges`."""
        from ..io.edgelist import save

        save(self, path)

    def dump(self, stream=None):
        from ..io.edgelist import dump

        dump(self, stream)

    def dump_with_names(self, stream=None):
        from ..io.edgelist import dump_with_names

        dump_with_names(self, stream)

    # Materialized views

    def edges_frame(self) -> pl.DataFrame:
        """All edges as a Polars DF (DataFrame).

        Columns: ``source``, ``target`` (names), ``weight``, ``source_slot``,
        ``target_slot``; rows in :meth:`edges` order.
        """
        rows = [
            {
                "source": self._names[e.source],
                "target": self._names[e.target],
                "weight": e.weight,
                "source_slot": e.source,
                "target_slot": e.target,
            }
            for e in self.edges()
        ]
        schema = {
            "source": pl.Utf8,
            "target": pl.Utf8,
            "weight": pl.Int64,
            "source_slot": pl.Int64,
            "target_slot": pl.Int64,
        }
        return pl.DataFrame(rows, schema=schema)

    def vertices_frame(self) -> pl.DataFrame:
        """Occupied vertices as a Polars DF with ``slot``, ``name``,
        ``out_degree`` and ``marks`` columns.
        """
        rows = [
            {
                "slot": v,
                "name": self._names[v],
                "out_degree": len(self._adjacency[v]),
                "marks": int(self._marks[v]),
            }
            for v in self.vertices()
        ]
        schema = {"slot": pl.Int64, "name": pl.Utf8, "out_degree": pl.Int64, "marks": pl.Int64}
        return pl.DataFrame(rows, schema=schema)

    def adjacency_matrix(self):
        """Weighted CSR adjacency matrix (cached per version)."""
        return self.cache.adjacency

    def _build_adjacency(self):
        n = self.capacity
        rows = np.fromiter((e.source for e in self.edges()), dtype=np.int64, count=self._num_edges)
        cols = np.fromiter((e.target for e in self.edges()), dtype=np.int64, count=self._num_edges)
        data = np.fromiter((e.weight for e in self.edges()), dtype=np.int64, count=self._num_edges)
        return sp.csr_matrix((data, (rows, cols)), shape=(n, n), dtype=np.int64)

    # History and Timeline

    def _utcnow_iso(self) -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.
        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        if isinstance(x, Edge):
            return list(x.as_tuple())
        if isinstance(x, (set, frozenset)):
            return sorted(self._jsonify(v) for v in x)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        if isinstance(x, (np.generic,)):
            return x.item()
        t = type(x).__name__
        return f"<<{t}>>"

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        evt = {
            "version": self._state.version,
            "ts_utc": self._utcnow_iso(),  # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                result = fn(*args, **kwargs)
                payload = {}
                for k, v in bound.arguments.items():
                    if k != "self":
                        payload[k] = v
                payload["result"] = result
                self._log_event(op, **payload)
                return result

            return wrapper

        return deco

    def _install_history_hooks(self):
        # Mutating methods to wrap. Add here if you add new mutators.
        to_wrap = [
            "add_vertex",
            "add_anonymous_vertex",
            "add_edge",
            "remove_edge",
            "remove_vertex",
        ]
        for name in to_wrap:
            fn = getattr(self, name)
            # Avoid double-wrapping
            if getattr(fn, "__wrapped__", None) is None:
                setattr(self, name, self._log_mutation(name)(fn))

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF; otherwise return a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
            Each event includes 'version' (graph version after the call),
            'ts_utc', 'mono_ns' (monotonic nanoseconds since the graph was
            built), 'op', the call arguments and 'result'.

        """
        return self._history_frame() if as_df else list(self._history)

    def export_history(self, path: str) -> int:
        """Write the mutation history to disk.

        Supported extensions: '.parquet', '.ndjson' / '.jsonl', '.csv'.
        Unknown extensions default to Parquet by appending '.parquet'.

        Returns
        -------
        int
            Number of events written (0 if the history is empty).

        """
        if not self._history:
            return 0
        df = self._history_frame()
        p = str(path).lower()
        if p.endswith(".parquet"):
            df.write_parquet(path)
        elif p.endswith(".ndjson") or p.endswith(".jsonl"):
            df.write_ndjson(path)
        elif p.endswith(".csv"):
            df.write_csv(path)
        else:
            df.write_parquet(str(path) + ".parquet")
        return len(df)

    def _history_frame(self) -> pl.DataFrame:
        # Call args differ per op and mix ints, names and edges, so they are
        # kept as JSON text rather than typed columns.
        fixed = ("version", "ts_utc", "mono_ns", "op", "result")
        rows = [
            {
                "version": evt["version"],
                "ts_utc": evt["ts_utc"],
                "mono_ns": evt["mono_ns"],
                "op": evt["op"],
                "args": json.dumps({k: v for k, v in evt.items() if k not in fixed}),
                "result": json.dumps(evt.get("result")),
            }
            for evt in self._history
        ]
        schema = {
            "version": pl.Int64,
            "ts_utc": pl.Utf8,
            "mono_ns": pl.Int64,
            "op": pl.Utf8,
            "args": pl.Utf8,
            "result": pl.Utf8,
        }
        return pl.DataFrame(rows, schema=schema)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log."""
        self._history.clear()

    # Internals

    def _slot(self, vertex) -> int:
        """Resolve a name or slot to a slot number (-1 for unknown names)."""
        if isinstance(vertex, str):
            return self._vertex_numbers.get(vertex, -1)
        if vertex is None:
            return -1
        return operator.index(vertex)

    def _require(self, vertex) -> int:
        v = self._slot(vertex)
        if not self.is_valid(v):
            raise InvalidVertexError(vertex)
        return v

    def _same_vertex(self, a, b) -> bool:
        if isinstance(a, str) and isinstance(b, str):
            return a == b
        u, v = self._slot(a), self._slot(b)
        if u == -1 and (isinstance(a, str) or isinstance(b, str)):
            # an unknown name is not the same vertex as anything else
            return False
        return u == v

    def _ensure_named(self, vertex):
        if isinstance(vertex, str) and vertex not in self._vertex_numbers:
            return self.add_vertex(vertex)
        return vertex

    def _check_mark(self, mark) -> int:
        mark = operator.index(mark)
        if not 0 < mark <= _MARK_MASK:
            raise ValueError(f"mark must be in 1..{_MARK_MASK}, got {mark}")
        return mark

    def _new_slot(self) -> int:
        if not self._unused:
            self._expand()
        return self._unused.popleft()

    def _expand(self):
        old_size = len(self._names)
        new_size = old_size * 2
        self._names.extend([None] * old_size)
        self._adjacency.extend([] for _ in range(old_size))
        marks = np.zeros(new_size, dtype=np.uint8)
        marks[:old_size] = self._marks
        self._marks = marks
        self._unused.extend(range(old_size, new_size))
        self.cache.invalidate()
        logger.debug(f"Expanded graph capacity from {old_size} to {new_size}")

    def _bind(self, name, v) -> int:
        self._state.bump()
        self._num_vertices += 1
        self._vertex_numbers[name] = v
        self._names[v] = name
        self._marks[v] = 0
        return v

    def _add_anonymous(self) -> int:
        v = self._new_slot()
        name = f"v{v}"
        while name in self._vertex_numbers:
            name = "v" + name
        return self._bind(name, v)

    def _insert_edge(self, u, v, weight) -> bool:
        """Insert or replace ``u -> v``. True if a new edge was appended."""
        self._state.bump()
        new_edge = Edge(u, v, weight)
        edges = self._adjacency[u]
        for i, e in enumerate(edges):
            if e.target == v:
                edges[i] = new_edge
                return False
        edges.append(new_edge)
        self._num_edges += 1
        return True

    def _delete_edge(self, u, v) -> int:
        if not self.is_valid(u):
            return 0
        edges = self._adjacency[u]
        kept = [e for e in edges if e.target != v]
        removed = len(edges) - len(kept)
        if removed:
            edges[:] = kept
            self._num_edges -= removed
            for _ in range(removed):
                self._state.bump()
        return removed


class UndirectedGraph(Graph):
    """Graph whose edge mutations are mirrored on both endpoints.

    ``add_edge(u, v, w)`` stores ``u -> v`` and ``v -> u`` with weight ``w``;
    ``remove_edge(u, v)`` removes both. Named endpoints that do not exist yet
    are created by ``add_edge``. There is no extra state: the mirroring comes
    from the ``EdgeType.UNDIRECTED`` policy.
    """

    def __init__(self, initial_capacity: int = INITIAL_CAPACITY, history: bool = True):
        super().__init__(initial_capacity, edge_type=EdgeType.UNDIRECTED, history=history)
