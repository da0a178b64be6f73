from .structure import EdgeType
from .edge import Edge
from .errors import *
from .graph import (
    INITIAL_CAPACITY,
    MARK,
    MARK01,
    MARK02,
    MARK03,
    MARK04,
    MARK05,
    MARK06,
    MARK07,
    MARKS,
    WEIGHT_MAX,
    WEIGHT_MIN,
    Graph,
    UndirectedGraph,
)

__all__ = [
    "EdgeType",
    "Edge",
    "Graph",
    "UndirectedGraph",
    "INITIAL_CAPACITY",
    "MARK",
    "MARK01",
    "MARK02",
    "MARK03",
    "MARK04",
    "MARK05",
    "MARK06",
    "MARK07",
    "MARKS",
    "WEIGHT_MIN",
    "WEIGHT_MAX",
    "GraphError",
    "InvalidVertexError",
    "SelfLoopError",
    "DuplicateNameError",
    "ConcurrentModificationError",
    "NoSuchElementError",
    "MalformedLineError",
]
