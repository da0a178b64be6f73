from .edgelist import *

__all__ = ["LoadReport", "read_edges", "edge_triples", "write", "save", "load", "dump", "dump_with_names"]
