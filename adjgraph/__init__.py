# adjgraph/__init__.py
"""adjgraph: single import, full API."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "adjgraph.adapters",
    "io": "adjgraph.io",
    "core": "adjgraph.core",
    "edgelist": "adjgraph.io.edgelist",
    "networkx": "adjgraph.adapters.networkx",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Graph": ("adjgraph.core.graph", "Graph"),
    "UndirectedGraph": ("adjgraph.core.graph", "UndirectedGraph"),
    "Edge": ("adjgraph.core.edge", "Edge"),
    "EdgeType": ("adjgraph.core.structure", "EdgeType"),
    "INITIAL_CAPACITY": ("adjgraph.core.graph", "INITIAL_CAPACITY"),
    "MARK": ("adjgraph.core.graph", "MARK"),
    "MARKS": ("adjgraph.core.graph", "MARKS"),
    "WEIGHT_MIN": ("adjgraph.core.graph", "WEIGHT_MIN"),
    "WEIGHT_MAX": ("adjgraph.core.graph", "WEIGHT_MAX"),

    # Errors
    "GraphError": ("adjgraph.core.errors", "GraphError"),
    "InvalidVertexError": ("adjgraph.core.errors", "InvalidVertexError"),
    "SelfLoopError": ("adjgraph.core.errors", "SelfLoopError"),
    "DuplicateNameError": ("adjgraph.core.errors", "DuplicateNameError"),
    "ConcurrentModificationError": ("adjgraph.core.errors", "ConcurrentModificationError"),
    "NoSuchElementError": ("adjgraph.core.errors", "NoSuchElementError"),
    "MalformedLineError": ("adjgraph.core.errors", "MalformedLineError"),

    # Edge-list text I/O
    "read_edges": ("adjgraph.io.edgelist", "read_edges"),
    "write": ("adjgraph.io.edgelist", "write"),
    "save": ("adjgraph.io.edgelist", "save"),
    "load": ("adjgraph.io.edgelist", "load"),
    "LoadReport": ("adjgraph.io.edgelist", "LoadReport"),

    # NetworkX adapter (optional dependency)
    "to_nx": ("adjgraph.adapters.networkx", "to_nx"),
    "from_nx": ("adjgraph.adapters.networkx", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("adjgraph")
except PackageNotFoundError:
    __version__ = "0.0.0"
