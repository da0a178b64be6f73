"""Exceptions raised by adjgraph.

Every error derives from :class:`GraphError` and from the builtin exception
a caller would naturally catch for the same situation, so ``except KeyError``
around a vertex lookup keeps working.
"""


class GraphError(Exception):
    """Base class for graph errors."""


class InvalidVertexError(GraphError, KeyError):
    """A vertex reference is out of range or names a free slot."""

    def __init__(self, vertex, message=None):
        self.vertex = vertex
        super().__init__(message or f"Invalid vertex {vertex!r}")

    def __str__(self):
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class SelfLoopError(GraphError, ValueError):
    """An edge from a vertex to itself was requested."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"Cannot add an edge from vertex {vertex!r} to itself")


class DuplicateNameError(GraphError, ValueError):
    """A vertex name is already bound to an occupied slot."""

    def __init__(self, name, slot=None):
        self.name = name
        self.slot = slot
        super().__init__(f"Already have a vertex named {name!r}")


class ConcurrentModificationError(GraphError, RuntimeError):
    """The graph changed structurally while an iterator was live."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Graph modified during iteration (version {expected} -> {actual})"
        )


class NoSuchElementError(GraphError, StopIteration):
    """An exhausted iterator was advanced.

    Subclasses ``StopIteration`` so that ``for`` loops terminate normally.
    """


class MalformedLineError(GraphError, ValueError):
    """A line of an edge file does not have the form ``FROM TO WEIGHT``."""

    def __init__(self, line_no, content, reason="expected 'FROM TO WEIGHT'"):
        self.line_no = line_no
        self.content = content
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}: {content!r}")


__all__ = [
    "GraphError",
    "InvalidVertexError",
    "SelfLoopError",
    "DuplicateNameError",
    "ConcurrentModificationError",
    "NoSuchElementError",
    "MalformedLineError",
]
