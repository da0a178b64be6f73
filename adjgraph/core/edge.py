class Edge:
    """A weighted edge between two vertex slots.

    Edges are values: once built they never change. Replacing the weight of an
    edge in a graph substitutes a new ``Edge`` at the same list position.

    Parameters
    ----------
    source : int
        Slot the edge leaves.
    target : int
        Slot the edge enters.
    weight : int | None, optional
        Edge weight. ``None`` marks an unweighted edge, which reads as 0.

    """

    __slots__ = ("_source", "_target", "_weight")

    def __init__(self, source: int, target: int, weight: int | None = None):
        object.__setattr__(self, "_source", int(source))
        object.__setattr__(self, "_target", int(target))
        object.__setattr__(self, "_weight", None if weight is None else int(weight))

    def __setattr__(self, name, value):
        raise AttributeError("Edge is immutable")

    def __delattr__(self, name):
        raise AttributeError("Edge is immutable")

    @property
    def source(self) -> int:
        return self._source

    @property
    def target(self) -> int:
        return self._target

    @property
    def weight(self) -> int:
        """Edge weight; 0 for an unweighted edge (and for weight 0)."""
        return 0 if self._weight is None else self._weight

    @property
    def weighted(self) -> bool:
        return self._weight is not None

    def reversed(self):
        """Same edge pointing the other way."""
        return Edge(self._target, self._source, self._weight)

    def as_tuple(self):
        return (self._source, self._target, self.weight)

    def __iter__(self):
        return iter(self.as_tuple())

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        if self._weight is None:
            return f"<{self._source},{self._target}>"
        return f"<{self._source},{self._target},{self._weight}>"
