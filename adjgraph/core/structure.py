from enum import Enum


class EdgeType(str, Enum):
    """Edge type (DIRECTED, UNDIRECTED).

    Attributes:
        DIRECTED: Each ``add_edge``/``remove_edge`` touches one direction
        UNDIRECTED: Each ``add_edge``/``remove_edge`` is mirrored on both endpoints
    """

    DIRECTED = "directed"
    UNDIRECTED = "undirected"


class EdgePolicy:
    """Decides which directed pairs an edge mutation writes.

    The graph engine stores directed edges only. A policy expands one
    requested pair into the pairs that must actually change.
    """

    edge_type = None
    create_missing = False  # create unknown named endpoints in add_edge

    def pairs(self, u, v):
        raise NotImplementedError


class DirectedPolicy(EdgePolicy):
    edge_type = EdgeType.DIRECTED

    def pairs(self, u, v):
        return ((u, v),)


class MirroredPolicy(EdgePolicy):
    edge_type = EdgeType.UNDIRECTED
    create_missing = True

    def pairs(self, u, v):
        return ((u, v), (v, u))


_POLICIES = {
    EdgeType.DIRECTED: DirectedPolicy(),
    EdgeType.UNDIRECTED: MirroredPolicy(),
}


def policy_for(edge_type) -> EdgePolicy:
    """Resolve an ``EdgeType`` (or its string value, or a bool meaning
    "directed") to a policy instance.
    """
    if isinstance(edge_type, EdgePolicy):
        return edge_type
    if isinstance(edge_type, bool):
        edge_type = EdgeType.DIRECTED if edge_type else EdgeType.UNDIRECTED
    try:
        return _POLICIES[EdgeType(edge_type)]
    except ValueError:
        raise ValueError(
            f"edge_type must be 'directed' or 'undirected', got {edge_type!r}"
        ) from None
