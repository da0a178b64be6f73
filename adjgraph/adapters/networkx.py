try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install adjgraph[networkx]"
    ) from e


def to_nx(graph):
    """
    Export a Graph to a NetworkX DiGraph.

    Nodes are vertex names carrying a ``slot`` attribute; every stored
    directed edge becomes a DiGraph edge with its ``weight``. An undirected
    graph therefore exports both directions of each edge.

    Parameters
    ----------
    graph : Graph

    Returns
    -------
    networkx.DiGraph
    """
    G = nx.DiGraph()
    for v in graph.vertices():
        G.add_node(graph.vertex_name(v), slot=v)
    for e in graph.edges():
        G.add_edge(graph.vertex_name(e.source), graph.vertex_name(e.target), weight=e.weight)
    return G


def from_nx(nxG, *, undirected=None, weight="weight", **graph_options):
    """
    Build a Graph from a NetworkX graph.

    Parameters
    ----------
    nxG : networkx.Graph | networkx.DiGraph
        Node labels are converted with ``str`` and must not contain
        whitespace. Edges whose ends have the same ``str`` label (self-loops
        included) are dropped.
    undirected : bool | None
        Build an UndirectedGraph. ``None`` follows ``nxG.is_directed()``.
    weight : str
        Edge attribute holding the integer weight; missing means unweighted.
    **graph_options
        Passed to the graph constructor.

    Returns
    -------
    Graph
    """
    from ..core.graph import Graph, UndirectedGraph

    if undirected is None:
        undirected = not nxG.is_directed()
    H = UndirectedGraph(**graph_options) if undirected else Graph(**graph_options)

    for node in nxG.nodes:
        name = str(node)
        if name not in H:
            H.add_vertex(name)
    for u, v, data in nxG.edges(data=True):
        su, sv = str(u), str(v)
        if su == sv:
            continue
        w = data.get(weight)
        H.add_edge(su, sv, None if w is None else int(w))
    return H


__all__ = ["to_nx", "from_nx"]
