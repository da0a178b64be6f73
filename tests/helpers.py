from collections import deque


def edge_set(graph):
    """Edges as ``(from_name, to_name, weight)`` triples, ignoring slot numbers."""
    return {
        (graph.vertex_name(e.source), graph.vertex_name(e.target), e.weight)
        for e in graph.edges()
    }


def hop_distance(graph, start, finish):
    """Plain BFS hop count over slots, or None if unreachable."""
    s, f = graph.vertex_number(start), graph.vertex_number(finish)
    dist = {s: 0}
    queue = deque([s])
    while queue:
        v = queue.popleft()
        if v == f:
            return dist[v]
        for e in graph.edges_from(v):
            if e.target not in dist:
                dist[e.target] = dist[v] + 1
                queue.append(e.target)
    return None


def assert_is_path(path, start, finish):
    assert path, "expected a non-empty path"
    assert path[0].source == start
    assert path[-1].target == finish
    for prev, nxt in zip(path, path[1:]):
        assert prev.target == nxt.source
