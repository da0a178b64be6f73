import sys

import adjgraph as ag


def graph_experiment(pen=None):
    pen = sys.stdout if pen is None else pen
    # A small graph so that we can force it to expand.
    g = ag.Graph(initial_capacity=2)
    g.add_vertex("a")
    g.add_vertex("b")
    g.add_vertex("c")
    g.dump(pen)

    print("🏗️ Adding a few edges", file=pen)
    g.add_edge("a", "b", 1)
    g.add_edge("a", "c", 2)
    g.add_edge("b", "c", 3)
    g.add_edge("b", "a", 4)
    g.dump(pen)

    print("✂️ Removing b", file=pen)
    g.remove_vertex("b")
    g.dump(pen)

    print("➕ Adding d", file=pen)
    g.add_vertex("d")
    g.add_edge("a", "d", 5)
    g.add_edge("d", "a", 6)
    g.dump(pen)

    print("📈 Adding e (reuses b's slot) and f (expands the graph)", file=pen)
    g.add_vertex("e")
    g.add_edge("e", "a", 7)
    g.add_vertex("f")
    g.add_edge("c", "f", 8)
    g.add_edge("f", "c", 9)
    g.dump(pen)

    try:
        g.add_edge("c", "g", 0)
        print("Surprisingly, added an edge from c to nonexistent g", file=pen)
    except ag.InvalidVertexError:
        print("Correctly failed to add an edge from c to g.", file=pen)

    print("🔁 Adding/replacing edges from slot 0", file=pen)
    for i in range(1, 5):
        if g.is_valid(i):
            g.add_edge(0, i, i * 10)
    g.dump(pen)

    print("✂️ Removing a -> c", file=pen)
    g.remove_edge("a", "c")
    g.dump(pen)
    return g


def path_experiment(pen=None):
    pen = sys.stdout if pen is None else pen
    g = ag.Graph()
    for name in "abcdefg":
        g.add_vertex(name)

    for src, dst in [("a", "b"), ("b", "c"), ("c", "d"), ("d", "e"),
                     ("e", "g"), ("e", "a"), ("c", "g"), ("g", "e")]:
        g.add_edge(src, dst, 0)

    print("🧭 Paths from a:", file=pen)
    for target in "bcdefga":
        print(f"  a -> {target}: {g.path('a', target)}", file=pen)
    return g


def undirected_experiment(pen=None):
    pen = sys.stdout if pen is None else pen
    g = ag.UndirectedGraph()

    g.add_edge("a", "b", 1)
    g.add_edge("a", "c", 2)
    g.add_edge("b", "c", 3)
    g.dump_with_names(pen)

    print("Changing edge b-a", file=pen)
    g.add_edge("b", "a", 4)
    g.dump_with_names(pen)

    print("Removing b", file=pen)
    g.remove_vertex("b")
    g.dump_with_names(pen)

    print("Adding an edge from a to d", file=pen)
    g.add_edge("a", "d", 5)
    g.dump_with_names(pen)

    print("Removing the edge from c to a", file=pen)
    g.remove_edge("c", "a")
    g.dump_with_names(pen)
    return g


def file_experiment(path, pen=None):
    pen = sys.stdout if pen is None else pen
    g = ag.UndirectedGraph()
    report = g.read_edges(path)
    print(f"📥 {report!r}", file=pen)
    g.dump(pen)
    g.dump_with_names(pen)
    g.write(pen)
    return g


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if argv:
        file_experiment(argv[0])
        return
    graph_experiment()
    path_experiment()
    undirected_experiment()


if __name__ == "__main__":
    main()
