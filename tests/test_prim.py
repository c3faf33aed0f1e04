from algobox.graph.prim import prim, prim_with_start


def add_edge(graph, v1, v2, c):
    graph.setdefault(v1, {})[v2] = c
    graph.setdefault(v2, {})[v1] = c


def test_empty():
    assert prim({}) == {}


def test_single_vertex():
    graph = {42: {}}
    assert prim(graph) == graph


def test_single_edge():
    graph = {}
    add_edge(graph, 42, 666, 12)
    assert prim(graph) == graph


def test_tree_1():
    graph = {}
    add_edge(graph, 0, 1, 10)
    add_edge(graph, 0, 2, 11)
    add_edge(graph, 2, 3, 12)
    add_edge(graph, 2, 4, 13)
    add_edge(graph, 1, 5, 14)
    add_edge(graph, 1, 6, 15)
    add_edge(graph, 3, 7, 16)
    assert prim(graph) == graph


def test_tree_2():
    graph = {}
    add_edge(graph, 1, 2, 11)
    add_edge(graph, 2, 3, 12)
    add_edge(graph, 2, 4, 13)
    add_edge(graph, 4, 5, 14)
    add_edge(graph, 4, 6, 15)
    add_edge(graph, 6, 7, 16)
    assert prim(graph) == graph


def test_tree_3():
    graph = {}
    for i in range(1, 100):
        add_edge(graph, i, 2 * i, i)
        add_edge(graph, i, 2 * i + 1, -i)
    assert prim(graph) == graph


def test_graph_1():
    graph = {}
    add_edge(graph, "a", "b", 6)
    add_edge(graph, "a", "c", 7)
    add_edge(graph, "a", "e", 2)
    add_edge(graph, "a", "f", 3)
    add_edge(graph, "b", "c", 5)
    add_edge(graph, "c", "e", 5)
    add_edge(graph, "d", "e", 4)
    add_edge(graph, "d", "f", 1)
    add_edge(graph, "e", "f", 2)

    ans = {}
    add_edge(ans, "d", "f", 1)
    add_edge(ans, "e", "f", 2)
    add_edge(ans, "a", "e", 2)
    add_edge(ans, "b", "c", 5)
    add_edge(ans, "c", "e", 5)

    assert prim(graph) == ans


def test_graph_2():
    graph = {}
    add_edge(graph, 1, 2, 6)
    add_edge(graph, 1, 3, 1)
    add_edge(graph, 1, 4, 5)
    add_edge(graph, 2, 3, 5)
    add_edge(graph, 2, 5, 3)
    add_edge(graph, 3, 4, 5)
    add_edge(graph, 3, 5, 6)
    add_edge(graph, 3, 6, 4)
    add_edge(graph, 4, 6, 2)
    add_edge(graph, 5, 6, 6)

    ans = {}
    add_edge(ans, 1, 3, 1)
    add_edge(ans, 4, 6, 2)
    add_edge(ans, 2, 5, 3)
    add_edge(ans, 2, 3, 5)
    add_edge(ans, 3, 6, 4)

    assert prim(graph) == ans


def test_graph_3():
    graph = {}
    add_edge(graph, "v1", "v2", 1)
    add_edge(graph, "v1", "v3", 3)
    add_edge(graph, "v1", "v5", 6)
    add_edge(graph, "v2", "v3", 2)
    add_edge(graph, "v2", "v4", 3)
    add_edge(graph, "v2", "v5", 5)
    add_edge(graph, "v3", "v4", 5)
    add_edge(graph, "v3", "v6", 2)
    add_edge(graph, "v4", "v5", 2)
    add_edge(graph, "v4", "v6", 4)
    add_edge(graph, "v5", "v6", 1)

    ans = {}
    add_edge(ans, "v1", "v2", 1)
    add_edge(ans, "v5", "v6", 1)
    add_edge(ans, "v2", "v3", 2)
    add_edge(ans, "v3", "v6", 2)
    add_edge(ans, "v4", "v5", 2)

    assert prim(graph) == ans


def test_disconnected_graph_keeps_start_component():
    graph = {}
    add_edge(graph, 1, 2, 3)
    add_edge(graph, 5, 6, 4)
    assert prim_with_start(graph, 5) == {5: {6: 4}, 6: {5: 4}}