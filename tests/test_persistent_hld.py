import io
import random
from collections import deque

import pytest

from cpnotebook.persistent_hld import PathTree, PersistentSegmentTree, main


def _path(n, edges, u, v):
    adj = {x: [] for x in range(1, n + 1)}
    for a, b in edges:
        adj[a].append(b)
        adj[b].append(a)
    parent = {u: None}
    queue = deque([u])
    while queue:
        x = queue.popleft()
        for y in adj[x]:
            if y not in parent:
                parent[y] = x
                queue.append(y)
    route = []
    x = v
    while x is not None:
        route.append(x)
        x = parent[x]
    return route[::-1]


def test_segment_tree_versions_are_independent():
    tree = PersistentSegmentTree(5)
    first = tree.update(PersistentSegmentTree.EMPTY, 2, 4, 1, 1)
    second = tree.update(first, 1, 5, 1, 0)
    assert tree.query(PersistentSegmentTree.EMPTY, 1, 5) == 0
    assert [tree.query(first, i, i) for i in range(1, 6)] == [0, 1, 2, 3, 0]
    assert [tree.query(second, i, i) for i in range(1, 6)] == [1, 2, 3, 4, 1]


@pytest.mark.parametrize("seed", range(5))
def test_segment_tree_matches_list_model(seed):
    rng = random.Random(seed)
    size = rng.randint(1, 12)
    tree = PersistentSegmentTree(size)
    roots = [PersistentSegmentTree.EMPTY]
    models = [[0] * (size + 1)]
    for _ in range(30):
        k = rng.randrange(len(roots))
        l = rng.randint(1, size)
        r = rng.randint(l, size)
        a, b = rng.randint(-5, 5), rng.randint(-5, 5)
        roots.append(tree.update(roots[k], l, r, a, b))
        model = models[k][:]
        for i in range(l, r + 1):
            model[i] += a + (i - l) * b
        models.append(model)
    for root, model in zip(roots, models):
        l = rng.randint(1, size)
        r = rng.randint(l, size)
        assert tree.query(root, l, r) == sum(model[l : r + 1])


def test_segment_tree_bounds():
    tree = PersistentSegmentTree(3)
    with pytest.raises(IndexError):
        tree.query(0, 0, 2)
    with pytest.raises(IndexError):
        tree.update(0, 2, 4, 1, 1)
    with pytest.raises(ValueError):
        PersistentSegmentTree(0)


def test_line_progression():
    tree = PathTree(3, [(1, 2), (2, 3)])
    version = tree.update_path(1, 3, 1, 1)
    assert version == 1
    assert tree.query_path(1, 3) == 6
    assert tree.query_path(3, 3) == 3
    tree.checkout(0)
    assert tree.query_path(1, 3) == 0
    assert tree.version_count() == 2


def test_invalid_trees():
    with pytest.raises(ValueError):
        PathTree(3, [(1, 2)])
    with pytest.raises(ValueError):
        PathTree(4, [(1, 2), (2, 1), (3, 4)])
    with pytest.raises(IndexError):
        PathTree(2, [(1, 3)])


@pytest.mark.parametrize("seed", range(6))
def test_path_tree_matches_naive(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 15)
    edges = [(i, rng.randint(1, i - 1)) for i in range(2, n + 1)]
    tree = PathTree(n, edges)
    states = [[0] * (n + 1)]
    current = 0
    for _ in range(40):
        action = rng.random()
        u, v = rng.randint(1, n), rng.randint(1, n)
        route = _path(n, edges, u, v)
        if action < 0.4:
            a, b = rng.randint(-5, 5), rng.randint(-5, 5)
            values = states[current][:]
            for k, x in enumerate(route):
                values[x] += a + k * b
            states.append(values)
            current = tree.update_path(u, v, a, b)
            assert current == len(states) - 1
        elif action < 0.55:
            current = rng.randrange(len(states))
            tree.checkout(current)
        else:
            assert tree.query_path(u, v) == sum(states[current][x] for x in route)
        assert tree.lca(u, v) == min(route, key=lambda x: len(_path(n, edges, 1, x)))


def test_main_online_queries(monkeypatch, capsys):
    data = "3 4\n1 2\n2 3\nc 0 2 1 1\nq 0 2\nl 0\nq 0 2\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    assert capsys.readouterr().out == "6\n0\n"