from hypothesis import given
from hypothesis import strategies as st

from cpnotebook.cartesian_tree import build_cartesian_tree

arrays = st.lists(st.integers(-20, 20), min_size=1, max_size=40)


def inorder(tree, node):
    if node is None:
        return []
    return inorder(tree, tree.left[node]) + [node] + inorder(tree, tree.right[node])


@given(arrays)
def test_inorder_is_original_order(values):
    tree = build_cartesian_tree(values)
    assert inorder(tree, tree.root) == list(range(len(values)))


@given(arrays)
def test_heap_property_and_links(values):
    tree = build_cartesian_tree(values)
    assert tree.parent[tree.root] is None
    for i in range(len(values)):
        for child in (tree.left[i], tree.right[i]):
            if child is not None:
                assert tree.parent[child] == i
                assert values[i] <= values[child]


@given(arrays)
def test_root_is_first_minimum(values):
    tree = build_cartesian_tree(values)
    assert tree.root == values.index(min(values))
    assert sum(p is None for p in tree.parent) == 1


def test_empty():
    tree = build_cartesian_tree([])
    assert tree.root is None
    assert tree.left == []