"""Property and scenario tests for the BST engine.

Random insert/delete workloads are checked against a SortedList reference
model after every operation:
1. In-order traversal is strictly ascending
2. Membership matches the model
3. Duplicate inserts are rejected without changing the tree
4. Deleted keys are never found again
5. Traversal lengths equal the number of live keys
"""

import random

import pytest
from sortedcontainers import SortedList

from bst_visualizer import BinarySearchTree


def _assert_matches(tree, model):
    inorder = tree.inorder()
    assert inorder == list(model)
    assert all(a < b for a, b in zip(inorder, inorder[1:]))
    assert len(tree.preorder()) == len(model)
    assert len(tree.postorder()) == len(model)
    assert len(tree) == len(model)


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_workload_matches_reference(seed):
    rng = random.Random(seed)
    tree = BinarySearchTree()
    model = SortedList()

    for _ in range(500):
        key = rng.randint(-50, 50)
        if rng.random() < 0.6:
            expected = key not in model
            assert tree.insert(key) is expected
            if expected:
                model.add(key)
        else:
            expected = key in model
            assert tree.delete(key) is expected
            if expected:
                model.remove(key)
            assert not tree.find(key)
        _assert_matches(tree, model)

    for key in range(-50, 51):
        assert tree.find(key) == (key in model)


def test_preorder_rebuilds_same_shape():
    """Re-inserting a preorder sequence reproduces the exact tree."""
    rng = random.Random(42)
    tree = BinarySearchTree(rng.sample(range(1000), 200))
    copy = BinarySearchTree(tree.preorder())

    assert copy.preorder() == tree.preorder()
    assert copy.postorder() == tree.postorder()


def test_duplicate_insert_idempotent():
    once = BinarySearchTree([10, 5, 15, 12])
    twice = BinarySearchTree([10, 5, 15, 12])

    assert twice.insert(12) is False
    assert twice.preorder() == once.preorder()
    assert twice.inorder() == once.inorder()
    assert twice.postorder() == once.postorder()


@pytest.mark.parametrize(
    "keys, target",
    [
        ([5, 3, 8, 1, 4], 1),   # leaf
        ([5, 3, 8, 9], 8),      # one child
        ([5, 3, 8, 1, 4], 3),   # two children
        ([5, 3, 8, 1, 4], 5),   # root with two children
    ],
)
def test_delete_then_find(keys, target):
    tree = BinarySearchTree(keys)
    assert tree.delete(target) is True
    assert tree.find(target) is False
    assert tree.delete(target) is False
    assert sorted(set(keys) - {target}) == tree.inorder()


def test_scenario_insert_traversals():
    tree = BinarySearchTree()
    for key in (5, 3, 8, 1, 4):
        assert tree.insert(key)

    assert tree.inorder() == [1, 3, 4, 5, 8]
    assert tree.preorder() == [5, 3, 1, 4, 8]


def test_scenario_two_child_delete():
    tree = BinarySearchTree([5, 3, 8, 1, 4])
    assert tree.delete(3) is True

    assert tree.inorder() == [1, 4, 5, 8]
    assert tree.root.key == 5
    node = tree.root.left
    assert node.key == 4
    assert node.left.key == 1
    assert node.right is None


def test_scenario_duplicate():
    tree = BinarySearchTree()
    assert tree.insert(5) is True
    assert tree.insert(5) is False
    assert len(tree) == 1
    assert tree.root.is_leaf()


def test_scenario_delete_missing():
    tree = BinarySearchTree([5, 3, 8])
    assert tree.delete(99) is False
    assert tree.inorder() == [3, 5, 8]


def test_scenario_clear():
    tree = BinarySearchTree([5, 3, 8, 1, 4])
    tree.clear()

    assert not any(tree.find(k) for k in range(-10, 20))
    assert tree.preorder() == tree.inorder() == tree.postorder() == []
