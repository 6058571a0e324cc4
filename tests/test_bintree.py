import pytest

from juez.bintree import BinTree, read_tree


def _sample():
    return BinTree(BinTree(BinTree(4), 2, BinTree()), 1, BinTree(3))


def test_empty_tree_has_no_root_or_children():
    tree = BinTree()
    assert not tree
    with pytest.raises(ValueError):
        tree.root()
    with pytest.raises(ValueError):
        tree.left()
    with pytest.raises(ValueError):
        tree.right()


def test_empty_tree_traversals_are_empty():
    tree = BinTree()
    assert tree.preorder() == []
    assert tree.inorder() == []
    assert tree.postorder() == []
    assert tree.levelorder() == []
    assert list(tree) == []


def test_leaf():
    leaf = BinTree(5)
    assert leaf.root() == 5
    assert not leaf.left()
    assert not leaf.right()
    assert leaf.preorder() == leaf.inorder() == leaf.postorder() == [5]


def test_children_are_returned():
    tree = BinTree(BinTree(1), 2, BinTree(3))
    assert tree.left().root() == 1
    assert tree.right().root() == 3


def test_search_shaped_tree_inorder_is_sorted():
    tree = BinTree(BinTree(BinTree(1), 2, BinTree(3)), 4, BinTree(BinTree(5), 6, BinTree()))
    assert tree.inorder() == sorted(tree.preorder())
    assert list(tree) == tree.inorder()


def test_root_positions_in_traversals():
    tree = _sample()
    assert tree.preorder()[0] == tree.root()
    assert tree.postorder()[-1] == tree.root()
    assert tree.levelorder()[0] == tree.root()
    assert sorted(tree.preorder()) == sorted(tree.postorder()) == sorted(tree.levelorder())


def test_levelorder_and_postorder_values():
    tree = _sample()
    assert tree.levelorder() == [1, 2, 3, 4]
    assert tree.postorder() == [4, 2, 3, 1]


def test_shared_subtree():
    leaf = BinTree(7)
    tree = BinTree(leaf, 0, leaf)
    assert tree.left().preorder() == tree.right().preorder()
    assert len(tree.preorder()) == len(tree.postorder())


def test_wrong_argument_count():
    with pytest.raises(TypeError):
        BinTree(BinTree(), 1)


def test_read_tree_preorder_matches_tokens():
    tokens = "1 2 -1 -1 3 -1 -1".split()
    tree = read_tree(tokens, "-1")
    assert tree.preorder() == [t for t in tokens if t != "-1"]
    assert tree.inorder() == ["2", "1", "3"]


def test_read_tree_empty():
    assert not read_tree(["#"], "#")


def test_read_tree_truncated():
    with pytest.raises(ValueError):
        read_tree(["1", "#"], "#")