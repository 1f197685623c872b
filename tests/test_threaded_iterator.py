"""Tests for the threaded (Morris) in-order iterator.

The threaded walk rewires right links while it runs. These tests check
that every link is restored on exhaustion or close(), and that the tree
refuses access while threads may be present.
"""

import pytest

from bstreelib import BSTree, InorderStrategy, InvalidStateError, OutOfRangeError
from bstreelib.testing import TreeTestHelper


def create_test_tree() -> BSTree:
    return BSTree.from_iterable([5, 3, 8, 1, 4, 7, 9, 2, 6])


def threaded(tree: BSTree):
    return tree.inorder(InorderStrategy.THREADED)


class TestLinkRestoration:
    """Tree shape is unchanged once the walk finishes."""

    def test_exhaustion_restores_shape(self):
        tree = create_test_tree()
        helper = TreeTestHelper(tree)
        before = helper.shape_signature()

        assert list(threaded(tree)) == list(range(1, 10))

        assert helper.shape_signature() == before
        assert not helper.has_cycles()
        assert not helper.is_locked()
        assert helper.is_valid_bst()

    def test_partial_walk_leaves_threads(self):
        tree = create_test_tree()
        helper = TreeTestHelper(tree)

        iterator = threaded(tree)
        assert next(iterator) == 1

        # 4 -> 5 and 2 -> 3 are threaded at this point
        assert helper.has_cycles()
        assert helper.is_locked()
        iterator.close()

    def test_close_restores_shape(self):
        tree = create_test_tree()
        helper = TreeTestHelper(tree)
        before = helper.shape_signature()

        iterator = threaded(tree)
        next(iterator)
        next(iterator)
        iterator.close()

        assert helper.shape_signature() == before
        assert not helper.has_cycles()
        assert not iterator.has_next()
        with pytest.raises(OutOfRangeError):
            next(iterator)

    def test_close_is_idempotent(self):
        tree = create_test_tree()
        iterator = threaded(tree)
        iterator.close()
        iterator.close()
        assert tree.size() == 9

    def test_context_manager_closes(self):
        tree = create_test_tree()
        before = TreeTestHelper(tree).shape_signature()

        with threaded(tree) as elements:
            for element in elements:
                if element == 4:
                    break

        assert TreeTestHelper(tree).shape_signature() == before
        tree.insert(10)
        assert tree.size() == 10

    def test_close_through_tree(self):
        tree = create_test_tree()
        iterator = threaded(tree)
        next(iterator)

        assert tree.close_threaded_iterator() is True
        assert tree.close_threaded_iterator() is False
        assert not TreeTestHelper(tree).has_cycles()

    @pytest.mark.parametrize("values", [
        [1],
        [2, 1],
        [1, 2],
        list(range(50, 0, -1)),
        [50, 25, 75, 12, 37, 62, 87, 6, 18, 31, 43],
        [3, 3, 3, 1, 1, 2, 2],
    ])
    def test_various_shapes(self, values):
        tree = BSTree.from_iterable(values)
        before = TreeTestHelper(tree).shape_signature()

        assert list(threaded(tree)) == sorted(values)
        assert TreeTestHelper(tree).shape_signature() == before


class TestExclusiveAccess:
    """A live threaded iterator locks the tree."""

    @pytest.mark.parametrize("operation", [
        lambda tree: tree.insert(10),
        lambda tree: tree.search(3),
        lambda tree: tree.contains(3),
        lambda tree: tree.height(),
        lambda tree: tree.remove_min(),
        lambda tree: tree.remove_max(),
        lambda tree: tree.find_min(),
        lambda tree: tree.find_max(),
        lambda tree: tree.clear(),
        lambda tree: tree.preorder(),
        lambda tree: tree.postorder(),
        lambda tree: tree.inorder(),
        lambda tree: tree.inorder(InorderStrategy.THREADED),
    ])
    def test_operations_rejected_while_live(self, operation):
        tree = create_test_tree()
        iterator = threaded(tree)
        next(iterator)

        with pytest.raises(InvalidStateError):
            operation(tree)

        # Nothing changed, and the walk can still finish normally
        assert tree.size() == 9
        assert list(iterator) == list(range(2, 10))
        assert list(tree.inorder()) == list(range(1, 10))

    def test_lock_taken_before_first_step(self):
        tree = create_test_tree()
        iterator = threaded(tree)
        with pytest.raises(InvalidStateError, match="threaded in-order iterator"):
            tree.insert(0)
        iterator.close()
        tree.insert(0)
        assert tree.find_min().element == 0

    def test_size_queries_still_allowed(self):
        tree = create_test_tree()
        iterator = threaded(tree)
        next(iterator)

        assert tree.size() == 9
        assert len(tree) == 9
        assert not tree.is_empty()
        assert tree.get_root().element == 5
        iterator.close()

    def test_existing_stack_iterator_rejected_while_threaded(self):
        tree = BSTree.from_iterable(["b", "a", "c"])
        stack = tree.inorder()
        walker = threaded(tree)
        next(walker)

        # Would otherwise follow the a -> b thread and repeat "a"
        with pytest.raises(InvalidStateError):
            next(stack)

        walker.close()
        assert list(stack) == ["a", "b", "c"]

    def test_empty_tree_takes_no_lock(self):
        tree = BSTree()
        iterator = threaded(tree)
        assert not iterator.has_next()
        tree.insert(1)
        assert tree.size() == 1

    def test_state_error_is_a_runtime_error(self):
        tree = create_test_tree()
        iterator = threaded(tree)
        with pytest.raises(RuntimeError):
            tree.height()
        iterator.close()
