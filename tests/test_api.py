#!/usr/bin/env python3
"""Tests for the functional API."""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import (
    BSTree,
    build_tree,
    collect_elements,
    find_elements,
    get_tree_stats,
    rebuild_tree,
    traverse_tree,
)
from bstreelib.testing import TreeTestHelper


class TestTraversal(unittest.TestCase):

    def setUp(self):
        self.tree = build_tree([5, 3, 8, 1, 4, 7, 9, 2, 6])

    def test_build_tree(self):
        self.assertEqual(self.tree.size(), 9)
        self.assertEqual(self.tree.get_root().element, 5)

    def test_traverse_orders(self):
        self.assertEqual(list(traverse_tree(self.tree)), list(range(1, 10)))
        self.assertEqual(list(traverse_tree(self.tree, "pre")),
                         [5, 3, 1, 2, 4, 8, 7, 6, 9])
        self.assertEqual(collect_elements(self.tree, "postorder"),
                         [2, 1, 4, 3, 6, 7, 9, 8, 5])

    def test_collect_with_threaded_strategy(self):
        self.assertEqual(collect_elements(self.tree, "inorder", "threaded"),
                         list(range(1, 10)))
        # Released after collection
        self.tree.insert(10)
        self.assertEqual(self.tree.size(), 10)

    def test_traverse_unknown_order(self):
        with self.assertRaises(ValueError):
            traverse_tree(self.tree, "diagonal")


class TestRebuild(unittest.TestCase):

    def test_preorder_rebuild_keeps_shape(self):
        tree = build_tree(["m", "c", "x", "a", "e", "z"])
        copy = rebuild_tree(tree)

        self.assertIsNot(copy, tree)
        self.assertEqual(TreeTestHelper(copy).shape_signature(),
                         TreeTestHelper(tree).shape_signature())

    def test_inorder_rebuild_degenerates(self):
        tree = build_tree([2, 1, 3])
        copy = rebuild_tree(tree, "inorder")

        self.assertEqual(list(copy), [1, 2, 3])
        self.assertEqual(copy.height(), 3)
        self.assertEqual(tree.height(), 2)


class TestStats(unittest.TestCase):

    def test_empty(self):
        stats = get_tree_stats(BSTree())
        self.assertEqual(stats['size'], 0)
        self.assertEqual(stats['height'], 0)
        self.assertTrue(stats['is_empty'])
        self.assertIsNone(stats['min'])
        self.assertIsNone(stats['max'])
        self.assertEqual(stats['leaf_count'], 0)

    def test_balanced(self):
        stats = get_tree_stats(build_tree([5, 3, 8, 1, 4, 7, 9, 2, 6]))
        self.assertEqual(stats['size'], 9)
        self.assertEqual(stats['height'], 4)
        self.assertEqual(stats['min'], 1)
        self.assertEqual(stats['max'], 9)
        self.assertFalse(stats['is_degenerate'])
        # 2, 4, 6, 9
        self.assertEqual(stats['leaf_count'], 4)

    def test_degenerate(self):
        stats = get_tree_stats(build_tree(range(5)))
        self.assertTrue(stats['is_degenerate'])
        self.assertEqual(stats['leaf_count'], 1)


class TestFindElements(unittest.TestCase):

    def test_all_duplicates_returned(self):
        tree = build_tree([5, 3, 5, 8, 5, 1, 7])
        self.assertEqual(find_elements(tree, 5), [5, 5, 5])
        self.assertEqual(find_elements(tree, 3), [3])

    def test_missing(self):
        self.assertEqual(find_elements(build_tree([1, 2]), 9), [])
        self.assertEqual(find_elements(BSTree(), 1), [])


if __name__ == '__main__':
    unittest.main()
