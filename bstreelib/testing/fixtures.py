"""Test fixtures for BSTreeLib consumers.

These fixtures provide controlled access to internal tree structure for
testing purposes without exposing implementation details as part of the
public API.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..core.tree import BSTree


class TreeTestHelper:
    """Public test fixture for structural verification of a BSTree.

    Every check walks raw links with explicit stacks and guards against
    cycles, so it stays safe to call on a tree that still carries threads
    from an abandoned threaded iterator.

    Example:
        tree = build_tree(["b", "a", "c"])
        helper = TreeTestHelper(tree)

        assert helper.is_valid_bst()
        assert helper.count_nodes() == tree.size()
        assert not helper.has_cycles()
    """

    def __init__(self, tree: BSTree[Any]):
        """Initialize with the tree under test.

        Args:
            tree: The BSTree to inspect
        """
        self._tree = tree

    def _reachable(self) -> Tuple[List[Any], bool]:
        """Return reachable nodes in pre-order and whether a cycle was hit."""
        nodes = []
        seen = set()
        cycle = False
        stack = [self._tree._root] if self._tree._root is not None else []
        while stack:
            node = stack.pop()
            if id(node) in seen:
                cycle = True
                continue
            seen.add(id(node))
            nodes.append(node)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return nodes, cycle

    def has_cycles(self) -> bool:
        """Check if any link points back to an already reachable node."""
        return self._reachable()[1]

    def count_nodes(self) -> int:
        """Number of distinct reachable nodes."""
        return len(self._reachable()[0])

    def is_valid_bst(self) -> bool:
        """Check the ordering invariant on every node.

        Left subtrees must hold strictly smaller elements, right subtrees
        greater or equal ones. A tree with cycles is never valid.
        """
        if self.has_cycles():
            return False

        # (node, lower bound inclusive, upper bound exclusive)
        stack: List[Tuple[Any, Optional[Any], Optional[Any]]] = []
        if self._tree._root is not None:
            stack.append((self._tree._root, None, None))
        while stack:
            node, low, high = stack.pop()
            element = node.element
            if low is not None and element < low:
                return False
            if high is not None and not element < high:
                return False
            if node.left is not None:
                stack.append((node.left, low, element))
            if node.right is not None:
                stack.append((node.right, element, high))
        return True

    def shape_signature(self) -> List[Tuple[Any, bool, bool]]:
        """Pre-order list of (element, has_left, has_right).

        Two trees have the same shape and content exactly when their
        signatures are equal.
        """
        nodes, _ = self._reachable()
        return [
            (node.element, node.left is not None, node.right is not None)
            for node in nodes
        ]

    def is_locked(self) -> bool:
        """Check if a threaded iterator currently holds the tree."""
        return self._tree._threaded_iterator is not None

    def get_summary(self) -> Dict[str, Any]:
        """Returns high-level tree state for testing.

        Returns:
            Dictionary containing:
            - size: The count the tree reports
            - reachable_nodes: Nodes actually reachable from the root
            - has_cycles: Whether any thread or stray link forms a cycle
            - is_valid_bst: Whether the ordering invariant holds
            - is_locked: Whether a threaded iterator is active
        """
        nodes, cycle = self._reachable()
        return {
            'size': self._tree.size(),
            'reachable_nodes': len(nodes),
            'has_cycles': cycle,
            'is_valid_bst': self.is_valid_bst(),
            'is_locked': self.is_locked(),
        }
