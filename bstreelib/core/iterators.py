"""Tree iterators for BSTreeLib.

Iterators implement the different orders for walking a BSTree. Each one is
an independent view created by the tree's factory methods:

- StackInorderIterator: lazy ascending walk with an explicit stack
- ThreadedInorderIterator: lazy ascending walk in O(1) memory (Morris)
- PreorderIterator / PostorderIterator: snapshots buffered at construction
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TYPE_CHECKING, Union

from .errors import OutOfRangeError
from .node import BSTreeNode, T
from .._common.config import (
    InorderStrategy,
    TraversalOrder,
    parse_inorder_strategy,
    parse_traversal_order,
)

if TYPE_CHECKING:
    from .tree import BSTree


class TreeIterator(ABC, Generic[T]):
    """Abstract base class for tree iterators.

    Subclasses decide the visiting order; this class supplies the Python
    iterator protocol on top of has_next() and _advance().
    """

    @abstractmethod
    def has_next(self) -> bool:
        """Check if another element is available."""
        pass

    @abstractmethod
    def _advance(self) -> T:
        """Produce the next element. Only called when has_next() is True."""
        pass

    def __iter__(self) -> 'TreeIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise OutOfRangeError(f"{self.__class__.__name__} is exhausted")
        return self._advance()


class StackInorderIterator(TreeIterator[T]):
    """Ascending traversal keeping pending ancestors on an explicit stack.

    Uses O(height) memory and never modifies the tree. This is the default
    in-order strategy.
    """

    def __init__(self, tree: 'BSTree[T]'):
        """Initialize iterator positioned before the smallest element.

        Args:
            tree: Tree to traverse
        """
        tree._ensure_unthreaded("start an in-order iterator")
        self._tree = tree
        self._stack: List[BSTreeNode[T]] = []
        self._push_left_spine(tree._root)

    def _push_left_spine(self, node: Optional[BSTreeNode[T]]) -> None:
        while node is not None:
            self._stack.append(node)
            node = node.left

    def has_next(self) -> bool:
        return bool(self._stack)

    def _advance(self) -> T:
        # Pending links may have been threaded since construction
        self._tree._ensure_unthreaded("advance an in-order iterator")
        node = self._stack.pop()
        self._push_left_spine(node.right)
        return node.element


class ThreadedInorderIterator(TreeIterator[T]):
    """Ascending traversal in O(1) memory using temporary right-link threads.

    Before descending into a left subtree, the rightmost node of that
    subtree (the in-order predecessor) gets its empty right link pointed
    back at the cursor. Following that thread later returns the walk to
    the cursor, at which point the thread is removed again.

    The tree is locked against other access from construction until the
    iterator is exhausted or closed. An abandoned iterator keeps the tree
    locked with threads in place, so prefer the context manager form:

        with tree.inorder(InorderStrategy.THREADED) as elements:
            for element in elements:
                ...
    """

    def __init__(self, tree: 'BSTree[T]'):
        """Initialize iterator at the tree's root.

        Args:
            tree: Tree to traverse

        Raises:
            InvalidStateError: If another threaded iterator is active
        """
        self._tree = tree
        self._current: Optional[BSTreeNode[T]] = tree._root
        self._predecessor: Optional[BSTreeNode[T]] = None
        if self._current is not None:
            tree._acquire_threads(self)

    def has_next(self) -> bool:
        return self._current is not None

    def _advance(self) -> T:
        while self._current is not None:
            current = self._current

            if current.left is None:
                self._current = current.right
                self._release_if_exhausted()
                return current.element

            predecessor = current.left
            while predecessor.right is not None and predecessor.right is not current:
                predecessor = predecessor.right
            self._predecessor = predecessor

            if predecessor.right is None:
                # First visit: thread back to the cursor and go left
                predecessor.right = current
                self._current = current.left
            else:
                # Second visit through the thread: unthread and emit
                predecessor.right = None
                self._current = current.right
                self._release_if_exhausted()
                return current.element

        raise OutOfRangeError(f"{self.__class__.__name__} is exhausted")

    def _release_if_exhausted(self) -> None:
        if self._current is None:
            self._predecessor = None
            self._tree._release_threads(self)

    def close(self) -> None:
        """Finish the walk without yielding, removing every remaining thread."""
        while self._current is not None:
            self._advance()

    def __enter__(self) -> 'ThreadedInorderIterator[T]':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class BufferedTreeIterator(TreeIterator[T]):
    """Snapshot iterator over nodes collected once at construction.

    The buffer holds exactly size() node references taken when the
    iterator was created. Later insertions and removals are not reflected;
    that is the contract, not a bug.
    """

    def __init__(self, tree: 'BSTree[T]'):
        """Capture the traversal order of ``tree``.

        Args:
            tree: Tree to snapshot
        """
        tree._ensure_unthreaded(f"start a {self.order.value} iterator")
        self._nodes: List[BSTreeNode[T]] = self._fill(tree._root)
        self._index = 0

    @property
    @abstractmethod
    def order(self) -> TraversalOrder:
        """Traversal order captured by this iterator."""
        pass

    @abstractmethod
    def _fill(self, root: Optional[BSTreeNode[T]]) -> List[BSTreeNode[T]]:
        """Return the nodes of the tree rooted at ``root`` in visiting order."""
        pass

    def has_next(self) -> bool:
        return self._index < len(self._nodes)

    def _advance(self) -> T:
        node = self._nodes[self._index]
        self._index += 1
        return node.element

    def remaining(self) -> int:
        """Number of elements not yet produced."""
        return len(self._nodes) - self._index

    def __length_hint__(self) -> int:
        return self.remaining()


class PreorderIterator(BufferedTreeIterator[T]):
    """Pre-order snapshot: node, then left subtree, then right subtree.

    Re-inserting this sequence into an empty tree rebuilds the exact same
    shape, which is why snapshots are persisted in this order.
    """

    @property
    def order(self) -> TraversalOrder:
        return TraversalOrder.PREORDER

    def _fill(self, root: Optional[BSTreeNode[T]]) -> List[BSTreeNode[T]]:
        nodes: List[BSTreeNode[T]] = []
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            nodes.append(node)
            # Right pushed first so left is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return nodes


class PostorderIterator(BufferedTreeIterator[T]):
    """Post-order snapshot: left subtree, then right subtree, then node."""

    @property
    def order(self) -> TraversalOrder:
        return TraversalOrder.POSTORDER

    def _fill(self, root: Optional[BSTreeNode[T]]) -> List[BSTreeNode[T]]:
        # Node-right-left visiting order, reversed, is left-right-node
        reversed_nodes: List[BSTreeNode[T]] = []
        stack = [root] if root is not None else []
        while stack:
            node = stack.pop()
            reversed_nodes.append(node)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        reversed_nodes.reverse()
        return reversed_nodes


def create_inorder_iterator(tree: 'BSTree[T]',
                            strategy: Union[InorderStrategy, str, None] = None) -> TreeIterator[T]:
    """Create an in-order iterator using the requested strategy.

    Args:
        tree: Tree to traverse
        strategy: InorderStrategy member or its value; None means STACK

    Returns:
        A fresh in-order iterator
    """
    if parse_inorder_strategy(strategy) is InorderStrategy.THREADED:
        return ThreadedInorderIterator(tree)
    return StackInorderIterator(tree)


def create_iterator(order: Union[TraversalOrder, str],
                    tree: 'BSTree[T]',
                    strategy: Union[InorderStrategy, str, None] = None) -> TreeIterator[T]:
    """Create an iterator instance by traversal order name.

    Args:
        order: TraversalOrder member or name (inorder, pre, post, ...)
        tree: Tree to traverse
        strategy: In-order strategy; ignored for pre/post-order

    Returns:
        TreeIterator instance

    Raises:
        ValueError: If the order name is not recognized
    """
    traversal_order = parse_traversal_order(order)
    if traversal_order is TraversalOrder.PREORDER:
        return PreorderIterator(tree)
    if traversal_order is TraversalOrder.POSTORDER:
        return PostorderIterator(tree)
    return create_inorder_iterator(tree, strategy)
