"""BSTree - an unbalanced binary search tree for BSTreeLib.

Shape is driven entirely by insertion order. There is no rebalancing, so
sorted input produces a chain whose height equals its size. Every walk in
this module is iterative, which keeps such chains usable far beyond the
interpreter's recursion limit.
"""

from typing import Generic, Iterable, Iterator, Optional, TYPE_CHECKING, Union

from .errors import InvalidArgumentError, InvalidStateError
from .node import BSTreeNode, T
from .iterators import (
    TreeIterator,
    PreorderIterator,
    PostorderIterator,
    create_inorder_iterator,
    create_iterator,
)
from .._common.config import InorderStrategy, TraversalOrder

if TYPE_CHECKING:
    from .iterators import ThreadedInorderIterator


class BSTree(Generic[T]):
    """Binary search tree over any element type that supports ``<``.

    Invariants:
        - every element in a node's left subtree compares strictly less
          than the node's element
        - every element in a node's right subtree compares greater or
          equal (duplicates go right)
        - size() equals the number of reachable nodes

    Two elements match for search purposes when neither is less than the
    other, so only ``<`` is ever called on elements.

    The tree is not thread-safe. While a threaded in-order iterator is live
    the tree holds temporary right links, and every operation that walks
    links raises InvalidStateError until that iterator is exhausted or
    closed.
    """

    def __init__(self):
        self._root: Optional[BSTreeNode[T]] = None
        self._size = 0
        self._threaded_iterator: Optional['ThreadedInorderIterator[T]'] = None

    @classmethod
    def from_iterable(cls, elements: Iterable[T]) -> 'BSTree[T]':
        """Build a tree by inserting elements in iteration order."""
        tree = cls()
        tree.extend(elements)
        return tree

    # Mutation

    def insert(self, element: T) -> bool:
        """Insert an element, placing duplicates in the right subtree.

        Args:
            element: The element to insert

        Returns:
            True; insertion cannot fail once the argument is valid

        Raises:
            InvalidArgumentError: If element is None
            InvalidStateError: If a threaded iterator is active
        """
        self._check_element(element)
        self._ensure_unthreaded("insert")

        new_node = BSTreeNode(element)
        if self._root is None:
            self._root = new_node
        else:
            current = self._root
            while True:
                if element < current.element:
                    if current.left is None:
                        current.left = new_node
                        break
                    current = current.left
                else:
                    if current.right is None:
                        current.right = new_node
                        break
                    current = current.right

        self._size += 1
        return True

    add = insert

    def extend(self, elements: Iterable[T]) -> int:
        """Insert every element in iteration order.

        Returns:
            Number of elements inserted
        """
        count = 0
        for element in elements:
            self.insert(element)
            count += 1
        return count

    def remove_min(self) -> Optional[BSTreeNode[T]]:
        """Remove and return the node holding the smallest element.

        The smallest node never has a left child; its right subtree takes
        its place. The returned node is detached from the tree.

        Returns:
            The removed node, or None if the tree is empty
        """
        self._ensure_unthreaded("remove_min")
        if self._root is None:
            return None

        parent = None
        node = self._root
        while node.left is not None:
            parent = node
            node = node.left

        if parent is None:
            self._root = node.right
        else:
            parent.left = node.right

        self._size -= 1
        return node.detach()

    def remove_max(self) -> Optional[BSTreeNode[T]]:
        """Remove and return the node holding the largest element.

        Mirror image of remove_min: the largest node's left subtree takes
        its place.

        Returns:
            The removed node, or None if the tree is empty
        """
        self._ensure_unthreaded("remove_max")
        if self._root is None:
            return None

        parent = None
        node = self._root
        while node.right is not None:
            parent = node
            node = node.right

        if parent is None:
            self._root = node.left
        else:
            parent.right = node.left

        self._size -= 1
        return node.detach()

    def clear(self) -> None:
        """Remove all elements."""
        self._ensure_unthreaded("clear")
        self._root = None
        self._size = 0

    # Queries

    def search(self, element: T) -> Optional[BSTreeNode[T]]:
        """Find the first node whose element matches.

        Walks the same path insertion would take and stops at the first
        match, which is the shallowest of any duplicates.

        Raises:
            InvalidArgumentError: If element is None
        """
        self._check_element(element)
        self._ensure_unthreaded("search")

        current = self._root
        while current is not None:
            if element < current.element:
                current = current.left
            elif current.element < element:
                current = current.right
            else:
                return current
        return None

    def contains(self, element: T) -> bool:
        """Check whether an element matching ``element`` is stored."""
        return self.search(element) is not None

    def find_min(self) -> Optional[BSTreeNode[T]]:
        """Return the node holding the smallest element without removing it."""
        self._ensure_unthreaded("find_min")
        node = self._root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node

    def find_max(self) -> Optional[BSTreeNode[T]]:
        """Return the node holding the largest element without removing it."""
        self._ensure_unthreaded("find_max")
        node = self._root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node

    def height(self) -> int:
        """Number of levels in the tree: 0 when empty, 1 for a single node.

        Counted level by level, so no recursion is involved.
        """
        self._ensure_unthreaded("height")
        if self._root is None:
            return 0

        height = 0
        current_level = [self._root]
        while current_level:
            height += 1
            next_level = []
            for node in current_level:
                next_level.extend(node.children())
            current_level = next_level
        return height

    def size(self) -> int:
        """Number of elements stored."""
        return self._size

    def is_empty(self) -> bool:
        """Check if the tree holds no elements."""
        return self._size == 0

    def get_root(self) -> BSTreeNode[T]:
        """Return the root node.

        Prefer the iterator factories for traversal; this exists for
        callers that need to inspect shape.

        Raises:
            InvalidStateError: If the tree is empty
        """
        if self._root is None:
            raise InvalidStateError("Tree is empty; there is no root")
        return self._root

    # Iterator factories

    def inorder(self,
                strategy: Union[InorderStrategy, str, None] = None) -> TreeIterator[T]:
        """Return a fresh iterator yielding elements in ascending order.

        Args:
            strategy: InorderStrategy.STACK (default) or
                InorderStrategy.THREADED for the O(1)-memory walk that
                locks the tree until exhausted or closed
        """
        return create_inorder_iterator(self, strategy)

    def preorder(self) -> PreorderIterator[T]:
        """Return a snapshot iterator yielding node, left, right."""
        return PreorderIterator(self)

    def postorder(self) -> PostorderIterator[T]:
        """Return a snapshot iterator yielding left, right, node."""
        return PostorderIterator(self)

    def iterator(self,
                 order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
                 strategy: Union[InorderStrategy, str, None] = None) -> TreeIterator[T]:
        """Return a fresh iterator for the given traversal order."""
        return create_iterator(order, self, strategy)

    def close_threaded_iterator(self) -> bool:
        """Close the live threaded iterator, restoring every right link.

        Returns:
            True if an iterator was closed, False if none was active
        """
        if self._threaded_iterator is None:
            return False
        self._threaded_iterator.close()
        return True

    # Python protocols

    def __iter__(self) -> Iterator[T]:
        return self.inorder()

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: object) -> bool:
        # None raises InvalidArgumentError here too, same as contains()
        return self.contains(element)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size})"

    # Internal helpers used by this module and the iterators

    def _check_element(self, element: Optional[T]) -> None:
        if element is None:
            raise InvalidArgumentError("Element cannot be None")

    def _ensure_unthreaded(self, operation: str) -> None:
        if self._threaded_iterator is not None:
            raise InvalidStateError(
                f"Cannot {operation} while a threaded in-order iterator is active; "
                f"exhaust or close it first"
            )

    def _acquire_threads(self, iterator: 'ThreadedInorderIterator[T]') -> None:
        self._ensure_unthreaded("start a threaded in-order iterator")
        self._threaded_iterator = iterator

    def _release_threads(self, iterator: 'ThreadedInorderIterator[T]') -> None:
        if self._threaded_iterator is iterator:
            self._threaded_iterator = None
