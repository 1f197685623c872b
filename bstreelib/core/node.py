"""BSTreeNode for BSTreeLib.

The node is intentionally kept simple - it's a data container holding one
element and two owned child links. Ordering decisions and link surgery live
in BSTree; traversal order lives in the iterators.
"""

from typing import Any, Dict, Generic, Iterator, Optional, Protocol, TypeVar


class SupportsLessThan(Protocol):
    """Ordering capability required from tree elements."""

    def __lt__(self, other: Any) -> bool:
        ...


T = TypeVar("T", bound=SupportsLessThan)


class BSTreeNode(Generic[T]):
    """A single node of a binary search tree.

    Each child link is either None or the root of a subtree owned
    exclusively by this node. Nodes are created by BSTree on insertion and
    never copied.
    """

    def __init__(self,
                 element: T,
                 left: Optional['BSTreeNode[T]'] = None,
                 right: Optional['BSTreeNode[T]'] = None):
        """Initialize a node.

        Args:
            element: The element stored in this node
            left: Root of the left subtree (elements strictly less)
            right: Root of the right subtree (elements greater or equal)
        """
        self.element = element
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['BSTreeNode[T]']:
        """Yield the present children, left first."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def detach(self) -> 'BSTreeNode[T]':
        """Drop both child links and return the node itself."""
        self.left = None
        self.right = None
        return self

    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        return {
            'element': self.element,
            'is_leaf': self.is_leaf(),
            'has_left': self.left is not None,
            'has_right': self.right is not None,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(element={self.element!r})"
