"""High-level API for BSTreeLib.

This module provides simple, functional interfaces for common tree
operations. These functions wrap the object-oriented BSTree API for ease
of use in simple cases.
"""

from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .core.node import T
from .core.tree import BSTree
from ._common.config import InorderStrategy, TraversalOrder


def build_tree(elements: Iterable[T]) -> BSTree[T]:
    """Build a tree by inserting elements in the order given.

    Example:
        >>> tree = build_tree(["b", "a", "c"])
        >>> tree.height()
        2
    """
    return BSTree.from_iterable(elements)


def traverse_tree(
    tree: BSTree[T],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    strategy: Union[InorderStrategy, str, None] = None,
) -> Iterator[T]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to traverse
        order: Traversal order (inorder, preorder, postorder)
        strategy: In-order strategy (stack or threaded)

    Returns:
        Iterator over the elements in the requested order

    Example:
        >>> tree = build_tree(["b", "a", "c"])
        >>> list(traverse_tree(tree, "post"))
        ['a', 'c', 'b']
    """
    return tree.iterator(order, strategy)


def collect_elements(
    tree: BSTree[T],
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    strategy: Union[InorderStrategy, str, None] = None,
) -> List[T]:
    """Traverse the whole tree and return the elements as a list."""
    return list(traverse_tree(tree, order, strategy))


def rebuild_tree(
    tree: BSTree[T],
    order: Union[TraversalOrder, str] = TraversalOrder.PREORDER,
) -> BSTree[T]:
    """Build a new tree by replaying a traversal of ``tree``.

    Any order reproduces the same in-order content. Pre-order also
    reproduces the exact shape.

    Args:
        tree: Source tree (left untouched)
        order: Order in which elements are re-inserted

    Returns:
        A new, independent BSTree
    """
    return BSTree.from_iterable(collect_elements(tree, order))


def get_tree_stats(tree: BSTree[Any]) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with size, height, smallest and largest element, and
        whether insertion order degenerated the tree into a chain

    Example:
        >>> stats = get_tree_stats(build_tree([1, 2, 3]))
        >>> stats['is_degenerate']
        True
    """
    size = tree.size()
    height = tree.height()
    smallest = tree.find_min()
    largest = tree.find_max()

    return {
        'size': size,
        'height': height,
        'is_empty': tree.is_empty(),
        'min': smallest.element if smallest is not None else None,
        'max': largest.element if largest is not None else None,
        'is_degenerate': size > 2 and height == size,
        'leaf_count': _count_leaves(tree),
    }


def _count_leaves(tree: BSTree[Any]) -> int:
    if tree.is_empty():
        return 0
    leaves = 0
    stack = [tree.get_root()]
    while stack:
        node = stack.pop()
        if node.is_leaf():
            leaves += 1
        stack.extend(node.children())
    return leaves


def find_elements(tree: BSTree[T], element: T) -> List[T]:
    """Return every stored element matching ``element``.

    Duplicates live in the right subtree of their first occurrence, so the
    walk continues to the right after each match.
    """
    matches: List[T] = []
    node: Optional[Any] = tree.search(element)
    while node is not None:
        matches.append(node.element)
        node = _search_from(node.right, element)
    return matches


def _search_from(node, element):
    while node is not None:
        if element < node.element:
            node = node.left
        elif node.element < element:
            node = node.right
        else:
            return node
    return None
