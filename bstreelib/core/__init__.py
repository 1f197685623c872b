"""Core data structure for BSTreeLib.

This package contains the binary search tree, its node type, the iterator
family and the error kinds they raise.
"""

from .errors import (
    TreeError,
    InvalidArgumentError,
    InvalidStateError,
    OutOfRangeError,
)
from .node import BSTreeNode, SupportsLessThan
from .iterators import (
    TreeIterator,
    StackInorderIterator,
    ThreadedInorderIterator,
    BufferedTreeIterator,
    PreorderIterator,
    PostorderIterator,
    create_inorder_iterator,
    create_iterator,
)
from .tree import BSTree

__all__ = [
    "TreeError",
    "InvalidArgumentError",
    "InvalidStateError",
    "OutOfRangeError",
    "BSTreeNode",
    "SupportsLessThan",
    "TreeIterator",
    "StackInorderIterator",
    "ThreadedInorderIterator",
    "BufferedTreeIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_inorder_iterator",
    "create_iterator",
    "BSTree",
]
