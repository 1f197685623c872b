"""BSTreeLib - Binary Search Tree Library with a word tracker.

BSTreeLib provides a generic, unbalanced binary search tree with in-order,
pre-order and post-order iterators, plus a small application that indexes
the words of text files on top of it.

Choose your entry point:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Data structure:
    from bstreelib import BSTree

Word index:
    from bstreelib.wordtracker import WordTracker
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from .core import (
    BSTree,
    BSTreeNode,
    TreeError,
    InvalidArgumentError,
    InvalidStateError,
    OutOfRangeError,
    TreeIterator,
    StackInorderIterator,
    ThreadedInorderIterator,
    PreorderIterator,
    PostorderIterator,
    create_iterator,
)
from ._common.config import (
    TraversalOrder,
    InorderStrategy,
    ReportKind,
    TrackerConfig,
    parse_traversal_order,
    parse_inorder_strategy,
)
from .api import (
    build_tree,
    traverse_tree,
    collect_elements,
    rebuild_tree,
    get_tree_stats,
    find_elements,
)

# Re-export the application subpackage for convenient access
from . import wordtracker

__all__ = [
    "__version__",
    "BSTree",
    "BSTreeNode",
    "TreeError",
    "InvalidArgumentError",
    "InvalidStateError",
    "OutOfRangeError",
    "TreeIterator",
    "StackInorderIterator",
    "ThreadedInorderIterator",
    "PreorderIterator",
    "PostorderIterator",
    "create_iterator",
    "TraversalOrder",
    "InorderStrategy",
    "ReportKind",
    "TrackerConfig",
    "parse_traversal_order",
    "parse_inorder_strategy",
    "build_tree",
    "traverse_tree",
    "collect_elements",
    "rebuild_tree",
    "get_tree_stats",
    "find_elements",
    "wordtracker",
]
