"""Error kinds raised by BSTreeLib's tree and iterators.

All of these are local and synchronous. The tree validates its arguments and
state before touching any link, so a raised error never leaves a partially
mutated structure behind.
"""


class TreeError(Exception):
    """Base class for all errors raised by the tree and its iterators."""
    pass


class InvalidArgumentError(TreeError, ValueError):
    """Raised when ``None`` is passed where an element is required."""
    pass


class InvalidStateError(TreeError, RuntimeError):
    """Raised when the tree cannot serve a request in its current state.

    This covers root access on an empty tree and any structural access while
    a threaded in-order iterator holds temporary links.
    """
    pass


class OutOfRangeError(TreeError, StopIteration):
    """Raised when an iterator is advanced past its last element.

    Subclassing StopIteration keeps ``for`` loops and ``list()`` working
    while ``next(iterator)`` past the end still surfaces a tree error.
    """
    pass
