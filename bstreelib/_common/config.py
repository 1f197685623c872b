"""Configuration system for BSTreeLib.

This module defines how users specify traversal orders and how the word
tracker application is configured: where its snapshot lives, which report
it renders, and how files are read.
"""

import codecs
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union


DEFAULT_REPOSITORY_FILENAME = "repository.json"


class TraversalOrder(Enum):
    """Order in which tree elements are produced."""
    INORDER = "inorder"       # Left, node, right (ascending)
    PREORDER = "preorder"     # Node, left, right
    POSTORDER = "postorder"   # Left, right, node


class InorderStrategy(Enum):
    """How an in-order traversal walks the tree.

    STACK keeps pending ancestors on an explicit stack (O(height) memory,
    never touches links). THREADED is a Morris traversal (O(1) memory) that
    temporarily rewires right links and therefore needs exclusive access to
    the tree until it is exhausted or closed.
    """
    STACK = "stack"
    THREADED = "threaded"


class ReportKind(Enum):
    """Which word report to render.

    Values match the command line flags without their leading dash.
    """
    FILES = "pf"        # Word and the files it appears in
    LINES = "pl"        # Word, files and line numbers
    DETAILED = "po"     # Word, entry count, files and line numbers

    @classmethod
    def from_flag(cls, flag: str) -> 'ReportKind':
        """Parse a report flag such as ``-pf`` or a member name such as ``lines``.

        Raises:
            ValueError: If the flag is not recognized
        """
        text = flag.strip().lstrip('-').lower()
        for kind in cls:
            if text in (kind.value, kind.name.lower()):
                return kind
        raise ValueError(
            f"Unknown report kind: {flag}. "
            f"Choose from: {', '.join('-' + kind.value for kind in cls)}"
        )


_ORDER_ALIASES = {
    'in': TraversalOrder.INORDER,
    'inorder': TraversalOrder.INORDER,
    'in_order': TraversalOrder.INORDER,
    'pre': TraversalOrder.PREORDER,
    'preorder': TraversalOrder.PREORDER,
    'pre_order': TraversalOrder.PREORDER,
    'post': TraversalOrder.POSTORDER,
    'postorder': TraversalOrder.POSTORDER,
    'post_order': TraversalOrder.POSTORDER,
}


def parse_traversal_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a name.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order
    key = str(order).lower().replace('-', '_')
    if key in _ORDER_ALIASES:
        return _ORDER_ALIASES[key]
    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


def parse_inorder_strategy(strategy: Union[InorderStrategy, str, None]) -> InorderStrategy:
    """Parse an in-order strategy; None selects the stack walk."""
    if strategy is None:
        return InorderStrategy.STACK
    if isinstance(strategy, InorderStrategy):
        return strategy
    try:
        return InorderStrategy(str(strategy).lower())
    except ValueError:
        raise ValueError(
            f"Unknown in-order strategy: {strategy}. "
            f"Choose from: {', '.join(s.value for s in InorderStrategy)}"
        ) from None


@dataclass
class TrackerConfig:
    """Complete configuration for the word tracker.

    The WordTracker validates this configuration on construction and refuses
    to start when validate() reports any issue.
    """

    # Snapshot persistence
    repository_path: Path = field(
        default_factory=lambda: Path(DEFAULT_REPOSITORY_FILENAME)
    )
    persist: bool = True  # Load before and save after processing

    # Reporting
    report_kind: ReportKind = ReportKind.LINES
    output_file: Optional[Path] = None  # Also write the report here

    # Traversal used to walk words for reports
    inorder_strategy: InorderStrategy = InorderStrategy.STACK

    # Input handling
    encoding: str = "utf-8"
    ignore_case: bool = False  # Fold words to lower case before indexing

    log_level: str = "WARNING"

    def __post_init__(self):
        if isinstance(self.repository_path, str):
            self.repository_path = Path(self.repository_path)
        if isinstance(self.output_file, str):
            self.output_file = Path(self.output_file)

    @classmethod
    def ephemeral(cls, **kwargs) -> 'TrackerConfig':
        """Create a config that never touches a snapshot file.

        Args:
            **kwargs: Any other TrackerConfig field

        Returns:
            TrackerConfig with persistence disabled
        """
        kwargs['persist'] = False
        return cls(**kwargs)

    @classmethod
    def for_report(cls, flag: str, **kwargs) -> 'TrackerConfig':
        """Create a config for a report flag such as ``-po``."""
        return cls(report_kind=ReportKind.from_flag(flag), **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.report_kind, ReportKind):
            errors.append(f"report_kind must be a ReportKind, got {self.report_kind!r}")

        if not isinstance(self.inorder_strategy, InorderStrategy):
            errors.append(
                f"inorder_strategy must be an InorderStrategy, got {self.inorder_strategy!r}"
            )

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"unknown encoding: {self.encoding}")

        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            errors.append(f"unknown log level: {self.log_level}")

        if self.persist and not Path(self.repository_path).name:
            errors.append("repository_path must name a file when persist is enabled")

        if (self.output_file is not None and self.persist
                and Path(self.output_file) == Path(self.repository_path)):
            errors.append("output_file must differ from repository_path")

        return errors
