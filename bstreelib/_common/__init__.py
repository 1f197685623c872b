"""Common components shared by the tree core and the word tracker.

This internal package contains configuration and logging helpers. It should
NOT be imported directly by users.

Important: This package must NEVER import from core or wordtracker to avoid
circular dependencies.
"""

from .config import (
    DEFAULT_REPOSITORY_FILENAME,
    TraversalOrder,
    InorderStrategy,
    ReportKind,
    TrackerConfig,
    parse_traversal_order,
    parse_inorder_strategy,
)
from .logging import setup_logging

__all__ = [
    'DEFAULT_REPOSITORY_FILENAME',
    'TraversalOrder',
    'InorderStrategy',
    'ReportKind',
    'TrackerConfig',
    'parse_traversal_order',
    'parse_inorder_strategy',
    'setup_logging',
]
