"""Word tracker application built on BSTree.

Scans text files, keeps one Word record per distinct word in a BSTree,
renders sorted reports and persists the index as a snapshot file.
"""

from .word import Word
from .scanner import tokenize_line, scan_file
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .reports import (
    ReportCollector,
    LineReportCollector,
    FileReportCollector,
    DetailedReportCollector,
    CustomReportCollector,
    create_collector,
)
from .repository import (
    RepositoryError,
    save_tree,
    load_tree,
    tree_to_payload,
    tree_from_payload,
)
from .tracker import WordTracker, ConfigurationError

__all__ = [
    'Word',
    'tokenize_line',
    'scan_file',
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    'ReportCollector',
    'LineReportCollector',
    'FileReportCollector',
    'DetailedReportCollector',
    'CustomReportCollector',
    'create_collector',
    'RepositoryError',
    'save_tree',
    'load_tree',
    'tree_to_payload',
    'tree_from_payload',
    'WordTracker',
    'ConfigurationError',
]
