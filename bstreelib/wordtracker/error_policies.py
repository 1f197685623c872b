"""
Error handling policies for the word tracker.

This module provides a flexible error handling system through the Policy
pattern, allowing callers to decide what happens when an input file cannot
be read. The tree itself never handles errors; these policies live one
layer up, where skipping a file is a meaningful choice.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional


logger = logging.getLogger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors that
    occur while scanning input files.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, path: Optional[Path]) -> None:
        """
        Handle an error that occurred during a file operation.

        Args:
            error: The exception that was raised
            operation: Name of the operation that failed (e.g., 'process_file')
            path: The file being processed when the error occurred

        Raises:
            The original error (or a wrapping one) to stop processing.
            Returning normally means the file is skipped.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping processing.

    This is the default for library use - any unreadable file halts the
    whole run. Useful when partial indexes are not acceptable.
    """

    def handle(self, error: Exception, operation: str, path: Optional[Path]) -> None:
        """Re-raise the error immediately."""
        raise error


class _RecordingPolicy(ErrorPolicy):
    """Shared bookkeeping for policies that keep going after an error."""

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[Path] = []

    def _record(self, error: Exception, operation: str, path: Optional[Path]) -> None:
        self.errors.append({
            'path': path,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        })
        if path is not None:
            self.skipped_paths.append(path)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'missing_files': sum(
                1 for e in self.errors if e['error_type'] == 'FileNotFoundError'
            ),
            'permission_errors': sum(
                1 for e in self.errors if e['error_type'] == 'PermissionError'
            ),
            'decode_errors': sum(
                1 for e in self.errors if e['error_type'] == 'UnicodeDecodeError'
            ),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class ContinueOnErrorsPolicy(_RecordingPolicy):
    """
    Policy that logs errors and continues with the next file.

    Errors are collected for later inspection. This is what the command
    line uses: a missing input file is reported and the report is still
    rendered from whatever the snapshot already holds.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning for every error
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, path: Optional[Path]) -> None:
        """Record the error, log it, and skip the file."""
        self._record(error, operation, path)

        if self.verbose:
            if isinstance(error, FileNotFoundError):
                logger.warning("File not found: %s", path)
            else:
                logger.warning("Skipping '%s' during %s: %s", path, operation, error)


class CollectErrorsPolicy(_RecordingPolicy):
    """
    Policy that collects all errors without logging, for batch processing.

    Similar to ContinueOnErrorsPolicy but silent. Useful for collecting all
    errors and presenting them at the end.
    """

    def handle(self, error: Exception, operation: str, path: Optional[Path]) -> None:
        """Silently collect the error."""
        self._record(error, operation, path)


class ThresholdPolicy(_RecordingPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails.

    Useful when a few unreadable files are expected but many indicate a
    systemic problem (wrong directory, wrong encoding) that should halt
    processing.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, log a warning for every tolerated error
        """
        super().__init__()
        self.max_errors = max_errors
        self.verbose = verbose

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def handle(self, error: Exception, operation: str, path: Optional[Path]) -> None:
        """Skip the file if under threshold, otherwise raise."""
        self._record(error, operation, path)

        if self.error_count > self.max_errors:
            raise RuntimeError(
                f"Error threshold exceeded ({self.max_errors} errors)"
            ) from error

        if self.verbose:
            logger.warning(
                "[%d/%d] Skipping '%s' during %s: %s",
                self.error_count, self.max_errors, path, operation, error,
            )
