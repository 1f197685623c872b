"""WordTracker - indexes words from text files into a BSTree.

The tracker owns a BSTree of Word records. Each scanned word is looked up
first; an existing record gets a new occurrence, otherwise a new record is
inserted. Persistence is explicit: call load() before and save() after
processing, the tracker never touches the snapshot on its own.
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .._common.config import ReportKind, TrackerConfig
from ..core.iterators import ThreadedInorderIterator
from ..core.tree import BSTree
from .error_policies import ErrorPolicy, FailFastPolicy
from .reports import ReportCollector, create_collector
from .repository import load_tree, save_tree
from .scanner import scan_file
from .word import Word


logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Raised when a TrackerConfig fails validation."""
    pass


class WordTracker:
    """Word index over one or more text files.

    Example:
        >>> tracker = WordTracker(TrackerConfig.ephemeral())
        >>> tracker.add_word("tree", "notes.txt", 3)
        Word('tree', entries=1)
        >>> tracker.get_report(ReportKind.FILES)
        ['Key : === tree === found in files: notes.txt']
    """

    def __init__(self,
                 config: Optional[TrackerConfig] = None,
                 tree: Optional[BSTree[Word]] = None,
                 error_policy: Optional[ErrorPolicy] = None):
        """Create a tracker.

        Args:
            config: Tracker configuration (defaults to TrackerConfig())
            tree: Existing word tree to extend (a new one if None)
            error_policy: What to do with unreadable files (fail fast if None)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config if config is not None else TrackerConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.tree: BSTree[Word] = tree if tree is not None else BSTree()
        self.error_policy = error_policy or FailFastPolicy()

        self.files_processed = 0
        self.words_recorded = 0

    # Persistence

    def load(self) -> int:
        """Merge the configured snapshot into this tracker.

        Returns:
            Number of word records read from the snapshot (0 when
            persistence is disabled or no snapshot exists yet)
        """
        if not self.config.persist:
            return 0

        loaded = load_tree(self.config.repository_path)
        if self.tree.is_empty():
            self.tree = loaded
        else:
            for word in loaded.preorder():
                self._merge(word)

        logger.info("Loaded %d words from %s", loaded.size(), self.config.repository_path)
        return loaded.size()

    def save(self) -> Optional[Path]:
        """Write the snapshot if persistence is enabled.

        Returns:
            Path written, or None when persistence is disabled
        """
        if not self.config.persist:
            return None
        return save_tree(self.tree, self.config.repository_path)

    # Indexing

    def add_word(self, text: str, file_name: str, line_number: int) -> Word:
        """Record one occurrence of ``text``.

        Returns:
            The Word record that now holds the occurrence
        """
        probe = Word(text)
        node = self.tree.search(probe)
        if node is not None:
            node.element.add_occurrence(file_name, line_number)
            return node.element

        probe.add_occurrence(file_name, line_number)
        self.tree.insert(probe)
        return probe

    def _merge(self, word: Word) -> None:
        node = self.tree.search(word)
        if node is not None:
            node.element.merge(word)
        else:
            self.tree.insert(word)

    def process_file(self, path: Union[str, Path]) -> int:
        """Index every word of a text file.

        Occurrences are keyed by the file's name, not its full path.
        Unreadable files are handed to the error policy; words recorded
        before a mid-file decoding error are kept.

        Returns:
            Number of words recorded from this file
        """
        path = Path(path)
        count = 0
        try:
            for line_number, text in scan_file(
                path,
                encoding=self.config.encoding,
                ignore_case=self.config.ignore_case,
            ):
                self.add_word(text, path.name, line_number)
                count += 1
        except (OSError, UnicodeDecodeError) as e:
            self.words_recorded += count
            self.error_policy.handle(e, 'process_file', path)
            return count

        self.files_processed += 1
        self.words_recorded += count
        logger.info("Recorded %d words from %s", count, path)
        return count

    def process_files(self, paths: Iterable[Union[str, Path]]) -> int:
        """Index several files in order.

        Returns:
            Total number of words recorded
        """
        return sum(self.process_file(path) for path in paths)

    # Queries

    def lookup(self, text: str) -> Optional[Word]:
        """Return the record for ``text`` or None."""
        node = self.tree.search(Word(text))
        return node.element if node is not None else None

    def words(self) -> Iterator[Word]:
        """Iterate word records in ascending order."""
        return self.tree.inorder(self.config.inorder_strategy)

    def get_report(self,
                   kind: Union[ReportKind, str, None] = None,
                   collector: Optional[ReportCollector] = None) -> List[str]:
        """Render a report, one line per word in ascending order.

        Args:
            kind: Report kind (defaults to the configured one)
            collector: Explicit collector, overrides ``kind``

        Returns:
            Report lines
        """
        if collector is None:
            collector = create_collector(kind if kind is not None else self.config.report_kind)

        words = self.words()
        try:
            return collector.collect_all(words)
        finally:
            # A threaded walk left half done keeps the tree locked
            if isinstance(words, ThreadedInorderIterator):
                words.close()

    def write_report(self,
                     lines: Iterable[str],
                     output_file: Union[str, Path, None] = None) -> Path:
        """Write report lines to a file, one per line.

        Args:
            lines: Report lines
            output_file: Destination (defaults to config.output_file)

        Raises:
            ValueError: If no destination is given or configured
        """
        destination = output_file if output_file is not None else self.config.output_file
        if destination is None:
            raise ValueError("No output file given or configured")

        destination = Path(destination)
        destination.parent.mkdir(parents=True, exist_ok=True)
        with destination.open("w", encoding="utf-8") as handle:
            for line in lines:
                handle.write(line + "\n")
        logger.info("Wrote report to %s", destination)
        return destination

    def get_summary(self) -> dict:
        """Summary of tracker state, useful for debugging and logging."""
        return {
            'words': self.tree.size(),
            'tree_height': self.tree.height(),
            'files_processed': self.files_processed,
            'words_recorded': self.words_recorded,
            'persist': self.config.persist,
            'repository_path': str(self.config.repository_path),
            'report_kind': self.config.report_kind.value,
            'inorder_strategy': self.config.inorder_strategy.value,
            'error_policy': self.error_policy.__class__.__name__,
        }

    def __len__(self) -> int:
        return self.tree.size()
