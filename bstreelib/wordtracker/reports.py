"""Report collectors for the word tracker.

ReportCollectors define what line of text is produced for each word. The
tracker feeds them words in ascending order, so every report comes out
sorted by word regardless of the tree's shape.
"""

from abc import ABC, abstractmethod
from typing import Callable, Iterable, List, Union

from .._common.config import ReportKind
from .word import Word


def _format_lines(lines: Iterable[int]) -> str:
    return "[" + ", ".join(str(line) for line in lines) + "]"


class ReportCollector(ABC):
    """Abstract base class for report line formats."""

    @abstractmethod
    def collect(self, word: Word) -> str:
        """Render one report line for ``word``."""
        pass

    def collect_all(self, words: Iterable[Word]) -> List[str]:
        """Render one line per word, preserving the input order."""
        return [self.collect(word) for word in words]


class LineReportCollector(ReportCollector):
    """Word with every file and the line numbers inside it (``-pl``)."""

    kind = ReportKind.LINES

    def collect(self, word: Word) -> str:
        line = f"Key : === {word.text} ==="
        for file_name in word.files():
            line += f" found in file: {file_name} on lines: {_format_lines(word.lines_in(file_name))}"
        return line


class FileReportCollector(ReportCollector):
    """Word with the files it appears in (``-pf``)."""

    kind = ReportKind.FILES

    def collect(self, word: Word) -> str:
        return f"Key : === {word.text} === found in files: {', '.join(word.files())}"


class DetailedReportCollector(ReportCollector):
    """Word with its entry count, files and line numbers (``-po``)."""

    kind = ReportKind.DETAILED

    def collect(self, word: Word) -> str:
        line = f"Key : === {word.text} === number of entries: {word.entry_count()}"
        for file_name in word.files():
            line += f" found in file: {file_name} on lines: {_format_lines(word.lines_in(file_name))}"
        return line


class CustomReportCollector(ReportCollector):
    """Collector that uses a caller-provided formatting function."""

    def __init__(self, formatter: Callable[[Word], str]):
        """Initialize with a formatting function.

        Args:
            formatter: Function that takes a Word and returns a report line
        """
        self.formatter = formatter

    def collect(self, word: Word) -> str:
        return self.formatter(word)


def create_collector(kind: Union[ReportKind, str]) -> ReportCollector:
    """Create a collector instance by report kind.

    Args:
        kind: ReportKind member, a flag such as ``-pf``, or a member name

    Returns:
        ReportCollector instance

    Raises:
        ValueError: If the kind is not recognized
    """
    collectors = {
        ReportKind.FILES: FileReportCollector,
        ReportKind.LINES: LineReportCollector,
        ReportKind.DETAILED: DetailedReportCollector,
    }
    report_kind = kind if isinstance(kind, ReportKind) else ReportKind.from_flag(kind)
    return collectors[report_kind]()
