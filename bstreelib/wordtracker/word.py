"""Word records stored in the word tracker's tree."""

from functools import total_ordering
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set


@total_ordering
class Word:
    """A word and every place it was seen.

    Words are ordered and compared by their text only, so a freshly built
    Word can be used as a search probe for an existing record.
    """

    def __init__(self,
                 text: str,
                 occurrences: Optional[Mapping[str, Iterable[int]]] = None):
        """Initialize a word record.

        Args:
            text: The word itself (non-empty)
            occurrences: Optional mapping of file name to line numbers

        Raises:
            ValueError: If text is empty or a line number is invalid
        """
        if not text:
            raise ValueError("Word text cannot be empty")
        self.text = text
        # File name -> line numbers, files kept in first-seen order
        self.occurrences: Dict[str, Set[int]] = {}
        if occurrences:
            for file_name, lines in occurrences.items():
                for line_number in lines:
                    self.add_occurrence(file_name, line_number)

    def add_occurrence(self, file_name: str, line_number: int) -> bool:
        """Record that this word appears in ``file_name`` on ``line_number``.

        Returns:
            True if the occurrence was new, False if already recorded
        """
        if isinstance(line_number, bool) or not isinstance(line_number, int) or line_number < 1:
            raise ValueError(f"Line numbers start at 1, got {line_number!r}")
        lines = self.occurrences.setdefault(file_name, set())
        if line_number in lines:
            return False
        lines.add(line_number)
        return True

    def files(self) -> List[str]:
        """File names in the order they were first seen."""
        return list(self.occurrences)

    def lines_in(self, file_name: str) -> List[int]:
        """Sorted line numbers for one file (empty if never seen there)."""
        return sorted(self.occurrences.get(file_name, ()))

    def entry_count(self) -> int:
        """Total number of (file, line) entries."""
        return sum(len(lines) for lines in self.occurrences.values())

    def merge(self, other: 'Word') -> None:
        """Fold another record for the same word into this one."""
        if other.text != self.text:
            raise ValueError(f"Cannot merge {other.text!r} into {self.text!r}")
        for file_name, lines in other.occurrences.items():
            for line_number in lines:
                self.add_occurrence(file_name, line_number)

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form with sorted line lists."""
        return {
            'word': self.text,
            'occurrences': {
                file_name: sorted(lines)
                for file_name, lines in self.occurrences.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'Word':
        """Inverse of to_dict()."""
        return cls(data['word'], data.get('occurrences') or {})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.text == other.text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.text < other.text

    def __hash__(self) -> int:
        return hash(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.text!r}, entries={self.entry_count()})"
