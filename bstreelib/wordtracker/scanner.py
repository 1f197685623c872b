"""Text scanning for the word tracker.

Lines are split on whitespace and each token is trimmed of leading and
trailing characters outside ``[A-Za-z0-9]``. Inner punctuation survives,
so ``don't`` and ``e-mail`` stay single words.
"""

import re
from pathlib import Path
from typing import Iterator, List, Tuple, Union


_EDGE_PUNCTUATION = re.compile(r"^[^a-zA-Z0-9]+|[^a-zA-Z0-9]+$")


def tokenize_line(line: str, ignore_case: bool = False) -> List[str]:
    """Split one line into words.

    Args:
        line: Raw text line
        ignore_case: Lower-case every word

    Returns:
        Words in the order they appear, empty tokens dropped
    """
    words = []
    for token in line.split():
        word = _EDGE_PUNCTUATION.sub("", token)
        if not word:
            continue
        words.append(word.lower() if ignore_case else word)
    return words


def scan_file(path: Union[str, Path],
              encoding: str = "utf-8",
              ignore_case: bool = False) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, word)`` pairs for a text file.

    Line numbers start at 1. The file is read lazily, one line at a time.

    Raises:
        OSError: If the file cannot be opened or read
        UnicodeDecodeError: If the content does not match ``encoding``
    """
    path = Path(path) if isinstance(path, str) else path
    with path.open("r", encoding=encoding) as handle:
        for line_number, line in enumerate(handle, start=1):
            for word in tokenize_line(line, ignore_case):
                yield line_number, word
