"""Snapshot persistence for word trees.

A snapshot is a JSON document listing the words in pre-order. Replaying
that list into an empty tree rebuilds the exact same shape, so loading is
just a sequence of insertions and the tree itself never deals with files.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

from ..core.tree import BSTree
from .word import Word


logger = logging.getLogger(__name__)

FORMAT_NAME = "bstreelib-wordtracker"
FORMAT_VERSION = 1


class RepositoryError(Exception):
    """Raised when a snapshot cannot be read or has an unexpected layout."""
    pass


def tree_to_payload(tree: BSTree[Word]) -> Dict[str, Any]:
    """Convert a word tree into a JSON-serializable snapshot."""
    return {
        'format': FORMAT_NAME,
        'version': FORMAT_VERSION,
        'order': 'preorder',
        'words': [word.to_dict() for word in tree.preorder()],
    }


def tree_from_payload(payload: Any) -> BSTree[Word]:
    """Rebuild a word tree from a snapshot produced by tree_to_payload().

    Raises:
        RepositoryError: If the payload is not a supported snapshot
    """
    if not isinstance(payload, dict) or payload.get('format') != FORMAT_NAME:
        raise RepositoryError("Not a word tracker snapshot")
    if payload.get('version') != FORMAT_VERSION:
        raise RepositoryError(
            f"Unsupported snapshot version: {payload.get('version')!r}"
        )

    words = payload.get('words')
    if not isinstance(words, list):
        raise RepositoryError("Snapshot is missing its word list")

    tree: BSTree[Word] = BSTree()
    for index, entry in enumerate(words):
        try:
            tree.insert(Word.from_dict(entry))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RepositoryError(f"Invalid word entry at position {index}: {e}") from e
    return tree


def save_tree(tree: BSTree[Word], path: Union[str, Path]) -> Path:
    """Write a snapshot of ``tree`` to ``path``.

    The snapshot is written to a temporary sibling first and then moved
    into place, so an interrupted save never truncates the previous one.

    Returns:
        The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(path.name + ".tmp")

    with temp_path.open("w", encoding="utf-8") as handle:
        json.dump(tree_to_payload(tree), handle, indent=2)
    os.replace(temp_path, path)

    logger.debug("Saved %d words to %s", tree.size(), path)
    return path


def load_tree(path: Union[str, Path]) -> BSTree[Word]:
    """Load a snapshot, or return an empty tree if ``path`` does not exist.

    Raises:
        RepositoryError: If the file exists but cannot be decoded
    """
    path = Path(path)
    if not path.exists():
        logger.debug("No snapshot at %s, starting empty", path)
        return BSTree()

    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except (OSError, ValueError) as e:
        raise RepositoryError(f"Cannot read snapshot {path}: {e}") from e

    tree = tree_from_payload(payload)
    logger.debug("Loaded %d words from %s", tree.size(), path)
    return tree
