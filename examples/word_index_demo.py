#!/usr/bin/env python3
"""
Word index walkthrough.

This example demonstrates:
- Indexing a few text files with WordTracker
- Rendering the three report kinds
- Saving and reloading the snapshot
- Skipping unreadable files with an error policy
"""

import sys
import tempfile
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import ReportKind, TrackerConfig, get_tree_stats
from bstreelib.wordtracker import ContinueOnErrorsPolicy, WordTracker


SAMPLES = {
    "trees.txt": "A binary search tree keeps\nsmaller keys to the left.\n",
    "walks.txt": "An in-order walk of the tree\nvisits keys in sorted order.\n",
}


def write_samples(directory: Path):
    paths = []
    for name, text in SAMPLES.items():
        path = directory / name
        path.write_text(text, encoding="utf-8")
        paths.append(path)
    return paths


def main():
    with tempfile.TemporaryDirectory() as temp:
        directory = Path(temp)
        paths = write_samples(directory)
        config = TrackerConfig(repository_path=directory / "repository.json",
                               ignore_case=True)

        print("=" * 60)
        print("Indexing")
        print("=" * 60)
        policy = ContinueOnErrorsPolicy()
        tracker = WordTracker(config, error_policy=policy)
        tracker.load()
        recorded = tracker.process_files(paths + [directory / "missing.txt"])
        print(f"Recorded {recorded} words, {len(tracker)} distinct")
        print(f"Skipped files: {policy.get_statistics()['skipped_paths']}")
        print(f"Saved snapshot to {tracker.save()}")

        for kind in ReportKind:
            print(f"\n--- {kind.name} report (-{kind.value}) ---")
            for line in tracker.get_report(kind)[:4]:
                print(line)

        print("\n" + "=" * 60)
        print("Reloading")
        print("=" * 60)
        reloaded = WordTracker(config)
        reloaded.load()
        print(f"Reloaded {len(reloaded)} words")
        print(f"Tree stats: {get_tree_stats(reloaded.tree)}")
        print(f"'tree' appears in: {reloaded.lookup('tree').files()}")


if __name__ == "__main__":
    main()
