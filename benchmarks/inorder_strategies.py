#!/usr/bin/env python3
"""
Benchmark of the in-order strategies against the snapshot iterators.

Measures:
1. Stack in-order walk (O(height) extra memory)
2. Threaded in-order walk (O(1) extra memory, rewires links while running)
3. Buffered pre-order and post-order snapshots

Random insertion gives a roughly balanced tree; sorted insertion gives the
degenerate chain, which is where the stack walk holds the most state.
"""

import gc
import random
import statistics
import sys
import time
from pathlib import Path
from typing import Callable, Dict

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from bstreelib import BSTree, InorderStrategy


class IteratorBenchmark:
    """Median timing of full traversals over one tree."""

    def __init__(self, tree: BSTree, iterations: int = 5):
        self.tree = tree
        self.iterations = iterations

    def _time(self, make_iterator: Callable) -> float:
        times = []
        for _ in range(self.iterations):
            gc.collect()
            start = time.perf_counter()
            for _element in make_iterator():
                pass
            times.append(time.perf_counter() - start)
        return statistics.median(times)

    def run(self) -> Dict[str, float]:
        return {
            'stack inorder': self._time(lambda: self.tree.inorder(InorderStrategy.STACK)),
            'threaded inorder': self._time(lambda: self.tree.inorder(InorderStrategy.THREADED)),
            'preorder snapshot': self._time(self.tree.preorder),
            'postorder snapshot': self._time(self.tree.postorder),
        }


def print_results(title: str, tree: BSTree, results: Dict[str, float]) -> None:
    print(f"\n{title} (size={tree.size()}, height={tree.height()})")
    print("-" * 60)
    baseline = results['stack inorder']
    for name, elapsed in results.items():
        ratio = elapsed / baseline if baseline else 0.0
        print(f"  {name:<20} {elapsed * 1000:9.2f} ms   x{ratio:.2f}")


def main():
    size = int(sys.argv[1]) if len(sys.argv) > 1 else 50_000

    print("=" * 60)
    print("BSTreeLib iterator benchmark")
    print("=" * 60)

    values = list(range(size))
    random.seed(42)
    random.shuffle(values)
    balanced = BSTree.from_iterable(values)
    print_results("Random insertion", balanced, IteratorBenchmark(balanced).run())

    # Degenerate chains are slow to build, keep them smaller
    chain_size = min(size, 5_000)
    chain = BSTree.from_iterable(range(chain_size))
    print_results("Sorted insertion", chain, IteratorBenchmark(chain).run())


if __name__ == "__main__":
    main()
