# profiling/profile.py
"""
Small profiling harness measuring Trie.prefix_search latency.
Usage:
    python -m trie_autocompleter bench --words 20000 --runs 500
"""
import random
import string
import time
from typing import Dict, List

import numpy as np

from trie_autocompleter.core.trie import Trie


def synthetic_words(n: int, seed: int = 7, min_len: int = 3, max_len: int = 10) -> List[str]:
    """Random lowercase words; shared leading letters make prefixes overlap."""
    rng = random.Random(seed)
    return [
        "".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(min_len, max_len)))
        for _ in range(n)
    ]


def bench(trie: Trie, prefixes: List[str], runs: int = 500, warmup: int = 20) -> np.ndarray:
    """Latency in milliseconds for `runs` prefix searches cycling through `prefixes`."""
    for i in range(warmup):
        trie.prefix_search(prefixes[i % len(prefixes)])

    times = np.empty(runs, dtype=float)
    for i in range(runs):
        p = prefixes[i % len(prefixes)]
        t0 = time.perf_counter()
        trie.prefix_search(p)
        times[i] = (time.perf_counter() - t0) * 1000.0
    return times


def summarize(times: np.ndarray) -> Dict[str, float]:
    return {
        "mean": float(np.mean(times)),
        "median": float(np.median(times)),
        "p99": float(np.percentile(times, 99)),
        "max": float(np.max(times)),
    }


def main(n_words: int = 20000, runs: int = 500, seed: int = 7):
    trie = Trie()
    t0 = time.perf_counter()
    trie.insert_many(synthetic_words(n_words, seed=seed))
    build_ms = (time.perf_counter() - t0) * 1000.0

    rng = random.Random(seed)
    prefixes = ["".join(rng.choice(string.ascii_lowercase) for _ in range(rng.randint(1, 3)))
                for _ in range(50)]
    stats = summarize(bench(trie, prefixes, runs=runs))

    print(f"built {trie.word_count} words / {trie.node_count} nodes in {build_ms:.1f} ms")
    print("prefix_search ms: " + "  ".join(f"{k}={v:.4f}" for k, v in stats.items()))
    trie.teardown()
    return stats


if __name__ == "__main__":
    main()
